import matplotlib
matplotlib.use('Agg')

import matplotlib.pyplot as plt
import numpy as np
import pytest

from perc.nn.pn import Perceptron
from perc.datasets import truth_table, unzip
from perc.plot import beautify, plot_boundary


def teardown_function(function):
    plt.close('all')


def test_plot_boundary_draws_line():
    x, y = unzip(truth_table('and'))
    perc = Perceptron(nb_in=2).fit(y, x)

    ax = plot_boundary(perc, x, y)

    assert len(ax.lines) == 1
    assert ax.get_xlim() == (-0.5, 1.5)


def test_plot_vertical_boundary():
    x, y = unzip(truth_table('and'))
    perc = Perceptron(nb_in=2, weights=[2.0, 0.0])

    ax = plot_boundary(perc, x, y)
    np.testing.assert_allclose(ax.lines[0].get_xdata(), [0.5, 0.5])


def test_plot_rejects_other_dims():
    x, y = unzip(truth_table('and', nb_in=3))
    with pytest.raises(NotImplementedError):
        plot_boundary(Perceptron(nb_in=3), x, y)


def test_beautify_ticks_point_inward():
    ax = beautify(plt.figure().gca())

    params = ax.xaxis.get_tick_params(which='major')
    assert params['direction'] == 'in'
    assert params['length'] == 6
