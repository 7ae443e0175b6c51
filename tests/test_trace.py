import pytest

from perc.nn.pn import train
from perc.nn.trace import describe, render, show_vector
from perc.nn.events import CorrectClassification, FalsePositive, FalseNegative
from perc.nn.events import SweepIncomplete, SweepComplete

from perc.datasets import truth_table


def test_show_vector():
    assert show_vector([0, 1]) == '[0.0,1.0]'
    assert show_vector([2.5, -1.0, 3.0]) == '[2.5,-1.0,3.0]'


@pytest.mark.parametrize('event, line', [
    (CorrectClassification((0.0, 0.0)), '[0.0,0.0] was correctly classified'),
    (FalsePositive((1.0, 0.0)), '[1.0,0.0] yielded a false positive, decrementing the weights'),
    (FalseNegative((0.0, 1.0)), '[0.0,1.0] yielded a false negative, incrementing the weights'),
    (SweepIncomplete(), 'Sweep had misclassifications, starting another sweep'),
    (SweepComplete(), 'Sweep had no misclassifications, converged'),
])
def test_describe(event, line):
    assert describe(event) == line


def test_describe_rejects_other_objects():
    with pytest.raises(TypeError):
        describe('not an event')


def test_render_or_trace():
    weights, events = train(truth_table('or'), [0.0, 0.0], 1.0)
    lines = render(events, weights)

    assert len(lines) == len(events) + 1
    assert lines[1] == '[0.0,1.0] yielded a false negative, incrementing the weights'
    assert lines[-2] == 'Sweep had no misclassifications, converged'
    assert lines[-1] == 'Final weights are [2.0,2.0]'
