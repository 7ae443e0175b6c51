import matplotlib.pyplot as plt

from perc.nn.pn import Perceptron
from perc.nn.errors import NotLinearlySeparable

from perc.datasets import truth_table, unzip
from perc.plot import plot_boundary


if __name__ == '__main__':

    for gate in ['and', 'or', 'xor']:
        x, y = unzip(truth_table(gate))

        print('{} gate:'.format(gate.upper()))

        perc = Perceptron(nb_in=2, bias=1.0)
        try:
            perc.fit(y, x, max_sweeps=50, verbose=True)
        except NotLinearlySeparable as e:
            print('gave up after', e.nb_sweeps, 'sweeps')
            continue

        print('sweeps=', perc.nb_sweeps, 'class. error=', perc.error(y, x))

        ax = plot_boundary(perc, x, y)
        ax.set_title(gate.upper())

    plt.show()
