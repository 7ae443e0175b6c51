import numpy as np

import matplotlib.pyplot as plt
from matplotlib.colors import ListedColormap


class_cmap = ListedColormap(['tab:red', 'tab:blue'])


def beautify(ax):
    # dotted grid, inward ticks on all four sides
    ax.minorticks_on()
    ax.grid(True, linestyle=':')

    ax.tick_params(which='both', direction='in', top=True, right=True)
    ax.tick_params(which='major', length=6)
    ax.tick_params(which='minor', length=3)

    return ax


def plot_boundary(model, x, y, ax=None, margin=0.5, npts=100):
    # examples and the separating line w.x = b, 2-d inputs only
    if x.shape[-1] != 2:
        raise NotImplementedError

    if ax is None:
        ax = plt.figure().gca()

    x_min, x_max = x[:, 0].min() - margin, x[:, 0].max() + margin
    y_min, y_max = x[:, 1].min() - margin, x[:, 1].max() + margin

    ax.scatter(x[:, 0], x[:, 1], c=y, cmap=class_cmap, vmin=0.0, vmax=1.0, zorder=10)

    w1, w2 = model.weights
    if w2 != 0.0:
        x1 = np.linspace(x_min, x_max, npts)
        ax.plot(x1, (model.bias - w1 * x1) / w2, '-', color='k', zorder=1)
    elif w1 != 0.0:
        ax.axvline(model.bias / w1, color='k', zorder=1)

    ax = beautify(ax)

    ax.set_xlim([x_min, x_max])
    ax.set_ylim([y_min, y_max])

    return ax
