import matplotlib.pyplot as plt

from perc.nn.pn import Perceptron
from perc.plot import plot_boundary


if __name__ == '__main__':

    from sklearn.datasets import make_blobs
    from sklearn.model_selection import train_test_split

    x, y = make_blobs(n_samples=200, centers=[[-2.0, -2.0], [2.0, 2.0]],
                      cluster_std=0.5, random_state=1)

    xt, xv, yt, yv = train_test_split(x, y, test_size=0.2)

    perc = Perceptron.random(nb_in=2, bias=1.0)
    perc.fit(yt, xt, max_sweeps=1000)

    print("training", "sweeps=", perc.nb_sweeps, "class. error=", perc.error(yt, xt))
    print("testing", "class. error=", perc.error(yv, xv))

    plot_boundary(perc, x, y)
    plt.show()
