import numbers

import autograd.numpy as np
import autograd.numpy.random as npr

from perc.nn.utils import vector, label, check_dims
from perc.nn.utils import activation, threshold, class_error

from perc.nn.events import classified, MISTAKES
from perc.nn.events import FalsePositive, FalseNegative
from perc.nn.events import SweepComplete, SweepIncomplete
from perc.nn.errors import NotLinearlySeparable

from perc.nn.trace import describe, show_vector


def classify(input, weights, bias):
    """Hard-threshold prediction, 1.0 iff dot(input, weights) - bias > 0.

    `input` is a single vector or a 2-d array of row vectors,
    in which case an array of predictions is returned.
    """
    _input = np.array(input, dtype=float)
    _weights = np.array(weights, dtype=float)
    if _input.ndim not in (1, 2):
        raise NotImplementedError

    check_dims(_input, _weights)
    return threshold(activation(_input, _weights, bias))


def update(weights, input, event):
    if isinstance(event, FalsePositive):
        return vector(weights - input)
    elif isinstance(event, FalseNegative):
        return vector(weights + input)
    else:
        return weights


def train(dataset, weights, bias=1.0, max_sweeps=None, callback=None):
    """Sweep `dataset` in order until a sweep makes no mistake.

    Returns the final weights and the ordered list of events. Without
    `max_sweeps` the loop does not halt on inseparable data; with it,
    `NotLinearlySeparable` is raised once that many dirty sweeps ran.
    """
    if max_sweeps is not None and (isinstance(max_sweeps, bool)
                                   or not isinstance(max_sweeps, numbers.Integral)
                                   or max_sweeps < 1):
        raise ValueError('max_sweeps must be a positive integer, got {!r}'.format(max_sweeps))

    if not np.isfinite(bias):
        raise ValueError('bias must be finite, got {!r}'.format(bias))

    examples = [(vector(x), label(y)) for x, y in dataset]
    weights = vector(weights)

    events = []

    def emit(event):
        events.append(event)
        if callback is not None:
            callback(event)

    if not examples:
        return weights, events

    nb_sweeps = 0
    while True:
        dirty = False
        for x, y in examples:
            prediction = classify(x, weights, bias)

            event = classified(x, prediction, y)
            weights = update(weights, x, event)
            dirty = dirty or isinstance(event, MISTAKES)
            emit(event)

        nb_sweeps += 1
        if not dirty:
            emit(SweepComplete())
            return weights, events

        emit(SweepIncomplete())
        if max_sweeps is not None and nb_sweeps >= max_sweeps:
            raise NotLinearlySeparable(nb_sweeps, weights, events)


class Perceptron:

    def __init__(self, nb_in, bias=1.0, weights=None):
        self.nb_in = nb_in
        self.bias = bias

        if weights is None:
            self.weights = vector(np.zeros(self.nb_in))
        else:
            self.weights = vector(weights)
            if self.weights.shape[0] != self.nb_in:
                raise ValueError('expected {} initial weights, got {}'
                                 .format(self.nb_in, self.weights.shape[0]))

        self.events = []
        self.nb_sweeps = 0

    @classmethod
    def random(cls, nb_in, bias=1.0):
        return cls(nb_in, bias, weights=npr.randn(nb_in))

    def forward(self, x):
        return classify(x, self.weights, self.bias)

    def predict(self, x):
        return self.forward(x)

    def fit(self, target, input, max_sweeps=None, verbose=False):
        callback = None
        if verbose:
            def callback(event):
                print(describe(event))

        self.weights, self.events = train(zip(input, target), self.weights, self.bias,
                                          max_sweeps=max_sweeps, callback=callback)
        self.nb_sweeps = sum(isinstance(e, (SweepComplete, SweepIncomplete)) for e in self.events)

        if verbose:
            print('Final weights are {}'.format(show_vector(self.weights)))

        return self

    def error(self, target, input):
        _output = self.forward(input)
        return class_error(np.array(target, dtype=float), _output)
