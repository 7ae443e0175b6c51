from perc.nn.events import CorrectClassification, FalsePositive, FalseNegative
from perc.nn.events import SweepIncomplete, SweepComplete


def show_vector(arr):
    return '[' + ','.join(repr(float(v)) for v in arr) + ']'


def describe(event):
    if isinstance(event, CorrectClassification):
        return '{} was correctly classified'.format(show_vector(event.input))
    elif isinstance(event, FalsePositive):
        return '{} yielded a false positive, decrementing the weights'.format(show_vector(event.input))
    elif isinstance(event, FalseNegative):
        return '{} yielded a false negative, incrementing the weights'.format(show_vector(event.input))
    elif isinstance(event, SweepIncomplete):
        return 'Sweep had misclassifications, starting another sweep'
    elif isinstance(event, SweepComplete):
        return 'Sweep had no misclassifications, converged'
    else:
        raise TypeError('not a training event: {!r}'.format(event))


def render(events, weights):
    lines = [describe(e) for e in events]
    lines.append('Final weights are {}'.format(show_vector(weights)))
    return lines
