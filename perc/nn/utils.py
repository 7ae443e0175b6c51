import autograd.numpy as np

from perc.nn.errors import DimensionMismatch


def vector(arr):
    # read-only float copy, arithmetic on it yields fresh arrays
    _arr = np.array(arr, dtype=float)
    if _arr.ndim != 1:
        raise ValueError('vector must be 1-d, got shape {}'.format(_arr.shape))
    if not np.all(np.isfinite(_arr)):
        raise ValueError('vector entries must be finite, got {}'.format(_arr))
    _arr.setflags(write=False)
    return _arr


def label(y):
    _y = float(y)
    if not np.isfinite(_y):
        raise ValueError('label must be finite, got {}'.format(_y))
    return _y


def check_dims(input, weights):
    if weights.ndim != 1:
        raise DimensionMismatch(input.shape[-1], weights.shape)
    if input.shape[-1] != weights.shape[-1]:
        raise DimensionMismatch(input.shape[-1], weights.shape[-1])


def activation(input, weights, bias):
    return np.einsum('k,...k->...', weights, input) - bias


# hard threshold, sign(0) = 0 keeps the boundary on the negative side
def threshold(a):
    return np.clip(np.sign(a), 0.0, 1.0)


# mean misclassification rate
def class_error(target, output):
    return np.mean(target != output, axis=0)
