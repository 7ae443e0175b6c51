class PerceptronError(Exception):
    pass


class DimensionMismatch(PerceptronError, ValueError):

    def __init__(self, input_size, weights_size):
        self.input_size = input_size
        self.weights_size = weights_size
        super(DimensionMismatch, self).__init__(
            'input has dimension {} but weights have dimension {}'.format(input_size, weights_size))


class NotLinearlySeparable(PerceptronError, RuntimeError):
    """Raised when training exceeds `max_sweeps` without a clean sweep.

    Carries the state reached so far: the number of sweeps run,
    the last weights and the events emitted up to the failure.
    """

    def __init__(self, nb_sweeps, weights, events):
        self.nb_sweeps = nb_sweeps
        self.weights = weights
        self.events = events
        super(NotLinearlySeparable, self).__init__(
            'no convergence after {} sweeps'.format(nb_sweeps))


ConvergenceTimeout = NotLinearlySeparable
