from .pn import Perceptron
from .pn import classify, train

from .events import CorrectClassification, FalsePositive, FalseNegative
from .events import SweepIncomplete, SweepComplete

from .errors import PerceptronError, DimensionMismatch
from .errors import NotLinearlySeparable, ConvergenceTimeout
