from dataclasses import dataclass


@dataclass(frozen=True)
class CorrectClassification:
    input: tuple


@dataclass(frozen=True)
class FalsePositive:
    input: tuple


@dataclass(frozen=True)
class FalseNegative:
    input: tuple


@dataclass(frozen=True)
class SweepIncomplete:
    pass


@dataclass(frozen=True)
class SweepComplete:
    pass


MISTAKES = (FalsePositive, FalseNegative)


def classified(input, prediction, label):
    _input = tuple(float(v) for v in input)
    if prediction == label:
        return CorrectClassification(_input)
    elif prediction > label:
        return FalsePositive(_input)
    else:
        return FalseNegative(_input)
