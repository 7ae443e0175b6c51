import itertools

import numpy as np


GATES = dict(
    AND=all,
    OR=any,
    NAND=lambda bits: not all(bits),
    NOR=lambda bits: not any(bits),
    XOR=lambda bits: sum(bits) % 2 == 1,
)


def truth_table(gate, nb_in=2):
    """Rows of a boolean gate as (input, label) pairs.

    Rows are enumerated in binary counting order, [0, 0], [0, 1], ...
    XOR is included as the classic inseparable case.
    """
    op = GATES[gate.upper()]

    rows = []
    for bits in itertools.product([0, 1], repeat=nb_in):
        rows.append((np.array(bits, dtype=float), float(op(bits))))
    return rows


def unzip(dataset):
    x = np.vstack([_x for _x, _ in dataset])
    y = np.array([_y for _, _y in dataset])
    return x, y
