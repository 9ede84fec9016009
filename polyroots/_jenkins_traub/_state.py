# SPDX-FileCopyrightText: Copyright 2026, Siavash Ameli <sameli@berkeley.edu>
# SPDX-License-Identifier: BSD-3-Clause
# SPDX-FileType: SOURCE
#
# This program is free software: you can redistribute it and/or modify it under
# the terms of the license found in the LICENSE.txt file in the root directory
# of this source tree.


# =======
# Imports
# =======

import enum
import numpy
from dataclasses import dataclass, field

__all__ = ['Stage', 'ShiftState']


# =====
# Stage
# =====

class Stage(enum.Enum):
    """
    Stages of the search for one linear or quadratic factor.
    """

    NO_SHIFT = 'no-shift'
    FIXED_SHIFT = 'fixed-shift'
    VARIABLE_SHIFT_LINEAR = 'variable-shift-linear'
    VARIABLE_SHIFT_QUADRATIC = 'variable-shift-quadratic'
    CONVERGED = 'converged'
    EXHAUSTED = 'exhausted'


# ===========
# Shift State
# ===========

@dataclass(frozen=True, eq=False)
class ShiftState(object):
    """
    Immutable state passed between the stages of the Jenkins-Traub iteration.

    Each stage function receives a state and returns a new one by
    :func:`dataclasses.replace`, so that no stage mutates the state of
    another.

    Attributes
    ----------

    stage : Stage
        Current stage.

    K : numpy.ndarray
        The K-polynomial of degree one less than the working polynomial.

    s : complex
        Trial point of the fixed shift.

    u, v : float
        Coefficients of the quadratic factor :math:`z^2 + u z + v`. After
        the fixed-shift stage, this is the latest estimate of the factor.

    t : complex
        Latest estimate of a single root from the fixed-shift stage.

    linear : bool
        Whether the fixed-shift stage reported convergence to a linear factor.

    quadratic : bool
        Whether the fixed-shift stage reported convergence to a quadratic
        factor.

    iterations : int
        Number of fixed-shift iterations until convergence.

    roots : tuple
        Roots of the factor, once converged.

    factor : numpy.ndarray
        Monic linear or quadratic factor to deflate, once converged.
    """

    stage: Stage
    K: numpy.ndarray
    s: complex = 0j
    u: float = 0.0
    v: float = 0.0
    t: complex = 0j
    linear: bool = False
    quadratic: bool = False
    iterations: int = 0
    roots: tuple = ()
    factor: numpy.ndarray = field(default_factory=lambda: numpy.zeros(0))
