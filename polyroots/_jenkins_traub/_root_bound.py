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

import numpy
from .._poly_util import poly_eval, poly_eval_with_derivative

__all__ = ['root_bound']


# ==========
# root bound
# ==========

def root_bound(P, rel_tol=0.005):
    """
    Cauchy lower bound of the moduli of the roots of a polynomial.

    Parameters
    ----------

    P : numpy.ndarray
        Monic coefficients in decreasing order with a non-zero constant term.

    rel_tol : float, default=0.005
        Newton iterations stop once two successive estimates agree to this
        relative tolerance (about two decimal digits).

    Returns
    -------

    radius : float
        The unique positive root of

        .. math::

            |p_0| z^n + |p_1| z^{n-1} + \\dots + |p_{n-1}| z - |p_n|,

        which is a lower bound for the moduli of the roots of ``P``.
    """

    pt = numpy.abs(P)
    pt[-1] = -pt[-1]
    n = pt.size - 1

    # Initial guess from the leading and constant terms
    x = numpy.exp((numpy.log(-pt[-1]) - numpy.log(pt[0])) / n)
    if pt[-2] != 0:
        xm = -pt[-1] / pt[-2]
        if xm < x:
            x = xm

    # Halve the interval (0, x) until the bound polynomial is non-positive
    while True:
        x = 0.5 * x
        if poly_eval(pt, x) <= 0:
            break

    # Newton-Raphson, the bound polynomial is increasing and convex on x > 0
    x1 = x
    while True:
        x = x1
        f, df = poly_eval_with_derivative(pt, x)
        x1 = x - f / df
        if abs(1.0 - x1 / x) <= rel_tol:
            break

    return float(x1)
