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

__all__ = ['synthetic_division']


# ==================
# synthetic division
# ==================

def synthetic_division(dividend, divisor):
    """
    Divide a polynomial by a monic linear or quadratic factor.

    Parameters
    ----------

    dividend : array_like
        Coefficients of the dividend in decreasing order.

    divisor : array_like
        Coefficients of a monic divisor in decreasing order, either
        ``[1, a]`` for :math:`z + a` or ``[1, u, v]`` for
        :math:`z^2 + u z + v`.

    Returns
    -------

    quotient : numpy.ndarray
        Coefficients of the quotient in decreasing order. Empty if the degree
        of the dividend is lower than the degree of the divisor.

    remainder : numpy.ndarray
        Coefficients of the remainder in decreasing order. Its length is
        always the degree of the divisor, so that for a quadratic divisor the
        remainder is ``[r_1, r_0]`` for :math:`r_1 z + r_0`.

    Notes
    -----

    The result satisfies

    .. math::

        p(z) = q(z) \\sigma(z) + r(z).

    The expanded synthetic division is used, which only requires the divisor
    to be monic.

    Examples
    --------

    .. code-block:: python

        >>> from polyroots import synthetic_division

        >>> # (z^3 - 6z^2 + 11z - 6) / (z - 1) = z^2 - 5z + 6
        >>> q, r = synthetic_division([1, -6, 11, -6], [1, -1])
    """

    dividend = numpy.atleast_1d(numpy.asarray(dividend))
    divisor = numpy.atleast_1d(numpy.asarray(divisor))

    m = divisor.size - 1
    if m not in (1, 2):
        raise ValueError('"divisor" should be a linear or quadratic factor.')
    if divisor[0] != 1:
        raise ValueError('"divisor" should be monic.')

    dtype = numpy.result_type(dividend, divisor, float)
    out = numpy.array(dividend, dtype=dtype)
    n = out.size - 1

    # Dividend of lower degree than the divisor is all remainder
    if n < m:
        remainder = numpy.zeros(m, dtype=dtype)
        remainder[m - out.size:] = out
        return numpy.zeros(0, dtype=dtype), remainder

    for i in range(n - m + 1):
        coeff = out[i]
        if coeff != 0:
            for j in range(1, m + 1):
                out[i + j] -= divisor[j] * coeff

    quotient = out[:n - m + 1].copy()
    remainder = out[n - m + 1:].copy()

    return quotient, remainder
