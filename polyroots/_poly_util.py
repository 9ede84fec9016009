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

__all__ = ['poly_eval', 'poly_eval_with_derivative', 'poly_derivative',
           'poly_scale']


# =========
# poly eval
# =========

def poly_eval(coeffs, x):
    """
    Evaluate a polynomial using the Horner method.

    Parameters
    ----------

    coeffs : array_like
        Real or complex coefficients in decreasing order, that is,
        ``[a_n, ..., a_1, a_0]`` for :math:`a_0 + a_1 x + \\dots + a_n x^n`.

    x : float, complex, or numpy.ndarray
        Evaluation point(s). Arrays are evaluated elementwise.

    Returns
    -------

    value : float, complex, or numpy.ndarray
        Value of the polynomial at ``x``.

    Examples
    --------

    .. code-block:: python

        >>> from polyroots import poly_eval

        >>> # Evaluate x^2 - 3x + 2 at a real and a complex point
        >>> y1 = poly_eval([1, -3, 2], 1.0)
        >>> y2 = poly_eval([1, -3, 2], 1.0 + 2.0j)
    """

    coeffs = numpy.asarray(coeffs)
    if coeffs.size == 0:
        raise ValueError('"coeffs" should not be empty.')

    h = coeffs[0]
    for a in coeffs[1:]:
        h = h * x + a

    return h


# =========================
# poly eval with derivative
# =========================

def poly_eval_with_derivative(coeffs, x):
    """
    Evaluate a polynomial and its first derivative in one Horner pass.

    Parameters
    ----------

    coeffs : array_like
        Coefficients in decreasing order.

    x : float or complex
        Evaluation point.

    Returns
    -------

    value : float or complex
        :math:`p(x)`.

    deriv : float or complex
        :math:`p'(x)`.
    """

    coeffs = numpy.asarray(coeffs)
    if coeffs.size == 0:
        raise ValueError('"coeffs" should not be empty.')

    h = coeffs[0]
    dh = 0.0 * h
    for a in coeffs[1:]:
        dh = dh * x + h
        h = h * x + a

    return h, dh


# ===============
# poly derivative
# ===============

def poly_derivative(coeffs):
    """
    Derivative of a polynomial by the power rule.

    Parameters
    ----------

    coeffs : array_like
        Real or complex coefficients in decreasing order.

    Returns
    -------

    deriv : numpy.ndarray
        Coefficients of the derivative in decreasing order, one entry shorter
        than ``coeffs``. The derivative of a constant is ``[0]``.
    """

    coeffs = numpy.asarray(coeffs)
    if not numpy.issubdtype(coeffs.dtype, numpy.inexact):
        coeffs = coeffs.astype(float)

    n = coeffs.size - 1
    if n < 1:
        return numpy.zeros(1, dtype=coeffs.dtype)

    powers = numpy.arange(n, 0, -1)
    return coeffs[:n] * powers


# ==========
# poly scale
# ==========

def poly_scale(coeffs, s):
    """
    Scale the coefficients of a polynomial in-place.

    Parameters
    ----------

    coeffs : numpy.ndarray
        Coefficients to be scaled. This array is modified.

    s : float or complex
        Scale factor.

    Returns
    -------

    coeffs : numpy.ndarray
        The same array, scaled.
    """

    coeffs *= s
    return coeffs
