#! /usr/bin/env python

# SPDX-FileCopyrightText: Copyright 2026, Siavash Ameli <sameli@berkeley.edu>
# SPDX-License-Identifier: BSD-3-Clause
# SPDX-FileType: SOURCE
#
# This program is free software: you can redistribute it and/or modify it
# under the terms of the license found in the LICENSE.txt file in the root
# directory of this source tree.


# =======
# Imports
# =======

import sys
import numpy
import pytest
from polyroots import poly_eval, poly_eval_with_derivative, \
    poly_derivative, poly_scale, synthetic_division


# ==============
# test poly eval
# ==============

def _test_poly_eval():
    """
    Evaluation against :func:`numpy.polyval`.
    """

    coeffs = [1.0, -3.0, 2.0]
    assert poly_eval(coeffs, 1.0) == 0.0
    assert poly_eval(coeffs, 2.0) == 0.0
    assert poly_eval(coeffs, 1.0 + 2.0j) == pytest.approx(-4.0 - 2.0j)

    rng = numpy.random.default_rng(0)
    coeffs = rng.standard_normal(7)
    x = numpy.linspace(-2.0, 2.0, 11)
    numpy.testing.assert_allclose(poly_eval(coeffs, x),
                                  numpy.polyval(coeffs, x), rtol=1e-12)

    # Complex coefficients
    coeffs = coeffs + 1j * rng.standard_normal(7)
    z = 0.3 - 0.7j
    numpy.testing.assert_allclose(poly_eval(coeffs, z),
                                  numpy.polyval(coeffs, z), rtol=1e-12)

    with pytest.raises(ValueError):
        poly_eval([], 1.0)


# ====================
# test poly derivative
# ====================

def _test_poly_derivative():
    """
    Derivative and evaluation with derivative.
    """

    numpy.testing.assert_array_equal(poly_derivative([1, 2, 3]), [2.0, 2.0])
    numpy.testing.assert_array_equal(poly_derivative([5.0]), [0.0])

    deriv = poly_derivative(numpy.array([1j, 2.0, 3.0]))
    assert deriv.dtype == numpy.complex128
    numpy.testing.assert_array_equal(deriv, [2j, 2.0])

    rng = numpy.random.default_rng(1)
    coeffs = rng.standard_normal(6)
    numpy.testing.assert_allclose(poly_derivative(coeffs),
                                  numpy.polyder(coeffs), rtol=1e-14)

    for x in [-1.5, 0.0, 0.25, 2.0 + 1.0j]:
        value, deriv = poly_eval_with_derivative(coeffs, x)
        numpy.testing.assert_allclose(value, numpy.polyval(coeffs, x),
                                      rtol=1e-12, atol=1e-14)
        numpy.testing.assert_allclose(
            deriv, numpy.polyval(numpy.polyder(coeffs), x),
            rtol=1e-12, atol=1e-14)


# ===============
# test poly scale
# ===============

def _test_poly_scale():
    """
    In-place scaling.
    """

    coeffs = numpy.array([2.0, 4.0, -6.0])
    scaled = poly_scale(coeffs, 0.5)

    assert scaled is coeffs
    numpy.testing.assert_array_equal(coeffs, [1.0, 2.0, -3.0])


# =======================
# test synthetic division
# =======================

def _test_synthetic_division():
    """
    Division by monic linear and quadratic factors.
    """

    # (z^3 - 6z^2 + 11z - 6) / (z - 1)
    q, r = synthetic_division([1, -6, 11, -6], [1, -1])
    numpy.testing.assert_allclose(q, [1.0, -5.0, 6.0])
    numpy.testing.assert_allclose(r, [0.0])

    # z^4 + 1 = (z^2 + 1)(z^2 - 1) + 2
    q, r = synthetic_division([1, 0, 0, 0, 1], [1, 0, 1])
    numpy.testing.assert_allclose(q, [1.0, 0.0, -1.0])
    numpy.testing.assert_allclose(r, [0.0, 2.0])

    # Dividend of lower degree
    q, r = synthetic_division([3.0], [1.0, 0.0, 1.0])
    assert q.size == 0
    numpy.testing.assert_array_equal(r, [0.0, 3.0])

    # Division identity
    rng = numpy.random.default_rng(2)
    for divisor in ([1.0, 0.7], [1.0, -0.4, 2.5]):
        dividend = rng.standard_normal(9)
        q, r = synthetic_division(dividend, divisor)

        assert q.size == dividend.size - len(divisor) + 1
        assert r.size == len(divisor) - 1
        numpy.testing.assert_allclose(
            numpy.polyadd(numpy.polymul(q, divisor), r), dividend,
            rtol=1e-12, atol=1e-12)

    # Complex dividend
    q, r = synthetic_division([1.0, -1j], [1.0, -2.0])
    assert q.dtype == numpy.complex128
    numpy.testing.assert_allclose(r, [2.0 - 1j])

    with pytest.raises(ValueError):
        synthetic_division([1, 2, 3], [2, 1])

    with pytest.raises(ValueError):
        synthetic_division([1, 2, 3, 4, 5], [1, 2, 3, 4])


# ==============
# test poly util
# ==============

def test_poly_util():
    """
    A test for the polynomial utilities and synthetic division.
    """

    _test_poly_eval()
    _test_poly_derivative()
    _test_poly_scale()
    _test_synthetic_division()

    print('OK')


# ===========
# script main
# ===========

if __name__ == "__main__":
    sys.exit(test_poly_util())
