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
from polyroots import linear_root, quadratic_roots, cubic_roots, \
    quartic_roots


# ==================
# assert roots match
# ==================

def _assert_roots_match(roots, expected, atol):
    """
    Every root is close to an expected root and vice versa.
    """

    roots = numpy.asarray(roots, dtype=complex)
    expected = numpy.asarray(expected, dtype=complex)

    for r in roots:
        assert numpy.min(numpy.abs(expected - r)) <= atol, r
    for e in expected:
        assert numpy.min(numpy.abs(roots - e)) <= atol, e


# ================
# test linear root
# ================

def _test_linear_root():
    """
    A test for :func:`polyroots.linear_root`.
    """

    roots = linear_root(2, -4)
    assert roots.size == 1
    assert roots.dtype == numpy.complex128
    numpy.testing.assert_allclose(roots, [2.0])

    # Zero slope has no root
    assert linear_root(0, 1).size == 0


# ====================
# test quadratic roots
# ====================

def _test_quadratic_roots():
    """
    A test for :func:`polyroots.quadratic_roots`.
    """

    roots = quadratic_roots(1, -3, 2)
    _assert_roots_match(roots, [1.0, 2.0], atol=1e-15)

    # Complex pair
    roots = quadratic_roots(1, 0, 1)
    _assert_roots_match(roots, [1j, -1j], atol=1e-15)
    assert roots[0] == numpy.conj(roots[1])

    # Double root with large integer coefficients, where the naive
    # discriminant suffers from rounding
    roots = quadratic_roots(94906267, -189812534, 94906267)
    numpy.testing.assert_array_equal(roots, [1.0, 1.0])

    # Zero constant term
    roots = quadratic_roots(2, -4, 0)
    _assert_roots_match(roots, [0.0, 2.0], atol=1e-15)

    # Zero leading coefficient gives an infinite root
    roots = quadratic_roots(0, 2, -4)
    assert roots.size == 2
    numpy.testing.assert_allclose(roots[0], 2.0)
    assert numpy.isinf(roots[1])

    # Vieta relations on random quadratics
    rng = numpy.random.default_rng(0)
    for _ in range(200):
        A = rng.uniform(0.5, 10.0) * rng.choice([-1.0, 1.0])
        B, C = rng.uniform(-10.0, 10.0, size=2)

        roots = quadratic_roots(A, B, C)
        assert roots.size == 2
        numpy.testing.assert_allclose(roots[0] + roots[1], -B / A,
                                      rtol=1e-10, atol=1e-10)
        numpy.testing.assert_allclose(roots[0] * roots[1], C / A,
                                      rtol=1e-10, atol=1e-10)


# ================
# test cubic roots
# ================

def _test_cubic_roots():
    """
    A test for :func:`polyroots.cubic_roots`.
    """

    roots = cubic_roots(1, -6, 11, -6)
    assert roots.size == 3
    _assert_roots_match(roots, [1.0, 2.0, 3.0], atol=1e-13)
    numpy.testing.assert_allclose(roots.imag, 0.0, atol=1e-13)

    roots = cubic_roots(1, 0, 0, 1)
    expected = [-1.0, 0.5 + 0.866025403784439j, 0.5 - 0.866025403784439j]
    _assert_roots_match(roots, expected, atol=1e-13)

    # Zero leading coefficient reduces to a quadratic
    roots = cubic_roots(0, 1, 3, 2)
    assert roots.size == 2
    _assert_roots_match(roots, [-1.0, -2.0], atol=1e-13)

    # Zero constant term
    roots = cubic_roots(1, -3, 2, 0)
    _assert_roots_match(roots, [0.0, 1.0, 2.0], atol=1e-13)

    # Residual bound on random cubics
    rng = numpy.random.default_rng(1)
    for _ in range(200):
        A = rng.uniform(0.1, 100.0) * rng.choice([-1.0, 1.0])
        B, C, D = rng.uniform(-100.0, 100.0, size=3)

        roots = cubic_roots(A, B, C, D)
        assert roots.size == 3

        for r in roots:
            residual = abs(((A * r + B) * r + C) * r + D)
            scale = abs(A) * abs(r)**3 + abs(B) * abs(r)**2 + \
                abs(C) * abs(r) + abs(D)
            assert residual <= 1e-10 * scale


# ==================
# test quartic roots
# ==================

def _test_quartic_roots():
    """
    A test for :func:`polyroots.quartic_roots`.
    """

    roots = quartic_roots(1, -4, -1, 10, 0)
    expected = [1.0 - numpy.sqrt(6.0), 0.0, 2.0, 1.0 + numpy.sqrt(6.0)]
    _assert_roots_match(roots, expected, atol=1e-13)
    numpy.testing.assert_allclose(roots.imag, 0.0, atol=1e-13)

    roots = quartic_roots(-20, 5, 17, -29, 87)
    expected = [-1.6820039, 0.2222104 + 1.2996722j,
                0.2222104 - 1.2996722j, 1.4875831]
    _assert_roots_match(roots, expected, atol=1e-6)

    # Biquadratic, where the resolvent cubic has no positive root
    roots = quartic_roots(1, 0, 5, 0, 4)
    _assert_roots_match(roots, [1j, -1j, 2j, -2j], atol=1e-13)

    # Zero leading coefficient reduces to a cubic
    roots = quartic_roots(0, 1, -6, 11, -6)
    assert roots.size == 3
    _assert_roots_match(roots, [1.0, 2.0, 3.0], atol=1e-13)

    # At most four roots, and each root is a root of the quartic
    rng = numpy.random.default_rng(2)
    for _ in range(50):
        coeffs = rng.uniform(-10.0, 10.0, size=5)
        coeffs[0] = rng.uniform(1.0, 10.0)

        roots = quartic_roots(*coeffs)
        expected = numpy.roots(coeffs)
        _assert_roots_match(roots, expected, atol=1e-6)


# ===============
# test analytical
# ===============

def test_analytical():
    """
    A test for the closed-form solvers of degree one to four.
    """

    _test_linear_root()
    _test_quadratic_roots()
    _test_cubic_roots()
    _test_quartic_roots()

    print('OK')


# ===========
# script main
# ===========

if __name__ == "__main__":
    sys.exit(test_analytical())
