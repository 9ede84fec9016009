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
import scipy.optimize
from polyroots import bisection, newton


# ==============
# test bisection
# ==============

def _test_bisection():
    """
    Bisection against :func:`scipy.optimize.brentq`.
    """

    def f(t):
        return numpy.exp(-t) * (3.2 * numpy.sin(t) - 0.5 * numpy.cos(t))

    def g(t):
        return t * t - 3.0

    # Loose tolerances with few iterations
    root = bisection(f, 3.0, 4.0, max_iter=11, root_tol=1e-3, step_tol=1e-3)
    numpy.testing.assert_allclose(root, 3.29658939551374, atol=1e-3)

    root = bisection(g, 1.0, 2.0, max_iter=9, root_tol=1e-2, step_tol=1e-2)
    numpy.testing.assert_allclose(root, numpy.sqrt(3.0), atol=1e-2)

    # Default tolerances
    for func, lower, upper in [(f, 3.0, 4.0), (g, 1.0, 2.0), (g, -2.0, -1.0)]:
        root = bisection(func, lower, upper)
        ref = scipy.optimize.brentq(func, lower, upper, xtol=1e-14)
        numpy.testing.assert_allclose(root, ref, atol=1e-12)

    # Exact zero at an end or at a midpoint
    assert bisection(lambda t: t - 2.0, 2.0, 5.0) == 2.0
    assert bisection(lambda t: t, -1.0, 1.0) == 0.0

    with pytest.warns(RuntimeWarning):
        bisection(g, 1.0, 2.0, max_iter=3)

    with pytest.raises(ValueError):
        bisection(lambda t: t * t + 1.0, -1.0, 1.0)


# ===========
# test newton
# ===========

def _test_newton():
    """
    Newton's method against :func:`scipy.optimize.newton`.
    """

    def f(t):
        return numpy.cos(t) - t

    def df(t):
        return -numpy.sin(t) - 1.0

    ref = scipy.optimize.newton(f, 1.0, fprime=df)

    root = newton(f, 1.0, fprime=df)
    numpy.testing.assert_allclose(root, ref, atol=1e-12)

    for method in ['central', 'forward', 'backward']:
        root = newton(f, 1.0, method=method)
        numpy.testing.assert_allclose(root, ref, atol=1e-10)

    root = newton(lambda t: t * t - 3.0, 1.0, fprime=lambda t: 2.0 * t)
    numpy.testing.assert_allclose(root, numpy.sqrt(3.0), atol=1e-12)

    # A root hit exactly is returned at once
    assert newton(lambda t: t - 2.0, 2.0) == 2.0

    with pytest.raises(ValueError):
        newton(f, 1.0, method='secant')

    with pytest.raises(ZeroDivisionError):
        newton(lambda t: t * t + 1.0, 0.0, fprime=lambda t: 2.0 * t)

    with pytest.warns(RuntimeWarning):
        newton(lambda t: t * t + 1.0, 0.5, fprime=lambda t: 2.0 * t,
               max_iter=3)


# =================
# test root finders
# =================

def test_root_finders():
    """
    A test for the scalar root finders.
    """

    _test_bisection()
    _test_newton()

    print('OK')


# ===========
# script main
# ===========

if __name__ == "__main__":
    sys.exit(test_root_finders())
