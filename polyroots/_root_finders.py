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

import warnings

__all__ = ['bisection', 'newton']


# =========
# bisection
# =========

def bisection(f, lower, upper, max_iter=100, root_tol=1e-14, step_tol=1e-12,
              verbose=False):
    """
    Find a root of a scalar function in a bracket by bisection.

    Parameters
    ----------

    f : callable
        Real function of one real variable.

    lower, upper : float
        Ends of the bracket. The signs of ``f`` at the two ends should differ.

    max_iter : int, default=100
        Maximum number of bisections. If reached, a ``RuntimeWarning`` is
        issued and the best end of the current bracket is returned.

    root_tol : float, default=1e-14
        Tolerance on :math:`|f|` at one of the ends of the bracket.

    step_tol : float, default=1e-12
        Tolerance on the length of the bracket.

    verbose : bool, default=False
        If `True`, the bracket is printed at each iteration.

    Returns
    -------

    root : float
        The end of the final bracket with the smaller :math:`|f|`, or the
        midpoint if ``f`` vanishes there exactly.

    Raises
    ------

    ValueError
        If ``f(lower)`` and ``f(upper)`` have the same sign.

    Examples
    --------

    .. code-block:: python

        >>> from polyroots import bisection
        >>> root = bisection(lambda t: t * t - 3.0, 1.0, 2.0)
    """

    f_lower = f(lower)
    f_upper = f(upper)

    if f_lower == 0:
        return lower
    if f_upper == 0:
        return upper
    if f_lower * f_upper > 0:
        raise ValueError('"f" should have opposite signs at "lower" and ' +
                         '"upper".')

    converged = False
    for iteration in range(max_iter):

        mid = 0.5 * (lower + upper)
        f_mid = f(mid)

        test = f_lower * f_mid
        if test < 0:
            upper = mid
            f_upper = f_mid
        elif test > 0:
            lower = mid
            f_lower = f_mid
        else:
            return mid

        if verbose:
            print(f'iter: {iteration:>3d}, lower: {lower:>+0.8e}, ' +
                  f'upper: {upper:>+0.8e}, f: {f_mid:>+0.4e}')

        if (abs(upper - lower) < step_tol) and \
                ((abs(f_lower) < root_tol) or (abs(f_upper) < root_tol)):
            converged = True
            break

    if not converged:
        warnings.warn('bisection reached the maximum number of ' +
                      f'{max_iter} iterations. Root may not be accurate.',
                      RuntimeWarning)

    if abs(f_lower) > abs(f_upper):
        return upper
    else:
        return lower


# ====================
# numerical derivative
# ====================

def _numerical_derivative(f, method, step):
    """
    Finite difference derivative of a scalar function.
    """

    if method == 'central':
        def df(x):
            return (f(x + step) - f(x - step)) / (2.0 * step)
    elif method == 'forward':
        def df(x):
            return (f(x + step) - f(x)) / step
    elif method == 'backward':
        def df(x):
            return (f(x) - f(x - step)) / step
    else:
        raise ValueError('"method" should be "central", "forward", or ' +
                         '"backward".')

    return df


# ======
# newton
# ======

def newton(f, x0, fprime=None, method='central', step=1e-6, tol=1e-12,
           root_tol=1e-14, max_iter=100, verbose=False):
    """
    Find a root of a scalar function by Newton's method.

    Parameters
    ----------

    f : callable
        Real function of one real variable.

    x0 : float
        Initial guess.

    fprime : callable, default=None
        Derivative of ``f``. If `None`, the derivative is approximated by
        finite differences.

    method : {``'central'``, ``'forward'``, ``'backward'``}, \
            default= ``'central'``
        Finite difference scheme, used only if ``fprime`` is `None`.

    step : float, default=1e-6
        Step of the finite differences.

    tol : float, default=1e-12
        The iteration stops once two successive estimates differ by less than
        this value.

    root_tol : float, default=1e-14
        If :math:`|f|` at an estimate is below this value, the estimate is
        returned right away.

    max_iter : int, default=100
        Maximum number of iterations. If reached, a ``RuntimeWarning`` is
        issued and the last estimate is returned.

    verbose : bool, default=False
        If `True`, the estimates are printed at each iteration.

    Returns
    -------

    root : float
        Estimate of the root.

    Raises
    ------

    ValueError
        If ``method`` is not recognized.

    ZeroDivisionError
        If the derivative vanishes (below ``root_tol``) at an estimate.

    See Also
    --------

    polyroots.bisection
    """

    if fprime is None:
        df = _numerical_derivative(f, method, step)
    else:
        df = fprime

    x1 = x0
    converged = False
    for iteration in range(max_iter):

        x = x1
        fx = f(x)
        if abs(fx) < root_tol:
            return x

        dfx = df(x)
        if abs(dfx) < root_tol:
            raise ZeroDivisionError(f'Derivative vanishes at x = {x}.')

        x1 = x - fx / dfx

        if verbose:
            print(f'iter: {iteration:>3d}, x: {x1:>+0.8e}, f: {fx:>+0.4e}')

        if abs(x1 - x) < tol:
            converged = True
            break

    if not converged:
        warnings.warn('newton reached the maximum number of ' +
                      f'{max_iter} iterations. Root may not be accurate.',
                      RuntimeWarning)

    return x1
