# SPDX-FileCopyrightText: Copyright 2026, Siavash Ameli <sameli@berkeley.edu>
# SPDX-License-Identifier: BSD-3-Clause
# SPDX-FileType: SOURCE
#
# This program is free software: you can redistribute it and/or modify it under
# the terms of the license found in the LICENSE.txt file in the root directory
# of this source tree.

__all__ = ['weak_convergence', 'ward_criterion', 'root_converged']


# ================
# weak convergence
# ================

def weak_convergence(history):
    """
    Test of the fixed-shift stage on the last three iterates.

    Parameters
    ----------

    history : sequence
        The last (at most) three iterates, oldest first. The iterates are the
        linear root estimates, or the constant coefficient of the quadratic
        factor estimates.

    Returns
    -------

    converged : bool
        `True` if both of the two most recent differences are at most half
        the magnitude of the iterate they start from.
    """

    if len(history) < 3:
        return False

    x0, x1, x2 = history

    return (abs(x2 - x1) <= 0.5 * abs(x1)) and \
        (abs(x1 - x0) <= 0.5 * abs(x0))


# ==============
# ward criterion
# ==============

def ward_criterion(e_i, e_prev, mag):
    """
    Ward's stopping criterion.

    Parameters
    ----------

    e_i : float
        Distance between the two most recent approximations.

    e_prev : float
        Distance between the two approximations before.

    mag : float
        Magnitude of the approximation in the middle.

    Returns
    -------

    stop : bool
        `True` if the error is already small and did not decrease, so that
        further iterations would not improve the root.

    References
    ----------

    .. [1] Nikolajsen, J. L. (2014). New stopping criteria for iterative root
           finding. Royal Society Open Science, 1(2), 140206.
    """

    if ((mag < 1e-4) and (e_i <= 1e-7)) or \
            ((mag >= 1e-4) and (e_i / mag <= 1e-3)):
        return e_i >= e_prev

    return False


# ==============
# root converged
# ==============

def root_converged(history):
    """
    Apply Ward's criterion to the last three approximations of a real or
    complex root, oldest first.
    """

    if len(history) < 3:
        return False

    r0, r1, r2 = history

    return ward_criterion(abs(r2 - r1), abs(r1 - r0), abs(r1))
