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
from dataclasses import replace
from .._util import as_real_coeffs
from .._poly_util import poly_derivative, poly_scale
from .._synthetic_division import synthetic_division
from .._analytical import linear_root, quadratic_roots
from .._errors import ConvergenceError
from ._root_bound import root_bound
from ._state import Stage, ShiftState
from ._stages import no_shift_k, fixed_shift, linear_shift, quadratic_shift

__all__ = ['jenkins_traub']

# Number of K-polynomial steps without shift
NUM_NO_SHIFT = 5

# Angle of the first trial point and the rotation between trial points
PHI_START = numpy.deg2rad(49.0)
PHI_INC = numpy.deg2rad(94.0)


# ==============
# extract factor
# ==============

def _extract_factor(P, max_shifts, verbose):
    """
    Find one linear or quadratic factor of a monic polynomial of degree at
    least three with a non-zero constant term.
    """

    degree = P.size - 1

    K = no_shift_k(poly_derivative(P), P, NUM_NO_SHIFT)
    state = ShiftState(stage=Stage.NO_SHIFT, K=K)
    radius = root_bound(P)

    for k in range(max_shifts):

        phi = PHI_START + k * PHI_INC
        s = radius * complex(numpy.cos(phi), numpy.sin(phi))

        trial = replace(state, stage=Stage.FIXED_SHIFT, s=s)
        trial = fixed_shift(trial, P, 20 * degree)

        if trial.stage == Stage.EXHAUSTED:
            if verbose:
                print(f'degree: {degree:>3d}, shift: {k:>2d}, ' +
                      'fixed shift exhausted.')
            continue

        # Signalled stages first, quadratic before linear, then the other
        stages = []
        if trial.quadratic:
            stages.append(quadratic_shift)
        if trial.linear:
            stages.append(linear_shift)
        for stage in (quadratic_shift, linear_shift):
            if stage not in stages:
                stages.append(stage)

        for stage in stages:
            result = stage(trial, P, 10 * trial.iterations)

            if result.stage == Stage.CONVERGED:
                if verbose:
                    roots = ', '.join([f'{r.real:>+0.4e}{r.imag:>+0.4e}j'
                                       for r in result.roots])
                    print(f'degree: {degree:>3d}, shift: {k:>2d}, ' +
                          f'roots: {roots}')
                return result

        if verbose:
            print(f'degree: {degree:>3d}, shift: {k:>2d}, ' +
                  'variable shift exhausted.')

    raise ConvergenceError('jenkins_traub did not find a factor of the ' +
                           f'degree {degree} polynomial within ' +
                           f'{max_shifts} shifts.')


# =============
# jenkins traub
# =============

def jenkins_traub(coeffs, max_shifts=20, verbose=False):
    """
    Find all roots of a real polynomial by the Jenkins-Traub algorithm.

    Parameters
    ----------

    coeffs : array_like
        Real coefficients in decreasing order, that is,
        ``[a_n, ..., a_1, a_0]`` for :math:`a_0 + a_1 z + \\dots + a_n z^n`.
        The leading coefficient should be non-zero.

    max_shifts : int, default=20
        Maximum number of trial points tried for each factor before giving up.

    verbose : bool, default=False
        If `True`, the progress of each factor is printed.

    Returns
    -------

    roots : numpy.ndarray
        Array of ``complex128`` with ``len(coeffs) - 1`` roots. The roots at
        zero come first, followed by the roots in the order they are found.
        Complex roots come in conjugate pairs and multiple roots are repeated.

    Raises
    ------

    ValueError
        If the coefficients are empty, not finite, or the leading coefficient
        is zero.

    ConvergenceError
        If no factor is found after ``max_shifts`` trial points.

    Notes
    -----

    The roots at zero are removed first. The remaining polynomial is made
    monic and a linear or quadratic factor is found in three stages:

    1. Five steps of the K-polynomial recurrence without shift.
    2. Fixed quadratic shift at a trial point on the circle of the Cauchy
       lower bound of the roots, until the linear or the quadratic estimates
       begin to converge.
    3. Variable shift, on the linear factor with a real root or on the
       quadratic factor with a pair of roots, until convergence.

    The found factor is divided out and the process repeats until a linear
    or quadratic polynomial remains, which is solved in closed form. If a
    trial point fails, the next one is rotated by 94 degrees.

    See Also
    --------

    polyroots.durand_kerner
    polyroots.quadratic_roots

    References
    ----------

    .. [1] Jenkins, M. A., & Traub, J. F. (1970). A three-stage algorithm for
           real polynomials using quadratic iteration. SIAM Journal on
           Numerical Analysis, 7(4), 545-566.

    Examples
    --------

    .. code-block:: python

        >>> from polyroots import jenkins_traub
        >>> roots = jenkins_traub([1, -15, 85, -225, 274, -120])
    """

    P = as_real_coeffs(coeffs)
    if P[0] == 0:
        raise ValueError('Leading coefficient of "coeffs" must not be zero.')

    roots = []

    # Roots at zero
    while (P.size > 1) and (P[-1] == 0):
        roots.append(0j)
        P = P[:-1]

    P = poly_scale(P, 1.0 / P[0])
    P[0] = 1.0

    while P.size > 3:
        result = _extract_factor(P, max_shifts, verbose)
        roots.extend(result.roots)
        P, _ = synthetic_division(P, result.factor)

        # A deflated constant that rounds to exactly zero is taken as a root
        # at zero
        while (P.size > 1) and (P[-1] == 0):
            roots.append(0j)
            P = P[:-1]

    if P.size == 3:
        roots.extend(quadratic_roots(P[0], P[1], P[2]))
    elif P.size == 2:
        roots.extend(linear_root(P[0], P[1]))

    return numpy.array(roots, dtype=numpy.complex128)
