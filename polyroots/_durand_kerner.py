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
import warnings
from ._util import as_complex_coeffs
from ._poly_util import poly_eval

__all__ = ['durand_kerner']

# Seed of the initial guesses. Not a root of unity, so that the guesses are
# not placed symmetrically.
SEED = complex(0.4, 0.9)

# Below this length, a step is measured with the Manhattan norm
SMALL_STEP = 1e-12


# =============
# durand kerner
# =============

def durand_kerner(coeffs, tol=1e-14, max_iter=10000, verbose=False):
    """
    Find all roots of a polynomial simultaneously by the Durand-Kerner method.

    Parameters
    ----------

    coeffs : array_like
        Real or complex coefficients in decreasing order, that is,
        ``[a_n, ..., a_1, a_0]`` for :math:`a_0 + a_1 z + \\dots + a_n z^n`.
        The leading coefficient should be non-zero.

    tol : float, default=1e-14
        The iteration stops once the combined length of the steps of all
        roots in one sweep is below this value.

    max_iter : int, default=10000
        Maximum number of sweeps. If reached, a ``RuntimeWarning`` is issued
        and the current estimates are returned.

    verbose : bool, default=False
        If `True`, the combined step length of each sweep is printed.

    Returns
    -------

    roots : numpy.ndarray
        Array of ``complex128`` with ``len(coeffs) - 1`` roots in no
        particular order.

    Raises
    ------

    ValueError
        If the leading coefficient is zero.

    Notes
    -----

    The polynomial is first made monic. Starting from the guesses
    :math:`z_i = (0.4 + 0.9 i)^{i+1}`, each root is updated by the
    Weierstrass correction

    .. math::

        z_i \\leftarrow z_i - \\frac{p(z_i)}{\\prod_{j \\neq i} (z_i - z_j)},

    where the already updated roots of the same sweep are used. The
    convergence is quadratic for simple roots but only linear for multiple
    roots, in which case the attainable accuracy is also lower.

    See Also
    --------

    polyroots.jenkins_traub

    Examples
    --------

    .. code-block:: python

        >>> from polyroots import durand_kerner
        >>> roots = durand_kerner([1, -3, 3, -5])
    """

    coeffs = as_complex_coeffs(coeffs)
    if coeffs[0] == 0:
        raise ValueError('Leading coefficient of "coeffs" must not be zero.')

    n = coeffs.size - 1
    if n < 1:
        return numpy.array([], dtype=numpy.complex128)

    # Monic polynomial
    c = coeffs / coeffs[0]

    # Initial guesses as successive powers of the seed
    roots = []
    z = SEED
    for _ in range(n):
        roots.append(z)
        z = z * SEED

    converged = False
    for iteration in range(max_iter):

        total_step = 0.0
        for i in range(n):
            r = roots[i]
            f = complex(poly_eval(c, r))

            denom = 1.0 + 0.0j
            for j in range(n):
                if j != i:
                    denom *= r - roots[j]

            # Coincident guesses give no usable correction in this sweep
            if denom == 0:
                continue

            step = f / denom
            roots[i] = r - step

            step_len = abs(step.real) + abs(step.imag)
            if step_len >= SMALL_STEP:
                step_len = abs(step)
            total_step = numpy.hypot(total_step, step_len)

        if verbose:
            print(f'iter: {iteration:>5d}, step: {total_step:>0.4e}')

        if total_step < tol:
            converged = True
            break

    if not converged:
        warnings.warn('durand_kerner did not converge within ' +
                      f'{max_iter} iterations. Roots may not be accurate.',
                      RuntimeWarning)

    return numpy.array(roots, dtype=numpy.complex128)
