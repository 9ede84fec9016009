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

__all__ = ['distinct_roots', 'as_real_coeffs', 'as_complex_coeffs']


# ==============
# distinct roots
# ==============

def distinct_roots(roots, tol=1e-14):
    """
    Remove near-duplicate roots.

    Parameters
    ----------

    roots : array_like
        Sequence of real or complex roots.

    tol : float, default=1e-14
        Two roots are the same if both their real parts and their imaginary
        parts differ by less than ``tol``.

    Returns
    -------

    unique : numpy.ndarray
        Roots of dtype ``complex128`` in their original order, where only the
        first occurrence of near-duplicate roots is kept.

    Notes
    -----

    The real and imaginary parts are compared independently, not by the
    Euclidean distance. Applying this function to its own output returns the
    same array.

    Examples
    --------

    .. code-block:: python

        >>> from polyroots import distinct_roots
        >>> unique = distinct_roots([1.0, 2.0, 1.0 + 1e-16, 2.0j])
    """

    roots = numpy.asarray(roots, dtype=numpy.complex128).ravel()

    unique = []
    for root in roots:
        is_duplicate = False
        for other in unique:
            if (abs(other.real - root.real) < tol) and \
                    (abs(other.imag - root.imag) < tol):
                is_duplicate = True
                break

        if not is_duplicate:
            unique.append(root)

    return numpy.array(unique, dtype=numpy.complex128)


# ==============
# as real coeffs
# ==============

def as_real_coeffs(coeffs):
    """
    Convert coefficients to a new 1D float array and validate them.
    """

    coeffs = numpy.array(coeffs, dtype=float).ravel()

    if coeffs.size == 0:
        raise ValueError('"coeffs" should not be empty.')
    if not numpy.all(numpy.isfinite(coeffs)):
        raise ValueError('"coeffs" should be finite.')

    return coeffs


# =================
# as complex coeffs
# =================

def as_complex_coeffs(coeffs):
    """
    Convert coefficients to a new 1D complex array and validate them.
    """

    coeffs = numpy.array(coeffs, dtype=numpy.complex128).ravel()

    if coeffs.size == 0:
        raise ValueError('"coeffs" should not be empty.')
    if not numpy.all(numpy.isfinite(coeffs)):
        raise ValueError('"coeffs" should be finite.')

    return coeffs
