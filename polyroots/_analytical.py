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
from ._util import distinct_roots

__all__ = ['linear_root', 'quadratic_roots', 'cubic_roots', 'quartic_roots']

# Machine epsilon, 2^-52
EPS = numpy.finfo(float).eps

# Plastic number, used by Kahan to over-step the first Newton iterate
PLASTIC = 1.324717957244746

# Bound on the passes of the integer discriminant reduction
MAX_DISC_PASSES = 100


# ====
# sign
# ====

def _sign(x):
    """
    Sign of a number with the convention ``sign(0) = +1``.
    """

    return 1.0 if x >= 0 else -1.0


# ===========
# nearest int
# ===========

def _nearest_int(x):
    """
    Nearest integer, returned as float.
    """

    return float(numpy.rint(x))


# ============
# discriminant
# ============

def _discriminant(A, b, C):
    """
    Discriminant :math:`b^2 - A C` of :math:`A x^2 - 2 b x + C`.

    Parameters
    ----------

    A, b, C : float
        Coefficients, where ``b`` is already the negated half of the linear
        coefficient.

    Returns
    -------

    disc : float
        The discriminant.

    Notes
    -----

    If all three coefficients are integers, the quadratic form
    :math:`[a, b; b, c]` is first reduced by unimodular substitutions
    :math:`y \\to y - n x`, which leave :math:`b^2 - a c` unchanged but shrink
    the magnitude of the numbers being multiplied. This is the integer
    analogue of the continued fraction reduction and avoids the cancellation
    of the naive formula when the coefficients are large.
    """

    a = A
    c = C

    is_int = float(A).is_integer() and float(b).is_integer() and \
        float(C).is_integer()

    if is_int:
        if a * c > 0:
            a = abs(a)
            c = abs(c)

        for _ in range(MAX_DISC_PASSES):
            if a < c:
                a, c = c, a

            if c == 0:
                break

            n = _nearest_int(b / c)
            if n == 0:
                break

            alpha = a - n * b
            if alpha < -a:
                break

            b = b - n * c
            a = alpha - n * b
            if not (a > 0):
                break

    return b * b - a * c


# ===========
# linear root
# ===========

def linear_root(A, B):
    """
    Root of the linear equation :math:`A x + B = 0`.

    Parameters
    ----------

    A, B : float
        Real coefficients.

    Returns
    -------

    roots : numpy.ndarray
        Array of ``complex128`` with one root, or an empty array if ``A`` is
        zero. A zero slope is not an error, the line simply has no root.
    """

    A = float(A)
    B = float(B)

    if A != 0:
        return numpy.array([-B / A], dtype=numpy.complex128)

    return numpy.array([], dtype=numpy.complex128)


# ===============
# quadratic roots
# ===============

def quadratic_roots(A, B, C):
    """
    Roots of the quadratic equation :math:`A x^2 + B x + C = 0`.

    Parameters
    ----------

    A, B, C : float
        Real coefficients.

    Returns
    -------

    roots : numpy.ndarray
        Array of two ``complex128`` roots. Complex roots are returned as a
        conjugate pair with the positive imaginary part first (for ``A > 0``).

    Notes
    -----

    The method follows W. Kahan, *To Solve a Real Cubic Equation* (1986).
    With :math:`b = -B/2` and :math:`q = b^2 - AC`, the real roots are formed
    as

    .. math::

        r = b + \\mathrm{sign}(b) \\sqrt{q}, \\quad
        x_1 = C / r, \\quad x_2 = r / A,

    so that :math:`b` and :math:`\\sqrt{q}` are never subtracted. If
    ``A`` is zero, the division follows IEEE-754 arithmetic and the second
    root is infinite.

    Examples
    --------

    .. code-block:: python

        >>> from polyroots import quadratic_roots
        >>> roots = quadratic_roots(1, -3, 2)
    """

    A = numpy.float64(A)
    B = float(B)
    C = float(C)

    b = -B / 2.0
    q = _discriminant(float(A), b, C)

    with numpy.errstate(divide='ignore', invalid='ignore'):
        if q < 0:
            X = b / A
            Y = numpy.sqrt(-q) / A
            x1 = complex(X, Y)
            x2 = complex(X, -Y)
        else:
            r = b + _sign(b) * numpy.sqrt(q)
            if r == 0:
                x1 = complex(C / A)
                x2 = complex(-C / A)
            else:
                x1 = complex(C / r)
                x2 = complex(r / A)

    return numpy.array([x1, x2], dtype=numpy.complex128)


# ==========
# eval cubic
# ==========

def _eval_cubic(x, A, B, C, D):
    """
    Nested evaluation of :math:`A x^3 + B x^2 + C x + D` and its derivative.

    Returns
    -------

    Q : float
        Value of the cubic.

    dQ : float
        Value of the derivative.

    b1, c2 : float
        Coefficients of the deflated quadratic :math:`A z^2 + b_1 z + c_2`.
    """

    q0 = A * x
    b1 = q0 + B
    c2 = b1 * x + C
    Q = c2 * x + D
    dQ = (q0 + b1) * x + c2

    return Q, dQ, b1, c2


# ===========
# cubic roots
# ===========

def cubic_roots(A, B, C, D):
    """
    Roots of the cubic equation :math:`A x^3 + B x^2 + C x + D = 0`.

    Parameters
    ----------

    A, B, C, D : float
        Real coefficients.

    Returns
    -------

    roots : numpy.ndarray
        Array of three ``complex128`` roots, where the first one is real. If
        ``A`` is zero, the two roots of the quadratic
        :math:`B x^2 + C x + D` are returned instead.

    Notes
    -----

    The method follows W. Kahan, *To Solve a Real Cubic Equation* (1986). A
    real root is found by Newton iteration started near the inflection point
    :math:`-B/(3A)` with a step that lands on the far side of the root. The
    iteration stops as soon as the iterates stop moving monotonically, which
    happens once rounding errors dominate. The remaining two roots are the
    roots of the deflated quadratic.

    Examples
    --------

    .. code-block:: python

        >>> from polyroots import cubic_roots
        >>> roots = cubic_roots(1, -6, 11, -6)
    """

    A = float(A)
    B = float(B)
    C = float(C)
    D = float(D)

    if A == 0:
        return quadratic_roots(B, C, D)

    if D == 0:
        roots = quadratic_roots(A, B, C)
        return numpy.concatenate(([0j], roots))

    X = -(B / A) / 3.0
    Q, dQ, b1, c2 = _eval_cubic(X, A, B, C, D)

    t = Q / A
    r = numpy.cbrt(abs(t))
    s = numpy.sign(t)
    t = -dQ / A
    if t > 0:
        r = PLASTIC * max(r, numpy.sqrt(t))

    x0 = X - s * r
    if x0 != X:
        den = 1.0 + 100.0 * EPS

        # Newton iteration as long as the iterates move monotonically
        while True:
            X = x0
            Q, dQ, b1, c2 = _eval_cubic(X, A, B, C, D)
            if dQ == 0:
                x0 = X
            else:
                x0 = X - (Q / dQ) / den

            if not (s * x0 > s * X):
                break

        # Deflated coefficients from the constant term for a large root
        if (X != 0) and (abs(A) * X * X > abs(D / X)):
            c2 = -D / X
            b1 = (c2 - C) / X

    roots = quadratic_roots(A, b1, c2)

    return numpy.concatenate(([complex(X)], roots))


# =============
# quartic roots
# =============

def quartic_roots(a, b, c, d, e):
    """
    Roots of the quartic equation :math:`a x^4 + b x^3 + c x^2 + d x + e = 0`.

    Parameters
    ----------

    a, b, c, d, e : float
        Real coefficients.

    Returns
    -------

    roots : numpy.ndarray
        Array of at most four distinct ``complex128`` roots. Repeated roots
        are reported once. If ``a`` is zero, the roots of the cubic
        :math:`b x^3 + c x^2 + d x + e` are returned.

    Notes
    -----

    The substitution :math:`x = z - b/(4a)` gives the depressed monic
    quartic :math:`z^4 + p z^2 + q z + r`, which is factored as

    .. math::

        (z^2 + m z + n)(z^2 - m z + r/n) = 0,

    where :math:`w = m^2` is a positive root of the resolvent cubic

    .. math::

        w^3 + 2 p w^2 + (p^2 - 4 r) w - q^2 = 0.

    The resolvent has a positive root whenever :math:`q \\neq 0`. If
    :math:`q = 0` and no positive root exists, the quartic is biquadratic and
    is solved as a quadratic in :math:`z^2`.

    Examples
    --------

    .. code-block:: python

        >>> from polyroots import quartic_roots
        >>> roots = quartic_roots(1, -4, -1, 10, 0)
    """

    a = float(a)
    b = float(b)
    c = float(c)
    d = float(d)
    e = float(e)

    if a == 0:
        return cubic_roots(b, c, d, e)

    # Depressed quartic a z^4 + B z^2 + C z + D
    B = c - (3.0 * b * b) / (8.0 * a)
    C = d - (b * c) / (2.0 * a) + (b * b * b) / (8.0 * a * a)
    D = e - (b * d) / (4.0 * a) + (b * b * c) / (16.0 * a * a) - \
        (3.0 * b * b * b * b) / (256.0 * a * a * a)

    # Monic depressed quartic z^4 + p z^2 + q z + r
    p = B / a
    q = C / a
    r = D / a

    w_roots = cubic_roots(1.0, 2.0 * p, p * p - 4.0 * r, -q * q)
    ws = [w.real for w in w_roots if (w.imag == 0) and (w.real > 0)]

    zs = []
    for w in ws:
        m = numpy.sqrt(w)
        n = 0.5 * (p + w)
        n0 = n - q / (2.0 * m)
        n1 = n + q / (2.0 * m)

        # Both sign choices of m, each with its companion factor r/n
        for m_, n_, n_other in ((m, n0, n1), (-m, n1, n0)):
            if n_ != 0:
                n_comp = r / n_
            else:
                n_comp = n_other
            zs.extend(quadratic_roots(1.0, m_, n_))
            zs.extend(quadratic_roots(1.0, -m_, n_comp))

    if len(zs) == 0:
        # Biquadratic quartic z^4 + p z^2 + r
        for y in quadratic_roots(1.0, p, r):
            sqrt_y = numpy.sqrt(numpy.complex128(y))
            zs.extend([sqrt_y, -sqrt_y])

    zs = distinct_roots(zs)

    return zs - b / (4.0 * a)
