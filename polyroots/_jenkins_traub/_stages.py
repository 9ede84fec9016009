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
from collections import deque
from dataclasses import replace
from .._poly_util import poly_eval
from .._synthetic_division import synthetic_division
from .._analytical import quadratic_roots
from ._convergence import weak_convergence, root_converged
from ._state import Stage

__all__ = ['no_shift_k', 'sigma_estimate', 'next_fixed_shift_k',
           'fixed_shift', 'linear_shift', 'quadratic_shift']

# Below this, the fixed-shift recurrence switches to its unscaled form
GAMMA_TOL = 1e-15

# Below this, a value of the polynomial counts as an exact root
ROOT_TOL = 1e-15

# Relative residual below which an iterate that passed Ward's criterion is
# accepted as a root
RESIDUAL_RTOL = 1e-10


# ==============
# small residual
# ==============

def _small_residual(P, root):
    """
    Whether :math:`|P(r)|` is small relative to
    :math:`\\sum_i |p_i| |r|^{n-i}`.
    """

    scale = poly_eval(numpy.abs(P), abs(root))
    return abs(poly_eval(P, root)) <= RESIDUAL_RTOL * scale


# ========
# pad left
# ========

def _pad_left(p, size):
    """
    Prepend zeros to coefficients in decreasing order up to a given size.
    """

    return numpy.concatenate((numpy.zeros(size - p.size, dtype=p.dtype), p))


# =================
# quadratic scalars
# =================

def _quadratic_scalars(dividend, u):
    """
    Divide by :math:`z^2 + u z + v` and write the remainder as
    :math:`b (z + u) + a`.

    For a root :math:`s_1` of the divisor with companion root :math:`s_2`,
    the dividend at :math:`s_1` is :math:`a - b s_2`.
    """

    return dividend[1] - dividend[0] * u, dividend[0]


# ==========
# no shift k
# ==========

def no_shift_k(K0, P, num_steps):
    """
    Stage one: K-polynomials without shift.

    Parameters
    ----------

    K0 : numpy.ndarray
        Initial K-polynomial, usually the derivative of ``P``.

    P : numpy.ndarray
        Monic polynomial of which the roots are sought.

    num_steps : int
        Number of no-shift steps.

    Returns
    -------

    K : numpy.ndarray
        The K-polynomial after ``num_steps`` steps of

        .. math::

            K^{(\\lambda+1)}(z) = \\frac{1}{z} \\left( K^{(\\lambda)}(z) -
            \\frac{K^{(\\lambda)}(0)}{P(0)} P(z) \\right).

    Raises
    ------

    ValueError
        If the constant term of ``P`` is zero.
    """

    p0 = P[-1]
    if p0 == 0:
        raise ValueError('Constant term of "P" should not be zero.')

    K = numpy.array(K0, dtype=float)
    for _ in range(num_steps):
        t = -K[-1] / p0
        K[1:] = K[:-1] + t * P[1:-1]
        K[0] = t * P[0]

    return K


# ==============
# sigma estimate
# ==============

def sigma_estimate(a, b, c, d, u, v, K, P):
    """
    New estimate of the quadratic factor :math:`z^2 + u z + v`.

    Parameters
    ----------

    a, b : float
        Scalars of the remainder of ``P`` by the current factor, where
        :math:`P(s_1) = a - b s_2`.

    c, d : float
        Scalars of the remainder of ``K`` by the current factor, where
        :math:`K(s_1) = c - d s_2`.

    u, v : float
        Coefficients of the current factor.

    K : numpy.ndarray
        Current K-polynomial.

    P : numpy.ndarray
        Monic polynomial.

    Returns
    -------

    u_new, v_new : float
        Coefficients of the new factor estimate.

    References
    ----------

    .. [1] Jenkins, M. A. (1969). Three-stage variable-shift iterations for
           the solution of polynomial equations with a posteriori error bounds
           for the zeros. Doctoral thesis, Stanford University.
    """

    # Coefficients of K^(lambda+1) = (K - alpha * P) / z
    alpha0 = -K[-1] / P[-1]
    alpha1 = -(K[-2] + alpha0 * P[-2]) / P[-1]

    a1 = b * c - a * d
    a2 = a * c + u * a * d + v * b * d
    c2 = alpha0 * a2
    c3 = alpha0 * alpha0 * (a * a + u * a * b + v * b * b)
    c4 = v * alpha1 * a1 - c2 - c3
    c1 = c * c + u * c * d + v * d * d + \
        alpha0 * (a * c + u * b * c + v * b * d) - c4

    du_num = -(u * (c2 + c3) + v * (alpha0 * a1 + alpha1 * a2))
    dv_num = v * c4

    if (c1 == 0) or ((abs(c1) < 1e-15) and (abs(du_num) < 1e-15)):
        du = 0.0
    else:
        du = du_num / c1

    if (c1 == 0) or ((abs(c1) < 1e-15) and (abs(dv_num) < 1e-15)):
        dv = 0.0
    else:
        dv = dv_num / c1

    return u + du, v + dv


# ==================
# next fixed shift k
# ==================

def next_fixed_shift_k(K, Qp, Qk, a, b, c, d, u, v):
    """
    Next K-polynomial of the quadratic fixed-shift recurrence.

    Parameters
    ----------

    K : numpy.ndarray
        Current K-polynomial.

    Qp, Qk : numpy.ndarray
        Quotients of ``P`` and ``K`` by :math:`z^2 + u z + v`.

    a, b, c, d : float
        Remainder scalars of ``P`` and ``K``, see :func:`sigma_estimate`.

    u, v : float
        Coefficients of the quadratic factor.

    Returns
    -------

    K_next : numpy.ndarray
        The next K-polynomial, of the same size as ``K``.

    Notes
    -----

    With :math:`\\alpha = a^2 + u a b + v b^2`,
    :math:`\\beta = -(a c + u a d + v b d)` and :math:`\\gamma = b c - a d`,
    the next polynomial is

    .. math::

        \\frac{\\alpha}{\\gamma} Q_K(z) + \\frac{\\beta}{\\gamma} Q_P(z) +
        z Q_P(z) + b,

    which is multiplied by :math:`\\gamma / \\alpha` when :math:`\\gamma` is
    too small to divide by.
    """

    size = K.size

    alpha = a * a + u * a * b + v * b * b
    beta = -(a * c + u * a * d + v * b * d)
    gamma = b * c - a * d

    if abs(gamma) > GAMMA_TOL:
        qk_c = alpha / gamma
        qp_c = beta / gamma
        qz_c = 1.0
    elif alpha != 0:
        qk_c = 1.0
        qp_c = beta / alpha
        qz_c = gamma / alpha
    else:
        # The shift is an exact root, K cannot be improved
        return K.copy()

    zqp = numpy.append(Qp, b)
    K_next = qk_c * _pad_left(Qk, size) + qp_c * _pad_left(Qp, size) + \
        qz_c * _pad_left(zqp, size)

    return K_next


# ===========
# fixed shift
# ===========

def fixed_shift(state, P, max_iter):
    """
    Stage two: fixed quadratic shift at the trial point ``state.s``.

    Parameters
    ----------

    state : ShiftState
        State with the K-polynomial of stage one and the trial point.

    P : numpy.ndarray
        Monic polynomial.

    max_iter : int
        Maximum number of fixed-shift iterations.

    Returns
    -------

    state : ShiftState
        If the linear or the quadratic estimates converge, a state in one of
        the variable-shift stages carrying the last K-polynomial and the
        estimates ``t`` and ``(u, v)``. Otherwise a state in the
        ``EXHAUSTED`` stage.
    """

    s = complex(state.s)
    u = -2.0 * s.real
    v = s.real * s.real + s.imag * s.imag
    sigma = numpy.array([1.0, u, v])

    Qp, rem_p = synthetic_division(P, sigma)
    a, b = _quadratic_scalars(rem_p, u)

    # P(s) = a - b * conj(s)
    p_at_s = complex(a - b * s.real, b * s.imag)

    K = state.K.copy()
    t_history = deque(maxlen=3)
    v_history = deque(maxlen=3)

    for i in range(max_iter):
        Qk, rem_k = synthetic_division(K, sigma)
        c, d = _quadratic_scalars(rem_k, u)

        # Linear estimate s - P(s) / (K(s) / K[0])
        k_at_s = complex(c - d * s.real, d * s.imag)
        if k_at_s != 0:
            t = s - p_at_s * K[0] / k_at_s
        else:
            t = s
        t_history.append(t)

        # Quadratic estimate
        u_est, v_est = sigma_estimate(a, b, c, d, u, v, K, P)
        v_history.append(v_est)

        linear = weak_convergence(t_history)
        quadratic = weak_convergence(v_history)

        if linear or quadratic:
            if quadratic:
                stage = Stage.VARIABLE_SHIFT_QUADRATIC
            else:
                stage = Stage.VARIABLE_SHIFT_LINEAR

            return replace(state, stage=stage, K=K, u=u_est, v=v_est, t=t,
                           linear=linear, quadratic=quadratic,
                           iterations=i + 1)

        K = next_fixed_shift_k(K, Qp, Qk, a, b, c, d, u, v)

    return replace(state, stage=Stage.EXHAUSTED, K=K, iterations=max_iter)


# ============
# linear shift
# ============

def linear_shift(state, P, max_iter):
    """
    Stage three for a linear factor: real variable shift.

    Parameters
    ----------

    state : ShiftState
        State returned by :func:`fixed_shift`. The real part of ``state.t``
        is the starting point.

    P : numpy.ndarray
        Monic polynomial.

    max_iter : int
        Maximum number of variable-shift iterations.

    Returns
    -------

    state : ShiftState
        A ``CONVERGED`` state with one real root and the factor
        :math:`z - s`, or an ``EXHAUSTED`` state.
    """

    s = float(complex(state.t).real)
    K = state.K.copy()
    history = deque(maxlen=3)

    def _converged(root):
        return replace(state, stage=Stage.CONVERGED, K=K,
                       roots=(complex(root),),
                       factor=numpy.array([1.0, -root]))

    for _ in range(max_iter):
        history.append(s)

        factor = numpy.array([1.0, -s])
        Qp, rem_p = synthetic_division(P, factor)
        p_at_s = rem_p[0]
        if p_at_s == 0:
            return _converged(s)

        Qk, rem_k = synthetic_division(K, factor)
        t = -rem_k[0] / p_at_s

        # K^(lambda+1) = (K - K(s)/P(s) * P) / (z - s)
        K = _pad_left(Qk, Qp.size) + t * Qp
        if K[0] != 0:
            K = K / K[0]

        k_at_s = poly_eval(K, s)
        if k_at_s == 0:
            break

        s = float(s - p_at_s * K[0] / k_at_s)

        if abs(poly_eval(P, s)) < ROOT_TOL:
            return _converged(s)

        if root_converged(history):
            # Iterates that stopped moving are not necessarily roots
            if not _small_residual(P, history[-2]):
                break
            return _converged(history[-2])

    return replace(state, stage=Stage.EXHAUSTED, K=K)


# ===============
# quadratic shift
# ===============

def quadratic_shift(state, P, max_iter):
    """
    Stage three for a quadratic factor: variable quadratic shift.

    Parameters
    ----------

    state : ShiftState
        State returned by :func:`fixed_shift`. The estimate
        ``(state.u, state.v)`` is the starting factor.

    P : numpy.ndarray
        Monic polynomial.

    max_iter : int
        Maximum number of variable-shift iterations.

    Returns
    -------

    state : ShiftState
        A ``CONVERGED`` state with the two roots of the factor
        :math:`z^2 + u z + v`, or an ``EXHAUSTED`` state.
    """

    u = float(state.u)
    v = float(state.v)
    u_prev = u
    v_prev = v
    K = state.K.copy()

    history_1 = deque(maxlen=3)
    history_2 = deque(maxlen=3)

    for _ in range(max_iter):
        sigma = numpy.array([1.0, u, v])
        s1, s2 = quadratic_roots(1.0, u, v)
        history_1.append(s1)
        history_2.append(s2)

        if (abs(poly_eval(P, s1)) < ROOT_TOL) and \
                (abs(poly_eval(P, s2)) < ROOT_TOL):
            return replace(state, stage=Stage.CONVERGED, K=K, u=u, v=v,
                           roots=(complex(s1), complex(s2)), factor=sigma)

        if root_converged(history_1) and root_converged(history_2):
            r1 = history_1[-2]
            r2 = history_2[-2]

            # Iterates that stopped moving are not necessarily roots
            if not (_small_residual(P, r1) and _small_residual(P, r2)):
                break

            return replace(state, stage=Stage.CONVERGED, K=K, u=u_prev,
                           v=v_prev,
                           roots=(complex(r1), complex(r2)),
                           factor=numpy.array([1.0, u_prev, v_prev]))

        Qp, rem_p = synthetic_division(P, sigma)
        a, b = _quadratic_scalars(rem_p, u)

        Qk, rem_k = synthetic_division(K, sigma)
        c, d = _quadratic_scalars(rem_k, u)

        # The next factor is estimated from the current K, and the next K is
        # formed with the next factor
        u_next, v_next = sigma_estimate(a, b, c, d, u, v, K, P)
        K = next_fixed_shift_k(K, Qp, Qk, a, b, c, d, u_next, v_next)

        u_prev = u
        v_prev = v
        u = u_next
        v = v_next

        if not (numpy.isfinite(u) and numpy.isfinite(v)):
            break

    return replace(state, stage=Stage.EXHAUSTED, K=K)
