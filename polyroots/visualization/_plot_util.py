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
import matplotlib.pyplot as plt
import texplot

__all__ = ['plot_roots']


# ==========
# plot roots
# ==========

def plot_roots(roots, title='Polynomial Roots', latex=False, save=False):
    """
    Plot roots in the complex plane.

    Parameters
    ----------

    roots : array_like
        Real or complex roots, such as the output of
        :func:`polyroots.jenkins_traub`.

    title : str, default='Polynomial Roots'
        Title of the plot.

    latex : bool, default=False
        If `True`, the plot is rendered with LaTeX.

    save : bool or str, default=False
        If `False`, the plot is shown. If `True`, the plot is saved to
        ``roots.pdf``. If a string, the plot is saved to that filename.

    Examples
    --------

    .. code-block:: python

        >>> from polyroots import jenkins_traub
        >>> from polyroots.visualization import plot_roots
        >>> roots = jenkins_traub([1, 0, 0, 0, 0, -1])
        >>> plot_roots(roots, save='roots.pdf')
    """

    roots = numpy.asarray(roots, dtype=numpy.complex128).ravel()

    with texplot.theme(use_latex=latex):

        fig, ax = plt.subplots(figsize=(4.5, 4.5))

        # Unit circle for scale
        theta = numpy.linspace(0.0, 2.0 * numpy.pi, 361)
        ax.plot(numpy.cos(theta), numpy.sin(theta), color='silver',
                linestyle='--', linewidth=0.8, zorder=1)

        ax.axhline(0.0, color='gray', linewidth=0.5, zorder=0)
        ax.axvline(0.0, color='gray', linewidth=0.5, zorder=0)

        real = numpy.abs(roots.imag) == 0
        if numpy.any(real):
            ax.scatter(roots.real[real], roots.imag[real], s=20,
                       color='firebrick', label='Real roots', zorder=3)
        if numpy.any(~real):
            ax.scatter(roots.real[~real], roots.imag[~real], s=20,
                       color='black', label='Complex roots', zorder=3)

        # Equal scales so that roots on a circle look circular
        if roots.size > 0:
            radius = max(1.0, numpy.max(numpy.abs(roots)))
        else:
            radius = 1.0
        lim = 1.1 * radius
        ax.set_xlim([-lim, lim])
        ax.set_ylim([-lim, lim])
        ax.set_aspect('equal')

        ax.set_xlabel(r'$\operatorname{Re}(z)$')
        ax.set_ylabel(r'$\operatorname{Im}(z)$')
        ax.set_title(title)

        if roots.size > 0:
            ax.legend(loc='upper right', fontsize='x-small')

        # Save
        if save is False:
            save_status = False
            save_filename = ''
        else:
            save_status = True
            if isinstance(save, str):
                save_filename = save
            else:
                save_filename = 'roots.pdf'

        texplot.show_or_save_plot(plt, default_filename=save_filename,
                                  transparent_background=True, dpi=200,
                                  show_and_save=save_status, verbose=True)
