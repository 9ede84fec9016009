# SPDX-FileCopyrightText: Copyright 2026, Siavash Ameli <sameli@berkeley.edu>
# SPDX-License-Identifier: BSD-3-Clause
# SPDX-FileType: SOURCE
#
# This program is free software: you can redistribute it and/or modify it
# under the terms of the license found in the LICENSE.txt file in the root
# directory of this source tree.

from ._analytical import linear_root, quadratic_roots, cubic_roots, \
    quartic_roots
from ._durand_kerner import durand_kerner
from ._jenkins_traub import jenkins_traub
from ._util import distinct_roots
from ._synthetic_division import synthetic_division
from ._poly_util import poly_eval, poly_eval_with_derivative, \
    poly_derivative, poly_scale
from ._root_finders import bisection, newton
from ._errors import ConvergenceError
from . import visualization

__all__ = ['linear_root', 'quadratic_roots', 'cubic_roots', 'quartic_roots',
           'durand_kerner', 'jenkins_traub', 'distinct_roots',
           'synthetic_division', 'poly_eval', 'poly_eval_with_derivative',
           'poly_derivative', 'poly_scale', 'bisection', 'newton',
           'ConvergenceError', 'visualization']

from .__version__ import __version__                          # noqa: F401 E402
