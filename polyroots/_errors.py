# SPDX-FileCopyrightText: Copyright 2026, Siavash Ameli <sameli@berkeley.edu>
# SPDX-License-Identifier: BSD-3-Clause
# SPDX-FileType: SOURCE
#
# This program is free software: you can redistribute it and/or modify it under
# the terms of the license found in the LICENSE.txt file in the root directory
# of this source tree.

__all__ = ['ConvergenceError']


# =================
# Convergence Error
# =================

class ConvergenceError(RuntimeError):
    """
    Raised when an iterative solver exhausts all of its attempts without
    finding a root.
    """

    pass
