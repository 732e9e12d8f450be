#!/usr/bin/python3
# -*- coding: utf-8 -*-

"""
    pyRealGas - Real gas equations of state and phase diagrams
              Copyright (C) 2022, Mark Burgoyne

    This program is free software: you can redistribute it and/or modify
    it under the terms of the GNU General Public License as published by
    the Free Software Foundation, either version 3 of the License, or
    (at your option) any later version.

    This program is distributed in the hope that it will be useful,
    but WITHOUT ANY WARRANTY; without even the implied warranty of
    MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
    GNU General Public License for more details.

    The GNU General Public License can be found in the LICENSE directory,
    and at  <https://www.gnu.org/licenses/>.

          Contact author at mark.w.burgoyne@gmail.com
"""

import numpy as np
import numpy.typing as npt
from typing import Tuple

from pyrealgas.constants import DOUBLE_ACCURACY, CUBIC_RTOL
from pyrealgas.errors import CalculationError, ERR_CALCULATE_T, ERR_CALC_MODEL_ST

def convert_to_numpy(input_data) -> Tuple[np.ndarray, bool]:
    # Convert input data to a numpy array ensuring it is always sizeable
    # Also returns whether the caller passed more than a single value
    is_list = not np.isscalar(input_data) and np.size(input_data) > 1
    return np.atleast_1d(np.asarray(input_data, dtype=float)), is_list

def process_output(values, is_list: bool):
    # Return a float for single value inputs, otherwise a numpy array
    values = np.asarray(values)
    if is_list:
        return values
    return values.item() if values.size == 1 else values

def is_above0(*args) -> bool:
    return all(np.isfinite(x) and x > 0 for x in args)

def cubic_roots(a: npt.ArrayLike) -> Tuple[np.ndarray, bool]:
    """ Analytic solution for real root(s) of cubic polynomial
        a[0] * x**3 + a[1] * x**2 + a[2] * x + a[3] = 0
        Returns (roots, has_unique_root). Roots are sorted ascending; a single real root
        is returned when the discriminant is positive (complex pair discarded), otherwise
        three real roots (possibly repeated) from the trigonometric identity.
        Raises CalculationError for non-finite coefficients or a vanishing cubic term
    """
    a = np.asarray(a, dtype=float)
    if a.size != 4 or not np.all(np.isfinite(a)):
        raise CalculationError(f"cubic solver: invalid coefficients {a}", ERR_CALCULATE_T | ERR_CALC_MODEL_ST)
    if abs(a[0]) < DOUBLE_ACCURACY:
        raise CalculationError("cubic solver: leading coefficient is zero", ERR_CALCULATE_T | ERR_CALC_MODEL_ST)
    if a[0] != 1:
        a = a / a[0]  # Normalize to unity exponent for x^3
    p = (3 * a[2] - a[1]**2) / 3
    q = (2 * a[1]**3 - 9 * a[1] * a[2] + 27 * a[3]) / 27
    root_diagnostic = q**2 / 4 + p**3 / 27

    if abs(p) <= CUBIC_RTOL * a[1]**2 and abs(q) <= CUBIC_RTOL * abs(a[1])**3:  # Triple root
        return np.full(3, -a[1] / 3), False
    # Rounding leaves the discriminant of a double root a little either side of zero
    if root_diagnostic <= CUBIC_RTOL * max(q**2 / 4, abs(p)**3 / 27):
        if p == 0:
            return np.full(3, -a[1] / 3), False
        m = 2 * np.sqrt(-p / 3)
        qpm = np.clip(3 * q / p / m, -1.0, 1.0)
        theta1 = np.arccos(qpm) / 3
        roots = np.array([m * np.cos(theta1), m * np.cos(theta1 + 4 * np.pi / 3), m * np.cos(theta1 + 2 * np.pi / 3)])
        xs = np.sort(roots - a[1] / 3)
        return xs, False

    P = np.cbrt(-q / 2 + np.sqrt(root_diagnostic))
    Q = np.cbrt(-q / 2 - np.sqrt(root_diagnostic))
    return np.array([P + Q - a[1] / 3]), True

def cubic_root(a: npt.ArrayLike, flag: int = 0):
    # Flag = 1 return Max root, = -1 returns minimum root, = 0 returns all real roots
    xs, _ = cubic_roots(a)
    if flag == -1:      # Return minimum root
        return xs[0]
    if flag == 1:       # Return maximum root
        return xs[-1]
    return xs           # Return all roots
