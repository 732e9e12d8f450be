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


# Constants
GAS_CONSTANT = 8.314462618  # Universal gas constant, J/(mol·K)
GAS_CONSTANT_GOST = 8.31451  # Value used by GOST 30319.3-2015, J/(mol·K)
P_STANDARD = 101325.0  # Pa

FLOAT_ACCURACY = 0.00001
DOUBLE_ACCURACY = 0.000000001
CUBIC_RTOL = 1e-12  # Relative discriminant tolerance of the cubic solver, below it roots are repeated

GASMIX_PERCENT_AVR = 1.0  # Mole fractions must sum to this value
GASMIX_PERCENT_EPS = 0.001  # ...within this tolerance

# Binodal curve construction
BINODAL_TEMPERATURES = [0.97, 0.95, 0.92, 0.9, 0.87, 0.85, 0.8, 0.75, 0.7, 0.6, 0.5]  # Reduced
BINODAL_NEAR_CRITICAL = 4  # Points with index below this use a finer pressure step
BINODAL_MAX_TRIES = 3000
BINODAL_AREA_RTOL = 0.005  # Relative equal-area tolerance of the Maxwell rule
BINODAL_ROOT_EQUAL = 0.0001
BINODAL_UNSOLVED = -1.0
ACENTRIC_KEY_TOL = 0.0001  # Acentric factors closer than this share a cached curve

# Redlich-Kwong (2 parameter)
RK2_OMEGA_A = 0.42748
RK2_OMEGA_B = 0.08664
RK2_ZC = 1.0 / 3.0

# Peng-Robinson
PR_OMEGA_A = 0.45724
PR_OMEGA_B = 0.07780
PR_ZC = 0.307401

# GOST 30319.3-2015 validity envelope
GOST_P_MIN = 100000.0  # Pa
GOST_P_MAX = 30000000.0  # Pa
GOST_T_MIN = 250.0  # K
GOST_T_MAX = 350.0  # K
GOST_MAX_LOOPS = 3000
GOST_SIGMA_RTOL = 0.000001
