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

from enum import Enum, IntFlag

class eos_method(Enum):  # Real gas equation of state
    RK2 = 2
    PR = 3
    NG_GOST = 4

class state_phase(Enum):  # Phase of a gas state
    GAS = 0
    LIQUID = 1
    LIQ_STEAM = 2
    SCF = 3
    NOT_SET = 4

class mix_method(Enum):  # Pseudo-critical averaging rule for gas mixtures
    DEFAULT = 0
    RK2 = 1
    PRAUSNITZ_GUNN = 2

class dyn_setup(IntFlag):  # Dynamic parameters derived by a model rather than supplied
    NONE = 0
    HEAT_CAP_VOL = 0x01
    HEAT_CAP_PRES = 0x02
    INTERNAL_ENERGY = 0x04
    BETA = 0x08
    MASK = 0x0F

class gas_t(Enum):  # Natural gas components, in ISO 20765 table order
    METHANE = 0
    NITROGEN = 1
    CARBON_DIOXIDE = 2
    ETHANE = 3
    PROPANE = 4
    WATER = 5
    HYDROGEN_SULFIDE = 6
    HYDROGEN = 7
    CARBON_MONOXIDE = 8
    OXYGEN = 9
    ISO_BUTANE = 10
    N_BUTANE = 11
    ISO_PENTANE = 12
    N_PENTANE = 13
    HEXANE = 14
    HEPTANE = 15
    OCTANE = 16
    NONANE = 17
    DECANE = 18
    HELIUM = 19
    ARGON = 20

class_dic = {
    "eos": eos_method,
    "mixmethod": mix_method,
    "gas": gas_t,
}
