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

import math
from dataclasses import dataclass, field, replace
from typing import List, NamedTuple, Optional, Iterator

import numpy as np
import pandas as pd
from tabulate import tabulate

from pyrealgas.classes import state_phase, dyn_setup
from pyrealgas.constants import GAS_CONSTANT, GASMIX_PERCENT_AVR, GASMIX_PERCENT_EPS
from pyrealgas.errors import InitError, ERR_INIT_T, ERR_INIT_ZERO_ST, ERR_INIT_NULLP_ST, ERR_GAS_MIX

# =============================================================================
# Gas state
# =============================================================================
@dataclass(frozen=True)
class Parameters:
    """ Current state of a gas """
    volume: float       # Specific volume (m³/kg)
    pressure: float     # Pa
    temperature: float  # K


@dataclass(frozen=True)
class ConstParameters:
    """ Critical point and other constant properties of a gas or a pseudo-component """
    V_K: float            # Critical volume (m³/kg)
    P_K: float            # Critical pressure (Pa)
    T_K: float            # Critical temperature (K)
    molecularmass: float  # kg/mol
    acentricfactor: float
    name: str = ""
    R: float = field(init=False)    # Specific gas constant, J/(kg·K)
    Z_K: float = field(init=False)  # Critical compressibility factor

    def __post_init__(self):
        object.__setattr__(self, 'R', GAS_CONSTANT / self.molecularmass)
        object.__setattr__(self, 'Z_K', self.P_K * self.V_K / (self.R * self.T_K))

    @classmethod
    def init(cls, vk: float, pk: float, tk: float, mw: float, acentric: float, name: str = "") -> "ConstParameters":
        """ Validated constructor. All critical values and molar mass must be strictly positive
            vk: Critical volume (m³/kg)
            pk: Critical pressure (Pa)
            tk: Critical temperature (K)
            mw: Molar mass (kg/mol)
            acentric: Acentric factor. Can be negative (eg. hydrogen, helium) but must be finite
        """
        values = [vk, pk, tk, mw]
        if not all(math.isfinite(x) and x > 0 for x in values):
            raise InitError(f"Non-positive constant parameters for '{name}': V_K={vk}, P_K={pk}, T_K={tk}, M={mw}",
                            ERR_INIT_T | ERR_INIT_ZERO_ST)
        if not math.isfinite(acentric):
            raise InitError(f"Acentric factor of '{name}' is not finite", ERR_INIT_T)
        return cls(float(vk), float(pk), float(tk), float(mw), float(acentric), name)


@dataclass
class DynParameters:
    """ Heat capacities, internal energy and expansion coefficient at state 'parm'.
        Values are moved between states incrementally by a model's update_dyn_params()
    """
    heat_cap_vol: float     # cv, J/(kg·K)
    heat_cap_pres: float    # cp, J/(kg·K)
    internal_energy: float  # J/kg
    parm: Parameters
    beta_kr: float = 0.0    # (1/v)·(dv/dT)p, 1/K
    setup: dyn_setup = dyn_setup.NONE

    @classmethod
    def init(cls, cv: float, cp: float, u: float, parm: Parameters, setup: dyn_setup = dyn_setup.NONE) -> "DynParameters":
        """ Validated constructor. A volume of zero in 'parm' requests that the model derives it """
        if not (cv > 0 and cp > 0 and cp >= cv):
            raise InitError(f"Invalid heat capacities cv={cv}, cp={cp}", ERR_INIT_T | ERR_INIT_ZERO_ST)
        if not math.isfinite(u):
            raise InitError(f"Internal energy is not finite: {u}", ERR_INIT_T)
        if not (parm.pressure > 0 and parm.temperature > 0 and parm.volume >= 0):
            raise InitError(f"Invalid baseline state {parm}", ERR_INIT_T | ERR_INIT_ZERO_ST)
        return cls(float(cv), float(cp), float(u), parm, 0.0, setup)

    def copy(self, **changes) -> "DynParameters":
        return replace(self, **changes)


# =============================================================================
# Gas mixtures
# =============================================================================
class MixComponent(NamedTuple):
    fraction: float
    const: ConstParameters
    dyn: DynParameters


class ComponentMix:
    """ Ordered collection of (mole fraction, ConstParameters, DynParameters)
        Mole fractions must sum to 1 within GASMIX_PERCENT_EPS
    """
    def __init__(self, components: List[MixComponent]):
        self.components = components

    @classmethod
    def init(cls, components) -> "ComponentMix":
        if not components:
            raise InitError("Gas mixture has no components", ERR_INIT_T | ERR_INIT_NULLP_ST | ERR_GAS_MIX)
        comps = [MixComponent(*c) for c in components]
        for c in comps:
            if not (c.fraction > 0):
                raise InitError(f"Non-positive mole fraction {c.fraction} for '{c.const.name}'",
                                ERR_INIT_T | ERR_INIT_ZERO_ST | ERR_GAS_MIX)
        parts_sum = sum(c.fraction for c in comps)
        if not (GASMIX_PERCENT_AVR - GASMIX_PERCENT_EPS <= parts_sum <= GASMIX_PERCENT_AVR + GASMIX_PERCENT_EPS):
            raise InitError(f"gasmix sum of parts != 100%: {parts_sum}", ERR_INIT_T | ERR_GAS_MIX)
        return cls(comps)

    def fractions(self) -> np.ndarray:
        return np.array([c.fraction for c in self.components])

    def __iter__(self) -> Iterator[MixComponent]:
        return iter(self.components)

    def __len__(self):
        return len(self.components)

    def __getitem__(self, i):
        return self.components[i]


# =============================================================================
# Binodal curve
# =============================================================================
@dataclass
class BinodalPoints:
    """ Points of the liquid-vapour coexistence curve, ordered from the critical point down.
        Cached curves are reduced (dimensionless); copies handed to callers are scaled
    """
    t: List[float]
    p: List[float]
    vLeft: List[float]   # Liquid branch
    vRight: List[float]  # Vapour branch
    hLeft: Optional[List[float]] = None
    hRight: Optional[List[float]] = None

    def scaled(self, vk: float, pk: float, tk: float) -> "BinodalPoints":
        return BinodalPoints(
            t=[x * tk for x in self.t],
            p=[x * pk for x in self.p],
            vLeft=[x * vk for x in self.vLeft],
            vRight=[x * vk for x in self.vRight],
        )

    def copy(self) -> "BinodalPoints":
        return BinodalPoints(list(self.t), list(self.p), list(self.vLeft), list(self.vRight),
                             None if self.hLeft is None else list(self.hLeft),
                             None if self.hRight is None else list(self.hRight))

    def to_dataframe(self) -> pd.DataFrame:
        df = pd.DataFrame({'T': self.t, 'P': self.p, 'vLeft': self.vLeft, 'vRight': self.vRight})
        if self.hLeft is not None:
            df['hLeft'] = self.hLeft
            df['hRight'] = self.hRight
        return df

    def __len__(self):
        return len(self.t)

    def __str__(self):
        return tabulate(self.to_dataframe(), headers='keys', showindex=False, floatfmt='.5g')


# =============================================================================
# Text output
# =============================================================================
STATE_PHASE_NAMES = {
    state_phase.GAS: "GAS",
    state_phase.LIQUID: "LIQUID",
    state_phase.LIQ_STEAM: "LIQ_STEAM",
    state_phase.SCF: "SCF",
    state_phase.NOT_SET: "NOT_SET",
}

class StateLog(NamedTuple):
    dyn: DynParameters
    enthalpy: float
    phase: str

def state_log(dyn: DynParameters, phase: state_phase) -> StateLog:
    prs = dyn.parm
    return StateLog(dyn, dyn.internal_energy + prs.pressure * prs.volume, STATE_PHASE_NAMES[phase])

def parameters_string(dyn: DynParameters) -> str:
    prs = dyn.parm
    return "%12.1f %8.4f %8.2f %8.2f %8.2f %8.2f %8.2f\n" % (
        prs.pressure, prs.volume, 1.0 / prs.volume, prs.temperature,
        dyn.heat_cap_vol, dyn.heat_cap_pres, dyn.internal_energy)

def parameters_string_head() -> str:
    return "   pressure    volume   density  temperat   cv       cp       u\n"

def const_parameters_string(cp: ConstParameters) -> str:
    return ("  Critical pnt: p=%12.1f; v=%8.4f; t=%8.2f\n"
            "  Others: mol_m=%6.3f R=%8.3f ac_f=%6.4f\n") % (
        cp.P_K, cp.V_K, cp.T_K, cp.molecularmass, cp.R, cp.acentricfactor)

def states_table(logs: List[StateLog]) -> str:
    """ Returns a table of several logged states """
    rows = [[s.dyn.parm.pressure, s.dyn.parm.volume, s.dyn.parm.temperature, s.dyn.heat_cap_vol,
             s.dyn.heat_cap_pres, s.dyn.internal_energy, s.enthalpy, s.phase] for s in logs]
    return tabulate(rows, headers=['p', 'v', 't', 'cv', 'cp', 'u', 'h', 'phase'], floatfmt='.6g')
