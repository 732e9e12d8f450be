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
import pandas as pd

from pyrealgas.classes import eos_method, dyn_setup
from pyrealgas.constants import P_STANDARD
from pyrealgas.errors import InitError, ErrorWrap, ERR_INIT_T
from pyrealgas.models import MODELS, ModelGeneral
from pyrealgas.ng_gost import NgGostMix
from pyrealgas.parameters import ConstParameters, DynParameters, Parameters, STATE_PHASE_NAMES
from pyrealgas.phase_diagram import PhaseDiagram, default_phase_diagram
from pyrealgas.shared_fns import convert_to_numpy, process_output
from pyrealgas.validate import validate_methods

def _cubic_model(degk: float, vk: float, pk: float, tk: float, mw: float, acf: float, eos, p0: float,
                 phase_diagram: PhaseDiagram = None) -> ModelGeneral:
    # Model with a nominal ideal gas baseline at (p0, degk). Only volumetric properties are used
    eos = validate_methods(["eos"], [eos])
    if eos == eos_method.NG_GOST:
        raise InitError("NG_GOST is defined by composition, use gas_z_ng()", ERR_INIT_T)
    cp = ConstParameters.init(vk, pk, tk, mw, acf)
    dyn = DynParameters.init(1.5 * cp.R, 2.5 * cp.R, 0.0, Parameters(0.0, p0, degk), dyn_setup.NONE)
    return MODELS[eos](cp, dyn, phase_diagram)

def gas_volume(
    p: npt.ArrayLike,
    degk: float,
    vk: float,
    pk: float,
    tk: float,
    mw: float,
    acf: float,
    eos: str = "PR",
) -> np.ndarray:
    """ Returns specific volume (m³/kg). Returning either single float, or numpy array depending upon
        whether single pressure or list/array of pressures has been specified.
        p: Gas pressure (Pa). Takes a single float, 1D list or 1D Numpy array
        degk: Gas temperature (K). Single float only
        vk: Critical volume (m³/kg)
        pk: Critical pressure (Pa)
        tk: Critical temperature (K)
        mw: Molar mass (kg/mol)
        acf: Acentric factor
        eos: Equation of state
             'RK2' Redlich & Kwong (1949), 2 parameter form
             'PR' Peng & Robinson (1976)
             defaults to 'PR' if not specified
    """
    p, is_list = convert_to_numpy(p)
    model = _cubic_model(degk, vk, pk, tk, mw, acf, eos, p[0])
    return process_output([model.get_volume(pi, degk) for pi in p], is_list)

def gas_pressure(
    v: npt.ArrayLike,
    degk: float,
    vk: float,
    pk: float,
    tk: float,
    mw: float,
    acf: float,
    eos: str = "PR",
) -> np.ndarray:
    """ Returns pressure (Pa) at specific volume v (m³/kg). Returning either single float, or numpy array
        depending upon whether single volume or list/array of volumes has been specified.
        Critical properties and eos as for gas_volume()
    """
    v, is_list = convert_to_numpy(v)
    model = _cubic_model(degk, vk, pk, tk, mw, acf, eos, P_STANDARD)
    return process_output([model.get_pressure(vi, degk) for vi in v], is_list)

def gas_z(
    p: npt.ArrayLike,
    degk: float,
    vk: float,
    pk: float,
    tk: float,
    mw: float,
    acf: float,
    eos: str = "PR",
) -> np.ndarray:
    """ Returns real-gas deviation factor (Z = p·v/(R·T)). Returning either single float, or numpy array
        depending upon whether single pressure or list/array of pressures has been specified.
        Inputs as for gas_volume()
    """
    p, is_list = convert_to_numpy(p)
    model = _cubic_model(degk, vk, pk, tk, mw, acf, eos, p[0])
    rt = model.const_params.R * degk
    return process_output([pi * model.get_volume(pi, degk) / rt for pi in p], is_list)

def gas_phase(
    p: npt.ArrayLike,
    degk: float,
    vk: float,
    pk: float,
    tk: float,
    mw: float,
    acf: float,
    eos: str = "PR",
):
    """ Returns the phase name ('GAS', 'LIQUID', 'LIQ_STEAM', 'SCF' or 'NOT_SET') of the state at
        pressure p (Pa) & temperature degk (K). A single string, or a list for list/array input
        Inputs as for gas_volume()
    """
    p, is_list = convert_to_numpy(p)
    model = _cubic_model(degk, vk, pk, tk, mw, acf, eos, p[0])
    phases = [STATE_PHASE_NAMES[model.classify(model.get_volume(pi, degk), pi, degk)] for pi in p]
    return phases if is_list else phases[0]

def gas_binodal(
    vk: float,
    pk: float,
    tk: float,
    acf: float,
    eos: str = "PR",
    phase_diagram: PhaseDiagram = None,
) -> pd.DataFrame:
    """ Returns the binodal (liquid-vapour coexistence) curve as a DataFrame with columns
        T (K), P (Pa), vLeft & vRight (m³/kg), from the critical point down to T = 0.5·tk
        vk: Critical volume (m³/kg)
        pk: Critical pressure (Pa)
        tk: Critical temperature (K)
        acf: Acentric factor, must be positive
        eos: 'RK2' or 'PR'. Defaults to 'PR'
        phase_diagram: Binodal curve cache. Defaults to the shared one
    """
    if phase_diagram is None:
        phase_diagram = default_phase_diagram()
    return phase_diagram.get_binodal_points(vk, pk, tk, eos, acf).to_dataframe()

def gas_z_ng(
    p: npt.ArrayLike,
    degk: float,
    composition,
) -> np.ndarray:
    """ Returns natural gas deviation factor (Z) by GOST 30319.3-2015. Returning either single float,
        or numpy array depending upon whether single pressure or list/array of pressures has been specified.
        p: Gas pressure (Pa), 0.1 - 30 MPa. Takes a single float, 1D list or 1D Numpy array
        degk: Gas temperature (K), 250 - 350 K. Single float only
        composition: Mole fractions keyed by component, eg. {'METHANE': 0.98, 'NITROGEN': 0.02}
    """
    p, is_list = convert_to_numpy(p)
    if isinstance(composition, NgGostMix):
        ng = composition
    else:
        error = ErrorWrap()
        ng = NgGostMix.init(composition, error=error)
        if ng is None:
            raise InitError(error.msg, error.code)
    return process_output([ng.z(pi, degk) for pi in p], is_list)
