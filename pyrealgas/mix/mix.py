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

import logging
from typing import List

import numpy as np

from pyrealgas.classes import mix_method, eos_method, dyn_setup
from pyrealgas.constants import GAS_CONSTANT
from pyrealgas.errors import InitError, GasMixError, ERR_INIT_T, ERR_INIT_ZERO_ST, ERR_INIT_NULLP_ST, ERR_GAS_MIX
from pyrealgas.parameters import ConstParameters, DynParameters, ComponentMix, Parameters
from pyrealgas.validate import validate_methods

logger = logging.getLogger(__name__)

# Averaging rules follow 'The Properties of Gases and Liquids', Reid, Prausnitz & Sherwood (ch. 4.2-4.3)

def mix_method_for(eos) -> mix_method:
    """ Averaging rule consistent with an equation of state's own mixing rule """
    eos = validate_methods(["eos"], [eos])
    if eos == eos_method.RK2:
        return mix_method.RK2
    return mix_method.DEFAULT

def _check_components(components: ComponentMix):
    if components is None or len(components) == 0:
        raise InitError("Gas mixture has no components", ERR_INIT_T | ERR_INIT_NULLP_ST | ERR_GAS_MIX)
    for c in components:
        cp = c.const
        if not (c.fraction > 0):
            raise InitError(f"Non-positive mole fraction for '{cp.name}'", ERR_INIT_T | ERR_INIT_ZERO_ST | ERR_GAS_MIX)
        if not all(x > 0 for x in [cp.V_K, cp.P_K, cp.T_K, cp.molecularmass]):
            raise InitError(f"Non-positive critical parameters for '{cp.name}'", ERR_INIT_T | ERR_INIT_ZERO_ST | ERR_GAS_MIX)

def _rk2_sums(x, tk, pk):
    num = np.sum(x * np.sqrt(tk**2.5 / pk))
    den = np.sum(x * tk / pk)
    return num, den

def average_params(components: ComponentMix, method=mix_method.DEFAULT) -> ConstParameters:
    """ Returns pseudo-critical ConstParameters of a gas mixture.
        components: ComponentMix of (fraction, ConstParameters, DynParameters)
        method: Averaging rule
                'DEFAULT' Linear mole fraction average of V_K, P_K, T_K & molar mass.
                          Acentric factor is averaged geometrically, prod(w_i ** x_i)
                'RK2' Critical temperature & pressure consistent with the 2 parameter Redlich-Kwong mixing rule
                'PRAUSNITZ_GUNN' Linear T_K, with P_K = R·sum(x·Z_K)·T_K / sum(x·V_K)
        Raises InitError on empty mixtures or non-positive values
    """
    method = validate_methods(["mixmethod"], [method])
    _check_components(components)
    x = np.array([c.fraction for c in components])
    vk = np.array([c.const.V_K for c in components])
    pk = np.array([c.const.P_K for c in components])
    tk = np.array([c.const.T_K for c in components])
    mw = np.array([c.const.molecularmass for c in components])
    acf = np.array([c.const.acentricfactor for c in components])

    mw_avg = np.sum(x * mw)
    vk_avg = np.sum(x * vk)
    if method == mix_method.RK2:
        num, den = _rk2_sums(x, tk, pk)
        tk_avg = num**(4 / 3) / den**(2 / 3)
        pk_avg = num**(4 / 3) / den**(5 / 3)
        acf_avg = np.sum(x * acf)
    elif method == mix_method.PRAUSNITZ_GUNN:
        zk = np.array([c.const.Z_K for c in components])
        tk_avg = np.sum(x * tk)
        pk_avg = (GAS_CONSTANT / mw_avg) * np.sum(x * zk) * tk_avg / vk_avg
        acf_avg = np.sum(x * acf)
    else:
        tk_avg = np.sum(x * tk)
        pk_avg = np.sum(x * pk)
        if np.all(acf > 0):
            acf_avg = np.prod(acf**x)
        else:  # Geometric mean is undefined, fall back on the linear one
            logger.debug("non-positive acentric factor in mixture, averaging linearly")
            acf_avg = np.sum(x * acf)
    return ConstParameters.init(float(vk_avg), float(pk_avg), float(tk_avg), float(mw_avg), float(acf_avg), name="mix")

def average_params_mix(components: ComponentMix, method=mix_method.DEFAULT) -> ConstParameters:
    """ average_params() with failures reported as GasMixError """
    try:
        return average_params(components, method)
    except InitError as e:
        raise GasMixError(f"gas mixture averaging failed: {e.msg}", e.code | ERR_GAS_MIX) from e

def mix_dyn_params(fractions, dyns: List[DynParameters], parm: Parameters) -> DynParameters:
    """ Mole fraction weighted sum of component dynamic parameters at state 'parm' """
    x = np.asarray(fractions, dtype=float)
    setup = dyn_setup.MASK
    for d in dyns:
        setup &= d.setup
    return DynParameters(
        heat_cap_vol=float(np.sum(x * [d.heat_cap_vol for d in dyns])),
        heat_cap_pres=float(np.sum(x * [d.heat_cap_pres for d in dyns])),
        internal_energy=float(np.sum(x * [d.internal_energy for d in dyns])),
        parm=parm,
        beta_kr=float(np.sum(x * [d.beta_kr for d in dyns])),
        setup=setup,
    )
