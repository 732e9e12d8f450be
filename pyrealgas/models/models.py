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
import math
from dataclasses import replace
from typing import List, NamedTuple, Optional

from scipy.optimize import brentq

from pyrealgas.classes import eos_method, state_phase, dyn_setup
from pyrealgas.config import calculation_configuration
from pyrealgas.constants import (BINODAL_TEMPERATURES, RK2_OMEGA_A, RK2_OMEGA_B, RK2_ZC, PR_OMEGA_A, PR_OMEGA_B,
                                 PR_ZC, GOST_P_MIN, GOST_P_MAX)
from pyrealgas.errors import (RealGasError, InitError, CalculationError, ErrorWrap, ERR_INIT_T, ERR_INIT_NULLP_ST,
                              ERR_CALCULATE_T, ERR_CALC_GAS_P_ST, ERR_CALC_MODEL_ST, ERR_CALC_PHASE_ST, ERR_GAS_MIX)
from pyrealgas.mix import average_params_mix, mix_dyn_params, mix_method_for
from pyrealgas.ng_gost import NgGostMix, GostState, is_valid_state
from pyrealgas.parameters import (Parameters, ConstParameters, DynParameters, ComponentMix, BinodalPoints, StateLog,
                                  state_log, parameters_string, const_parameters_string)
from pyrealgas.phase_diagram import (PhaseDiagram, default_phase_diagram, classify_phase, branch_volumes,
                                     saturation_pressure)
from pyrealgas.shared_fns import cubic_roots, is_above0
from pyrealgas.validate import validate_methods

logger = logging.getLogger(__name__)


class ModelStr(NamedTuple):
    model_type: eos_method
    vers_major: int
    vers_minor: int
    short_info: str


# =============================================================================
# EOS coefficients
# =============================================================================
class RK2Coefs(NamedTuple):
    a: float
    b: float

class PRCoefs(NamedTuple):
    a: float
    b: float
    m: float  # Alpha function slope

def rk2_coefs(cp: ConstParameters) -> RK2Coefs:
    """ Redlich-Kwong a & b of a gas with critical point cp """
    return RK2Coefs(RK2_OMEGA_A * cp.R**2 * cp.T_K**2.5 / cp.P_K, RK2_OMEGA_B * cp.R * cp.T_K / cp.P_K)

def pr_coefs(cp: ConstParameters) -> PRCoefs:
    """ Peng-Robinson a, b & alpha slope m of a gas with critical point cp """
    w = cp.acentricfactor
    return PRCoefs(PR_OMEGA_A * (cp.R * cp.T_K)**2 / cp.P_K, PR_OMEGA_B * cp.R * cp.T_K / cp.P_K,
                   0.37464 + 1.54226 * w - 0.26992 * w**2)

def pr_alpha(t: float, cp: ConstParameters, m: float):
    """ Returns alpha(T) and its first two temperature derivatives """
    s = 1 + m * (1 - math.sqrt(t / cp.T_K))
    alpha = s * s
    d_alpha = -m * s / math.sqrt(t * cp.T_K)
    d2_alpha = m * m / (2 * t * cp.T_K) + m * s / (2 * t**1.5 * math.sqrt(cp.T_K))
    return alpha, d_alpha, d2_alpha


# =============================================================================
# Models
# =============================================================================
class ModelGeneral:
    """
    Real gas model holding one live state (and the previous one) of a gas or gas mixture.

    Cubic equations of state implement pressure(), volume_coefs(), covolume(), the two partial
    derivatives of pressure and the isothermal integrals of internal energy and cv. Everything
    else (volume inversion, root selection, incremental dynamic parameters, phase) is shared.

    Dynamic parameters are carried along the path of states: every update adds the integrals
    between the previous and the new state, so states must be set in the order they occur.
    """
    model_type: eos_method = None
    model_zc: float = None  # Critical compressibility factor implied by the EOS
    vers_major = 1
    vers_minor = 0
    short_info = ""

    def __init__(self, const: ConstParameters, dyn: DynParameters, phase_diagram: PhaseDiagram = None,
                 components: ComponentMix = None):
        """
        Args:
            const: Critical point of the gas. For a mixture, its pseudo-critical point
            dyn: Baseline dynamic parameters. A volume of zero is derived from pressure & temperature
            phase_diagram: Binodal curve cache. The shared default_phase_diagram() if None
            components: Gas mixture calculated component by component. None for a single gas
        """
        self.const_params = const
        self.phase_diagram = phase_diagram if phase_diagram is not None else default_phase_diagram()
        self.components = components
        self.error = ErrorWrap()
        self.bp = self._binodal(const)
        self.prev_parameters: Optional[Parameters] = None
        self.component_dyns: Optional[List[DynParameters]] = None

        p, t = dyn.parm.pressure, dyn.parm.temperature
        if components is None:
            self.dyn_params = self._initial_dyn(dyn, const)
        else:
            v = dyn.parm.volume if dyn.parm.volume > 0 else self.get_volume(p, t)
            start = Parameters(v, p, t)
            self.component_dyns = [self.update_dyn_params(self._initial_dyn(c.dyn, c.const), start, c.const)
                                   for c in components]
            self.dyn_params = mix_dyn_params(components.fractions(), self.component_dyns, start)
        self.parameters = self.dyn_params.parm
        self.phase = self.classify(self.parameters.volume, p, t)
        if not self.is_valid():
            logger.warning(f"{self.model_type.name}: initial state {self.parameters} is outside of the valid range")

    def _initial_dyn(self, dyn: DynParameters, cp: ConstParameters) -> DynParameters:
        prs = dyn.parm
        v = prs.volume if prs.volume > 0 else self.init_volume(prs.pressure, prs.temperature, cp)
        return dyn.copy(parm=Parameters(v, prs.pressure, prs.temperature),
                        beta_kr=self.beta(v, prs.temperature, cp), setup=dyn.setup | dyn_setup.BETA)

    # =========================================================================
    # Phase
    # =========================================================================
    def _phase_cp(self, cp: ConstParameters) -> ConstParameters:
        # Critical point with the volume implied by the EOS, against which its binodal is scaled
        return replace(cp, V_K=self.model_zc * cp.R * cp.T_K / cp.P_K)

    def _binodal(self, cp: ConstParameters) -> Optional[BinodalPoints]:
        pcp = self._phase_cp(cp)
        try:
            return self.phase_diagram.get_binodal_points_cp(pcp, self.model_type)
        except RealGasError as e:
            logger.warning(f"{self.model_type.name}: no binodal curve for '{cp.name}', phase not set. {e.msg}")
            self.error.set_error(ERR_CALCULATE_T | ERR_CALC_PHASE_ST, e.msg)
            return None

    def classify(self, v: float, p: float, t: float, cp: ConstParameters = None) -> state_phase:
        if cp is None or cp is self.const_params:
            return classify_phase(v, p, t, self._phase_cp(self.const_params), self.bp)
        return classify_phase(v, p, t, self._phase_cp(cp), self._binodal(cp))

    # =========================================================================
    # Equation of state, implemented by each model
    # =========================================================================
    def pressure(self, v: float, t: float, cp: ConstParameters) -> float:
        raise NotImplementedError

    def volume_coefs(self, p: float, t: float, cp: ConstParameters) -> List[float]:
        raise NotImplementedError

    def covolume(self, cp: ConstParameters) -> float:
        raise NotImplementedError

    def dp_dt(self, v: float, t: float, cp: ConstParameters) -> float:
        raise NotImplementedError

    def dp_dv(self, v: float, t: float, cp: ConstParameters) -> float:
        raise NotImplementedError

    def internal_energy_integral(self, v_new: float, v_old: float, t: float, cp: ConstParameters) -> float:
        """ Integral of (dU/dV)_T from v_old to v_new """
        raise NotImplementedError

    def heat_capac_vol_integral(self, v_new: float, v_old: float, t: float, cp: ConstParameters) -> float:
        """ Integral of (dCv/dV)_T from v_old to v_new """
        raise NotImplementedError

    def heat_capac_dif_prs_vol(self, v: float, t: float, cp: ConstParameters) -> float:
        """ cp - cv = -T·(dp/dT)v² / (dp/dv)T """
        return -t * self.dp_dt(v, t, cp)**2 / self.dp_dv(v, t, cp)

    def beta(self, v: float, t: float, cp: ConstParameters) -> float:
        """ Volume expansion coefficient (1/v)·(dv/dT)p """
        return -self.dp_dt(v, t, cp) / (v * self.dp_dv(v, t, cp))

    # =========================================================================
    # Volume & pressure
    # =========================================================================
    def _select_root(self, roots, p: float, t: float, cp: ConstParameters) -> float:
        b = self.covolume(cp)
        roots = [r for r in roots if r > b]
        if not roots:
            raise CalculationError(f"{self.model_type.name}: no physical volume at p={p}, T={t}",
                                   ERR_CALCULATE_T | ERR_CALC_MODEL_ST)
        v_min, v_max = roots[0], roots[-1]
        if len(roots) == 1 or t >= cp.T_K:
            return v_max
        bp = self.bp if cp is self.const_params else self._binodal(cp)
        if bp is None:
            return v_max
        pcp = self._phase_cp(cp)
        is_gas = classify_phase(v_max, p, t, pcp, bp) == state_phase.GAS
        is_liquid = classify_phase(v_min, p, t, pcp, bp) == state_phase.LIQUID
        if is_gas != is_liquid:
            return v_max if is_gas else v_min
        p_sat = saturation_pressure(t, bp)
        if p_sat is not None and p > p_sat:
            return v_min
        return v_max

    def init_volume(self, p: float, t: float, cp: ConstParameters) -> float:
        """ Volume of a gas with critical point cp at pressure p & temperature t. The live state is untouched """
        if not is_above0(p, t):
            raise CalculationError(f"{self.model_type.name}: non-positive pressure or temperature, p={p}, T={t}",
                                   ERR_CALCULATE_T | ERR_CALC_GAS_P_ST)
        roots, _ = cubic_roots(self.volume_coefs(p, t, cp))
        return float(self._select_root(roots, p, t, cp))

    def get_volume(self, p: float, t: float, cp: ConstParameters = None) -> float:
        """ Volume (m³/kg) at pressure p (Pa) & temperature t (K).
            Mixtures calculated component by component return sum(x_i * v_i)
        """
        if cp is not None or self.components is None:
            return self.init_volume(p, t, self.const_params if cp is None else cp)
        return sum(c.fraction * self.init_volume(p, t, c.const) for c in self.components)

    def get_pressure(self, v: float, t: float, cp: ConstParameters = None) -> float:
        """ Pressure (Pa) at volume v (m³/kg) & temperature t (K) """
        if cp is None:
            cp = self.const_params
        if not (is_above0(v, t) and v > self.covolume(cp)):
            raise CalculationError(f"{self.model_type.name}: no pressure for v={v}, T={t}",
                                   ERR_CALCULATE_T | ERR_CALC_GAS_P_ST)
        return self.pressure(v, t, cp)

    # =========================================================================
    # Dynamic parameters
    # =========================================================================
    def update_dyn_params(self, prev: DynParameters, new_state: Parameters,
                          cp: ConstParameters = None) -> DynParameters:
        """ Dynamic parameters at new_state, moved along the isotherm of new_state from prev.
            Returns a new DynParameters, prev is unchanged
        """
        if cp is None:
            cp = self.const_params
        v_new, t = new_state.volume, new_state.temperature
        v_old = prev.parm.volume
        cv = prev.heat_cap_vol + self.heat_capac_vol_integral(v_new, v_old, t, cp)
        return prev.copy(
            heat_cap_vol=cv,
            heat_cap_pres=cv + self.heat_capac_dif_prs_vol(v_new, t, cp),
            internal_energy=prev.internal_energy + self.internal_energy_integral(v_new, v_old, t, cp),
            parm=new_state,
            beta_kr=self.beta(v_new, t, cp),
            setup=prev.setup | dyn_setup.MASK,
        )

    def _set_state(self, new_state: Parameters):
        if self.component_dyns is not None:
            self.component_dyns = [self.update_dyn_params(d, new_state, c.const)
                                   for d, c in zip(self.component_dyns, self.components)]
            self.dyn_params = mix_dyn_params(self.components.fractions(), self.component_dyns, new_state)
        else:
            self.dyn_params = self.update_dyn_params(self.dyn_params, new_state)
        self.prev_parameters = self.parameters
        self.parameters = new_state
        self.phase = self.classify(new_state.volume, new_state.pressure, new_state.temperature)
        if not self.is_valid():
            logger.warning(f"{self.model_type.name}: state {new_state} is outside of the valid range")

    def set_volume(self, p: float, t: float):
        """ Moves the live state to pressure p (Pa) & temperature t (K) """
        self._set_state(Parameters(self.get_volume(p, t), p, t))

    def set_pressure(self, v: float, t: float):
        """ Moves the live state to volume v (m³/kg) & temperature t (K) """
        self._set_state(Parameters(v, self.get_pressure(v, t), t))

    def set_parameters(self, v: float, p: float, t: float):
        """ Moves the live state to (v, p, t) as given, eg. a two phase state at saturation pressure """
        if not is_above0(v, p, t):
            raise CalculationError(f"{self.model_type.name}: non-positive state v={v}, p={p}, T={t}",
                                   ERR_CALCULATE_T | ERR_CALC_GAS_P_ST)
        self._set_state(Parameters(v, p, t))

    def is_valid(self, prs: Parameters = None) -> bool:
        raise NotImplementedError

    # =========================================================================
    # Two phase region
    # =========================================================================
    def vapor_fraction(self) -> float:
        """ Mass fraction of vapour in the live state, by the lever rule inside the binodal curve """
        if self.phase in (state_phase.GAS, state_phase.SCF):
            return 1.0
        if self.phase == state_phase.LIQUID:
            return 0.0
        if self.phase == state_phase.NOT_SET:
            raise CalculationError(f"{self.model_type.name}: phase of the state is not set",
                                   ERR_CALCULATE_T | ERR_CALC_PHASE_ST)
        prs = self.parameters
        volumes = branch_volumes(prs.pressure, self.bp)
        vl, vr = volumes if volumes is not None else (self.bp.vLeft[-1], self.bp.vRight[-1])
        return min(1.0, max(0.0, (prs.volume - vl) / (vr - vl)))

    def set_enthalpy(self) -> BinodalPoints:
        """ Fills the enthalpy of both branches of the binodal curve, h = u + p·v.
            Returns the binodal curve of the model
        """
        if self.bp is None:
            raise CalculationError(f"{self.model_type.name}: no binodal curve", ERR_CALCULATE_T | ERR_CALC_PHASE_ST)
        h_left, h_right = [], []
        for t, p, vl, vr in zip(self.bp.t, self.bp.p, self.bp.vLeft, self.bp.vRight):
            for v, h in ((vl, h_left), (vr, h_right)):
                dyn = self.update_dyn_params(self.dyn_params, Parameters(v, p, t))
                h.append(dyn.internal_energy + p * v)
        self.bp.hLeft = h_left
        self.bp.hRight = h_right
        return self.bp

    # =========================================================================
    # Text output
    # =========================================================================
    def model_str(self) -> ModelStr:
        return ModelStr(self.model_type, self.vers_major, self.vers_minor, self.short_info)

    def parameters_string(self) -> str:
        return parameters_string(self.dyn_params)

    def const_parameters_string(self) -> str:
        return const_parameters_string(self.const_params)

    def state_log(self) -> StateLog:
        return state_log(self.dyn_params, self.phase)

    def __repr__(self):
        return f"{type(self).__name__}({self.const_params.name!r}, {self.parameters}, {self.phase.name})"


class RedlichKwong2(ModelGeneral):
    """ Redlich-Kwong equation of state, p = RT/(v-b) - a/(T^0.5·v·(v+b)) """
    model_type = eos_method.RK2
    model_zc = RK2_ZC
    short_info = "Redlich-Kwong 2 parameter EOS"

    def covolume(self, cp):
        return rk2_coefs(cp).b

    def pressure(self, v, t, cp):
        a, b = rk2_coefs(cp)
        return cp.R * t / (v - b) - a / (math.sqrt(t) * v * (v + b))

    def volume_coefs(self, p, t, cp):
        a, b = rk2_coefs(cp)
        rt = cp.R * t
        return [1.0, -rt / p, a / (p * math.sqrt(t)) - rt * b / p - b * b, -a * b / (p * math.sqrt(t))]

    def dp_dt(self, v, t, cp):
        a, b = rk2_coefs(cp)
        return cp.R / (v - b) + a / (2 * t**1.5 * v * (v + b))

    def dp_dv(self, v, t, cp):
        a, b = rk2_coefs(cp)
        return -cp.R * t / (v - b)**2 + a * (2 * v + b) / (math.sqrt(t) * (v * (v + b))**2)

    @staticmethod
    def _log_ratio(v_new, v_old, b):
        return math.log(v_new * (v_old + b) / (v_old * (v_new + b)))

    def internal_energy_integral(self, v_new, v_old, t, cp):
        a, b = rk2_coefs(cp)
        return 3 * a * self._log_ratio(v_new, v_old, b) / (2 * math.sqrt(t) * b)

    def heat_capac_vol_integral(self, v_new, v_old, t, cp):
        a, b = rk2_coefs(cp)
        return -3 * a * self._log_ratio(v_new, v_old, b) / (4 * t**1.5 * b)

    def is_valid(self, prs: Parameters = None) -> bool:
        """ Redlich-Kwong holds while p/P_K < 0.5·T/T_K """
        prs = self.parameters if prs is None else prs
        cp = self.const_params
        return prs.pressure / cp.P_K < 0.5 * prs.temperature / cp.T_K


class PengRobinson(ModelGeneral):
    """ Peng-Robinson equation of state, p = RT/(v-b) - a·alpha(T)/(v² + 2bv - b²) """
    model_type = eos_method.PR
    model_zc = PR_ZC
    short_info = "Peng-Robinson EOS"

    def covolume(self, cp):
        return pr_coefs(cp).b

    def pressure(self, v, t, cp):
        a, b, m = pr_coefs(cp)
        alpha = pr_alpha(t, cp, m)[0]
        return cp.R * t / (v - b) - a * alpha / (v * v + 2 * b * v - b * b)

    def volume_coefs(self, p, t, cp):
        a, b, m = pr_coefs(cp)
        aa = a * pr_alpha(t, cp, m)[0]
        rt = cp.R * t
        return [1.0, b - rt / p, aa / p - 3 * b * b - 2 * b * rt / p, b**3 + b * b * rt / p - aa * b / p]

    def dp_dt(self, v, t, cp):
        a, b, m = pr_coefs(cp)
        d_alpha = pr_alpha(t, cp, m)[1]
        return cp.R / (v - b) - a * d_alpha / (v * v + 2 * b * v - b * b)

    def dp_dv(self, v, t, cp):
        a, b, m = pr_coefs(cp)
        alpha = pr_alpha(t, cp, m)[0]
        return -cp.R * t / (v - b)**2 + a * alpha * (2 * v + 2 * b) / (v * v + 2 * b * v - b * b)**2

    @staticmethod
    def _log_term(v_new, v_old, b):
        # Integral of 1/(v² + 2bv - b²) times 2·sqrt(2)·b
        r1, r2 = b * (math.sqrt(2) - 1), -b * (1 + math.sqrt(2))
        return math.log((v_new - r1) / (v_new - r2)) - math.log((v_old - r1) / (v_old - r2))

    def internal_energy_integral(self, v_new, v_old, t, cp):
        a, b, m = pr_coefs(cp)
        alpha, d_alpha, _ = pr_alpha(t, cp, m)
        return a * (alpha - t * d_alpha) / (2 * math.sqrt(2) * b) * self._log_term(v_new, v_old, b)

    def heat_capac_vol_integral(self, v_new, v_old, t, cp):
        a, b, m = pr_coefs(cp)
        d2_alpha = pr_alpha(t, cp, m)[2]
        return -t * a * d2_alpha / (2 * math.sqrt(2) * b) * self._log_term(v_new, v_old, b)

    def is_valid(self, prs: Parameters = None) -> bool:
        """ Peng-Robinson states are valid down to the coldest point of the binodal curve, with a known phase """
        prs = self.parameters if prs is None else prs
        if prs.temperature / self.const_params.T_K < BINODAL_TEMPERATURES[-1]:
            return False
        phase = self.phase if prs is self.parameters else self.classify(prs.volume, prs.pressure, prs.temperature)
        return phase != state_phase.NOT_SET


class NgGost(ModelGeneral):
    """ Natural gas by GOST 30319.3-2015. Phase is classified on the Peng-Robinson binodal curve
        of the pseudo-critical point
    """
    model_type = eos_method.NG_GOST
    short_info = "GOST 30319.3-2015 natural gas"

    def __init__(self, ng: NgGostMix, p: float, t: float, phase_diagram: PhaseDiagram = None):
        """
        Args:
            ng: Natural gas composition and coefficients
            p: Initial pressure (Pa)
            t: Initial temperature (K)
            phase_diagram: Binodal curve cache
        """
        self.ng = ng
        self.state: GostState = ng.calculate(p, t)
        s = self.state
        dyn = DynParameters(s.heat_cap_vol, s.heat_cap_pres, s.internal_energy, Parameters(s.volume, p, t),
                            s.beta_kr, dyn_setup.MASK)
        super().__init__(ng.const_params, dyn, phase_diagram)

    def _initial_dyn(self, dyn, cp):
        return dyn

    def _phase_cp(self, cp):
        return cp

    def init_volume(self, p, t, cp=None):
        return self.ng.volume(p, t)

    def get_volume(self, p, t, cp=None):
        return self.ng.volume(p, t)

    def get_pressure(self, v, t, cp=None):
        """ Pressure (Pa) at volume v & temperature t, searched within the GOST pressure range """
        def f(p):
            return self.ng.volume(p, t) - v
        if not (is_above0(v, t) and f(GOST_P_MIN) >= 0 >= f(GOST_P_MAX)):
            raise CalculationError(f"NG_GOST: v={v} at T={t} is outside of the pressure range",
                                   ERR_CALCULATE_T | ERR_CALC_GAS_P_ST)
        return brentq(f, GOST_P_MIN, GOST_P_MAX)

    def update_dyn_params(self, prev, new_state, cp=None):
        """ GOST properties are absolute, prev only carries the setup flags """
        s = self.ng.calculate(new_state.pressure, new_state.temperature)
        self.state = s
        return prev.copy(heat_cap_vol=s.heat_cap_vol, heat_cap_pres=s.heat_cap_pres,
                         internal_energy=s.internal_energy, parm=new_state, beta_kr=s.beta_kr,
                         setup=prev.setup | dyn_setup.MASK)

    def set_pressure(self, v, t):
        p = self.get_pressure(v, t)
        # Volume of the converged density, so the state is consistent with the correlation
        self._set_state(Parameters(self.ng.volume(p, t), p, t))

    def set_enthalpy(self):
        raise CalculationError("NG_GOST: the binodal curve lies outside of the GOST temperature range",
                               ERR_CALCULATE_T | ERR_CALC_MODEL_ST)

    def is_valid(self, prs: Parameters = None) -> bool:
        prs = self.parameters if prs is None else prs
        return is_valid_state(prs.pressure, prs.temperature)

    def sound_speed(self) -> float:
        return self.state.sound_speed

    def isentropic_exponent(self) -> float:
        return self.state.k

    def z(self) -> float:
        return self.state.z


MODELS = {
    eos_method.RK2: RedlichKwong2,
    eos_method.PR: PengRobinson,
    eos_method.NG_GOST: NgGost,
}


# =============================================================================
# Factory
# =============================================================================
def _start_dyn(components: ComponentMix, dyn: Optional[DynParameters]) -> DynParameters:
    # Mixture baseline: the given dyn, else the fraction weighted component baselines at the first one's state
    if dyn is not None:
        return dyn
    parm = components[0].dyn.parm
    return mix_dyn_params(components.fractions(), [c.dyn for c in components], Parameters(0.0, parm.pressure, parm.temperature))

def create_model(eos, gas, dyn: DynParameters = None, p: float = None, t: float = None,
                 phase_diagram: PhaseDiagram = None, config: calculation_configuration = None,
                 error: ErrorWrap = None) -> Optional[ModelGeneral]:
    """ Builds a real gas model. Returns None on failure, with the reason in 'error'

        eos: Equation of state. eos_method or its name ('RK2', 'PR', 'NG_GOST')
        gas: ConstParameters of a single gas, ComponentMix of a gas mixture.
             For NG_GOST a NgGostMix, or a composition {gas_t or name: mole fraction}
        dyn: Baseline DynParameters. For a ComponentMix, defaults to the averaged component baselines.
             Not used by NG_GOST
        p: Initial pressure (Pa), NG_GOST only. Taken from dyn if None
        t: Initial temperature (K), NG_GOST only. Taken from dyn if None
        phase_diagram: Binodal curve cache shared by models. default_phase_diagram() if None
        config: calculation_configuration. 'pseudocritic' selects between averaging a mixture once (True)
                or calculating it component by component (False)
        error: ErrorWrap filled on failure
    """
    if config is None:
        config = calculation_configuration()
    if error is None:
        error = ErrorWrap()
    try:
        eos = validate_methods(["eos"], [eos])
        if gas is None:
            raise InitError("No gas given", ERR_INIT_T | ERR_INIT_NULLP_ST)
        if eos == eos_method.NG_GOST:
            ng = gas if isinstance(gas, NgGostMix) else NgGostMix.init(gas, config, error)
            if ng is None:
                return None
            if p is None or t is None:
                if dyn is None:
                    raise InitError("NG_GOST needs an initial pressure & temperature", ERR_INIT_T | ERR_INIT_NULLP_ST)
                p, t = dyn.parm.pressure, dyn.parm.temperature
            model = NgGost(ng, p, t, phase_diagram)
        elif isinstance(gas, ComponentMix):
            cp = average_params_mix(gas, mix_method_for(eos))
            start = _start_dyn(gas, dyn)
            if config.pseudocritic:
                model = MODELS[eos](cp, start, phase_diagram)
            else:
                model = MODELS[eos](cp, start, phase_diagram, components=gas)
        else:
            if dyn is None:
                raise InitError("No baseline dynamic parameters given", ERR_INIT_T | ERR_INIT_NULLP_ST)
            model = MODELS[eos](gas, dyn, phase_diagram)
    except RealGasError as e:
        if isinstance(gas, ComponentMix):
            e.code |= ERR_GAS_MIX
        error.set_from(e)
        logger.warning(f"model was not created: {e.msg}")
        if config.is_debug():
            logger.debug("model creation failure", exc_info=True)
        return None
    logger.debug(f"created {model!r}")
    return model
