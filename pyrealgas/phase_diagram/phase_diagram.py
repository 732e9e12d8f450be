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
import threading
from typing import Dict, Optional, Tuple

import numpy as np
from scipy.integrate import quad

from pyrealgas.classes import eos_method, state_phase
from pyrealgas.constants import (BINODAL_TEMPERATURES, BINODAL_NEAR_CRITICAL, BINODAL_MAX_TRIES, BINODAL_AREA_RTOL,
                                 BINODAL_ROOT_EQUAL, BINODAL_UNSOLVED, ACENTRIC_KEY_TOL,
                                 RK2_OMEGA_A, RK2_OMEGA_B, RK2_ZC, PR_OMEGA_A, PR_OMEGA_B, PR_ZC)
from pyrealgas.errors import InitError, PhaseDiagramError, ERR_INIT_T, ERR_INIT_ZERO_ST
from pyrealgas.mix import average_params, mix_method_for
from pyrealgas.parameters import BinodalPoints, ComponentMix, ConstParameters
from pyrealgas.shared_fns import cubic_roots, is_above0
from pyrealgas.validate import validate_methods

logger = logging.getLogger(__name__)

# =============================================================================
# Equations of state in reduced coordinates
#   p_r = p/P_K, v_r = v/V_K(model), t_r = T/T_K, with V_K(model) = Z_K·R·T_K/P_K
# =============================================================================
class ReducedEOS:
    """ Isotherms of a cubic EOS in reduced coordinates """
    name = ""

    def pressure(self, v: float, t: float) -> float:
        raise NotImplementedError

    def volume_coefs(self, p: float, t: float):
        """ Coefficients of the cubic in v whose roots lie on the isotherm t at pressure p """
        raise NotImplementedError

    def line_integral(self, v1: float, v2: float, t: float) -> float:
        """ Area under the isotherm t between volumes v1 and v2 """
        return quad(lambda v: self.pressure(v, t), v1, v2)[0]


class ReducedRK2(ReducedEOS):
    name = "RK2"

    def __init__(self):
        self.zc = RK2_ZC
        self.a = RK2_OMEGA_A / RK2_ZC**2
        self.b = RK2_OMEGA_B / RK2_ZC

    def pressure(self, v, t):
        return t / self.zc / (v - self.b) - self.a / (math.sqrt(t) * v * (v + self.b))

    def volume_coefs(self, p, t):
        a, b, rt = self.a, self.b, t / self.zc
        return [1.0, -rt / p, a / (p * math.sqrt(t)) - rt * b / p - b * b, -a * b / (p * math.sqrt(t))]

    def line_integral(self, v1, v2, t):
        a, b, rt = self.a, self.b, t / self.zc
        return (rt * math.log((v2 - b) / (v1 - b))
                - a / (b * math.sqrt(t)) * (math.log(v2 / (v2 + b)) - math.log(v1 / (v1 + b))))


class ReducedPR(ReducedEOS):
    name = "PR"

    def __init__(self, acentric: float):
        self.zc = PR_ZC
        self.a = PR_OMEGA_A / PR_ZC**2
        self.b = PR_OMEGA_B / PR_ZC
        self.m = 0.37464 + 1.54226 * acentric - 0.26992 * acentric**2

    def alpha(self, t):
        return (1 + self.m * (1 - math.sqrt(t)))**2

    def pressure(self, v, t):
        b = self.b
        return t / self.zc / (v - b) - self.a * self.alpha(t) / (v * v + 2 * b * v - b * b)

    def volume_coefs(self, p, t):
        aa, b, rt = self.a * self.alpha(t), self.b, t / self.zc
        return [1.0, b - rt / p, aa / p - 3 * b * b - 2 * b * rt / p, b**3 + b * b * rt / p - aa * b / p]

    def line_integral(self, v1, v2, t):
        aa, b, rt = self.a * self.alpha(t), self.b, t / self.zc
        r1, r2 = b * (math.sqrt(2) - 1), -b * (1 + math.sqrt(2))
        log_term = math.log((v2 - r1) / (v2 - r2)) - math.log((v1 - r1) / (v1 - r2))
        return rt * math.log((v2 - b) / (v1 - b)) - aa / (2 * math.sqrt(2) * b) * log_term


def reduced_eos(model, acentric: float) -> ReducedEOS:
    """ Reduced isotherms used for the binodal curve of a model.
        NG_GOST states are classified against the Peng-Robinson curve of their pseudo-critical point
    """
    model = validate_methods(["eos"], [model])
    if model == eos_method.RK2:
        return ReducedRK2()
    return ReducedPR(acentric)


# =============================================================================
# Maxwell equal area construction
# =============================================================================
def binodal_point(eos: ReducedEOS, index: int, t: float) -> Optional[Tuple[float, float, float]]:
    """ Saturation pressure and liquid/vapour volumes of reduced isotherm t.
        Returns (p, v_liquid, v_vapour), or None when the point can not be solved
    """
    pi = t**3
    if pi <= 0:
        pi = 0.01
    dpi = -pi * 0.002
    for _ in range(BINODAL_MAX_TRIES):
        if index < BINODAL_NEAR_CRITICAL:
            dpi *= 0.1
        pi += dpi
        roots, has_unique_root = cubic_roots(eos.volume_coefs(pi, t))
        if has_unique_root:
            # Outside of the loop region, walk towards it
            dpi = 0.002 * pi
            pi = pi - 2 * dpi if roots[0] <= 1.0 else pi + 2 * dpi
            continue
        v1, v3 = roots[0], roots[-1]
        if abs(v3 - v1) < BINODAL_ROOT_EQUAL:
            logger.warning(f"{eos.name} binodal t={t}: liquid and vapour volumes coincide at p={pi:.6g}")
            return None
        rect = (v3 - v1) * pi
        spline = eos.line_integral(v1, v3, t)
        ar_differ = (rect - spline) / rect
        if abs(ar_differ) < BINODAL_AREA_RTOL:
            return pi, v1, v3
        pi = pi - 2 * dpi if ar_differ > 0 else pi + 3 * dpi
        dpi = 0.002 * pi
    logger.warning(f"{eos.name} binodal t={t}: no convergence after {BINODAL_MAX_TRIES} tries")
    return None

def calculate_binodal(eos: ReducedEOS) -> BinodalPoints:
    """ Reduced binodal curve over BINODAL_TEMPERATURES, critical point first """
    t, p, vl, vr = [], [], [], []
    for i, ti in enumerate(BINODAL_TEMPERATURES):
        point = binodal_point(eos, i, ti)
        if point is None:
            t.append(BINODAL_UNSOLVED)
            p.append(BINODAL_UNSOLVED)
            vl.append(BINODAL_UNSOLVED)
            vr.append(BINODAL_UNSOLVED)
            continue
        t.append(ti)
        p.append(point[0])
        vl.append(point[1])
        vr.append(point[2])
    # Drop unsolved points, then add the critical point
    keep = [i for i in range(len(t)) if t[i] > -0.5 and p[i] > 0 and vl[i] > 0 and vr[i] > 0]
    if len(keep) < len(t):
        logger.warning(f"{eos.name} binodal: {len(t) - len(keep)} of {len(t)} points unsolved")
    return BinodalPoints(
        t=[1.0] + [t[i] for i in keep],
        p=[1.0] + [p[i] for i in keep],
        vLeft=[1.0] + [vl[i] for i in keep],
        vRight=[1.0] + [vr[i] for i in keep],
    )


# =============================================================================
# Binodal curve cache
# =============================================================================
class PhaseDiagram:
    """ Cache of reduced binodal curves keyed by (equation of state, acentric factor).
        Each curve is computed once; callers always receive a copy scaled to their critical point.
        Create one per calculation session and pass it to the models that share it
    """

    def __init__(self):
        self._curves: Dict[Tuple[eos_method, float], BinodalPoints] = {}
        self._lock = threading.Lock()
        self.calculate_count = 0  # Number of Maxwell constructions performed

    def _find(self, model: eos_method, acentric: float) -> Optional[BinodalPoints]:
        for (m, acf), curve in self._curves.items():
            if m == model and abs(acf - acentric) < ACENTRIC_KEY_TOL:
                return curve
        return None

    def get_binodal_points(self, vk: float, pk: float, tk: float, model, acentric: float) -> BinodalPoints:
        """ Returns the binodal curve of a gas
            vk: Critical volume (m³/kg)
            pk: Critical pressure (Pa)
            tk: Critical temperature (K)
            model: Equation of state, eos_method or its name ('RK2', 'PR', 'NG_GOST')
            acentric: Acentric factor
            Raises InitError if any input is not positive
        """
        model = validate_methods(["eos"], [model])
        if not is_above0(vk, pk, tk, acentric):
            raise InitError(f"phase diagram input must be positive: V_K={vk}, P_K={pk}, T_K={tk}, acentric={acentric}",
                            ERR_INIT_T | ERR_INIT_ZERO_ST)
        with self._lock:
            curve = self._find(model, acentric)
            if curve is None:
                logger.debug(f"calculating binodal curve for {model.name}, acentric={acentric}")
                curve = calculate_binodal(reduced_eos(model, acentric))
                self._curves[(model, acentric)] = curve
                self.calculate_count += 1
            else:
                logger.debug(f"binodal curve for {model.name}, acentric={acentric} taken from cache")
        return curve.scaled(vk, pk, tk)

    def get_binodal_points_cp(self, cp: ConstParameters, model) -> BinodalPoints:
        return self.get_binodal_points(cp.V_K, cp.P_K, cp.T_K, model, cp.acentricfactor)

    def get_binodal_points_mix(self, components: ComponentMix, model) -> BinodalPoints:
        """ Binodal curve of the pseudo-critical point of a gas mixture.
            Averaging failures are raised as PhaseDiagramError
        """
        try:
            cp = average_params(components, mix_method_for(model))
            return self.get_binodal_points_cp(cp, model)
        except InitError as e:
            raise PhaseDiagramError(f"binodal curve for gas mixture: {e.msg}") from e

    def erase_binodal_points(self, model=None, acentric: float = None):
        """ Drops cached curves of a model (all models if None), optionally only for one acentric factor """
        if model is not None:
            model = validate_methods(["eos"], [model])
        with self._lock:
            for key in list(self._curves):
                m, acf = key
                if model is not None and m != model:
                    continue
                if acentric is not None and abs(acf - acentric) >= ACENTRIC_KEY_TOL:
                    continue
                del self._curves[key]

    def __len__(self):
        return len(self._curves)

    def __bool__(self):
        # An empty cache is still a cache
        return True


_default_phase_diagram = None
_default_lock = threading.Lock()

def default_phase_diagram() -> PhaseDiagram:
    """ Shared PhaseDiagram for callers that do not manage their own """
    global _default_phase_diagram
    with _default_lock:
        if _default_phase_diagram is None:
            _default_phase_diagram = PhaseDiagram()
    return _default_phase_diagram


# =============================================================================
# Phase classification
# =============================================================================
def _bracket(p: float, bp: BinodalPoints) -> Optional[int]:
    # Index of the first point below the critical one with pressure <= p
    for i in range(1, len(bp.p)):
        if bp.p[i] <= p:
            return i
    return None

def _interp_branches(p: float, bp: BinodalPoints, lower: int) -> Tuple[float, float]:
    # Linear in p between points 'lower' and the one above it
    upper = lower - 1
    p_path = (p - bp.p[lower]) / (bp.p[upper] - bp.p[lower])
    vl = bp.vLeft[lower] + (bp.vLeft[upper] - bp.vLeft[lower]) * p_path
    vr = bp.vRight[lower] + (bp.vRight[upper] - bp.vRight[lower]) * p_path
    return vl, vr

def branch_volumes(p: float, bp: BinodalPoints) -> Optional[Tuple[float, float]]:
    """ Liquid and vapour volumes of the binodal curve at pressure p, None outside the sampled range """
    if bp is None:
        return None
    lower = _bracket(p, bp)
    if lower is None:
        return None
    return _interp_branches(p, bp, lower)

def classify_phase(v: float, p: float, t: float, cp: ConstParameters, bp: Optional[BinodalPoints]) -> state_phase:
    """ Phase of state (v, p, t) of a gas with critical point cp and (scaled) binodal curve bp """
    if bp is None:
        return state_phase.NOT_SET
    if t >= cp.T_K:
        return state_phase.SCF if p >= cp.P_K else state_phase.GAS
    lower = _bracket(p, bp)
    if lower is None:
        # Below every sampled point of the curve
        return state_phase.LIQ_STEAM if v <= cp.V_K else state_phase.GAS
    vl, vr = _interp_branches(p, bp, lower)
    if v < cp.V_K:
        return state_phase.LIQUID if v < vl else state_phase.LIQ_STEAM
    return state_phase.GAS if v > vr else state_phase.LIQ_STEAM

def saturation_pressure(t: float, bp: Optional[BinodalPoints]) -> Optional[float]:
    """ Saturation pressure at temperature t, interpolated as ln(p) against 1/t.
        Extrapolates below the coldest sampled point. None above the critical temperature
    """
    if bp is None or len(bp) < 2 or t >= bp.t[0]:
        return None
    inv_t = 1.0 / np.array(bp.t)
    lnp = np.log(bp.p)
    x = 1.0 / t
    if x <= inv_t[-1]:
        return float(np.exp(np.interp(x, inv_t, lnp)))
    slope = (lnp[-1] - lnp[-2]) / (inv_t[-1] - inv_t[-2])
    return float(np.exp(lnp[-1] + slope * (x - inv_t[-1])))
