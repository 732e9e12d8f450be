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
from typing import Dict, List, NamedTuple, Optional

import numpy as np

from pyrealgas.classes import gas_t
from pyrealgas.config import calculation_configuration
from pyrealgas.constants import (GAS_CONSTANT_GOST, FLOAT_ACCURACY, GASMIX_PERCENT_AVR, GASMIX_PERCENT_EPS,
                                 GOST_P_MIN, GOST_P_MAX, GOST_T_MIN, GOST_T_MAX, GOST_MAX_LOOPS, GOST_SIGMA_RTOL)
from pyrealgas.errors import (RealGasError, InitError, CalculationError, ErrorWrap,
                              ERR_INIT_T, ERR_INIT_ZERO_ST, ERR_INIT_NULLP_ST, ERR_GAS_MIX,
                              ERR_CALCULATE_T, ERR_CALC_GAS_P_ST, ERR_CALC_MODEL_ST)
from pyrealgas.ng_gost._lib_gost_tables import (A0_3_COEFS, B_TERMS, C_TERMS_START, COMPONENTS, CP0_COEFS,
                                                CRITICAL_PARAMS, get_binary_coefs)
from pyrealgas.parameters import ConstParameters
from pyrealgas.validate import validate_methods

logger = logging.getLogger(__name__)

# Natural gas properties to GOST 30319.3-2015 (AGA8-DC92 detail characterization, ISO 20765-1)
# Compressibility is found from the reduced density sigma = K³·rho (rho in kmol/m³), solving
#     sigma·(1 + A0(sigma, T)) = pi / tau
# by Newton iteration. Caloric properties combine the residual terms A1..A3 with the
# ideal gas heat capacity of ISO 20765-2.
# Valid for 0.1 MPa <= p <= 30 MPa and 250 K <= T <= 350 K, within the composition limits of table 2

# Composition limits: (name, members, min fraction, max fraction)
_LIMITS = [
    ("methane", [gas_t.METHANE], 0.7, 0.99999),
    ("ethane", [gas_t.ETHANE], 0.0, 0.1),
    ("propane", [gas_t.PROPANE], 0.0, 0.035),
    ("butanes", [gas_t.ISO_BUTANE, gas_t.N_BUTANE], 0.0, 0.015),
    ("pentanes", [gas_t.ISO_PENTANE, gas_t.N_PENTANE], 0.0, 0.005),
    ("hexane", [gas_t.HEXANE], 0.0, 0.001),
    ("nitrogen", [gas_t.NITROGEN], 0.0, 0.2),
    ("carbon dioxide", [gas_t.CARBON_DIOXIDE], 0.0, 0.2),
    ("helium", [gas_t.HELIUM], 0.0, 0.005),
    ("hydrogen", [gas_t.HYDROGEN], 0.0, 0.1),
]
_ISO_20765_LIMIT = ("octane-decane", [gas_t.OCTANE, gas_t.NONANE, gas_t.DECANE], 0.0, 0.0005)
_OTHERS_MAX = 0.0015


class GostState(NamedTuple):
    pressure: float      # Pa
    temperature: float   # K
    volume: float        # m³/kg
    sigma: float         # Reduced density
    z: float
    A0: float
    A1: float
    A2: float
    A3: float
    cp0r: float          # Ideal gas cp0/R
    heat_cap_vol: float  # J/(kg·K)
    heat_cap_pres: float # J/(kg·K)
    internal_energy: float  # J/kg
    k: float             # Isentropic exponent
    sound_speed: float   # m/s
    beta_kr: float       # 1/K


def _read_components(components) -> Dict[gas_t, float]:
    # Accepts a dict or a sequence of (gas, fraction) pairs. Gases may be gas_t members or names
    items = components.items() if isinstance(components, dict) else components
    comps: Dict[gas_t, float] = {}
    for gas, fraction in items:
        gas = validate_methods(["gas"], [gas])
        if gas in comps:
            raise InitError(f"Component {gas.name} given more than once", ERR_INIT_T | ERR_GAS_MIX)
        comps[gas] = float(fraction)
    return comps

def check_composition(components: Dict[gas_t, float], enable_iso_20765: bool = True) -> None:
    """ Checks a natural gas composition against the component limits of GOST 30319.3-2015.
        Octane, nonane and decane have their own limit when enable_iso_20765 is True, otherwise
        they count with the other minor components.
        Raises InitError if the composition is out of range
    """
    if not components:
        raise InitError("Natural gas has no components", ERR_INIT_T | ERR_INIT_NULLP_ST | ERR_GAS_MIX)
    for gas, part in components.items():
        if not (part > 0):
            raise InitError(f"Non-positive mole fraction {part} for {gas.name}", ERR_INIT_T | ERR_INIT_ZERO_ST | ERR_GAS_MIX)
    parts_sum = sum(components.values())
    if not (GASMIX_PERCENT_AVR - GASMIX_PERCENT_EPS <= parts_sum <= GASMIX_PERCENT_AVR + GASMIX_PERCENT_EPS):
        raise InitError(f"gasmix sum of parts != 100%: {parts_sum}", ERR_INIT_T | ERR_GAS_MIX)

    limits = _LIMITS + [_ISO_20765_LIMIT] if enable_iso_20765 else _LIMITS
    listed = set()
    for name, members, part_min, part_max in limits:
        listed.update(members)
        part = sum(components.get(g, 0.0) for g in members)
        if not (part_min < part + FLOAT_ACCURACY and part < part_max + FLOAT_ACCURACY):
            raise InitError(f"Fraction of {name} {part} outside of [{part_min}, {part_max}]", ERR_INIT_T | ERR_GAS_MIX)
    others = sum(part for gas, part in components.items() if gas not in listed)
    if others > _OTHERS_MAX + FLOAT_ACCURACY:
        raise InitError(f"Fraction of other components {others} exceeds {_OTHERS_MAX}", ERR_INIT_T | ERR_GAS_MIX)

def is_valid_state(p: float, t: float) -> bool:
    """ True within the pressure & temperature envelope of GOST 30319.3-2015 """
    return GOST_P_MIN <= p <= GOST_P_MAX and GOST_T_MIN <= t <= GOST_T_MAX


class NgGostMix:
    """
    Natural gas mixture described by GOST 30319.3-2015.

    Mixture coefficients are computed once from the composition. States are then
    evaluated with calculate(p, t).

    Example:
        ng = NgGostMix.init({'METHANE': 0.965, 'ETHANE': 0.018, 'NITROGEN': 0.017})
        state = ng.calculate(5e6, 290)
        state.z, state.volume, state.heat_cap_pres
    """

    def __init__(self, components: Dict[gas_t, float]):
        """
        Args:
            components: Checked composition, {gas_t: mole fraction}. Use init() for unchecked input
        """
        self.components = components
        self.gases: List[gas_t] = list(components)
        self.x = np.array([components[g] for g in self.gases])
        self._set_molar_mass()
        self._set_mix_parameters()
        self._set_Bn()
        self._set_Cn()
        self._set_Dn_Un()
        self.p0m = 0.001 * self.Kx**-3 * GAS_CONSTANT_GOST
        self.const_params = self._pseudo_critical()

    @classmethod
    def init(cls, components, config: calculation_configuration = None,
             error: ErrorWrap = None) -> Optional["NgGostMix"]:
        """
        Checked constructor.

        Args:
            components: dict or sequence of (gas, mole fraction) pairs. Gases are gas_t members or their names
            config: calculation_configuration. enable_iso_20765 selects the C8-C10 composition limit
            error: Optional ErrorWrap, filled on failure

        Returns None on failure
        """
        if config is None:
            config = calculation_configuration()
        try:
            comps = _read_components(components)
            check_composition(comps, config.enable_iso_20765)
            return cls(comps)
        except RealGasError as e:
            logger.warning(f"NG_GOST mixture rejected: {e.msg}")
            if error is not None:
                error.set_from(e)
            return None

    # =========================================================================
    # Mixture coefficients
    # =========================================================================
    def _char(self, attr: str) -> np.ndarray:
        return np.array([getattr(COMPONENTS[g], attr) for g in self.gases])

    def _set_molar_mass(self):
        self.M = float(np.sum(self.x * self._char('M')))  # g/mol

    def _pairs(self):
        n = len(self.gases)
        for i in range(n):
            for j in range(i + 1, n):
                yield i, j, get_binary_coefs(self.gases[i], self.gases[j])

    def _set_mix_parameters(self):
        """ Size Kx, energy V, orientation G, quadrupole Q and high temperature F parameters """
        x = self.x
        K, E, G = self._char('K'), self._char('E'), self._char('G')
        kx5 = np.sum(x * K**2.5)**2
        v5 = np.sum(x * E**2.5)**2
        g = np.sum(x * G)
        for i, j, bin_c in self._pairs():
            kx5 += 2 * x[i] * x[j] * (bin_c.K**5 - 1) * (K[i] * K[j])**2.5
            v5 += 2 * x[i] * x[j] * (bin_c.U**5 - 1) * (E[i] * E[j])**2.5
            g += x[i] * x[j] * (bin_c.G - 1) * (G[i] + G[j])
        self.Kx = kx5**0.2
        self.V = v5**0.2
        self.G = g
        self.Q = float(np.sum(x * self._char('Q')))
        self.F = float(np.sum(x**2 * self._char('F')))

    def _set_Bn(self):
        """ Second virial coefficient terms, n < 18 """
        x = self.x
        E, K, G = self._char('E'), self._char('K'), self._char('G')
        Q, F, S, W = self._char('Q'), self._char('F'), self._char('S'), self._char('W')
        n = len(self.gases)
        Bn = np.zeros(B_TERMS)
        for i in range(n):
            for j in range(n):
                bin_c = get_binary_coefs(self.gases[i], self.gases[j])
                eij = bin_c.E * math.sqrt(E[i] * E[j])
                gij = bin_c.G * (G[i] + G[j]) / 2
                xx = x[i] * x[j] * (K[i] * K[j])**1.5
                for m in range(B_TERMS):
                    c = A0_3_COEFS[m]
                    bnij = ((gij + 1 - c.g)**c.g * (Q[i] * Q[j] + 1 - c.q)**c.q
                            * (math.sqrt(F[i] * F[j]) + 1 - c.f)**c.f
                            * (S[i] * S[j] + 1 - c.s)**c.s * (W[i] * W[j] + 1 - c.w)**c.w)
                    Bn[m] += xx * eij**c.u * bnij
        self.Bn = Bn

    def _set_Cn(self):
        """ Mixture coefficients of the density dependent terms """
        self.Cn = np.array([(self.G + 1 - c.g)**c.g * (self.Q**2 + 1 - c.q)**c.q
                            * (self.F + 1 - c.f)**c.f * self.V**c.u for c in A0_3_COEFS])

    def _set_Dn_Un(self):
        nterms = len(A0_3_COEFS)
        Dn = np.zeros(nterms)
        Un = np.zeros(nterms)
        k3 = self.Kx**-3
        Dn[:C_TERMS_START] = self.Bn[:C_TERMS_START] * k3
        Dn[C_TERMS_START:B_TERMS] = self.Bn[C_TERMS_START:B_TERMS] * k3 - self.Cn[C_TERMS_START:B_TERMS]
        Un[C_TERMS_START:] = self.Cn[C_TERMS_START:]
        self.Dn = Dn
        self.Un = Un
        self._a = np.array([c.a for c in A0_3_COEFS])
        self._b = np.array([c.b for c in A0_3_COEFS], dtype=float)
        self._c = np.array([c.c for c in A0_3_COEFS], dtype=float)
        self._k = np.array([c.k for c in A0_3_COEFS], dtype=float)
        self._u = np.array([c.u for c in A0_3_COEFS])

    def _pseudo_critical(self) -> ConstParameters:
        """ Pseudo-critical point of the mixture, ISO 20765 mixing rule """
        x = self.x
        M = self._char('M')
        crit = [CRITICAL_PARAMS[g] for g in self.gases]
        vc3 = np.array([(M[i] / c.density)**(1 / 3) for i, c in enumerate(crit)])  # (dm³/mol)^1/3
        tc = np.array([c.temperature for c in crit])
        vij = (vc3[:, None] + vc3[None, :])**3
        xx = np.outer(x, x)
        vk = 0.125 * np.sum(xx * vij)  # dm³/mol
        tk = 0.125 * np.sum(xx * vij * np.sqrt(np.outer(tc, tc))) / vk
        acf = float(np.sum(x * np.array([c.acentric for c in crit])))
        pk = 1000 * GAS_CONSTANT_GOST * tk * (0.291 - 0.08 * acf) / vk
        return ConstParameters.init(vk / self.M, pk, tk, self.M / 1000, acf, name="ng_gost")

    # =========================================================================
    # State functions
    # =========================================================================
    def _terms(self, sigma: float, tau: float):
        sk = sigma**self._k
        ex = np.exp(-self._c * sk)
        base = self._a * sigma**self._b * tau**-self._u
        return sk, ex, base

    def A0(self, sigma: float, tau: float) -> float:
        sk, ex, base = self._terms(sigma, tau)
        b, ck = self._b, self._c * self._k
        return float(np.sum(base * (b * self.Dn + (b - ck * sk) * self.Un * ex)))

    def A1(self, sigma: float, tau: float) -> float:
        sk, ex, base = self._terms(sigma, tau)
        b, ck = self._b, self._c * self._k
        g = b - ck * sk
        return float(np.sum(base * ((b + 1) * b * self.Dn + (g * (g + 1) - ck * self._k * sk) * self.Un * ex)))

    def A2(self, sigma: float, tau: float) -> float:
        sk, ex, base = self._terms(sigma, tau)
        b, ck = self._b, self._c * self._k
        return float(np.sum(base * (1 - self._u) * (b * self.Dn + (b - ck * sk) * self.Un * ex)))

    def A3(self, sigma: float, tau: float) -> float:
        sk, ex, base = self._terms(sigma, tau)
        return float(np.sum(base * (1 - self._u) * self._u * (self.Dn + self.Un * ex)))

    def Au(self, sigma: float, tau: float) -> float:
        # Residual internal energy / (R·T)
        sk, ex, base = self._terms(sigma, tau)
        return float(np.sum(base * self._u * (self.Dn + self.Un * ex)))

    def cp0r(self, t: float) -> float:
        """ Ideal gas isobaric heat capacity of the mixture, cp0/R """
        total = 0.0
        for gas, xi in zip(self.gases, self.x):
            c = CP0_COEFS[gas]
            cp = c.B
            for coef, theta, hyper in [(c.C, c.D, math.sinh), (c.E, c.F, math.cosh),
                                       (c.G, c.H, math.sinh), (c.I, c.J, math.cosh)]:
                if coef != 0 and theta != 0:
                    cp += coef * (theta / t / hyper(theta / t))**2
            total += xi * cp
        return total

    def h0r(self, t: float) -> float:
        """ Ideal gas enthalpy of the mixture / R (K), relative to an arbitrary reference """
        total = 0.0
        for gas, xi in zip(self.gases, self.x):
            c = CP0_COEFS[gas]
            h = c.B * t
            if c.C != 0 and c.D != 0:
                h += c.C * c.D / math.tanh(c.D / t)
            if c.E != 0 and c.F != 0:
                h -= c.E * c.F * math.tanh(c.F / t)
            if c.G != 0 and c.H != 0:
                h += c.G * c.H / math.tanh(c.H / t)
            if c.I != 0 and c.J != 0:
                h -= c.I * c.J * math.tanh(c.J / t)
            total += xi * h
        return total

    def reduced_density(self, p: float, t: float) -> float:
        """ Solves sigma·(1 + A0) = pi/tau for the reduced density.
            Raises CalculationError if no convergence within GOST_MAX_LOOPS iterations
        """
        if not (p > 0 and t > 0):
            raise CalculationError(f"NG_GOST state requires positive p and T: p={p}, T={t}",
                                   ERR_CALCULATE_T | ERR_CALC_GAS_P_ST)
        tau = t
        pi = 1e-6 * p / self.p0m
        target = pi / tau
        sigma = 0.001 * p * self.Kx**3 / (GAS_CONSTANT_GOST * t)
        for loop in range(GOST_MAX_LOOPS):
            a0 = self.A0(sigma, tau)
            if abs(sigma * (1 + a0) - target) / target < GOST_SIGMA_RTOL:
                logger.debug(f"NG_GOST density converged in {loop} loops at p={p}, T={t}")
                return sigma
            sigma += (target - (1 + a0) * sigma) / (1 + self.A1(sigma, tau))
        logger.warning(f"NG_GOST density did not converge in {GOST_MAX_LOOPS} loops at p={p}, T={t}")
        raise CalculationError(f"NG_GOST density did not converge at p={p}, T={t}",
                               ERR_CALCULATE_T | ERR_CALC_MODEL_ST)

    def calculate(self, p: float, t: float) -> GostState:
        """ Returns the GostState of the mixture at pressure p (Pa) and temperature t (K).
            States outside of the GOST envelope are calculated, but logged
        """
        if not is_valid_state(p, t):
            logger.warning(f"NG_GOST state p={p}, T={t} outside of the valid range")
        sigma = self.reduced_density(p, t)
        tau = t
        a0, a1, a2, a3 = self.A0(sigma, tau), self.A1(sigma, tau), self.A2(sigma, tau), self.A3(sigma, tau)
        rm = GAS_CONSTANT_GOST / (self.M / 1000)  # J/(kg·K)
        cp0r = self.cp0r(t)
        cvr = cp0r - 1 + a3
        cv = rm * cvr
        cp = cv + rm * (1 + a2)**2 / (1 + a1)
        u = rm * (self.h0r(t) - t + t * self.Au(sigma, tau))
        z = 1 + a0
        k = (1 + a1 + (1 + a2)**2 / cvr) / z
        return GostState(
            pressure=p,
            temperature=t,
            volume=self.Kx**3 / (self.M * sigma),
            sigma=sigma,
            z=z,
            A0=a0, A1=a1, A2=a2, A3=a3,
            cp0r=cp0r,
            heat_cap_vol=cv,
            heat_cap_pres=cp,
            internal_energy=u,
            k=k,
            sound_speed=math.sqrt(1000 * k * z * GAS_CONSTANT_GOST * t / self.M),
            beta_kr=(1 + a2) / ((1 + a1) * t),
        )

    def volume(self, p: float, t: float) -> float:
        return self.Kx**3 / (self.M * self.reduced_density(p, t))

    def z(self, p: float, t: float) -> float:
        return 1 + self.A0(self.reduced_density(p, t), t)

    def viscosity0(self, t: float) -> float:
        """ Dynamic viscosity at low pressure """
        raise NotImplementedError("NG_GOST viscosity is not implemented")
