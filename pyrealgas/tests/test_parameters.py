#!/usr/bin/env python3
"""
Validation tests for gas state data: constant & dynamic parameters, mixtures and binodal points.
Run with: python3 -m pytest pyrealgas/tests/ -v
"""

import sys
import os
import math
import pandas as pd
import pytest

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', '..'))
from pyrealgas.classes import state_phase
from pyrealgas.constants import GAS_CONSTANT
from pyrealgas.errors import InitError, ERR_GAS_MIX
from pyrealgas.parameters import (ConstParameters, DynParameters, Parameters, ComponentMix, BinodalPoints,
                                  state_log, parameters_string, parameters_string_head, const_parameters_string,
                                  states_table, STATE_PHASE_NAMES)

METHANE = dict(vk=0.00617, pk=4.641e6, tk=190.66, mw=0.016043, acentric=0.011)

def methane():
    return ConstParameters.init(name='methane', **METHANE)

def baseline(p=1e5, t=300.0):
    return DynParameters.init(1700.0, 2232.0, 0.0, Parameters(0.0, p, t))

def test_const_parameters_derived():
    """R and Z_K are derived from the critical point"""
    cp = methane()
    assert abs(cp.R - GAS_CONSTANT / 0.016043) < 1e-9
    assert abs(cp.Z_K - cp.P_K * cp.V_K / (cp.R * cp.T_K)) < 1e-12
    assert 0.2 < cp.Z_K < 0.35, f"Z_K={cp.Z_K}"

def test_const_parameters_frozen():
    """ConstParameters are never mutated"""
    cp = methane()
    with pytest.raises(Exception):
        cp.T_K = 200.0

def test_const_parameters_rejects_non_positive():
    """Zero or negative critical values raise InitError"""
    for key in ['vk', 'pk', 'tk', 'mw']:
        kwargs = dict(METHANE)
        kwargs[key] = 0.0
        with pytest.raises(InitError):
            ConstParameters.init(**kwargs)
        kwargs[key] = -1.0
        with pytest.raises(InitError):
            ConstParameters.init(**kwargs)

def test_const_parameters_negative_acentric():
    """Negative acentric factor is allowed (hydrogen), NaN is not"""
    cp = ConstParameters.init(0.0322, 1.2964e6, 33.19, 0.002016, -0.219, name='hydrogen')
    assert cp.acentricfactor < 0
    with pytest.raises(InitError):
        ConstParameters.init(0.0322, 1.2964e6, 33.19, 0.002016, math.nan)

def test_dyn_parameters_validation():
    """cv & cp must be positive with cp >= cv"""
    parm = Parameters(0.0, 1e5, 300.0)
    with pytest.raises(InitError):
        DynParameters.init(2000.0, 1500.0, 0.0, parm)
    with pytest.raises(InitError):
        DynParameters.init(0.0, 1500.0, 0.0, parm)
    with pytest.raises(InitError):
        DynParameters.init(1500.0, 2000.0, 0.0, Parameters(0.0, -1.0, 300.0))
    dyn = DynParameters.init(1500.0, 2000.0, 0.0, parm)
    assert dyn.beta_kr == 0.0

def test_dyn_parameters_copy():
    """copy() returns a new object, the original is unchanged"""
    dyn = baseline()
    new = dyn.copy(heat_cap_vol=1800.0)
    assert new.heat_cap_vol == 1800.0
    assert dyn.heat_cap_vol == 1700.0

def test_component_mix_fraction_sum():
    """Fraction sums of 0.5 and 1.5 are rejected, 1.000005 is accepted"""
    cp, dyn = methane(), baseline()
    with pytest.raises(InitError) as exc:
        ComponentMix.init([(0.25, cp, dyn), (0.25, cp, dyn)])
    assert exc.value.code & ERR_GAS_MIX
    with pytest.raises(InitError):
        ComponentMix.init([(0.75, cp, dyn), (0.75, cp, dyn)])
    mix = ComponentMix.init([(0.500005, cp, dyn), (0.5, cp, dyn)])
    assert len(mix) == 2
    assert abs(sum(mix.fractions()) - 1.000005) < 1e-12

def test_component_mix_rejects_empty_and_non_positive():
    """Empty mixtures and non-positive fractions raise InitError"""
    cp, dyn = methane(), baseline()
    with pytest.raises(InitError):
        ComponentMix.init([])
    with pytest.raises(InitError):
        ComponentMix.init([(1.0, cp, dyn), (0.0, cp, dyn)])

def test_binodal_points_scaled_copy():
    """scaled() returns a rescaled copy, leaving the source untouched"""
    bp = BinodalPoints([1.0, 0.9], [1.0, 0.6], [1.0, 0.5], [1.0, 2.0])
    s = bp.scaled(0.01, 5e6, 200.0)
    assert s.t == [200.0, 180.0]
    assert s.p == [5e6, 3e6]
    assert s.vLeft == [0.01, 0.005]
    assert s.vRight == [0.01, 0.02]
    assert bp.t == [1.0, 0.9]
    c = bp.copy()
    c.p[1] = 0.0
    assert bp.p[1] == 0.6

def test_binodal_points_dataframe():
    """to_dataframe() has T, P, vLeft & vRight columns, plus enthalpy once filled"""
    bp = BinodalPoints([1.0, 0.9], [1.0, 0.6], [1.0, 0.5], [1.0, 2.0])
    df = bp.to_dataframe()
    assert isinstance(df, pd.DataFrame)
    assert list(df.columns) == ['T', 'P', 'vLeft', 'vRight']
    bp.hLeft, bp.hRight = [0.0, 1.0], [0.0, 2.0]
    assert 'hRight' in bp.to_dataframe().columns
    assert 'vLeft' in str(bp)

def test_text_output():
    """Text formats of states and critical points"""
    dyn = DynParameters.init(1700.0, 2232.0, 1000.0, Parameters(0.5, 1e5, 300.0))
    line = parameters_string(dyn)
    assert line.endswith('\n')
    assert len(line.split()) == 7
    assert abs(float(line.split()[2]) - 2.0) < 1e-6  # density
    assert 'pressure' in parameters_string_head()
    assert 'Critical pnt' in const_parameters_string(methane())
    log = state_log(dyn, state_phase.GAS)
    assert abs(log.enthalpy - (1000.0 + 1e5 * 0.5)) < 1e-9
    assert log.phase == 'GAS'
    assert 'GAS' in states_table([log])
    assert set(STATE_PHASE_NAMES) == set(state_phase)
