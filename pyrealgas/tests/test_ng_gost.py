#!/usr/bin/env python3
"""
Validation tests for the GOST 30319.3-2015 natural gas model.
Run with: python3 -m pytest pyrealgas/tests/ -v
"""

import sys
import os
import importlib
import pytest

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', '..'))
from pyrealgas.classes import gas_t, state_phase, eos_method
from pyrealgas.config import calculation_configuration
from pyrealgas.errors import ErrorWrap, InitError, CalculationError, ERR_GAS_MIX, ERR_CALC_MODEL_ST, ERR_MASK_SUBTYPE
from pyrealgas.models import create_model, NgGost
from pyrealgas.ng_gost import NgGostMix, check_composition, is_valid_state
from pyrealgas.ng_gost._lib_gost_tables import A0_3_COEFS, COMPONENTS, CP0_COEFS, CRITICAL_PARAMS, get_binary_coefs
from pyrealgas.phase_diagram import PhaseDiagram

gost_module = importlib.import_module('pyrealgas.ng_gost.ng_gost')

NATURAL_GAS = {'METHANE': 0.965, 'ETHANE': 0.018, 'PROPANE': 0.0045, 'NITROGEN': 0.0095, 'CARBON_DIOXIDE': 0.003}

def natural_gas(**kwargs):
    err = ErrorWrap()
    ng = NgGostMix.init(NATURAL_GAS, error=err, **kwargs)
    assert ng is not None, str(err)
    return ng

def test_tables_complete():
    """Every component has characteristics, heat capacity and critical data"""
    assert len(A0_3_COEFS) == 58
    for gas in gas_t:
        assert gas in COMPONENTS
        assert gas in CP0_COEFS
        assert gas in CRITICAL_PARAMS
    assert get_binary_coefs(gas_t.METHANE, gas_t.NITROGEN) == get_binary_coefs(gas_t.NITROGEN, gas_t.METHANE)
    assert get_binary_coefs(gas_t.METHANE, gas_t.METHANE).E == 1.0

def test_valid_state_range():
    """Envelope of 0.1 - 30 MPa and 250 - 350 K"""
    assert is_valid_state(1e5, 250.0)
    assert is_valid_state(3e7, 350.0)
    assert not is_valid_state(9e4, 300.0)
    assert not is_valid_state(3.1e7, 300.0)
    assert not is_valid_state(5e6, 249.0)
    assert not is_valid_state(5e6, 351.0)

def test_low_pressure():
    """z tends to 1 at low pressure"""
    ng = NgGostMix.init({gas_t.METHANE: 0.99, gas_t.ETHANE: 0.01})
    z = ng.z(1e5, 293.15)
    assert abs(z - 1.0) < 0.01, f"z={z}"
    assert z < 1.0

def test_natural_gas_properties():
    """Compressibility, heat capacities & sound speed of a typical natural gas"""
    ng = natural_gas()
    s = ng.calculate(5e6, 290.0)
    assert 0.8 < s.z < 0.97, f"z={s.z}"
    assert s.heat_cap_pres > s.heat_cap_vol > 0
    assert 300 < s.sound_speed < 500, f"w={s.sound_speed}"
    assert s.k > 1.0
    assert abs(s.volume - ng.volume(5e6, 290.0)) < 1e-12
    assert abs(s.z - ng.z(5e6, 290.0)) < 1e-12
    # Ideal gas volume check: z = p·v·M / (R·T)
    z = 5e6 * s.volume * (ng.M / 1000) / (8.31451 * 290.0)
    assert abs(z - s.z) < 1e-5

def test_z_falls_with_pressure():
    """Below 10 MPa at 290 K compressibility decreases with pressure"""
    ng = natural_gas()
    zs = [ng.z(p, 290.0) for p in (1e5, 2e6, 5e6, 1e7)]
    assert all(zs[i] > zs[i + 1] for i in range(len(zs) - 1)), f"z={zs}"

def test_pseudo_critical_point():
    """Pseudo-critical point of a methane rich gas is close to methane's"""
    ng = natural_gas()
    cp = ng.const_params
    assert 190 < cp.T_K < 215, f"T_K={cp.T_K}"
    assert 4.4e6 < cp.P_K < 5.2e6, f"P_K={cp.P_K}"
    assert abs(cp.molecularmass - ng.M / 1000) < 1e-12
    assert cp.acentricfactor > 0

def test_composition_limits():
    """Compositions outside of table 2 limits are rejected"""
    check_composition({gas_t.METHANE: 0.99, gas_t.ETHANE: 0.01})
    with pytest.raises(InitError):
        check_composition({gas_t.METHANE: 0.5, gas_t.NITROGEN: 0.5})  # Methane < 0.7
    with pytest.raises(InitError):
        check_composition({gas_t.NITROGEN: 1.0})  # No methane
    with pytest.raises(InitError):
        check_composition({gas_t.METHANE: 0.998, gas_t.HEXANE: 0.002})
    with pytest.raises(InitError):
        check_composition({gas_t.METHANE: 0.98, gas_t.ISO_BUTANE: 0.01, gas_t.N_BUTANE: 0.01})
    with pytest.raises(InitError):
        check_composition({gas_t.METHANE: 0.9, gas_t.ETHANE: 0.05})  # Sum 0.95
    check_composition({gas_t.METHANE: 0.99999, gas_t.ETHANE: 0.00001})

def test_composition_iso_20765():
    """C8-C10 have their own limit with ISO 20765, otherwise count as minor components"""
    comp = {gas_t.METHANE: 0.999, gas_t.OCTANE: 0.001}
    with pytest.raises(InitError):
        check_composition(comp, enable_iso_20765=True)
    check_composition(comp, enable_iso_20765=False)
    check_composition({gas_t.METHANE: 0.9996, gas_t.NONANE: 0.0004}, enable_iso_20765=True)
    with pytest.raises(InitError):
        check_composition({gas_t.METHANE: 0.998, gas_t.WATER: 0.002})

def test_init_failure():
    """Factory returns None with the gas mix flag on bad compositions"""
    err = ErrorWrap()
    assert NgGostMix.init({'METHANE': 0.6, 'NITROGEN': 0.4}, error=err) is None
    assert err.code & ERR_GAS_MIX
    err = ErrorWrap()
    assert NgGostMix.init({'METHANE': 0.99, 'XENON': 0.01}, error=err) is None
    assert err.is_error()
    err = ErrorWrap()
    assert NgGostMix.init([('METHANE', 0.5), ('METHANE', 0.5)], error=err) is None
    cfg = calculation_configuration(enable_iso_20765=False)
    assert NgGostMix.init({'METHANE': 0.999, 'OCTANE': 0.001}, config=cfg) is not None

def test_non_positive_state():
    """Non-positive pressure or temperature raise CalculationError"""
    ng = natural_gas()
    with pytest.raises(CalculationError):
        ng.calculate(0.0, 290.0)
    with pytest.raises(CalculationError):
        ng.calculate(5e6, -1.0)

def test_density_not_converged():
    """Running out of density iterations raises CalculationError, the model keeps its state"""
    ng = natural_gas()
    model = create_model('NG_GOST', ng, p=2e6, t=290.0, phase_diagram=PhaseDiagram())
    v = model.parameters.volume
    with pytest.MonkeyPatch.context() as mp:
        mp.setattr(gost_module, 'GOST_MAX_LOOPS', 1)
        with pytest.raises(CalculationError) as exc:
            ng.calculate(1e7, 290.0)
        with pytest.raises(CalculationError):
            model.set_volume(1e7, 290.0)
    assert exc.value.code & ERR_MASK_SUBTYPE == ERR_CALC_MODEL_ST
    assert model.parameters.volume == v
    assert 0.7 < ng.z(1e7, 290.0) < 1.0

def test_viscosity_not_implemented():
    """Viscosity hook is not implemented"""
    with pytest.raises(NotImplementedError):
        natural_gas().viscosity0(290.0)

def test_ng_gost_model():
    """NG_GOST model built by the factory"""
    err = ErrorWrap()
    model = create_model('NG_GOST', NATURAL_GAS, p=2e6, t=290.0, phase_diagram=PhaseDiagram(), error=err)
    assert model is not None, str(err)
    assert isinstance(model, NgGost)
    assert model.model_str().model_type == eos_method.NG_GOST
    assert model.phase == state_phase.GAS
    assert model.is_valid()
    v = model.parameters.volume
    model.set_volume(8e6, 300.0)
    assert model.parameters.volume < v
    assert model.dyn_params.heat_cap_pres > model.dyn_params.heat_cap_vol
    assert abs(model.z() - model.ng.z(8e6, 300.0)) < 1e-12
    assert model.sound_speed() > 0

def test_ng_gost_set_pressure():
    """Pressure found from volume within the GOST range"""
    model = create_model('NG_GOST', NATURAL_GAS, p=2e6, t=290.0, phase_diagram=PhaseDiagram())
    v = model.get_volume(6e6, 300.0)
    model.set_pressure(v, 300.0)
    assert abs(model.parameters.pressure - 6e6) / 6e6 < 1e-4
    with pytest.raises(CalculationError):
        model.get_pressure(10.0, 300.0)

def test_ng_gost_validity():
    """States outside the envelope are calculated but invalid"""
    model = create_model('NG_GOST', NATURAL_GAS, p=2e6, t=290.0, phase_diagram=PhaseDiagram())
    model.set_volume(2e6, 360.0)
    assert not model.is_valid()
    assert model.parameters.volume > 0

def test_ng_gost_factory_failures():
    """Missing state or bad composition return None"""
    err = ErrorWrap()
    assert create_model('NG_GOST', NATURAL_GAS, error=err) is None
    assert err.is_error()
    err = ErrorWrap()
    assert create_model('NG_GOST', {'METHANE': 0.5, 'NITROGEN': 0.5}, p=2e6, t=290.0, error=err) is None
    assert err.code & ERR_GAS_MIX
