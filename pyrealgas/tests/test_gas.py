#!/usr/bin/env python3
"""
Validation tests for the functional gas API.
Run with: python3 -m pytest pyrealgas/tests/ -v
"""

import sys
import os
import numpy as np
import pandas as pd
import pytest

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', '..'))
import pyrealgas.gas as gas
from pyrealgas.errors import InitError

METHANE = dict(vk=0.00617, pk=4.641e6, tk=190.66, mw=0.016043, acf=0.011)

def test_gas_z_single():
    """Z-factor of methane at moderate conditions"""
    z = gas.gas_z(p=5e6, degk=300, **METHANE)
    assert isinstance(z, float), f"Expected float, got {type(z)}"
    assert 0.85 < z < 0.97, f"Z={z} outside expected range"

def test_gas_z_array():
    """Z-factor for array of pressures"""
    pressures = np.array([1e5, 1e6, 5e6, 1e7])
    for eos in ['PR', 'RK2']:
        z = gas.gas_z(p=pressures, degk=300, eos=eos, **METHANE)
        assert isinstance(z, np.ndarray), f"Expected ndarray, got {type(z)}"
        assert len(z) == len(pressures)
        assert all(0.7 < zi < 1.01 for zi in z), f"{eos}: Z values outside physical bounds: {z}"

def test_gas_z_low_pressure():
    """Z at very low pressure should approach 1.0"""
    z = gas.gas_z(p=1e3, degk=300, **METHANE)
    assert abs(z - 1.0) < 1e-3, f"Z at 1 kPa = {z}, should be ~1.0"

def test_gas_volume_pressure_round_trip():
    """gas_pressure inverts gas_volume"""
    p = [2e5, 3e6, 1.5e7]
    v = gas.gas_volume(p, 280, **METHANE)
    p2 = gas.gas_pressure(v, 280, **METHANE)
    assert np.allclose(p2, p, rtol=1e-6), f"{p2} vs {p}"

def test_gas_phase():
    """Phase names of liquid, gas and supercritical states"""
    assert gas.gas_phase(3e6, 150, **METHANE) == 'LIQUID'
    assert gas.gas_phase(5e5, 185, **METHANE) == 'GAS'
    assert gas.gas_phase([1e6, 6e6], 250, **METHANE) == ['GAS', 'SCF']

def test_gas_binodal():
    """Binodal curve as a DataFrame, starting at the critical point"""
    df = gas.gas_binodal(0.00617, 4.641e6, 190.66, 0.011)
    assert isinstance(df, pd.DataFrame)
    assert list(df.columns) == ['T', 'P', 'vLeft', 'vRight']
    assert df['T'].iloc[0] == 190.66
    assert df['P'].is_monotonic_decreasing

def test_gas_bad_method():
    """Unknown or composition based equations of state raise InitError"""
    with pytest.raises(InitError):
        gas.gas_z(p=5e6, degk=300, eos='VDW', **METHANE)
    with pytest.raises(InitError):
        gas.gas_z(p=5e6, degk=300, eos='NG_GOST', **METHANE)
    with pytest.raises(InitError):
        gas.gas_z(p=5e6, degk=300, vk=-1, pk=4.641e6, tk=190.66, mw=0.016043, acf=0.011)

def test_gas_z_ng():
    """GOST natural gas Z-factor, single & array"""
    comp = {'METHANE': 0.98, 'NITROGEN': 0.02}
    z = gas.gas_z_ng(1e5, 293.15, comp)
    assert isinstance(z, float)
    assert abs(z - 1.0) < 0.01
    zs = gas.gas_z_ng([1e6, 5e6], 293.15, comp)
    assert isinstance(zs, np.ndarray)
    assert zs[1] < zs[0] < 1.0
    with pytest.raises(InitError):
        gas.gas_z_ng(1e5, 293.15, {'METHANE': 0.5, 'NITROGEN': 0.5})
