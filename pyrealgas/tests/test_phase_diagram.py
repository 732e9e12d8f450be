#!/usr/bin/env python3
"""
Validation tests for binodal curves, their cache and phase classification.
Run with: python3 -m pytest pyrealgas/tests/ -v
"""

import sys
import os
import importlib
import threading
import pytest

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', '..'))
from pyrealgas.classes import state_phase, eos_method
from pyrealgas.constants import BINODAL_TEMPERATURES
from pyrealgas.errors import (InitError, PhaseDiagramError, error_message, ERR_GAS_MIX, ERR_CALCULATE_T,
                              ERR_CALC_PHASE_ST, ERR_MASK_TYPE, ERR_MASK_SUBTYPE)
from pyrealgas.parameters import ConstParameters, ComponentMix, BinodalPoints
from pyrealgas.phase_diagram import (PhaseDiagram, ReducedRK2, ReducedPR, binodal_point, calculate_binodal,
                                     classify_phase, saturation_pressure, branch_volumes, reduced_eos)


phase_diagram_module = importlib.import_module('pyrealgas.phase_diagram.phase_diagram')

VK, PK, TK, ACF = 0.00617, 4.641e6, 190.66, 0.011  # Methane

def methane():
    return ConstParameters.init(VK, PK, TK, 0.016043, ACF, name='methane')

def test_reduced_eos_critical_point():
    """Reduced isotherm t=1 passes through (v=1, p=1) for both equations of state"""
    for eos in [ReducedRK2(), ReducedPR(ACF)]:
        p = eos.pressure(1.0, 1.0)
        assert abs(p - 1.0) < 0.01, f"{eos.name}: p(1, 1)={p}"

def test_line_integral_matches_quadrature():
    """Analytic isotherm areas agree with numerical integration"""
    for eos in [ReducedRK2(), ReducedPR(ACF)]:
        analytic = eos.line_integral(0.6, 3.0, 0.8)
        numeric = super(type(eos), eos).line_integral(0.6, 3.0, 0.8)
        assert abs(analytic - numeric) < 1e-6 * abs(numeric), f"{eos.name}: {analytic} vs {numeric}"

def test_reduced_eos_for_gost():
    """NG_GOST states use the Peng-Robinson binodal"""
    assert isinstance(reduced_eos(eos_method.NG_GOST, ACF), ReducedPR)
    assert isinstance(reduced_eos('RK2', ACF), ReducedRK2)

def test_binodal_point_equal_area():
    """Saturation point satisfies the equal area rule"""
    eos = ReducedPR(ACF)
    p, v1, v3 = binodal_point(eos, 6, 0.8)
    assert v1 < 1.0 < v3
    rect = (v3 - v1) * p
    assert abs(rect - eos.line_integral(v1, v3, 0.8)) / rect < 0.005

def test_binodal_monotonic():
    """Pressure and liquid volume fall, vapour volume rises, moving down from the critical point"""
    for model in ['RK2', 'PR']:
        bp = calculate_binodal(reduced_eos(model, ACF))
        assert bp.t[0] == 1.0 and bp.p[0] == 1.0
        assert len(bp) > len(BINODAL_TEMPERATURES) // 2, f"{model}: only {len(bp)} points solved"
        for i in range(1, len(bp)):
            assert bp.t[i] < bp.t[i - 1]
            assert bp.p[i] < bp.p[i - 1], f"{model}: p not decreasing at {i}: {bp.p}"
            assert bp.vLeft[i] <= bp.vLeft[i - 1], f"{model}: vLeft not decreasing at {i}"
            assert bp.vRight[i] >= bp.vRight[i - 1], f"{model}: vRight not increasing at {i}"
            assert bp.vLeft[i] < 1.0 < bp.vRight[i]

def test_cache_computes_once():
    """Second request for the same (model, acentric) is served from the cache"""
    pd_ = PhaseDiagram()
    bp1 = pd_.get_binodal_points(VK, PK, TK, 'PR', ACF)
    bp2 = pd_.get_binodal_points(2 * VK, PK, TK, eos_method.PR, ACF + 0.00005)
    assert pd_.calculate_count == 1
    assert len(pd_) == 1
    assert abs(bp2.vLeft[1] - 2 * bp1.vLeft[1]) < 1e-12
    pd_.get_binodal_points(VK, PK, TK, 'RK2', ACF)
    pd_.get_binodal_points(VK, PK, TK, 'PR', 0.1)
    assert pd_.calculate_count == 3

def test_cache_returns_copies():
    """Changing a returned curve does not affect the cache"""
    pd_ = PhaseDiagram()
    bp1 = pd_.get_binodal_points(VK, PK, TK, 'PR', ACF)
    p1 = bp1.p[1]
    bp1.p[1] = -1.0
    bp1.hLeft = [0.0] * len(bp1)
    bp2 = pd_.get_binodal_points(VK, PK, TK, 'PR', ACF)
    assert bp2.p[1] == p1
    assert bp2.hLeft is None

def test_cache_scaled():
    """Returned curve is scaled to the critical point of the request"""
    bp = PhaseDiagram().get_binodal_points(VK, PK, TK, 'PR', ACF)
    assert bp.t[0] == TK and bp.p[0] == PK and bp.vLeft[0] == VK
    assert all(TK * 0.49 < t <= TK for t in bp.t)

def test_cache_concurrent():
    """Concurrent requests compute a curve once"""
    pd_ = PhaseDiagram()
    results = []
    def worker():
        results.append(pd_.get_binodal_points(VK, PK, TK, 'PR', ACF))
    threads = [threading.Thread(target=worker) for _ in range(8)]
    for th in threads:
        th.start()
    for th in threads:
        th.join()
    assert pd_.calculate_count == 1
    assert len(results) == 8
    assert all(r.p == results[0].p for r in results)

def test_erase_binodal_points():
    """Erasing by model & acentric factor"""
    pd_ = PhaseDiagram()
    pd_.get_binodal_points(VK, PK, TK, 'PR', ACF)
    pd_.get_binodal_points(VK, PK, TK, 'PR', 0.2)
    pd_.get_binodal_points(VK, PK, TK, 'RK2', ACF)
    pd_.erase_binodal_points('PR', 0.2)
    assert len(pd_) == 2
    pd_.erase_binodal_points('RK2')
    assert len(pd_) == 1
    pd_.erase_binodal_points()
    assert len(pd_) == 0
    pd_.get_binodal_points(VK, PK, TK, 'PR', ACF)
    assert pd_.calculate_count == 4

def test_invalid_input():
    """Non-positive critical values or acentric factor raise InitError"""
    pd_ = PhaseDiagram()
    with pytest.raises(InitError):
        pd_.get_binodal_points(0.0, PK, TK, 'PR', ACF)
    with pytest.raises(InitError):
        pd_.get_binodal_points(VK, PK, TK, 'PR', 0.0)
    with pytest.raises(InitError):
        pd_.get_binodal_points(VK, PK, TK, 'VDW', ACF)
    assert pd_.calculate_count == 0

def test_binodal_for_mixture():
    """Mixture curves use the pseudo-critical point, failures raise PhaseDiagramError"""
    pd_ = PhaseDiagram()
    cp = methane()
    mix = ComponentMix.init([(1.0, cp, None)])
    bp = pd_.get_binodal_points_mix(mix, 'PR')
    assert abs(bp.p[0] - PK) < 1e-6
    with pytest.raises(PhaseDiagramError) as exc:
        pd_.get_binodal_points_mix(ComponentMix([]), 'PR')
    code = exc.value.code
    assert code & ERR_GAS_MIX
    assert code & ERR_MASK_TYPE == ERR_CALCULATE_T
    assert code & ERR_MASK_SUBTYPE == ERR_CALC_PHASE_ST
    assert error_message(code) == "phase diagram error (gas mix)"

def test_classify_supercritical():
    """Above T_K: SCF at or above P_K, GAS below it"""
    cp = methane()
    bp = PhaseDiagram().get_binodal_points_cp(cp, 'PR')
    assert classify_phase(0.005, 5e6, 200.0, cp, bp) == state_phase.SCF
    assert classify_phase(0.05, 1e6, 200.0, cp, bp) == state_phase.GAS
    assert classify_phase(0.05, 1e6, 200.0, cp, None) == state_phase.NOT_SET

def test_classify_subcritical():
    """Below T_K: liquid left of the curve, gas right of it, two phase between"""
    cp = methane()
    bp = PhaseDiagram().get_binodal_points_cp(cp, 'PR')
    i = 3
    p = bp.p[i]
    t = bp.t[i]
    vl, vr = branch_volumes(p, bp)
    assert abs(vl - bp.vLeft[i]) < 1e-12 and abs(vr - bp.vRight[i]) < 1e-12
    assert classify_phase(0.5 * vl, p, t, cp, bp) == state_phase.LIQUID
    assert classify_phase(2.0 * vr, p, t, cp, bp) == state_phase.GAS
    assert classify_phase(0.5 * (vl + cp.V_K), p, t, cp, bp) == state_phase.LIQ_STEAM
    assert classify_phase(0.5 * (vr + cp.V_K), p, t, cp, bp) == state_phase.LIQ_STEAM

def test_classify_interpolates_between_points():
    """Between two sampled pressures, branch volumes are interpolated linearly in pressure"""
    bp = BinodalPoints([1.0, 0.9, 0.8], [1.0, 0.6, 0.3], [1.0, 0.6, 0.5], [1.0, 2.0, 4.0])
    vl, vr = branch_volumes(0.45, bp)
    assert abs(vl - 0.55) < 1e-12
    assert abs(vr - 3.0) < 1e-12
    cp = ConstParameters.init(1.0, 1.0, 1.0, 8.314462618, 0.1)
    assert classify_phase(2.8, 0.45, 0.85, cp, bp) == state_phase.LIQ_STEAM
    assert classify_phase(3.2, 0.45, 0.85, cp, bp) == state_phase.GAS
    assert classify_phase(0.54, 0.45, 0.85, cp, bp) == state_phase.LIQUID
    assert classify_phase(0.56, 0.45, 0.85, cp, bp) == state_phase.LIQ_STEAM
    vl, vr = branch_volumes(0.6, bp)
    assert abs(vl - 0.6) < 1e-12 and abs(vr - 2.0) < 1e-12
    assert branch_volumes(0.1, bp) is None

def test_classify_below_curve():
    """Below the lowest sampled pressure: two phase left of V_K, gas right of it"""
    cp = ConstParameters.init(1.0, 1.0, 1.0, 8.314462618, 0.1)
    bp = BinodalPoints([1.0, 0.9, 0.8], [1.0, 0.6, 0.3], [1.0, 0.6, 0.5], [1.0, 2.0, 4.0])
    assert classify_phase(0.5, 0.1, 0.7, cp, bp) == state_phase.LIQ_STEAM
    assert classify_phase(5.0, 0.1, 0.7, cp, bp) == state_phase.GAS

def test_saturation_pressure():
    """Saturation pressure reproduces sampled points and falls with temperature"""
    bp = PhaseDiagram().get_binodal_points(VK, PK, TK, 'PR', ACF)
    for i in range(1, len(bp)):
        ps = saturation_pressure(bp.t[i], bp)
        assert abs(ps - bp.p[i]) / bp.p[i] < 1e-9
    assert saturation_pressure(TK + 1, bp) is None
    cold = saturation_pressure(0.4 * TK, bp)
    assert 0 < cold < bp.p[-1]
    mid = saturation_pressure(0.5 * (bp.t[1] + bp.t[2]), bp)
    assert bp.p[2] < mid < bp.p[1]

class StalledPR(ReducedPR):
    """Peng-Robinson whose equal area rule is never met on the t=0.8 isotherm"""
    def line_integral(self, v1, v2, t):
        if t == 0.8:
            return 0.0
        return super().line_integral(v1, v2, t)

def test_unsolved_point_dropped():
    """A point out of tries is dropped, the rest of the curve is kept"""
    full = calculate_binodal(ReducedPR(ACF))
    assert 0.8 in full.t
    assert binodal_point(StalledPR(ACF), BINODAL_TEMPERATURES.index(0.8), 0.8) is None
    bp = calculate_binodal(StalledPR(ACF))
    assert bp.t == [t for t in full.t if t != 0.8]
    assert bp.p == [p for t, p in zip(full.t, full.p) if t != 0.8]

def test_no_tries_left():
    """With every point out of tries only the critical point remains"""
    with pytest.MonkeyPatch.context() as mp:
        mp.setattr(phase_diagram_module, 'BINODAL_MAX_TRIES', 0)
        bp = calculate_binodal(ReducedPR(ACF))
    assert bp.t == [1.0] and bp.p == [1.0]
    assert bp.vLeft == [1.0] and bp.vRight == [1.0]
