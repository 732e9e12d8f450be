"""
pyrealgas
===================================

-----------------------------------------------
Real gas equations of state and phase diagrams
-----------------------------------------------

Thermodynamic state of real gases and gas mixtures, moved from state to state with
heat capacities and internal energy carried along the path.

Includes;

- Cubic equations of state: Redlich-Kwong (2 parameter) and Peng-Robinson
- Natural gas properties to GOST 30319.3-2015 (AGA8-DC92, ISO 20765-1)
- Binodal (liquid-vapour coexistence) curves by the Maxwell equal area rule, cached per gas
- Phase classification of states: gas, liquid, two phase or supercritical
- Pseudo-critical averaging of gas mixtures
- Functional API returning floats, numpy arrays or DataFrames

All values in SI units: Pa, K, m³/kg, J/kg, J/(kg·K), molar mass in kg/mol
"""

submodules = [
    'classes',
    'config',
    'constants',
    'errors',
    'gas',
    'mix',
    'models',
    'ng_gost',
    'parameters',
    'phase_diagram',
    'shared_fns',
    'validate'
]

__all__ = submodules

import importlib

def __dir__():
    return __all__


def __getattr__(name):
    if name in submodules:
        return importlib.import_module(f'pyrealgas.{name}')
    else:
        try:
            return globals()[name]
        except KeyError:
            raise AttributeError(
                f"Module 'pyrealgas' has no attribute '{name}'"
            )
