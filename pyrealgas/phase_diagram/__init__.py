from .phase_diagram import (
    PhaseDiagram,
    default_phase_diagram,
    classify_phase,
    branch_volumes,
    saturation_pressure,
    calculate_binodal,
    binodal_point,
    reduced_eos,
    ReducedEOS,
    ReducedRK2,
    ReducedPR,
)
