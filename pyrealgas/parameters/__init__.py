from .parameters import (
    Parameters,
    ConstParameters,
    DynParameters,
    MixComponent,
    ComponentMix,
    BinodalPoints,
    StateLog,
    STATE_PHASE_NAMES,
    state_log,
    states_table,
    parameters_string,
    parameters_string_head,
    const_parameters_string,
)
