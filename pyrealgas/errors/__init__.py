from .errors import (
    RealGasError,
    InitError,
    CalculationError,
    GasMixError,
    PhaseDiagramError,
    ErrorWrap,
    error_message,
    ERR_SUCCESS_T,
    ERR_FILEIO_T,
    ERR_CALCULATE_T,
    ERR_STRING_T,
    ERR_INIT_T,
    ERR_MASK_TYPE,
    ERR_MASK_SUBTYPE,
    ERR_CALC_GAS_P_ST,
    ERR_CALC_PHASE_ST,
    ERR_CALC_MODEL_ST,
    ERR_CALC_MIX_ST,
    ERR_INIT_ZERO_ST,
    ERR_INIT_NULLP_ST,
    ERR_GAS_MIX,
)
