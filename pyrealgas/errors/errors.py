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

logger = logging.getLogger(__name__)

# Error codes pack a type in the low nibble, a subtype in the next one
# and the gas mixture flag above them
ERR_SUCCESS_T = 0x00
ERR_FILEIO_T = 0x01
ERR_CALCULATE_T = 0x02
ERR_STRING_T = 0x03
ERR_INIT_T = 0x04

ERR_MASK_TYPE = 0x0F
ERR_MASK_SUBTYPE = 0xF0

ERR_CALC_GAS_P_ST = 0x10  # Parameters
ERR_CALC_PHASE_ST = 0x20  # Phase diagram
ERR_CALC_MODEL_ST = 0x30  # Model
ERR_CALC_MIX_ST = 0x40  # Gas mix

ERR_INIT_ZERO_ST = 0x10
ERR_INIT_NULLP_ST = 0x20

ERR_GAS_MIX = 0x100

_custom_msg = {
    ERR_SUCCESS_T: ["there are not any errors"],
    ERR_FILEIO_T: ["fileio error", "input from file error", "output to file error"],
    ERR_CALCULATE_T: ["calculate error", "parameters error", "phase diagram error", "model error", "gas mix error"],
    ERR_STRING_T: ["string processing error", "string len error", "string parsing error", "passed null string"],
    ERR_INIT_T: ["init error", "zero value init", "nullptr value init"],
}


def error_message(code: int) -> str:
    """ Returns the default text for an error code """
    err_type = code & ERR_MASK_TYPE
    subtype = (code & ERR_MASK_SUBTYPE) >> 4
    msgs = _custom_msg.get(err_type)
    if msgs is None or subtype >= len(msgs):
        return "unknown error"
    msg = msgs[subtype]
    if code & ERR_GAS_MIX:
        msg += " (gas mix)"
    return msg


class RealGasError(ValueError):
    """ Base of all pyrealgas errors. Carries an error code and message """
    default_code = ERR_CALCULATE_T

    def __init__(self, msg: str = "", code: int = None):
        self.code = self.default_code if code is None else code
        self.msg = msg if msg else error_message(self.code)
        super().__init__(self.msg)


class InitError(RealGasError):
    """ Invalid input: empty, zero or non-physical values """
    default_code = ERR_INIT_T


class CalculationError(RealGasError):
    """ Numeric failure: solver, iteration or a state outside of a model's envelope """
    default_code = ERR_CALCULATE_T


class GasMixError(InitError):
    """ Failure averaging a gas mixture """
    default_code = ERR_INIT_T | ERR_GAS_MIX


class PhaseDiagramError(GasMixError):
    """ Binodal curve requested for a mixture that could not be averaged """
    default_code = ERR_CALCULATE_T | ERR_CALC_PHASE_ST | ERR_GAS_MIX


class ErrorWrap:
    """ Queryable error slot filled by factories that return None on failure """

    def __init__(self, code: int = ERR_SUCCESS_T, msg: str = ""):
        self.code = code
        self.msg = msg

    def set_error(self, code: int, msg: str = "") -> int:
        self.code = code
        self.msg = msg if msg else error_message(code)
        return code

    def set_from(self, exc: RealGasError) -> int:
        return self.set_error(exc.code, exc.msg)

    def is_error(self) -> bool:
        return self.code != ERR_SUCCESS_T

    def reset(self):
        self.code = ERR_SUCCESS_T
        self.msg = ""

    def log_error(self):
        if self.is_error():
            logger.error(f"error {hex(self.code)}: {self.msg}")

    def __bool__(self):
        return self.is_error()

    def __repr__(self):
        return f"ErrorWrap(code={hex(self.code)}, msg={self.msg!r})"
