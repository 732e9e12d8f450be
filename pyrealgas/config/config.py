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
from dataclasses import dataclass, field

from pyrealgas.errors import InitError, ERR_INIT_T, ERR_STRING_T

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

@dataclass
class calculation_configuration:
    """ Switches that alter how models are built """
    is_debug_mode: bool = False
    enable_iso_20765: bool = True  # Extend GOST 30319.3 component coverage by ISO 20765
    pseudocritic: bool = True  # Mixtures use averaged (pseudo-critical) parameters

    def is_debug(self) -> bool:
        return self.is_debug_mode

@dataclass
class models_configuration:
    calc_cfg: calculation_configuration = field(default_factory=calculation_configuration)
    log_level: int = logging.WARNING
    log_file: str = ""

    def set_configuration_parameter(self, param: str, value: str):
        """ Updates the field named by 'param' (case-insensitive) from its string value 'value'.
            Raises InitError for unknown parameters or values that cannot be parsed
        """
        key = param.strip().upper()
        if key in _bool_params:
            setattr(self.calc_cfg, _bool_params[key], _str_to_bool(value))
        elif key == "LOG_LEVEL":
            self.log_level = _str_to_loglevel(value)
        elif key == "LOG_FILE":
            self.log_file = value.strip()
        else:
            raise InitError(f"Unknown configuration parameter: {param}", ERR_INIT_T)
        logger.debug(f"configuration {key} set to {value}")

_bool_params = {
    "DEBUG_MODE": "is_debug_mode",
    "INCLUDE_ISO_20765": "enable_iso_20765",
    "PSEUDOCRITIC": "pseudocritic",
}

def _str_to_bool(value: str) -> bool:
    v = value.strip().lower()
    if v in ("true", "1", "yes", "on"):
        return True
    if v in ("false", "0", "no", "off"):
        return False
    raise InitError(f"Cannot read boolean from '{value}'", ERR_STRING_T)

def _str_to_loglevel(value: str) -> int:
    v = value.strip()
    if v.lstrip('-').isdigit():
        return int(v)
    level = logging.getLevelName(v.upper())
    if isinstance(level, int):
        return level
    raise InitError(f"Unknown log level '{value}'", ERR_STRING_T)

def setup_logging(cfg: models_configuration = None) -> logging.Logger:
    """ Configures the 'pyrealgas' logger from a models_configuration.
        Logs to file when cfg.log_file is set, otherwise to stderr
    """
    if cfg is None:
        cfg = models_configuration()
    pkg_logger = logging.getLogger("pyrealgas")
    for h in list(pkg_logger.handlers):
        pkg_logger.removeHandler(h)
        h.close()
    handler = logging.FileHandler(cfg.log_file) if cfg.log_file else logging.StreamHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    pkg_logger.addHandler(handler)
    pkg_logger.setLevel(logging.DEBUG if cfg.calc_cfg.is_debug_mode else cfg.log_level)
    return pkg_logger
