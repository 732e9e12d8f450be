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

from pyrealgas.classes import class_dic
from pyrealgas.errors import InitError

def validate_methods(names, variables):
    """ Maps method names given as strings onto their enum members, eg. 'pr' -> eos_method.PR.
        Enum members are passed through unchanged
    """
    variables = list(variables)
    for m, method in enumerate(names):
        if isinstance(variables[m], str):
            try:
                variables[m] = class_dic[method][variables[m].upper()]
            except KeyError:
                raise InitError(f"An incorrect {method} was specified: {variables[m]}")
    if len(variables) == 1:
        return variables[0]
    else:
        return variables
