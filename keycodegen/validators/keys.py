# ========================================================================== #
#                                                                            #
#    KEYCODEGEN - The keyboard key code generator.                           #
#                                                                            #
#    Copyright (C) 2026  The keycodegen authors                              #
#                                                                            #
#    This program is free software: you can redistribute it and/or modify    #
#    it under the terms of the GNU General Public License as published by    #
#    the Free Software Foundation, either version 3 of the License, or       #
#    (at your option) any later version.                                     #
#                                                                            #
#    This program is distributed in the hope that it will be useful,         #
#    but WITHOUT ANY WARRANTY; without even the implied warranty of          #
#    MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the           #
#    GNU General Public License for more details.                            #
#                                                                            #
#    You should have received a copy of the GNU General Public License       #
#    along with this program.  If not, see <https://www.gnu.org/licenses/>.  #
#                                                                            #
# ========================================================================== #


import functools

from typing import Any

from . import ValidatorError
from . import raise_error
from . import check_not_none
from . import check_re_match

from .basic import valid_number
from .basic import valid_stripped_string_not_empty


# =====
def valid_constant_name(arg: Any) -> str:
    return check_re_match(arg, "key constant name", r"[a-zA-Z_$][a-zA-Z0-9_$]*")


def valid_comment_name(arg: Any) -> str:
    name = "key comment name"
    valid_stripped_string_not_empty(arg, name)
    if not isinstance(arg, str):
        raise_error(arg, name)
    return arg


def valid_key_code(arg: Any, name: str="") -> int:
    name = (name or "key code")
    if isinstance(arg, bool):
        raise_error(arg, name)
    return int(valid_number(arg, min=0, type=functools.partial(int, base=0), name=name))


def valid_key_codes_list(arg: Any, name: str="") -> tuple[int, ...]:
    name = (name or "key codes list")
    if not isinstance(check_not_none(arg, name), (list, tuple)):
        arg = [arg]
    return tuple(valid_key_code(code, name) for code in arg)


def valid_key_label(arg: Any) -> str:
    name = "key label"
    arg = check_not_none(arg, name)
    if not isinstance(arg, str):
        raise ValidatorError(f"The key label must be a string, not {type(arg).__name__}")
    if len(arg) == 0:
        raise_error(arg, name)
    return arg
