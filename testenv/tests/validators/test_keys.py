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


from typing import Any

import pytest

from keycodegen.validators import ValidatorError
from keycodegen.validators.keys import valid_constant_name
from keycodegen.validators.keys import valid_comment_name
from keycodegen.validators.keys import valid_key_code
from keycodegen.validators.keys import valid_key_codes_list
from keycodegen.validators.keys import valid_key_label


# =====
@pytest.mark.parametrize("arg, retval", [
    ("keyA",     "keyA"),
    (" enter ",  "enter"),
    ("numpad_1", "numpad_1"),
    ("_hidden",  "_hidden"),
    ("$key",     "$key"),
])
def test_ok__valid_constant_name(arg: Any, retval: str) -> None:
    assert valid_constant_name(arg) == retval


@pytest.mark.parametrize("arg", ["", " ", None, "1key", "key A", "key-a", "ключ"])
def test_fail__valid_constant_name(arg: Any) -> None:
    with pytest.raises(ValidatorError):
        print(valid_constant_name(arg))


# =====
@pytest.mark.parametrize("arg, retval", [
    ("Enter",    "Enter"),
    (" Key A ",  " Key A "),
    ("Key\tA",   "Key\tA"),
])
def test_ok__valid_comment_name(arg: Any, retval: str) -> None:
    assert valid_comment_name(arg) == retval


@pytest.mark.parametrize("arg", ["", " ", None, 1])
def test_fail__valid_comment_name(arg: Any) -> None:
    with pytest.raises(ValidatorError):
        print(valid_comment_name(arg))


# =====
@pytest.mark.parametrize("arg, retval", [
    (0,          0),
    (40,         40),
    ("40 ",      40),
    ("0x28",     0x28),
    ("0X70028",  0x70028),
    (0x70028,    0x70028),
])
def test_ok__valid_key_code(arg: Any, retval: int) -> None:
    assert valid_key_code(arg) == retval


@pytest.mark.parametrize("arg", ["", None, -1, "-0x1", "x", "1.0", 1.5, True, False])
def test_fail__valid_key_code(arg: Any) -> None:
    with pytest.raises(ValidatorError):
        print(valid_key_code(arg))


# =====
@pytest.mark.parametrize("arg, retval", [
    ([],           ()),
    ([29],         (29,)),
    ([145, "0x8"], (145, 8)),
    ((1, 2),       (1, 2)),
    (205,          (205,)),
])
def test_ok__valid_key_codes_list(arg: Any, retval: tuple) -> None:
    assert valid_key_codes_list(arg) == retval


@pytest.mark.parametrize("arg", [None, [None], ["a"], [1, -1], "x"])
def test_fail__valid_key_codes_list(arg: Any) -> None:
    with pytest.raises(ValidatorError):
        print(valid_key_codes_list(arg))


# =====
@pytest.mark.parametrize("arg", ["a", " ", "'", "\"", "it's", "\\"])
def test_ok__valid_key_label(arg: Any) -> None:
    assert valid_key_label(arg) == arg


@pytest.mark.parametrize("arg", ["", None, 1, ["a"]])
def test_fail__valid_key_label(arg: Any) -> None:
    with pytest.raises(ValidatorError):
        print(valid_key_label(arg))
