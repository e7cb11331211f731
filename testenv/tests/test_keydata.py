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


import json
import pathlib
import textwrap

from typing import Any

import pytest

from keycodegen.keydata import HID_PLANE
from keycodegen.keydata import KeyDataError
from keycodegen.keydata import KeyRecord
from keycodegen.keydata import make_comment_name
from keycodegen.keydata import make_flutter_id
from keycodegen.keydata import parse_key_data
from keycodegen.keydata import load_key_data

from keycodegen.yamlconf.loader import load_yaml_file


# =====
@pytest.mark.parametrize("name, retval", [
    ("enter",        "Enter"),
    ("keyA",         "Key A"),
    ("numpad1",      "Numpad1"),
    ("numpadEnter",  "Numpad Enter"),
    ("f12",          "F12"),
    ("audioVolumeUp", "Audio Volume Up"),
])
def test_ok__make_comment_name(name: str, retval: str) -> None:
    assert make_comment_name(name) == retval


@pytest.mark.parametrize("label, usb, retval", [
    ("a",   0x70004, 0x61),
    ("1",   None,    0x31),
    (None,  0x70028, HID_PLANE | 0x70028),
    ("ab",  0x70004, HID_PLANE | 0x70004),
    (None,  None,    None),
])
def test_ok__make_flutter_id(label: (str | None), usb: (int | None), retval: (int | None)) -> None:
    assert make_flutter_id(label, usb) == retval


# =====
def test_ok__parse_key_data() -> None:
    records = parse_key_data({
        "keyA": {
            "scanCodes": {"usb": 0x70004, "android": [30]},
            "keyCodes": {"android": [29]},
            "keyLabel": "a",
        },
        "enter": {
            "names": {"english": "Return"},
            "scanCodes": {"usb": "0x70028"},
        },
        "suspend": {
            "flutterId": 0x100000014,
            "scanCodes": {"android": 205},
        },
    })
    assert records == [
        KeyRecord(
            constant_name="keyA",
            comment_name="Key A",
            flutter_id=0x61,
            usb_hid_code=0x70004,
            key_label="a",
            android_key_codes=(29,),
            android_scan_codes=(30,),
        ),
        KeyRecord(
            constant_name="enter",
            comment_name="Return",
            flutter_id=HID_PLANE | 0x70028,
            usb_hid_code=0x70028,
        ),
        KeyRecord(
            constant_name="suspend",
            comment_name="Suspend",
            flutter_id=0x100000014,
            android_scan_codes=(205,),
        ),
    ]


def test_ok__parse_key_data__comment_name_as_is() -> None:
    records = parse_key_data({"enter": {"names": {"english": " Return "}, "scanCodes": {"usb": 0x70028}}})
    assert records[0].comment_name == " Return "


def test_ok__parse_key_data__order() -> None:
    names = ["zeta", "alpha", "mid", "beta"]
    raw = {name: {"scanCodes": {"usb": index}} for (index, name) in enumerate(names)}
    assert [record.constant_name for record in parse_key_data(raw)] == names


@pytest.mark.parametrize("raw", [
    None,
    [],
    "keys",
    {"keyA": None},
    {"keyA": {}},
    {"key A": {"scanCodes": {"usb": 4}}},
    {"1key": {"scanCodes": {"usb": 4}}},
    {"keyA": {"scanCodes": {"usb": -4}}},
    {"keyA": {"scanCodes": {"usb": "x"}}},
    {"keyA": {"scanCodes": {"usb": True}}},
    {"keyA": {"scanCodes": [4]}},
    {"keyA": {"scanCodes": {"usb": 4, "android": ["a"]}}},
    {"keyA": {"scanCodes": {"usb": 4}, "keyLabel": 1}},
    {"keyA": {"scanCodes": {"usb": 4}, "keyLabel": ""}},
    {"keyA": {"scanCodes": {"usb": 4}, "names": {"english": " "}}},
    {"keyA": {"scanCodes": {"usb": 4}}, " keyA": {"scanCodes": {"usb": 5}}},
])
def test_fail__parse_key_data(raw: Any) -> None:
    with pytest.raises(KeyDataError):
        print(parse_key_data(raw))


# =====
def test_ok__load_key_data__json(tmp_path: pathlib.Path) -> None:
    path = tmp_path / "key_data.json"
    path.write_text(json.dumps({
        "numpad1": {
            "scanCodes": {"usb": 458841, "android": [79]},
            "keyCodes": {"android": [145, 8]},
            "keyLabel": "1",
        },
        "no": {"scanCodes": {"usb": 1}},
    }))
    records = load_key_data(str(path))
    assert [record.constant_name for record in records] == ["numpad1", "no"]
    assert records[0].android_key_codes == (145, 8)
    assert records[0].flutter_id == 0x31


def test_ok__load_key_data__yaml_include(tmp_path: pathlib.Path) -> None:
    (tmp_path / "extra.yaml").write_text(textwrap.dedent("""
        quote:
            scanCodes: {usb: 0x70034}
            keyLabel: "'"
    """))
    path = tmp_path / "key_data.yaml"
    path.write_text(textwrap.dedent("""
        keys: !include extra.yaml
    """))
    records = parse_key_data(load_yaml_file(str(path))["keys"])
    assert records == [KeyRecord(
        constant_name="quote",
        comment_name="Quote",
        flutter_id=0x27,
        usb_hid_code=0x70034,
        key_label="'",
    )]


def test_fail__load_key_data(tmp_path: pathlib.Path) -> None:
    path = tmp_path / "key_data.json"
    path.write_text(json.dumps({"keyA": {"scanCodes": {"usb": -1}}}))
    with pytest.raises(KeyDataError, match="key_data.json"):
        load_key_data(str(path))
