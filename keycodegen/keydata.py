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


import re
import dataclasses

from typing import Any

from .logging import get_logger

from .yamlconf.loader import load_yaml_file

from .validators import ValidatorError
from .validators.keys import valid_constant_name
from .validators.keys import valid_comment_name
from .validators.keys import valid_key_code
from .validators.keys import valid_key_codes_list
from .validators.keys import valid_key_label


# =====
HID_PLANE = 0x00100000000


class KeyDataError(ValueError):
    pass


@dataclasses.dataclass(frozen=True)
class KeyRecord:
    constant_name: str
    comment_name:  str
    flutter_id:    int
    usb_hid_code:  (int | None) = None
    key_label:     (str | None) = None

    android_key_codes:  (tuple[int, ...] | None) = None
    android_scan_codes: (tuple[int, ...] | None) = None


# =====
def make_comment_name(constant_name: str) -> str:
    words = re.sub(r"([a-z0-9])([A-Z])", r"\1 \2", constant_name)
    return words[:1].upper() + words[1:]


def make_flutter_id(key_label: (str | None), usb_hid_code: (int | None)) -> (int | None):
    if key_label is not None and len(key_label) == 1:
        return ord(key_label)
    if usb_hid_code is not None:
        return (HID_PLANE | usb_hid_code)
    return None


def _get_dict(entry: dict, key: str) -> dict:
    value = (entry.get(key) or {})
    if not isinstance(value, dict):
        raise ValidatorError(f"The {key!r} section must be a dictionary")
    return value


def _make_key_record(name: Any, entry: Any) -> KeyRecord:
    constant_name = valid_constant_name(name)
    if not isinstance(entry, dict):
        raise ValidatorError("The key entry must be a dictionary")

    names = _get_dict(entry, "names")
    scan_codes = _get_dict(entry, "scanCodes")
    key_codes = _get_dict(entry, "keyCodes")

    usb_hid_code: (int | None) = None
    if scan_codes.get("usb") is not None:
        usb_hid_code = valid_key_code(scan_codes["usb"], "USB HID code")

    key_label: (str | None) = None
    if entry.get("keyLabel") is not None:
        key_label = valid_key_label(entry["keyLabel"])

    flutter_id: (int | None)
    if entry.get("flutterId") is not None:
        flutter_id = valid_key_code(entry["flutterId"], "Flutter key ID")
    else:
        flutter_id = make_flutter_id(key_label, usb_hid_code)
        if flutter_id is None:
            raise ValidatorError("Can't derive Flutter key ID without a single-char label or an USB HID code")

    return KeyRecord(
        constant_name=constant_name,
        comment_name=(
            valid_comment_name(names["english"])
            if names.get("english") is not None
            else make_comment_name(constant_name)
        ),
        flutter_id=flutter_id,
        usb_hid_code=usb_hid_code,
        key_label=key_label,
        android_key_codes=(
            valid_key_codes_list(key_codes["android"], "Android key codes")
            if key_codes.get("android") is not None else None
        ),
        android_scan_codes=(
            valid_key_codes_list(scan_codes["android"], "Android scan codes")
            if scan_codes.get("android") is not None else None
        ),
    )


def parse_key_data(raw: Any) -> list[KeyRecord]:
    if not isinstance(raw, dict):
        raise KeyDataError("Top-level of the key data must be a dictionary")
    records: list[KeyRecord] = []
    seen: set[str] = set()
    for (name, entry) in raw.items():
        try:
            record = _make_key_record(name, entry)
        except ValidatorError as ex:
            raise KeyDataError(f"Invalid key {name!r}: {ex}")
        if record.constant_name in seen:
            raise KeyDataError(f"Duplicate key constant name {record.constant_name!r}")
        seen.add(record.constant_name)
        records.append(record)
    return records


def load_key_data(path: str) -> list[KeyRecord]:
    raw = load_yaml_file(path)
    try:
        records = parse_key_data(raw)
    except KeyDataError as ex:
        raise KeyDataError(f"{path}: {ex}")
    get_logger(0).info("Loaded %d keys from %s", len(records), path)
    return records
