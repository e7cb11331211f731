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


from typing import Iterable

from .keydata import KeyRecord

from .templates import inject_dictionary


# =====
WRAP_WIDTH = 80


def wrap_string(text: str, prefix: str) -> str:
    """
    Wraps the text at 80 columns and prepends the prefix to each line.
    The prefix is included into the width. Words are never split, so a line
    with a single long word may exceed the limit.
    """

    wrap_width = WRAP_WIDTH - len(prefix)
    words = text.split()
    if len(words) == 0:
        return ""
    lines: list[str] = []
    line = words[0]
    for word in words[1:]:
        if len(line) + len(word) < wrap_width:
            line += f" {word}"
        else:
            lines.append(line)
            line = word
    lines.append(line)
    return "".join(f"{prefix}{line}\n" for line in lines)


def to_hex(value: (int | None), digits: int=0) -> str:
    if value is None:
        return "null"
    return f"0x{value:0{digits}x}" if digits else f"0x{value:x}"


def escape_label(label: str) -> str:
    # Raw string literal, so the label isn't escaped, only quoted
    return (f"r\"{label}\"" if "'" in label else f"r'{label}'")


def _join_lines(lines: Iterable[str]) -> str:
    return "".join(f"{line}\n" for line in lines).rstrip()


# =====
class CodeGenerator:
    """
    Renders the key records into the text blocks which are substituted into
    the keyboard_key and keyboard_maps templates. The output depends only on
    the records order and the options, so it's stable between runs.
    """

    def __init__(self, records: list[KeyRecord], debug_names: bool=True) -> None:
        self.__records = tuple(records)
        self.__debug_names = debug_names

    def __make_debug_name(self, record: KeyRecord) -> str:
        if self.__debug_names:
            return f", debugName: kReleaseMode ? null : '{record.comment_name}'"
        return ""

    # =====

    def physical_definitions(self) -> str:
        blocks: list[str] = []
        for record in self.__records:
            comment = wrap_string(
                f"Represents the location of a \"{record.comment_name}\" key on a generalized keyboard."
                " See the function [RawKeyEvent.physicalKey] for more information.",
                "  /// ",
            )
            blocks.append(
                f"\n{comment}  static const PhysicalKeyboardKey {record.constant_name} = PhysicalKeyboardKey("
                f"{to_hex(record.usb_hid_code, digits=8)}{self.__make_debug_name(record)});\n"
            )
        return "".join(blocks)

    def logical_definitions(self) -> str:
        blocks: list[str] = []
        for record in self.__records:
            comment = wrap_string(
                f"Represents a logical \"{record.comment_name}\" key on the keyboard."
                " See the function [RawKeyEvent.logicalKey] for more information.",
                "  /// ",
            )
            label = ("" if record.key_label is None else f", keyLabel: {escape_label(record.key_label)}")
            blocks.append(
                f"\n{comment}  static const LogicalKeyboardKey {record.constant_name} = LogicalKeyboardKey("
                f"{to_hex(record.flutter_id, digits=11)}{label}{self.__make_debug_name(record)});\n"
            )
        return "".join(blocks)

    # =====

    def predefined_hid_code_map(self) -> str:
        return _join_lines(
            f"    {to_hex(record.usb_hid_code)}: {record.constant_name},"
            for record in self.__records
        )

    def predefined_key_code_map(self) -> str:
        return _join_lines(
            f"    {to_hex(record.flutter_id, digits=10)}: {record.constant_name},"
            for record in self.__records
        )

    # =====

    def android_key_code_map(self) -> str:
        return self.__make_android_key_code_map(self.__records)

    def android_numpad_map(self) -> str:
        return self.__make_android_key_code_map([
            record for record in self.__records
            if record.constant_name.startswith("numpad") and record.key_label is not None
        ])

    def __make_android_key_code_map(self, records: Iterable[KeyRecord]) -> str:
        return _join_lines(
            f"  {code}: LogicalKeyboardKey.{record.constant_name},"
            for record in records
            if record.android_key_codes is not None
            for code in record.android_key_codes
        )

    def android_scan_code_map(self) -> str:
        return _join_lines(
            f"  {code}: PhysicalKeyboardKey.{record.constant_name},"
            for record in self.__records
            if record.android_scan_codes is not None
            for code in record.android_scan_codes
        )

    # =====

    def fuchsia_key_code_map(self) -> str:
        return _join_lines(
            f"  {to_hex(record.flutter_id)}: LogicalKeyboardKey.{record.constant_name},"
            for record in self.__records
            if record.usb_hid_code is not None
        )

    def fuchsia_hid_code_map(self) -> str:
        return _join_lines(
            f"  {to_hex(record.usb_hid_code)}: PhysicalKeyboardKey.{record.constant_name},"
            for record in self.__records
            if record.usb_hid_code is not None
        )

    # =====

    def get_keyboard_keys_mappings(self) -> dict[str, str]:
        return {
            "PHYSICAL_KEY_MAP":         self.predefined_hid_code_map(),
            "LOGICAL_KEY_MAP":          self.predefined_key_code_map(),
            "LOGICAL_KEY_DEFINITIONS":  self.logical_definitions(),
            "PHYSICAL_KEY_DEFINITIONS": self.physical_definitions(),
        }

    def get_keyboard_maps_mappings(self) -> dict[str, str]:
        return {
            "ANDROID_SCAN_CODE_MAP": self.android_scan_code_map(),
            "ANDROID_KEY_CODE_MAP":  self.android_key_code_map(),
            "ANDROID_NUMPAD_MAP":    self.android_numpad_map(),
            "FUCHSIA_SCAN_CODE_MAP": self.fuchsia_hid_code_map(),
            "FUCHSIA_KEY_CODE_MAP":  self.fuchsia_key_code_map(),
        }

    def generate_keyboard_keys(self, template: str) -> str:
        return inject_dictionary(template, self.get_keyboard_keys_mappings())

    def generate_keyboard_maps(self, template: str) -> str:
        return inject_dictionary(template, self.get_keyboard_maps_mappings())
