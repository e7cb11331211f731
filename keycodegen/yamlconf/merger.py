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


# =====
def yaml_merge(dest: dict, src: (dict | None), source_name: str="") -> None:
    """ Recursively merges the source dictionary into the destination. """

    if dest is None:
        raise ValueError(f"Could not merge {source_name or 'the source'} into None. The destination cannot be None")
    if src is None:
        return
    for key in src:
        if key in dest and isinstance(dest[key], dict) and isinstance(src[key], dict):
            yaml_merge(dest[key], src[key], source_name)
        else:
            dest[key] = src[key]
