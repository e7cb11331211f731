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


import sys
import os
import tempfile
import argparse

from ...logging import get_logger

from ...yamlconf import Section

from ...keydata import KeyDataError
from ...keydata import load_key_data

from ...codegen import CodeGenerator

from ...templates import read_template

from .. import init


# =====
def _get_umask() -> int:
    umask = os.umask(0)
    os.umask(umask)
    return umask


def _write_atomic(path: str, text: str) -> None:
    (tmp_fd, tmp_path) = tempfile.mkstemp(
        prefix=f".{os.path.basename(path)}.",
        dir=os.path.dirname(path),
    )
    try:
        with os.fdopen(tmp_fd, "w") as file:
            try:
                st = os.stat(path)
                os.fchown(tmp_fd, st.st_uid, st.st_gid)
                os.fchmod(tmp_fd, st.st_mode)
            except FileNotFoundError:
                os.fchmod(tmp_fd, 0o666 & ~_get_umask())
            file.write(text)
        os.rename(tmp_path, path)
    finally:
        if os.path.exists(tmp_path):
            os.remove(tmp_path)


def _is_up_to_date(path: str, text: str) -> bool:
    try:
        with open(path) as file:
            return (file.read() == text)
    except FileNotFoundError:
        return False


def _generate(config: Section, only: str) -> list[tuple[str, str]]:
    try:
        records = load_key_data(config.keys.data)
    except KeyDataError as ex:
        raise SystemExit(f"KeyDataError: {ex}")
    gen = CodeGenerator(records, **config.gen._unpack())

    results: list[tuple[str, str]] = []
    if only in ["", "keys"]:
        template = read_template(config.keyboard_key.template)
        results.append((config.keyboard_key.output, gen.generate_keyboard_keys(template)))
    if only in ["", "maps"]:
        template = read_template(config.keyboard_maps.template)
        results.append((config.keyboard_maps.output, gen.generate_keyboard_maps(template)))
    return results


# =====
def main(argv: (list[str] | None)=None) -> None:
    (parent_parser, argv, config) = init(
        add_help=False,
        cli_logging=True,
        argv=argv,
    )
    parser = argparse.ArgumentParser(
        prog="keycodegen",
        description="Generate the keyboard keys and maps sources from the key database",
        parents=[parent_parser],
    )
    parser.add_argument("--only", default="", choices=["keys", "maps"],
                        help="Generate only one of the artifacts")
    parser.add_argument("--check", action="store_true",
                        help="Don't write anything, fail if the outputs are stale")
    options = parser.parse_args(argv[1:])

    logger = get_logger(0)
    stale = 0
    for (path, text) in _generate(config, options.only):
        if options.check:
            if not path:
                raise SystemExit("Error: Can't check the stdout output, set the output path")
            if not _is_up_to_date(path, text):
                logger.error("Stale: %s", path)
                stale += 1
        elif path:
            _write_atomic(path, text)
            logger.info("Written: %s", path)
        else:
            sys.stdout.write(text)

    if stale:
        raise SystemExit(1)
