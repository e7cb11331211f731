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
import argparse
import logging
import logging.config

import pygments
import pygments.lexers.data
import pygments.formatters

from .. import tools

from ..yamlconf import ConfigError
from ..yamlconf import make_config
from ..yamlconf import Section
from ..yamlconf import Option
from ..yamlconf import build_raw_from_options
from ..yamlconf.dumper import make_config_dump
from ..yamlconf.loader import load_yaml_file
from ..yamlconf.merger import yaml_merge

from ..validators.basic import valid_bool

from ..validators.os import valid_abs_path


# =====
def init(
    prog: (str | None)=None,
    description: (str | None)=None,
    add_help: bool=True,
    cli_logging: bool=False,
    argv: (list[str] | None)=None,
) -> tuple[argparse.ArgumentParser, list[str], Section]:

    argv = (argv or sys.argv)
    assert len(argv) > 0

    parser = argparse.ArgumentParser(
        prog=(prog or argv[0]),
        description=description,
        add_help=add_help,
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    parser.add_argument("-c", "--config", default="/etc/keycodegen/main.yaml", type=valid_abs_path,
                        help="Set config file path", metavar="<file>")
    parser.add_argument("-o", "--set-options", default=[], nargs="+",
                        help="Override config options list (like sec/sub/opt=value)", metavar="<k=v>",)
    parser.add_argument("-m", "--dump-config", action="store_true",
                        help="View current configuration (include all overrides)")
    (options, remaining) = parser.parse_known_args(argv)

    config = _init_config(options.config, options.set_options)
    if options.dump_config:
        _dump_config(config)
        raise SystemExit()

    logging.captureWarnings(True)
    logging.config.dictConfig(config.logging)
    if cli_logging:
        logging.getLogger().handlers[0].setFormatter(logging.Formatter(
            "-- {levelname:>7} -- {message}",
            style="{",
        ))

    return (parser, remaining, config)


# =====
def _init_config(config_path: str, override_options: list[str]) -> Section:
    config_path = os.path.expanduser(config_path)
    try:
        raw_config: dict = load_yaml_file(config_path)
    except Exception as ex:
        raise SystemExit(f"ConfigError: Can't read config file {config_path!r}:\n{tools.efmt(ex)}")
    if raw_config is None:
        raw_config = {}
    if not isinstance(raw_config, dict):
        raise SystemExit(f"ConfigError: Top-level of the file {config_path!r} must be a dictionary")

    try:
        yaml_merge(raw_config, (raw_config.pop("override", {}) or {}), "override section")
        yaml_merge(raw_config, build_raw_from_options(override_options), "raw CLI options")
        return make_config(raw_config, _get_config_scheme())
    except ConfigError as ex:
        raise SystemExit(f"ConfigError: {ex}")


def _dump_config(config: Section) -> None:
    dump = make_config_dump(config)
    if sys.stdout.isatty():
        dump = pygments.highlight(
            dump,
            pygments.lexers.data.YamlLexer(),
            pygments.formatters.TerminalFormatter(bg="dark"),  # pylint: disable=no-member
        )
    print(dump)


def _get_config_scheme() -> dict:
    return {
        "logging": Option({
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {"default": {"format": "%(asctime)s %(levelname)s --- %(name)s: %(message)s"}},
            "handlers": {"console": {
                "level": "INFO",
                "class": "logging.StreamHandler",
                "formatter": "default",
                "stream": "ext://sys.stderr",
            }},
            "root": {"level": "INFO", "handlers": ["console"]},
        }),

        "keys": {
            "data": Option("/usr/share/keycodegen/key_data.json", type=valid_abs_path,
                           help="Key database (JSON or YAML)"),
        },

        "gen": {
            "debug_names": Option(True, type=valid_bool,
                                  help="Add debugName to the key definitions (omitted in release mode)"),
        },

        "keyboard_key": {
            "template": Option("/usr/share/keycodegen/templates/keyboard_key.tmpl", type=valid_abs_path),
            "output":   Option("", type=valid_abs_path, if_empty="", help="Empty value means stdout"),
        },

        "keyboard_maps": {
            "template": Option("/usr/share/keycodegen/templates/keyboard_maps.tmpl", type=valid_abs_path),
            "output":   Option("", type=valid_abs_path, if_empty="", help="Empty value means stdout"),
        },
    }
