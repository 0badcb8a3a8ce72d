#
# config.py
#
# This source file is part of the FoundationDB open source project
#
# Copyright 2013-2024 Apple Inc. and the FoundationDB project authors
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
#

from __future__ import annotations

import argparse
import collections
import copy
import os
from pathlib import Path
from typing import Any, Dict, OrderedDict

from .generator import DEFAULT_COPYRIGHT_HOLDER, DEFAULT_PACKAGE

DEFAULT_INPUT_FILE = "/usr/local/include/foundationdb/fdb.options"
ENV_PREFIX = "FDBOPTGEN_"


def _to_bool(value: str) -> bool:
    v = value.lower()
    if v in ["on", "1", "true", "yes"]:
        return True
    if v in ["off", "0", "false", "no", ""]:
        return False
    raise ValueError("Invalid value {} -- use true or false".format(value))


class ConfigValue:
    def __init__(self, name: str, **kwargs):
        self.name = name
        self.value = None
        self.kwargs = kwargs
        if "default" in self.kwargs:
            self.value = self.kwargs["default"]

    def get_arg_name(self) -> str:
        name_to_use = self.name
        if "long_name" in self.kwargs:
            name_to_use = self.kwargs["long_name"]
        return name_to_use.replace("-", "_")

    def add_to_args(self, parser: argparse.ArgumentParser):
        kwargs = copy.copy(self.kwargs)
        long_name = self.name
        short_name = None
        if kwargs.pop("positional", False):
            parser.add_argument(self.name, nargs="?", **kwargs)
            return
        if "long_name" in kwargs:
            long_name = kwargs.pop("long_name")
        if "short_name" in kwargs:
            short_name = kwargs.pop("short_name")
        if "action" in kwargs and kwargs["action"] in ["store_true", "store_false"]:
            if "type" in kwargs:
                del kwargs["type"]
        long_name = long_name.replace("_", "-").lstrip("-")
        if short_name is None:
            parser.add_argument("--{}".format(long_name), **kwargs)
        else:
            parser.add_argument(
                "-{}".format(short_name), "--{}".format(long_name), **kwargs
            )

    def get_value(self, args: argparse.Namespace) -> tuple[str, Any]:
        return self.name, getattr(args, self.get_arg_name())


class Config:
    """
    Settings of a generator run. Every attribute can be set on the command line
    and through the environment:
    * A variable named `variable_name` gets the command line option `--variable-name`.
      Additional `argparse.add_argument` keyword arguments go into a dictionary
      attribute named `variable_name_args`, which must be declared after the
      variable. `long_name`, `short_name` and `positional` are handled here.
    * The environment variable `FDBOPTGEN_VARIABLE_NAME` supplies the default for
      `variable_name`, so a command line flag still takes precedence.
    Usage:
      ```
      parser = argparse.ArgumentParser('fdboptgen')
      config.build_arguments(parser)
      args = parser.parse_args()
      config.extract_args(args)
      ```
    """

    def __init__(self):
        self.input_file: str = DEFAULT_INPUT_FILE
        self.input_file_args = {
            "positional": True,
            "metavar": "file",
            "help": "Path to FoundationDB fdb.options file",
        }
        self.output_directory: Path = Path(os.getcwd())
        self.output_directory_args = {
            "short_name": "o",
            "help": "Directory the generated Swift files are written to",
        }
        self.stdout: bool = False
        self.stdout_args = {
            "action": "store_true",
            "help": "Write generated files to standard output (ignores --output-directory)",
        }
        self.validate: bool = True
        self.validate_args = {
            "long_name": "no_validate",
            "action": "store_false",
            "help": "Skip the structural check of the generated source",
        }
        self.package: str = DEFAULT_PACKAGE
        self.package_args = {"help": "Package name in the header of generated files"}
        self.copyright_holder: str = DEFAULT_COPYRIGHT_HOLDER
        self.copyright_holder_args = {
            "help": "Copyright holder in the header of generated files"
        }
        self.log_level: str = "WARNING"
        self.log_level_args = {
            "choices": ["DEBUG", "INFO", "WARNING", "ERROR"],
            "help": "Logging level",
        }
        self._env_names: Dict[str, str] = {}
        self._config_map = self._build_map()
        self._read_env()

    def _get_env_name(self, var_name: str) -> str:
        return self._env_names.get(var_name, "{}{}".format(ENV_PREFIX, var_name.upper()))

    def _build_map(self) -> OrderedDict[str, ConfigValue]:
        config_map: OrderedDict[str, ConfigValue] = collections.OrderedDict()
        for attr in dir(self):
            obj = getattr(self, attr)
            if attr.startswith("_") or callable(obj):
                continue
            if attr.endswith("_args"):
                name = attr[0 : -len("_args")]
                assert name in config_map
                assert isinstance(obj, dict)
                for k, v in obj.items():
                    if k == "env_name":
                        self._env_names[name] = v
                    else:
                        config_map[name].kwargs[k] = v
            else:
                # attribute_args has to be declared after the attribute
                assert attr not in config_map
                val_type = type(obj)
                kwargs = {"type": val_type, "default": obj}
                config_map[attr] = ConfigValue(attr, **kwargs)
        return config_map

    def _read_env(self):
        for attr, value in self._config_map.items():
            env_name = self._get_env_name(attr)
            attr_type = value.kwargs["type"]
            e = os.getenv(env_name)
            if e is None:
                continue
            # The environment supplies the default, so an explicit command line
            # flag still wins.
            try:
                converted = _to_bool(e) if attr_type is bool else attr_type(e)
            except ValueError as error:
                raise ValueError("{}: {}".format(env_name, error)) from error
            choices = value.kwargs.get("choices")
            if choices is not None and converted not in choices:
                raise ValueError(
                    "{}: invalid choice {!r} (choose from {})".format(
                        env_name, converted, ", ".join(choices)
                    )
                )
            value.kwargs["default"] = converted
            setattr(self, attr, converted)

    def build_arguments(self, parser: argparse.ArgumentParser):
        for val in self._config_map.values():
            val.add_to_args(parser)

    def extract_args(self, args: argparse.Namespace):
        for val in self._config_map.values():
            k, v = val.get_value(args)
            if v is not None:
                self.__setattr__(k, v)
