#
# test_config.py
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

import argparse
from pathlib import Path

import pytest

from fdboptgen.config import DEFAULT_INPUT_FILE, Config


def parse(config: Config, argv):
    parser = argparse.ArgumentParser("fdboptgen")
    config.build_arguments(parser)
    args = parser.parse_args(argv)
    config.extract_args(args)
    return config


def test_defaults(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    config = parse(Config(), [])
    assert config.input_file == DEFAULT_INPUT_FILE
    assert config.output_directory == tmp_path
    assert config.stdout is False
    assert config.validate is True
    assert config.log_level == "WARNING"


def test_command_line(tmp_path):
    config = parse(
        Config(),
        ["my.options", "-o", str(tmp_path), "--stdout", "--no-validate", "--log-level", "DEBUG"],
    )
    assert config.input_file == "my.options"
    assert config.output_directory == tmp_path
    assert isinstance(config.output_directory, Path)
    assert config.stdout is True
    assert config.validate is False
    assert config.log_level == "DEBUG"


def test_environment_supplies_defaults(monkeypatch, tmp_path):
    monkeypatch.setenv("FDBOPTGEN_INPUT_FILE", "env.options")
    monkeypatch.setenv("FDBOPTGEN_OUTPUT_DIRECTORY", str(tmp_path))
    monkeypatch.setenv("FDBOPTGEN_STDOUT", "true")
    monkeypatch.setenv("FDBOPTGEN_VALIDATE", "0")
    monkeypatch.setenv("FDBOPTGEN_PACKAGE", "env-package")
    config = Config()
    assert config.stdout is True
    config = parse(config, [])
    assert config.input_file == "env.options"
    assert config.output_directory == tmp_path
    assert config.stdout is True
    assert config.validate is False
    assert config.package == "env-package"


def test_command_line_beats_environment(monkeypatch):
    monkeypatch.setenv("FDBOPTGEN_INPUT_FILE", "env.options")
    monkeypatch.setenv("FDBOPTGEN_PACKAGE", "env-package")
    config = parse(Config(), ["cli.options", "--package", "cli-package"])
    assert config.input_file == "cli.options"
    assert config.package == "cli-package"


def test_invalid_boolean_in_environment(monkeypatch):
    monkeypatch.setenv("FDBOPTGEN_STDOUT", "maybe")
    with pytest.raises(ValueError):
        Config()


@pytest.mark.parametrize(
    "name, value, message",
    [
        ("FDBOPTGEN_STDOUT", "maybe", "use true or false"),
        ("FDBOPTGEN_LOG_LEVEL", "bogus", "invalid choice 'bogus'"),
    ],
)
def test_bad_environment_value_names_the_variable(monkeypatch, name, value, message):
    monkeypatch.setenv(name, value)
    with pytest.raises(ValueError) as excinfo:
        Config()
    assert str(excinfo.value).startswith(name + ": ")
    assert message in str(excinfo.value)
