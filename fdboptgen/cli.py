#
# cli.py
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

"""CLI entry point for fdboptgen."""

from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

from .builder import load_catalog
from .config import Config
from .emit import emit_to_directory, emit_to_stream
from .errors import EmissionError, GenerationError, OptionGenError
from .generator import render_source
from .models import Scope

logger = logging.getLogger("fdboptgen")

EXIT_OK = 0
EXIT_PARSE_FAILURE = 1
EXIT_SCOPE_FAILURE = 3

DISCUSSION = (
    "Parses fdb.options from <file> and generates Swift bindings for every "
    "requested scope. Use either of --output-directory or --stdout to control "
    "where the generated Swift bindings go. Every option except the generator "
    "options can also be set through a FDBOPTGEN_<OPTION> environment variable."
)


def _setup_logger(level: str = "WARNING"):
    logger.setLevel(level.upper())
    # main() may run more than once per process
    for previous in list(logger.handlers):
        logger.removeHandler(previous)

    handler = logging.StreamHandler()
    formatter = logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )
    handler.setFormatter(formatter)

    logger.addHandler(handler)


def _setup_args() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="fdboptgen",
        description="Generate Swift bindings from FoundationDB's fdb.options file",
        epilog=DISCUSSION,
    )

    generators = parser.add_argument_group("Generator options")
    for scope, short_name in ((Scope.NETWORK, "n"), (Scope.DATABASE, "d"), (Scope.TRANSACTION, "t")):
        generators.add_argument(
            "-{}".format(short_name),
            "--{}".format(scope.flag),
            dest="scopes",
            action="append_const",
            const=scope,
            help="Generate Swift bindings for the FoundationDB {} options".format(scope.flag),
        )
    return parser


def requested_scopes(scopes: Optional[List[Scope]]) -> List[Scope]:
    """Scopes in command line order, each one once."""
    result: List[Scope] = []
    for scope in scopes or []:
        if scope not in result:
            result.append(scope)
    return result


def main(argv: Optional[List[str]] = None) -> int:
    parser = _setup_args()
    try:
        config = Config()
    except ValueError as e:
        parser.error(str(e))
    config.build_arguments(parser)
    args = parser.parse_args(argv)
    scopes = requested_scopes(args.scopes)
    if not scopes:
        parser.error(
            "At least one of the generator options ({}) must be given".format(
                ", ".join("--{}".format(scope.flag) for scope in Scope)
            )
        )
    config.extract_args(args)
    _setup_logger(config.log_level)

    try:
        catalog = load_catalog(config.input_file)
    except OptionGenError as e:
        logger.error("Unable to parse options: %s", e)
        return EXIT_PARSE_FAILURE

    failures = 0
    for scope in scopes:
        try:
            text = render_source(
                scope,
                catalog.options_for(scope),
                validate=config.validate,
                package=config.package,
                copyright_holder=config.copyright_holder,
            )
            if config.stdout:
                emit_to_stream(text, sys.stdout)
            else:
                emit_to_directory(text, config.output_directory, scope)
        except (GenerationError, EmissionError) as e:
            logger.error("Skipping %s: %s", scope.type_name, e)
            failures += 1

    return EXIT_SCOPE_FAILURE if failures else EXIT_OK
