#
# emit.py
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

"""Writing generated sources to stdout or to per-scope files."""

import contextlib
import logging
import os
import sys
from pathlib import Path
from typing import Optional, TextIO, Union

from .errors import EmissionError
from .models import Scope

logger = logging.getLogger(__name__)

GENERATED_SUFFIX = "Option.gen.swift"


def output_filename(scope: Scope) -> str:
    """File name for a scope, e.g. NetworkOption.gen.swift."""
    return f"{scope.flag.capitalize()}{GENERATED_SUFFIX}"


def emit_to_stream(text: str, stream: Optional[TextIO] = None) -> None:
    if stream is None:
        stream = sys.stdout
    try:
        stream.write(text)
        stream.flush()
    except OSError as e:
        raise EmissionError(Path("<stdout>"), str(e)) from e


def overwrite_by_move(target: Path, temporary: Path) -> None:
    os.replace(temporary, target)


def emit_to_directory(text: str, directory: Union[str, Path], scope: Scope) -> Path:
    """Write ``text`` to the scope's file inside ``directory``.

    The text goes to a temporary file first which then replaces the target,
    so readers never see a partially written file.

    Raises:
        EmissionError: the directory does not exist or the file could not be
            written.
    """
    directory = Path(directory)
    target = directory / output_filename(scope)
    if not directory.is_dir():
        raise EmissionError(target, "output directory does not exist")
    temporary = target.with_suffix(target.suffix + ".tmp")
    try:
        with temporary.open("w", encoding="utf-8", newline="\n") as out_file:
            out_file.write(text)
        overwrite_by_move(target, temporary)
    except OSError as e:
        with contextlib.suppress(OSError):
            temporary.unlink(missing_ok=True)
        raise EmissionError(target, str(e)) from e
    logger.info("Wrote %s", target)
    return target
