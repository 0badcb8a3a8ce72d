#
# errors.py
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

from pathlib import Path
from typing import Optional


class OptionGenError(Exception):
    """Base class for all errors raised by fdboptgen."""


class OptionsSourceError(OptionGenError):
    """The fdb.options input could not be opened or read."""

    def __init__(self, source: str, message: str) -> None:
        super().__init__(message)
        self.source = source

    def __str__(self) -> str:
        return f"{self.source}: {super().__str__()}"


class OptionsParseError(OptionGenError):
    """Raised when the fdb.options document is not well-formed XML."""

    def __init__(
        self,
        message: str,
        line: Optional[int] = None,
        column: Optional[int] = None,
    ) -> None:
        super().__init__(message)
        self.line = line
        self.column = column

    def __str__(self) -> str:
        if self.line is None:
            return super().__str__()
        return f"{super().__str__()} (line {self.line}, column {self.column})"


class GenerationError(OptionGenError):
    """Rendering or structural validation failed for a scope."""


class EmissionError(OptionGenError):
    """Writing generated source to its destination failed."""

    def __init__(self, destination: Path, message: str) -> None:
        super().__init__(message)
        self.destination = destination

    def __str__(self) -> str:
        return f"{self.destination}: {super().__str__()}"
