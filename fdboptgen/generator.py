#
# generator.py
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

"""Swift binding generator.

Each scope is rendered into one Swift source file that extends the scope's
option type with a ``public static let`` per option, e.g.

    extension NetworkOption {

        /// Sets cert path
        /// Parameter type: String
        public static let tlsCertPath = NetworkOption(rawValue: FDB_NET_OPTION_TLS_CERT_PATH)
    }
"""

import datetime
import logging
import os
import re
import uuid
from dataclasses import dataclass, field
from typing import Dict, List, Mapping, Optional

import jinja2

from .errors import GenerationError
from .models import Option, Parameter, Scope
from .names import is_swift_identifier, swift_identifier

logger = logging.getLogger(__name__)

SCRIPT_DIRECTORY = os.path.dirname(os.path.abspath(__file__))

DEFAULT_PACKAGE = "fdbclient-swift"
DEFAULT_COPYRIGHT_HOLDER = "Apple Inc. and the FoundationDB project authors"
DEFAULT_IMPORTS = ("Clibfdb", "Foundation")

# Swift type used to document parameters whose fdb.options type is "bytes"
BYTES_DISPLAY_TYPE = "Data"

_DECLARATION = re.compile(r"^\s*public static let (?P<identifier>\S+) = (?P<value>.*)$")
_VALUE = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*\(rawValue: (?P<symbol>[^)]*)\)$")
_PAIRS = {")": "(", "]": "[", "}": "{"}


@dataclass
class Declaration:
    """A single rendered constant, before serialization."""

    identifier: str
    value: str
    doc_lines: List[str] = field(default_factory=list)
    deprecated: bool = False


def parameter_display_type(parameter: Parameter) -> str:
    return BYTES_DISPLAY_TYPE if parameter.is_bytes() else parameter.type


def _description_lines(text: Optional[str]) -> List[str]:
    if not text or text.lower() == "deprecated":
        return []
    return [line.rstrip() for line in text.splitlines() if line.strip()]


def build_declaration(scope: Scope, option: Option) -> Declaration:
    doc_lines = _description_lines(option.description)
    if option.parameter is not None:
        line = f"Parameter type: {parameter_display_type(option.parameter)}"
        if option.parameter.description:
            # Multi-line parameter descriptions are folded onto the type line
            line += "; " + " ".join(option.parameter.description.split())
        doc_lines.append(line)
    return Declaration(
        identifier=swift_identifier(option.name),
        value=f"{scope.type_name}(rawValue: {scope.c_symbol(option.name)})",
        doc_lines=doc_lines,
        deprecated=option.is_deprecated(),
    )


def build_declarations(scope: Scope, options: Mapping[str, Option]) -> List[Declaration]:
    """Declarations for every option of ``scope``, ordered by option name."""
    return [build_declaration(scope, options[name]) for name in sorted(options)]


def validate_source(text: str) -> None:
    """Structural check of generated Swift source.

    Verifies that brackets are balanced outside of comments and that every
    declaration binds a valid identifier to a ``Type(rawValue: SYMBOL)`` call.

    Raises:
        GenerationError: the source is not well-formed.
    """
    stack = []
    for line_no, line in enumerate(text.splitlines(), start=1):
        code = line.split("//", 1)[0]
        for char in code:
            if char in "([{":
                stack.append((char, line_no))
            elif char in _PAIRS:
                if not stack or stack[-1][0] != _PAIRS[char]:
                    raise GenerationError(f"Unbalanced '{char}' on line {line_no}")
                stack.pop()
        match = _DECLARATION.match(code)
        if match is None:
            continue
        identifier = match.group("identifier")
        if not is_swift_identifier(identifier):
            raise GenerationError(f"Invalid identifier {identifier!r} on line {line_no}")
        value = _VALUE.match(match.group("value").strip())
        if value is None or not is_swift_identifier(value.group("symbol")):
            raise GenerationError(f"Invalid initializer on line {line_no}: {match.group('value')}")
    if stack:
        char, line_no = stack[-1]
        raise GenerationError(f"Unclosed '{char}' opened on line {line_no}")


class SwiftCodeGen:
    TEMPLATE_FILE = os.path.join(SCRIPT_DIRECTORY, "templates", "scope.swift.j2")

    def __init__(
        self,
        scope: Scope,
        options: Mapping[str, Option],
        package: str = DEFAULT_PACKAGE,
        copyright_holder: str = DEFAULT_COPYRIGHT_HOLDER,
    ):
        self._scope = scope
        self._options = options
        self._package = package
        self._copyright_holder = copyright_holder

    def _get_environment(self) -> jinja2.Environment:
        # Output is Swift, not HTML
        return jinja2.Environment(
            autoescape=False,
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=True,
            undefined=jinja2.StrictUndefined,
        )

    def _context(self, year: Optional[int], uid: Optional[str]) -> Dict[str, object]:
        return {
            "scope": self._scope,
            "declarations": build_declarations(self._scope, self._options),
            "imports": DEFAULT_IMPORTS,
            "package": self._package,
            "copyright_holder": self._copyright_holder,
            "year": year if year is not None else datetime.date.today().year,
            "uid": uid if uid is not None else str(uuid.uuid4()).upper(),
        }

    def render(self, year: Optional[int] = None, uid: Optional[str] = None) -> str:
        env = self._get_environment()
        try:
            with open(SwiftCodeGen.TEMPLATE_FILE, encoding="utf-8") as template_stream:
                template = env.from_string(template_stream.read())
            return template.render(self._context(year, uid))
        except (OSError, jinja2.TemplateError) as e:
            raise GenerationError(f"Unable to render {self._scope.type_name}: {e}") from e


def render_source(
    scope: Scope,
    options: Mapping[str, Option],
    *,
    validate: bool = False,
    year: Optional[int] = None,
    uid: Optional[str] = None,
    package: str = DEFAULT_PACKAGE,
    copyright_holder: str = DEFAULT_COPYRIGHT_HOLDER,
) -> str:
    """Render the Swift source file for one scope.

    ``year`` and ``uid`` default to the current year and a fresh UUID; they
    only appear in the header comment.
    """
    text = SwiftCodeGen(scope, options, package, copyright_holder).render(year, uid)
    if validate:
        validate_source(text)
    logger.debug("Rendered %d option(s) for %s", len(options), scope.type_name)
    return text
