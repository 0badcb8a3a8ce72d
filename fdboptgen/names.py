#
# names.py
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

"""Name conversions between fdb.options and Swift."""

import re

SWIFT_IDENTIFIER = re.compile(r"^(?:[A-Za-z_][A-Za-z0-9_]*|`[A-Za-z_][A-Za-z0-9_]*`)$")

# Words that cannot be used as a bare identifier in a Swift declaration
SWIFT_KEYWORDS = frozenset(
    [
        "associatedtype", "class", "deinit", "enum", "extension", "fileprivate",
        "func", "import", "init", "inout", "internal", "let", "open", "operator",
        "private", "precedencegroup", "protocol", "public", "rethrows", "static",
        "struct", "subscript", "typealias", "var", "break", "case", "catch",
        "continue", "default", "defer", "do", "else", "fallthrough", "for",
        "guard", "if", "in", "repeat", "return", "throw", "switch", "where",
        "while", "as", "false", "is", "nil", "self", "super", "throws", "true",
        "try",
    ]
)


def camel_case(name: str) -> str:
    """Convert an UPPER_SNAKE or snake_case name to lowerCamelCase.

    The first component is lowercased, every following component is
    capitalized. Empty components (from repeated, leading or trailing
    underscores) contribute nothing. A name that is already lowerCamelCase
    (no underscores, lowercase first character) is returned unchanged, so
    applying the conversion twice is the same as applying it once.

    Examples:
        TLS_CERT_PATH -> tlsCertPath
        trace_enable -> traceEnable
        tlsCertPath -> tlsCertPath
    """
    if "_" not in name and name[:1].islower():
        return name
    first, *rest = [segment for segment in name.split("_") if segment] or [""]
    return first.lower() + "".join(component.capitalize() for component in rest)


def swift_identifier(name: str) -> str:
    """camel_case() escaped with backticks if it collides with a Swift keyword."""
    identifier = camel_case(name)
    if identifier in SWIFT_KEYWORDS:
        return f"`{identifier}`"
    return identifier


def is_swift_identifier(text: str) -> bool:
    return SWIFT_IDENTIFIER.match(text) is not None
