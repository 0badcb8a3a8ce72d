#
# models.py
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

"""Data models for the option catalog."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Optional


class Scope(Enum):
    """Option scopes that bindings are generated for.

    The value is the ``name`` attribute of the matching ``<Scope>`` element.
    """

    NETWORK = "NetworkOption"
    DATABASE = "DatabaseOption"
    TRANSACTION = "TransactionOption"

    @classmethod
    def from_marker(cls, name: Optional[str]) -> Optional["Scope"]:
        """Look up a scope by its exact ``<Scope name=...>`` value."""
        if name is None:
            return None
        for scope in cls:
            if scope.value == name:
                return scope
        return None

    @property
    def flag(self) -> str:
        """Command line flag name, e.g. ``network``."""
        return self.name.lower()

    @property
    def type_name(self) -> str:
        """Name of the generated Swift type the constants are attached to."""
        return self.value

    def get_c_description(self) -> str:
        """Get the C-style description for this scope."""
        descriptions = {
            Scope.NETWORK: "NET_OPTION",
            Scope.DATABASE: "DB_OPTION",
            Scope.TRANSACTION: "TR_OPTION",
        }
        return descriptions[self]

    def c_symbol(self, option_name: str) -> str:
        """C API symbol holding the code of ``option_name`` in this scope."""
        return f"FDB_{self.get_c_description()}_{option_name.upper()}"


@dataclass
class Parameter:
    """Typed parameter an option accepts."""

    type: str
    description: Optional[str] = None

    def is_bytes(self) -> bool:
        return self.type.lower() == "bytes"


@dataclass
class Option:
    """Represents a single option definition."""

    name: str
    code: str
    description: Optional[str] = None
    parameter: Optional[Parameter] = None

    def is_deprecated(self) -> bool:
        return self.description is not None and self.description.lower() == "deprecated"


@dataclass
class Catalog:
    """Options parsed from one fdb.options document, keyed by name per scope."""

    network_options: Dict[str, Option] = field(default_factory=dict)
    database_options: Dict[str, Option] = field(default_factory=dict)
    transaction_options: Dict[str, Option] = field(default_factory=dict)

    def options_for(self, scope: Scope) -> Dict[str, Option]:
        return {
            Scope.NETWORK: self.network_options,
            Scope.DATABASE: self.database_options,
            Scope.TRANSACTION: self.transaction_options,
        }[scope]

    def __len__(self) -> int:
        return sum(len(self.options_for(scope)) for scope in Scope)
