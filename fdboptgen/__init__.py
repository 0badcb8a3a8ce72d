#
# __init__.py
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

"""
Swift binding generator for FoundationDB's fdb.options file.

Typical usage:
    from fdboptgen import load_catalog, render_source, Scope
    catalog = load_catalog("fdb.options")
    print(render_source(Scope.NETWORK, catalog.network_options))
"""

from .builder import CatalogBuilder, load_catalog
from .errors import (
    EmissionError,
    GenerationError,
    OptionGenError,
    OptionsParseError,
    OptionsSourceError,
)
from .generator import Declaration, build_declarations, render_source, validate_source
from .models import Catalog, Option, Parameter, Scope
from .names import camel_case
from .parser import OptionsParser, OptionsParserDelegate

__all__ = [
    "Catalog",
    "CatalogBuilder",
    "Declaration",
    "EmissionError",
    "GenerationError",
    "Option",
    "OptionGenError",
    "OptionsParseError",
    "OptionsParser",
    "OptionsParserDelegate",
    "OptionsSourceError",
    "Parameter",
    "Scope",
    "build_declarations",
    "camel_case",
    "load_catalog",
    "render_source",
    "validate_source",
]
