#
# builder.py
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

import logging
from pathlib import Path
from typing import BinaryIO, Optional, Union

from .models import Catalog, Option, Parameter, Scope
from .parser import OptionsParser, OptionsParserDelegate

logger = logging.getLogger(__name__)


class CatalogBuilder(OptionsParserDelegate):
    """Collects parsed options into a Catalog, one mapping per scope.

    Holds the scope of the innermost open ``<Scope>`` element. Use one builder
    per parse run.
    """

    def __init__(self, catalog: Optional[Catalog] = None):
        self.catalog = catalog if catalog is not None else Catalog()
        self._scope: Optional[Scope] = None

    @property
    def current_scope(self) -> Optional[Scope]:
        return self._scope

    def did_start_scope(self, name):
        self._scope = Scope.from_marker(name)
        if self._scope is None:
            logger.debug("Ignoring options in unknown scope %r", name)

    def did_end_scope(self):
        self._scope = None

    def did_start_option(self, name, code, description, param_type, param_description):
        if self._scope is None:
            logger.debug("Dropping option %r declared outside a known scope", name)
            return
        if not name or not code:
            logger.debug("Dropping option with empty name or code: %r=%r", name, code)
            return
        parameter = None
        if param_type is not None:
            parameter = Parameter(type=param_type, description=param_description)
        self.catalog.options_for(self._scope)[name] = Option(
            name=name, code=code, description=description, parameter=parameter
        )

    def did_end_option(self):
        pass


def load_catalog(source: Union[str, Path, bytes, BinaryIO]) -> Catalog:
    """Parse an fdb.options document into a new Catalog.

    ``source`` may be a path, the raw document bytes or a binary stream.

    Raises:
        OptionsSourceError: the file could not be found or read.
        OptionsParseError: the document is not well-formed.
    """
    if isinstance(source, bytes):
        parser = OptionsParser.from_bytes(source)
    elif isinstance(source, (str, Path)):
        parser = OptionsParser.from_path(source)
    else:
        parser = OptionsParser(source)
    builder = CatalogBuilder()
    parser.delegate = builder
    parser.parse()
    logger.info(
        "Loaded %d network, %d database and %d transaction option(s)",
        len(builder.catalog.network_options),
        len(builder.catalog.database_options),
        len(builder.catalog.transaction_options),
    )
    return builder.catalog
