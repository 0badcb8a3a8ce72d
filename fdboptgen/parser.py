#
# parser.py
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

"""Event based parser for FoundationDB's fdb.options XML format.

The parser never builds a document tree. It streams through the input with
``xml.sax`` and reports ``<Scope>`` and ``<Option>`` elements to a delegate:

    parser = OptionsParser.from_path("fdb.options")
    parser.delegate = CatalogBuilder()
    parser.parse()

Everything else in the document is ignored.
"""

from __future__ import annotations

import abc
import io
import logging
import xml.sax
import xml.sax.handler
from pathlib import Path
from typing import BinaryIO, Optional, Union

from .errors import OptionsParseError, OptionsSourceError

logger = logging.getLogger(__name__)

SCOPE_ELEMENT = "Scope"
OPTION_ELEMENT = "Option"


class OptionsParserDelegate(abc.ABC):
    """Receives the content of an fdb.options document from OptionsParser."""

    @abc.abstractmethod
    def did_start_scope(self, name: Optional[str]) -> None:
        """Called for ``<Scope>``; ``name`` is the ``name`` attribute, if any."""
        raise NotImplementedError()

    @abc.abstractmethod
    def did_end_scope(self) -> None:
        """Called for ``</Scope>``."""
        raise NotImplementedError()

    @abc.abstractmethod
    def did_start_option(
        self,
        name: str,
        code: str,
        description: Optional[str],
        param_type: Optional[str],
        param_description: Optional[str],
    ) -> None:
        """Called for an ``<Option>`` carrying both ``name`` and ``code``."""
        raise NotImplementedError()

    @abc.abstractmethod
    def did_end_option(self) -> None:
        """Called for ``</Option>``."""
        raise NotImplementedError()


class OptionsParser(xml.sax.handler.ContentHandler, xml.sax.handler.ErrorHandler):
    def __init__(self, stream: Union[BinaryIO, Path]):
        super().__init__()
        self._source = stream
        self.delegate: Optional[OptionsParserDelegate] = None
        self.parser_error: Optional[OptionsParseError] = None
        self._scopes_seen = 0
        self._options_seen = 0

    @classmethod
    def from_bytes(cls, data: bytes) -> "OptionsParser":
        return cls(io.BytesIO(data))

    @classmethod
    def from_path(cls, path: Union[str, Path]) -> "OptionsParser":
        path = Path(path)
        if not path.is_file():
            raise OptionsSourceError(str(path), "options file not found")
        return cls(path)

    def parse(self) -> None:
        """Parse the whole input, reporting elements to ``delegate``.

        Raises:
            OptionsParseError: the input is not well-formed XML. The error is
                also kept in ``parser_error``.
            OptionsSourceError: the input could not be read.
        """
        self.parser_error = None
        reader = xml.sax.make_parser()
        reader.setFeature(xml.sax.handler.feature_namespaces, False)
        reader.setFeature(xml.sax.handler.feature_external_ges, False)
        reader.setContentHandler(self)
        reader.setErrorHandler(self)
        try:
            if isinstance(self._source, Path):
                with self._source.open("rb") as stream:
                    reader.parse(stream)
            else:
                reader.parse(self._source)
        except xml.sax.SAXParseException as e:
            self.parser_error = OptionsParseError(
                e.getMessage(), e.getLineNumber(), e.getColumnNumber()
            )
            raise self.parser_error from e
        except OSError as e:
            raise OptionsSourceError(str(self._source), str(e)) from e
        logger.debug(
            "Parsed %d scope(s) and %d option(s)", self._scopes_seen, self._options_seen
        )

    def startElement(self, name, attrs):
        if name == SCOPE_ELEMENT:
            self._scopes_seen += 1
            if self.delegate is not None:
                self.delegate.did_start_scope(attrs.get("name"))
        elif name == OPTION_ELEMENT:
            self._options_seen += 1
            option_name = attrs.get("name")
            code = attrs.get("code")
            if option_name is None or code is None:
                logger.debug("Ignoring option without name or code: %s", dict(attrs))
                return
            if self.delegate is not None:
                self.delegate.did_start_option(
                    option_name,
                    code,
                    attrs.get("description"),
                    attrs.get("paramType"),
                    attrs.get("paramDescription"),
                )

    def endElement(self, name):
        if self.delegate is None:
            return
        if name == SCOPE_ELEMENT:
            self.delegate.did_end_scope()
        elif name == OPTION_ELEMENT:
            self.delegate.did_end_option()

    def error(self, exception):
        raise exception

    def fatalError(self, exception):
        raise exception

    def warning(self, exception):
        logger.warning("XML warning: %s", exception)
