#
# conftest.py
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

import pytest

SAMPLE_OPTIONS = b"""<?xml version="1.0"?>
<Options>
  <Scope name="NetworkOption">
    <Option name="local_address" code="10"
            paramType="String" paramDescription="IP:PORT"
            description="Deprecated"/>
    <Option name="trace_enable" code="30"
            paramType="String" paramDescription="path to output directory (or NULL for current working directory)"
            description="Enables trace output to a file in a directory of the clients choosing"/>
    <Option name="TLS_CERT_BYTES" code="42"
            paramType="Bytes" paramDescription="certificates"/>
    <Option name="disable_multi_version_client_api" code="60"
            description="Disables the multi-version client API."/>
  </Scope>
  <Scope name="DatabaseOption">
    <Option name="location_cache_size" code="10"
            paramType="Int" paramDescription="Max location cache entries"
            description="Set the size of the client location cache."/>
  </Scope>
  <Scope name="TransactionOption">
    <Option name="causal_write_risky" code="10"
            description="The transaction, if not self-conflicting, may be committed a second time after commit succeeds, in the event of a fault"/>
    <Option name="timeout" code="500" paramType="Int"
            paramDescription="value in milliseconds of timeout"
            description="Set a timeout in milliseconds."/>
  </Scope>
  <Scope name="StreamingMode">
    <Option name="want_all" code="-2"
            description="Client intends to consume the entire range."/>
  </Scope>
</Options>
"""


@pytest.fixture
def sample_options() -> bytes:
    return SAMPLE_OPTIONS


@pytest.fixture
def options_file(tmp_path):
    path = tmp_path / "fdb.options"
    path.write_bytes(SAMPLE_OPTIONS)
    return path
