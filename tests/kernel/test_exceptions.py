# Copyright 2026 Firefly Software Solutions Inc.
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
"""Tests for kvsession kernel exception hierarchy."""

from kvsession.kernel.exceptions import (
    ConnectionSetupException,
    DeserializationException,
    InfrastructureException,
    KVSessionException,
    PoolAcquisitionException,
    PoolExhaustedException,
    SerializationException,
    SessionStoreException,
)


class TestKVSessionException:
    def test_basic_creation(self):
        exc = KVSessionException("something went wrong")
        assert str(exc) == "something went wrong"
        assert exc.code is None
        assert exc.context == {}

    def test_with_error_code(self):
        exc = KVSessionException("bad value", code="SESSION_DECODE")
        assert exc.code == "SESSION_DECODE"

    def test_with_context(self):
        exc = KVSessionException("bad value", context={"cause": "Expecting value"})
        assert exc.context["cause"] == "Expecting value"

    def test_context_defaults_to_empty_dict(self):
        exc = KVSessionException("test")
        exc.context["key"] = "value"
        exc2 = KVSessionException("test2")
        assert exc2.context == {}


class TestExceptionHierarchy:
    def test_codec_errors_are_session_store_errors(self):
        assert issubclass(SerializationException, SessionStoreException)
        assert issubclass(DeserializationException, SessionStoreException)
        assert issubclass(SessionStoreException, KVSessionException)

    def test_connection_errors_are_infrastructure(self):
        assert issubclass(ConnectionSetupException, InfrastructureException)
        assert issubclass(PoolAcquisitionException, InfrastructureException)
        assert issubclass(InfrastructureException, KVSessionException)

    def test_exhausted_is_acquisition_failure(self):
        assert issubclass(PoolExhaustedException, PoolAcquisitionException)

    def test_codec_and_infrastructure_are_disjoint(self):
        assert not issubclass(SerializationException, InfrastructureException)
        assert not issubclass(PoolExhaustedException, SessionStoreException)
