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
"""Tests for session JSON encoding and key derivation."""

from __future__ import annotations

import pytest

from kvsession.kernel.exceptions import DeserializationException, SerializationException
from kvsession.session.codec import decode_session, encode_session
from kvsession.session.keys import DEFAULT_PREFIX, storage_key


class TestStorageKey:
    def test_default_prefix(self):
        assert DEFAULT_PREFIX == "sess:"
        assert storage_key(DEFAULT_PREFIX, "abc123") == "sess:abc123"

    def test_sid_used_verbatim(self):
        assert storage_key("app:", " a:b/c ") == "app: a:b/c "

    def test_empty_prefix(self):
        assert storage_key("", "abc") == "abc"

    def test_distinct_sids_never_collide(self):
        sids = ["a", "b", "ab", "abc123", "", "sess:", "ABC123"]
        keys = {storage_key("sess:", sid) for sid in sids}
        assert len(keys) == len(sids)


class TestEncodeSession:
    def test_round_trip_preserves_structure(self):
        session = {
            "cookie": {"maxAge": 30000, "httpOnly": True, "path": "/"},
            "user": "alice",
            "cart": [{"sku": "A-1", "qty": 2}, {"sku": "B-7", "qty": 1.5}],
            "flags": {"beta": False, "admin": None},
            "unicode": "café ☕",
        }
        assert decode_session(encode_session(session)) == session

    def test_cyclic_session_raises(self):
        session: dict = {"cookie": {}}
        session["self"] = session
        with pytest.raises(SerializationException) as info:
            encode_session(session)
        assert info.value.code == "SESSION_ENCODE"
        assert isinstance(info.value.__cause__, ValueError)

    def test_non_json_value_raises(self):
        with pytest.raises(SerializationException) as info:
            encode_session({"cookie": {}, "handle": object()})
        assert "cause" in info.value.context
        assert isinstance(info.value.__cause__, TypeError)

    def test_deeply_nested_session_raises(self):
        session: dict = {}
        for _ in range(100000):
            session = {"child": session}
        with pytest.raises(SerializationException) as info:
            encode_session(session)
        assert isinstance(info.value.__cause__, RecursionError)


class TestDecodeSession:
    def test_decodes_bytes(self):
        assert decode_session(b'{"user": "alice"}') == {"user": "alice"}

    def test_malformed_json_keeps_cause(self):
        with pytest.raises(DeserializationException) as info:
            decode_session("{not json")
        assert info.value.code == "SESSION_DECODE"
        assert info.value.context["cause"] == str(info.value.__cause__)

    def test_invalid_utf8_raises(self):
        with pytest.raises(DeserializationException):
            decode_session(b"\xff\xfe{}")

    def test_deeply_nested_array_raises(self):
        with pytest.raises(DeserializationException) as info:
            decode_session("[" * 100000 + "]" * 100000)
        assert info.value.code == "SESSION_DECODE"
        assert isinstance(info.value.__cause__, RecursionError)

    def test_non_object_raises(self):
        with pytest.raises(DeserializationException, match="expected an object"):
            decode_session("[1, 2, 3]")
