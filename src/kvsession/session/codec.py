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
"""JSON encoding of session objects."""

from __future__ import annotations

import json
from typing import Any

from kvsession.kernel.exceptions import DeserializationException, SerializationException


def encode_session(session: dict[str, Any]) -> str:
    """Serialize *session* to JSON text.

    Raises:
        SerializationException: the session holds cyclic, too deeply nested or
            non-JSON values.
    """
    try:
        return json.dumps(session)
    except (TypeError, ValueError, RecursionError) as exc:
        raise SerializationException(
            f"Session cannot be serialized: {exc}",
            code="SESSION_ENCODE",
            context={"cause": str(exc)},
        ) from exc


def decode_session(raw: bytes | str) -> dict[str, Any]:
    """Parse a stored value back into a session dict.

    Raises:
        DeserializationException: the value is not UTF-8 JSON text holding
            an object.
    """
    try:
        text = raw.decode("utf-8") if isinstance(raw, bytes) else raw
        data = json.loads(text)
    except (UnicodeDecodeError, json.JSONDecodeError, RecursionError) as exc:
        raise DeserializationException(
            f"Stored session is not valid JSON: {exc}",
            code="SESSION_DECODE",
            context={"cause": str(exc)},
        ) from exc

    if not isinstance(data, dict):
        raise DeserializationException(
            f"Stored session is a JSON {type(data).__name__}, expected an object",
            code="SESSION_DECODE",
            context={"cause": "not an object"},
        )
    return data
