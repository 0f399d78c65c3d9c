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
"""In-memory key-value connection with TTL-based expiry."""

from __future__ import annotations

import asyncio
import time


class InMemoryConnection:
    """Process-local stand-in for a Redis connection.

    Implements the ``Connection`` protocol with the same expiry semantics
    as SETEX: entries vanish once their TTL elapses. Suitable for
    development, testing, and single-process applications.
    """

    def __init__(self) -> None:
        self._store: dict[str, tuple[str, float]] = {}
        self._lock = asyncio.Lock()

    async def get(self, key: str) -> str | None:
        """Return the value for *key*, or ``None`` if missing or expired."""
        async with self._lock:
            entry = self._store.get(key)
            if entry is None:
                return None

            value, expires_at = entry
            if time.monotonic() >= expires_at:
                del self._store[key]
                return None

            return value

    async def setex(self, key: str, ttl: int, value: str) -> bool:
        """Store *value* under *key* for *ttl* seconds."""
        if ttl <= 0:
            raise ValueError(f"invalid expire time in 'setex' command: {ttl}")
        async with self._lock:
            self._store[key] = (value, time.monotonic() + ttl)
        return True

    async def delete(self, key: str) -> int:
        """Remove *key*. Returns the number of keys removed."""
        async with self._lock:
            return 1 if self._store.pop(key, None) is not None else 0

    async def ping(self) -> bool:
        return True

    async def ttl(self, key: str) -> int:
        """Remaining seconds for *key*: -2 when missing, like Redis TTL."""
        async with self._lock:
            entry = self._store.get(key)
            if entry is None:
                return -2
            remaining = entry[1] - time.monotonic()
            if remaining <= 0:
                del self._store[key]
                return -2
            return round(remaining)
