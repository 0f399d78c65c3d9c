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
"""Session store, connection pool and connection protocols."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from kvsession.session.result import StoreResult


@runtime_checkable
class Connection(Protocol):
    """The key-value commands the store issues.

    ``redis.asyncio.Redis`` satisfies this protocol as-is.
    """

    async def get(self, key: str) -> bytes | str | None: ...

    async def setex(self, key: str, ttl: int, value: str) -> Any: ...

    async def delete(self, key: str) -> int: ...

    async def ping(self) -> Any: ...


@runtime_checkable
class ConnectionPool(Protocol):
    """Hands out connections and takes them back.

    ``acquire`` may raise ``PoolAcquisitionException``. ``release`` is
    synchronous and must not raise.
    """

    async def acquire(self) -> Connection: ...

    def release(self, connection: Connection) -> None: ...


@runtime_checkable
class SessionStore(Protocol):
    """Persistence interface consumed by session middleware.

    Per-call failures are reported in the returned ``StoreResult``; none of
    these methods raise.
    """

    async def load(self, sid: str) -> StoreResult: ...

    async def save(self, sid: str, session: dict[str, Any]) -> StoreResult: ...

    async def destroy(self, sid: str) -> StoreResult: ...
