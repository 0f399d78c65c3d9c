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
"""Redis-backed session store for session middleware."""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable
from typing import Any, TypeVar

from redis.exceptions import RedisError

from kvsession.config.properties.session import SessionStoreProperties
from kvsession.core.config import Config
from kvsession.kernel.exceptions import (
    ConnectionSetupException,
    DeserializationException,
    PoolAcquisitionException,
    SerializationException,
)
from kvsession.session.adapters.redis import RedisConnectionFactory
from kvsession.session.codec import decode_session, encode_session
from kvsession.session.keys import DEFAULT_PREFIX, storage_key
from kvsession.session.pool import SingleConnectionPool
from kvsession.session.ports.outbound import Connection, ConnectionPool
from kvsession.session.result import StoreResult
from kvsession.session.ttl import compute_ttl

_logger = logging.getLogger(__name__)

T = TypeVar("T")


class RedisSessionStore:
    """Session store that keeps JSON-encoded sessions in Redis under SETEX.

    Keys are ``prefix + sid``. Every command borrows a connection from
    ``pool`` and returns it once the command completes. Without a pool, a
    ``SingleConnectionPool`` is built around *client*, *connection_factory*,
    or a Redis client for *host*/*port*/*socket*/*password*/*db*, in that
    order of preference.

    ``load``, ``save`` and ``destroy`` never raise for per-call failures;
    they return a ``StoreResult`` carrying the error instead. Call
    :meth:`start` at startup to authenticate eagerly: a rejected password
    raises ``ConnectionSetupException`` there.

    Args:
        prefix: Key prefix, ``"sess:"`` when ``None``.
        pool: Connection pool to borrow from.
        client: A single connection to use when no pool is given.
        ttl: Expiry in seconds for every session, overriding ``cookie.maxAge``.
        connection_factory: Creates the connection when neither pool nor
            client is given.
    """

    def __init__(
        self,
        *,
        prefix: str | None = None,
        pool: ConnectionPool | None = None,
        client: Connection | None = None,
        ttl: int | None = None,
        host: str = "localhost",
        port: int = 6379,
        socket: str | None = None,
        password: str | None = None,
        db: int = 0,
        connection_factory: Callable[[], Connection] | None = None,
    ) -> None:
        self.prefix = DEFAULT_PREFIX if prefix is None else prefix
        self.ttl = ttl
        self._owns_connection = pool is None and client is None

        if pool is None:
            factory: Callable[[], Connection]
            if client is not None:
                factory = lambda: client  # noqa: E731
            elif connection_factory is not None:
                factory = connection_factory
            else:
                factory = RedisConnectionFactory(
                    host=host,
                    port=port,
                    socket=socket,
                    password=password,
                    db=db,
                )
            pool = SingleConnectionPool(factory)
        self.pool: ConnectionPool = pool

    @classmethod
    def from_config(cls, config: Config, **overrides: Any) -> RedisSessionStore:
        """Build a store from the ``kvsession.session`` config section.

        Keyword *overrides* (e.g. ``pool=``) take precedence over config.
        """
        properties = config.bind(SessionStoreProperties)
        kwargs: dict[str, Any] = {
            "prefix": properties.prefix,
            "ttl": properties.ttl,
            "connection_factory": RedisConnectionFactory.from_properties(properties),
        }
        kwargs.update(overrides)
        return cls(**kwargs)

    # ── lifecycle ─────────────────────────────────────────────

    async def start(self) -> None:
        """Connect and authenticate, raising on failure.

        Raises:
            ConnectionSetupException: the connection could not be created or
                the server rejected the credentials or database index.
        """
        try:
            await self._execute(lambda connection: connection.ping())
        except (RedisError, OSError, PoolAcquisitionException) as exc:
            raise ConnectionSetupException(
                f"Session store connection setup failed: {exc}",
                code="CONNECTION_SETUP",
                context={"cause": str(exc)},
            ) from exc
        _logger.debug("Session store connected")

    async def stop(self) -> None:
        """Close the connection this store created for its fallback pool."""
        if not self._owns_connection or not isinstance(self.pool, SingleConnectionPool):
            return
        connection = self.pool.connection
        close = getattr(connection, "aclose", None)
        if close is not None:
            await close()

    # ── operations ────────────────────────────────────────────

    async def load(self, sid: str) -> StoreResult:
        """Fetch the session stored for *sid*.

        A missing or expired entry is a success with ``value=None``.
        """
        key = storage_key(self.prefix, sid)
        _logger.debug('GET "%s"', key)
        try:
            raw = await self._execute(lambda connection: connection.get(key))
        except Exception as exc:
            return StoreResult(error=exc)

        if not raw:
            return StoreResult()
        _logger.debug("GOT %s", raw)
        try:
            return StoreResult(value=decode_session(raw))
        except DeserializationException as exc:
            return StoreResult(error=exc)

    async def save(self, sid: str, session: dict[str, Any]) -> StoreResult:
        """Store *session* under *sid* with an expiry from the TTL policy.

        Encoding failures are returned without touching the pool.
        """
        key = storage_key(self.prefix, sid)
        ttl = compute_ttl(session, self.ttl)
        try:
            value = encode_session(session)
        except SerializationException as exc:
            return StoreResult(error=exc)

        _logger.debug('SETEX "%s" ttl:%s %s', key, ttl, value)
        try:
            await self._execute(lambda connection: connection.setex(key, ttl, value))
        except Exception as exc:
            return StoreResult(error=exc)
        _logger.debug("SETEX complete")
        return StoreResult(value=True)

    async def destroy(self, sid: str) -> StoreResult:
        """Delete the session stored for *sid*."""
        key = storage_key(self.prefix, sid)
        _logger.debug('DEL "%s"', key)
        try:
            await self._execute(lambda connection: connection.delete(key))
        except Exception as exc:
            return StoreResult(error=exc)
        return StoreResult(value=True)

    async def _execute(self, command: Callable[[Connection], Awaitable[T]]) -> T:
        connection = await self.pool.acquire()
        try:
            return await command(connection)
        finally:
            self.pool.release(connection)
