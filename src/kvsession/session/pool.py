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
"""Connection pools for the session store."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable

from kvsession.kernel.exceptions import PoolAcquisitionException, PoolExhaustedException
from kvsession.session.ports.outbound import Connection

_logger = logging.getLogger(__name__)


class SingleConnectionPool:
    """Pool facade over one lazily created connection.

    Used when the store is not given a pool. ``acquire`` hands every caller
    the same connection without queueing, and ``release`` does nothing, so
    the factory is called at most once.
    """

    def __init__(self, factory: Callable[[], Connection]) -> None:
        self._factory = factory
        self._connection: Connection | None = None

    @property
    def connection(self) -> Connection | None:
        """The connection, or ``None`` before the first acquire."""
        return self._connection

    async def acquire(self) -> Connection:
        if self._connection is None:
            try:
                self._connection = self._factory()
            except Exception as exc:
                raise PoolAcquisitionException(
                    f"Failed to create connection: {exc}",
                    context={"cause": str(exc)},
                ) from exc
            _logger.debug("Created single pooled connection %r", self._connection)
        return self._connection

    def release(self, connection: Connection) -> None:
        pass


class BoundedConnectionPool:
    """Fixed-size pool with exclusive checkout.

    Connections are created on demand up to *max_size*. When all are checked
    out, ``acquire`` waits up to *acquire_timeout* seconds (forever when
    ``None``) and then raises ``PoolExhaustedException``.

    Args:
        factory: Creates one new connection.
        max_size: Maximum number of connections ever created.
        acquire_timeout: Seconds to wait for a free connection.
    """

    def __init__(
        self,
        factory: Callable[[], Connection],
        max_size: int = 10,
        acquire_timeout: float | None = 5.0,
    ) -> None:
        if max_size < 1:
            raise ValueError("max_size must be at least 1")
        self._factory = factory
        self._max_size = max_size
        self._acquire_timeout = acquire_timeout
        self._idle: asyncio.LifoQueue[Connection] = asyncio.LifoQueue()
        self._created = 0

    @property
    def max_size(self) -> int:
        return self._max_size

    @property
    def size(self) -> int:
        """Number of connections created so far."""
        return self._created

    @property
    def available(self) -> int:
        """Idle connections plus those that may still be created."""
        return self._idle.qsize() + (self._max_size - self._created)

    async def acquire(self) -> Connection:
        if self._idle.empty() and self._created < self._max_size:
            self._created += 1
            try:
                return self._factory()
            except Exception as exc:
                self._created -= 1
                raise PoolAcquisitionException(
                    f"Failed to create connection: {exc}",
                    context={"cause": str(exc)},
                ) from exc

        try:
            return await asyncio.wait_for(self._idle.get(), timeout=self._acquire_timeout)
        except TimeoutError as exc:
            raise PoolExhaustedException(
                f"No connection available within {self._acquire_timeout}s ({self._max_size} checked out)",
                context={"max_size": self._max_size},
            ) from exc

    def release(self, connection: Connection) -> None:
        self._idle.put_nowait(connection)
