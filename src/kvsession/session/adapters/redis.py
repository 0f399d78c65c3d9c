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
"""Redis connection factory for the session store."""

from __future__ import annotations

import logging
from typing import Any

import redis.asyncio as aioredis
from redis.asyncio.connection import AbstractConnection

from kvsession.config.properties.session import SessionStoreProperties

_logger = logging.getLogger(__name__)


class RedisConnectionFactory:
    """Builds ``redis.asyncio.Redis`` clients for a session store.

    Each client holds a single socket, so a store in fallback mode never
    opens more than one physical connection. The client authenticates with
    *password* and selects *db* on every physical connect, including the
    transparent reconnects redis-py performs after a dropped socket. The
    connect hook records how many handshakes have completed in
    ``handshakes``, so every count past the first is a reconnect.

    Args:
        host: Redis host, ignored when *socket* is given.
        port: Redis port, ignored when *socket* is given.
        socket: Path of a unix domain socket.
        password: AUTH credential.
        db: Database index to select.
        **options: Extra keyword arguments for ``redis.asyncio.Redis``.
    """

    def __init__(
        self,
        host: str = "localhost",
        port: int = 6379,
        socket: str | None = None,
        password: str | None = None,
        db: int = 0,
        **options: Any,
    ) -> None:
        self._host = host
        self._port = port
        self._socket = socket
        self._password = password
        self._db = db
        self._options = options
        self.handshakes = 0

    @classmethod
    def from_properties(cls, properties: SessionStoreProperties, **options: Any) -> RedisConnectionFactory:
        return cls(
            host=properties.host,
            port=properties.port,
            socket=properties.socket,
            password=properties.password,
            db=properties.db,
            **options,
        )

    def __call__(self) -> aioredis.Redis:
        kwargs: dict[str, Any] = {
            "password": self._password,
            "db": self._db,
            "redis_connect_func": self._on_connect,
            **self._options,
            # one socket per client; concurrent commands queue on it
            "single_connection_client": True,
        }
        if self._socket:
            return aioredis.Redis(unix_socket_path=self._socket, **kwargs)
        return aioredis.Redis(host=self._host, port=self._port, **kwargs)

    async def _on_connect(self, connection: AbstractConnection) -> None:
        # AUTH then SELECT, before any queued command is written
        await connection.on_connect()
        self.handshakes += 1
        if self.handshakes > 1:
            _logger.info("Reconnected to redis, selected db %s again", self._db)
        else:
            _logger.debug("Connected to redis, selected db %s", self._db)
