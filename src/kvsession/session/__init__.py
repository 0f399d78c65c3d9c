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
"""kvsession Session — pooled Redis session storage for session middleware.

Import concrete connection types from the adapter package::

    from kvsession.session.adapters.memory import InMemoryConnection
    from kvsession.session.adapters.redis import RedisConnectionFactory
"""

from kvsession.session.codec import decode_session, encode_session
from kvsession.session.keys import DEFAULT_PREFIX, storage_key
from kvsession.session.pool import BoundedConnectionPool, SingleConnectionPool
from kvsession.session.ports.outbound import Connection, ConnectionPool, SessionStore
from kvsession.session.result import StoreResult
from kvsession.session.store import RedisSessionStore
from kvsession.session.ttl import ONE_DAY, compute_ttl

__all__ = [
    "DEFAULT_PREFIX",
    "ONE_DAY",
    "BoundedConnectionPool",
    "Connection",
    "ConnectionPool",
    "RedisSessionStore",
    "SessionStore",
    "SingleConnectionPool",
    "StoreResult",
    "compute_ttl",
    "decode_session",
    "encode_session",
    "storage_key",
]
