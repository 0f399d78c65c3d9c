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
"""Session store configuration properties."""

from __future__ import annotations

from dataclasses import dataclass

from kvsession.core.config import config_properties


@config_properties(prefix="kvsession.session")
@dataclass
class SessionStoreProperties:
    """Configuration for the session store (kvsession.session.*).

    ``ttl`` is in seconds and, when set, overrides the expiry derived from
    each session's ``cookie.maxAge``. ``socket`` is a unix socket path and
    takes precedence over ``host``/``port``.
    """

    prefix: str = "sess:"
    ttl: int | None = None
    host: str = "localhost"
    port: int = 6379
    socket: str | None = None
    password: str | None = None
    db: int = 0
