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
"""LoggingPort — how the session store's log output gets configured."""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable

from kvsession.core.config import Config


@runtime_checkable
class LoggingPort(Protocol):
    """Configures rendering of the stdlib records kvsession modules emit.

    ``configure`` reads the ``kvsession.logging`` section; ``set_level``
    adjusts one logger, e.g. ``kvsession.session.store`` for command traces.
    """

    def configure(self, config: Config) -> None: ...
    def get_logger(self, name: str) -> Any: ...
    def set_level(self, name: str, level: str) -> None: ...
