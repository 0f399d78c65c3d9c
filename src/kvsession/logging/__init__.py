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
"""kvsession Logging — hexagonal logging port and adapter."""

from __future__ import annotations

from kvsession.core.config import Config
from kvsession.logging.port import LoggingPort
from kvsession.logging.structlog_adapter import StructlogAdapter


def configure_logging(config: Config, adapter: LoggingPort | None = None) -> LoggingPort:
    """Apply ``kvsession.logging.*`` from *config* and return the adapter used.

    Rendering goes through structlog unless another *adapter* is given.
    """
    port: LoggingPort = adapter if adapter is not None else StructlogAdapter()
    port.configure(config)
    return port


__all__ = ["LoggingPort", "StructlogAdapter", "configure_logging"]
