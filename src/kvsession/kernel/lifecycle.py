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
"""Unified lifecycle protocol for components that own connections."""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class Lifecycle(Protocol):
    """Standard lifecycle for stores and pools.

    The hosting application calls start() during startup and stop() during
    shutdown.
    """

    async def start(self) -> None:
        """Establish connections and validate credentials.

        Failures here are fatal: implementations raise instead of deferring
        the error to the first request.
        """
        ...

    async def stop(self) -> None:
        """Release the connections this component created itself."""
        ...
