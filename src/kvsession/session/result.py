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
"""Immutable result type returned by store operations."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class StoreResult:
    """Outcome of a single load/save/destroy call.

    Fields
    ------
    error:
        The exception that caused failure, or ``None`` on success.
    value:
        ``load``: the decoded session, or ``None`` when no session exists.
        ``save``/``destroy``: ``True`` on success.
    """

    error: Exception | None = None
    value: Any = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> Any:
        """Return ``value``, raising ``error`` if the call failed."""
        if self.error is not None:
            raise self.error
        return self.value
