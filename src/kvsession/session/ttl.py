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
"""Expiry policy for stored sessions."""

from __future__ import annotations

import math
from collections.abc import Mapping
from typing import Any

ONE_DAY = 86400


def compute_ttl(session: Mapping[str, Any], ttl: int | None = None) -> int:
    """Return the expiry in seconds for *session*.

    A store-level *ttl* wins. Otherwise a numeric ``cookie.maxAge``
    (milliseconds) is floored to whole seconds, and anything else falls
    back to one day.
    """
    if ttl:
        return ttl

    cookie = session.get("cookie") if isinstance(session, Mapping) else None
    max_age = cookie.get("maxAge") if isinstance(cookie, Mapping) else None
    if isinstance(max_age, (int, float)) and not isinstance(max_age, bool) and math.isfinite(max_age):
        return int(max_age // 1000)
    return ONE_DAY
