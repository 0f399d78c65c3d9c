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
"""Unified exception hierarchy for kvsession.

All library exceptions inherit from KVSessionException, so callers can catch
one base type or target a specific failure.

Categories:
- SessionStoreException: session values that cannot be encoded or decoded
- InfrastructureException: connection setup and pool acquisition
"""

from __future__ import annotations

# =============================================================================
# Base
# =============================================================================


class KVSessionException(Exception):
    """Base exception for all kvsession errors.

    Carries an optional error code and context dict for structured error data.

    Args:
        message: Human-readable error description.
        code: Machine-readable error code (e.g. "SESSION_DECODE").
        context: Arbitrary key-value pairs for error context and debugging.
    """

    def __init__(
        self,
        message: str,
        code: str | None = None,
        context: dict | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.context: dict = context if context is not None else {}


# =============================================================================
# Session values
# =============================================================================


class SessionStoreException(KVSessionException):
    """A session value could not be converted to or from its stored form."""


class SerializationException(SessionStoreException):
    """The session object cannot be encoded (cyclic or non-JSON values)."""


class DeserializationException(SessionStoreException):
    """The stored value is not a valid encoded session."""


# =============================================================================
# Infrastructure
# =============================================================================


class InfrastructureException(KVSessionException):
    """Failures setting up connections or acquiring them from a pool."""


class ConnectionSetupException(InfrastructureException):
    """Authentication or database selection failed while connecting."""


class PoolAcquisitionException(InfrastructureException):
    """The pool could not hand out a connection."""


class PoolExhaustedException(PoolAcquisitionException):
    """Every pooled connection stayed checked out past the acquire timeout."""
