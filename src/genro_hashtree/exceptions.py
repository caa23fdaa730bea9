# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""HashTree exceptions."""

from __future__ import annotations


class HashTreeError(Exception):
    """Base exception for HashTree errors."""

    pass


class InvalidArgumentError(HashTreeError, ValueError):
    """Raised when a required uid or value is missing or empty."""

    pass
