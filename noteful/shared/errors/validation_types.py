# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from enum import StrEnum


class ValidationErrorType(StrEnum):
    MISSING = "missing"
    STRING_TYPE = "string_type"
    WHITESPACE = "untrimmed"
    TOO_SHORT = "too_short"
    TOO_LONG = "too_long"


__all__ = ["ValidationErrorType"]
