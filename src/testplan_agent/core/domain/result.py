"""Explicit success/failure values passed between pipeline stages."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class Ok[T]:
    value: T


@dataclass(frozen=True)
class Err:
    reason: str
    status_code: int | None = None
    details: Any = None


type Result[T] = Ok[T] | Err
