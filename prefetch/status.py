"""Prefetch run states."""

from dataclasses import dataclass
from typing import Union

from app.models.common import BaseEntity


@dataclass
class Idle(BaseEntity):
    state: str = "idle"


@dataclass
class Running(BaseEntity):
    progress: int = 0
    total: int = 1
    message: str | None = None
    state: str = "running"


@dataclass
class Done(BaseEntity):
    pages_written: int = 0
    details_written: int = 0
    state: str = "done"


@dataclass
class Error(BaseEntity):
    cause: BaseException | None = None
    state: str = "error"


PrefetchStatus = Union[Idle, Running, Done, Error]
