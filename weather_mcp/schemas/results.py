"""
Result values passed between the provider client and the dispatcher.

Lookups return ``Ok(value)`` or one of the domain errors instead of raising,
so the dispatcher can build its response with a single exhaustive ``match``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar, Union

from pydantic import BaseModel

T = TypeVar("T")

MAX_DETAIL_LENGTH = 200


@dataclass(frozen=True, slots=True)
class Ok(Generic[T]):
    value: T


@dataclass(frozen=True, slots=True)
class NotFound:
    place: str

    @property
    def message(self) -> str:
        return f'City "{self.place}" not found'


@dataclass(frozen=True, slots=True)
class Unauthorized:
    @property
    def message(self) -> str:
        return "Invalid API key. Please configure WEATHER_API_KEY environment variable"


@dataclass(frozen=True, slots=True)
class UpstreamFailure:
    detail: str
    subject: str = "weather data"

    def __post_init__(self) -> None:
        if len(self.detail) > MAX_DETAIL_LENGTH:
            object.__setattr__(self, "detail", self.detail[: MAX_DETAIL_LENGTH - 3] + "...")

    @property
    def message(self) -> str:
        return f"Failed to fetch {self.subject}: {self.detail}"


@dataclass(frozen=True, slots=True)
class InvalidInvocation:
    """An invocation rejected before any network access."""

    reason: str

    @property
    def message(self) -> str:
        return self.reason


DomainError = Union[NotFound, Unauthorized, UpstreamFailure]
Result = Union[Ok[T], NotFound, Unauthorized, UpstreamFailure]


class InvocationResult(BaseModel):
    """Envelope returned for every tool invocation."""

    text: str
    is_error: bool = False

    @classmethod
    def success(cls, text: str) -> InvocationResult:
        return cls(text=text)

    @classmethod
    def failure(cls, message: str) -> InvocationResult:
        return cls(text=f"Error: {message}", is_error=True)
