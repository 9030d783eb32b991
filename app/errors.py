from dataclasses import dataclass
from enum import Enum
from typing import Generic, Optional, TypeVar

T = TypeVar("T")


class ErrorKind(str, Enum):
    NOT_FOUND = "not_found"
    INVALID = "invalid"
    TOO_LARGE = "too_large"


@dataclass(frozen=True)
class ServiceError:
    kind: ErrorKind
    message: str

    @classmethod
    def post_not_found(cls, post_id: int) -> "ServiceError":
        return cls(ErrorKind.NOT_FOUND, f"Post with id {post_id} not found")

    @classmethod
    def comment_not_found_in_post(cls, post_id: int, comment_id: int) -> "ServiceError":
        return cls(ErrorKind.NOT_FOUND, f"Comment with id {comment_id} not found in post {post_id}")

    @classmethod
    def image_not_found(cls, post_id: int) -> "ServiceError":
        return cls(ErrorKind.NOT_FOUND, f"Post with id {post_id} has no image")


@dataclass(frozen=True)
class Result(Generic[T]):
    """Outcome of a service operation: either a value or a ServiceError."""

    value: Optional[T] = None
    error: Optional[ServiceError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, value: Optional[T] = None) -> "Result[T]":
        return cls(value=value)

    @classmethod
    def failure(cls, error: ServiceError) -> "Result[T]":
        return cls(error=error)
