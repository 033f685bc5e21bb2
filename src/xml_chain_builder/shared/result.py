"""Outcome types and the error taxonomy for composable XML building.

Every builder operation returns an outcome instead of raising. An outcome is
either ``Ok`` wrapping the produced value or ``Err`` wrapping a
``BuilderError`` that names the precondition that failed.
"""

from dataclasses import dataclass
from enum import Enum, auto
from typing import Any, Callable, Generic, TypeVar, Union

T = TypeVar("T")
U = TypeVar("U")


class BuilderError(Enum):
    """Closed set of builder failure kinds. Members carry no payload."""

    LABEL_EMPTY = auto()            # Tag label was empty
    CONTENTS_EMPTY = auto()         # Contents or comment text was empty
    OPTIONS_EMPTY = auto()          # Attribute list was empty
    INNER_EMPTY = auto()            # Nested fragment held no text
    VERSION_EMPTY = auto()          # Declaration version was empty
    ENCODING_EMPTY = auto()         # Declaration encoding was empty
    EMPTY_DOCUMENT = auto()         # Finalized fragment held no text
    TAG_PLACED_BEFORE_NEW = auto()  # Reserved, produced by no operation

    @property
    def description(self) -> str:
        """Human-readable explanation of the failure."""
        return _ERROR_DESCRIPTIONS[self]


_ERROR_DESCRIPTIONS = {
    BuilderError.LABEL_EMPTY: "Tag label cannot be empty",
    BuilderError.CONTENTS_EMPTY: "Tag contents cannot be empty",
    BuilderError.OPTIONS_EMPTY: "Attribute options cannot be empty",
    BuilderError.INNER_EMPTY: "Nested fragment cannot be empty",
    BuilderError.VERSION_EMPTY: "Declaration version cannot be empty",
    BuilderError.ENCODING_EMPTY: "Declaration encoding cannot be empty",
    BuilderError.EMPTY_DOCUMENT: "Cannot finalize an empty document",
    BuilderError.TAG_PLACED_BEFORE_NEW: "Tag placed before document creation",
}


class OutcomeAccessError(Exception):
    """Raised when an outcome is unwrapped on the wrong variant."""


@dataclass(frozen=True)
class Ok(Generic[T]):
    """Successful outcome holding a value."""

    value: T

    def is_ok(self) -> bool:
        return True

    def is_err(self) -> bool:
        return False

    def unwrap(self) -> T:
        """Return the wrapped value."""
        return self.value

    def unwrap_err(self) -> BuilderError:
        """Successful outcomes have no error to hand out."""
        raise OutcomeAccessError(f"Called unwrap_err() on {self!r}")

    def unwrap_or(self, default: Any) -> T:
        return self.value

    def map(self, func: Callable[[T], U]) -> "Ok[U]":
        """Apply ``func`` to the wrapped value."""
        return Ok(func(self.value))

    def and_then(self, func: Callable[[T], "Outcome[U]"]) -> "Outcome[U]":
        """Chain an outcome-returning callable onto the wrapped value."""
        return func(self.value)


@dataclass(frozen=True)
class Err:
    """Failed outcome holding the first error encountered."""

    error: BuilderError

    def is_ok(self) -> bool:
        return False

    def is_err(self) -> bool:
        return True

    def unwrap(self) -> Any:
        raise OutcomeAccessError(
            f"Called unwrap() on Err({self.error.name}): {self.error.description}"
        )

    def unwrap_err(self) -> BuilderError:
        """Return the wrapped error."""
        return self.error

    def unwrap_or(self, default: Any) -> Any:
        return default

    def map(self, func: Callable[[Any], Any]) -> "Err":
        return self

    def and_then(self, func: Callable[[Any], Any]) -> "Err":
        return self


Outcome = Union[Ok[T], Err]
