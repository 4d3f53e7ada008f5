"""Domain-level exceptions.

All rejected input is expressed as a subclass of DomainException so the
CLI layer can catch it uniformly and display user-friendly messages.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable


class DomainException(Exception):
    """Base class for all domain errors."""


@dataclass(frozen=True)
class Violation:
    """One failed constraint: the wire name of the field and why it failed."""

    field: str
    reason: str

    def __str__(self) -> str:
        return f"{self.field}: {self.reason}"


class ValidationError(DomainException):
    """One or more constraints were violated.

    Always carries at least one ``Violation``; every problem found in a
    single request is reported together.
    """

    def __init__(self, violations: Iterable[Violation]) -> None:
        self.violations: tuple[Violation, ...] = tuple(violations)
        if not self.violations:
            raise ValueError("ValidationError requires at least one violation")
        super().__init__("; ".join(str(v) for v in self.violations))

    @classmethod
    def single(cls, field: str, reason: str) -> ValidationError:
        return cls([Violation(field, reason)])

    @property
    def fields(self) -> list[str]:
        return [v.field for v in self.violations]


class PayloadError(DomainException):
    """The submitted payload cannot be read as a request at all."""
