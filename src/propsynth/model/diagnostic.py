"""Diagnostic model: structured findings reported by the generator."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Severity(Enum):
    """Severity level for a diagnostic message."""

    ERROR = "ERROR"
    WARNING = "WARNING"
    INFO = "INFO"


@dataclass(frozen=True)
class Location:
    """A position inside a declaration source."""

    path: str
    line: int = 0
    column: int = 0

    def __str__(self) -> str:
        return f"{self.path}:{self.line}:{self.column}"


@dataclass(frozen=True)
class DiagnosticDescriptor:
    """Static description of a diagnostic kind.

    Attributes:
        id: Stable numeric identifier, e.g. ``PSG0014``.
        code: Stable symbolic name, e.g. ``NameCollision``.
        title: Short summary.
        message_format: ``str.format`` template filled with the diagnostic arguments.
        category: Component that reports it.
        severity: Default severity.
        description: Longer explanation.
        help_link: Optional documentation link.
    """

    id: str
    code: str
    title: str
    message_format: str
    category: str
    severity: Severity
    description: str = ""
    help_link: str = ""

    def create(self, location: Location | None = None, *args: object) -> Diagnostic:
        """Create a diagnostic bound to *location* with formatted *args*."""
        return Diagnostic(
            id=self.id,
            code=self.code,
            severity=self.severity,
            message=self.message_format.format(*args),
            location=location,
            arguments=tuple(str(a) for a in args),
        )


@dataclass(frozen=True)
class Diagnostic:
    """A single coded report about a declaration.

    Attributes:
        id: Stable identifier of the descriptor that produced it.
        code: Symbolic code, suitable for suppression and filtering.
        severity: How serious the issue is.
        message: Human-readable description of the problem.
        location: Where the issue was found, if known.
        arguments: The values bound into the message template.
    """

    id: str
    code: str
    severity: Severity
    message: str
    location: Location | None = None
    arguments: tuple[str, ...] = ()

    @property
    def is_error(self) -> bool:
        return self.severity is Severity.ERROR

    @property
    def is_warning(self) -> bool:
        return self.severity is Severity.WARNING

    def __str__(self) -> str:
        location = f" [{self.location}]" if self.location else ""
        return f"{self.severity.value} {self.id}{location}: {self.message}"
