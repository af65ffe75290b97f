"""Diagnostics for input the converter skips instead of modelling.

A diagnostic means "this part of the input is not represented in the
schema", which is different from "there was nothing here". Callers should
inspect them before trusting a schema as complete.
"""

import logging
from dataclasses import dataclass, field
from enum import Enum

logger = logging.getLogger(__name__)


class DiagnosticKind(Enum):
    """Kinds of input that are skipped during conversion."""
    FRAGMENT_SPREAD = "fragment_spread"
    INLINE_FRAGMENT = "inline_fragment"
    LIST_VARIABLE = "list_variable"
    UNSUPPORTED_DEFAULT = "unsupported_default"
    LITERAL_ARGUMENT = "literal_argument"
    UNRESOLVED_VARIABLE = "unresolved_variable"
    UNSUPPORTED_DEFINITION = "unsupported_definition"
    DUPLICATE_DEFINITION = "duplicate_definition"
    OVERWRITTEN_SELECTION = "overwritten_selection"


@dataclass(frozen=True)
class Diagnostic:
    """A single skipped piece of input."""
    kind: DiagnosticKind
    message: str
    # Keys from the document root to the skipped node, e.g. ("CreateUser", "createUser")
    path: tuple[str, ...] = ()

    @property
    def location(self) -> str:
        """Return the path as a dotted string."""
        return ".".join(self.path)

    def __str__(self) -> str:
        if self.path:
            return f"{self.location}: {self.message}"
        return self.message


@dataclass
class DiagnosticCollector:
    """Collects diagnostics for one conversion call."""
    diagnostics: list[Diagnostic] = field(default_factory=list)

    def report(self, kind: DiagnosticKind, message: str, path: tuple[str, ...] = ()):
        """Record a diagnostic and log it as a warning."""
        diagnostic = Diagnostic(kind=kind, message=message, path=tuple(path))
        self.diagnostics.append(diagnostic)
        logger.warning("%s", diagnostic)
        return diagnostic

    def of_kind(self, kind: DiagnosticKind) -> list[Diagnostic]:
        """Return the diagnostics of one kind."""
        return [d for d in self.diagnostics if d.kind == kind]

    def __len__(self) -> int:
        return len(self.diagnostics)

    def __iter__(self):
        return iter(self.diagnostics)
