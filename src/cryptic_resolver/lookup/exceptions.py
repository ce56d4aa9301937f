"""Exception hierarchy for per-sheet lookup defects.

None of these abort a query: Sheet Search catches them and degrades the
sheet's contribution to "not found" plus a Diagnostic.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from .models import Diagnostic, DiagnosticKind


class ResolverError(Exception):
    """Base exception for lookup errors."""

    kind: DiagnosticKind = DiagnosticKind.LOADER_FAILURE

    def __init__(self, message: str, *, sheet: str, term: str, file_key: str):
        self.sheet = sheet
        self.term = term
        self.file_key = file_key
        super().__init__(message)

    def to_diagnostic(self) -> Diagnostic:
        return Diagnostic(
            kind=self.kind,
            sheet=self.sheet,
            term=self.term,
            file_key=self.file_key,
            message=str(self),
        )


class MalformedEntryError(ResolverError):
    """Entry exists but has no description, categories or redirect."""

    kind = DiagnosticKind.MALFORMED_ENTRY

    def __init__(self, *, sheet: str, term: str, file_key: str):
        super().__init__(
            f"Entry `{term}` defines nothing. "
            f"Please consider fixing this in `{file_key}.toml` of the sheet `{sheet}`",
            sheet=sheet,
            term=term,
            file_key=file_key,
        )


class BrokenRedirectError(ResolverError):
    """Synonym jump to a missing, empty, ambiguous or redirecting entry."""

    kind = DiagnosticKind.BROKEN_REDIRECT

    def __init__(
        self,
        reason: str,
        *,
        sheet: str,
        term: str,
        target: str,
        file_key: str,
    ):
        """Initialize BrokenRedirectError.

        Args:
            reason: Why the jump failed
            sheet: Sheet holding the redirecting entry
            term: The redirecting term
            target: Raw ``same`` value
            file_key: Bucket the target was expected in
        """
        self.target = target
        self.reason = reason
        super().__init__(
            f"Synonym jumps to a wrong place at `{target}` ({reason}). "
            f"Please consider fixing `{term}` or `{file_key}.toml` of the sheet `{sheet}`",
            sheet=sheet,
            term=term,
            file_key=file_key,
        )

    def to_diagnostic(self) -> Diagnostic:
        return Diagnostic(
            kind=self.kind,
            sheet=self.sheet,
            term=self.term,
            file_key=self.file_key,
            message=str(self),
            target=self.target,
        )


class LoaderFailure(ResolverError):
    """Sheet file exists but cannot be read or parsed."""

    kind = DiagnosticKind.LOADER_FAILURE

    def __init__(
        self,
        path: Path,
        cause: Exception,
        *,
        sheet: str,
        file_key: str,
        term: Optional[str] = None,
    ):
        self.path = path
        self.cause = cause
        super().__init__(
            f"Failed to load {path}: {cause}",
            sheet=sheet,
            term=term or "",
            file_key=file_key,
        )
