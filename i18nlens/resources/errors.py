"""Resource parse errors."""

from __future__ import annotations

from i18nlens.diagnostics import Diagnostic, DiagnosticSpec
from i18nlens.text import TextRange, TextSize


class ResourceParseError(ValueError):
    """A resource file could not be turned into a value tree.

    Recoverable: the scanner skips the file and keeps going.
    """

    def __init__(
        self,
        spec: DiagnosticSpec,
        detail: str | None = None,
        *,
        offset: int | None = None,
        path: str | None = None,
    ) -> None:
        self.spec = spec
        self.detail = detail
        self.offset = offset
        self.path = path
        super().__init__(self._render())

    @property
    def code(self) -> str:
        return self.spec.code

    def with_path(self, path: str) -> ResourceParseError:
        return ResourceParseError(self.spec, self.detail, offset=self.offset, path=path)

    def to_diagnostic(self) -> Diagnostic:
        offset = TextSize.from_int(self.offset or 0)
        return Diagnostic(
            code=self.spec.code,
            message=self._render(include_path=False),
            range=TextRange.empty(offset),
            severity=self.spec.severity,
            hint=self.spec.hint,
            category=self.spec.category,
        )

    def _render(self, *, include_path: bool = True) -> str:
        message = self.spec.message
        if self.detail:
            message = f"{message} {self.detail}"
        if self.offset is not None:
            message = f"{message} (offset {self.offset})"
        if include_path and self.path:
            message = f"{self.path}: {message}"
        return message
