"""
Exceptions raised at the source and sink boundaries of a team generation run.

Each error carries a human readable message plus structured context and an
optional recommendation, so the CLI and the web UI can report failures
without a stack trace.
"""

from typing import Optional, Dict, Any, Sequence


class TeamGenError(Exception):
    """Base exception for team generation failures."""

    def __init__(
        self,
        message: str,
        context: Optional[Dict[str, Any]] = None,
        recommendation: Optional[str] = None,
    ):
        self.message = message
        self.context = context or {}
        self.recommendation = recommendation
        super().__init__(self.message)

    @property
    def kind(self) -> str:
        return type(self).__name__

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to a structured error report."""
        error_dict = {
            "success": False,
            "kind": self.kind,
            "error": self.message,
        }
        if self.context:
            error_dict["context"] = self.context
        if self.recommendation:
            error_dict["recommendation"] = self.recommendation
        return error_dict


class SheetNotFoundError(TeamGenError):
    """Raised when the requested sheet does not exist in the source workbook."""

    def __init__(self, sheet_name: str, available: Sequence[str] = ()):
        available = list(available)
        super().__init__(
            message=f"Sheet not found: {sheet_name}",
            context={"sheet_name": sheet_name, "available": available},
            recommendation=(
                "Use one of: " + ", ".join(available) if available
                else "Check that the workbook contains at least one sheet."
            ),
        )
        self.sheet_name = sheet_name
        self.available = available


class ReadIOError(TeamGenError):
    """Raised when the roster source cannot be opened or parsed."""

    def __init__(self, path: str, reason: str):
        super().__init__(
            message=f"Cannot read roster from {path}: {reason}",
            context={"path": path, "reason": reason},
            recommendation="Make sure the file exists and is an .xlsx or .csv file.",
        )
        self.path = path
        self.reason = reason


class WriteError(TeamGenError):
    """Raised when the output workbook cannot be created or finalized."""

    def __init__(self, path: str, reason: str):
        super().__init__(
            message=f"Cannot write teams to {path}: {reason}",
            context={"path": path, "reason": reason},
            recommendation="Check that the output directory exists and is writable.",
        )
        self.path = path
        self.reason = reason
