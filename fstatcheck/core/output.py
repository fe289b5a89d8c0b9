"""Render a check result for the monitoring daemon."""

import json

from fstatcheck.core.report import StatusResult

# Long output lines shown after the status line
MAX_DETAIL_LINES = 10


class Output:
    """Helper collecting the run result and printing it once."""

    def __init__(self):
        self.result: StatusResult | None = None
        self.errors: list[str] = []
        self._printed: bool = False

    def emit(self, result: StatusResult) -> None:
        """Store the run result."""
        self.result = result

    def error(self, message: str) -> None:
        """Record an error message."""
        self.errors.append(message)

    @property
    def summary(self) -> str:
        """Status line of the result, or the first error."""
        if self.result is not None:
            return self.result.status_line()
        if self.errors:
            return f"Error: {self.errors[0]}"
        return "no result"

    def to_json(self) -> str:
        """Return the result as JSON string."""
        data = self.result.to_dict() if self.result is not None else {}
        if self.errors:
            data["errors"] = list(self.errors)
        return json.dumps(data, indent=2, default=str)

    def to_plain(self) -> str:
        """Status line followed by the long output lines."""
        if self.result is None:
            return self.summary
        lines = [self.result.status_line()]
        details = self.result.details
        lines.extend(details[:MAX_DETAIL_LINES])
        if len(details) > MAX_DETAIL_LINES:
            lines.append(f"... and {len(details) - MAX_DETAIL_LINES} more")
        return "\n".join(lines)

    def render(self, format: str = "plain") -> None:
        """Print output in the specified format.

        Args:
            format: Output format - "json" or "plain"
        """
        if self._printed:
            return
        self._printed = True

        if format == "json":
            print(self.to_json())
        else:
            print(self.to_plain())
