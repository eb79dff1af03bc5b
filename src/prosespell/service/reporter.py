"""Human-readable report of findings, one block per file."""

from __future__ import annotations

import sys
from typing import TextIO

from prosespell.models.findings import BatchResult, Finding


def _row(finding: Finding) -> tuple[str, ...]:
    span = finding.span
    place = f"{span.line}:{span.column}"
    if span.end_line is not None and span.end_column is not None:
        place += f"-{span.end_line}:{span.end_column}"
    return (place, "warning", finding.message, finding.rule_id, finding.source)


class Reporter:
    """Formats a ``BatchResult`` like::

        src/Banner.jsx
          3:9-3:14  warning  `Mapbx` is misspelt; did you mean `Mapbox`?  mapbx  prosespell

        ⚠ 1 warning
    """

    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream

    def render(self, result: BatchResult) -> str:
        if not result.results:
            return ""
        blocks: list[str] = []
        for file_path, findings in result.results.items():
            rows = [_row(f) for f in sorted(findings, key=lambda f: f.offset)]
            widths = [max(len(row[i]) for row in rows) for i in range(len(rows[0]))]
            lines = [file_path]
            for row in rows:
                cells = [cell.ljust(widths[i]) for i, cell in enumerate(row)]
                lines.append(("  " + "  ".join(cells)).rstrip())
            blocks.append("\n".join(lines))
        count = result.finding_count
        summary = f"⚠ {count} warning" + ("" if count == 1 else "s")
        return "\n\n".join(blocks) + "\n\n" + summary

    def report(self, result: BatchResult) -> None:
        """Print the report to stderr; nothing is printed when no file has findings."""
        text = self.render(result)
        if not text:
            return
        stream = self._stream if self._stream is not None else sys.stderr
        print(text, file=stream)
