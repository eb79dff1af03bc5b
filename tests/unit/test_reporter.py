"""Tests for report rendering."""

from __future__ import annotations

import io

from prosespell.models.errors import SourceSpan
from prosespell.models.findings import BatchResult, FileResult, Finding
from prosespell.service.reporter import Reporter


def finding(path: str, word: str, line: int, column: int, offset: int) -> Finding:
    return Finding(
        file_path=path,
        span=SourceSpan(
            file=path, line=line, column=column, end_line=line, end_column=column + len(word)
        ),
        offset=offset,
        message=f"`{word}` is misspelt",
        rule_id=word.lower(),
        actual=word,
    )


class TestReporter:
    def test_empty(self) -> None:
        assert Reporter().render(BatchResult()) == ""

    def test_single_file(self) -> None:
        result = BatchResult.collect(
            [FileResult(file_path="a.jsx", findings=[finding("a.jsx", "Mapbx", 3, 9, 40)])]
        )
        assert Reporter().render(result) == (
            "a.jsx\n"
            "  3:9-3:14  warning  `Mapbx` is misspelt  mapbx  prosespell\n"
            "\n"
            "⚠ 1 warning"
        )

    def test_columns_aligned_and_ordered(self) -> None:
        result = BatchResult.collect(
            [
                FileResult(
                    file_path="b.js",
                    findings=[
                        finding("b.js", "Zzz", 12, 1, 200),
                        finding("b.js", "Qq", 2, 5, 10),
                    ],
                ),
                FileResult(file_path="a.js", findings=[finding("a.js", "Xx", 1, 1, 0)]),
            ]
        )
        lines = Reporter().render(result).splitlines()
        assert lines[0] == "a.js"
        assert lines[3] == "b.js"
        assert lines[4].startswith("  2:5-2:7    warning  `Qq` is misspelt   qq")
        assert lines[5].startswith("  12:1-12:4  warning  `Zzz` is misspelt  zzz")
        assert lines[-1] == "⚠ 3 warnings"

    def test_report_writes_to_stream(self) -> None:
        stream = io.StringIO()
        result = BatchResult.collect(
            [FileResult(file_path="a.jsx", findings=[finding("a.jsx", "Mapbx", 3, 9, 40)])]
        )
        Reporter(stream=stream).report(result)
        assert stream.getvalue().endswith("⚠ 1 warning\n")

    def test_clean_result_writes_nothing(self) -> None:
        stream = io.StringIO()
        Reporter(stream=stream).report(BatchResult())
        assert stream.getvalue() == ""


class TestBatchResult:
    def test_collect_drops_clean_files_and_keeps_errors(self) -> None:
        from prosespell.models.errors import FileError

        result = BatchResult.collect(
            [
                FileResult(file_path="clean.js"),
                FileResult(file_path="dirty.js", findings=[finding("dirty.js", "Xx", 1, 1, 0)]),
                FileResult(
                    file_path="bad.js",
                    error=FileError(file_path="bad.js", kind="ParseError", message="boom"),
                ),
            ]
        )
        assert list(result.results) == ["dirty.js"]
        assert result.finding_count == 1
        assert [e.file_path for e in result.errors] == ["bad.js"]
