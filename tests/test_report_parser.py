"""Tests for javap report parsing."""

from pathlib import Path

import pytest

from jni_headers.errors import (
    InvalidPatternError,
    OrphanSignatureError,
    ToolReportedError,
)
from jni_headers.generator import generate_header_file
from jni_headers.header_emitter import generate_header
from jni_headers.models import HeaderConfig
from jni_headers.report_parser import (
    ReportPatterns,
    collect_records,
    parse_report,
    split_report,
)


@pytest.fixture
def fixtures_path():
    return Path(__file__).parent / "fixtures" / "javap"


@pytest.fixture
def patterns():
    return ReportPatterns.from_config(HeaderConfig(class_name="a.B"))


class TestParseReport:
    def given_lines(self, *lines):
        self.lines = list(lines)

    def given_fixture_report(self, fixtures_path, name):
        text = (fixtures_path / name).read_text()
        self.lines = split_report(text)

    def when_report_is_parsed(self, patterns):
        self.records = list(parse_report(self.lines, patterns))

    def when_parsing_fails(self, patterns, error_type):
        with pytest.raises(error_type) as exc_info:
            list(parse_report(self.lines, patterns))
        self.error = exc_info.value

    def then_names_are(self, *names):
        assert [r.name for r in self.records] == list(names)

    def then_record_is(self, index, name, macro_stem, signature):
        record = self.records[index]
        assert record.name == name
        assert record.macro_stem == macro_stem
        assert record.signature == signature
        assert record.is_complete

    def test_pairs_declaration_with_signature(self, patterns):
        """A declaration followed by a signature yields one record."""
        self.given_lines("public native void doStuff(I)V;", "  Signature: (I)V")
        self.when_report_is_parsed(patterns)
        self.then_record_is(0, "doStuff", "DO_STUFF", "(I)V")

    def test_keeps_original_lines(self, patterns):
        """Records carry the declaration and signature lines verbatim."""
        self.given_lines("public native void doStuff(I)V;", "  Signature: (I)V")
        self.when_report_is_parsed(patterns)
        assert self.records[0].declaration_line == "public native void doStuff(I)V;"
        assert self.records[0].signature_line == "  Signature: (I)V"

    def test_parses_captured_report_in_order(self, fixtures_path, patterns):
        """All methods of a real javap report are found in report order."""
        self.given_fixture_report(fixtures_path, "callbacks.txt")
        self.when_report_is_parsed(patterns)
        self.then_names_are("onProgress", "readValue", "isReady")
        self.then_record_is(
            1, "readValue", "READ_VALUE", "([Ljava/lang/String;)Ljava/lang/String;"
        )

    def test_declaration_with_throws_clause(self, patterns):
        """Text after the argument list does not hide the method name."""
        self.given_lines(
            "public abstract void load(java.lang.String) throws java.io.IOException;",
            "  Signature: (Ljava/lang/String;)V",
        )
        self.when_report_is_parsed(patterns)
        self.then_record_is(0, "load", "LOAD", "(Ljava/lang/String;)V")

    def test_constructor_is_not_a_declaration(self, patterns):
        """Constructors are named with their package and are not matched."""
        self.given_lines("public a.B();")
        self.when_report_is_parsed(patterns)
        self.then_names_are()

    def test_ignores_unrelated_lines(self, patterns):
        """Class headers and braces are skipped."""
        self.given_lines(
            'Compiled from "B.java"',
            "public interface a.B{",
            "}",
        )
        self.when_report_is_parsed(patterns)
        self.then_names_are()

    def test_error_line_aborts(self, patterns):
        """A line matching the error pattern raises with the line text."""
        self.given_lines(
            "public native void doStuff(I)V;",
            "  Signature: (I)V",
            "ERROR:Could not find a.B",
        )
        self.when_parsing_fails(patterns, ToolReportedError)
        assert self.error.line == "ERROR:Could not find a.B"

    def test_error_in_fixture_report_aborts(self, fixtures_path, patterns):
        """javap's own error output is recognised."""
        self.given_fixture_report(fixtures_path, "error.txt")
        self.when_parsing_fails(patterns, ToolReportedError)

    def test_signature_before_declaration_is_orphan(self, patterns):
        """A signature with no pending name is a fatal error."""
        self.given_lines("  Signature: (I)V", "public native void doStuff(I)V;")
        self.when_parsing_fails(patterns, OrphanSignatureError)
        assert self.error.line == "  Signature: (I)V"

    def test_second_signature_for_one_declaration_is_orphan(self, patterns):
        """A completed record does not accept another signature."""
        self.given_lines(
            "public native void doStuff(I)V;",
            "  Signature: (I)V",
            "  Signature: (J)V",
        )
        self.when_parsing_fails(patterns, OrphanSignatureError)

    def test_last_declaration_wins(self, patterns):
        """Of two consecutive declarations only the later one is paired."""
        self.given_lines(
            "public native void first(I)V;",
            "public native void second(J)V;",
            "  Signature: (J)V",
        )
        self.when_report_is_parsed(patterns)
        self.then_names_are("second")
        self.then_record_is(0, "second", "SECOND", "(J)V")

    def test_dangling_declaration_is_dropped(self, patterns):
        """A declaration without a signature at the end is not reported."""
        self.given_lines(
            "public native void doStuff(I)V;",
            "  Signature: (I)V",
            "public native void unfinished();",
        )
        self.when_report_is_parsed(patterns)
        self.then_names_are("doStuff")

    def test_custom_patterns(self):
        """Configured patterns replace the defaults."""
        config = HeaderConfig(
            class_name="a.B",
            error_pattern=r"^FAIL.*$",
            name_pattern=r"^method (\w+)$",
            signature_pattern=r"^\s*descriptor: (.+)$",
        )
        self.given_lines("method run", "    descriptor: ()V", "ERROR: ignored")
        self.when_report_is_parsed(ReportPatterns.from_config(config))
        self.then_record_is(0, "run", "RUN", "()V")

    def test_patterns_match_whole_line(self, patterns):
        """Patterns must match the entire line, not a prefix."""
        self.given_lines("public native void doStuff(I)V; // trailing")
        self.when_report_is_parsed(patterns)
        self.then_names_are()


class TestReportPatterns:
    """Tests for pattern compilation."""

    def test_rejects_invalid_regex(self):
        """A malformed pattern is reported with its kind."""
        config = HeaderConfig(class_name="a.B", error_pattern="(unclosed")
        with pytest.raises(InvalidPatternError) as exc_info:
            ReportPatterns.from_config(config)
        assert exc_info.value.kind == "error"

    def test_requires_capturing_group(self):
        """Name and signature patterns need a group to capture."""
        config = HeaderConfig(class_name="a.B", signature_pattern=r"^Signature: .+$")
        with pytest.raises(InvalidPatternError) as exc_info:
            ReportPatterns.from_config(config)
        assert exc_info.value.kind == "signature"


class TestSplitReport:
    """Tests for split_report function."""

    def test_splits_on_any_line_ending(self):
        """Windows and Unix line endings are both handled."""
        assert split_report("a\r\nb\nc") == ["a", "b", "c"]

    def test_empty_output_has_no_lines(self):
        """Empty tool output gives no lines."""
        assert split_report("") == []

    def test_splits_on_lone_carriage_return(self):
        """A bare carriage return ends a line as well."""
        assert split_report("a\rb\r\n") == ["a", "b"]

    def test_other_separators_stay_in_the_line(self):
        """Form feeds and Unicode separators are not line breaks."""
        text = "a\x0bb\x0cc\x1cd\x85e f\nnext\n"
        assert split_report(text) == ["a\x0bb\x0cc\x1cd\x85e f", "next"]

    def test_keeps_blank_lines_inside_report(self):
        """Only the empty tail after the last terminator is dropped."""
        assert split_report("a\n\nb\n") == ["a", "", "b"]


class TestCollectRecords:
    """Tests for collect_records function."""

    def test_parses_with_configured_patterns(self):
        """The config's patterns are compiled and every record returned."""
        config = HeaderConfig(class_name="a.B")
        records = collect_records(
            ["public native void doStuff(I)V;", "  Signature: (I)V"], config
        )
        assert [(r.name, r.signature) for r in records] == [("doStuff", "(I)V")]

    def test_header_and_file_generation_share_parsing(self, tmp_path):
        """The in-memory and on-disk entry points produce the same header."""
        lines = ["public native void doStuff(I)V;", "  Signature: (I)V"]
        config = HeaderConfig(class_name="a.B")
        output = tmp_path / "b.h"

        generate_header_file(lines, config, output)

        assert output.read_text() == generate_header(lines, config)
