"""
Unit tests for transcript parsing.
"""

import json

import pytest

from src.domain.entities.session_info import SessionInfo
from src.domain.entities.session_record import SessionRecord
from src.domain.services.session_parser import (
    is_file_viewing_command,
    parse_record_line,
    parse_records,
    rewrite_read_command,
    sort_sessions,
    summarize_session,
)

from transcript_builders import (
    response_item_line,
    session_meta_line,
    shell_call_line,
    user_message_line,
)


def _lines(*items):
    return [json.dumps(item) for item in items]


class TestParseRecordLine:
    """Tests for single-line decoding."""

    def test_valid_line(self):
        """Test decoding a well-formed line."""
        record = parse_record_line(json.dumps(session_meta_line()))
        assert record.type == "session_meta"

    @pytest.mark.parametrize("line", ["", "   ", "\n", "{not json", "[1, 2]", "42"])
    def test_skipped_lines(self, line):
        """Test that blank, malformed and non-object lines are skipped."""
        assert parse_record_line(line) is None

    def test_parse_records_skips_bad_lines(self):
        """Test that a bad line does not abort the rest of the transcript."""
        lines = _lines(session_meta_line()) + ["garbage"] + _lines(response_item_line())

        records = parse_records(lines)

        assert [r.type for r in records] == ["session_meta", "response_item"]

    def test_oversized_integer_line_skipped(self):
        """Test that an integer beyond the conversion limit only drops its line."""
        huge = '{"type": "response_item", "payload": {"n": ' + "9" * 5000 + "}}"
        lines = _lines(session_meta_line()) + [huge] + _lines(response_item_line())

        records = parse_records(lines)

        assert [r.type for r in records] == ["session_meta", "response_item"]

    def test_deeply_nested_line_skipped(self):
        """Test that nesting too deep to decode only drops its line."""
        nested = "[" * 100000 + "]" * 100000

        assert parse_record_line(nested) is None
        assert parse_records([nested] + _lines(response_item_line()))[0].type == (
            "response_item"
        )


class TestSummarizeSession:
    """Tests for folding transcript lines into a SessionInfo."""

    def test_summary(self):
        """Test a summary built from raw lines."""
        lines = _lines(
            session_meta_line(),
            user_message_line("Explain\nthe parser"),
            response_item_line(),
        )

        info = summarize_session("rollout-abc", lines)

        assert info.title == "Explain the parser"
        assert info.message_count == 1
        assert info.is_listable

    def test_configured_title_length(self):
        """Test that the title length limit is applied."""
        lines = _lines(user_message_line("abcdefghij"), response_item_line())

        info = summarize_session("rollout-abc", lines, title_max_length=4)

        assert info.title == "abcd..."

    def test_malformed_lines_are_ignored(self):
        """Test that malformed lines contribute nothing."""
        lines = ["{broken"] + _lines(user_message_line("hi"), response_item_line())

        info = summarize_session("rollout-abc", lines)

        assert info.title == "hi"
        assert info.message_count == 1


class TestSortSessions:
    """Tests for session ordering."""

    def test_most_recent_first(self):
        """Test descending order by last activity."""
        sessions = [
            SessionInfo(session_id="old", title="a", last_timestamp=100),
            SessionInfo(session_id="new", title="b", last_timestamp=300),
            SessionInfo(session_id="mid", title="c", last_timestamp=200),
        ]

        assert [s.session_id for s in sort_sessions(sessions)] == ["new", "mid", "old"]

    def test_ties_keep_scan_order(self):
        """Test that equal timestamps keep their original order."""
        sessions = [
            SessionInfo(session_id="first", title="a", last_timestamp=100),
            SessionInfo(session_id="second", title="b", last_timestamp=100),
            SessionInfo(session_id="third", title="c", last_timestamp=100),
        ]

        assert [s.session_id for s in sort_sessions(sessions)] == [
            "first",
            "second",
            "third",
        ]


class TestFileViewingCommand:
    """Tests for recognizing read-only shell commands."""

    @pytest.mark.parametrize(
        "command",
        [
            "pwd",
            "ls",
            "ls -la src",
            "cat README.md",
            "head -n 20 app.py",
            "tail -f log.txt",
            "tree -L 2",
            "file image.png",
            "stat setup.cfg",
            "sed -n '1,40p' main.py",
            "  cat padded.txt  ",
        ],
    )
    def test_viewing_commands(self, command):
        """Test commands that only inspect files."""
        assert is_file_viewing_command(command)

    @pytest.mark.parametrize(
        "command",
        [
            None,
            "",
            "rm -rf build",
            "catalog --list",
            "sed -i 's/a/b/' main.py",
            "git status",
            "echo hi; cat x",
            "cat a.txt\nrm a.txt",
        ],
    )
    def test_other_commands(self, command):
        """Test commands that are not plain file viewing."""
        assert not is_file_viewing_command(command)


class TestRewriteReadCommand:
    """Tests for relabeling read-only shell calls."""

    def test_cat_becomes_read(self):
        """Test that a viewing command is relabeled."""
        record = SessionRecord.from_dict(shell_call_line("cat config.toml"))

        result = rewrite_read_command(record)

        assert result is record
        assert record.payload["name"] == "read"
        assert json.loads(record.payload["arguments"]) == {"command": "cat config.toml"}

    def test_destructive_command_untouched(self):
        """Test that other shell commands keep their name."""
        record = SessionRecord.from_dict(shell_call_line("rm config.toml"))

        rewrite_read_command(record)

        assert record.payload["name"] == "shell_command"

    def test_other_tools_untouched(self):
        """Test that only shell_command calls are relabeled."""
        line = shell_call_line("cat config.toml")
        line["payload"]["name"] = "apply_patch"
        record = SessionRecord.from_dict(line)

        rewrite_read_command(record)

        assert record.payload["name"] == "apply_patch"

    def test_non_call_records_untouched(self):
        """Test that records other than function calls pass through."""
        record = SessionRecord.from_dict(user_message_line("cat x"))
        before = record.to_dict()

        rewrite_read_command(record)

        assert record.to_dict() == before

    def test_malformed_arguments_untouched(self):
        """Test that a call with undecodable arguments keeps its name."""
        line = shell_call_line("cat x")
        line["payload"]["arguments"] = "{not json"
        record = SessionRecord.from_dict(line)

        rewrite_read_command(record)

        assert record.payload["name"] == "shell_command"
