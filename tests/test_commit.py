"""
Tests for the commit descriptor: message format and the interactive builder.

Run with:
    pytest tests/test_commit.py -v
"""

import pytest

from ghl import COMMIT_TYPE_NAMES
from ghl.commit import CommitDescriptor, CommitType, ask_commit, build_commit_message
from ghl.prompts import UserCancelled


# ---------------------------------------------------------------------------
# Commit types
# ---------------------------------------------------------------------------

class TestCommitType:

    def test_eleven_kinds_in_order(self):
        assert [t.value for t in CommitType] == [
            'feat', 'fix', 'docs', 'style', 'refactor', 'perf',
            'test', 'build', 'ci', 'chore', 'revert',
        ]

    def test_matches_commit_type_names(self):
        assert [t.value for t in CommitType] == COMMIT_TYPE_NAMES

    def test_descriptions(self):
        assert CommitType.FIX.description == 'A bug fix'
        assert CommitType.REVERT.description == 'Reverts a previous commit'


# ---------------------------------------------------------------------------
# Message format
# ---------------------------------------------------------------------------

class TestBuildCommitMessage:

    @pytest.mark.parametrize("commit_type", list(CommitType))
    def test_without_scope(self, commit_type):
        assert build_commit_message(commit_type, "do things") == f"{commit_type.value}: do things"

    @pytest.mark.parametrize("commit_type", list(CommitType))
    def test_with_scope(self, commit_type):
        assert build_commit_message(commit_type, "do things", "api") == f"{commit_type.value}(api): do things"

    @pytest.mark.parametrize("scope", [None, "", "   "])
    def test_empty_scope_is_no_scope(self, scope):
        assert build_commit_message(CommitType.DOCS, "readme", scope) == "docs: readme"

    def test_scope_is_trimmed(self):
        assert build_commit_message(CommitType.FIX, "x", " auth ") == "fix(auth): x"


class TestCommitDescriptor:

    def test_message(self):
        descriptor = CommitDescriptor(type=CommitType.FIX, name="handle expired tokens", scope="auth")
        assert descriptor.message == "fix(auth): handle expired tokens"

    def test_normalizes_name_and_scope(self):
        descriptor = CommitDescriptor(type=CommitType.FEAT, name="  add login ", scope="  ")
        assert descriptor.name == "add login"
        assert descriptor.scope is None
        assert descriptor.message == "feat: add login"

    def test_rejects_blank_name(self):
        with pytest.raises(ValueError):
            CommitDescriptor(type=CommitType.FEAT, name="   ")

    def test_is_immutable(self):
        descriptor = CommitDescriptor(type=CommitType.FEAT, name="x")
        with pytest.raises(AttributeError):
            descriptor.name = "y"


# ---------------------------------------------------------------------------
# Interactive builder
# ---------------------------------------------------------------------------

class TestAskCommit:

    def test_select_by_number(self, answers):
        answers("2", "auth", "handle expired tokens")
        descriptor = ask_commit()
        assert descriptor.type is CommitType.FIX
        assert descriptor.scope == "auth"
        assert descriptor.message == "fix(auth): handle expired tokens"

    def test_non_ascii_digit_reprompts(self, answers, capsys):
        shown = answers("²", "٣", "fix", "", "x")
        assert ask_commit().message == "fix: x"
        assert shown.count("Select [1-11]: ") == 3
        assert "Enter 1-11 or a type name" in capsys.readouterr().out

    def test_select_by_keyword(self, answers):
        answers("revert", "", "undo the thing")
        assert ask_commit().message == "revert: undo the thing"

    def test_invalid_selection_reprompts(self, answers):
        shown = answers("0", "12", "nope", "1", "", "add login")
        assert ask_commit().message == "feat: add login"
        assert shown.count("Select [1-11]: ") == 4

    def test_blank_name_reprompts(self, answers, capsys):
        shown = answers("1", "", "", "   ", "  add login  ")
        descriptor = ask_commit()
        assert descriptor.name == "add login"
        assert shown.count("Name: ") == 3
        assert "You must enter a value." in capsys.readouterr().out

    def test_lists_every_type_with_description(self, answers, capsys, strip_ansi):
        answers("1", "", "x")
        ask_commit()
        out = strip_ansi(capsys.readouterr().out)
        for commit_type in CommitType:
            assert commit_type.value in out
            assert commit_type.description in out

    @pytest.mark.parametrize("interrupt", [KeyboardInterrupt, EOFError])
    def test_abort_at_type(self, answers, interrupt):
        answers(interrupt)
        with pytest.raises(UserCancelled):
            ask_commit()

    def test_abort_at_name(self, answers):
        answers("1", "scope", KeyboardInterrupt)
        with pytest.raises(UserCancelled):
            ask_commit()
