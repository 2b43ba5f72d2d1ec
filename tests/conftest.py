"""Shared fixtures: scripted answers for input() prompts."""

import re

import pytest

ANSI_RE = re.compile(r'\033\[[0-9;]*m')


@pytest.fixture
def answers(monkeypatch):
    """Return a function that scripts the answers input() will give, in order.

    An exception class or instance in the list is raised instead of answered,
    e.g. KeyboardInterrupt to simulate Ctrl-C. The returned list records every
    prompt text that was shown.
    """
    shown = []

    def _script(*replies):
        queue = list(replies)

        def _input(prompt=''):
            shown.append(ANSI_RE.sub('', prompt))
            if not queue:
                raise AssertionError(f"Unexpected prompt: {prompt!r}")
            reply = queue.pop(0)
            if isinstance(reply, BaseException) or (isinstance(reply, type) and issubclass(reply, BaseException)):
                raise reply
            return reply

        monkeypatch.setattr('builtins.input', _input)
        return shown

    return _script


@pytest.fixture
def strip_ansi():
    """Return a function that removes ANSI escape codes."""
    def _strip(text: str) -> str:
        return ANSI_RE.sub('', text)
    return _strip
