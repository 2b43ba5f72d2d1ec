"""Interactive Prompts - Blocking terminal questions that return a value or abort."""

import os
import shlex
import shutil
import subprocess
import sys
import tempfile
from typing import Callable, Optional, Sequence

from ghl.output import bold, dim, error, info

Validator = Callable[[str], Optional[str]]


class UserCancelled(Exception):
    """Raised when the user aborts a prompt (Ctrl-C, Ctrl-D)."""
    pass


class OperationCancelled(UserCancelled):
    """Raised when the user explicitly declines a confirmation."""
    pass


class PromptError(Exception):
    """Raised when a prompt cannot be shown, e.g. the editor fails to start."""
    pass


def not_empty(value: str) -> str | None:
    """Validator for required fields."""
    if not value.strip():
        return "You must enter a value."
    return None


def _read(message: str) -> str:
    """Single input() call with aborts mapped to UserCancelled."""
    try:
        return input(f"{bold(message)} ")
    except (KeyboardInterrupt, EOFError):
        print()
        raise UserCancelled(f"Prompt aborted: {message}")


def ask_text(message: str, validator: Validator | None = None) -> str:
    """Ask for a line of text, re-prompting until the validator accepts it."""
    while True:
        value = _read(message)
        problem = validator(value) if validator else None
        if problem is None:
            return value
        print(error(f"  {problem}"))


def ask_optional_text(message: str) -> str | None:
    """Ask for a line of text the user may skip with Enter."""
    value = _read(message).strip()
    return value or None


def ask_select(message: str, options: Sequence[str]) -> int:
    """Show a numbered list and return the index of the chosen option.

    Accepts either the option number or the first word of the option
    (e.g. "fix" for "fix         A bug fix").
    """
    print(bold(message))
    for i, option in enumerate(options, 1):
        print(f"  {info(f'{i:>2}.')} {option}")

    keywords = [option.split()[0].lower() if option.split() else '' for option in options]
    while True:
        choice = _read(f"Select [1-{len(options)}]:").strip().lower()
        if choice.isascii() and choice.isdigit() and 1 <= int(choice) <= len(options):
            return int(choice) - 1
        if choice and choice in keywords:
            return keywords.index(choice)
        print(dim(f"  Enter 1-{len(options)} or a type name"))


def ask_confirm(message: str) -> bool:
    """Ask a yes/no question. There is no default answer."""
    while True:
        answer = _read(message).strip().lower()
        if answer in ('y', 'yes'):
            return True
        if answer in ('n', 'no'):
            return False
        print(dim("  Type y or n"))


def ask_editor(message: str, predefined: str = "", editor: str | None = None) -> str | None:
    """Open text in the user's editor. Returns edited text, or None if left empty.

    Raises:
        PromptError: if the editor cannot be started or exits with an error
    """
    editor = editor or os.environ.get('VISUAL') or os.environ.get('EDITOR')
    if not editor:
        editor = 'notepad' if sys.platform == 'win32' else 'vim'

    print(f"{bold(message)} {dim(f'(opening {editor})')}")
    tmp = tempfile.NamedTemporaryFile(mode='w', suffix='.md', delete=False, encoding='utf-8')
    try:
        tmp.write(predefined)
        tmp.close()
        subprocess.run([*_editor_command(editor), tmp.name], check=True)
        with open(tmp.name, 'r', encoding='utf-8') as f:
            edited = f.read()
        return edited if edited.strip() else None
    except KeyboardInterrupt:
        raise UserCancelled(f"Prompt aborted: {message}")
    except subprocess.CalledProcessError as e:
        raise PromptError(f"Editor '{editor}' exited with status {e.returncode}")
    except OSError as e:
        raise PromptError(f"Could not run editor '{editor}': {e.strerror or e}")
    finally:
        try:
            os.unlink(tmp.name)
        except OSError as e:
            print(f"Warning: Could not delete temp file {tmp.name}: {e}", file=sys.stderr)


def _editor_command(editor: str) -> list[str]:
    """An existing executable path is used as-is, even with spaces in it."""
    if shutil.which(editor):
        return [editor]
    return shlex.split(editor, posix=sys.platform != 'win32')
