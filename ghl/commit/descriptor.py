"""Commit Descriptor - Ask for a conventional commit type, scope and name."""

from dataclasses import dataclass
from enum import Enum

from ghl import COMMIT_TYPES
from ghl.prompts import ask_optional_text, ask_select, ask_text, not_empty


class CommitType(str, Enum):
    """Conventional commit kinds, in the order they are offered."""
    FEAT = 'feat'
    FIX = 'fix'
    DOCS = 'docs'
    STYLE = 'style'
    REFACTOR = 'refactor'
    PERF = 'perf'
    TEST = 'test'
    BUILD = 'build'
    CI = 'ci'
    CHORE = 'chore'
    REVERT = 'revert'

    @property
    def description(self) -> str:
        return COMMIT_TYPES[self.value]

    def __str__(self) -> str:
        return self.value


def build_commit_message(commit_type: CommitType, name: str, scope: str | None = None) -> str:
    """Format a conventional commit subject: type(scope): name, or type: name."""
    scope = scope.strip() if scope else ''
    if scope:
        return f"{commit_type.value}({scope}): {name}"
    return f"{commit_type.value}: {name}"


@dataclass(frozen=True)
class CommitDescriptor:
    """What the user picked for one commit."""
    type: CommitType
    name: str
    scope: str | None = None

    def __post_init__(self):
        name = self.name.strip()
        if not name:
            raise ValueError("Commit name must not be empty")
        scope = self.scope.strip() if self.scope else None
        # frozen dataclass: normalize through object.__setattr__
        object.__setattr__(self, 'name', name)
        object.__setattr__(self, 'scope', scope or None)

    @property
    def message(self) -> str:
        return build_commit_message(self.type, self.name, self.scope)


def _type_options() -> list[str]:
    return [f"{t.value:<12}{t.description}" for t in CommitType]


def ask_commit() -> CommitDescriptor:
    """Prompt for type, optional scope and name.

    Raises:
        UserCancelled: if any prompt is aborted
    """
    index = ask_select("Type:", _type_options())
    commit_type = list(CommitType)[index]

    scope = ask_optional_text("Scope (optional):")
    name = ask_text("Name:", validator=not_empty).strip()

    return CommitDescriptor(type=commit_type, name=name, scope=scope)
