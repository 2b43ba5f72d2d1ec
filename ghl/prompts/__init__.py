"""Interactive Prompts Package"""

from ghl.prompts.inputs import (
    UserCancelled,
    OperationCancelled,
    PromptError,
    not_empty,
    ask_text,
    ask_optional_text,
    ask_select,
    ask_confirm,
    ask_editor,
)

__all__ = [
    "UserCancelled",
    "OperationCancelled",
    "PromptError",
    "not_empty",
    "ask_text",
    "ask_optional_text",
    "ask_select",
    "ask_confirm",
    "ask_editor",
]
