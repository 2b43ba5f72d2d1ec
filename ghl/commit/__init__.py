"""Commit Descriptor Package"""

from ghl.commit.descriptor import CommitType, CommitDescriptor, build_commit_message, ask_commit

__all__ = [
    "CommitType",
    "CommitDescriptor",
    "build_commit_message",
    "ask_commit",
]
