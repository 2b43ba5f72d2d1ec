"""
ghl

Conventional branches, commits and pull requests from the command line.
"""

__version__ = "1.0.0"

# Centralized commit types - single source of truth, in the order they are offered.
# Used by: commit/descriptor.py (CommitType descriptions)
COMMIT_TYPES = {
    'feat': 'A new feature',
    'fix': 'A bug fix',
    'docs': 'Documentation only changes',
    'style': 'Changes that do not affect the meaning of the code',
    'refactor': 'A code change that neither fixes a bug nor adds a feature',
    'perf': 'A code change that improves performance',
    'test': 'Adding missing tests or correcting existing tests',
    'build': 'Changes that affect the build system or external dependencies',
    'ci': 'Changes to our CI configuration files and scripts',
    'chore': "Other changes that don't modify src or test files",
    'revert': 'Reverts a previous commit',
}

COMMIT_TYPE_NAMES = list(COMMIT_TYPES.keys())

# Per-user preference directory, relative to the home directory
APP_DIR_NAME = ".ghl"
