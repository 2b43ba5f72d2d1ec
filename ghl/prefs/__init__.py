"""Persistent Preferences Package"""

from ghl.prefs.store import PreferenceStore, PreferenceError, PreferenceNotFound

__all__ = [
    "PreferenceStore",
    "PreferenceError",
    "PreferenceNotFound",
]
