"""Preference Store - Token and default PR description under ~/.ghl."""

from pathlib import Path

from ghl import APP_DIR_NAME


class PreferenceError(Exception):
    """Raised when a preference file cannot be created, read or written."""

    def __init__(self, message: str, path: Path | None = None):
        super().__init__(message)
        self.path = path


class PreferenceNotFound(PreferenceError):
    """Raised when a preference was never written."""
    pass


class PreferenceStore:
    """
    Two single-value preferences stored as plain UTF-8 files.

    Every write replaces the whole file (last write wins). The directory and
    files are created on first write. There is no locking: ghl sessions are
    expected to run one at a time.
    """

    TOKEN_FILENAME = "token"
    DESCRIPTION_FILENAME = "desc.md"

    def __init__(self, base_dir: Path | None = None):
        self.base_dir = Path(base_dir) if base_dir else Path.home() / APP_DIR_NAME

    @property
    def token_path(self) -> Path:
        return self.base_dir / self.TOKEN_FILENAME

    @property
    def description_path(self) -> Path:
        return self.base_dir / self.DESCRIPTION_FILENAME

    def set_token(self, value: str | None) -> bool:
        """Store the access token. Returns False if there was nothing to write."""
        if value is None or not value.strip():
            return False
        self._write(self.token_path, value.strip())
        return True

    def get_token(self) -> str:
        return self._read(self.token_path, "GitHub token")

    def set_default_description(self, value: str | None) -> bool:
        """
        Store the default PR description.

        Returns False without writing when the value is empty or identical
        to the stored description, so callers can tell "no change" apart
        from a write.
        """
        if value is None or not value.strip():
            return False
        if value == self.default_description_or_empty():
            return False
        self._write(self.description_path, value)
        return True

    def get_default_description(self) -> str:
        return self._read(self.description_path, "Default description")

    def default_description_or_empty(self) -> str:
        try:
            return self.get_default_description()
        except PreferenceNotFound:
            return ""

    def _write(self, path: Path, content: str) -> None:
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.touch(exist_ok=True)
            path.write_text(content, encoding='utf-8')
        except OSError as e:
            raise PreferenceError(f"Could not write {path}: {e.strerror or e}", path=path) from e

    def _read(self, path: Path, label: str) -> str:
        try:
            content = path.read_text(encoding='utf-8')
        except FileNotFoundError as e:
            raise PreferenceNotFound(f"{label} is not set ({path} does not exist)", path=path) from e
        except OSError as e:
            raise PreferenceError(f"Could not read {path}: {e.strerror or e}", path=path) from e
        # An empty file is what an interrupted first write leaves behind
        if not content:
            raise PreferenceNotFound(f"{label} is not set ({path} is empty)", path=path)
        return content
