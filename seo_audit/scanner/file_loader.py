from collections.abc import Iterable
from pathlib import Path

from seo_audit.scanner.exceptions import DirectoryNotFoundError, FileReadError


def discover_files(root: Path, extensions: Iterable[str]) -> list[Path]:
    """Recursively list files under root whose extension is in the allow-list.

    Raises:
        DirectoryNotFoundError: if root is not an existing directory.
    """
    if not root.is_dir():
        raise DirectoryNotFoundError(f"Scan directory not found: {root}")
    allowed = {ext.lower().lstrip(".") for ext in extensions}
    return sorted(
        path
        for path in root.rglob("*")
        if path.is_file() and path.suffix.lower().lstrip(".") in allowed
    )


class FileLoader:
    """Reads a document's bytes from disk."""

    def load(self, path: Path) -> bytes:
        """Read the whole file.

        Raises:
            FileReadError: if the file is missing, unreadable or access is denied.
        """
        try:
            return path.read_bytes()
        except OSError as exc:
            raise FileReadError(f"Failed to read {path}: {exc}") from exc
