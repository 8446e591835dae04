from pathlib import Path
from unittest.mock import patch

import pytest

from seo_audit.scanner.exceptions import DirectoryNotFoundError, FileReadError
from seo_audit.scanner.file_loader import FileLoader, discover_files


def _touch(path: Path, content: bytes = b"<p>x</p>") -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(content)
    return path


class TestDiscoverFiles:
    def test_finds_allowed_extensions_recursively(self, tmp_path: Path) -> None:
        index = _touch(tmp_path / "index.html")
        about = _touch(tmp_path / "pages" / "deep" / "about.php")
        _touch(tmp_path / "style.css")
        _touch(tmp_path / "readme.txt")

        result = discover_files(tmp_path, ["html", "php"])

        assert result == sorted([index, about])

    def test_extension_match_is_case_insensitive(self, tmp_path: Path) -> None:
        upper = _touch(tmp_path / "INDEX.HTML")
        assert discover_files(tmp_path, ["html"]) == [upper]

    def test_accepts_dotted_extensions(self, tmp_path: Path) -> None:
        page = _touch(tmp_path / "page.html")
        assert discover_files(tmp_path, [".HTML"]) == [page]

    def test_ignores_directories_named_like_files(self, tmp_path: Path) -> None:
        (tmp_path / "folder.html").mkdir()
        assert discover_files(tmp_path, ["html"]) == []

    def test_empty_directory(self, tmp_path: Path) -> None:
        assert discover_files(tmp_path, ["html"]) == []

    def test_missing_root_raises(self, tmp_path: Path) -> None:
        with pytest.raises(DirectoryNotFoundError, match="not found"):
            discover_files(tmp_path / "nope", ["html"])

    def test_file_as_root_raises(self, tmp_path: Path) -> None:
        page = _touch(tmp_path / "index.html")
        with pytest.raises(DirectoryNotFoundError):
            discover_files(page, ["html"])


class TestFileLoaderLoad:
    def test_returns_bytes(self, tmp_path: Path) -> None:
        page = _touch(tmp_path / "index.html", b"<title>Hello</title>")
        assert FileLoader().load(page) == b"<title>Hello</title>"

    def test_missing_file_raises_file_read_error(self, tmp_path: Path) -> None:
        with pytest.raises(FileReadError, match="missing.html"):
            FileLoader().load(tmp_path / "missing.html")

    def test_permission_error_raises_file_read_error(self, tmp_path: Path) -> None:
        page = _touch(tmp_path / "locked.html")
        with patch.object(Path, "read_bytes", side_effect=PermissionError("denied")):
            with pytest.raises(FileReadError, match="denied") as exc_info:
                FileLoader().load(page)
        assert isinstance(exc_info.value.__cause__, PermissionError)
