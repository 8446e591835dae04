from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest

from seo_audit.scanner.directory_scanner import DirectoryScanner, build_scanner
from seo_audit.scanner.exceptions import DirectoryNotFoundError, FileReadError
from seo_audit.scanner.file_loader import FileLoader
from seo_audit.scoring.analyzer import FileAnalyzer
from seo_audit.scoring.models import CriteriaConfig, FileScore


def _make_scanner(
    criteria_config: CriteriaConfig,
) -> tuple[DirectoryScanner, MagicMock, MagicMock]:
    file_loader = MagicMock(spec=FileLoader)
    analyzer = MagicMock(spec=FileAnalyzer)
    analyzer.config = criteria_config
    analyzer.analyze.return_value = FileScore(percentage=50.0, results=())
    scanner = DirectoryScanner(file_loader, analyzer, extensions=["html", "php"])
    return scanner, file_loader, analyzer


class TestDirectoryScannerScan:
    def test_analyzes_each_discovered_file(
        self, tmp_path: Path, criteria_config: CriteriaConfig
    ) -> None:
        scanner, file_loader, analyzer = _make_scanner(criteria_config)
        (tmp_path / "a.html").write_text("a")
        (tmp_path / "b.php").write_text("b")
        file_loader.load.side_effect = [b"<p>a</p>", b"<p>bb</p>"]

        report = scanner.scan(tmp_path)

        assert [f.relative_name for f in report.files] == ["a.html", "b.php"]
        analyzer.analyze.assert_any_call("<p>a</p>", 8)
        analyzer.analyze.assert_any_call("<p>bb</p>", 9)
        assert report.max_score == 100
        assert report.average_percentage == 50.0

    def test_unreadable_file_is_skipped_and_scan_continues(
        self, tmp_path: Path, criteria_config: CriteriaConfig
    ) -> None:
        scanner, file_loader, analyzer = _make_scanner(criteria_config)
        (tmp_path / "a.html").write_text("a")
        (tmp_path / "b.html").write_text("b")
        file_loader.load.side_effect = [FileReadError("permission denied"), b"<p>ok</p>"]

        report = scanner.scan(tmp_path)

        assert len(report.files) == 2
        assert report.files[0].skipped is True
        assert report.files[0].error == "permission denied"
        assert report.files[1].skipped is False
        assert analyzer.analyze.call_count == 1
        assert [f.relative_name for f in report.skipped] == ["a.html"]
        assert [f.relative_name for f in report.analyzed] == ["b.html"]

    def test_logs_warning_for_skipped_file(
        self, tmp_path: Path, criteria_config: CriteriaConfig
    ) -> None:
        scanner, file_loader, _analyzer = _make_scanner(criteria_config)
        (tmp_path / "a.html").write_text("a")
        file_loader.load.side_effect = FileReadError("gone")

        with patch("seo_audit.scanner.directory_scanner.Log") as mock_log:
            scanner.scan(tmp_path)

        mock_log.warning.assert_called_once()
        assert mock_log.warning.call_args.kwargs["file"] == "a.html"
        assert str(mock_log.warning.call_args.kwargs["reason"]) == "gone"

    def test_relative_names_use_forward_slashes(
        self, tmp_path: Path, criteria_config: CriteriaConfig
    ) -> None:
        scanner, file_loader, _analyzer = _make_scanner(criteria_config)
        (tmp_path / "blog").mkdir()
        (tmp_path / "blog" / "post.html").write_text("p")
        file_loader.load.return_value = b"p"

        report = scanner.scan(tmp_path)

        assert report.files[0].relative_name == "blog/post.html"

    def test_empty_directory_produces_empty_report(
        self, tmp_path: Path, criteria_config: CriteriaConfig
    ) -> None:
        scanner, _loader, analyzer = _make_scanner(criteria_config)

        report = scanner.scan(tmp_path)

        assert report.files == []
        assert report.average_percentage == 0.0
        analyzer.analyze.assert_not_called()

    def test_missing_root_propagates(
        self, tmp_path: Path, criteria_config: CriteriaConfig
    ) -> None:
        scanner, _loader, _analyzer = _make_scanner(criteria_config)
        with pytest.raises(DirectoryNotFoundError):
            scanner.scan(tmp_path / "missing")


class TestBuildScanner:
    def test_wires_settings_into_scanner(
        self, tmp_path: Path, criteria_config: CriteriaConfig, compliant_page: str
    ) -> None:
        settings = MagicMock(file_size_limit_kb=100.0, file_extensions=["htm"])
        (tmp_path / "page.htm").write_text(compliant_page, encoding="utf-8")
        (tmp_path / "page.html").write_text(compliant_page, encoding="utf-8")

        report = build_scanner(settings, criteria_config).scan(tmp_path)

        assert [f.relative_name for f in report.files] == ["page.htm"]
        assert report.files[0].score is not None
        assert report.files[0].score.percentage == 100.0
