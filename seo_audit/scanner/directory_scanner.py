from collections.abc import Iterable
from pathlib import Path

from seo_audit.config.settings import Settings
from seo_audit.logging.logger import Log
from seo_audit.scanner.exceptions import FileReadError
from seo_audit.scanner.file_loader import FileLoader, discover_files
from seo_audit.scanner.models import FileReport, ScanReport
from seo_audit.scoring.analyzer import FileAnalyzer, decode_content
from seo_audit.scoring.models import CriteriaConfig


class DirectoryScanner:
    """Scores every matching file under a root, one file at a time.

    An unreadable file is recorded as skipped and the scan continues.
    """

    def __init__(
        self,
        file_loader: FileLoader,
        analyzer: FileAnalyzer,
        extensions: Iterable[str],
    ) -> None:
        self._file_loader = file_loader
        self._analyzer = analyzer
        self._extensions = tuple(extensions)

    def scan(self, root: Path) -> ScanReport:
        """Discover and analyze all files under root.

        Raises:
            DirectoryNotFoundError: if root is not an existing directory.
        """
        paths = discover_files(root, self._extensions)
        Log.info(
            "Scanning directory",
            root=root,
            files=len(paths),
            extensions=",".join(self._extensions),
        )
        report = ScanReport(root=root, max_score=self._analyzer.config.max_score)
        for path in paths:
            report.files.append(self._scan_file(root, path))
        Log.info(
            "Scan finished",
            analyzed=len(report.analyzed),
            skipped=len(report.skipped),
            average=report.average_percentage,
        )
        return report

    def _scan_file(self, root: Path, path: Path) -> FileReport:
        relative_name = path.relative_to(root).as_posix()
        try:
            raw_bytes = self._file_loader.load(path)
        except FileReadError as exc:
            Log.warning("Skipping unreadable file", file=relative_name, reason=exc)
            return FileReport(path=path, relative_name=relative_name, error=str(exc))

        score = self._analyzer.analyze(decode_content(raw_bytes), len(raw_bytes))
        Log.info("Scored file", file=relative_name, score=score.percentage)
        for result in score.results:
            Log.debug(
                result.message,
                file=relative_name,
                criterion=result.key,
                passed=result.passed,
                points=result.contribution,
            )
        return FileReport(path=path, relative_name=relative_name, score=score)


def build_scanner(settings: Settings, config: CriteriaConfig) -> DirectoryScanner:
    """Build a DirectoryScanner with all required collaborators."""
    analyzer = FileAnalyzer(config, file_size_limit_kb=settings.file_size_limit_kb)
    return DirectoryScanner(
        file_loader=FileLoader(),
        analyzer=analyzer,
        extensions=settings.file_extensions,
    )
