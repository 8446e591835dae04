from dataclasses import dataclass, field
from pathlib import Path

from seo_audit.scoring.models import FileScore


@dataclass(frozen=True)
class FileReport:
    """Outcome of scanning one file: a score, or the reason it was skipped."""

    path: Path
    relative_name: str
    score: FileScore | None = None
    error: str = ""

    @property
    def skipped(self) -> bool:
        return self.score is None


@dataclass
class ScanReport:
    """Accumulates file reports as the scanner walks the directory tree."""

    root: Path
    max_score: float
    files: list[FileReport] = field(default_factory=list)

    @property
    def analyzed(self) -> list[FileReport]:
        return [f for f in self.files if not f.skipped]

    @property
    def skipped(self) -> list[FileReport]:
        return [f for f in self.files if f.skipped]

    @property
    def average_percentage(self) -> float:
        analyzed = self.analyzed
        if not analyzed:
            return 0.0
        return round(sum(f.score.percentage for f in analyzed if f.score) / len(analyzed), 2)
