from collections.abc import Iterable

from seo_audit.scoring.exceptions import ConfigurationError
from seo_audit.scoring.models import CriterionResult


class ScoreAggregator:
    """Reduces criterion contributions to a percentage of the maximum score."""

    def aggregate(self, results: Iterable[CriterionResult], max_score: float) -> float:
        if max_score <= 0:
            raise ConfigurationError(f"Maximum score must be positive, got {max_score}")
        total = sum(r.contribution for r in results if not r.informational)
        return round(total / max_score * 100, 2)
