from abc import ABC, abstractmethod
from dataclasses import dataclass

from seo_audit.scoring.models import CriterionResult, CriterionSpec, ExtractedText


@dataclass(frozen=True, slots=True)
class EvaluationContext:
    """Per-file inputs shared by every evaluator."""

    content: str
    text: ExtractedText
    keyword: str


class BaseEvaluator(ABC):
    """Contract for all criterion evaluation strategies."""

    @abstractmethod
    def evaluate(self, context: EvaluationContext, spec: CriterionSpec) -> CriterionResult:
        """Score one criterion against a single document.

        Args:
            context: Raw content, extracted text and tracked keyword.
            spec: The criterion being checked, with its thresholds.

        Returns:
            CriterionResult whose contribution is 0 or the full weight.
            A failing criterion is a normal result and never raises.
        """

    def _passed(self, spec: CriterionSpec, message: str) -> CriterionResult:
        return CriterionResult(
            key=spec.key,
            passed=True,
            contribution=spec.weight,
            message=message,
            display_name=spec.display_name,
        )

    def _failed(self, spec: CriterionSpec, message: str) -> CriterionResult:
        return CriterionResult(
            key=spec.key,
            passed=False,
            contribution=0,
            message=message,
            display_name=spec.display_name,
        )
