from typing import ClassVar

from seo_audit.scoring.base import BaseEvaluator
from seo_audit.scoring.evaluators import (
    KeywordDensityEvaluator,
    MaxCountTagEvaluator,
    MinCountTagEvaluator,
    PresenceTagEvaluator,
    TagLengthEvaluator,
    WordCountEvaluator,
)
from seo_audit.scoring.exceptions import ConfigurationError
from seo_audit.scoring.models import CriterionKind


class EvaluatorFactory:
    """Creates the evaluation strategy for a criterion kind."""

    EVALUATORS: ClassVar[dict[CriterionKind, type[BaseEvaluator]]] = {
        CriterionKind.TAG_LENGTH: TagLengthEvaluator,
        CriterionKind.MAX_COUNT_TAG: MaxCountTagEvaluator,
        CriterionKind.MIN_COUNT_TAG: MinCountTagEvaluator,
        CriterionKind.PRESENCE_TAG: PresenceTagEvaluator,
        CriterionKind.WORD_COUNT: WordCountEvaluator,
        CriterionKind.KEYWORD_DENSITY: KeywordDensityEvaluator,
    }

    @classmethod
    def create(cls, kind: CriterionKind | str) -> BaseEvaluator:
        try:
            evaluator_cls = cls.EVALUATORS[CriterionKind(kind)]
        except (KeyError, ValueError) as exc:
            raise ConfigurationError(
                f"Unknown criterion kind '{kind}'. "
                f"Choose from: {[k.value for k in cls.EVALUATORS]}"
            ) from exc
        return evaluator_cls()
