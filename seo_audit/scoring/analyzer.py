from collections.abc import Iterable, Mapping

from seo_audit.logging.logger import Log
from seo_audit.scoring.aggregator import ScoreAggregator
from seo_audit.scoring.base import BaseEvaluator, EvaluationContext
from seo_audit.scoring.exceptions import ConfigurationError
from seo_audit.scoring.factory import EvaluatorFactory
from seo_audit.scoring.models import CriteriaConfig, CriterionResult, CriterionSpec, FileScore
from seo_audit.scoring.text_extractor import TextExtractor

FILE_SIZE_KEY = "file_size"


def decode_content(raw_bytes: bytes) -> str:
    """Decode file bytes as UTF-8, replacing undecodable sequences."""
    return raw_bytes.decode("utf-8", errors="replace")


class FileAnalyzer:
    """Scores one document against every configured criterion.

    Pipeline: extract text -> evaluate each criterion -> aggregate ->
    append the informational file size entry.
    """

    def __init__(
        self,
        config: CriteriaConfig,
        file_size_limit_kb: float = 100.0,
        text_extractor: TextExtractor | None = None,
        aggregator: ScoreAggregator | None = None,
    ) -> None:
        self._config = config
        self._file_size_limit_kb = file_size_limit_kb
        self._text_extractor = text_extractor or TextExtractor()
        self._aggregator = aggregator or ScoreAggregator()
        self._evaluators: list[tuple[CriterionSpec, BaseEvaluator]] = [
            (spec, EvaluatorFactory.create(spec.kind)) for spec in config.criteria
        ]

    @property
    def config(self) -> CriteriaConfig:
        return self._config

    def analyze(self, content: str, size_bytes: int) -> FileScore:
        text = self._text_extractor.extract(content)
        context = EvaluationContext(content=content, text=text, keyword=self._config.keyword)
        Log.debug("Extracted text", words=text.word_count, chars=len(content))

        results = [evaluator.evaluate(context, spec) for spec, evaluator in self._evaluators]
        percentage = self._aggregator.aggregate(results, self._config.max_score)
        results.append(self._file_size_result(size_bytes))
        return FileScore(percentage=percentage, results=tuple(results))

    def _file_size_result(self, size_bytes: int) -> CriterionResult:
        size_kb = round(size_bytes / 1024, 2)
        return CriterionResult(
            key=FILE_SIZE_KEY,
            passed=size_kb < self._file_size_limit_kb,
            contribution=0,
            message=f"File size: {size_kb} KB. (Note: High size can lead to slow loading.)",
            display_name="File Size",
            informational=True,
        )


def analyze(
    content: str,
    size_bytes: int,
    criteria: Mapping[str, CriterionSpec] | Iterable[CriterionSpec],
    keyword: str,
) -> FileScore:
    """Score a single document with an ad-hoc criteria set.

    A mapping must be keyed by each criterion's own ``key``.

    Raises:
        ConfigurationError: if a mapping key disagrees with its criterion, or
            the criteria cannot produce a percentage.
    """
    if isinstance(criteria, Mapping):
        for key, spec in criteria.items():
            if key != spec.key:
                raise ConfigurationError(
                    f"Criterion mapped under '{key}' has key '{spec.key}'"
                )
        specs: Iterable[CriterionSpec] = criteria.values()
    else:
        specs = criteria
    config = CriteriaConfig(criteria=tuple(specs), keyword=keyword)
    return FileAnalyzer(config).analyze(content, size_bytes)
