import re
from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from functools import lru_cache
from types import MappingProxyType

from seo_audit.scoring.exceptions import ConfigurationError


class CriterionKind(str, Enum):
    """Evaluation strategy a criterion is scored with."""

    TAG_LENGTH = "tag_length"
    MAX_COUNT_TAG = "max_count_tag"
    MIN_COUNT_TAG = "min_count_tag"
    PRESENCE_TAG = "presence_tag"
    WORD_COUNT = "word_count"
    KEYWORD_DENSITY = "keyword_density"


TAG_KINDS = frozenset(
    {
        CriterionKind.TAG_LENGTH,
        CriterionKind.MAX_COUNT_TAG,
        CriterionKind.MIN_COUNT_TAG,
        CriterionKind.PRESENCE_TAG,
    }
)

_PATTERN_FLAGS = re.IGNORECASE | re.DOTALL


@lru_cache(maxsize=None)
def _compile_pattern(pattern: str) -> re.Pattern[str]:
    return re.compile(pattern, _PATTERN_FLAGS)


@dataclass(frozen=True)
class CriterionSpec:
    """Single weighted SEO check and its kind-specific thresholds."""

    key: str
    weight: float
    kind: CriterionKind
    pattern: str | None = None  # regex source, tag kinds only
    label: str = ""  # used in messages, e.g. "H1"
    min_length: int = 0
    max_length: int = 0
    min_count: int = 0
    max_count: int = 0
    min_words: int = 0
    min_density: float = 0.0
    max_density: float = 0.0

    @property
    def display_name(self) -> str:
        return self.key.replace("_", " ").title()

    @property
    def compiled_pattern(self) -> re.Pattern[str]:
        """Case-insensitive, dot-all pattern of a tag criterion, compiled once.

        Raises:
            ConfigurationError: if the pattern is missing or is not a valid regex.
        """
        if not self.pattern:
            raise ConfigurationError(f"Criterion '{self.key}' requires a pattern")
        try:
            return _compile_pattern(self.pattern)
        except re.error as exc:
            raise ConfigurationError(
                f"Criterion '{self.key}' has an invalid pattern: {exc}"
            ) from exc

    def validate(self) -> None:
        """Check the weight, pattern and thresholds this criterion's kind relies on.

        Raises:
            ConfigurationError: on the first inconsistent setting.
        """
        if self.weight < 0:
            raise ConfigurationError(f"Criterion '{self.key}' has negative weight {self.weight}")
        if self.kind in TAG_KINDS:
            _ = self.compiled_pattern
        if self.kind is CriterionKind.TAG_LENGTH:
            if self.max_length <= 0 or not 0 <= self.min_length <= self.max_length:
                raise ConfigurationError(
                    f"Criterion '{self.key}' needs 0 <= min_length <= max_length "
                    f"and max_length > 0, got {self.min_length}..{self.max_length}"
                )
        elif self.kind is CriterionKind.MAX_COUNT_TAG:
            if self.max_count < 1:
                raise ConfigurationError(
                    f"Criterion '{self.key}' needs max_count >= 1, got {self.max_count}"
                )
        elif self.kind is CriterionKind.MIN_COUNT_TAG:
            if self.min_count < 1:
                raise ConfigurationError(
                    f"Criterion '{self.key}' needs min_count >= 1, got {self.min_count}"
                )
        elif self.kind is CriterionKind.WORD_COUNT:
            if self.min_words < 0:
                raise ConfigurationError(
                    f"Criterion '{self.key}' needs min_words >= 0, got {self.min_words}"
                )
        elif self.kind is CriterionKind.KEYWORD_DENSITY:
            if not 0 <= self.min_density <= self.max_density:
                raise ConfigurationError(
                    f"Criterion '{self.key}' needs 0 <= min_density <= max_density, "
                    f"got {self.min_density}..{self.max_density}"
                )


@dataclass(frozen=True)
class CriteriaConfig:
    """Immutable criteria set and tracked keyword shared by every file of a run.

    Every criterion is validated, and its pattern compiled, at construction,
    so a broken configuration aborts the run before any file is read.
    """

    criteria: tuple[CriterionSpec, ...]
    keyword: str

    def __post_init__(self) -> None:
        if not self.criteria:
            raise ConfigurationError("At least one criterion must be configured")
        seen: set[str] = set()
        for spec in self.criteria:
            if spec.key in seen:
                raise ConfigurationError(f"Duplicate criterion key: {spec.key}")
            spec.validate()
            seen.add(spec.key)
        if self.max_score <= 0:
            raise ConfigurationError(
                f"Maximum score must be positive, got {self.max_score}"
            )
        if not self.keyword.strip():
            raise ConfigurationError("Tracked keyword must be a non-empty string")

    @property
    def max_score(self) -> float:
        return sum(spec.weight for spec in self.criteria)

    @property
    def by_key(self) -> Mapping[str, CriterionSpec]:
        return MappingProxyType({spec.key: spec for spec in self.criteria})


@dataclass(frozen=True)
class ExtractedText:
    """Markup-free text of a document and its word count."""

    plain_text: str
    word_count: int


@dataclass(frozen=True)
class CriterionResult:
    """Outcome of one criterion for one file."""

    key: str
    passed: bool
    contribution: float  # 0 or the criterion's full weight
    message: str
    display_name: str
    informational: bool = False


@dataclass(frozen=True)
class FileScore:
    """Percentage score and ordered per-criterion results for one file."""

    percentage: float
    results: tuple[CriterionResult, ...]

    @property
    def scored_results(self) -> tuple[CriterionResult, ...]:
        return tuple(r for r in self.results if not r.informational)

    def result_for(self, key: str) -> CriterionResult:
        for result in self.results:
            if result.key == key:
                return result
        raise KeyError(key)
