from seo_audit.scoring.analyzer import FileAnalyzer, analyze, decode_content
from seo_audit.scoring.criteria import build_criteria_config, default_criteria
from seo_audit.scoring.exceptions import ConfigurationError, ScoringError
from seo_audit.scoring.models import (
    CriteriaConfig,
    CriterionKind,
    CriterionResult,
    CriterionSpec,
    ExtractedText,
    FileScore,
)

__all__ = [
    "ConfigurationError",
    "CriteriaConfig",
    "CriterionKind",
    "CriterionResult",
    "CriterionSpec",
    "ExtractedText",
    "FileAnalyzer",
    "FileScore",
    "ScoringError",
    "analyze",
    "build_criteria_config",
    "decode_content",
    "default_criteria",
]
