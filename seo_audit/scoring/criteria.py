from seo_audit.config.settings import Settings
from seo_audit.scoring.models import CriteriaConfig, CriterionKind, CriterionSpec

TITLE_PATTERN = r"<title>(.*?)</title>"
META_DESCRIPTION_PATTERN = (
    r"<meta.*?name=[\"']description[\"'].*?content=[\"'](.*?)[\"'].*?/?>"
)
H1_PATTERN = r"<h1[^>]*>(.*?)</h1>"
IMAGE_ALT_PATTERN = r"<img[^>]*alt=[\"'][^\"']+[\"'][^>]*>"
CANONICAL_PATTERN = r"<link.*?rel=[\"']canonical[\"'].*?/?>"
VIEWPORT_PATTERN = (
    r"<meta.*?name=[\"']viewport[\"'].*?"
    r"content=[\"']width=device-width, initial-scale=1.*?/?>"
)


def default_criteria() -> tuple[CriterionSpec, ...]:
    """The eight standard checks, in report order. Weights sum to 100."""
    return (
        CriterionSpec(
            key="title_tag",
            weight=15,
            kind=CriterionKind.TAG_LENGTH,
            pattern=TITLE_PATTERN,
            label="title",
            min_length=10,
            max_length=65,
        ),
        CriterionSpec(
            key="meta_description",
            weight=15,
            kind=CriterionKind.TAG_LENGTH,
            pattern=META_DESCRIPTION_PATTERN,
            label="meta description",
            min_length=50,
            max_length=160,
        ),
        CriterionSpec(
            key="h1_tag",
            weight=10,
            kind=CriterionKind.MAX_COUNT_TAG,
            pattern=H1_PATTERN,
            label="H1",
            max_count=1,
        ),
        CriterionSpec(
            key="image_alt_attribute",
            weight=10,
            kind=CriterionKind.MIN_COUNT_TAG,
            pattern=IMAGE_ALT_PATTERN,
            label="images with an alt attribute",
            min_count=1,
        ),
        CriterionSpec(
            key="canonical_link",
            weight=10,
            kind=CriterionKind.PRESENCE_TAG,
            pattern=CANONICAL_PATTERN,
            label="canonical link",
        ),
        CriterionSpec(
            key="mobile_viewport",
            weight=10,
            kind=CriterionKind.PRESENCE_TAG,
            pattern=VIEWPORT_PATTERN,
            label="viewport meta tag",
        ),
        CriterionSpec(
            key="min_word_count",
            weight=15,
            kind=CriterionKind.WORD_COUNT,
            min_words=300,
        ),
        CriterionSpec(
            key="keyword_density",
            weight=15,
            kind=CriterionKind.KEYWORD_DENSITY,
            min_density=0.5,
            max_density=2.0,
        ),
    )


def build_criteria_config(settings: Settings) -> CriteriaConfig:
    """Build the run's criteria configuration from application settings.

    Raises:
        ConfigurationError: if the resulting configuration cannot score files.
    """
    return CriteriaConfig(criteria=default_criteria(), keyword=settings.keyword)
