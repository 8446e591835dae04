import pytest

from seo_audit.scoring.models import CriteriaConfig
from seo_audit.scoring.criteria import default_criteria

COMPLIANT_TITLE = "SEO Basics Guide for Beginners"
COMPLIANT_DESCRIPTION = (
    "A practical introduction to search engine optimization for small websites."
)


def build_page(
    title: str | None = COMPLIANT_TITLE,
    description: str | None = COMPLIANT_DESCRIPTION,
    headings: tuple[str, ...] = ("Getting Started",),
    image_alt: str | None = "Diagram",
    canonical: bool = True,
    viewport: bool = True,
    body: str = " ".join(["lorem"] * 300) + " seo seo",
) -> str:
    """Assemble an HTML page; by default it passes every standard criterion."""
    head = ['<meta charset="UTF-8">']
    if title is not None:
        head.append(f"<title>{title}</title>")
    if description is not None:
        head.append(f'<meta name="description" content="{description}">')
    if canonical:
        head.append('<link rel="canonical" href="https://example.com/guide">')
    if viewport:
        head.append('<meta name="viewport" content="width=device-width, initial-scale=1">')
    parts = [f"<h1>{h}</h1>" for h in headings]
    if image_alt is not None:
        parts.append(f'<img src="diagram.png" alt="{image_alt}">')
    parts.append(f"<p>{body}</p>")
    return (
        "<!DOCTYPE html><html><head>"
        + "".join(head)
        + "</head><body>"
        + "".join(parts)
        + "</body></html>"
    )


@pytest.fixture()
def criteria_config() -> CriteriaConfig:
    return CriteriaConfig(criteria=default_criteria(), keyword="seo")


@pytest.fixture()
def compliant_page() -> str:
    """A page that satisfies all eight default criteria (309 words, 3 x 'seo')."""
    return build_page()


@pytest.fixture()
def page_builder():  # type: ignore[no-untyped-def]
    """Expose build_page so tests can vary one element of a compliant page."""
    return build_page
