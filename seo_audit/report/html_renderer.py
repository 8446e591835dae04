from html import escape

from seo_audit.scanner.models import FileReport, ScanReport
from seo_audit.scoring.models import CriterionResult

_STYLE = """
body { font-family: Arial, sans-serif; margin: 20px; background-color: #f4f4f9; }
.container { max-width: 1000px; margin: auto; background: white; padding: 20px; border-radius: 8px; box-shadow: 0 0 10px rgba(0, 0, 0, 0.1); }
h1, h2 { color: #333; border-bottom: 2px solid #ccc; padding-bottom: 10px; margin-top: 30px; }
.file-report { margin-top: 20px; padding: 15px; border: 1px solid #ddd; border-radius: 5px; background-color: #f9f9f9; }
.file-title { color: white; padding: 10px; border-radius: 5px; cursor: pointer; display: flex; justify-content: space-between; align-items: center; }
.score { font-weight: bold; font-size: 1.2em; }
.details { margin-top: 10px; padding: 10px; border-top: 1px solid #eee; display: none; }
.detail-item { margin-bottom: 5px; padding: 5px; border-left: 3px solid; }
.success { border-left-color: #28a745; background-color: #d4edda; color: #155724; }
.fail { border-left-color: #dc3545; background-color: #f8d7da; color: #721c24; }
.info { border-left-color: #ffc107; background-color: #fff3cd; color: #856404; }
.toggle-btn::after { content: ' \\25BC'; }
.file-title[aria-expanded="true"] .toggle-btn::after { content: ' \\25B2'; }
.glossary-item { margin-bottom: 15px; padding: 10px; border: 1px solid #eee; border-radius: 4px; }
.glossary-item strong { color: #007bff; }
"""

_SCRIPT = """
function toggleDetails(id, header) {
    var details = document.getElementById(id);
    var expanded = header.getAttribute('aria-expanded') === 'true';
    details.style.display = expanded ? 'none' : 'block';
    header.setAttribute('aria-expanded', expanded ? 'false' : 'true');
}
"""

GOOD_COLOR = "#28a745"
FAIR_COLOR = "#ffc107"
POOR_COLOR = "#dc3545"


def score_color(percentage: float) -> str:
    if percentage > 75:
        return GOOD_COLOR
    if percentage > 50:
        return FAIR_COLOR
    return POOR_COLOR


class HtmlReportRenderer:
    """Renders a ScanReport as a standalone HTML page."""

    def __init__(self, glossary: dict[str, str]) -> None:
        self._glossary = glossary

    def render(self, report: ScanReport) -> str:
        parts = [
            "<!DOCTYPE html>",
            '<html lang="en">',
            "<head>",
            '<meta charset="UTF-8">',
            "<title>Directory SEO Analysis Report</title>",
            f"<style>{_STYLE}</style>",
            "</head>",
            "<body>",
            '<div class="container">',
            "<h1>Directory SEO Analysis Report</h1>",
            f"<p>Scanned directory: <code>{escape(str(report.root))}</code>. "
            f"Maximum score: <strong>{report.max_score:g}</strong>.</p>",
            "<h2>Analysis Results</h2>",
        ]
        if not report.files:
            parts.append("<p>No matching files were found in the scanned directory.</p>")
        else:
            parts.append(
                f"<p>{len(report.analyzed)} file(s) analyzed, {len(report.skipped)} skipped. "
                f"Average score: <strong>{report.average_percentage}%</strong>.</p>"
            )
        for index, file_report in enumerate(report.files):
            parts.append(self._render_file(index, file_report))
        parts.append(self._render_glossary())
        parts.extend(["</div>", f"<script>{_SCRIPT}</script>", "</body>", "</html>"])
        return "\n".join(parts)

    def _render_file(self, index: int, file_report: FileReport) -> str:
        name = escape(file_report.relative_name)
        if file_report.score is None:
            return (
                '<div class="file-report">'
                f'<div class="detail-item fail"><strong>File: {name}</strong> '
                f"skipped: {escape(file_report.error)}</div>"
                "</div>"
            )
        details_id = f"details-{index}"
        percentage = file_report.score.percentage
        items = "".join(self._render_result(r) for r in file_report.score.results)
        return (
            '<div class="file-report">'
            f"<div class=\"file-title\" onclick=\"toggleDetails('{details_id}', this)\" "
            f'aria-expanded="false" style="background-color: {score_color(percentage)}">'
            f"<span>File: {name}</span>"
            f'<span class="score">Score: {percentage}% <span class="toggle-btn"></span></span>'
            "</div>"
            f'<div class="details" id="{details_id}">{items}</div>'
            "</div>"
        )

    def _render_result(self, result: CriterionResult) -> str:
        if result.informational:
            css_class = "info"
            score_text = ""
        else:
            css_class = "success" if result.passed else "fail"
            score_text = f" (+{result.contribution:g} Score)"
        return (
            f'<div class="detail-item {css_class}">'
            f"<strong>{escape(result.display_name)}</strong>{score_text}: "
            f"{escape(result.message)}</div>"
        )

    def _render_glossary(self) -> str:
        items = "".join(
            '<div class="glossary-item">'
            f"<strong>{escape(key.replace('_', ' ').title())}:</strong> {escape(text)}"
            "</div>"
            for key, text in self._glossary.items()
        )
        return (
            "<h2>SEO Criteria Glossary</h2>"
            "<p>The criteria used to determine each page's SEO compliance.</p>"
            f"{items}"
        )
