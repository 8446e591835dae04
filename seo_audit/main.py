from seo_audit.config.settings import Settings
from seo_audit.logging.logger import Log
from seo_audit.report.glossary import build_glossary
from seo_audit.report.html_renderer import HtmlReportRenderer
from seo_audit.scanner.directory_scanner import build_scanner
from seo_audit.scoring.criteria import build_criteria_config


def main() -> None:
    """Entry point: settings -> criteria -> scan -> render -> write report."""
    settings = Settings()
    Log.configure(settings.log_level)

    config = build_criteria_config(settings)
    scanner = build_scanner(settings, config)
    report = scanner.scan(settings.target_directory)

    renderer = HtmlReportRenderer(build_glossary(config.keyword))
    settings.report_path.write_text(renderer.render(report), encoding="utf-8")
    Log.info("Report written", path=settings.report_path)


if __name__ == "__main__":
    main()
