import logging
import sys

LOGGER_NAME = "seo_audit"


def _with_context(message: str, context: dict[str, object]) -> str:
    """Append context as ``key=value`` pairs in call order."""
    if not context:
        return message
    pairs = " ".join(f"{key}={value}" for key, value in context.items())
    return f"{message} {pairs}"


class Log:
    """Audit-run logging; keyword arguments become ``key=value`` context.

    ``Log.info("Scored file", file="blog/a.html", score=85.0)`` is written as
    ``Scored file file=blog/a.html score=85.0``. The same pairs are attached
    to the record under ``context`` for handlers that want them separately.
    """

    _logger: logging.Logger = logging.getLogger(LOGGER_NAME)

    @classmethod
    def configure(cls, log_level: str) -> None:
        """Set the level and attach a single stdout handler."""
        cls._logger.setLevel(log_level.upper())
        if not cls._logger.handlers:
            handler = logging.StreamHandler(sys.stdout)
            handler.setFormatter(
                logging.Formatter("%(asctime)s [%(levelname)s] %(message)s")
            )
            cls._logger.addHandler(handler)

    @classmethod
    def _log(cls, level: int, message: str, context: dict[str, object]) -> None:
        if cls._logger.isEnabledFor(level):
            cls._logger.log(
                level, _with_context(message, context), extra={"context": context}
            )

    @classmethod
    def info(cls, message: str, **context: object) -> None:
        cls._log(logging.INFO, message, context)

    @classmethod
    def error(cls, message: str, **context: object) -> None:
        cls._log(logging.ERROR, message, context)

    @classmethod
    def warning(cls, message: str, **context: object) -> None:
        cls._log(logging.WARNING, message, context)

    @classmethod
    def debug(cls, message: str, **context: object) -> None:
        cls._log(logging.DEBUG, message, context)
