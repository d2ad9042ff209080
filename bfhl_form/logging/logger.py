import logging
import sys

_FORMAT = "%(asctime)s [%(levelname)s] %(message)s"
_UVICORN_LOGGERS = ("uvicorn", "uvicorn.error", "uvicorn.access")


class Log:
    """Centralized logging for the form app.

    Messages about a single browser session carry a short session tag so the
    interleaved output of concurrent sessions can be told apart.
    """

    _logger: logging.Logger = logging.getLogger("bfhl_form")

    @classmethod
    def configure(cls, log_level: str) -> None:
        """Configure the app logger and align uvicorn's loggers with it."""
        level = log_level.upper()
        cls._logger.setLevel(level)
        if not cls._logger.handlers:
            handler = logging.StreamHandler(sys.stdout)
            handler.setFormatter(logging.Formatter(_FORMAT))
            cls._logger.addHandler(handler)
        for name in _UVICORN_LOGGERS:
            logging.getLogger(name).setLevel(level)

    @staticmethod
    def _tag(message: str, session: str | None) -> str:
        if not session:
            return message
        return f"[session {session[:8]}] {message}"

    @classmethod
    def info(cls, message: str, session: str | None = None) -> None:
        """Log an info message, tagged with the session when given."""
        cls._logger.info(cls._tag(message, session))

    @classmethod
    def error(cls, message: str, session: str | None = None) -> None:
        """Log an error message, tagged with the session when given."""
        cls._logger.error(cls._tag(message, session))

    @classmethod
    def warning(cls, message: str, session: str | None = None) -> None:
        """Log a warning message, tagged with the session when given."""
        cls._logger.warning(cls._tag(message, session))

    @classmethod
    def debug(cls, message: str, session: str | None = None) -> None:
        """Log a debug message, tagged with the session when given."""
        cls._logger.debug(cls._tag(message, session))
