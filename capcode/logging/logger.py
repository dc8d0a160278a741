import logging
import sys


class Log:
    """Process-wide logging facade for the capcode service.

    Every line carries the deployment environment so logs from several
    environments can share one sink.
    """

    _logger: logging.Logger = logging.getLogger("capcode")

    @classmethod
    def configure(cls, log_level: str, app_env: str = "dev") -> None:
        """Set the level and attach a stdout handler once."""
        cls._logger.setLevel(log_level.upper())
        if not cls._logger.handlers:
            env_tag = app_env.replace("%", "%%")
            handler = logging.StreamHandler(sys.stdout)
            handler.setFormatter(
                logging.Formatter(
                    f"%(asctime)s [%(levelname)s] [{env_tag}] %(message)s"
                )
            )
            cls._logger.addHandler(handler)

    @classmethod
    def info(cls, message: str, **kwargs: object) -> None:
        """Log an info message."""
        cls._logger.info(message, extra=kwargs)

    @classmethod
    def warning(cls, message: str, **kwargs: object) -> None:
        """Log a warning message."""
        cls._logger.warning(message, extra=kwargs)

    @classmethod
    def error(
        cls,
        message: str,
        exc: BaseException | None = None,
        **kwargs: object,
    ) -> None:
        """Log an error; pass *exc* to attach its traceback."""
        exc_info = (type(exc), exc, exc.__traceback__) if exc is not None else None
        cls._logger.error(message, exc_info=exc_info, extra=kwargs)

    @classmethod
    def debug(cls, message: str, **kwargs: object) -> None:
        """Log a debug message."""
        cls._logger.debug(message, extra=kwargs)
