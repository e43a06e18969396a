# Console formatting for the dashboard's loggers.
import logging


class LevelColorFormatter(logging.Formatter):
    """
    Colours each record according to its level.

    Attributes:
        FORMATS (dict): log level to format string.
    """
    grey = "\x1b[37;20m"
    yellow = "\x1b[33;20m"
    red = "\x1b[31;20m"
    bold_red = "\x1b[31;1m"
    dark_grey = "\x1b[30;1m"
    reset = "\x1b[0m"
    fmt = "[%(levelname)s] %(asctime)s %(name)s - %(message)s"

    FORMATS = {
        logging.DEBUG: dark_grey + fmt + reset,
        logging.INFO: grey + fmt + reset,
        logging.WARNING: yellow + fmt + reset,
        logging.ERROR: red + fmt + reset,
        logging.CRITICAL: bold_red + fmt + reset,
    }

    def format(self, record):
        formatter = logging.Formatter(self.FORMATS.get(record.levelno, self.fmt))
        return formatter.format(record)


def configure_logging(app):
    """
    Route the Flask app logger and the ``dashboard`` package loggers
    through one coloured console handler at ``LOG_LEVEL``.
    """
    level = logging.getLevelName(str(app.config.get("LOG_LEVEL", "INFO")).upper())
    if not isinstance(level, int):
        level = logging.INFO

    handler = logging.StreamHandler()
    handler.setFormatter(LevelColorFormatter())
    handler.setLevel(level)

    package_logger = logging.getLogger("dashboard")
    package_logger.setLevel(level)
    if not any(isinstance(h.formatter, LevelColorFormatter) for h in package_logger.handlers):
        package_logger.addHandler(handler)

    app.logger.setLevel(level)
    return package_logger
