import logging
from datetime import datetime
from pathlib import Path
from typing import Optional

PACKAGE_LOGGER = 'htmlelements'


class LogManager:
    """Configures console and optional file logging for the htmlelements logger

    Handlers are attached to the package logger, not the root logger, so the
    host application's logging setup is left untouched.
    """

    def __init__(self, log_dir: Optional[str] = None, log_level: str = "INFO"):
        self.log_dir = Path(log_dir) if log_dir else None
        if self.log_dir:
            self.log_dir.mkdir(parents=True, exist_ok=True)

        self.setup_logging(log_level)

    @property
    def logger(self) -> logging.Logger:
        return logging.getLogger(PACKAGE_LOGGER)

    def setup_logging(self, log_level: str):
        """Set up logging with a console handler and, with a log_dir, file handlers"""
        # Create formatters
        detailed_formatter = logging.Formatter(
            '%(asctime)s - %(name)s - %(levelname)s - %(funcName)s:%(lineno)d - %(message)s'
        )
        simple_formatter = logging.Formatter(
            '%(asctime)s - %(levelname)s - %(message)s'
        )

        package_logger = self.logger
        package_logger.setLevel(getattr(logging, log_level.upper()))

        # Close and drop handlers from an earlier setup
        for handler in list(package_logger.handlers):
            package_logger.removeHandler(handler)
            handler.close()

        # Console handler (simple format)
        console_handler = logging.StreamHandler()
        console_handler.setLevel(logging.INFO)
        console_handler.setFormatter(simple_formatter)
        package_logger.addHandler(console_handler)

        if self.log_dir is None:
            return

        # File handler for all logs (detailed format)
        all_logs_file = self.log_dir / f"htmlelements_{datetime.now().strftime('%Y%m%d')}.log"
        file_handler = logging.FileHandler(all_logs_file)
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(detailed_formatter)
        package_logger.addHandler(file_handler)

        # Error file handler
        error_file = self.log_dir / f"errors_{datetime.now().strftime('%Y%m%d')}.log"
        error_handler = logging.FileHandler(error_file)
        error_handler.setLevel(logging.WARNING)
        error_handler.setFormatter(detailed_formatter)
        package_logger.addHandler(error_handler)

    def shutdown(self):
        """Close and detach every handler this manager installed"""
        for handler in list(self.logger.handlers):
            self.logger.removeHandler(handler)
            handler.close()
