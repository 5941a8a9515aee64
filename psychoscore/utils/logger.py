"""Logging configuration for PsychoScore.

This module provides structured logging with different handlers for development,
test and production environments. Production output is JSON so that it can be
shipped to a log aggregator as-is.
"""

import logging
import logging.handlers
import sys
import time
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, Optional

from pythonjsonlogger import jsonlogger


class PsychoScoreFormatter(jsonlogger.JsonFormatter):
    """JSON formatter for PsychoScore application logs."""

    def add_fields(self, log_record: Dict[str, Any], record: logging.LogRecord, message_dict: Dict[str, Any]) -> None:
        """Add standard fields to the log record.

        Args:
            log_record: The log record dictionary to modify
            record: The original logging record
            message_dict: Additional message data
        """
        super().add_fields(log_record, record, message_dict)

        log_record['timestamp'] = datetime.now(timezone.utc).isoformat().replace('+00:00', 'Z')
        log_record['level'] = record.levelname
        log_record['logger'] = record.name
        log_record['module'] = record.module
        log_record['function'] = record.funcName
        log_record['line'] = record.lineno
        log_record['application'] = 'psychoscore'

        if record.exc_info:
            log_record['exception'] = self.formatException(record.exc_info)


class ContextFilter(logging.Filter):
    """Filter that stamps fixed context onto every record."""

    def __init__(self, context: Optional[Dict[str, Any]] = None):
        super().__init__()
        self.context = context or {}

    def filter(self, record: logging.LogRecord) -> bool:
        for key, value in self.context.items():
            setattr(record, key, value)
        return True


class RequestContextFilter(logging.Filter):
    """Filter that adds the current request id, when one is bound."""

    def filter(self, record: logging.LogRecord) -> bool:
        # Imported lazily: the engine can log without the API package loaded.
        from psychoscore.api.middleware.request_id import get_request_id

        request_id = get_request_id()
        if request_id and not hasattr(record, 'request_id'):
            record.request_id = request_id
        return True


class LoggerConfig:
    """Logger configuration manager."""

    COMPONENTS = {
        'api': 'psychoscore.api',
        'engine': 'psychoscore.engine',
        'validation': 'psychoscore.validation',
    }

    def __init__(
        self,
        environment: str = 'development',
        log_level: str = 'INFO',
        log_to_file: bool = False,
        log_dir: str = 'logs',
        log_format: str = 'text',
    ):
        """Initialize logger configuration.

        Args:
            environment: Environment name (development, production, test)
            log_level: Default log level
            log_to_file: Whether to add rotating file handlers
            log_dir: Directory for log files when file logging is enabled
            log_format: Console format outside tests, 'json' or 'text'
        """
        self.environment = environment
        self.log_format = log_format
        self.log_level = getattr(logging, log_level.upper())
        self.log_to_file = log_to_file
        self.log_dir = Path(log_dir)
        if self.log_to_file:
            self.log_dir.mkdir(parents=True, exist_ok=True)

        self._configure_root_logger()
        self._configure_component_loggers()

    def _configure_root_logger(self) -> None:
        root_logger = logging.getLogger()
        root_logger.setLevel(self.log_level)
        root_logger.handlers.clear()

        if self.environment == 'test':
            self._add_test_handlers(root_logger)
        elif self.environment == 'production' or self.log_format == 'json':
            self._add_production_handlers(root_logger)
        else:
            self._add_development_handlers(root_logger)

    def _add_production_handlers(self, logger: logging.Logger) -> None:
        """Add JSON console output and, optionally, rotating files.

        Args:
            logger: Logger to configure
        """
        json_formatter = PsychoScoreFormatter(
            fmt='%(timestamp)s %(level)s %(logger)s %(message)s'
        )

        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setLevel(logging.INFO)
        console_handler.setFormatter(json_formatter)
        console_handler.addFilter(RequestContextFilter())
        logger.addHandler(console_handler)

        if not self.log_to_file:
            return

        error_handler = logging.handlers.RotatingFileHandler(
            filename=self.log_dir / "error.log",
            maxBytes=10 * 1024 * 1024,  # 10MB
            backupCount=5,
            encoding='utf-8'
        )
        error_handler.setLevel(logging.ERROR)
        error_handler.setFormatter(json_formatter)
        error_handler.addFilter(RequestContextFilter())
        logger.addHandler(error_handler)

        app_handler = logging.handlers.RotatingFileHandler(
            filename=self.log_dir / "application.log",
            maxBytes=50 * 1024 * 1024,  # 50MB
            backupCount=10,
            encoding='utf-8'
        )
        app_handler.setLevel(logging.INFO)
        app_handler.setFormatter(json_formatter)
        app_handler.addFilter(RequestContextFilter())
        logger.addHandler(app_handler)

    def _add_development_handlers(self, logger: logging.Logger) -> None:
        """Add human-readable console output and an optional debug file.

        Args:
            logger: Logger to configure
        """
        dev_formatter = logging.Formatter(
            fmt='%(asctime)s | %(levelname)-8s | %(name)-28s | %(funcName)-15s:%(lineno)-3d | %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        )

        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setLevel(logging.DEBUG)
        console_handler.setFormatter(dev_formatter)
        logger.addHandler(console_handler)

        if self.log_to_file:
            debug_handler = logging.FileHandler(
                filename=self.log_dir / "debug.log",
                mode='a',
                encoding='utf-8'
            )
            debug_handler.setLevel(logging.DEBUG)
            debug_handler.setFormatter(dev_formatter)
            logger.addHandler(debug_handler)

    def _add_test_handlers(self, logger: logging.Logger) -> None:
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setLevel(logging.WARNING)  # Only warnings and errors during tests
        console_handler.setFormatter(logging.Formatter(
            fmt='TEST | %(levelname)s | %(name)s | %(message)s'
        ))
        logger.addHandler(console_handler)

    def _configure_component_loggers(self) -> None:
        for component, logger_name in self.COMPONENTS.items():
            logger = logging.getLogger(logger_name)
            logger.setLevel(self.log_level)
            logger.filters = [f for f in logger.filters if not isinstance(f, ContextFilter)]
            logger.addFilter(ContextFilter({'component': component}))

    def get_logger(self, name: str) -> logging.Logger:
        return logging.getLogger(name)

    def get_component_logger(self, component: str) -> logging.Logger:
        """Get a component-specific logger.

        Args:
            component: Component name (api, engine, validation)

        Returns:
            logging.Logger: Component logger

        Raises:
            ValueError: If component is not recognized
        """
        if component not in self.COMPONENTS:
            raise ValueError(f"Unknown component: {component}. Available: {list(self.COMPONENTS.keys())}")

        return logging.getLogger(self.COMPONENTS[component])


# Global logger configuration instance
_logger_config: Optional[LoggerConfig] = None


def setup_logging(
    environment: str = 'development',
    log_level: str = 'INFO',
    log_to_file: bool = False,
    log_dir: str = 'logs',
    log_format: str = 'text',
) -> LoggerConfig:
    """Setup application logging.

    Args:
        environment: Environment name
        log_level: Log level
        log_to_file: Whether to write rotating log files
        log_dir: Directory for log files
        log_format: Console format, 'json' or 'text'

    Returns:
        LoggerConfig: Configured logger instance
    """
    global _logger_config
    _logger_config = LoggerConfig(environment, log_level, log_to_file, log_dir, log_format)
    return _logger_config


def get_logger(name: str = __name__) -> logging.Logger:
    """Get a logger instance, configuring defaults on first use.

    Args:
        name: Logger name, defaults to caller's module name

    Returns:
        logging.Logger: Logger instance
    """
    if _logger_config is None:
        setup_logging()

    return _logger_config.get_logger(name)


def get_component_logger(component: str) -> logging.Logger:
    if _logger_config is None:
        setup_logging()

    return _logger_config.get_component_logger(component)


def get_api_logger() -> logging.Logger:
    """Get API component logger."""
    return get_component_logger('api')


def get_engine_logger() -> logging.Logger:
    """Get scoring engine component logger."""
    return get_component_logger('engine')


def get_validation_logger() -> logging.Logger:
    """Get input validation component logger."""
    return get_component_logger('validation')


def log_api_response(method: str, path: str, status_code: int, duration_ms: float, logger: Optional[logging.Logger] = None) -> None:
    """Log API response.

    Args:
        method: HTTP method
        path: Request path
        status_code: HTTP status code
        duration_ms: Request duration in milliseconds
        logger: Logger instance
    """
    if logger is None:
        logger = get_api_logger()

    level = logging.WARNING if status_code >= 400 else logging.INFO

    logger.log(level, f"{method} {path} - {status_code}", extra={
        'http_method': method,
        'request_path': path,
        'status_code': status_code,
        'duration_ms': duration_ms,
        'event_type': 'api_response'
    })


class PerformanceLogger:
    """Context manager for performance logging."""

    def __init__(self, operation: str, logger: Optional[logging.Logger] = None, extra: Optional[Dict[str, Any]] = None):
        """Initialize performance logger.

        Args:
            operation: Operation name
            logger: Logger instance
            extra: Additional fields to log
        """
        self.operation = operation
        self.logger = logger or get_logger()
        self.extra = extra or {}
        self.start_time: Optional[float] = None
        self.duration_ms: Optional[float] = None

    def __enter__(self) -> 'PerformanceLogger':
        self.start_time = time.perf_counter()
        self.logger.debug(f"Starting {self.operation}", extra={
            'operation': self.operation,
            'event_type': 'performance_start',
            **self.extra
        })
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        if self.start_time is None:
            return

        self.duration_ms = (time.perf_counter() - self.start_time) * 1000
        level = logging.WARNING if self.duration_ms > 1000 else logging.DEBUG

        self.logger.log(level, f"Completed {self.operation}", extra={
            'operation': self.operation,
            'duration_ms': self.duration_ms,
            'event_type': 'performance_end',
            'success': exc_type is None,
            **self.extra
        })
