"""Unit tests for settings, logging helpers and exceptions."""

import logging

import pytest
from pydantic import ValidationError as PydanticValidationError

from psychoscore.api.middleware.logging_middleware import LoggingMiddleware
from psychoscore.core.config import Settings
from psychoscore.utils.exceptions import PsychoScoreError, ValidationError, handle_exception_chain
from psychoscore.utils.logger import PerformanceLogger, get_component_logger, log_api_response


class TestSettings:
    """Test suite for Settings."""

    def test_production_overrides(self):
        settings = Settings(APP_ENV="production", APP_DEBUG=True, LOG_LEVEL="DEBUG", LOG_FORMAT="text")

        assert settings.is_production()
        assert settings.APP_DEBUG is False
        assert settings.LOG_FORMAT == "json"
        assert settings.LOG_LEVEL == "INFO"

    @pytest.mark.parametrize("prefix,expected", [
        ("api/v1/", "/api/v1"),
        ("/api/v2", "/api/v2"),
        ("/", ""),
    ])
    def test_api_prefix_is_normalized(self, prefix, expected):
        assert Settings(API_V1_PREFIX=prefix).API_V1_PREFIX == expected

    def test_invalid_environment_is_rejected(self):
        with pytest.raises(PydanticValidationError):
            Settings(APP_ENV="moon")


class TestLogging:
    """Tests for logging helpers."""

    def test_unknown_component_is_rejected(self):
        with pytest.raises(ValueError, match="Unknown component"):
            get_component_logger("billing")

    def test_error_responses_log_as_warnings(self, caplog):
        logger = get_component_logger("api")

        with caplog.at_level(logging.INFO, logger="psychoscore.api"):
            log_api_response("POST", "/api/v1/analysis", 422, 3.2, logger=logger)
            log_api_response("GET", "/api/v1/health", 200, 0.4, logger=logger)

        levels = [record.levelno for record in caplog.records if record.name == "psychoscore.api"]
        assert levels == [logging.WARNING, logging.INFO]
        assert caplog.records[0].status_code == 422

    def test_candidate_identity_is_masked_in_logged_bodies(self):
        middleware = LoggingMiddleware(app=None, log_request_body=True)
        body = {
            "responseSet": {
                "candidate": {"name": "Jordan Lee", "email": "jordan.lee@example.com"},
                "answers": [{"questionId": 1, "answer": "4"}],
            }
        }

        masked = middleware._mask_sensitive_data(body)

        assert masked["responseSet"]["candidate"] == {"name": "***MASKED***", "email": "***MASKED***"}
        assert masked["responseSet"]["answers"] == [{"questionId": 1, "answer": "4"}]

    def test_performance_logger_records_duration(self):
        with PerformanceLogger("unit_operation", get_component_logger("engine")) as perf:
            pass

        assert perf.duration_ms is not None
        assert perf.duration_ms >= 0


class TestExceptions:
    """Tests for the exception hierarchy."""

    def test_validation_error_details(self):
        error = ValidationError("Bad input", field="answers", validation_errors=["answers: empty"])

        assert error.to_dict()["details"] == {"field": "answers", "validation_errors": ["answers: empty"]}
        assert isinstance(error, PsychoScoreError)

    def test_exception_chain_is_flattened(self):
        root = KeyError("missing")
        error = PsychoScoreError("Wrapped", error_code="INTERNAL_ERROR", cause=root)

        chain = handle_exception_chain(error)

        assert [entry["type"] for entry in chain] == ["PsychoScoreError", "KeyError"]
        assert chain[0]["error_code"] == "INTERNAL_ERROR"
