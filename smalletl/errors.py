"""Error hierarchy for ETL runs, with severity, category and recovery hints."""

from __future__ import annotations

from enum import Enum
from typing import ClassVar


class ErrorSeverity(Enum):
    """How serious an error is for the running process."""

    LOW = "low"  # warning level, process can continue
    MEDIUM = "medium"  # error level, process should retry
    HIGH = "high"  # critical error, process should fail
    CRITICAL = "critical"  # system-level error, immediate attention required


class ErrorCategory(Enum):
    """The area of the system an error comes from."""

    CONFIGURATION = "configuration"
    NETWORK = "network"
    DATA_PROCESSING = "data_processing"
    INFRASTRUCTURE = "infrastructure"
    AUTHENTICATION = "authentication"
    BUSINESS_LOGIC = "business_logic"
    SYSTEM = "system"


class EtlError(Exception):
    """Base class of every error raised by an ETL run."""

    _severity: ClassVar[ErrorSeverity] = ErrorSeverity.MEDIUM
    _category: ClassVar[ErrorCategory] = ErrorCategory.DATA_PROCESSING
    _retryable: ClassVar[bool] = False
    _suggestion: ClassVar[str] = "Check logs for detailed error information"

    def severity(self) -> ErrorSeverity:
        """Return how serious this error is."""
        return self._severity

    def category(self) -> ErrorCategory:
        """Return the area this error belongs to."""
        return self._category

    def is_retryable(self) -> bool:
        """Return whether repeating the operation may succeed."""
        return self._retryable

    def recovery_suggestion(self) -> str:
        """Return a short hint on how to recover."""
        return self._suggestion

    def user_friendly_message(self) -> str:
        """Return a message suitable for end users."""
        return "處理過程中發生錯誤"


class _WrappedError(EtlError):
    """An error that wraps a lower-level failure."""

    _prefix: ClassVar[str] = ""

    def __init__(self, source: object) -> None:
        self.source = source
        super().__init__(f"{self._prefix}: {source}")
        if isinstance(source, BaseException):
            self.__cause__ = source


# Infrastructure errors


class ZipError(_WrappedError):
    _prefix = "Zip operation failed"
    _category = ErrorCategory.INFRASTRUCTURE


class ApiError(_WrappedError):
    _prefix = "API request failed"
    _category = ErrorCategory.NETWORK
    _retryable = True
    _suggestion = "Check network connectivity and API service status"

    def user_friendly_message(self) -> str:
        return "API請求失敗，請檢查網路連線"


class CsvError(_WrappedError):
    _prefix = "CSV processing error"


class IoError(_WrappedError):
    _prefix = "IO error"
    _severity = ErrorSeverity.CRITICAL
    _category = ErrorCategory.INFRASTRUCTURE


class SerializationError(_WrappedError):
    _prefix = "Serialization error"


# Configuration errors


class ConfigValidationError(EtlError):
    _severity = ErrorSeverity.HIGH
    _category = ErrorCategory.CONFIGURATION
    _suggestion = "Check configuration values and restart"

    def __init__(self, field: str, message: str) -> None:
        self.field = field
        self.message = message
        super().__init__(f"Configuration validation failed: {field} - {message}")

    def user_friendly_message(self) -> str:
        return f"配置參數 '{self.field}' 驗證失敗"


class MissingConfigError(EtlError):
    _severity = ErrorSeverity.HIGH
    _category = ErrorCategory.CONFIGURATION
    _suggestion = "Set required configuration and restart"

    def __init__(self, field: str) -> None:
        self.field = field
        super().__init__(f"Missing required configuration: {field}")

    def user_friendly_message(self) -> str:
        return f"缺少必要配置參數 '{self.field}'"


class InvalidConfigValueError(EtlError):
    _severity = ErrorSeverity.HIGH
    _category = ErrorCategory.CONFIGURATION
    _suggestion = "Fix configuration value and restart"

    def __init__(self, field: str, value: str, reason: str) -> None:
        self.field = field
        self.value = value
        self.reason = reason
        super().__init__(
            f"Invalid configuration value: {field} = '{value}' - {reason}"
        )


class ConfigError(EtlError):
    _category = ErrorCategory.CONFIGURATION

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(f"Configuration error: {message}")


# Data processing errors


class DataValidationError(EtlError):
    _severity = ErrorSeverity.HIGH
    _suggestion = "Check input data format and quality"

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(f"Data validation failed: {message}")

    def user_friendly_message(self) -> str:
        return "數據驗證失敗，請檢查輸入數據格式"


class ProcessingError(EtlError):
    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(f"Data processing error: {message}")


class TransformationError(EtlError):
    _severity = ErrorSeverity.HIGH
    _suggestion = "Review data transformation logic"

    def __init__(self, stage: str, details: str) -> None:
        self.stage = stage
        self.details = details
        super().__init__(f"Data transformation failed: {stage} - {details}")


# Network and connectivity errors


class OperationTimeoutError(EtlError):
    _category = ErrorCategory.NETWORK
    _retryable = True
    _suggestion = "Increase timeout values or check network latency"

    def __init__(self, operation: str, timeout_seconds: int) -> None:
        self.operation = operation
        self.timeout_seconds = timeout_seconds
        super().__init__(
            f"Network timeout: {operation} took longer than {timeout_seconds}s"
        )

    def user_friendly_message(self) -> str:
        return f"操作 '{self.operation}' 逾時"


class RateLimitError(EtlError):
    _category = ErrorCategory.NETWORK
    _retryable = True
    _suggestion = "Reduce request rate or implement backoff"

    def __init__(self, api: str, retry_after_seconds: int) -> None:
        self.api = api
        self.retry_after_seconds = retry_after_seconds
        super().__init__(
            f"Rate limit exceeded: {api} - retry after {retry_after_seconds}s"
        )


class AuthenticationError(EtlError):
    _severity = ErrorSeverity.HIGH
    _category = ErrorCategory.AUTHENTICATION
    _suggestion = "Check API credentials and permissions"

    def __init__(self, details: str) -> None:
        self.details = details
        super().__init__(f"Authentication failed: {details}")

    def user_friendly_message(self) -> str:
        return "認證失敗，請檢查API憑證"


# Business logic errors


class InsufficientDataError(EtlError):
    _severity = ErrorSeverity.LOW
    _category = ErrorCategory.BUSINESS_LOGIC
    _suggestion = "Check data source availability"

    def __init__(self, expected: int, actual: int) -> None:
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"Insufficient data: expected at least {expected} records, got {actual}"
        )


class DataQualityError(EtlError):
    _severity = ErrorSeverity.LOW
    _category = ErrorCategory.BUSINESS_LOGIC
    _suggestion = "Review data quality rules and input data"

    def __init__(self, check: str, message: str) -> None:
        self.check = check
        self.message = message
        super().__init__(f"Data quality check failed: {check} - {message}")


# System errors


class ResourceExhaustedError(EtlError):
    _severity = ErrorSeverity.CRITICAL
    _category = ErrorCategory.SYSTEM
    _retryable = True
    _suggestion = "Increase system resources or reduce load"

    def __init__(self, resource: str, details: str) -> None:
        self.resource = resource
        self.details = details
        super().__init__(f"Resource exhausted: {resource} - {details}")


class ServiceUnavailableError(EtlError):
    _category = ErrorCategory.NETWORK
    _retryable = True
    _suggestion = "Wait for service to become available"

    def __init__(self, service: str) -> None:
        self.service = service
        super().__init__(f"External service unavailable: {service}")


class ValidationError(EtlError):
    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(f"Validation error: {message}")


# Pipeline execution errors


class PipelineExecutionError(EtlError):
    _severity = ErrorSeverity.HIGH
    _suggestion = "Check pipeline configuration and data dependencies"

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(f"Pipeline execution failed: {message}")

    def user_friendly_message(self) -> str:
        return f"Pipeline執行失敗: {self.message}"