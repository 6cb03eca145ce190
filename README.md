# smalletl

Building blocks for small extract-transform-load jobs:

- `smalletl.errors`: one exception hierarchy for ETL failures. Each error reports
  its severity, its category, whether a retry makes sense, a recovery suggestion and a short
  message for end users.
- `smalletl.validation`: checks for configuration values such as URLs, paths, numbers, ranges,
  required fields and file extensions. A failed check raises a configuration error.
- `smalletl.logger`: logging setup. One layout is compact and meant for people; the other
  writes JSON lines for log collectors.
- `smalletl.monitor`: optional CPU and memory statistics for the running process, based on psutil.

## Installation

```
pip install .
```

`pip install ".[test]"` also installs the test dependencies.

## Errors

```python
from smalletl.errors import OperationTimeoutError

try:
    raise OperationTimeoutError(operation="fetch", timeout_seconds=30)
except OperationTimeoutError as err:
    print(err)                        # Network timeout: fetch took longer than 30s
    print(err.severity())             # ErrorSeverity.MEDIUM
    print(err.category())             # ErrorCategory.NETWORK
    print(err.is_retryable())         # True
    print(err.recovery_suggestion())  # Increase timeout values or check network latency
    print(err.user_friendly_message())
```

Every error derives from `EtlError`, so one `except EtlError` clause catches them all.
The errors that wrap a lower-level failure (`ZipError`, `ApiError`, `CsvError`, `IoError`,
`SerializationError`) take that failure as their only argument and keep it as `source`; when
it is an exception it also becomes `__cause__`.

`ErrorSeverity` has the members `LOW`, `MEDIUM`, `HIGH` and `CRITICAL`. `ErrorCategory` has
`CONFIGURATION`, `NETWORK`, `DATA_PROCESSING`, `INFRASTRUCTURE`, `AUTHENTICATION`,
`BUSINESS_LOGIC` and `SYSTEM`. `ApiError`, `OperationTimeoutError`, `RateLimitError`,
`ServiceUnavailableError` and `ResourceExhaustedError` are retryable; no other error is.

## Validation

```python
from smalletl.errors import InvalidConfigValueError
from smalletl.validation import (
    Validate,
    validate_file_extensions,
    validate_positive_number,
    validate_required_field,
    validate_url,
)


class JobConfig(Validate):
    def __init__(self, endpoint, workers, lookups, output=None):
        self.endpoint = endpoint
        self.workers = workers
        self.lookups = lookups
        self.output = output

    def validate(self):
        validate_url("api_endpoint", self.endpoint)
        validate_positive_number("concurrent_requests", self.workers, 1)
        validate_file_extensions("lookup_files", self.lookups, ["csv", "tsv"])
        validate_required_field("output_path", self.output)


try:
    JobConfig("ftp://example.com", 5, ["data.csv"], "out").validate()
except InvalidConfigValueError as err:
    print(err)
    # Invalid configuration value: api_endpoint = 'ftp://example.com' - Unsupported URL scheme: ftp
```

The other checks are `validate_path`, `validate_non_empty_string` and `validate_range`.
Every check except `validate_required_field` raises `InvalidConfigValueError` when it fails.
`validate_required_field` raises `MissingConfigError` when its value is `None` and otherwise
returns the value.

## Logging

```python
from smalletl.logger import init_cli_logger, init_lambda_logger

init_cli_logger(verbose=True)  # compact lines: timestamp, level, message
# or
init_lambda_logger()           # one JSON object per line
```

Both functions install a handler on the root logger and return it. Calling either function
again replaces the handler it installed before. The JSON layout writes objects with the
keys `timestamp`, `level` and `fields`; `fields` holds the `message`.

Levels come from the `SMALLETL_LOG` environment variable. Its value is a comma-separated list
of `target=level` directives. A bare level applies to the root logger. The known levels are
`trace`, `debug`, `info`, `warn`, `warning`, `error` and `off`. If the variable is unset or
invalid, the default is `smalletl=info`, or `smalletl=debug,info` when `verbose` is set.

## Monitoring

```python
from smalletl.monitor import SystemMonitor

monitor = SystemMonitor(enabled=True)
monitor.log_stats("extract")
stats = monitor.get_stats()    # SystemStats, or None when disabled
monitor.log_final_stats()
```

`SystemStats` holds `cpu_usage`, `memory_usage_mb`, `memory_usage_percent`, `peak_memory_mb`
and `elapsed_time`. A monitor that is not enabled returns `None` and logs nothing.

## What this package does not do

This is a library of supporting pieces. It has no command to run and no pipeline engine.
It does not fetch data over HTTP, transform records or write output files or archives.
Programs that do that work can use these errors, checks, logging and monitoring.