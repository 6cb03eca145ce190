"""Logging set-up for the command line and for serverless runs."""

from __future__ import annotations

import json
import logging
import os
from datetime import datetime, timezone

PACKAGE_LOGGER = "smalletl"
ENV_VAR = "SMALLETL_LOG"
OFF = logging.CRITICAL + 10
TRACE = logging.DEBUG - 5

_LEVELS = {
    "trace": TRACE,
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warn": logging.WARNING,
    "warning": logging.WARNING,
    "error": logging.ERROR,
    "off": OFF,
}

_LEVEL_NAMES = {
    TRACE: "TRACE",
    logging.DEBUG: "DEBUG",
    logging.INFO: "INFO",
    logging.WARNING: "WARN",
    logging.ERROR: "ERROR",
    logging.CRITICAL: "ERROR",
}


class _EtlHandler(logging.StreamHandler):
    """Stream handler installed by this module; replaced on re-initialisation."""


def _timestamp(record: logging.LogRecord) -> str:
    moment = datetime.fromtimestamp(record.created, tz=timezone.utc)
    return moment.isoformat(timespec="microseconds").replace("+00:00", "Z")


def _level_name(record: logging.LogRecord) -> str:
    return _LEVEL_NAMES.get(record.levelno, record.levelname)


class _CompactFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        line = f"{_timestamp(record)} {_level_name(record):>5} {record.getMessage()}"
        if record.exc_info:
            line = f"{line}\n{self.formatException(record.exc_info)}"
        return line


class _JsonFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        fields = {"message": record.getMessage()}
        if record.exc_info:
            fields["exception"] = self.formatException(record.exc_info)
        payload = {
            "timestamp": _timestamp(record),
            "level": _level_name(record),
            "fields": fields,
        }
        return json.dumps(payload, ensure_ascii=False)


def _parse_directives(spec: str) -> dict[str, int]:
    """Parse 'target=level,level' directives; the empty key is the root logger."""
    levels: dict[str, int] = {}
    for part in spec.split(","):
        part = part.strip()
        if not part:
            continue
        target, sep, level = part.rpartition("=")
        if not sep:
            if part.lower() in _LEVELS:
                levels[""] = _LEVELS[part.lower()]
            else:
                levels[part] = TRACE
            continue
        target = target.strip()
        level = level.strip().lower()
        if not target or level not in _LEVELS:
            raise ValueError(f"invalid log directive: {part!r}")
        levels[target] = _LEVELS[level]
    return levels


def _resolve(default: str) -> dict[str, int]:
    spec = os.environ.get(ENV_VAR)
    if spec:
        try:
            return _parse_directives(spec)
        except ValueError:
            pass
    return _parse_directives(default)


def _install(formatter: logging.Formatter, default: str) -> logging.Handler:
    levels = _resolve(default)
    root = logging.getLogger()
    for existing in list(root.handlers):
        if isinstance(existing, _EtlHandler):
            root.removeHandler(existing)
    handler = _EtlHandler()
    handler.setFormatter(formatter)
    root.addHandler(handler)
    root.setLevel(levels.pop("", OFF))
    for target, level in levels.items():
        logging.getLogger(target).setLevel(level)
    return handler


def init_cli_logger(verbose: bool) -> logging.Handler:
    """Install a compact console logger; verbose enables debug output."""
    default = f"{PACKAGE_LOGGER}=debug,info" if verbose else f"{PACKAGE_LOGGER}=info"
    return _install(_CompactFormatter(), default)


def init_lambda_logger() -> logging.Handler:
    """Install a JSON-lines logger suited to log aggregation services."""
    return _install(_JsonFormatter(), f"{PACKAGE_LOGGER}=info")