"""Validation helpers for configuration values."""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import PurePath
from typing import Iterable, Sequence, TypeVar
from urllib.parse import urlsplit

from smalletl.errors import InvalidConfigValueError, MissingConfigError

T = TypeVar("T")


class Validate(ABC):
    """Something that can check its own consistency."""

    @abstractmethod
    def validate(self) -> None:
        """Raise an EtlError when the object is not valid."""


def validate_url(field_name: str, url: str) -> None:
    """Require an absolute http or https URL."""
    if not url:
        raise InvalidConfigValueError(field_name, url, "URL cannot be empty")

    try:
        parts = urlsplit(url)
        parts.port  # raises on an invalid port
    except ValueError as exc:
        raise InvalidConfigValueError(
            field_name, url, f"Invalid URL format: {exc}"
        ) from exc

    if not parts.scheme:
        raise InvalidConfigValueError(
            field_name, url, "Invalid URL format: relative URL without a base"
        )
    if parts.scheme not in ("http", "https"):
        raise InvalidConfigValueError(
            field_name, url, f"Unsupported URL scheme: {parts.scheme}"
        )
    if not parts.hostname:
        raise InvalidConfigValueError(field_name, url, "Invalid URL format: empty host")


def validate_path(field_name: str, path: str) -> None:
    """Require a non-empty path without null bytes."""
    if not path:
        raise InvalidConfigValueError(field_name, path, "Path cannot be empty")
    if "\0" in path:
        raise InvalidConfigValueError(field_name, path, "Path contains null bytes")


def validate_positive_number(field_name: str, value: int, min_value: int) -> None:
    """Require value to be at least min_value."""
    if value < min_value:
        raise InvalidConfigValueError(
            field_name, str(value), f"Value must be at least {min_value}"
        )


def _extension(file: str) -> str | None:
    name = PurePath(file).name
    if not name or name == "..":
        return None
    stem, dot, extension = name.rpartition(".")
    if not dot or not stem:
        return None
    return extension


def validate_file_extensions(
    field_name: str, files: Iterable[str], allowed_extensions: Sequence[str]
) -> None:
    """Require every file to have one of the allowed extensions."""
    allowed = set(allowed_extensions)
    for file in files:
        extension = _extension(file)
        if extension is None:
            raise InvalidConfigValueError(
                field_name, file, "File has no extension or invalid filename"
            )
        if extension not in allowed:
            raise InvalidConfigValueError(
                field_name,
                file,
                f"Unsupported file extension: {extension}. "
                f"Allowed extensions: {', '.join(allowed_extensions)}",
            )


def validate_required_field(field_name: str, value: T | None) -> T:
    """Return value, raising MissingConfigError when it is None."""
    if value is None:
        raise MissingConfigError(field_name)
    return value


def validate_non_empty_string(field_name: str, value: str) -> None:
    """Require a string with at least one non-whitespace character."""
    if not value.strip():
        raise InvalidConfigValueError(
            field_name, value, "Value cannot be empty or whitespace-only"
        )


def validate_range(field_name: str, value, minimum, maximum) -> None:
    """Require minimum <= value <= maximum."""
    if value < minimum or value > maximum:
        raise InvalidConfigValueError(
            field_name, str(value), f"Value must be between {minimum} and {maximum}"
        )