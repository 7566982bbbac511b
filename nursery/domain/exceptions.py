"""Centralized exception hierarchy for the nursery simulation.

All domain and service exceptions inherit from :class:`NurseryError` so that
callers can catch a single base class when they need a broad safety net, yet
still match on specific subclasses where narrower handling is appropriate.

Public service operations report missing entities and rejected status changes
through ``None``/``False`` return values. These exceptions are raised from
command ``execute()``/``undo()`` bodies and configuration loading, where the
invoker or the caller is expected to catch and log them.

Hierarchy
---------
::

    NurseryError (base)
    ├── ValidationError          (bad input from caller)
    ├── NotFoundError            (entity does not exist)
    ├── CommandError             (a queued command could not complete)
    └── ConfigurationError       (missing / invalid config)
"""

from __future__ import annotations


class NurseryError(Exception):
    """Base exception for all nursery simulation errors.

    Parameters
    ----------
    message:
        Human-readable description.
    detail:
        Optional machine-readable context dict attached to the error for
        structured logging.
    """

    def __init__(self, message: str = "", *, detail: dict | None = None) -> None:
        super().__init__(message)
        self.detail = detail or {}


class ValidationError(NurseryError):
    """Caller supplied invalid or incomplete input."""


class NotFoundError(NurseryError):
    """Requested entity does not exist."""


class CommandError(NurseryError):
    """A queued command failed while executing or undoing."""


class ConfigurationError(NurseryError):
    """Missing or invalid application configuration."""
