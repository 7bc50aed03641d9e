"""
Core Exceptions
================

Custom exceptions for the application following clean architecture principles.

These exceptions define domain-specific errors that can be caught and handled
appropriately at the application boundaries.
"""

from typing import Optional


class ApplicationException(Exception):
    """Base exception for all application errors."""

    def __init__(self, message: str, details: Optional[dict] = None):
        self.message = message
        self.details = details or {}
        super().__init__(message)


class ValidationException(ApplicationException):
    """Exception for input that parses but cannot be processed."""


class ConfigurationException(ApplicationException):
    """Exception for configuration errors."""

    def __init__(
        self,
        message: str,
        path: Optional[str] = None,
        details: Optional[dict] = None
    ):
        self.path = path
        if path:
            message = f"{message} ({path})"
        super().__init__(message, details)
