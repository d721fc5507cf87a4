#!/usr/bin/env python3
"""
Recipe Book Errors
Exception hierarchy shared by the recipe, collection and settings modules.
"""

from typing import Any, Dict, Optional


class RecipeError(Exception):
    """Base exception for recipe book errors."""

    def __init__(self, message: str, error_code: Optional[str] = None,
                 details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}


class InvalidArgument(RecipeError, ValueError):
    """Malformed constructor or mutator input."""

    def __init__(self, message: str, field: Optional[str] = None, value: Any = None, **kwargs):
        details = kwargs.pop('details', None) or {}
        if field is not None:
            details.setdefault('field', field)
            details.setdefault('value', value)
        super().__init__(message, details=details, **kwargs)
        self.field = field
        self.value = value


class ConfigurationError(RecipeError):
    """Settings file or environment value could not be used."""

    def __init__(self, message: str, source: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.source = source
