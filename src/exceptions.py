"""
Custom exceptions for kelly-calc
"""

from typing import Optional


class KellyError(Exception):
    """Base exception for kelly-calc"""
    pass


class ValidationError(KellyError):
    """Error related to input validation"""

    def __init__(self, reason, message: Optional[str] = None):
        self.reason = reason
        super().__init__(message or getattr(reason, "value", str(reason)))


class ParseError(ValidationError):
    """Input text could not be read as a number"""
    pass


class DomainError(ValidationError):
    """Input number is outside the field's valid range"""
    pass


class ConfigurationError(KellyError):
    """Error related to configuration"""
    pass
