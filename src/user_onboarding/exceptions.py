"""Custom exceptions for application."""

import logging


class CoreException(Exception):
    """Base exception that logs errors."""

    log_level = logging.ERROR

    def __init__(self, message: str):
        self.message = message
        logging.log(self.log_level, f"{self.__class__.__name__}: {message}")
        super().__init__(self.message)


class ValidationError(CoreException):
    """Required wizard input is missing."""

    log_level = logging.WARNING

    def __init__(self, field: str, message: str):
        self.field = field
        super().__init__(message)
