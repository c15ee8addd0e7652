"""Shared exceptions module."""

from typing import Optional


class OshubException(Exception):
    """Base exception for the trigger functions."""

    pass


class ConfigurationError(OshubException):
    """Exception raised when required configuration is missing or invalid.

    This is the only error allowed to fail an invocation outward.
    """

    def __init__(self, setting: str, message: Optional[str] = "Missing required setting"):
        """Create a new ConfigurationError instance.

        Args:
        ----
            setting (str): The name of the offending setting.
            message (str, optional): The error message. Has default message.

        """
        self.setting = setting
        self.message = message
        super().__init__(f"{message}: {setting}")


class NotFoundException(OshubException):
    """Exception raised when an object is not found."""

    def __init__(self, message: Optional[str] = "Object not found"):
        """Create a new NotFoundException instance.

        Args:
        ----
            message (str, optional): The error message. Has default message.

        """
        self.message = message
        super().__init__(self.message)


class ExternalServiceError(OshubException):
    """Exception raised when an external service fails."""

    def __init__(self, service_name: str, message: Optional[str] = "External service failed"):
        """Create a new ExternalServiceError instance.

        Args:
        ----
            service_name (str): The name of the external service.
            message (str, optional): The error message. Has default message.

        """
        self.service_name = service_name
        self.message = message
        super().__init__(f"{service_name}: {message}")


class InvalidEventError(OshubException):
    """Exception raised when a platform event payload cannot be decoded."""

    def __init__(self, message: Optional[str] = "Invalid event payload"):
        """Create a new InvalidEventError instance.

        Args:
        ----
            message (str, optional): The error message. Has default message.

        """
        self.message = message
        super().__init__(self.message)
