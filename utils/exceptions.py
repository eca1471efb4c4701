"""
Custom exception classes for credential resolution and AWS helpers.
"""
from typing import Optional


class AwsClientError(Exception):
    """Base class for errors raised by the AWS client wrapper."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ConfigurationError(AwsClientError, ValueError):
    """Exception raised for an invalid client configuration."""

    def __init__(self, message: str, field: Optional[str] = None):
        """
        Initialize configuration error.

        Args:
            message: Error message
            field: Configuration field that is missing or inconsistent
        """
        super().__init__(message)
        self.field = field


class SecretLookupError(AwsClientError, LookupError):
    """Exception raised when the credentials secret cannot be fetched."""

    def __init__(
        self,
        message: str,
        secret_name: Optional[str] = None,
        namespace: Optional[str] = None,
        status: Optional[int] = None
    ):
        """
        Initialize secret lookup error.

        Args:
            message: Error message
            secret_name: Name of the Kubernetes secret
            namespace: Namespace of the Kubernetes secret
            status: HTTP status returned by the API server if available
        """
        super().__init__(message)
        self.secret_name = secret_name
        self.namespace = namespace
        self.status = status


class MissingFieldError(AwsClientError):
    """Exception raised when the credentials secret lacks a required field."""

    def __init__(self, field: str, secret_name: Optional[str] = None):
        """
        Initialize missing field error.

        Args:
            field: Name of the missing data field
            secret_name: Name of the secret that was read
        """
        message = f'AWS credentials secret {secret_name} did not contain key {field}'
        super().__init__(message)
        self.field = field
        self.secret_name = secret_name


class RemoteError(AwsClientError):
    """Exception raised when an AWS call inside a helper fails."""

    def __init__(
        self,
        message: str,
        operation: Optional[str] = None,
        identifier: Optional[str] = None,
        error_code: Optional[str] = None
    ):
        """
        Initialize remote error.

        Args:
            message: Error message
            operation: Helper operation that failed
            identifier: Resource identifier the helper was working on
            error_code: AWS error code if available
        """
        super().__init__(message)
        self.operation = operation
        self.identifier = identifier
        self.error_code = error_code


class ResourceNotFoundError(AwsClientError):
    """Exception raised when a lookup by name finds nothing."""

    def __init__(self, message: str, resource_type: Optional[str] = None, name: Optional[str] = None):
        super().__init__(message)
        self.resource_type = resource_type
        self.name = name


class AmbiguousResourceError(AwsClientError):
    """Exception raised when a lookup by name finds more than one resource."""

    def __init__(
        self,
        message: str,
        resource_type: Optional[str] = None,
        name: Optional[str] = None,
        matches: Optional[list] = None
    ):
        super().__init__(message)
        self.resource_type = resource_type
        self.name = name
        self.matches = matches or []
