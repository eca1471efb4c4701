"""
Configuration module for AWS client credential input.

This module describes how an AWS client should be authenticated and
provides validation plus an environment-backed singleton.
"""
import os
from dataclasses import dataclass
from typing import Optional

from utils.exceptions import ConfigurationError


@dataclass
class AwsClientInput:
    """Input for building an AWS client.

    Empty strings mean "unset". A secret reference (secret_name plus
    secret_namespace) takes precedence over the inline keys.
    """

    access_key_id: str = ""
    secret_access_key: str = ""
    session_token: str = ""
    region: str = ""
    secret_name: str = ""
    secret_namespace: str = ""

    def has_secret_reference(self) -> bool:
        """True when both the secret name and namespace are set."""
        return bool(self.secret_name and self.secret_namespace)

    def validate(self) -> None:
        """
        Check the combination of fields.

        Raises:
            ConfigurationError: If region is missing, or an inline secret is
                given without its access key.
        """
        if not self.region:
            raise ConfigurationError(
                f'getAWSClient:NoRegion: {self.region!r}', field='region'
            )
        if self.has_secret_reference():
            return
        if not self.access_key_id and self.secret_access_key:
            raise ConfigurationError(
                'getAWSClient: NoAwsCredentials or Secret: '
                'secret access key given without an access key id',
                field='access_key_id'
            )

    def __repr__(self) -> str:
        # Keys stay out of logs and tracebacks
        return (
            f'AwsClientInput(region={self.region!r}, '
            f'secret_name={self.secret_name!r}, '
            f'secret_namespace={self.secret_namespace!r}, '
            f'has_inline_keys={bool(self.access_key_id)}, '
            f'has_session_token={bool(self.session_token)})'
        )

    @classmethod
    def from_env(cls) -> "AwsClientInput":
        """
        Create AwsClientInput from environment variables.

        Inline keys are not read here: when they are left empty the boto3
        default credential chain picks up AWS_ACCESS_KEY_ID and friends.

        Raises:
            ConfigurationError: If AWS_REGION is missing.
        """
        region = os.environ.get("AWS_REGION") or os.environ.get("AWS_DEFAULT_REGION", "")
        if not region:
            raise ConfigurationError(
                "AWS_REGION environment variable is required", field='region'
            )

        return cls(
            session_token=os.environ.get("AWS_SESSION_TOKEN", ""),
            region=region,
            secret_name=os.environ.get("AWS_CREDS_SECRET_NAME", ""),
            secret_namespace=os.environ.get("AWS_CREDS_SECRET_NAMESPACE", ""),
        )


_config: Optional[AwsClientInput] = None


def get_config() -> AwsClientInput:
    """
    Get the process-wide client input built from the environment.

    Returns:
        AwsClientInput: The validated configuration object

    Raises:
        ConfigurationError: If required environment variables are missing or invalid.
    """
    global _config
    if _config is None:
        _config = AwsClientInput.from_env()
    return _config
