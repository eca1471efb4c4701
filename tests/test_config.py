"""
Unit tests for configuration module.
"""
import pytest
import os
from unittest.mock import patch
from config import AwsClientInput, get_config
from utils.exceptions import ConfigurationError


class TestAwsClientInput:
    """Tests for AwsClientInput class."""

    @patch.dict(os.environ, {'AWS_REGION': 'us-east-1'}, clear=True)
    def test_from_env_minimal(self):
        """Test AwsClientInput.from_env with only the region set."""
        client_input = AwsClientInput.from_env()
        assert client_input.region == 'us-east-1'
        assert client_input.access_key_id == ''
        assert client_input.secret_name == ''
        assert client_input.has_secret_reference() is False

    @patch.dict(os.environ, {
        'AWS_REGION': 'us-west-2',
        'AWS_SESSION_TOKEN': 'token',
        'AWS_CREDS_SECRET_NAME': 'cloud-credentials',
        'AWS_CREDS_SECRET_NAMESPACE': 'openshift-cloud-ingress-operator',
        'LOG_LEVEL': 'debug',
    }, clear=True)
    def test_from_env_all_variables(self):
        """Test AwsClientInput.from_env with all variables set."""
        client_input = AwsClientInput.from_env()
        assert client_input.region == 'us-west-2'
        assert client_input.session_token == 'token'
        assert client_input.secret_name == 'cloud-credentials'
        assert client_input.secret_namespace == 'openshift-cloud-ingress-operator'
        assert client_input.has_secret_reference() is True

    @patch.dict(os.environ, {'AWS_DEFAULT_REGION': 'eu-west-1'}, clear=True)
    def test_from_env_default_region_fallback(self):
        """Test AWS_DEFAULT_REGION is used when AWS_REGION is absent."""
        assert AwsClientInput.from_env().region == 'eu-west-1'

    @patch.dict(os.environ, {}, clear=True)
    def test_from_env_missing_region(self):
        """Test AwsClientInput.from_env raises error when region missing."""
        with pytest.raises(ConfigurationError, match="AWS_REGION"):
            AwsClientInput.from_env()

    @patch.dict(os.environ, {
        'AWS_REGION': 'us-east-1',
        'LOG_LEVEL': 'INVALID',
    }, clear=True)
    def test_from_env_ignores_log_level(self):
        """Test LOG_LEVEL is left to the logger configuration."""
        client_input = AwsClientInput.from_env()
        assert client_input.region == 'us-east-1'

    def test_has_secret_reference_needs_both_fields(self):
        """Test a secret name without namespace is not a secret reference."""
        assert AwsClientInput(region='us-east-1', secret_name='x').has_secret_reference() is False
        assert AwsClientInput(region='us-east-1', secret_namespace='y').has_secret_reference() is False
        assert AwsClientInput(region='us-east-1', secret_name='x', secret_namespace='y').has_secret_reference() is True

    def test_validate_missing_region(self):
        """Test validate rejects an empty region."""
        with pytest.raises(ConfigurationError) as exc_info:
            AwsClientInput(access_key_id='AKIA', secret_access_key='secret').validate()
        assert exc_info.value.field == 'region'

    def test_validate_secret_without_access_key(self):
        """Test validate rejects an inline secret without its key ID."""
        with pytest.raises(ConfigurationError) as exc_info:
            AwsClientInput(secret_access_key='secret', region='us-east-1').validate()
        assert exc_info.value.field == 'access_key_id'

    def test_validate_secret_reference_wins_over_partial_keys(self):
        """Test partial inline keys are ignored when a secret is referenced."""
        AwsClientInput(
            secret_access_key='secret',
            region='us-east-1',
            secret_name='x',
            secret_namespace='y',
        ).validate()

    def test_repr_hides_keys(self):
        """Test repr does not leak credentials."""
        client_input = AwsClientInput(
            access_key_id='AKIAEXAMPLE',
            secret_access_key='supersecret',
            session_token='tok',
            region='us-east-1',
        )
        text = repr(client_input)
        assert 'AKIAEXAMPLE' not in text
        assert 'supersecret' not in text
        assert 'us-east-1' in text

    @patch.dict(os.environ, {'AWS_REGION': 'us-east-1'}, clear=True)
    def test_get_config_singleton(self):
        """Test get_config returns singleton instance."""
        import config
        config._config = None

        config1 = get_config()
        config2 = get_config()

        assert config1 is config2
        config._config = None
