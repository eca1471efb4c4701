"""
Kubernetes secret service for reading AWS credentials.
"""
import base64
from typing import Dict, Optional
from kubernetes import client as k8s_client
from kubernetes import config as k8s_config
from kubernetes.client.rest import ApiException
from kubernetes.config import ConfigException
from urllib3.exceptions import HTTPError
from logger_config import get_logger
from utils.exceptions import SecretLookupError

logger = get_logger(__name__)


class KubeSecretService:
    """Service for reading Kubernetes secrets."""

    def __init__(
        self,
        core_v1: Optional[k8s_client.CoreV1Api] = None,
        context: Optional[str] = None
    ) -> None:
        """
        Initialize Kubernetes secret service.

        Args:
            core_v1: Pre-built CoreV1Api (takes precedence over config loading)
            context: kubeconfig context used outside a cluster
        """
        self.context = context
        self._core_v1 = core_v1

    @property
    def core_v1(self) -> k8s_client.CoreV1Api:
        """Lazy initialization of the CoreV1 API client.

        Configuration is loaded into a private Configuration object so the
        kubernetes package's process-wide default is never replaced.
        """
        if self._core_v1 is None:
            try:
                configuration = k8s_client.Configuration()
                k8s_config.load_incluster_config(client_configuration=configuration)
                api_client = k8s_client.ApiClient(configuration)
                logger.debug('Loaded in-cluster Kubernetes configuration')
            except ConfigException:
                api_client = k8s_config.new_client_from_config(context=self.context)
                logger.debug('Loaded Kubernetes configuration from kubeconfig')
            self._core_v1 = k8s_client.CoreV1Api(api_client)
        return self._core_v1

    def get_secret_data(self, name: str, namespace: str) -> Dict[str, bytes]:
        """
        Read a secret and decode its data fields.

        Args:
            name: Secret name
            namespace: Secret namespace

        Returns:
            Mapping of field name to decoded bytes

        Raises:
            SecretLookupError: If no Kubernetes configuration can be loaded,
                the API server is unreachable, or the read is rejected
        """
        try:
            secret = self.core_v1.read_namespaced_secret(name=name, namespace=namespace)
        except ApiException as e:
            logger.error(f'Failed to read secret {namespace}/{name}: {e.status} {e.reason}')
            raise SecretLookupError(
                f'Failed to read secret {namespace}/{name}: {e.reason}',
                secret_name=name,
                namespace=namespace,
                status=e.status
            ) from e
        except ConfigException as e:
            logger.error(f'No Kubernetes configuration to read secret {namespace}/{name}: {str(e)}')
            raise SecretLookupError(
                f'No Kubernetes configuration to read secret {namespace}/{name}: {str(e)}',
                secret_name=name,
                namespace=namespace
            ) from e
        except HTTPError as e:
            logger.error(f'Kubernetes API unreachable reading secret {namespace}/{name}: {str(e)}')
            raise SecretLookupError(
                f'Kubernetes API unreachable reading secret {namespace}/{name}: {str(e)}',
                secret_name=name,
                namespace=namespace
            ) from e

        data = secret.data or {}
        return {key: base64.b64decode(value) for key, value in data.items()}
