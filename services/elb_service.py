"""
Classic Elastic Load Balancing service.
"""
import boto3
from typing import Dict, Any, Optional, Tuple, TYPE_CHECKING
from botocore.exceptions import ClientError
from logger_config import get_logger
from services.models import AWSLoadBalancer
from utils.decorators import remote_operation

if TYPE_CHECKING:
    from mypy_boto3_elb import ElasticLoadBalancingClient
else:
    ElasticLoadBalancingClient = Any

logger = get_logger(__name__)

# Both spellings show up depending on the endpoint and SDK version
ELB_NOT_FOUND_CODES = {'LoadBalancerNotFound', 'AccessPointNotFound', 'AccessPointNotFoundException'}


class ELBService:
    """Service for classic ELB operations."""

    def __init__(
        self,
        session: Optional[boto3.Session] = None,
        client: Optional[ElasticLoadBalancingClient] = None
    ) -> None:
        """
        Initialize classic ELB service.

        Args:
            session: boto3 session carrying region and credentials
            client: Pre-built ELB client (takes precedence over session)
        """
        self.session = session
        self._client: Optional[ElasticLoadBalancingClient] = client

    @property
    def client(self) -> ElasticLoadBalancingClient:
        """Lazy initialization of ELB client."""
        if self._client is None:
            self._client = (self.session or boto3.Session()).client('elb')
        return self._client

    def apply_security_groups_to_load_balancer(self, **kwargs: Any) -> Dict[str, Any]:
        return self.client.apply_security_groups_to_load_balancer(**kwargs)

    def configure_health_check(self, **kwargs: Any) -> Dict[str, Any]:
        return self.client.configure_health_check(**kwargs)

    def create_load_balancer(self, **kwargs: Any) -> Dict[str, Any]:
        return self.client.create_load_balancer(**kwargs)

    def create_load_balancer_listeners(self, **kwargs: Any) -> Dict[str, Any]:
        return self.client.create_load_balancer_listeners(**kwargs)

    def delete_load_balancer_listeners(self, **kwargs: Any) -> Dict[str, Any]:
        return self.client.delete_load_balancer_listeners(**kwargs)

    def deregister_instances_from_load_balancer(self, **kwargs: Any) -> Dict[str, Any]:
        return self.client.deregister_instances_from_load_balancer(**kwargs)

    def describe_load_balancers(self, **kwargs: Any) -> Dict[str, Any]:
        return self.client.describe_load_balancers(**kwargs)

    def describe_tags(self, **kwargs: Any) -> Dict[str, Any]:
        return self.client.describe_tags(**kwargs)

    def register_instances_with_load_balancer(self, **kwargs: Any) -> Dict[str, Any]:
        return self.client.register_instances_with_load_balancer(**kwargs)

    @remote_operation
    def does_elb_exist(self, elb_name: str) -> Tuple[bool, Optional[AWSLoadBalancer]]:
        """
        Check whether a classic ELB exists.

        Args:
            elb_name: Name of the load balancer

        Returns:
            (True, descriptor) if the ELB exists, (False, None) if the API
            reports it as not found

        Raises:
            RemoteError: For any other DescribeLoadBalancers failure
        """
        try:
            response = self.describe_load_balancers(LoadBalancerNames=[elb_name])
        except ClientError as e:
            error_code = e.response.get('Error', {}).get('Code', '')
            if error_code in ELB_NOT_FOUND_CODES:
                logger.info(f'ELB {elb_name} does not exist')
                return False, None
            raise

        descriptions = response.get('LoadBalancerDescriptions', [])
        if not descriptions:
            return False, None

        description = descriptions[0]
        return True, AWSLoadBalancer(
            elb_name=elb_name,
            dns_name=description.get('DNSName', ''),
            dns_zone_id=description.get('CanonicalHostedZoneNameID', ''),
        )
