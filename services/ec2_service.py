"""
EC2 service for subnet and security group operations.
"""
import boto3
from typing import Dict, Any, List, Optional, TYPE_CHECKING
from logger_config import get_logger
from utils.decorators import remote_operation
from utils.exceptions import AmbiguousResourceError, ResourceNotFoundError

if TYPE_CHECKING:
    from mypy_boto3_ec2 import EC2Client
else:
    EC2Client = Any

logger = get_logger(__name__)


class EC2Service:
    """Service for EC2 operations."""

    def __init__(
        self,
        session: Optional[boto3.Session] = None,
        client: Optional[EC2Client] = None
    ) -> None:
        """
        Initialize EC2 service.

        Args:
            session: boto3 session carrying region and credentials
            client: Pre-built EC2 client (takes precedence over session)
        """
        self.session = session
        self._client: Optional[EC2Client] = client

    @property
    def client(self) -> EC2Client:
        """Lazy initialization of EC2 client."""
        if self._client is None:
            self._client = (self.session or boto3.Session()).client('ec2')
        return self._client

    def authorize_security_group_ingress(self, **kwargs: Any) -> Dict[str, Any]:
        return self.client.authorize_security_group_ingress(**kwargs)

    def create_security_group(self, **kwargs: Any) -> Dict[str, Any]:
        return self.client.create_security_group(**kwargs)

    def delete_security_group(self, **kwargs: Any) -> Dict[str, Any]:
        return self.client.delete_security_group(**kwargs)

    def describe_security_groups(self, **kwargs: Any) -> Dict[str, Any]:
        return self.client.describe_security_groups(**kwargs)

    def revoke_security_group_ingress(self, **kwargs: Any) -> Dict[str, Any]:
        return self.client.revoke_security_group_ingress(**kwargs)

    def describe_subnets(self, **kwargs: Any) -> Dict[str, Any]:
        """Find subnets, e.g. the master subnets for an incoming load balancer."""
        return self.client.describe_subnets(**kwargs)

    def create_tags(self, **kwargs: Any) -> Dict[str, Any]:
        return self.client.create_tags(**kwargs)

    @remote_operation
    def subnet_name_to_subnet_id_lookup(self, subnet_names: List[str]) -> List[str]:
        """
        Translate subnet Name tags into subnet IDs.

        Args:
            subnet_names: Values of the subnets' Name tag

        Returns:
            Subnet IDs in the same order as subnet_names

        Raises:
            ResourceNotFoundError: If a name matches no subnet
            AmbiguousResourceError: If a name matches more than one subnet
            RemoteError: If DescribeSubnets fails
        """
        subnet_ids = []
        for name in subnet_names:
            response = self.describe_subnets(
                Filters=[{'Name': 'tag:Name', 'Values': [name]}]
            )
            matches = [subnet['SubnetId'] for subnet in response.get('Subnets', [])]

            if not matches:
                raise ResourceNotFoundError(
                    f'No subnet found with Name tag {name}',
                    resource_type='subnet',
                    name=name
                )
            if len(matches) > 1:
                raise AmbiguousResourceError(
                    f'Subnet Name tag {name} matches {len(matches)} subnets: {", ".join(sorted(matches))}',
                    resource_type='subnet',
                    name=name,
                    matches=sorted(matches)
                )

            logger.debug(f'Subnet {name} resolved to {matches[0]}')
            subnet_ids.append(matches[0])

        return subnet_ids
