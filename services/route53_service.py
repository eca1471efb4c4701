"""
Route53 service for the cluster API DNS records.
"""
import boto3
from typing import Dict, Any, List, Optional, TYPE_CHECKING
from logger_config import get_logger
from utils.decorators import remote_operation
from utils.exceptions import ResourceNotFoundError

if TYPE_CHECKING:
    from mypy_boto3_route53 import Route53Client
else:
    Route53Client = Any

logger = get_logger(__name__)


def _zone_name(name: str) -> str:
    return name.rstrip('.').lower()


class Route53Service:
    """Service for Route53 operations."""

    def __init__(
        self,
        session: Optional[boto3.Session] = None,
        client: Optional[Route53Client] = None
    ) -> None:
        """
        Initialize Route53 service.

        Args:
            session: boto3 session carrying region and credentials
            client: Pre-built Route53 client (takes precedence over session)
        """
        self.session = session
        self._client: Optional[Route53Client] = client

    @property
    def client(self) -> Route53Client:
        """Lazy initialization of Route53 client."""
        if self._client is None:
            self._client = (self.session or boto3.Session()).client('route53')
        return self._client

    def change_resource_record_sets(self, **kwargs: Any) -> Dict[str, Any]:
        return self.client.change_resource_record_sets(**kwargs)

    def list_hosted_zones_by_name(self, **kwargs: Any) -> Dict[str, Any]:
        """Turn a base domain into Route53 hosted zones."""
        return self.client.list_hosted_zones_by_name(**kwargs)

    @remote_operation(identifier_arg=3)
    def upsert_a_record(
        self,
        cluster_domain: str,
        dns_name: str,
        alias_dns_zone_id: str,
        resource_record_set_name: str,
        comment: str,
        target_health: bool
    ) -> List[str]:
        """
        Upsert an alias A record pointing at a load balancer.

        The record is written to every hosted zone named exactly
        cluster_domain, so both the public and private zone get it.

        Args:
            cluster_domain: Hosted zone name, with or without trailing dot
            dns_name: DNS name of the alias target (the load balancer)
            alias_dns_zone_id: Hosted zone ID of the alias target
            resource_record_set_name: Record name, e.g. api.<cluster_domain>
            comment: Change batch comment
            target_health: Whether Route53 evaluates the target's health

        Returns:
            IDs of the hosted zones that were updated

        Raises:
            ResourceNotFoundError: If no hosted zone is named cluster_domain
        """
        response = self.list_hosted_zones_by_name(DNSName=cluster_domain)

        updated_zones = []
        for zone in response.get('HostedZones', []):
            if _zone_name(zone['Name']) != _zone_name(cluster_domain):
                continue

            self.change_resource_record_sets(
                HostedZoneId=zone['Id'],
                ChangeBatch={
                    'Comment': comment,
                    'Changes': [{
                        'Action': 'UPSERT',
                        'ResourceRecordSet': {
                            'Name': resource_record_set_name,
                            'Type': 'A',
                            'AliasTarget': {
                                'DNSName': dns_name,
                                'EvaluateTargetHealth': target_health,
                                'HostedZoneId': alias_dns_zone_id,
                            },
                        },
                    }],
                },
            )
            logger.info(f'Upserted A record {resource_record_set_name} in zone {zone["Id"]}')
            updated_zones.append(zone['Id'])

        if not updated_zones:
            raise ResourceNotFoundError(
                f'No hosted zone named {cluster_domain}',
                resource_type='hosted-zone',
                name=cluster_domain
            )
        return updated_zones
