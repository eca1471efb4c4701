"""
ELBv2 service for network load balancer operations.
"""
import boto3
from typing import Dict, Any, List, Optional, TYPE_CHECKING
from logger_config import get_logger
from services.models import LoadBalancerV2
from utils.decorators import remote_operation
from utils.exceptions import ResourceNotFoundError

if TYPE_CHECKING:
    from mypy_boto3_elbv2 import ElasticLoadBalancingv2Client
else:
    ElasticLoadBalancingv2Client = Any

logger = get_logger(__name__)

API_SERVER_PORT = 6443


class ELBV2Service:
    """Service for ELBv2 (NLB) operations."""

    def __init__(
        self,
        session: Optional[boto3.Session] = None,
        client: Optional[ElasticLoadBalancingv2Client] = None
    ) -> None:
        """
        Initialize ELBv2 service.

        Args:
            session: boto3 session carrying region and credentials
            client: Pre-built ELBv2 client (takes precedence over session)
        """
        self.session = session
        self._client: Optional[ElasticLoadBalancingv2Client] = client

    @property
    def client(self) -> ElasticLoadBalancingv2Client:
        """Lazy initialization of ELBv2 client."""
        if self._client is None:
            self._client = (self.session or boto3.Session()).client('elbv2')
        return self._client

    def describe_load_balancers(self, **kwargs: Any) -> Dict[str, Any]:
        """List all or one NLB, e.g. to find the external or internal one."""
        return self.client.describe_load_balancers(**kwargs)

    def delete_load_balancer(self, **kwargs: Any) -> Dict[str, Any]:
        return self.client.delete_load_balancer(**kwargs)

    def create_load_balancer(self, **kwargs: Any) -> Dict[str, Any]:
        return self.client.create_load_balancer(**kwargs)

    def create_target_group(self, **kwargs: Any) -> Dict[str, Any]:
        return self.client.create_target_group(**kwargs)

    def register_targets(self, **kwargs: Any) -> Dict[str, Any]:
        """Register master instances with a target group."""
        return self.client.register_targets(**kwargs)

    def create_listener(self, **kwargs: Any) -> Dict[str, Any]:
        return self.client.create_listener(**kwargs)

    def describe_target_groups(self, **kwargs: Any) -> Dict[str, Any]:
        return self.client.describe_target_groups(**kwargs)

    def add_tags(self, **kwargs: Any) -> Dict[str, Any]:
        return self.client.add_tags(**kwargs)

    @remote_operation
    def list_all_nlbs(self) -> List[LoadBalancerV2]:
        """
        List every network load balancer in the region.

        Returns:
            NLB descriptors; application load balancers are skipped
        """
        load_balancers = []
        paginator = self.client.get_paginator('describe_load_balancers')
        for page in paginator.paginate():
            for lb in page.get('LoadBalancers', []):
                if lb.get('Type', 'network') != 'network':
                    continue
                load_balancers.append(LoadBalancerV2.from_response(lb))

        logger.info(f'Found {len(load_balancers)} network load balancers')
        return load_balancers

    @remote_operation
    def delete_external_load_balancer(self, load_balancer_arn: str) -> None:
        """Delete an NLB, e.g. the external one when making a cluster private."""
        self.delete_load_balancer(LoadBalancerArn=load_balancer_arn)
        logger.info(f'Deleted load balancer {load_balancer_arn}')

    @remote_operation
    def create_network_load_balancer(
        self,
        lb_name: str,
        scheme: str,
        subnet_id: str,
        tags: Optional[Dict[str, str]] = None
    ) -> List[LoadBalancerV2]:
        """
        Create a network load balancer in a single subnet.

        Args:
            lb_name: Load balancer name
            scheme: 'internet-facing' or 'internal'
            subnet_id: Subnet to place the load balancer in
            tags: Optional tags to apply at creation

        Returns:
            Descriptors for the created load balancer
        """
        create_kwargs: Dict[str, Any] = {
            'Name': lb_name,
            'Scheme': scheme,
            'Subnets': [subnet_id],
            'Type': 'network',
        }
        if tags:
            create_kwargs['Tags'] = [{'Key': k, 'Value': v} for k, v in tags.items()]

        response = self.create_load_balancer(**create_kwargs)
        load_balancers = [LoadBalancerV2.from_response(lb) for lb in response.get('LoadBalancers', [])]
        logger.info(f'Created network load balancer {lb_name} ({scheme}) in {subnet_id}')
        return load_balancers

    @remote_operation(identifier_arg=1)
    def create_listener_for_nlb(
        self,
        target_group_arn: str,
        load_balancer_arn: str,
        port: int = API_SERVER_PORT
    ) -> Dict[str, Any]:
        """
        Create a TCP listener that forwards to a target group.

        Returns:
            The created listener
        """
        response = self.create_listener(
            DefaultActions=[{'TargetGroupArn': target_group_arn, 'Type': 'forward'}],
            LoadBalancerArn=load_balancer_arn,
            Port=port,
            Protocol='TCP',
        )
        return response['Listeners'][0]

    @remote_operation
    def get_target_group_arn(self, target_group_name: str) -> str:
        """
        Resolve a target group name to its ARN.

        Raises:
            ResourceNotFoundError: If no target group carries that name
        """
        response = self.describe_target_groups(Names=[target_group_name])
        target_groups = response.get('TargetGroups', [])
        if not target_groups:
            raise ResourceNotFoundError(
                f'No target group named {target_group_name}',
                resource_type='target-group',
                name=target_group_name
            )
        return target_groups[0]['TargetGroupArn']

    @remote_operation
    def create_nlb_with_targets(
        self,
        lb_name: str,
        scheme: str,
        subnet_id: str,
        target_group_name: str,
        instance_ids: List[str],
        port: int = API_SERVER_PORT,
        tags: Optional[Dict[str, str]] = None
    ) -> LoadBalancerV2:
        """
        Create an NLB and wire it to an existing target group.

        Steps run in order and stop at the first failure; nothing already
        created is rolled back.

        Args:
            lb_name: Load balancer name
            scheme: 'internet-facing' or 'internal'
            subnet_id: Subnet to place the load balancer in
            target_group_name: Existing target group to forward to
            instance_ids: Instances to register with the target group
            port: Listener and target port
            tags: Optional load balancer tags

        Returns:
            Descriptor of the created load balancer
        """
        load_balancers = self.create_network_load_balancer(lb_name, scheme, subnet_id, tags)
        if not load_balancers:
            raise ResourceNotFoundError(
                f'CreateLoadBalancer returned no load balancer for {lb_name}',
                resource_type='load-balancer',
                name=lb_name
            )
        load_balancer = load_balancers[0]

        target_group_arn = self.get_target_group_arn(target_group_name)

        if instance_ids:
            self.register_targets(
                TargetGroupArn=target_group_arn,
                Targets=[{'Id': instance_id, 'Port': port} for instance_id in instance_ids]
            )
            logger.info(f'Registered {len(instance_ids)} targets with {target_group_name}')

        self.create_listener_for_nlb(target_group_arn, load_balancer.load_balancer_arn, port)
        return load_balancer
