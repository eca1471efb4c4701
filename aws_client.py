"""
AWS client facade and credential resolution.

AwsClient bundles the EC2, classic ELB, ELBv2 and Route53 services behind
the method set a cluster ingress controller needs. get_aws_client() builds
one from an AwsClientInput, reading credentials from a Kubernetes secret
when the input references one.
"""
from typing import Any, Dict, List, Optional, Protocol, Tuple

import boto3

from config import AwsClientInput
from logger_config import get_logger
from services.ec2_service import EC2Service
from services.elb_service import ELBService
from services.elbv2_service import API_SERVER_PORT, ELBV2Service
from services.models import AWSLoadBalancer, LoadBalancerV2
from services.route53_service import Route53Service
from utils.exceptions import ConfigurationError, MissingFieldError

logger = get_logger(__name__)

AWS_CREDS_SECRET_ID_KEY = 'aws_access_key_id'
AWS_CREDS_SECRET_ACCESS_KEY = 'aws_secret_access_key'


class SecretStore(Protocol):
    def get_secret_data(self, name: str, namespace: str) -> Dict[str, bytes]:
        ...


class AwsClient:
    """Facade over the four AWS services used by the controller."""

    def __init__(
        self,
        ec2: EC2Service,
        elb: ELBService,
        elbv2: ELBV2Service,
        route53: Route53Service
    ) -> None:
        self.ec2 = ec2
        self.elb = elb
        self.elbv2 = elbv2
        self.route53 = route53

    @classmethod
    def from_session(cls, session: boto3.Session) -> "AwsClient":
        """Build every service from one boto3 session."""
        return cls(
            ec2=EC2Service(session),
            elb=ELBService(session),
            elbv2=ELBV2Service(session),
            route53=Route53Service(session),
        )

    # ELB

    def apply_security_groups_to_load_balancer(self, **kwargs: Any) -> Dict[str, Any]:
        return self.elb.apply_security_groups_to_load_balancer(**kwargs)

    def configure_health_check(self, **kwargs: Any) -> Dict[str, Any]:
        return self.elb.configure_health_check(**kwargs)

    def create_load_balancer(self, **kwargs: Any) -> Dict[str, Any]:
        return self.elb.create_load_balancer(**kwargs)

    def create_load_balancer_listeners(self, **kwargs: Any) -> Dict[str, Any]:
        return self.elb.create_load_balancer_listeners(**kwargs)

    def delete_load_balancer_listeners(self, **kwargs: Any) -> Dict[str, Any]:
        return self.elb.delete_load_balancer_listeners(**kwargs)

    def deregister_instances_from_load_balancer(self, **kwargs: Any) -> Dict[str, Any]:
        return self.elb.deregister_instances_from_load_balancer(**kwargs)

    def describe_load_balancers(self, **kwargs: Any) -> Dict[str, Any]:
        return self.elb.describe_load_balancers(**kwargs)

    def describe_tags(self, **kwargs: Any) -> Dict[str, Any]:
        return self.elb.describe_tags(**kwargs)

    def register_instances_with_load_balancer(self, **kwargs: Any) -> Dict[str, Any]:
        return self.elb.register_instances_with_load_balancer(**kwargs)

    # ELBv2

    def describe_load_balancers_v2(self, **kwargs: Any) -> Dict[str, Any]:
        return self.elbv2.describe_load_balancers(**kwargs)

    def delete_load_balancer_v2(self, **kwargs: Any) -> Dict[str, Any]:
        return self.elbv2.delete_load_balancer(**kwargs)

    def create_load_balancer_v2(self, **kwargs: Any) -> Dict[str, Any]:
        return self.elbv2.create_load_balancer(**kwargs)

    def create_target_group_v2(self, **kwargs: Any) -> Dict[str, Any]:
        return self.elbv2.create_target_group(**kwargs)

    def register_targets_v2(self, **kwargs: Any) -> Dict[str, Any]:
        return self.elbv2.register_targets(**kwargs)

    def create_listener_v2(self, **kwargs: Any) -> Dict[str, Any]:
        return self.elbv2.create_listener(**kwargs)

    def describe_target_groups_v2(self, **kwargs: Any) -> Dict[str, Any]:
        return self.elbv2.describe_target_groups(**kwargs)

    def add_tags_v2(self, **kwargs: Any) -> Dict[str, Any]:
        return self.elbv2.add_tags(**kwargs)

    # Route53

    def change_resource_record_sets(self, **kwargs: Any) -> Dict[str, Any]:
        return self.route53.change_resource_record_sets(**kwargs)

    def list_hosted_zones_by_name(self, **kwargs: Any) -> Dict[str, Any]:
        return self.route53.list_hosted_zones_by_name(**kwargs)

    # EC2

    def authorize_security_group_ingress(self, **kwargs: Any) -> Dict[str, Any]:
        return self.ec2.authorize_security_group_ingress(**kwargs)

    def create_security_group(self, **kwargs: Any) -> Dict[str, Any]:
        return self.ec2.create_security_group(**kwargs)

    def delete_security_group(self, **kwargs: Any) -> Dict[str, Any]:
        return self.ec2.delete_security_group(**kwargs)

    def describe_security_groups(self, **kwargs: Any) -> Dict[str, Any]:
        return self.ec2.describe_security_groups(**kwargs)

    def revoke_security_group_ingress(self, **kwargs: Any) -> Dict[str, Any]:
        return self.ec2.revoke_security_group_ingress(**kwargs)

    def describe_subnets(self, **kwargs: Any) -> Dict[str, Any]:
        return self.ec2.describe_subnets(**kwargs)

    def create_tags(self, **kwargs: Any) -> Dict[str, Any]:
        return self.ec2.create_tags(**kwargs)

    # Helpers

    def subnet_name_to_subnet_id_lookup(self, subnet_names: List[str]) -> List[str]:
        return self.ec2.subnet_name_to_subnet_id_lookup(subnet_names)

    def does_elb_exist(self, elb_name: str) -> Tuple[bool, Optional[AWSLoadBalancer]]:
        return self.elb.does_elb_exist(elb_name)

    def list_all_nlbs(self) -> List[LoadBalancerV2]:
        return self.elbv2.list_all_nlbs()

    def delete_external_load_balancer(self, load_balancer_arn: str) -> None:
        self.elbv2.delete_external_load_balancer(load_balancer_arn)

    def create_network_load_balancer(
        self,
        lb_name: str,
        scheme: str,
        subnet_id: str,
        tags: Optional[Dict[str, str]] = None
    ) -> List[LoadBalancerV2]:
        return self.elbv2.create_network_load_balancer(lb_name, scheme, subnet_id, tags)

    def create_listener_for_nlb(
        self,
        target_group_arn: str,
        load_balancer_arn: str,
        port: int = API_SERVER_PORT
    ) -> Dict[str, Any]:
        return self.elbv2.create_listener_for_nlb(target_group_arn, load_balancer_arn, port)

    def get_target_group_arn(self, target_group_name: str) -> str:
        return self.elbv2.get_target_group_arn(target_group_name)

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
        return self.elbv2.create_nlb_with_targets(
            lb_name, scheme, subnet_id, target_group_name, instance_ids, port, tags
        )

    def upsert_a_record(
        self,
        cluster_domain: str,
        dns_name: str,
        alias_dns_zone_id: str,
        resource_record_set_name: str,
        comment: str,
        target_health: bool
    ) -> List[str]:
        return self.route53.upsert_a_record(
            cluster_domain, dns_name, alias_dns_zone_id,
            resource_record_set_name, comment, target_health
        )


def new_client(
    access_key_id: str,
    secret_access_key: str,
    session_token: str,
    region: str
) -> AwsClient:
    """
    Build an AwsClient with explicit credentials.

    Credentials live only on the boto3 session; the process environment is
    left untouched. With both keys empty the session falls back to the
    default boto3 credential chain.

    Args:
        access_key_id: AWS access key ID
        secret_access_key: AWS secret access key
        session_token: Session token for temporary credentials, or ""
        region: AWS region

    Returns:
        AwsClient bound to the new session
    """
    session = boto3.Session(
        aws_access_key_id=access_key_id or None,
        aws_secret_access_key=secret_access_key or None,
        aws_session_token=session_token or None,
        region_name=region,
    )
    return AwsClient.from_session(session)


def get_aws_client(
    secret_store: Optional[SecretStore],
    client_input: AwsClientInput
) -> AwsClient:
    """
    Resolve credentials and build an AwsClient.

    Region is required. If the input names a secret (name and namespace)
    the keys are read from it; otherwise the inline keys are used.

    Args:
        secret_store: Object providing get_secret_data(name, namespace),
            usually a KubeSecretService
        client_input: Credential and region input

    Returns:
        AwsClient for the resolved credentials

    Raises:
        ConfigurationError: If region is missing or inline keys are inconsistent
        SecretLookupError: If the secret cannot be read
        MissingFieldError: If the secret lacks one of the key fields
    """
    client_input.validate()

    if client_input.has_secret_reference():
        if secret_store is None:
            raise ConfigurationError(
                'A secret store is required to read a credentials secret',
                field='secret_name'
            )

        data = secret_store.get_secret_data(
            client_input.secret_name, client_input.secret_namespace
        )
        for field in (AWS_CREDS_SECRET_ID_KEY, AWS_CREDS_SECRET_ACCESS_KEY):
            if field not in data:
                logger.error(
                    f'Secret {client_input.secret_namespace}/{client_input.secret_name} '
                    f'is missing field {field}'
                )
                raise MissingFieldError(field, secret_name=client_input.secret_name)

        logger.info(
            f'Using AWS credentials from secret '
            f'{client_input.secret_namespace}/{client_input.secret_name}'
        )
        return new_client(
            _decode(data[AWS_CREDS_SECRET_ID_KEY]),
            _decode(data[AWS_CREDS_SECRET_ACCESS_KEY]),
            client_input.session_token,
            client_input.region,
        )

    if client_input.access_key_id:
        logger.info('Using inline AWS credentials')
    else:
        logger.info('Using default AWS credential chain')
    return new_client(
        client_input.access_key_id,
        client_input.secret_access_key,
        client_input.session_token,
        client_input.region,
    )


def _decode(value: Any) -> str:
    if isinstance(value, bytes):
        return value.decode('utf-8')
    return str(value)
