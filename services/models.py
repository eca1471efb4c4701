"""
Load balancer descriptors returned by the composite helpers.
"""
from dataclasses import dataclass
from typing import Any, Dict


@dataclass
class AWSLoadBalancer:
    """Classic ELB found by the existence check."""

    elb_name: str
    dns_name: str
    dns_zone_id: str


@dataclass
class LoadBalancerV2:
    """Network load balancer as described by the ELBv2 API."""

    canonical_hosted_zone_name_id: str
    dns_name: str
    load_balancer_arn: str
    load_balancer_name: str
    scheme: str
    vpc_id: str
    type: str = "network"

    @classmethod
    def from_response(cls, lb: Dict[str, Any]) -> "LoadBalancerV2":
        """Build a descriptor from one entry of a LoadBalancers list."""
        return cls(
            canonical_hosted_zone_name_id=lb.get('CanonicalHostedZoneId', ''),
            dns_name=lb.get('DNSName', ''),
            load_balancer_arn=lb['LoadBalancerArn'],
            load_balancer_name=lb.get('LoadBalancerName', ''),
            scheme=lb.get('Scheme', ''),
            vpc_id=lb.get('VpcId', ''),
            type=lb.get('Type', 'network'),
        )
