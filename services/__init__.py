"""
Service layer for AWS and Kubernetes API calls.

Each module wraps one remote API: EC2, classic ELB, ELBv2, Route53 and the
Kubernetes secret store holding AWS credentials.
"""
