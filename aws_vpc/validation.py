# aws_vpc/validation.py
from __future__ import annotations
import re
from typing import Any
import pulumi
from aws_vpc.args import VpcArgs

_CIDR_RE = re.compile(r"([0-9]{1,3}\.){3}[0-9]{1,3}/[0-9]{1,2}")
MIN_PREFIX = 8
MAX_PREFIX = 30
INSTANCE_TENANCIES = ("default", "dedicated")


class VpcValidationError(pulumi.RunError):
    """Raised before any resource is declared when the VPC inputs are invalid."""


def validate_cidr_block(cidr: Any, label: str) -> None:
    """
    Check dotted-quad/prefix syntax only. Containment in the VPC block and
    overlap between subnets are left to the provider.
    """
    if not isinstance(cidr, str) or not _CIDR_RE.fullmatch(cidr):
        raise VpcValidationError(f"{label} must be a valid CIDR block (e.g., 10.0.0.0/16)")

    ip, prefix = cidr.split("/")
    if not MIN_PREFIX <= int(prefix) <= MAX_PREFIX:
        raise VpcValidationError(f"{label} prefix must be between {MIN_PREFIX} and {MAX_PREFIX}")

    if any(int(octet) > 255 for octet in ip.split(".")):
        raise VpcValidationError(f"{label} contains invalid IP address")


def validate_args(args: VpcArgs) -> None:
    """Fail fast on the first violated rule; the check order is part of the contract."""
    if not args.cidr_block:
        raise VpcValidationError("cidrBlock is required")

    zones = args.availability_zones
    if not zones:
        raise VpcValidationError("availabilityZones must be provided and non-empty")

    if not args.public_subnet_cidrs or len(args.public_subnet_cidrs) != len(zones):
        raise VpcValidationError("publicSubnetCidrs must be provided and match the number of availability zones")

    if not args.private_subnet_cidrs or len(args.private_subnet_cidrs) != len(zones):
        raise VpcValidationError("privateSubnetCidrs must be provided and match the number of availability zones")

    if not args.environment:
        raise VpcValidationError("environment is required")

    if not args.project:
        raise VpcValidationError("project is required")

    validate_cidr_block(args.cidr_block, "VPC CIDR")
    for i, cidr in enumerate(args.public_subnet_cidrs):
        validate_cidr_block(cidr, f"Public subnet {i} CIDR")
    for i, cidr in enumerate(args.private_subnet_cidrs):
        validate_cidr_block(cidr, f"Private subnet {i} CIDR")

    if args.instance_tenancy not in INSTANCE_TENANCIES:
        raise VpcValidationError(f"instanceTenancy must be one of: {', '.join(INSTANCE_TENANCIES)}")
