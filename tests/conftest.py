# tests/conftest.py
from __future__ import annotations
from typing import Callable, Dict, List
import pulumi
import pytest
from aws_vpc import VpcArgs

VPC = "aws:ec2/vpc:Vpc"
IGW = "aws:ec2/internetGateway:InternetGateway"
SUBNET = "aws:ec2/subnet:Subnet"
ROUTE_TABLE = "aws:ec2/routeTable:RouteTable"
RTA = "aws:ec2/routeTableAssociation:RouteTableAssociation"
EIP = "aws:ec2/eip:Eip"
NAT = "aws:ec2/natGateway:NatGateway"
DEFAULT_SG = "aws:ec2/defaultSecurityGroup:DefaultSecurityGroup"
LOG_GROUP = "aws:cloudwatch/logGroup:LogGroup"
ROLE = "aws:iam/role:Role"
ROLE_POLICY = "aws:iam/rolePolicy:RolePolicy"
FLOW_LOG = "aws:ec2/flowLog:FlowLog"

FLOW_LOG_TYPES = (LOG_GROUP, ROLE, ROLE_POLICY, FLOW_LOG)


class RecordingMocks(pulumi.runtime.Mocks):
    """Echo inputs back as state, hand out `<name>_id` ids and keep every registration."""

    def __init__(self):
        self.resources: List[pulumi.runtime.MockResourceArgs] = []

    def new_resource(self, args: pulumi.runtime.MockResourceArgs):
        self.resources.append(args)
        state = dict(args.inputs)
        if args.typ in (LOG_GROUP, ROLE):
            state["arn"] = f"arn:aws:mock::123456789012:{args.name}"
        return [f"{args.name}_id", state]

    def call(self, args: pulumi.runtime.MockCallArgs):
        return {}

    def of_type(self, typ: str) -> List[pulumi.runtime.MockResourceArgs]:
        return [r for r in self.resources if r.typ == typ]

    def by_name(self) -> Dict[str, pulumi.runtime.MockResourceArgs]:
        return {r.name: r for r in self.resources}


@pytest.fixture
def mocks() -> RecordingMocks:
    m = RecordingMocks()
    pulumi.runtime.set_mocks(m, preview=False)
    return m


def declare(fn: Callable[[], object]) -> None:
    """Run fn under the mock engine; returns once every registration has landed."""
    pulumi.runtime.test(fn)()


def make_args(**overrides) -> VpcArgs:
    values = dict(
        cidr_block="10.0.0.0/16",
        availability_zones=["us-east-1a", "us-east-1b"],
        public_subnet_cidrs=["10.0.1.0/24", "10.0.2.0/24"],
        private_subnet_cidrs=["10.0.11.0/24", "10.0.12.0/24"],
        environment="dev",
        project="example-project",
    )
    values.update(overrides)
    return VpcArgs(**values)
