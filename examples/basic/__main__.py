# examples/basic/__main__.py
from __future__ import annotations
import pulumi
from aws_vpc import Vpc, VpcArgs

vpc = Vpc("example-vpc", VpcArgs(
    cidr_block="10.0.0.0/16",
    availability_zones=["us-east-1a", "us-east-1b"],
    public_subnet_cidrs=["10.0.1.0/24", "10.0.2.0/24"],
    private_subnet_cidrs=["10.0.11.0/24", "10.0.12.0/24"],
    environment="dev",
    project="example-project",
    enable_nat_gateway=True,
    enable_flow_logs=True,
    flow_log_retention_days=7,
    tags={"Owner": "platform-team", "CostCenter": "platform"},
))

pulumi.export("vpcId", vpc.vpc_id)
pulumi.export("vpcCidr", vpc.vpc_cidr)
pulumi.export("publicSubnetIds", vpc.public_subnet_ids)
pulumi.export("privateSubnetIds", vpc.private_subnet_ids)
pulumi.export("natGatewayIds", vpc.nat_gateway_ids)
pulumi.export("internetGatewayId", vpc.internet_gateway_id)
