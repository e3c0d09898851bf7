# examples/advanced/__main__.py
from __future__ import annotations
import pulumi
from aws_vpc import Vpc, VpcArgs

vpc = Vpc("advanced-vpc", VpcArgs(
    cidr_block="172.16.0.0/16",
    availability_zones=["us-east-1a", "us-east-1b", "us-east-1c"],
    public_subnet_cidrs=["172.16.1.0/24", "172.16.2.0/24", "172.16.3.0/24"],
    private_subnet_cidrs=["172.16.11.0/24", "172.16.12.0/24", "172.16.13.0/24"],
    environment="production",
    project="enterprise-platform",
    instance_tenancy="default",
    enable_nat_gateway=True,
    enable_flow_logs=True,
    flow_log_retention_days=30,
    tags={
        "Owner": "platform-team",
        "CostCenter": "platform",
        "Compliance": "pci-dss",
        "Backup": "daily",
        "Monitoring": "enabled",
    },
))

for key, value in vpc.outputs.as_dict().items():
    pulumi.export(key, value)
