# __main__.py
from __future__ import annotations
import os
import pulumi
from aws_vpc import Vpc, load_vpc_args

NETWORK_NAME = os.getenv("NETWORK_NAME") or pulumi.Config().get("networkName") or "vpc"

pulumi.log.info(f"__main__.py: building VPC {NETWORK_NAME} for stack {pulumi.get_stack()}")

vpc = Vpc(NETWORK_NAME, load_vpc_args())

for key, value in vpc.outputs.as_dict().items():
    pulumi.export(key, value)

pulumi.log.info(f"__main__.py completed: flow_logs={vpc.outputs.flow_logs_enabled}")
