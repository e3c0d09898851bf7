# aws_vpc/component.py
from __future__ import annotations
from typing import Optional
import pulumi
from aws_vpc.args import VpcArgs
from aws_vpc.networking import _build_vpc
from aws_vpc.validation import validate_args

VPC_TYPE = "proserve:aws:Vpc"


class Vpc(pulumi.ComponentResource):
    """Groups the resources declared by create_vpc under one component URN."""

    def __init__(self, name: str, args: VpcArgs, opts: Optional[pulumi.ResourceOptions] = None):
        # validate first so a bad config never registers the component itself
        validate_args(args)
        super().__init__(VPC_TYPE, name, None, opts)

        self.outputs = _build_vpc(name, args, parent=self)
        self.vpc_id = self.outputs.vpc_id
        self.vpc_cidr = self.outputs.vpc_cidr
        self.public_subnet_ids = self.outputs.public_subnet_ids
        self.private_subnet_ids = self.outputs.private_subnet_ids
        self.public_route_table_id = self.outputs.public_route_table_id
        self.private_route_table_ids = self.outputs.private_route_table_ids
        self.nat_gateway_ids = self.outputs.nat_gateway_ids
        self.internet_gateway_id = self.outputs.internet_gateway_id
        self.flow_log_id = self.outputs.flow_log_id

        self.register_outputs(self.outputs.as_dict())
