from aws_vpc.args import VpcArgs, VpcOutputs
from aws_vpc.component import Vpc
from aws_vpc.config import load_vpc_args
from aws_vpc.flow_logs import FlowLogBundle, create_flow_logs
from aws_vpc.networking import create_vpc
from aws_vpc.validation import VpcValidationError, validate_args, validate_cidr_block

__all__ = [
    "Vpc",
    "VpcArgs",
    "VpcOutputs",
    "VpcValidationError",
    "FlowLogBundle",
    "create_flow_logs",
    "create_vpc",
    "load_vpc_args",
    "validate_args",
    "validate_cidr_block",
]
