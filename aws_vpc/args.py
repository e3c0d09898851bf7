# aws_vpc/args.py
from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional
import pulumi


@dataclass
class VpcArgs:
    """
    Inputs for the VPC component.

    Subnet CIDRs pair with availability zones by index: public_subnet_cidrs[i]
    and private_subnet_cidrs[i] both land in availability_zones[i].
    """
    cidr_block: str
    availability_zones: List[str]
    public_subnet_cidrs: List[str]
    private_subnet_cidrs: List[str]
    environment: str
    project: str
    instance_tenancy: str = "default"
    # only an explicit False turns these off
    enable_nat_gateway: Optional[bool] = True
    enable_flow_logs: Optional[bool] = True
    flow_log_retention_days: int = 7
    tags: Dict[str, str] = field(default_factory=dict)


@dataclass
class VpcOutputs:
    """Identifiers exposed by the VPC component. List outputs follow zone order."""
    vpc_id: pulumi.Output[str]
    vpc_cidr: pulumi.Output[str]
    public_subnet_ids: pulumi.Output[List[str]]
    private_subnet_ids: pulumi.Output[List[str]]
    public_route_table_id: pulumi.Output[str]
    private_route_table_ids: pulumi.Output[List[str]]
    nat_gateway_ids: pulumi.Output[List[str]]
    internet_gateway_id: pulumi.Output[str]
    # None means flow logging is disabled, not that the id is still unknown
    flow_log_id: Optional[pulumi.Output[str]] = None

    @property
    def flow_logs_enabled(self) -> bool:
        return self.flow_log_id is not None

    def as_dict(self) -> Dict[str, Any]:
        return {
            "vpcId": self.vpc_id,
            "vpcCidr": self.vpc_cidr,
            "publicSubnetIds": self.public_subnet_ids,
            "privateSubnetIds": self.private_subnet_ids,
            "publicRouteTableId": self.public_route_table_id,
            "privateRouteTableIds": self.private_route_table_ids,
            "natGatewayIds": self.nat_gateway_ids,
            "internetGatewayId": self.internet_gateway_id,
            "flowLogId": self.flow_log_id,
        }
