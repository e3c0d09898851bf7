# aws_vpc/networking.py
from __future__ import annotations
from typing import List, Optional
import pulumi
import pulumi_aws as aws
from aws_vpc.args import VpcArgs, VpcOutputs
from aws_vpc.flow_logs import create_flow_logs
from aws_vpc.tags import create_tags
from aws_vpc.validation import validate_args

ANYWHERE = "0.0.0.0/0"


def create_vpc(name: str, args: VpcArgs, parent: Optional[pulumi.Resource] = None) -> VpcOutputs:
    """
    Validate args, then declare the VPC and its subnets, gateways, route tables
    and flow logging. Every resource is scoped under `parent` when given.
    """
    validate_args(args)
    return _build_vpc(name, args, parent)


def _build_vpc(name: str, args: VpcArgs, parent: Optional[pulumi.Resource] = None) -> VpcOutputs:
    opts = pulumi.ResourceOptions(parent=parent)
    azs = args.availability_zones

    pulumi.log.info(f"create_vpc: name={name} cidr={args.cidr_block} azs={len(azs)} nat={args.enable_nat_gateway} flow_logs={args.enable_flow_logs}")

    vpc = aws.ec2.Vpc(f"{name}-vpc",
                      cidr_block=args.cidr_block,
                      enable_dns_hostnames=True,
                      enable_dns_support=True,
                      instance_tenancy=args.instance_tenancy or "default",
                      tags=create_tags(args, f"{name}-vpc"),
                      opts=opts)

    igw = aws.ec2.InternetGateway(f"{name}-igw", vpc_id=vpc.id, tags=create_tags(args, f"{name}-igw"), opts=opts)

    public_subnets: List[aws.ec2.Subnet] = []
    private_subnets: List[aws.ec2.Subnet] = []
    for az, cidr in zip(azs, args.public_subnet_cidrs):
        sn = aws.ec2.Subnet(f"{name}-public-{az}", vpc_id=vpc.id, cidr_block=cidr, availability_zone=az, map_public_ip_on_launch=True,
                            tags=create_tags(args, f"{name}-public-{az}", Type="public"), opts=opts)
        public_subnets.append(sn)
    for az, cidr in zip(azs, args.private_subnet_cidrs):
        sn = aws.ec2.Subnet(f"{name}-private-{az}", vpc_id=vpc.id, cidr_block=cidr, availability_zone=az, map_public_ip_on_launch=False,
                            tags=create_tags(args, f"{name}-private-{az}", Type="private"), opts=opts)
        private_subnets.append(sn)

    public_rt = aws.ec2.RouteTable(f"{name}-public-rt",
                                   vpc_id=vpc.id,
                                   routes=[aws.ec2.RouteTableRouteArgs(cidr_block=ANYWHERE, gateway_id=igw.id)],
                                   tags=create_tags(args, f"{name}-public-rt", Type="public"),
                                   opts=opts)
    for i, sn in enumerate(public_subnets):
        aws.ec2.RouteTableAssociation(f"{name}-public-rta-{i}", subnet_id=sn.id, route_table_id=public_rt.id, opts=opts)

    nat_gateways: List[aws.ec2.NatGateway] = []
    private_route_tables: List[aws.ec2.RouteTable] = []
    if args.enable_nat_gateway is not False:
        pulumi.log.info(f"create_vpc: creating {len(azs)} NAT gateways")
        for idx, az in enumerate(azs):
            eip = aws.ec2.Eip(f"{name}-nat-eip-{az}", domain="vpc", tags=create_tags(args, f"{name}-nat-eip-{az}"), opts=opts)
            nat = aws.ec2.NatGateway(f"{name}-nat-{az}", allocation_id=eip.id, subnet_id=public_subnets[idx].id,
                                     tags=create_tags(args, f"{name}-nat-{az}"), opts=opts)
            nat_gateways.append(nat)
            prt = aws.ec2.RouteTable(f"{name}-private-rt-{az}",
                                     vpc_id=vpc.id,
                                     routes=[aws.ec2.RouteTableRouteArgs(cidr_block=ANYWHERE, nat_gateway_id=nat.id)],
                                     tags=create_tags(args, f"{name}-private-rt-{az}", Type="private"),
                                     opts=opts)
            private_route_tables.append(prt)
    else:
        pulumi.log.warn(f"create_vpc: NAT disabled for {name}; private subnets get no default route")
        for az in azs:
            prt = aws.ec2.RouteTable(f"{name}-private-rt-{az}", vpc_id=vpc.id,
                                     tags=create_tags(args, f"{name}-private-rt-{az}", Type="private"), opts=opts)
            private_route_tables.append(prt)

    # index pairing: private subnet i always uses the route table built for azs[i]
    for i, (sn, prt) in enumerate(zip(private_subnets, private_route_tables)):
        aws.ec2.RouteTableAssociation(f"{name}-private-rta-{i}", subnet_id=sn.id, route_table_id=prt.id, opts=opts)

    aws.ec2.DefaultSecurityGroup(f"{name}-default-sg",
                                 vpc_id=vpc.id,
                                 egress=[aws.ec2.DefaultSecurityGroupEgressArgs(protocol="-1", from_port=0, to_port=0, cidr_blocks=[ANYWHERE])],
                                 tags=create_tags(args, f"{name}-default-sg"),
                                 opts=opts)

    flow_log_id = None
    if args.enable_flow_logs is not False:
        bundle = create_flow_logs(name, vpc, args, opts)
        flow_log_id = bundle.flow_log.id

    return VpcOutputs(
        vpc_id=vpc.id,
        vpc_cidr=vpc.cidr_block,
        public_subnet_ids=pulumi.Output.all(*[s.id for s in public_subnets]),
        private_subnet_ids=pulumi.Output.all(*[s.id for s in private_subnets]),
        public_route_table_id=public_rt.id,
        private_route_table_ids=pulumi.Output.all(*[rt.id for rt in private_route_tables]),
        nat_gateway_ids=pulumi.Output.all(*[n.id for n in nat_gateways]),
        internet_gateway_id=igw.id,
        flow_log_id=flow_log_id,
    )
