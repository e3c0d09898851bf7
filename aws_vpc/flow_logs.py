# aws_vpc/flow_logs.py
from __future__ import annotations
import json
from dataclasses import dataclass
import pulumi
import pulumi_aws as aws
from aws_vpc.args import VpcArgs
from aws_vpc.tags import create_tags

DEFAULT_RETENTION_DAYS = 7
FLOW_LOGS_SERVICE = "vpc-flow-logs.amazonaws.com"
FLOW_LOG_ACTIONS = [
    "logs:CreateLogGroup",
    "logs:CreateLogStream",
    "logs:PutLogEvents",
    "logs:DescribeLogGroups",
    "logs:DescribeLogStreams",
]


@dataclass
class FlowLogBundle:
    log_group: aws.cloudwatch.LogGroup
    role: aws.iam.Role
    role_policy: aws.iam.RolePolicy
    flow_log: aws.ec2.FlowLog


def log_group_name(name: str) -> str:
    return f"/aws/vpc/flow-logs/{name}"


def _flow_logs_assume_policy() -> str:
    return json.dumps({
        "Version": "2012-10-17",
        "Statement": [{
            "Action": "sts:AssumeRole",
            "Principal": {"Service": FLOW_LOGS_SERVICE},
            "Effect": "Allow",
        }],
    })


def _flow_logs_write_policy(log_group_arn: str) -> str:
    doc = {
        "Version": "2012-10-17",
        "Statement": [{
            "Effect": "Allow",
            "Action": FLOW_LOG_ACTIONS,
            "Resource": log_group_arn,
        }],
    }
    return json.dumps(doc)


def create_flow_logs(name: str, vpc: aws.ec2.Vpc, args: VpcArgs, opts: pulumi.ResourceOptions) -> FlowLogBundle:
    """
    Log group, delivery role, role policy and an ALL-traffic flow log for the VPC.
    The four resources are declared together or not at all.
    """
    retention = args.flow_log_retention_days or DEFAULT_RETENTION_DAYS

    log_group = aws.cloudwatch.LogGroup(f"{name}-flow-logs",
        name=log_group_name(name),
        retention_in_days=retention,
        tags=create_tags(args),
        opts=opts)

    role = aws.iam.Role(f"{name}-flow-log-role",
        assume_role_policy=_flow_logs_assume_policy(),
        tags=create_tags(args),
        opts=opts)

    role_policy = aws.iam.RolePolicy(f"{name}-flow-log-policy",
        role=role.id,
        policy=log_group.arn.apply(_flow_logs_write_policy),
        opts=opts)

    flow_log = aws.ec2.FlowLog(f"{name}-flow-log",
        vpc_id=vpc.id,
        traffic_type="ALL",
        log_destination=log_group.arn,
        iam_role_arn=role.arn,
        tags=create_tags(args, f"{name}-flow-log"),
        opts=opts)

    pulumi.log.info(f"create_flow_logs: name={name} log_group={log_group_name(name)} retention_days={retention}")
    return FlowLogBundle(log_group=log_group, role=role, role_policy=role_policy, flow_log=flow_log)
