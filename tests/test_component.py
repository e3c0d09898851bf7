# tests/test_component.py
from __future__ import annotations
import pulumi
import pytest
from aws_vpc import Vpc, VpcValidationError
from aws_vpc.component import VPC_TYPE
from conftest import SUBNET, declare, make_args


def test_component_exposes_outputs(mocks):
    seen = {}

    def run():
        vpc = Vpc("test", make_args(enable_flow_logs=False))
        seen["flow_log_id"] = vpc.flow_log_id
        return pulumi.Output.all(vpc.vpc_id, vpc.public_subnet_ids, vpc.nat_gateway_ids).apply(
            lambda values: seen.update(vpc_id=values[0], public_subnet_ids=values[1], nat_gateway_ids=values[2]))

    declare(run)

    assert seen["vpc_id"] == "test-vpc_id"
    assert seen["public_subnet_ids"] == ["test-public-us-east-1a_id", "test-public-us-east-1b_id"]
    assert len(seen["nat_gateway_ids"]) == 2
    assert seen["flow_log_id"] is None
    assert len(mocks.of_type(SUBNET)) == 4


def test_component_rejects_before_registering(mocks):
    with pytest.raises(VpcValidationError, match="project is required"):
        Vpc("test", make_args(project=""))
    assert [r for r in mocks.resources if r.typ.startswith("aws:")] == []


def test_component_urn_carries_type_token(mocks):
    seen = {}

    def run():
        vpc = Vpc("test", make_args())
        return vpc.urn.apply(lambda urn: seen.update(urn=urn))

    declare(run)

    qualified_type, name = seen["urn"].split("::")[-2:]
    assert qualified_type.split("$")[-1] == VPC_TYPE
    assert name == "test"
    assert VPC_TYPE == "proserve:aws:Vpc"
