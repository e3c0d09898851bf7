# aws_vpc/config.py
from __future__ import annotations
import os
from typing import Any, Dict, List, Optional
import pulumi
from aws_vpc.args import VpcArgs
from aws_vpc.validation import VpcValidationError


class _Settings:
    """Env var first, then pulumi config, then the default."""

    def __init__(self, cfg: Any):
        self.cfg = cfg

    def get(self, env: str, key: str, default: Optional[str] = None) -> Optional[str]:
        v = os.getenv(env)
        if v is None:
            v = self.cfg.get(key)
        return v if v is not None else default

    def get_bool(self, env: str, key: str, default: bool) -> bool:
        v = self.get(env, key, None)
        if v is None:
            return default
        return str(v).strip().lower() not in ("0", "false", "no", "")

    def get_int(self, env: str, key: str, default: int) -> int:
        v = self.get(env, key, None)
        if v is None:
            return default
        try:
            return int(v)
        except ValueError:
            raise VpcValidationError(f"{key} must be an integer, got '{v}'")

    def get_object(self, key: str) -> Any:
        try:
            return self.cfg.get_object(key)
        except pulumi.ConfigTypeError:
            raise VpcValidationError(f"{key} must be valid JSON")

    def get_list(self, env: str, key: str) -> List[str]:
        v = os.getenv(env)
        if v is None:
            v = self.cfg.get(key)
            # YAML lists in Pulumi.<stack>.yaml arrive as JSON text
            if v is not None and v.lstrip().startswith("["):
                return [str(s).strip() for s in (self.get_object(key) or []) if str(s).strip()]
        return [s.strip() for s in (v or "").split(",") if s.strip()]

    def get_tags(self, key: str) -> Dict[str, str]:
        obj = self.get_object(key) or {}
        if not isinstance(obj, dict):
            raise VpcValidationError(f"{key} must be a map of tag names to values")
        return {str(k): str(v) for k, v in obj.items()}


def load_vpc_args(cfg: Optional[Any] = None) -> VpcArgs:
    """Build VpcArgs from the environment and the current stack's pulumi config."""
    s = _Settings(cfg if cfg is not None else pulumi.Config())
    args = VpcArgs(
        cidr_block=s.get("VPC_CIDR", "cidrBlock", "") or "",
        availability_zones=s.get_list("AVAILABILITY_ZONES", "availabilityZones"),
        public_subnet_cidrs=s.get_list("PUBLIC_SUBNET_CIDRS", "publicSubnetCidrs"),
        private_subnet_cidrs=s.get_list("PRIVATE_SUBNET_CIDRS", "privateSubnetCidrs"),
        environment=s.get("ENVIRONMENT", "environment", "") or "",
        project=s.get("PROJECT", "project", "") or "",
        instance_tenancy=s.get("INSTANCE_TENANCY", "instanceTenancy", "default") or "default",
        enable_nat_gateway=s.get_bool("ENABLE_NAT_GATEWAY", "enableNatGateway", True),
        enable_flow_logs=s.get_bool("ENABLE_FLOW_LOGS", "enableFlowLogs", True),
        flow_log_retention_days=s.get_int("FLOW_LOG_RETENTION_DAYS", "flowLogRetentionDays", 7),
        tags=s.get_tags("tags"),
    )
    pulumi.log.info(f"load_vpc_args: cidr={args.cidr_block} azs={args.availability_zones} nat={args.enable_nat_gateway} flow_logs={args.enable_flow_logs}")
    return args
