# aws_vpc/tags.py
from __future__ import annotations
from typing import Dict, Optional
from aws_vpc.args import VpcArgs

MANAGED_BY = "pulumi"


def create_tags(args: VpcArgs, name: Optional[str] = None, **extra: str) -> Dict[str, str]:
    """Standard tag set for one resource; user tags from args.tags win on key clashes."""
    tags: Dict[str, str] = {}
    if name:
        tags["Name"] = name
    tags.update({"Environment": args.environment, "Project": args.project})
    tags.update(extra)
    tags["ManagedBy"] = MANAGED_BY
    tags.update(args.tags or {})
    return tags
