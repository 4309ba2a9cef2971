"""
Fact schema.

Strongly typed contract between the collectors that publish facts and the
consumers (renderers, get_blkid_info) that read them back.
"""

from typing import Dict, List, Optional, Union

from pydantic import BaseModel, Field


# A single device: attribute name -> value. Always holds "dev".
DeviceRecord = Dict[str, str]

# Devices in the order blkid printed them. Index i (1-based) names the facts.
DeviceSet = List[DeviceRecord]

FactValue = Union[bool, str]


# --- Configuration ---


class CollectorConfig(BaseModel):
    """Knobs for a fact-collection cycle. Built from CLI flags."""

    command_name: str = "blkid"
    package_name: str = "e2fsprogs"
    install_missing: bool = True
    base_priority: int = 200
    locator_priority: int = 500  # really early
    prefix: str = "blkid_"
    kernel: Optional[str] = None  # None -> platform.system()

    model_config = {"extra": "forbid"}


# --- Facts ---


class Fact(BaseModel):
    """One published fact. Higher priority is resolved (and printed) first."""

    name: str
    value: FactValue
    priority: int = 0


class FactNamespace(BaseModel):
    """
    Names of every fact on the wire between the collector and get_blkid_info.

    Renaming any of these (or the escaping of the tags list) is a breaking
    change for consumers of previously published facts.
    """

    prefix: str = "blkid_"

    @property
    def cmd(self) -> str:
        return f"{self.prefix}cmd"

    @property
    def cmd_failed(self) -> str:
        return f"{self.prefix}cmd_failed"

    @property
    def info_ok(self) -> str:
        return f"{self.prefix}info_ok"

    @property
    def info_err(self) -> str:
        return f"{self.prefix}info_err"

    @property
    def dev_count(self) -> str:
        return f"{self.prefix}dev_count"

    def dev_tags(self, index: int) -> str:
        return f"{self.prefix}dev_{index}_tags"

    def dev_tag(self, index: int, key: str) -> str:
        return f"{self.prefix}dev_{index}_tag_{key}"


# --- Root snapshot ---


class FactSnapshot(BaseModel):
    """
    Everything one collection cycle published. Serialized as facts-snapshot.json.
    """

    meta: dict = Field(default_factory=dict)  # hostname, timestamp, prefix
    facts: List[Fact] = Field(default_factory=list)

    # Degraded paths recorded by collectors and renderers
    warnings: List[dict] = Field(default_factory=list)

    model_config = {"extra": "forbid"}
