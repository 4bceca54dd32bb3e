"""
Capabilities a resource can bring, and selectors describing how a resource
can combine them.
"""

from dataclasses import dataclass
from enum import Enum
from typing import FrozenSet, Iterable


@dataclass(frozen=True)
class Capability:
    """A named capability of a given type (skill, permission, asset)."""

    name: str
    type: str

    @classmethod
    def skill(cls, name: str) -> "Capability":
        return cls(name, "SKILL")

    @classmethod
    def permission(cls, name: str) -> "Capability":
        return cls(name, "PERMISSION")

    @classmethod
    def asset(cls, name: str) -> "Capability":
        return cls(name, "ASSET")

    def is_of_type(self, capability_type: str) -> bool:
        return self.type == capability_type


class SelectingPolicy(str, Enum):
    """How the capabilities of a selector may be used."""
    ALL_SIMULTANEOUSLY = "all_simultaneously"
    ONE_OF_ALL = "one_of_all"


@dataclass(frozen=True)
class CapabilitySelector:
    """
    A set of capabilities and the policy for using them.

    ``ONE_OF_ALL`` means the resource can perform any single capability of the
    set; ``ALL_SIMULTANEOUSLY`` means it can perform any subset at once.
    """

    capabilities: FrozenSet[Capability]
    selecting_policy: SelectingPolicy

    @classmethod
    def can_perform_one_of(cls, capabilities: Iterable[Capability]) -> "CapabilitySelector":
        return cls(frozenset(capabilities), SelectingPolicy.ONE_OF_ALL)

    @classmethod
    def can_perform_all_at_the_time(cls, capabilities: Iterable[Capability]) -> "CapabilitySelector":
        return cls(frozenset(capabilities), SelectingPolicy.ALL_SIMULTANEOUSLY)

    @classmethod
    def can_just_perform(cls, capability: Capability) -> "CapabilitySelector":
        return cls(frozenset([capability]), SelectingPolicy.ONE_OF_ALL)

    def can_perform(self, *capabilities: Capability) -> bool:
        if len(capabilities) == 1:
            return capabilities[0] in self.capabilities
        if self.selecting_policy == SelectingPolicy.ONE_OF_ALL:
            return False
        return set(capabilities).issubset(self.capabilities)
