"""
Shared domain primitives: time slots and capabilities.
"""

from src.shared.time_slot import TimeSlot
from src.shared.capability import Capability, CapabilitySelector, SelectingPolicy

__all__ = [
    "TimeSlot",
    "Capability",
    "CapabilitySelector",
    "SelectingPolicy",
]
