"""Trigger resources."""

from .models import TriggerDefinition, TriggerOperation, TriggerResponse, TriggerType
from .trigger import Trigger
from .triggers import Triggers

__all__ = [
    "Trigger",
    "TriggerDefinition",
    "TriggerOperation",
    "TriggerResponse",
    "TriggerType",
    "Triggers",
]
