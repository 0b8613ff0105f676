"""Item resources."""

from .models import ItemDefinition, ItemResponse
from .item import Item
from .items import Items

__all__ = ["Item", "ItemDefinition", "ItemResponse", "Items"]
