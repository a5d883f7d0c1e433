from typing import List, Optional, Tuple
from pydantic import BaseModel, ConfigDict, Field


# -------------------------
# LINE ITEM
# -------------------------

class LineItem(BaseModel):
    """One cart row as rendered. Position is only valid until the next mutation."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(min_length=1)
    unit_price: int = Field(ge=0)
    position: int = Field(ge=0)


# -------------------------
# SNAPSHOT
# -------------------------

class CartSnapshot(BaseModel):
    """Rows plus reported total from a single read of the cart view."""

    model_config = ConfigDict(frozen=True)

    items: Tuple[LineItem, ...] = ()
    reported_total: int = Field(default=0, ge=0)

    @property
    def count(self) -> int:
        return len(self.items)

    @property
    def line_sum(self) -> int:
        return sum(item.unit_price for item in self.items)

    @property
    def is_consistent(self) -> bool:
        return self.reported_total == self.line_sum

    @property
    def names(self) -> List[str]:
        return [item.name for item in self.items]

    def find(self, name: str) -> Optional[LineItem]:
        """First item whose name matches exactly"""
        for item in self.items:
            if item.name == name:
                return item
        return None
