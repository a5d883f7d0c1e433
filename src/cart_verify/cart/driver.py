"""
Cart collaborator interface

The consistency model only talks to the cart through this protocol. The
Playwright CartPage implements it for the live storefront and tests use an
in-memory fake.
"""

from typing import Optional, Protocol, runtime_checkable


@runtime_checkable
class CartDriver(Protocol):

    async def count_rows(self) -> int:
        """Number of line item rows currently rendered"""
        ...

    async def row_name(self, position: int) -> str:
        """Trimmed display name of the row at position"""
        ...

    async def row_price_text(self, position: int) -> Optional[str]:
        """Raw price text of the row at position"""
        ...

    async def total_text(self) -> Optional[str]:
        """Raw text of the reported cart total"""
        ...

    async def delete_row(self, position: int) -> None:
        """
        Delete the row at position and return once the deletion is visible
        (row gone, row count down by one). Raises SettlementTimeout otherwise.
        """
        ...
