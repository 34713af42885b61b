# stock_hub/db/store.py
import enum
from abc import ABC, abstractmethod
from typing import Any, Dict, List


class Collection(str, enum.Enum):
    PRODUCTS = "products"
    WAREHOUSES = "warehouses"
    STOCK = "stock"
    TRANSFERS = "transfers"
    ALERTS = "alerts"


class LedgerStore(ABC):
    """Whole-collection access to the inventory ledgers.

    A store only knows how to hand back every row of a collection and how to
    replace a collection wholesale. There is no partial update API: callers
    read everything, mutate in memory and write everything back. A missing
    collection reads as an empty list.
    """

    @abstractmethod
    def load_all(self, collection: Collection) -> List[Dict[str, Any]]:
        ...

    @abstractmethod
    def replace_all(self, collection: Collection, rows: List[Dict[str, Any]]) -> None:
        ...
