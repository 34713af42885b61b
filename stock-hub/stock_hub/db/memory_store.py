# stock_hub/db/memory_store.py
import copy
from typing import Any, Dict, List, Optional

from stock_hub.db.store import Collection, LedgerStore


class InMemoryStore(LedgerStore):
    """Ledger store kept in a dict; rows are deep-copied in and out."""

    def __init__(self, initial: Optional[Dict[str, List[Dict[str, Any]]]] = None):
        self._collections: Dict[str, List[Dict[str, Any]]] = {}
        for name, rows in (initial or {}).items():
            self._collections[Collection(name).value] = copy.deepcopy(rows)

    def load_all(self, collection: Collection) -> List[Dict[str, Any]]:
        return copy.deepcopy(self._collections.get(Collection(collection).value, []))

    def replace_all(self, collection: Collection, rows: List[Dict[str, Any]]) -> None:
        self._collections[Collection(collection).value] = copy.deepcopy(rows)
