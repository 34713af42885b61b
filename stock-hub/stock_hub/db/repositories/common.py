# stock_hub/db/repositories/common.py
from typing import List, Type, TypeVar

from pydantic import ValidationError

from stock_hub.core.errors import StorageFailure
from stock_hub.db.models.common import LedgerModel
from stock_hub.db.store import Collection, LedgerStore

M = TypeVar("M", bound=LedgerModel)


def load_rows(store: LedgerStore, collection: Collection, model: Type[M]) -> List[M]:
    rows = store.load_all(collection)
    try:
        return [model.model_validate(row) for row in rows]
    except ValidationError as e:
        raise StorageFailure(f"Malformed row in {collection.value}", cause=e) from e


def save_rows(store: LedgerStore, collection: Collection, records: List[LedgerModel]) -> None:
    store.replace_all(collection, [r.to_row() for r in records])
