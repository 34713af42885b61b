from stock_hub.core.config import settings
from stock_hub.db.json_store import JsonFileStore
from stock_hub.db.store import LedgerStore

DATA_DIR = settings.DATA_DIR

store = JsonFileStore(DATA_DIR)


def get_store() -> LedgerStore:
    return store
