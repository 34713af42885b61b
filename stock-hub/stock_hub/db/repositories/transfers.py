# stock_hub/db/repositories/transfers.py
from typing import List, Optional

from stock_hub.db.models.transfers import Transfer
from stock_hub.db.repositories.common import load_rows, save_rows
from stock_hub.db.store import Collection, LedgerStore


def get_transfers(store: LedgerStore) -> List[Transfer]:
    return load_rows(store, Collection.TRANSFERS, Transfer)


def get_transfer_by_id(store: LedgerStore, transfer_id: str) -> Optional[Transfer]:
    return next((t for t in get_transfers(store) if t.id == transfer_id), None)


def append_transfer(store: LedgerStore, transfer: Transfer) -> None:
    # re-read so the append lands on the latest log
    transfers = get_transfers(store)
    transfers.append(transfer)
    save_rows(store, Collection.TRANSFERS, transfers)
