# stock_hub/db/repositories/alerts.py
from typing import List, Optional

from stock_hub.db.models.alerts import Alert
from stock_hub.db.repositories.common import load_rows, save_rows
from stock_hub.db.store import Collection, LedgerStore


def get_alerts(store: LedgerStore) -> List[Alert]:
    return load_rows(store, Collection.ALERTS, Alert)


def get_alert_by_id(store: LedgerStore, alert_id: str) -> Optional[Alert]:
    return next((a for a in get_alerts(store) if a.id == alert_id), None)


def save_alerts(store: LedgerStore, alerts: List[Alert]) -> None:
    save_rows(store, Collection.ALERTS, alerts)
