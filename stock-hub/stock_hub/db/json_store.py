# stock_hub/db/json_store.py
import json
import logging
import os
import uuid
from pathlib import Path
from typing import Any, Dict, List, Union

from stock_hub.core.errors import StorageFailure
from stock_hub.db.store import Collection, LedgerStore

logger = logging.getLogger(__name__)


class JsonFileStore(LedgerStore):
    """Ledger store backed by one pretty-printed JSON array per collection.

    Writes go to a uniquely named temp file next to the target which is then
    renamed over it, so a concurrent reader sees either the old or the new
    file and never a partial one.
    """

    def __init__(self, data_dir: Union[str, Path]):
        self.data_dir = Path(data_dir)

    def path_for(self, collection: Collection) -> Path:
        return self.data_dir / f"{Collection(collection).value}.json"

    def load_all(self, collection: Collection) -> List[Dict[str, Any]]:
        path = self.path_for(collection)
        try:
            with path.open("r", encoding="utf-8") as fh:
                rows = json.load(fh)
        except FileNotFoundError:
            return []
        except (OSError, ValueError) as e:
            raise StorageFailure(f"Could not read {path.name}", cause=e) from e

        if not isinstance(rows, list):
            raise StorageFailure(f"{path.name} does not contain a JSON array")
        return rows

    def replace_all(self, collection: Collection, rows: List[Dict[str, Any]]) -> None:
        path = self.path_for(collection)
        tmp_path = path.with_name(f"{path.name}.tmp.{uuid.uuid4()}")
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            with tmp_path.open("w", encoding="utf-8") as fh:
                json.dump(rows, fh, indent=2, ensure_ascii=False)
            os.replace(tmp_path, path)
        except (OSError, TypeError, ValueError) as e:
            try:
                tmp_path.unlink()
            except OSError:
                pass
            raise StorageFailure(f"Could not write {path.name}", cause=e) from e

        logger.debug("Wrote %d rows to %s", len(rows), path)
