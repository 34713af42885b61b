# stock_hub/db/models/common.py
from typing import Any, Dict

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class LedgerModel(BaseModel):
    """Base for rows persisted in the JSON ledgers.

    Attributes are snake_case in Python and camelCase on disk. Fields the
    model does not declare are kept and written back untouched so that
    collaborators sharing the files do not lose data.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="allow",
    )

    def to_row(self) -> Dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True)
