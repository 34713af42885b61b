from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelSchema(BaseModel):
    """Request/response schema exposed to the dashboard in camelCase."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)
