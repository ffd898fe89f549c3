"""Shared base for schemas parsed from the trainer backend's camelCase JSON."""

from typing import Any

from pydantic import BaseModel, ConfigDict, model_validator
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Accepts camelCase keys, ignores unknown ones, treats null as absent."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )

    @model_validator(mode="before")
    @classmethod
    def drop_nulls(cls, data: Any) -> Any:
        # Lets list and string fields fall back to their defaults on null.
        if isinstance(data, dict):
            return {key: value for key, value in data.items() if value is not None}
        return data
