"""
Shared pydantic base for the persisted entity shapes.

Records are stored and served with camelCase keys; the Python side uses
snake_case attributes.
"""
from typing import Any, Dict
from pydantic import BaseModel
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base model whose fields serialize under camelCase aliases."""

    class Config:
        """Accept both attribute names and aliases, keep unknown keys"""
        alias_generator = to_camel
        populate_by_name = True
        extra = "allow"

    def to_record(self) -> Dict[str, Any]:
        """Dump the model as a JSON-ready record with camelCase keys."""
        return self.model_dump(by_alias=True, exclude_none=True, mode="json")


class StoredEntity(CamelModel):
    """
    Fields the repositories assign to every stored record.

    Fields:
    - id: Epoch-millisecond string, unique within the collection
    - created_at: ISO-8601 creation time
    - updated_at: ISO-8601 time of the last update
    """
    id: str
    created_at: str
    updated_at: str
