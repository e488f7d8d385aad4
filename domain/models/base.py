"""
Shared base model for camelCase JSON payloads.

Clients send and receive camelCase keys (``ownerId``, ``isCompleted``); Python
code uses snake_case attributes. Both spellings are accepted on input.
"""

from uuid import uuid4

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


def new_id() -> str:
    """Generate a canonical entity identifier."""
    return str(uuid4())


class CamelModel(BaseModel):
    """Base model serializing to camelCase and accepting either casing."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
    )
