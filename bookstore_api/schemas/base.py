"""
Shared Schema Configuration

The API speaks camelCase JSON (firstName, authorId) while Python code
uses snake_case attributes. CamelModel generates the aliases once so each
schema only declares its fields.
"""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

# Largest value a 64-bit signed INTEGER primary key can hold
MAX_ID = 2**63 - 1


class CamelModel(BaseModel):
    """
    Base model for every request/response DTO.

    - alias_generator: first_name <-> "firstName" in JSON
    - populate_by_name: snake_case keys are accepted on input too
    - from_attributes: read DTOs can be built from ORM entities
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )
