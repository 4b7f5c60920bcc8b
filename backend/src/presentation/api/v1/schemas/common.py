"""
Common Schemas
camelCase base model, pagination blocks and the error envelope
"""
from typing import Dict

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base schema: snake_case in Python, camelCase in JSON"""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class PaginationResponse(CamelModel):
    page: int
    limit: int
    total: int
    pages: int


class OffsetPaginationResponse(CamelModel):
    total: int
    limit: int
    offset: int
    has_more: bool


class ErrorDetail(CamelModel):
    message: str
    fields: Dict[str, str] = Field(default_factory=dict)


class ErrorResponse(CamelModel):
    success: bool = False
    error: ErrorDetail
