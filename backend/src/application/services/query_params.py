"""
Query Parameter Models
Pydantic base and field types shared by the read endpoints' query strings.

Keys are camelCase on the wire. Unknown keys are ignored so that older
servers accept newer clients.
"""
from datetime import datetime, timezone
from typing import Annotated, Any, Dict, Iterable, List, Mapping, Optional, Tuple, Type, TypeVar, Union

from loguru import logger
from pydantic import AfterValidator, BaseModel, BeforeValidator, ConfigDict, model_validator
from pydantic import ValidationError as PydanticValidationError
from pydantic.alias_generators import to_camel

from core.exceptions import ValidationException


RawValue = Union[str, List[str]]
RawQuery = Mapping[str, RawValue]
P = TypeVar("P", bound="QueryParams")


def collect_query_params(items: Iterable[Tuple[str, str]]) -> Dict[str, RawValue]:
    """
    Group raw (key, value) pairs before validation

    A key given once maps to a string, a repeated key to a list. A key
    with a ``[]`` suffix (``status[]=APPLIED``) always maps to a list.
    """
    params: Dict[str, RawValue] = {}
    for key, value in items:
        as_list = key.endswith("[]")
        if as_list:
            key = key[:-2]

        current = params.get(key)
        if current is None:
            params[key] = [value] if as_list else value
        elif isinstance(current, list):
            current.append(value)
        else:
            params[key] = [current, value]
    return params


def _parse_flag(value: Any) -> Any:
    if value is None or isinstance(value, bool):
        return value
    if isinstance(value, list):
        raise ValueError("expected a single value")
    if value == "true":
        return True
    if value == "false":
        return False
    raise ValueError("must be 'true' or 'false'")


def _as_utc(value: Optional[datetime]) -> Optional[datetime]:
    """Naive instants are taken as UTC"""
    if value is None:
        return None
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


# "true" / "false" only; 1, yes and on are rejected
Flag = Annotated[Optional[bool], BeforeValidator(_parse_flag)]

# ISO-8601 date or date-time, normalized to UTC
Instant = Annotated[Optional[datetime], AfterValidator(_as_utc)]


def dedupe(value: Any) -> Any:
    """Drop repeated list items keeping first-seen order; empty lists become None"""
    if isinstance(value, list):
        return list(dict.fromkeys(value)) or None
    return value


class QueryParams(BaseModel):
    """Base for query-string models (camelCase keys, unknown keys ignored)"""

    model_config = ConfigDict(
        alias_generator=to_camel,
        extra="ignore",
        frozen=True,
    )

    @model_validator(mode="before")
    @classmethod
    def drop_blank_values(cls, data: Any) -> Any:
        """Blank scalars count as absent, so their defaults apply"""
        if isinstance(data, Mapping):
            return {
                key: value for key, value in data.items()
                if not (isinstance(value, str) and not value.strip())
            }
        return data


def validate_query(model: Type[P], raw: RawQuery) -> P:
    """
    Validate raw query parameters against model

    Raises:
        ValidationException: listing every offending parameter by its
            wire name
    """
    try:
        return model.model_validate(raw)
    except PydanticValidationError as e:
        errors: Dict[str, str] = {}
        for error in e.errors():
            key = str(error["loc"][0]) if error["loc"] else "query"
            errors.setdefault(key, error["msg"])

        logger.warning(f"Rejected query parameters: {errors}")
        raise ValidationException.from_errors(errors) from e
