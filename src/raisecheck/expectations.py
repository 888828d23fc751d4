"""Declarative expectation models.

Each model describes one check. A model (or the equivalent dict, e.g.
``{"throws_exactly": ValueError}`` or ``{"message_contains": "boom"}``) can be
passed to ``ExceptionAssertion.satisfies`` or
``raisecheck.assertions.evaluate_expectation``.
"""

from __future__ import annotations

import importlib
import re
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, TypeAdapter, field_validator


def resolve_exception_type(value: Any) -> Any:
    """Resolve a dotted path like "json.JSONDecodeError" to the class it names.

    Bare names ("ValueError") are looked up in builtins. Anything that is not
    a string is returned unchanged for pydantic to validate.
    """
    if not isinstance(value, str):
        return value

    module_name, _, attr = value.rpartition(".")
    try:
        module = importlib.import_module(module_name or "builtins")
    except ImportError as e:
        raise ValueError(f"Cannot import module '{module_name}' for '{value}'") from e

    resolved = getattr(module, attr, None)
    if not (isinstance(resolved, type) and issubclass(resolved, BaseException)):
        raise ValueError(f"'{value}' does not name an exception class")
    return resolved


def _require_non_empty(v: str) -> str:
    if not v:
        raise ValueError("search term must not be empty")
    return v


class ThrowsAnyExpectation(BaseModel):
    model_config = ConfigDict(extra="forbid")
    throws_any: Literal[True]


class DoesNotThrowExpectation(BaseModel):
    model_config = ConfigDict(extra="forbid")
    does_not_throw: Literal[True]


class ThrowsExactlyExpectation(BaseModel):
    model_config = ConfigDict(extra="forbid")
    throws_exactly: type[BaseException]

    @field_validator("throws_exactly", mode="before")
    @classmethod
    def resolve_dotted_type(cls, v: Any) -> Any:
        return resolve_exception_type(v)


class ThrowsSubtypeOfExpectation(BaseModel):
    model_config = ConfigDict(extra="forbid")
    throws_subtype_of: type[BaseException]

    @field_validator("throws_subtype_of", mode="before")
    @classmethod
    def resolve_dotted_type(cls, v: Any) -> Any:
        return resolve_exception_type(v)


class WrapsExactlyExpectation(BaseModel):
    model_config = ConfigDict(extra="forbid")
    wraps_exactly: type[BaseException]
    recursive: bool = False

    @field_validator("wraps_exactly", mode="before")
    @classmethod
    def resolve_dotted_type(cls, v: Any) -> Any:
        return resolve_exception_type(v)


class WrapsSubtypeOfExpectation(BaseModel):
    model_config = ConfigDict(extra="forbid")
    wraps_subtype_of: type[BaseException]
    recursive: bool = False

    @field_validator("wraps_subtype_of", mode="before")
    @classmethod
    def resolve_dotted_type(cls, v: Any) -> Any:
        return resolve_exception_type(v)


class WithCauseExpectation(BaseModel):
    model_config = ConfigDict(extra="forbid")
    with_cause: type[BaseException] | None

    @field_validator("with_cause", mode="before")
    @classmethod
    def resolve_dotted_type(cls, v: Any) -> Any:
        return resolve_exception_type(v)


class MessageEqualsExpectation(BaseModel):
    model_config = ConfigDict(extra="forbid")
    message_equals: str | None


class MessageContainsExpectation(BaseModel):
    model_config = ConfigDict(extra="forbid")
    message_contains: str

    @field_validator("message_contains")
    @classmethod
    def must_not_be_empty(cls, v: str) -> str:
        return _require_non_empty(v)


class MessageMatchesExpectation(BaseModel):
    model_config = ConfigDict(extra="forbid")
    message_matches: str

    @field_validator("message_matches")
    @classmethod
    def must_be_valid_regex(cls, v: str) -> str:
        _require_non_empty(v)
        try:
            re.compile(v)
        except re.error as e:
            raise ValueError(f"invalid regular expression: {e}") from e
        return v


class CauseMessageContainsExpectation(BaseModel):
    model_config = ConfigDict(extra="forbid")
    cause_message_contains: str

    @field_validator("cause_message_contains")
    @classmethod
    def must_not_be_empty(cls, v: str) -> str:
        return _require_non_empty(v)


Expectation = (
    ThrowsAnyExpectation
    | DoesNotThrowExpectation
    | ThrowsExactlyExpectation
    | ThrowsSubtypeOfExpectation
    | WrapsExactlyExpectation
    | WrapsSubtypeOfExpectation
    | WithCauseExpectation
    | MessageEqualsExpectation
    | MessageContainsExpectation
    | MessageMatchesExpectation
    | CauseMessageContainsExpectation
)

_EXPECTATION_ADAPTER: TypeAdapter[Any] = TypeAdapter(Expectation)


def parse_expectation(raw: dict[str, Any] | BaseModel) -> BaseModel:
    """Validate a raw expectation dict into its model.

    Raises pydantic.ValidationError (a ValueError) for unknown keys, missing
    values, empty search terms, or type names that do not resolve.
    """
    if isinstance(raw, BaseModel):
        return raw
    return _EXPECTATION_ADAPTER.validate_python(raw)
