from __future__ import annotations

from typing import Any, List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

Action = Literal["select", "insert", "update", "delete"]


def _as_text(value: Any) -> Any:
    # the parser decodes bare true/false/123; these fields are SQL text
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int):
        return str(value)
    return value


def _as_list(value: Any) -> Any:
    # "key:" with no items leaves an empty placeholder mapping behind
    if value is None or value == {}:
        return []
    return value


class PolicyEntry(BaseModel):
    name: str
    actions: List[Action] = Field(default_factory=list)
    role: Optional[str] = None
    using: Optional[str] = None
    check: Optional[str] = None

    model_config = ConfigDict(extra="ignore")

    @field_validator("name", "role", "using", "check", mode="before")
    @classmethod
    def _coerce_text(cls, value: Any) -> Any:
        return _as_text(value)

    @field_validator("actions", mode="before")
    @classmethod
    def _coerce_actions(cls, value: Any) -> Any:
        return _as_list(value)


class TableConfig(BaseModel):
    name: str = Field(min_length=1)
    enable_rls: bool = False
    force_rls: bool = False
    policies: List[PolicyEntry] = Field(default_factory=list)

    model_config = ConfigDict(extra="ignore")

    @field_validator("name", mode="before")
    @classmethod
    def _coerce_name(cls, value: Any) -> Any:
        return _as_text(value)

    @field_validator("policies", mode="before")
    @classmethod
    def _coerce_policies(cls, value: Any) -> Any:
        return _as_list(value)


class PolicyConfig(BaseModel):
    version: Optional[int] = None
    tables: List[TableConfig]

    model_config = ConfigDict(extra="ignore")
