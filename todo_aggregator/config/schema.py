# todo_aggregator/config/schema.py
from __future__ import annotations

from typing import Any, List

from pydantic import BaseModel, ConfigDict, Field, field_validator

from todo_aggregator.core.paths import normalize_document_path

DEFAULT_TARGET_PATH = "Todo Dashboard.md"


class AggregatorSettings(BaseModel):
    """
    Settings for one vault.

    Frozen: an aggregation run treats its settings as immutable input.
    Unknown keys in a stored file are ignored.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    target_path: str = Field(
        default=DEFAULT_TARGET_PATH,
        description="Vault-relative path of the generated dashboard document.",
    )
    excluded_prefixes: List[str] = Field(
        default_factory=list,
        description="Folders whose documents are never scanned.",
    )

    @field_validator("excluded_prefixes", mode="before")
    @classmethod
    def _split_comma_list(cls, value: Any) -> Any:
        # "templates, archive" is accepted as well as a YAML list
        if value is None:
            return []
        if isinstance(value, str):
            return [part.strip() for part in value.split(",") if part.strip()]
        return value

    @field_validator("target_path")
    @classmethod
    def _canonical_target(cls, value: str) -> str:
        # "./Todo Dashboard.md" must compare equal to the scanned "Todo Dashboard.md"
        return normalize_document_path(value.strip())

    def with_updates(self, **changes: Any) -> "AggregatorSettings":
        """Return a validated copy with the given fields replaced."""
        data = self.model_dump()
        data.update({k: v for k, v in changes.items() if v is not None})
        return AggregatorSettings.model_validate(data)
