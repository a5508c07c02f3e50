from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

OUTPUT_GENERAL = "general"
OUTPUT_CAR_SELECTION = "carselection"
OUTPUT_WINDOW_SELECTION = "windowselection"

KNOWN_OUTPUTS = (OUTPUT_GENERAL, OUTPUT_CAR_SELECTION, OUTPUT_WINDOW_SELECTION)


class Collection(BaseModel):
    """
    Normalized Duda collection.

    `fields` and `values` are always lists. Entries are kept as raw upstream
    objects, and any other top-level keys (name, customer_lock, ...) ride along
    as extras so the general output round-trips the payload.
    """

    model_config = ConfigDict(extra="allow")

    fields: list[Any] = Field(default_factory=list)
    values: list[Any] = Field(default_factory=list)

    @field_validator("fields", "values", mode="before")
    @classmethod
    def _coerce_list(cls, v):
        return v if isinstance(v, list) else []

    @classmethod
    def from_payload(cls, payload: Any) -> "Collection":
        if not isinstance(payload, dict):
            return cls()
        return cls.model_validate(payload)


class OptionEntry(BaseModel):
    value: str
    label: str


class OptionsResponse(BaseModel):
    options: list[OptionEntry] = Field(default_factory=list)


class MultiSelectResponse(BaseModel):
    multi_select_options: list[Any] = Field(default_factory=list)


class RequestParams(BaseModel):
    site: str = Field(min_length=1)
    collection: str = Field(min_length=1)
    output: str = OUTPUT_GENERAL
    filter: str | None = None
