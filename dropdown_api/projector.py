"""
Reshape a normalized collection into the response the dropdown widget asked for.

Everything here is pure: no I/O, no config lookups. Upstream data is loosely
typed, so every read goes through the small helpers below instead of indexing.
"""
from typing import Any

from .errors import NotFoundError
from .models import (
    OUTPUT_CAR_SELECTION,
    OUTPUT_WINDOW_SELECTION,
    Collection,
    MultiSelectResponse,
    OptionEntry,
    OptionsResponse,
)

RENDER_NAME_KEY = "RenderName"
IMAGE_KEY = "Image"
WINDOW_PARTS_KEY = "WindowParts"
MULTI_SELECT_TYPE = "multi_select"


def _item_data(item: Any) -> dict:
    if not isinstance(item, dict):
        return {}
    data = item.get("data")
    return data if isinstance(data, dict) else {}


def _as_list(value: Any) -> list:
    return list(value) if isinstance(value, list) else []


def _field_options(field: dict) -> list:
    # Duda sends snake_case; older editor payloads used camelCase
    options = field.get("multi_select_options")
    if options is None:
        options = field.get("multiSelectOptions")
    return _as_list(options)


def car_options(collection: Collection) -> OptionsResponse:
    options = []
    for item in collection.values:
        data = _item_data(item)
        label = data.get(RENDER_NAME_KEY)
        if not isinstance(label, str) or not label.strip():
            continue
        image = data.get(IMAGE_KEY)
        options.append(OptionEntry(value=image if isinstance(image, str) else "", label=label))
    return OptionsResponse(options=options)


def window_parts_for(collection: Collection, render_name: str, strict: bool = False) -> MultiSelectResponse:
    """Window parts of the first item whose RenderName equals `render_name` exactly."""
    for item in collection.values:
        data = _item_data(item)
        if data.get(RENDER_NAME_KEY) == render_name:
            return MultiSelectResponse(multi_select_options=_as_list(data.get(WINDOW_PARTS_KEY)))
    if strict:
        raise NotFoundError(details=f"No item with RenderName '{render_name}'")
    return MultiSelectResponse()


def declared_window_parts(collection: Collection) -> MultiSelectResponse:
    for field in collection.fields:
        if not isinstance(field, dict):
            continue
        if field.get("name") == WINDOW_PARTS_KEY and field.get("type") == MULTI_SELECT_TYPE:
            options = _field_options(field)
            if options:
                return MultiSelectResponse(multi_select_options=options)
            break
    raise NotFoundError(details=f"No '{WINDOW_PARTS_KEY}' multi_select field with options")


def project(
    collection: Collection,
    output: str,
    filter: str | None = None,
    strict_item_match: bool = False,
) -> dict:
    if output == OUTPUT_CAR_SELECTION:
        return car_options(collection).model_dump()
    if output == OUTPUT_WINDOW_SELECTION:
        if filter is not None:
            return window_parts_for(collection, filter, strict=strict_item_match).model_dump()
        return declared_window_parts(collection).model_dump()
    return collection.model_dump()
