import json
from typing import Any, Mapping

from . import config
from .errors import BadRequestError
from .models import (
    KNOWN_OUTPUTS,
    OUTPUT_CAR_SELECTION,
    OUTPUT_GENERAL,
    RequestParams,
)


def _clean(value: Any) -> str:
    return value.strip() if isinstance(value, str) else ""


def normalize_output(value: Any, default: str = OUTPUT_GENERAL) -> str:
    output = _clean(value).lower()
    if not output:
        return default
    return output if output in KNOWN_OUTPUTS else OUTPUT_GENERAL


def parse_body(raw: bytes | str | None) -> dict:
    """Decode a JSON request body; anything that isn't a JSON object becomes {}."""
    if not raw:
        return {}
    try:
        data = json.loads(raw)
    except (ValueError, UnicodeDecodeError):
        return {}
    return data if isinstance(data, dict) else {}


def _body_site_name(body: Mapping) -> str:
    site = body.get("site")
    if not isinstance(site, dict):
        return ""
    return _clean(site.get("site_name"))


def _build(site: str, collection: str, output: str, render_name: Any) -> RequestParams:
    missing = [name for name, value in (("site_name", site), ("collection_name", collection)) if not value]
    if missing:
        raise BadRequestError(
            "Missing required parameters: site_name and collection_name",
            details=f"Missing or empty: {', '.join(missing)}",
        )
    return RequestParams(
        site=site,
        collection=collection,
        output=output,
        filter=render_name if isinstance(render_name, str) and render_name else None,
    )


def params_from_query(query: Mapping[str, str]) -> RequestParams:
    """GET convention: everything comes from the query string."""
    return _build(
        _clean(query.get("site_name")),
        _clean(query.get("collection_name")),
        normalize_output(query.get("output"), OUTPUT_GENERAL),
        query.get("renderName"),
    )


def params_from_body(query: Mapping[str, str], body: Mapping) -> RequestParams:
    """
    POST convention used by the editor's dropdown proxy.

    The proxy nests the site under `site.site_name` in the body and may leave
    out `collection_name`, in which case the default catalog is used.
    """
    return _build(
        _body_site_name(body) or _clean(query.get("site_name")),
        _clean(query.get("collection_name")) or config.DEFAULT_COLLECTION_NAME,
        normalize_output(query.get("output"), OUTPUT_CAR_SELECTION),
        query.get("renderName"),
    )
