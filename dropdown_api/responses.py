from fastapi import Response
from fastapi.responses import JSONResponse

from . import config
from .errors import FetchCollectionError

NO_STORE = "no-store"
ALLOWED_METHODS = "GET,POST,OPTIONS"


def cors_headers(origin: str = "") -> dict[str, str]:
    h = {
        "Access-Control-Allow-Methods": ALLOWED_METHODS,
        "Access-Control-Allow-Headers": "Content-Type, Authorization",
        "Cache-Control": NO_STORE,
    }
    if config.ALLOW_ALL_ORIGINS or not origin:
        h["Access-Control-Allow-Origin"] = "*"
    elif origin in config.ALLOWED_ORIGINS:
        h["Access-Control-Allow-Origin"] = origin
        h["Vary"] = "Origin"
    else:
        # unlisted origin: advertise the configured one so the browser refuses
        h["Access-Control-Allow-Origin"] = config.ALLOWED_ORIGINS[0]
        h["Vary"] = "Origin"
    return h


def json_response(data, status_code: int = 200, origin: str = "", headers: dict | None = None) -> JSONResponse:
    h = dict(headers or {})
    h.update(cors_headers(origin))
    return JSONResponse(data, status_code=status_code, headers=h)


def error_response(err: FetchCollectionError, origin: str = "") -> JSONResponse:
    return json_response(err.to_body(), err.status_code, origin)


def preflight_response(origin: str = "") -> Response:
    return Response(status_code=200, headers=cors_headers(origin))
