import logging

from fastapi import Depends, FastAPI, Request
from starlette.exceptions import HTTPException as StarletteHTTPException

from dropdown_api import __version__, config
from dropdown_api.adapter import params_from_body, params_from_query, parse_body
from dropdown_api.duda import DudaClient
from dropdown_api.fetcher import ClientFactory
from dropdown_api.logging_utils import generate_request_id, request_id_var, setup_logging
from dropdown_api.responses import json_response, preflight_response
from dropdown_api.service import handle_fetch

setup_logging()
logger = logging.getLogger(__name__)

FETCH_COLLECTION_PATH = "/api/fetch-collection"

app = FastAPI(title="Dropdown Collection API", version=__version__)


def get_client_factory() -> ClientFactory:
    return DudaClient


@app.middleware("http")
async def add_request_id(request: Request, call_next):
    request_id = request.headers.get("X-Request-Id") or generate_request_id()
    token = request_id_var.set(request_id)
    try:
        response = await call_next(request)
    finally:
        request_id_var.reset(token)
    response.headers["X-Request-Id"] = request_id
    return response


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    """Framework errors (unknown path, wrong method) keep the JSON + CORS envelope."""
    return json_response(
        {"error": str(exc.detail)},
        exc.status_code,
        request.headers.get("origin", ""),
        headers=exc.headers,
    )


@app.get("/healthz")
async def healthz(request: Request):
    return json_response({"ok": True}, origin=request.headers.get("origin", ""))


# GET  ?site_name=...&collection_name=...&output=...&renderName=...
# POST from the editor's dropdown proxy: {"site": {"site_name": ...}, ...}
@app.api_route(FETCH_COLLECTION_PATH, methods=["GET", "POST", "OPTIONS"])
async def fetch_collection_route(request: Request, client_factory: ClientFactory = Depends(get_client_factory)):
    origin = request.headers.get("origin", "")
    if request.method == "OPTIONS":
        return preflight_response(origin)

    query = request.query_params
    if request.method == "GET":
        return await handle_fetch(lambda: params_from_query(query), client_factory, origin)

    try:
        body = parse_body(await request.body())
    except Exception:
        logger.warning("could not read request body", exc_info=True)
        body = {}
    return await handle_fetch(lambda: params_from_body(query, body), client_factory, origin)


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=config.PORT)
