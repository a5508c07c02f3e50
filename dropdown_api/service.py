import logging
from typing import Callable

from fastapi.responses import JSONResponse

from . import config
from .errors import FetchCollectionError, UpstreamError
from .fetcher import ClientFactory, fetch_collection
from .models import RequestParams
from .projector import project
from .responses import error_response, json_response

logger = logging.getLogger(__name__)


async def handle_fetch(
    resolve_params: Callable[[], RequestParams],
    client_factory: ClientFactory,
    origin: str = "",
) -> JSONResponse:
    """
    Adapter -> fetcher -> projector for one request.
    Always returns a JSON response; nothing raised here reaches the framework.
    """
    try:
        params = resolve_params()
        collection = await fetch_collection(params.site, params.collection, client_factory)
        body = project(
            collection,
            params.output,
            params.filter,
            strict_item_match=config.WINDOW_PARTS_STRICT_MATCH,
        )
        logger.info(
            "collection served",
            extra={"site_name": params.site, "collection_name": params.collection, "output": params.output},
        )
        return json_response(body, 200, origin)
    except FetchCollectionError as e:
        if e.status_code < 500:
            logger.warning("request rejected", extra={"status_code": e.status_code, "error": e.error})
        return error_response(e, origin)
    except Exception as e:
        logger.exception("Unexpected error while serving collection")
        return error_response(UpstreamError(details=str(e) or e.__class__.__name__), origin)
