import logging
from typing import Callable

from . import config
from .duda import CollectionSource, DudaClient
from .errors import ConfigurationError, UpstreamError
from .models import Collection

logger = logging.getLogger(__name__)

ClientFactory = Callable[[str, str], CollectionSource]


async def fetch_collection(
    site: str, collection: str, client_factory: ClientFactory = DudaClient
) -> Collection:
    """
    Load `collection` for `site` from Duda and normalize it.

    Raises ConfigurationError before any network activity when credentials are
    missing, and UpstreamError for anything the client raises.
    """
    credentials = config.get_duda_credentials()
    if credentials is None:
        raise ConfigurationError()

    client = client_factory(*credentials)
    try:
        payload = await client.get(site, collection)
    except Exception as e:
        logger.error(
            "Duda API Error",
            extra={"site_name": site, "collection_name": collection, "error": str(e)},
        )
        raise UpstreamError(details=str(e) or e.__class__.__name__) from e

    return Collection.from_payload(payload)
