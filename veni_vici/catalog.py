"""Breed catalog loader - fetches the breed list once at startup."""

from __future__ import annotations

import logging

from .cat_api import CatApiClient
from .errors import CatApiError, CatalogLoadFailed
from .models import Breed


logger = logging.getLogger(__name__)


def fetch_catalog(client: CatApiClient) -> tuple[Breed, ...]:
    """Fetch the breed catalog, raising CatalogLoadFailed on any failure."""
    try:
        breeds = client.list_breeds()
    except CatApiError as e:
        raise CatalogLoadFailed(f"Could not load breed catalog: {e}") from e
    return tuple(breeds)


def load_catalog(client: CatApiClient) -> tuple[Breed, ...]:
    """
    Load the breed catalog for the session.

    Failures are logged and leave the catalog empty; discovery then reports
    that the catalog is not ready. There is no retry.
    """
    try:
        catalog = fetch_catalog(client)
    except CatalogLoadFailed:
        logger.exception("Breed catalog load failed")
        return ()

    logger.info(f"({len(catalog)}) breeds loaded")
    return catalog
