"""Thin client for TheCatAPI breed and image search endpoints."""

from __future__ import annotations

import logging
from typing import Any, Optional

import requests

from .config import DEFAULT_BASE_URL
from .errors import CatApiError
from .models import Breed, CatImage


logger = logging.getLogger(__name__)

BREEDS_PATH = "/v1/breeds"
IMAGE_SEARCH_PATH = "/v1/images/search"


class CatApiClient:
    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        api_key: Optional[str] = None,
        timeout: Optional[float] = None,
        session: Optional[requests.Session] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()
        if api_key:
            self.session.headers.update({"x-api-key": api_key})

    def _get_json(self, path: str, params: Optional[dict[str, Any]] = None) -> Any:
        url = f"{self.base_url}{path}"
        try:
            response = self.session.get(url, params=params, timeout=self.timeout)
        except requests.RequestException as e:
            raise CatApiError(f"Request to {path} failed: {e}") from e

        if not response.ok:
            raise CatApiError(f"HTTP {response.status_code}")

        try:
            return response.json()
        except ValueError as e:
            raise CatApiError(f"Invalid JSON from {path}") from e

    def list_breeds(self) -> list[Breed]:
        data = self._get_json(BREEDS_PATH)
        if not isinstance(data, list):
            raise CatApiError("Breed list response is not an array")
        try:
            return [Breed.from_dict(item) for item in data]
        except ValueError as e:
            raise CatApiError(str(e)) from e

    def search_images(self, breed_id: str, limit: int = 1) -> list[CatImage]:
        data = self._get_json(IMAGE_SEARCH_PATH, params={"breed_id": breed_id, "limit": limit})
        if not isinstance(data, list):
            raise CatApiError("Image search response is not an array")
        try:
            return [CatImage.from_dict(item) for item in data]
        except ValueError as e:
            raise CatApiError(str(e)) from e
