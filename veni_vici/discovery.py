"""
Discovery selector and the session context it runs against.

A discover action filters the catalog against the ban registry, picks one
eligible breed uniformly at random and asks the image search endpoint for a
single image of it. The session records the outcome and hands the
presentation layer an immutable snapshot after every transition.
"""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass, field
from typing import Callable, Optional

from .bans import BanKind, BanRegistry, ExclusionKey, ban_label, breed_probe, is_banned, parse_key
from .cat_api import CatApiClient
from .errors import AllBreedsBanned, CatApiError, CatalogNotReady, DiscoveryError, ImageFetchFailed
from .models import Breed, CatImage


logger = logging.getLogger(__name__)

RandomSource = Callable[[], float]


def eligible_breeds(catalog: tuple[Breed, ...], registry: BanRegistry) -> list[Breed]:
    return [b for b in catalog if not is_banned(breed_probe(b), registry)]


def choose_breed(eligible: list[Breed], random_source: Optional[RandomSource] = None) -> Breed:
    if not eligible:
        raise AllBreedsBanned()
    index = int((random_source or random.random)() * len(eligible))
    return eligible[min(index, len(eligible) - 1)]


def reconcile_breeds(image: CatImage, breed_id: str, catalog: tuple[Breed, ...]) -> CatImage:
    """Attach the queried breed when the image came back without breed data."""
    if image.breeds:
        return image
    for breed in catalog:
        if breed.id == breed_id:
            return image.with_breeds((breed,))
    return image


def fetch_image_for_breed(
    client: CatApiClient, breed_id: str, catalog: tuple[Breed, ...]
) -> CatImage:
    try:
        images = client.search_images(breed_id, limit=1)
    except CatApiError as e:
        raise ImageFetchFailed(str(e)) from e
    if not images:
        raise ImageFetchFailed("No image returned for breed")
    return reconcile_breeds(images[0], breed_id, catalog)


def select_image(
    catalog: tuple[Breed, ...],
    registry: BanRegistry,
    client: CatApiClient,
    random_source: Optional[RandomSource] = None,
) -> CatImage:
    """Run one discovery cycle. Raises a DiscoveryError subclass on failure."""
    if not catalog:
        raise CatalogNotReady()

    eligible = eligible_breeds(catalog, registry)
    chosen = choose_breed(eligible, random_source)
    logger.debug(f"Chose breed {chosen.id} ({chosen.name}) from {len(eligible)} eligible")

    return fetch_image_for_breed(client, chosen.id, catalog)


@dataclass(frozen=True)
class BanEntry:
    key: str
    kind: str
    label: str


@dataclass(frozen=True)
class SessionSnapshot:
    catalog_size: int
    bans: tuple[BanEntry, ...] = ()
    result: Optional[CatImage] = None
    error: Optional[str] = None
    loading: bool = False

    def is_key_banned(self, key: str) -> bool:
        return any(entry.key == key for entry in self.bans)

    def to_dict(self) -> dict:
        return {
            "catalog_size": self.catalog_size,
            "bans": [{"key": b.key, "kind": b.kind, "label": b.label} for b in self.bans],
            "result": self.result.to_dict() if self.result else None,
            "error": self.error,
            "loading": self.loading,
        }


@dataclass
class DiscoverySession:
    catalog: tuple[Breed, ...] = ()
    registry: BanRegistry = field(default_factory=BanRegistry)
    result: Optional[CatImage] = None
    error: Optional[str] = None
    loading: bool = False

    def snapshot(self) -> SessionSnapshot:
        bans = tuple(
            BanEntry(key=str(k), kind=k.kind.value, label=ban_label(k, self.catalog))
            for k in self.registry
        )
        return SessionSnapshot(
            catalog_size=len(self.catalog),
            bans=bans,
            result=self.result,
            error=self.error,
            loading=self.loading,
        )

    def discover(
        self, client: CatApiClient, random_source: Optional[RandomSource] = None
    ) -> SessionSnapshot:
        self.loading = True
        self.error = None
        try:
            self.result = select_image(self.catalog, self.registry, client, random_source)
            self.error = None
        except ImageFetchFailed as e:
            logger.warning(f"Image fetch failed: {e}")
            self.error = str(e) or "Unknown error"
            self.result = None
        except DiscoveryError as e:
            logger.info(f"Discovery not attempted: {e}")
            self.error = str(e)
        finally:
            self.loading = False
        return self.snapshot()

    def toggle_ban(self, kind: BanKind | str, value: str) -> SessionSnapshot:
        self.registry.toggle(kind, value)
        return self.snapshot()

    def unban(self, key: ExclusionKey | str) -> SessionSnapshot:
        if isinstance(key, str):
            key = parse_key(key)
        self.registry.remove(key)
        return self.snapshot()
