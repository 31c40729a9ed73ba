"""
In-memory ban registry.

Bans are stored as normalized keys of the form ``breed:<name>`` or
``id:<image id>``, lowercased so matching is case-insensitive. The registry
is never persisted; it lives as long as the process does.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Iterator

from .models import Breed, CatImage


logger = logging.getLogger(__name__)


class BanKind(str, Enum):
    BREED = "breed"
    ID = "id"


@dataclass(frozen=True, slots=True)
class ExclusionKey:
    kind: BanKind
    value: str  # already lowercased

    def __str__(self) -> str:
        return f"{self.kind.value}:{self.value}"


def normalize(kind: BanKind | str, value) -> ExclusionKey:
    """Build the normalized key for ``value``; raises ValueError on an unknown kind."""
    return ExclusionKey(BanKind(kind), str(value).lower())


def parse_key(key: str) -> ExclusionKey:
    prefix, sep, value = key.partition(":")
    if not sep:
        raise ValueError(f"Malformed ban key: {key!r}")
    try:
        kind = BanKind(prefix)
    except ValueError:
        raise ValueError(f"Unknown ban kind in key: {key!r}") from None
    return ExclusionKey(kind, value.lower())


class BanRegistry:
    """Ordered set of exclusion keys, most recently added first."""

    def __init__(self, keys: Iterable[ExclusionKey] = ()):
        self._keys: list[ExclusionKey] = []
        for key in keys:
            if key not in self._keys:
                self._keys.append(key)

    def toggle(self, kind: BanKind | str, value) -> bool:
        """Add the key if absent, remove it if present. Returns True if now banned."""
        key = normalize(kind, value)
        if key in self._keys:
            self._keys.remove(key)
            logger.info(f"Unbanned {key}")
            return False
        self._keys.insert(0, key)
        logger.info(f"Banned {key}")
        return True

    def remove(self, key: ExclusionKey | str) -> None:
        if isinstance(key, str):
            key = parse_key(key)
        if key in self._keys:
            self._keys.remove(key)
            logger.info(f"Unbanned {key}")

    def keys(self) -> tuple[ExclusionKey, ...]:
        return tuple(self._keys)

    def __contains__(self, key: object) -> bool:
        if isinstance(key, str):
            return any(str(k) == key for k in self._keys)
        return key in self._keys

    def __iter__(self) -> Iterator[ExclusionKey]:
        return iter(tuple(self._keys))

    def __len__(self) -> int:
        return len(self._keys)


def is_banned(item: CatImage, registry: Iterable[ExclusionKey]) -> bool:
    """
    Check an item against the registry.

    An item is banned when its own id is banned, or when any of its breeds
    is banned by name. Items with neither id nor breeds are never banned.
    """
    keys = set(registry)
    if not keys:
        return False

    if item.id and normalize(BanKind.ID, item.id) in keys:
        return True

    for breed in item.breeds:
        if breed.name and normalize(BanKind.BREED, breed.name) in keys:
            return True

    return False


def breed_probe(breed: Breed) -> CatImage:
    """Lightweight image-shaped record used to test a catalog breed against bans."""
    return CatImage(id=breed.id, breeds=(breed,))


def ban_label(key: ExclusionKey, catalog: Iterable[Breed]) -> str:
    """Display label for a ban entry, using the catalog's casing for breed names."""
    if key.kind is BanKind.BREED:
        for breed in catalog:
            if breed.name.lower() == key.value:
                return breed.name
    return key.value
