from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True, slots=True)
class Breed:
    """A breed catalog entry. Identity is ``id``."""
    id: str
    name: str
    extra: dict[str, Any] = field(default_factory=dict, compare=False, repr=False)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Breed:
        if not isinstance(data, dict):
            raise ValueError(f"Breed record must be an object, got {type(data).__name__}")
        extra = {k: v for k, v in data.items() if k not in ("id", "name")}
        return cls(id=str(data.get("id") or ""), name=str(data.get("name") or ""), extra=extra)

    def to_dict(self) -> dict[str, Any]:
        return {**self.extra, "id": self.id, "name": self.name}


@dataclass(frozen=True, slots=True)
class CatImage:
    """One image search result; ``breeds`` holds 0 or 1 entries in practice."""
    id: str | None
    url: str | None = None
    breeds: tuple[Breed, ...] = ()

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> CatImage:
        if not isinstance(data, dict):
            raise ValueError(f"Image record must be an object, got {type(data).__name__}")
        raw_breeds = data.get("breeds")
        if not isinstance(raw_breeds, list):
            raw_breeds = []
        breeds = tuple(Breed.from_dict(b) for b in raw_breeds if isinstance(b, dict))
        return cls(id=data.get("id"), url=data.get("url"), breeds=breeds)

    def with_breeds(self, breeds: tuple[Breed, ...]) -> CatImage:
        return CatImage(id=self.id, url=self.url, breeds=breeds)

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "url": self.url,
            "breeds": [b.to_dict() for b in self.breeds],
        }
