"""Exceptions raised by the catalog loader, API client and discovery selector."""


class CatDiscoveryError(Exception):
    """Base class for all cat discovery errors."""


class CatApiError(CatDiscoveryError):
    """Transport, status or payload failure talking to the cat API."""


class CatalogLoadFailed(CatDiscoveryError):
    """The breed catalog could not be fetched or parsed."""


class DiscoveryError(CatDiscoveryError):
    """A discover action failed; ``str(exc)`` is shown to the user."""


class CatalogNotReady(DiscoveryError):
    def __init__(self, message: str = "Breed list not loaded yet. Please wait and try again."):
        super().__init__(message)


class AllBreedsBanned(DiscoveryError):
    def __init__(self, message: str = "Every breed is on the ban list. Unban one to keep discovering."):
        super().__init__(message)


class ImageFetchFailed(DiscoveryError):
    pass
