"""
services/dog_service.py
-----------------------
Business logic for dog image lookups and the breed catalog.
"""

import logging
from typing import Optional

from clients.dog_client import DogApiClient
from models.dog import BreedCatalog, ImageResult
from utils.logger import get_logger
from utils.errors import UpstreamFailure


def normalize_breed(breed: str) -> str:
    """
    Turn a breed as users type it into a dog.ceo path segment.

    The API addresses sub-breeds as ``breed/sub-breed`` while users write
    ``sub-breed breed``, so word order is reversed:
        "Blue heeler" → "heeler/blue"
        "Husky"       → "husky"
    """
    return "/".join(reversed(breed.lower().split()))


def format_catalog(catalog: BreedCatalog) -> str:
    """
    Render the catalog as one header line per breed, followed by one
    indented line per sub-breed. Breeds are sorted by name.
    """
    lines = []
    for name in sorted(catalog.breeds):
        lines.append(f"-│ {name}")
        for sub_breed in catalog.breeds[name]:
            lines.append(f"     |> {sub_breed}")
    return "\n".join(lines)


class DogService:
    """Fetches dog images and the breed list, enforcing the success sentinel."""

    def __init__(self, client: DogApiClient, logger: Optional[logging.Logger] = None):
        self.client = client
        self.logger = logger or get_logger(__name__)

    async def random_image(self) -> ImageResult:
        """
        Get a random dog image.

        Raises:
            UpstreamFailure: If the API did not report success.
            ApiError: On transport or schema failure.
        """
        return self._require_success(await self.client.random_image())

    async def image_for_breed(self, breed: str) -> ImageResult:
        """
        Get a random image for a breed typed in natural word order.

        Raises:
            UpstreamFailure: If the breed is unknown upstream.
            ApiError: On transport or schema failure.
        """
        path = normalize_breed(breed)
        self.logger.debug(f"Breed '{breed}' normalized to '{path}'")
        return self._require_success(await self.client.image_for_breed(path))

    async def list_breeds(self) -> BreedCatalog:
        """
        Get the full breed catalog.

        Raises:
            UpstreamFailure: If the API did not report success.
            ApiError: On transport or schema failure.
        """
        catalog = await self.client.list_breeds()
        if not catalog.is_success():
            raise UpstreamFailure(catalog.status)
        return catalog

    @staticmethod
    def _require_success(result: ImageResult) -> ImageResult:
        if not result.is_success():
            raise UpstreamFailure(result.status, result.message)
        return result
