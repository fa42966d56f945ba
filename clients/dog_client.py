"""
clients/dog_client.py
---------------------
Data access for the dog.ceo image catalog.
"""

from urllib.parse import quote

from clients.http_client import ApiClient
from models.dog import BreedCatalog, ImageResult


class DogApiClient:
    """Endpoints of https://dog.ceo/api used by the bot."""

    def __init__(self, api_client: ApiClient, base_url: str = "https://dog.ceo/api"):
        self.api_client = api_client
        self.base_url = base_url.rstrip("/")

    async def random_image(self) -> ImageResult:
        """Fetch one random image of any breed."""
        payload = await self.api_client.get_json(f"{self.base_url}/breeds/image/random")
        return ImageResult.from_payload(payload)

    async def image_for_breed(self, path: str) -> ImageResult:
        """
        Fetch one random image of a breed.

        Args:
            path: Breed path, e.g. 'husky' or 'heeler/blue'. Each segment is percent-encoded.
        """
        path = quote(path, safe="/")
        payload = await self.api_client.get_json(f"{self.base_url}/breed/{path}/images/random")
        return ImageResult.from_payload(payload)

    async def list_breeds(self) -> BreedCatalog:
        """Fetch the full breed catalog."""
        payload = await self.api_client.get_json(f"{self.base_url}/breeds/list/all")
        return BreedCatalog.from_payload(payload)
