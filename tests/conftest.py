import json
import logging
import os
import sys
from unittest.mock import AsyncMock

import httpx
import pytest

# Add project root to path
sys.path.insert(0, os.path.abspath(os.path.dirname(__file__) + "/.."))

from clients.dog_client import DogApiClient
from clients.http_client import ApiClient
from clients.price_client import PriceClient
from handlers.dispatcher import ResponseDispatcher
from services.dog_service import DogService
from services.price_service import PriceService

DOG_BASE = "https://dog.ceo/api"
PRICE_BASE = "https://api.coingecko.com/api/v3"


class FakeUpstream:
    """Serves canned responses by URL path and records every request."""

    def __init__(self):
        self.routes = {}
        self.requests = []

    def add(self, path, body, status_code=200):
        self.routes[path] = (status_code, body)

    def handler(self, request):
        self.requests.append(request)
        if request.url.path not in self.routes:
            raise httpx.ConnectError("no route", request=request)
        status_code, body = self.routes[request.url.path]
        if isinstance(body, (dict, list)):
            return httpx.Response(status_code, content=json.dumps(body).encode(),
                                  headers={"Content-Type": "application/json"})
        return httpx.Response(status_code, text=body)


@pytest.fixture()
def upstream():
    return FakeUpstream()


@pytest.fixture()
def logger():
    return logging.getLogger("tests.doggo")


@pytest.fixture()
def api_client(upstream, logger):
    return ApiClient(5.0, transport=httpx.MockTransport(upstream.handler), logger=logger)


@pytest.fixture()
def dispatcher(api_client, logger):
    dog_service = DogService(DogApiClient(api_client, DOG_BASE), logger=logger)
    price_service = PriceService(PriceClient(api_client, PRICE_BASE), logger=logger)
    return ResponseDispatcher(dog_service, price_service, logger=logger)


@pytest.fixture()
def bot():
    fake = AsyncMock()
    fake.send_photo = AsyncMock()
    fake.send_message = AsyncMock()
    return fake
