"""Shared fixtures for the registry and crypto tests."""

from typing import AsyncIterator

import httpx
import pytest
import pytest_asyncio

from onion_registry.config import Settings
from onion_registry.crypto import AsymmetricKeyPair, generate_rsa_keypair
from onion_registry.main import create_app
from onion_registry.registry import NodeRegistry


@pytest.fixture(scope="session")
def rsa_keypair() -> AsymmetricKeyPair:
    # RSA-2048 generation is slow enough to share one pair across the session
    return generate_rsa_keypair()


@pytest.fixture
def settings() -> Settings:
    return Settings(_env_file=None)


@pytest.fixture
def registry() -> NodeRegistry:
    return NodeRegistry()


@pytest_asyncio.fixture
async def client(settings: Settings, registry: NodeRegistry) -> AsyncIterator[httpx.AsyncClient]:
    app = create_app(settings=settings, registry=registry)
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://registry") as c:
        yield c
