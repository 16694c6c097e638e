import httpx
import pytest
from cryptography.exceptions import InternalError

from onion_registry.config import Settings
from onion_registry.crypto import ExportError, import_private_key
from onion_registry.main import create_app
from onion_registry.registry import NodeRegistry

pytestmark = pytest.mark.asyncio

REGISTRATION_ERROR = {"error": "Node ID and public key are required for registration"}


def _client_for(app) -> httpx.AsyncClient:
    return httpx.AsyncClient(transport=httpx.ASGITransport(app=app), base_url="http://registry")


async def test_status_is_plain_live(client):
    resp = await client.get("/status")
    assert resp.status_code == 200
    assert resp.text == "live"
    assert resp.headers["content-type"].startswith("text/plain")


async def test_empty_registry(client):
    resp = await client.get("/getNodeRegistry")
    assert resp.status_code == 200
    assert resp.json() == {"nodes": []}


async def test_register_node_created(client):
    resp = await client.post("/registerNode", json={"nodeId": 5, "pubKey": "k"})
    assert resp.status_code == 201
    assert resp.json() == {"message": "Node registered successfully"}

    listing = (await client.get("/getNodeRegistry")).json()
    assert listing == {"nodes": [{"nodeId": 5, "pubKey": "k"}]}


@pytest.mark.parametrize(
    "body",
    [
        {"nodeId": 0, "pubKey": ""},
        {"nodeId": 5, "pubKey": ""},
        {"nodeId": 0, "pubKey": "k"},
        {"pubKey": "k"},
        {"nodeId": 5},
        {},
        {"nodeId": "not-a-number", "pubKey": "k"},
        {"nodeId": True, "pubKey": "k"},
        {"nodeId": "5", "pubKey": "k"},
        {"nodeId": 5, "pubKey": 123},
    ],
)
async def test_register_node_missing_or_invalid_fields(client, body):
    resp = await client.post("/registerNode", json=body)
    assert resp.status_code == 400
    assert resp.json() == REGISTRATION_ERROR
    assert (await client.get("/getNodeRegistry")).json() == {"nodes": []}


async def test_register_node_without_body(client):
    resp = await client.post("/registerNode")
    assert resp.status_code == 400
    assert resp.json() == REGISTRATION_ERROR


async def test_register_node_conflict_under_reject_policy():
    app = create_app(settings=Settings(_env_file=None, duplicate_policy="reject"))
    async with _client_for(app) as client:
        assert (await client.post("/registerNode", json={"nodeId": 1, "pubKey": "a"})).status_code == 201
        resp = await client.post("/registerNode", json={"nodeId": 1, "pubKey": "b"})
        assert resp.status_code == 409
        assert resp.json() == {"error": "Node already registered"}


async def test_get_private_key_is_stable(client):
    first = await client.get("/getPrivateKey/7")
    second = await client.get("/getPrivateKey/7")
    assert first.status_code == second.status_code == 200
    assert first.content == second.content
    assert import_private_key(first.json()["result"]).key_size == 2048


async def test_get_private_key_failure_is_generic_500(settings):
    def broken_factory():
        raise ExportError("provider refused the key")

    app = create_app(settings=settings, registry=NodeRegistry(key_factory=broken_factory))
    async with _client_for(app) as client:
        resp = await client.get("/getPrivateKey/1")
    assert resp.status_code == 500
    assert resp.json() == {"error": "Internal Server Error"}


async def test_get_private_key_missing_export_is_500(settings):
    app = create_app(settings=settings, registry=NodeRegistry(key_factory=lambda: None))
    async with _client_for(app) as client:
        resp = await client.get("/getPrivateKey/1")
    assert resp.status_code == 500
    assert resp.json() == {"error": "Internal Server Error"}


async def test_private_key_endpoint_can_be_disabled():
    app = create_app(settings=Settings(_env_file=None, expose_private_keys=False))
    async with _client_for(app) as client:
        resp = await client.get("/getPrivateKey/1")
        assert resp.status_code == 404
        assert (await client.get("/status")).text == "live"


async def test_end_to_end_registration_and_key_issuance(client):
    for node_id in (1, 2):
        resp = await client.post("/registerNode", json={"nodeId": node_id, "pubKey": f"pub-{node_id}"})
        assert resp.status_code == 201

    nodes = (await client.get("/getNodeRegistry")).json()["nodes"]
    assert nodes == [{"nodeId": 1, "pubKey": "pub-1"}, {"nodeId": 2, "pubKey": "pub-2"}]

    key1_a = (await client.get("/getPrivateKey/1")).json()["result"]
    key1_b = (await client.get("/getPrivateKey/1")).json()["result"]
    assert key1_a == key1_b

    key2 = (await client.get("/getPrivateKey/2")).json()["result"]
    key3 = (await client.get("/getPrivateKey/3")).json()["result"]
    assert key3 != key1_a
    assert key3 != key2


async def test_unexpected_provider_failure_is_json_500(settings):
    def openssl_failure():
        raise InternalError("openssl failure", [])

    app = create_app(settings=settings, registry=NodeRegistry(key_factory=openssl_failure))
    transport = httpx.ASGITransport(app=app, raise_app_exceptions=False)
    async with httpx.AsyncClient(transport=transport, base_url="http://registry") as client:
        resp = await client.get("/getPrivateKey/1")
    assert resp.status_code == 500
    assert resp.headers["content-type"].startswith("application/json")
    assert resp.json() == {"error": "Internal Server Error"}
