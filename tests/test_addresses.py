import httpx

from gemstore.main import app
from gemstore.modules.addresses.routes import get_address_service
from gemstore.modules.addresses.service import AddressService


def use_transport(handler):
    app.dependency_overrides[get_address_service] = lambda: AddressService(
        httpx.Client(transport=httpx.MockTransport(handler))
    )


def test_short_query_returns_nothing(client):
    assert client.get("/api/address-suggestions?q=ab").json() == {"suggestions": []}
    assert client.get("/api/address-suggestions").json() == {"suggestions": []}


def test_suggestions_from_nominatim(client):
    seen = []

    def handler(request):
        seen.append(request)
        return httpx.Response(200, json=[
            {"display_name": f"{i} Main Street, Calgary, Alberta"} for i in range(7)
        ] + [{"lat": "51.0"}])

    use_transport(handler)
    body = client.get("/api/address-suggestions?q=Main%20St").json()

    assert len(body["suggestions"]) == 5
    assert body["suggestions"][0] == "0 Main Street, Calgary, Alberta"
    params = seen[0].url.params
    assert params["q"] == "Main St"
    assert params["countrycodes"] == "ca"
    assert "User-Agent" in seen[0].headers


def test_us_country_code(client):
    seen = []

    def handler(request):
        seen.append(request)
        return httpx.Response(200, json=[])

    use_transport(handler)
    client.get("/api/address-suggestions?q=Broadway&country=US")
    assert seen[0].url.params["countrycodes"] == "us"


def test_lookup_failure_returns_empty(client):
    use_transport(lambda request: httpx.Response(503, text="busy"))
    assert client.get("/api/address-suggestions?q=Main St").json() == {"suggestions": []}
