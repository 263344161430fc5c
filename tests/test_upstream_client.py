import httpx

from timelog.services.upstream import UpstreamClient

BASE = "https://upstream.test/v1"
TOKEN_URL = "https://upstream.test/oauth/token"


class FakeClock:
    def __init__(self):
        self.now = 1000.0

    def __call__(self):
        return self.now


def make_client(handler, clock=None, client_id="id", client_secret="secret"):
    return UpstreamClient(
        base_url=BASE,
        token_url=TOKEN_URL,
        client_id=client_id,
        client_secret=client_secret,
        transport=httpx.MockTransport(handler),
        clock=clock or FakeClock(),
    )


def upstream(routes, calls):
    """Handler serving the token endpoint plus the given path -> (status, json) routes"""

    def handler(request: httpx.Request):
        calls.append(request)
        if request.url.path == "/oauth/token":
            return httpx.Response(200, json={"access_token": "tok", "token_type": "bearer", "expires_in": 3600})
        status, body = routes.get(request.url.path, (404, {"error": "not found"}))
        return httpx.Response(status, json=body)

    return handler


def test_project_lookup_uses_bearer_token():
    calls = []
    routes = {"/v1/project/": (200, [{
        "padName": "Pad 7", "projectNumber": "77", "basin": "Permian",
        "wellIDs": [{"id": "W1"}, {"id": "W2"}], "crews": [{"label": "Red"}], "extra": 1,
    }])}
    info = make_client(upstream(routes, calls)).get_project_by_number("77")
    assert info.padName == "Pad 7"
    assert [w.id for w in info.wellIDs] == ["W1", "W2"]

    token_request, project_request = calls
    assert token_request.method == "POST"
    assert token_request.headers["authorization"].startswith("Basic ")
    assert b"grant_type=client_credentials" in token_request.content
    assert project_request.headers["authorization"] == "Bearer tok"
    assert project_request.url.params["project_number"] == "77"


def test_token_is_cached_until_expiry():
    calls = []
    clock = FakeClock()
    routes = {"/v1/generalWellInformation": (200, [{"wellName": "Alpha 1H", "apiNumber": "42-1"}])}
    client = make_client(upstream(routes, calls), clock=clock)

    assert client.get_well_info("W1").wellName == "Alpha 1H"
    assert client.get_well_info("W1").apiNumber == "42-1"
    assert [r.url.path for r in calls].count("/oauth/token") == 1

    clock.now += 3600
    client.get_well_info("W1")
    assert [r.url.path for r in calls].count("/oauth/token") == 2


def test_server_error_falls_back_to_mock_project():
    calls = []
    routes = {"/v1/project/": (500, {"error": "boom"})}
    info = make_client(upstream(routes, calls)).get_project_by_number("42")
    assert info.padName == "Project 42"
    assert info.basin == "Development Basin"
    assert [w.id for w in info.wellIDs] == ["well-1", "well-2", "well-3", "well-4", "well-5"]
    assert info.crews[0].label == "Mock Crew"


def test_empty_or_non_array_falls_back():
    calls = []
    routes = {
        "/v1/generalWellInformation": (200, []),
        "/v1/completionDesign": (200, {"plannedNumberOfStages": 40}),
    }
    client = make_client(upstream(routes, calls))
    well = client.get_well_info("W9")
    assert well.wellName == "Well W9"
    assert well.apiNumber == "API-W9"
    assert client.get_completion_design("W9").plannedNumberOfStages == 26


def test_completion_design_lookup():
    calls = []
    routes = {"/v1/completionDesign": (200, [{"plannedNumberOfStages": 40, "designMaximumRate": 100}])}
    design = make_client(upstream(routes, calls)).get_completion_design("W1")
    assert design.plannedNumberOfStages == 40
    assert calls[-1].url.params["well_id"] == "W1"


def test_token_failure_falls_back():
    def handler(request):
        return httpx.Response(401, json={"error": "invalid_client"})

    info = make_client(handler).get_project_by_number("5")
    assert info.padName == "Project 5"


def test_transport_error_falls_back():
    def handler(request):
        raise httpx.ConnectError("unreachable", request=request)

    assert make_client(handler).get_well_info("W1").wellName == "Well W1"


def test_missing_credentials_skip_network():
    calls = []
    client = make_client(upstream({}, calls), client_id="", client_secret="")
    assert client.get_project_by_number("9").padName == "Project 9"
    assert calls == []
