import httpx

from timelog.services.upstream import UpstreamClient, get_upstream_client


def override_upstream(client_app, handler):
    upstream = UpstreamClient(
        base_url="https://upstream.test/v1",
        token_url="https://upstream.test/oauth/token",
        client_id="id",
        client_secret="secret",
        transport=httpx.MockTransport(handler),
    )
    client_app.app.dependency_overrides[get_upstream_client] = lambda: upstream


def test_import_uses_upstream_wells_and_designs(client):
    def handler(request):
        path = request.url.path
        if path == "/oauth/token":
            return httpx.Response(200, json={"access_token": "t", "expires_in": 3600})
        if path == "/v1/project/":
            return httpx.Response(200, json=[{
                "padName": "Big Pad", "projectNumber": "500", "basin": "Delaware",
                "wellIDs": [{"id": "W1"}, {"id": "W2"}], "crews": [{"label": "Blue"}],
            }])
        well_id = request.url.params["well_id"]
        if path == "/v1/generalWellInformation":
            if well_id == "W2":
                return httpx.Response(500)
            return httpx.Response(200, json=[{"wellName": "Big 1H", "apiNumber": "42-001"}])
        if path == "/v1/completionDesign":
            return httpx.Response(200, json=[{"plannedNumberOfStages": 30}])
        return httpx.Response(404)

    override_upstream(client, handler)
    r = client.post("/api/v1/projects/import", json={"project_number": "500"})
    assert r.status_code == 201
    data = r.json()
    assert data["name"] == "Big Pad"
    assert data["basin"] == "Delaware"
    assert data["crew"] == "Blue"
    wells = {w["well_id"]: w for w in data["wells"]}
    assert wells["W1"]["name"] == "Big 1H"
    assert wells["W1"]["planned_number_of_stages"] == 30
    # failed well lookup falls back on its own
    assert wells["W2"]["name"] == "Well W2"


def test_pad_without_wells_gets_mock_wells(client):
    def handler(request):
        if request.url.path == "/oauth/token":
            return httpx.Response(200, json={"access_token": "t", "expires_in": 3600})
        return httpx.Response(200, json=[{"padName": "Empty Pad", "projectNumber": "600", "wellIDs": []}])

    override_upstream(client, handler)
    data = client.post("/api/v1/projects/import", json={"project_number": "600"}).json()
    assert [w["name"] for w in data["wells"]] == ["Well Alpha-1", "Well Alpha-2", "Well Beta-1"]
    assert all(w["planned_number_of_stages"] == 26 for w in data["wells"])


def test_import_without_credentials_uses_mock_pad(client, project):
    assert project["name"] == "Project 1001"
    assert [w["well_id"] for w in project["wells"]] == ["well-1", "well-2", "well-3", "well-4", "well-5"]
    assert project["wells"][0]["name"] == "Well well-1"


def test_reimport_starts_fresh(client, project):
    base = "/api/v1/projects/1001"
    r = client.post(f"{base}/operations", json={
        "start_time": "2025-03-01T08:00:00",
        "operations": [{"well_id": "well-1", "type": "PUMP", "sector": "A"}],
    })
    assert r.status_code == 201
    r = client.post("/api/v1/projects/import", json={"project_number": "1001"})
    assert r.status_code == 201
    assert client.get(f"{base}/operations").json() == []
    assert len(client.get("/api/v1/projects/").json()) == 1


def test_import_requires_number(client):
    assert client.post("/api/v1/projects/import", json={"project_number": ""}).status_code == 422


def test_configuration_roundtrip_and_personnel_roster(client, project):
    base = "/api/v1/projects/1001"
    config = client.get(f"{base}/configuration").json()
    assert len(config["sector_colors"]) == 11
    assert all(s["color"] == "#000000" and s["is_used"] for s in config["sector_colors"])

    config["well_colors"][0]["color"] = "#ff0000"
    config["sector_colors"][1]["is_used"] = False
    config["personnel"]["engineers"] = ["Ana", "Ben"]
    r = client.put(f"{base}/configuration", json=config)
    assert r.status_code == 200
    updated = r.json()
    assert updated["well_colors"][0]["color"] == "#ff0000"
    assert updated["personnel"]["engineers"] == ["Ana", "Ben"]

    assert client.put(f"{base}/personnel", json={"engineer": "Zed"}).status_code == 400
    r = client.put(f"{base}/personnel", json={"engineer": "Ben", "supervisor": "Anyone"})
    assert r.status_code == 200
    assert r.json()["engineer"] == "Ben"
    assert r.json()["supervisor"] == "Anyone"


def test_configuration_rejects_unknown_well(client, project):
    r = client.put("/api/v1/projects/1001/configuration", json={"well_colors": [{"well_id": "nope"}]})
    assert r.status_code == 400


def test_upstream_proxy_routes(client):
    r = client.get("/api/v1/upstream/project", params={"project_number": "12"})
    assert r.status_code == 200
    assert r.json()["padName"] == "Project 12"
    assert client.get("/api/v1/upstream/well", params={"well_id": "W"}).json()["apiNumber"] == "API-W"
    assert client.get("/api/v1/upstream/completion-design", params={"well_id": "W"}).json()["plannedNumberOfStages"] == 26
    assert client.get("/api/v1/upstream/project").status_code == 422
