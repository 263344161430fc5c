import random
from datetime import datetime, timedelta

from timelog.core.timeline import compute_end_times

BASE = "/api/v1/projects/1001"
T0 = datetime(2025, 3, 1, 8, 0)


def iso(minutes):
    return (T0 + timedelta(minutes=minutes)).isoformat()


def add(client, minutes, sector, well_id="well-1", type_="PUMP", **extra):
    row = {"well_id": well_id, "type": type_, "sector": sector, **extra}
    r = client.post(f"{BASE}/operations", json={"start_time": iso(minutes), "operations": [row]})
    assert r.status_code == 201, r.text
    return r.json()[0]


def stored(client):
    r = client.get(f"{BASE}/operations")
    assert r.status_code == 200
    return {op["id"]: op for op in r.json()}


def assert_consistent(client):
    """Stored end times match a fresh computation over the whole project"""
    ops = list(stored(client).values())

    class Row:
        def __init__(self, data):
            self.start_time = datetime.fromisoformat(data["start_time"])
            self.sector = data["sector"]
            self.end_time = None

    expected = compute_end_times([Row(op) for op in ops])
    actual = [datetime.fromisoformat(op["end_time"]) if op["end_time"] else None for op in ops]
    assert actual == expected


def test_add_sets_end_times(client, project):
    op0 = add(client, 0, "A")
    op1 = add(client, 5, "A")
    op2 = add(client, 10, "PAD", type_="NP")
    ops = stored(client)
    assert ops[op0["id"]]["end_time"] == iso(5)
    assert ops[op1["id"]]["end_time"] == iso(10)
    assert ops[op2["id"]]["end_time"] is None
    assert_consistent(client)


def test_end_times_cross_wells(client, project):
    op0 = add(client, 0, "B", well_id="well-1")
    add(client, 30, "B", well_id="well-2")
    assert stored(client)[op0["id"]]["end_time"] == iso(30)


def test_batch_shares_start_time_and_stamps_personnel(client, project):
    r = client.put(f"{BASE}/personnel", json={"engineer": "Ana", "completion_type": "Zipper - 1 WL log"})
    assert r.status_code == 200
    r = client.post(f"{BASE}/operations", json={
        "start_time": iso(0),
        "operations": [
            {"well_id": "well-1", "type": "PUMP", "sector": "A", "party": "LOS", "main_event": "Frac"},
            {"well_id": "well-2", "type": "PUMP", "sector": "B", "completion_type": "Single"},
        ],
    })
    assert r.status_code == 201
    first, second = r.json()
    assert first["start_time"] == second["start_time"] == iso(0)
    assert first["engineer"] == second["engineer"] == "Ana"
    assert first["completion_type"] == "Zipper - 1 WL log"
    assert second["completion_type"] == "Single"
    # same start time never ends each other
    assert first["end_time"] is None and second["end_time"] is None


def test_timezone_aware_start_is_stored_as_utc(client, project):
    r = client.post(f"{BASE}/operations", json={
        "start_time": "2025-03-01T10:00:00+02:00",
        "operations": [{"well_id": "well-1", "type": "NP", "sector": "PAD"}],
    })
    assert r.status_code == 201
    assert r.json()[0]["start_time"] == "2025-03-01T08:00:00"


def test_edit_start_time_and_sector_resyncs(client, project):
    op0 = add(client, 0, "A")
    op1 = add(client, 5, "A")
    op2 = add(client, 10, "PAD")

    r = client.put(f"{BASE}/operations/{op2['id']}", json={"sector": "B"})
    assert r.status_code == 200
    ops = stored(client)
    assert ops[op0["id"]]["end_time"] == iso(5)
    assert ops[op1["id"]]["end_time"] is None

    # move op1 before op0
    r = client.put(f"{BASE}/operations/{op1['id']}", json={"start_time": iso(-5)})
    assert r.status_code == 200
    ops = stored(client)
    assert ops[op1["id"]]["end_time"] == iso(0)
    assert ops[op0["id"]]["end_time"] is None
    assert_consistent(client)


def test_delete_reconnects_chain(client, project):
    op0 = add(client, 0, "A")
    op1 = add(client, 5, "A")
    op2 = add(client, 10, "PAD")
    r = client.delete(f"{BASE}/operations/{op1['id']}")
    assert r.status_code == 200
    ops = stored(client)
    assert op1["id"] not in ops
    assert ops[op0["id"]]["end_time"] == iso(10)
    assert ops[op2["id"]]["end_time"] is None
    assert_consistent(client)


def test_toggle_completed_is_an_edit(client, project):
    op0 = add(client, 0, "A", stage=3)
    r = client.put(f"{BASE}/operations/{op0['id']}", json={"completed": True})
    assert r.status_code == 200
    assert r.json()["completed"] is True


def test_missing_required_fields_are_rejected(client, project):
    r = client.post(f"{BASE}/operations", json={
        "start_time": iso(0), "operations": [{"well_id": "well-1", "type": "PUMP"}],
    })
    assert r.status_code == 422
    r = client.post(f"{BASE}/operations", json={"operations": [{"well_id": "well-1", "type": "PUMP", "sector": "A"}]})
    assert r.status_code == 422
    r = client.post(f"{BASE}/operations", json={"start_time": iso(0), "operations": []})
    assert r.status_code == 422
    assert stored(client) == {}


def test_unknown_vocabulary_is_rejected(client, project):
    r = client.post(f"{BASE}/operations", json={
        "start_time": iso(0),
        "operations": [{"well_id": "well-1", "type": "PUMP", "sector": "Z"}],
    })
    assert r.status_code == 422
    r = client.post(f"{BASE}/operations", json={
        "start_time": iso(0),
        "operations": [{"well_id": "well-1", "type": "PUMP", "sector": "A", "party": "Nobody"}],
    })
    assert r.status_code == 422


def test_unknown_well_is_rejected_and_nothing_stored(client, project):
    r = client.post(f"{BASE}/operations", json={
        "start_time": iso(0),
        "operations": [
            {"well_id": "well-1", "type": "PUMP", "sector": "A"},
            {"well_id": "nope", "type": "PUMP", "sector": "A"},
        ],
    })
    assert r.status_code == 400
    assert "nope" in r.json()["detail"]
    assert stored(client) == {}


def test_edit_rejects_null_and_unknown_well(client, project):
    op0 = add(client, 0, "A")
    assert client.put(f"{BASE}/operations/{op0['id']}", json={"sector": None}).status_code == 422
    assert client.put(f"{BASE}/operations/{op0['id']}", json={"well_id": "nope"}).status_code == 400


def test_missing_operation_and_project(client, project):
    assert client.get(f"{BASE}/operations/999").status_code == 404
    assert client.put(f"{BASE}/operations/999", json={"completed": True}).status_code == 404
    assert client.delete(f"{BASE}/operations/999").status_code == 404
    assert client.get("/api/v1/projects/nope/operations").status_code == 404


def test_stage_completion(client, project):
    add(client, 0, "A", stage=1, completed=True)
    add(client, 5, "A", stage=2, type_="NP", completed=True)
    add(client, 10, "A", stage=3)
    r = client.get(f"{BASE}/wells/well-1/stages")
    assert r.status_code == 200
    stages = r.json()
    assert len(stages) == 26
    assert stages[0] == {"number": 1, "is_completed": True}
    assert stages[1]["is_completed"] is False
    assert stages[2]["is_completed"] is False
    assert client.get(f"{BASE}/wells/nope/stages").status_code == 404


def test_presets_follow_last_started_well(client, project):
    r = client.get(f"{BASE}/presets/pump")
    assert r.status_code == 200
    assert r.json()["well_id"] == "well-1"  # first used well

    add(client, 0, "A", well_id="well-3")
    add(client, -10, "A", well_id="well-2")
    pump = client.get(f"{BASE}/presets/pump").json()
    assert pump["well_id"] == "well-3"
    assert pump["type"] == "PUMP"
    assert pump["party"] == "LOS"
    assert pump["main_event"] == "Frac"

    chosen = client.get(f"{BASE}/presets/wellcheck", params={"well_id": "well-5"}).json()
    assert chosen["well_id"] == "well-5"
    assert chosen["main_event"] == "Well Open/Close"

    keys = [p["key"] for p in client.get(f"{BASE}/presets").json()]
    assert keys == ["pump", "downtime", "nonpumping", "zipper", "wellcheck"]
    assert client.get(f"{BASE}/presets/unknown").status_code == 404


def test_random_sequences_keep_end_times_consistent(client, project):
    rng = random.Random(20251018)
    sectors = ["PAD", "A", "B", "C", "WireLine"]
    wells = ["well-1", "well-2", "well-3"]
    ids = []
    for _ in range(40):
        action = rng.choice(["add", "add", "edit", "delete"]) if ids else "add"
        if action == "add":
            # coarse minutes so equal start times occur too
            ids.append(add(client, rng.randrange(0, 120, 5), rng.choice(sectors), well_id=rng.choice(wells))["id"])
        elif action == "edit":
            change = rng.choice([{"sector": rng.choice(sectors)}, {"start_time": iso(rng.randrange(0, 120, 5))},
                                 {"well_id": rng.choice(wells)}])
            r = client.put(f"{BASE}/operations/{rng.choice(ids)}", json=change)
            assert r.status_code == 200
        else:
            op_id = ids.pop(rng.randrange(len(ids)))
            assert client.delete(f"{BASE}/operations/{op_id}").status_code == 200
        assert_consistent(client)
