from habitlog.api.routes import HANDLERS, Action
from habitlog.models import Base


def _add(client, name):
    return client.post("/api", json={"action": "add_habit", "name": name})


def test_every_action_has_a_handler():
    assert set(HANDLERS) == set(Action)


def test_get_habits_empty(client):
    response = client.get("/api", params={"action": "get_habits"})

    assert response.status_code == 200
    assert response.json() == []


def test_add_habit(client):
    response = _add(client, "  Read  ")

    assert response.status_code == 200
    body = response.json()
    assert body["success"] is True
    assert body["name"] == "Read"
    assert body["is_completed_today"] == 0
    assert isinstance(body["id"], int)


def test_add_habit_blank_name(client):
    response = _add(client, "   ")

    assert response.status_code == 400
    assert response.json() == {"error": "Habit name is required"}
    assert client.get("/api", params={"action": "get_habits"}).json() == []


def test_toggle_habit(client):
    habit_id = _add(client, "Read").json()["id"]

    response = client.post("/api", json={"action": "toggle_habit", "id": habit_id, "completed": True})

    assert response.status_code == 200
    assert response.json() == {"success": True, "id": habit_id, "completed": 1}
    listed = client.get("/api", params={"action": "get_habits"}).json()
    assert listed == [{"id": habit_id, "name": "Read", "is_completed_today": 1}]


def test_toggle_habit_accepts_string_id(client):
    habit_id = _add(client, "Read").json()["id"]

    response = client.post("/api", json={"action": "toggle_habit", "id": str(habit_id), "completed": "false"})

    assert response.status_code == 200
    assert response.json() == {"success": True, "id": habit_id, "completed": 0}


def test_toggle_habit_invalid_id(client):
    response = client.post("/api", json={"action": "toggle_habit", "id": "x", "completed": True})

    assert response.status_code == 400
    assert response.json() == {"error": "Invalid habit ID"}


def test_toggle_habit_missing(client):
    response = client.post("/api", json={"action": "toggle_habit", "id": 404, "completed": True})

    assert response.status_code == 404
    assert response.json() == {"error": "Habit not found"}


def test_delete_habit(client):
    habit_id = _add(client, "Read").json()["id"]

    response = client.post("/api", json={"action": "delete_habit", "id": habit_id})

    assert response.status_code == 200
    assert response.json() == {"success": True, "id": habit_id}
    assert client.get("/api", params={"action": "get_habits"}).json() == []


def test_delete_habit_missing(client):
    response = client.post("/api", json={"action": "delete_habit", "id": 12})

    assert response.status_code == 404
    assert response.json() == {"error": "Habit not found"}


def test_delete_habit_without_id(client):
    response = client.post("/api", json={"action": "delete_habit"})

    assert response.status_code == 400
    assert response.json() == {"error": "Invalid habit ID"}


def test_scenario(client):
    read_id = _add(client, "Read").json()["id"]
    exercise_id = _add(client, "Exercise").json()["id"]

    listed = client.get("/api", params={"action": "get_habits"}).json()
    assert [item["name"] for item in listed] == ["Exercise", "Read"]

    client.post("/api", json={"action": "toggle_habit", "id": read_id, "completed": True})
    listed = client.get("/api", params={"action": "get_habits"}).json()
    assert {item["name"]: item["is_completed_today"] for item in listed} == {"Exercise": 0, "Read": 1}

    client.post("/api", json={"action": "delete_habit", "id": exercise_id})
    listed = client.get("/api", params={"action": "get_habits"}).json()
    assert listed == [{"id": read_id, "name": "Read", "is_completed_today": 1}]


def test_get_habits_over_post(client):
    _add(client, "Read")

    response = client.post("/api", json={"action": "get_habits"})

    assert response.status_code == 200
    assert [item["name"] for item in response.json()] == ["Read"]


def test_unknown_action(client):
    response = client.post("/api", json={"action": "rename_habit"})

    assert response.status_code == 400
    assert response.json() == {"error": "Invalid action"}


def test_missing_action_on_get(client):
    response = client.get("/api")

    assert response.status_code == 400
    assert response.json() == {"error": "Invalid action"}


def test_write_action_over_get_is_rejected(client):
    response = client.get("/api", params={"action": "add_habit", "name": "Read"})

    assert response.status_code == 400
    assert response.json() == {"error": "Invalid action"}


def test_malformed_body(client):
    response = client.post("/api", content="{not json", headers={"Content-Type": "application/json"})

    assert response.status_code == 400
    assert response.json() == {"error": "Invalid action"}


def test_non_object_body(client):
    response = client.post("/api", json=["add_habit"])

    assert response.status_code == 400
    assert response.json() == {"error": "Invalid action"}


def test_storage_failure_returns_500(client, engine):
    Base.metadata.drop_all(bind=engine)

    response = client.get("/api", params={"action": "get_habits"})

    assert response.status_code == 500
    assert response.json()["error"].startswith("Failed to load habits")


def test_index_page(client):
    response = client.get("/")

    assert response.status_code == 200
    assert response.headers["content-type"].startswith("text/html")
    assert "habitList" in response.text


def test_health_live(client):
    response = client.get("/health/live")

    assert response.status_code == 200
    assert response.json() == {"status": "alive"}


def test_toggle_habit_id_out_of_range(client):
    response = client.post("/api", json={"action": "toggle_habit", "id": 2**70, "completed": True})

    assert response.status_code == 400
    assert response.json() == {"error": "Invalid habit ID"}


def test_delete_habit_id_out_of_range(client):
    response = client.post("/api", json={"action": "delete_habit", "id": str(2**64)})

    assert response.status_code == 400
    assert response.json() == {"error": "Invalid habit ID"}


def test_health_ready(client):
    response = client.get("/health/ready")

    assert response.status_code == 200
    assert response.json() == {"status": "ready"}
