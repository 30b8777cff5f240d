"""Tests for task endpoints."""

from datetime import datetime, timezone


BASE = "/api/todo-list/task"


def _task_payload(**fields):
    payload = {
        "title": "Test Task",
        "description": "Desc",
        "dueDate": "2025-07-16T15:00:00Z",
        "createdAt": "2025-07-10T08:00:00Z",
        "priority": 1,
        "isCompleted": False,
    }
    payload.update(fields)
    return payload


def _create_task(client, **fields):
    return client.post(BASE, json=_task_payload(**fields))


class TestCreateTask:
    def test_create_task(self, client):
        response = _create_task(client)
        assert response.status_code == 200
        data = response.get_json()
        assert data["id"] is not None
        assert data["title"] == "Test Task"
        assert data["priority"] == 1
        assert data["createdAt"] == "2025-07-10T08:00:00"
        assert data["subTasks"] == []

    def test_create_with_sub_tasks_round_trip(self, client):
        sub_tasks = [
            _task_payload(title="Step 1"),
            _task_payload(title="Step 2"),
        ]
        task_id = _create_task(client, subTasks=sub_tasks).get_json()["id"]

        data = client.get(f"{BASE}?id={task_id}").get_json()
        assert [s["title"] for s in data["subTasks"]] == ["Step 1", "Step 2"]
        assert {s["taskId"] for s in data["subTasks"]} == {task_id}

    def test_missing_fields(self, client):
        response = client.post(BASE, json={})
        assert response.status_code == 400
        assert set(response.get_json()) == {"title", "dueDate", "createdAt"}

    def test_invalid_priority(self, client):
        response = _create_task(client, priority=9)
        assert response.status_code == 400
        assert "priority" in response.get_json()

    def test_title_too_long(self, client):
        response = _create_task(client, title="t" * 251)
        assert response.status_code == 400

    def test_blank_title(self, client):
        response = _create_task(client, title="   ")
        assert response.status_code == 400
        assert response.get_json()["title"] == ["Title is required"]
        assert client.get(f"{BASE}/all").get_json() == []

    def test_empty_description(self, client):
        response = _create_task(client, description="")
        assert response.status_code == 400
        assert "description" in response.get_json()

    def test_body_must_be_json(self, client):
        response = client.post(BASE, data={"title": "Form post"})
        assert response.status_code == 415
        assert response.get_json() == {"error": "Request body must be JSON", "status": 415}


class TestGetTask:
    def test_get_task(self, client):
        task_id = _create_task(client).get_json()["id"]

        response = client.get(f"{BASE}?id={task_id}")
        assert response.status_code == 200
        assert response.get_json()["title"] == "Test Task"

    def test_not_found(self, client):
        response = client.get(f"{BASE}?id=999")
        assert response.status_code == 404
        assert response.get_json()["error"] == "Task not found"

    def test_missing_id_is_not_found(self, client):
        assert client.get(BASE).status_code == 404

    def test_malformed_id(self, client):
        assert client.get(f"{BASE}?id=abc").status_code == 400

    def test_id_beyond_integer_range(self, client):
        _create_task(client)
        response = client.get(f"{BASE}?id=99999999999999999999")
        assert response.status_code == 404
        assert response.get_json()["error"] == "Task not found"


class TestListTasks:
    def test_empty(self, client):
        response = client.get(f"{BASE}/all")
        assert response.status_code == 200
        assert response.get_json() == []

    def test_completion_filter(self, client):
        _create_task(client, title="Open")
        _create_task(client, title="Done", isCompleted=True)

        done = client.get(f"{BASE}/all?isCompleted=true").get_json()
        open_ = client.get(f"{BASE}/all?isCompleted=False").get_json()
        assert [t["title"] for t in done] == ["Done"]
        assert [t["title"] for t in open_] == ["Open"]

    def test_unparsable_filter_means_no_filter(self, client):
        _create_task(client, title="Open")
        _create_task(client, title="Done", isCompleted=True)

        data = client.get(f"{BASE}/all?isCompleted=maybe").get_json()
        assert len(data) == 2


class TestRangeEndpoints:
    def test_today(self, client):
        _create_task(client, title="Tonight", dueDate="2025-07-16T23:00:00Z")
        _create_task(client, title="Tomorrow", dueDate="2025-07-17T00:00:00Z")

        data = client.get(f"{BASE}/all/today").get_json()
        assert [t["title"] for t in data] == ["Tonight"]

    def test_tomorrow(self, client):
        _create_task(client, title="Today", dueDate="2025-07-16T10:00:00Z")
        _create_task(client, title="Tomorrow", dueDate="2025-07-17T10:00:00Z")

        data = client.get(f"{BASE}/all/tomorrow").get_json()
        assert [t["title"] for t in data] == ["Tomorrow"]

    def test_this_week(self, client):
        for title, due in [
            ("Monday", "2025-07-14T07:00:00Z"),
            ("Wednesday", "2025-07-16T07:00:00Z"),
            ("Sunday", "2025-07-20T22:00:00Z"),
            ("Next Monday", "2025-07-21T07:00:00Z"),
        ]:
            _create_task(client, title=title, dueDate=due)

        data = client.get(f"{BASE}/all/this-week").get_json()
        assert [t["title"] for t in data] == ["Monday", "Wednesday", "Sunday"]

    def test_range_ignores_completion_filter(self, client):
        _create_task(client, title="Open")
        _create_task(client, title="Done", isCompleted=True)

        data = client.get(f"{BASE}/all/today?isCompleted=true").get_json()
        assert [t["title"] for t in data] == ["Open", "Done"]

    def test_due_date_offset_is_converted_to_utc(self, client):
        # 00:30 on the 17th at UTC+2 is 22:30 on the 16th UTC
        _create_task(client, title="Late", dueDate="2025-07-17T00:30:00+02:00")

        data = client.get(f"{BASE}/all/today").get_json()
        assert [t["title"] for t in data] == ["Late"]

    def test_unknown_range(self, client):
        assert client.get(f"{BASE}/all/yesterday").status_code == 404


class TestUpdateTask:
    def test_update_task(self, client, clock):
        created = _create_task(client, title="Original").get_json()
        clock.current = datetime(2025, 7, 16, 18, 5, tzinfo=timezone.utc)

        response = client.put(
            f"{BASE}/{created['id']}",
            json=_task_payload(
                id=created["id"],
                title="Updated",
                priority=3,
                isCompleted=True,
                dueDate="2026-01-01T00:00:00Z",
                createdAt="2026-01-01T00:00:00Z",
                updatedAt="1999-01-01T00:00:00Z",
            ),
        )
        assert response.status_code == 200
        data = response.get_json()
        assert data["title"] == "Updated"
        assert data["priority"] == 3
        assert data["isCompleted"] is True
        assert data["dueDate"] == created["dueDate"]
        assert data["createdAt"] == created["createdAt"]
        assert data["updatedAt"] == "2025-07-16T18:05:00"

    def test_route_and_body_id_mismatch(self, client):
        task_id = _create_task(client).get_json()["id"]

        response = client.put(f"{BASE}/{task_id}", json=_task_payload(id=task_id + 1))
        assert response.status_code == 400
        assert response.get_json()["error"] == "Route ID does not match task ID"

    def test_body_without_id(self, client):
        task_id = _create_task(client).get_json()["id"]

        assert client.put(f"{BASE}/{task_id}", json=_task_payload()).status_code == 400

    def test_validation_failure(self, client):
        task_id = _create_task(client).get_json()["id"]

        response = client.put(f"{BASE}/{task_id}", json=_task_payload(id=task_id, title=""))
        assert response.status_code == 400
        assert "title" in response.get_json()

    def test_not_found(self, client):
        response = client.put(f"{BASE}/999", json=_task_payload(id=999))
        assert response.status_code == 404
        assert response.get_json()["error"] == "Task with ID 999 not found."

    def test_id_beyond_integer_range(self, client):
        huge = 2**63
        response = client.put(f"{BASE}/{huge}", json=_task_payload(id=huge))
        assert response.status_code == 400
        assert "id" in response.get_json()


class TestDeleteTask:
    def test_delete_task(self, client):
        task_id = _create_task(client).get_json()["id"]

        response = client.delete(f"{BASE}?id={task_id}")
        assert response.status_code == 200
        assert response.get_json() == task_id
        assert client.get(f"{BASE}?id={task_id}").status_code == 404

    def test_delete_removes_sub_tasks(self, client):
        task_id = _create_task(client, subTasks=[_task_payload(title="Step")]).get_json()["id"]

        client.delete(f"{BASE}?id={task_id}")
        assert client.get(f"/api/todo-list/sub-task?taskId={task_id}").get_json() == []

    def test_not_found(self, client):
        assert client.delete(f"{BASE}?id=999").status_code == 404
        assert client.delete(f"{BASE}?id=0").status_code == 404
        assert client.delete(f"{BASE}?id=-1").status_code == 404

    def test_id_beyond_integer_range(self, client):
        _create_task(client)
        assert client.delete(f"{BASE}?id=99999999999999999999").status_code == 404
        assert client.delete(f"{BASE}?id=-99999999999999999999").status_code == 404
        assert len(client.get(f"{BASE}/all").get_json()) == 1
