"""Tests for task endpoints."""

from fastapi.testclient import TestClient

from saydone.models.task import TaskRecord
from saydone.services.task_store import TaskStore

NOW = "2024-01-10T09:30:00"


def test_parse_task_returns_200(client: TestClient, store: TaskStore) -> None:
    """Test that parse endpoint extracts tasks without storing them."""
    response = client.post(
        "/tasks/parse",
        json={"text": "i need to call mom tonight, also email the client by friday", "now": NOW},
    )

    assert response.status_code == 200
    data = response.json()
    assert data["count"] == 2
    assert data["tasks"][0]["description"] == "Call mother"
    assert data["tasks"][0]["urgency"] == "High"
    assert data["tasks"][0]["due_date_display"] == "10-Jan"
    assert data["tasks"][1]["category"] == "Work"
    assert data["tasks"][1]["due_date"] == "2024-01-12"
    assert store.tasks == []


def test_parse_task_accepts_empty_text(client: TestClient) -> None:
    """Test that empty input yields an empty task list."""
    response = client.post("/tasks/parse", json={"text": ""})
    assert response.status_code == 200
    assert response.json()["tasks"] == []


def test_parse_task_validates_missing_text(client: TestClient) -> None:
    """Test that parse endpoint validates the request body."""
    response = client.post("/tasks/parse", json={})
    assert response.status_code == 422  # Validation error


def test_capture_task_parses_and_stores(client: TestClient, store: TaskStore) -> None:
    """Test that capture endpoint combines parse and add."""
    client.post("/tasks/capture", json={"text": "buy milk", "now": NOW})
    response = client.post("/tasks/capture", json={"text": "call mom and email boss", "now": NOW})

    assert response.status_code == 200
    assert response.json()["count"] == 2

    listing = client.get("/tasks").json()
    assert [t["description"] for t in listing["tasks"]] == ["Call mother", "Email boss", "Buy milk"]
    assert listing["can_undo"] is True
    assert len(store.tasks) == 3


def test_edit_task(client: TestClient, store: TaskStore) -> None:
    """Test editing description and due date."""
    task = store.add(TaskRecord(description="Buy milk"))[0]

    response = client.patch(
        f"/tasks/{task.id}",
        json={"description": "Buy oat milk", "due_date": "05-Jan", "urgency": "Low"},
    )

    assert response.status_code == 200
    data = response.json()
    assert data["description"] == "Buy oat milk"
    assert data["due_date_display"] == "05-Jan"
    assert data["urgency"] == "Low"


def test_edit_task_clears_due_date(client: TestClient, store: TaskStore) -> None:
    """Test that 'Not specified' clears a due date."""
    task = store.add(TaskRecord(description="Buy milk"))[0]
    response = client.patch(f"/tasks/{task.id}", json={"due_date": "Not specified"})
    assert response.json()["due_date_display"] == "Not specified"


def test_edit_task_rejects_bad_date(client: TestClient, store: TaskStore) -> None:
    """Test that a malformed due date is a 422."""
    task = store.add(TaskRecord(description="Buy milk"))[0]
    response = client.patch(f"/tasks/{task.id}", json={"due_date": "someday"})
    assert response.status_code == 422


def test_toggle_and_remove_task(client: TestClient, store: TaskStore) -> None:
    """Test toggling and then removing a task."""
    task = store.add(TaskRecord(description="Buy milk"))[0]

    response = client.post(f"/tasks/{task.id}/toggle")
    assert response.status_code == 200
    assert response.json()["completed"] is True

    response = client.delete(f"/tasks/{task.id}")
    assert response.status_code == 200
    assert store.tasks == []


def test_unknown_task_returns_404(client: TestClient) -> None:
    """Test that every task route returns 404 for an unknown id."""
    assert client.post("/tasks/missing/toggle").status_code == 404
    assert client.delete("/tasks/missing").status_code == 404
    assert client.patch("/tasks/missing", json={"description": "x"}).status_code == 404


def test_undo_and_redo(client: TestClient, store: TaskStore) -> None:
    """Test history endpoints."""
    client.post("/tasks/capture", json={"text": "buy milk", "now": NOW})

    response = client.post("/tasks/undo")
    assert response.json()["success"] is True
    assert response.json()["tasks"] == []

    response = client.post("/tasks/redo")
    assert response.json()["success"] is True
    assert len(response.json()["tasks"]) == 1

    response = client.post("/tasks/redo")
    assert response.json()["success"] is False
    assert response.json()["message"] == "Nothing to redo"
