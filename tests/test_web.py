"""Tests for the web API."""

import pytest
from fastapi.testclient import TestClient

from liftlog.generators.workout_csv import workouts_to_csv
from liftlog.web import create_app


@pytest.fixture
def client(memory_store):
    """Test client backed by an in-memory store."""
    with TestClient(create_app(memory_store)) as client:
        yield client


class TestWorkoutRoutes:
    """Tests for /workouts routes."""

    def test_exists_empty(self, client):
        assert client.get("/workouts/exists").json() == {"exists": False}

    def test_import_then_export(self, client, sample_workouts):
        csv_text = workouts_to_csv(sample_workouts)
        response = client.post(
            "/workouts/import",
            files={"file": ("routine.csv", csv_text.encode("utf-8"), "text/csv")},
        )
        assert response.status_code == 200
        assert response.json() == {"status": "imported", "count": 4}
        assert client.get("/workouts/exists").json() == {"exists": True}

        export = client.get("/workouts/export")
        assert export.status_code == 200
        assert export.headers["content-type"].startswith("text/csv")
        assert 'filename="workouts-' in export.headers["content-disposition"]

        lines = export.text.split("\n")
        assert lines[0].startswith("id,name,weight")
        assert len(lines) == 5

    def test_import_rejects_binary(self, client):
        response = client.post(
            "/workouts/import",
            files={"file": ("routine.csv", b"\xff\xfe\x00bad", "text/csv")},
        )
        assert response.status_code == 400

    def test_list_by_day(self, client, sample_workouts):
        client.post(
            "/workouts/import",
            files={"file": ("r.csv", workouts_to_csv(sample_workouts).encode(), "text/csv")},
        )
        names = [w["name"] for w in client.get("/workouts", params={"day": 1}).json()]
        assert names == ["Bench Press", "Incline DB Press"]


class TestWeightRoutes:
    """Tests for /weights routes."""

    def test_stats_empty(self, client):
        data = client.get("/weights/stats").json()
        assert data["daily_stats"] == []
        assert data["y_domain"] == {"min": 0, "max": 100}
        assert data["stats"] == {
            "current_weight": 0,
            "three_day_change": 0,
            "seven_day_change": 0,
        }

    def test_log_and_stats(self, client):
        for day in range(1, 7):
            response = client.post(
                "/weights",
                json={"weight": 179.0 + day, "timestamp": f"2024-01-0{day}T08:00:00"},
            )
            assert response.status_code == 200

        data = client.get("/weights/stats").json()
        assert [p["display_label"] for p in data["daily_stats"]] == [
            "Jan 1", "Jan 2", "Jan 3", "Jan 4", "Jan 5", "Jan 6",
        ]
        # Three-day averages run 181.0 (Jan 3) to 184.0 (Jan 6)
        assert data["stats"]["current_weight"] == 184.0
        assert data["stats"]["three_day_change"] == 3.0
        assert data["stats"]["seven_day_change"] == 0
        assert data["y_domain"] == {"min": 178.0, "max": 187.0}


def test_health(client):
    assert client.get("/health").json()["status"] == "healthy"


class TestEditingRoutes:
    """Tests for delete and reorder routes."""

    @pytest.fixture
    def routine(self, client, sample_workouts):
        client.post(
            "/workouts/import",
            files={"file": ("r.csv", workouts_to_csv(sample_workouts).encode(), "text/csv")},
        )
        return {w["name"]: w for w in client.get("/workouts").json()}

    def test_delete_workout(self, client, routine):
        response = client.delete(f"/workouts/{routine['Squat']['id']}")
        assert response.json() == {"status": "deleted"}
        assert "Squat" not in [w["name"] for w in client.get("/workouts").json()]

    def test_delete_unknown_workout(self, client, routine):
        assert client.delete("/workouts/nope").status_code == 404

    def test_reorder_workouts(self, client, routine):
        ids = [routine["Incline DB Press"]["id"], routine["Bench Press"]["id"]]
        response = client.post("/workouts/reorder", json={"day": 1, "ids": ids})
        assert response.status_code == 200

        names = [w["name"] for w in client.get("/workouts", params={"day": 1}).json()]
        assert names == ["Incline DB Press", "Bench Press"]

    def test_list_and_delete_weight(self, client):
        sample = client.post(
            "/weights", json={"weight": 180.0, "timestamp": "2024-01-01T08:00:00"}
        ).json()
        assert [s["id"] for s in client.get("/weights").json()] == [sample["id"]]

        assert client.delete(f"/weights/{sample['id']}").json() == {"status": "deleted"}
        assert client.get("/weights").json() == []
        assert client.delete(f"/weights/{sample['id']}").status_code == 404
