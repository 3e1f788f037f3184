"""Tests for all API endpoints.

Posts deterministic inputs (fixed "today") and checks the computed
layout, selection text and validation errors.
"""

import pytest

from heatwall.constants.palettes import COLOR_PALETTES


def grid_body(**overrides):
    body = {
        "metric": "CALORIES_BURNED",
        "num_days": 7,
        "today": "2024-01-10",
        "data_points": [
            {"date": "2024-01-05", "value": 600},
            {"date": "2024-01-09", "value": 1500},
        ],
    }
    body.update(overrides)
    return body


@pytest.mark.asyncio
class TestHealthEndpoint:
    """Test /api/health endpoint."""

    async def test_health_returns_ok(self, client):
        resp = await client.get("/api/health")
        assert resp.status_code == 200
        data = resp.json()
        assert data["status"] == "ok"
        assert "uptime_seconds" in data

    async def test_health_has_version(self, client):
        resp = await client.get("/api/health")
        assert resp.json()["version"] == "1.0.0"


@pytest.mark.asyncio
class TestGridEndpoint:
    """Test POST /api/grid."""

    async def test_basic_layout(self, client):
        resp = await client.post("/api/grid", json=grid_body())
        assert resp.status_code == 200
        data = resp.json()

        assert data["display_start"] == "2024-01-04"
        assert data["display_end"] == "2024-01-10"
        assert data["week_count"] == 2
        assert data["total_cells"] == 14
        assert data["max_columns"] == 2
        assert len(data["cells"]) == 14
        assert sum(1 for c in data["cells"] if c["interactive"]) == 7
        assert data["month_labels"] == {"0": "Jan"}
        assert data["description"] == "Tap a cell to see details"
        assert data["selected"] is None

    async def test_cell_colors_use_metric_palette(self, client):
        """Verify the configured calories thresholds and palette apply."""
        data = (await client.post("/api/grid", json=grid_body())).json()
        cells = {c["cell_id"]: c for c in data["cells"]}
        palette = COLOR_PALETTES["ios_health_red"]["colors"]

        assert cells["activity-cell-9"]["date"] == "2024-01-09"
        assert cells["activity-cell-9"]["value"] == 1500
        assert cells["activity-cell-9"]["color"] == palette[3]
        assert cells["activity-cell-5"]["color"] == palette[1]
        # Padding before the window
        assert cells["activity-cell-0"]["color"] == "transparent"
        assert cells["activity-cell-0"]["interactive"] is False

    async def test_unbounded_threshold_is_null(self, client):
        data = (await client.post("/api/grid", json=grid_body())).json()
        assert data["effective_thresholds"] == [0, 500, 800, 950, None]

    async def test_custom_thresholds_and_colors(self, client):
        body = grid_body(
            thresholds=[0, 1000, 1400, None],
            colors=["#000000", "#111111", "#222222", "#333333"],
        )
        data = (await client.post("/api/grid", json=body)).json()
        cells = {c["cell_id"]: c for c in data["cells"]}
        assert data["effective_thresholds"] == [0, 1000, 1400, None]
        assert cells["activity-cell-9"]["color"] == "#222222"
        assert cells["activity-cell-5"]["color"] == "#000000"

    async def test_dark_theme_palette(self, client):
        body = grid_body(palette_id="github_green", theme="dark")
        data = (await client.post("/api/grid", json=body)).json()
        cells = {c["cell_id"]: c for c in data["cells"]}
        assert cells["activity-cell-9"]["color"] == "#40c463"

    async def test_selection_description(self, client):
        resp = await client.post("/api/grid", json=grid_body(selected="2024-01-09"))
        data = resp.json()
        assert data["selected"] == "2024-01-09"
        assert data["description"] == "1,500 calories on Jan 9, 2024"

    async def test_selection_outside_window_ignored(self, client):
        data = (await client.post("/api/grid", json=grid_body(selected="2024-01-12"))).json()
        assert data["selected"] is None

    async def test_visible_total(self, client):
        data = (await client.post("/api/grid", json=grid_body(show_hint=False))).json()
        assert data["description"] == "2,100 calories"

    async def test_year_split(self, client):
        """Verify a New Year window splits into one row per year."""
        body = grid_body(
            today="2024-01-02",
            data_points=[],
            enable_multi_row_layout=True,
            split_by_year=True,
        )
        data = (await client.post("/api/grid", json=body)).json()

        assert len(data["rows"]) == 2
        newest, oldest = data["rows"]
        assert newest["year"] is None
        assert newest["left_padding"] == 17
        assert newest["weeks"][0][0] is None
        assert newest["weeks"][0][1] == "2024-01-01"
        assert oldest["year"] == 2023
        assert oldest["is_last_row_of_year"] is True
        assert len(data["cells"]) == 14
        ids = [c["cell_id"] for c in data["cells"]]
        assert len(ids) == len(set(ids))

    async def test_fit_uses_container_width(self, client):
        data = (await client.post("/api/grid", json=grid_body(num_days="fit", container_width=400))).json()
        assert data["max_columns"] == 21
        assert data["display_start"] == "2023-08-17"

    async def test_all_history(self, client):
        data = (await client.post("/api/grid", json=grid_body(num_days="all"))).json()
        assert data["display_start"] == "2024-01-05"

    async def test_invalid_color_rejected(self, client):
        resp = await client.post("/api/grid", json=grid_body(colors=["red", "#000000"]))
        assert resp.status_code == 422

    async def test_invalid_num_days_rejected(self, client):
        assert (await client.post("/api/grid", json=grid_body(num_days=0))).status_code == 422
        assert (await client.post("/api/grid", json=grid_body(num_days="weekly"))).status_code == 422

    async def test_num_days_upper_bound(self, client):
        """Verify oversized day counts are rejected before any grid is built."""
        assert (await client.post("/api/grid", json=grid_body(num_days=10 ** 9))).status_code == 422
        assert (await client.post("/api/grid", json=grid_body(num_days=3661))).status_code == 422
        assert (await client.post("/api/grid", json=grid_body(num_days=3660))).status_code == 200

    async def test_invalid_theme_rejected(self, client):
        resp = await client.post("/api/grid", json=grid_body(theme="sepia"))
        assert resp.status_code == 422

    async def test_invalid_metric_rejected(self, client):
        resp = await client.post("/api/grid", json=grid_body(metric="HEART_RATE"))
        assert resp.status_code == 422

    async def test_config_layout_defaults(self, client, test_config):
        """Verify unset flags come from the configured layout section."""
        test_config["layout"]["show_month_labels"] = False
        data = (await client.post("/api/grid", json=grid_body())).json()
        assert data["month_labels"] == {}


@pytest.mark.asyncio
class TestPalettesEndpoint:
    """Test GET /api/palettes."""

    async def test_lists_all_palettes(self, client):
        data = (await client.get("/api/palettes")).json()
        assert len(data["palettes"]) == 19
        ids = [p["id"] for p in data["palettes"]]
        assert ids[0] == "github_green"

    async def test_dark_order(self, client):
        data = (await client.get("/api/palettes")).json()
        green = data["palettes"][0]
        assert green["light"] == ["#ebedf0", "#9be9a8", "#40c463", "#30a14e", "#216e39"]
        assert green["dark"] == ["#ebedf0", "#216e39", "#30a14e", "#40c463", "#9be9a8"]


@pytest.mark.asyncio
class TestMetricsEndpoint:
    """Test GET /api/metrics."""

    async def test_lists_metrics(self, client):
        data = (await client.get("/api/metrics")).json()
        steps = data["metrics"]["STEPS"]
        assert steps["display_name"] == "Steps"
        assert steps["thresholds"] == [0, 2000, 5000, 10000, None]
        assert len(steps["colors"]) == 5
        assert len(data["metrics"]) == 6
