"""Integration tests for the REST API."""

import xml.etree.ElementTree as ET
from io import StringIO

import ezdxf
import pytest
from fastapi.testclient import TestClient

from wardrobe.web import create_app

SPACE = {"width": 4800, "height": 2400, "depth": 600, "slot_count": 8}


@pytest.fixture
def client() -> TestClient:
    """Create a test client over a fresh application."""
    return TestClient(create_app())


def test_health(client: TestClient) -> None:
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "healthy"}


class TestLayoutEndpoint:
    """Tests for POST /api/v1/layout."""

    def test_compute_layout(self, client: TestClient) -> None:
        response = client.post("/api/v1/layout", json=SPACE)

        assert response.status_code == 200
        data = response.json()
        assert data["is_valid"] is True
        assert data["units"] == "mm"
        assert data["notes"] == []
        assert data["layout"]["slots"]["count"] == 8
        assert data["layout"]["slots"]["width"] == pytest.approx(587.5)
        assert data["labels"]["opening_inner_width"] == "4700mm"

    def test_soffit_layout_with_note(self, client: TestClient) -> None:
        body = {
            **SPACE,
            "slot_count": 6,
            "soffit": {"side": "left", "width": 900, "height": 300},
        }
        response = client.post("/api/v1/layout", json=body)

        assert response.status_code == 200
        data = response.json()
        assert data["notes"] == ["Slot count adjusted from 6 to 7 (550mm per slot)"]
        assert data["layout"]["soffit"]["region"]["width"] == pytest.approx(850.0)
        assert data["layout"]["members"]["top"]["span"]["length"] == pytest.approx(3850.0)
        assert data["layout"]["slots"]["count_range"] == [7, 12]

    def test_meters(self, client: TestClient) -> None:
        response = client.post("/api/v1/layout", json={**SPACE, "units": "m"})

        data = response.json()
        assert data["units"] == "m"
        assert data["layout"]["width"] == pytest.approx(4.8)
        assert data["labels"]["slot_width"] == "588mm"

    def test_infeasible_geometry(self, client: TestClient) -> None:
        body = {**SPACE, "soffit": {"side": "right", "width": 4750, "height": 300}}
        response = client.post("/api/v1/layout", json=body)

        assert response.status_code == 422
        data = response.json()
        assert data["error_type"] == "invalid_config"
        assert "Soffit width (4750mm)" in data["details"][0]["message"]

    def test_schema_violation(self, client: TestClient) -> None:
        response = client.post("/api/v1/layout", json={**SPACE, "width": 100})
        assert response.status_code == 422

    def test_semi_standing_requires_wall_side(self, client: TestClient) -> None:
        response = client.post(
            "/api/v1/layout", json={**SPACE, "installation_type": "semi-standing"}
        )
        assert response.status_code == 422


class TestLayoutFromConfigEndpoint:
    def test_from_config(self, client: TestClient, soffit_config_data: dict) -> None:
        response = client.post(
            "/api/v1/layout/from-config", json={"config": soffit_config_data}
        )

        assert response.status_code == 200
        assert response.json()["layout"]["slots"]["count"] == 7

    def test_config_units(self, client: TestClient, config_data: dict) -> None:
        config_data["output"] = {"units": "m"}
        response = client.post("/api/v1/layout/from-config", json={"config": config_data})

        assert response.json()["units"] == "m"

    def test_invalid_config(self, client: TestClient) -> None:
        response = client.post(
            "/api/v1/layout/from-config",
            json={"config": {"schema_version": "1.0", "space": {"width": 4800}}},
        )

        assert response.status_code == 422
        data = response.json()
        assert data["error_type"] == "validation"
        paths = [d["path"] for d in data["details"]]
        assert "space.height" in paths
        assert "space.depth" in paths


class TestValidateEndpoint:
    """Tests for POST /api/v1/validate."""

    def test_valid(self, client: TestClient, config_data: dict) -> None:
        response = client.post("/api/v1/validate", json={"config": config_data})

        assert response.status_code == 200
        assert response.json() == {"is_valid": True, "errors": [], "warnings": []}

    def test_warnings(self, client: TestClient) -> None:
        config = {
            "schema_version": "1.0",
            "space": {"width": 2000, "height": 2400, "depth": 600, "slot_count": 8},
        }
        response = client.post("/api/v1/validate", json={"config": config})

        data = response.json()
        assert data["is_valid"] is True
        assert data["warnings"][0]["path"] == "space.slot_count"
        assert data["warnings"][0]["suggestion"] is not None

    def test_schema_errors_reported_in_result(self, client: TestClient) -> None:
        response = client.post(
            "/api/v1/validate",
            json={"config": {"schema_version": "3.0", "space": {"width": 4800}}},
        )

        assert response.status_code == 200
        data = response.json()
        assert data["is_valid"] is False
        assert "schema_version" in [e["path"] for e in data["errors"]]

    def test_geometry_errors(self, client: TestClient) -> None:
        config = {
            "schema_version": "1.0",
            "space": {
                **SPACE,
                "soffit": {"side": "left", "width": 4700, "height": 300},
            },
        }
        response = client.post("/api/v1/validate", json={"config": config})

        data = response.json()
        assert data["is_valid"] is False
        assert data["errors"][0]["path"] == "space.soffit.width"
        assert data["errors"][0]["value"] == 4700


class TestExportEndpoints:
    """Tests for the export endpoints."""

    def test_list_formats(self, client: TestClient) -> None:
        response = client.get("/api/v1/export/formats")

        assert response.status_code == 200
        assert response.json() == {"formats": ["dxf", "json", "svg"]}

    def test_export_svg(self, client: TestClient) -> None:
        response = client.post("/api/v1/export/svg", json=SPACE)

        assert response.status_code == 200
        assert response.headers["content-type"].startswith("image/svg+xml")
        assert "wardrobe.svg" in response.headers["content-disposition"]
        root = ET.fromstring(response.text)
        assert root.tag == "{http://www.w3.org/2000/svg}svg"

    def test_export_json_in_meters(self, client: TestClient) -> None:
        response = client.post("/api/v1/export/json", json={**SPACE, "units": "m"})

        assert response.status_code == 200
        data = response.json()
        assert data["units"] == "m"
        assert data["layout"]["depth"] == pytest.approx(0.6)

    def test_export_dxf(self, client: TestClient) -> None:
        response = client.post("/api/v1/export/dxf", json=SPACE)

        assert response.status_code == 200
        doc = ezdxf.read(StringIO(response.text))
        assert len(doc.modelspace().query("LWPOLYLINE")) > 0

    def test_export_from_config(self, client: TestClient, soffit_config_data: dict) -> None:
        response = client.post(
            "/api/v1/export/json/from-config", json={"config": soffit_config_data}
        )

        assert response.status_code == 200
        assert response.json()["layout"]["soffit"]["side"] == "left"

    def test_unknown_format(self, client: TestClient) -> None:
        response = client.post("/api/v1/export/stl", json=SPACE)

        assert response.status_code == 400
        data = response.json()
        assert data["error_type"] == "unsupported_format"
        assert data["details"]["available"] == ["dxf", "json", "svg"]

    def test_export_infeasible_layout(self, client: TestClient) -> None:
        body = {**SPACE, "soffit": {"side": "left", "width": 4750, "height": 300}}
        response = client.post("/api/v1/export/svg", json=body)

        assert response.status_code == 422
        assert response.json()["error_type"] == "invalid_config"
