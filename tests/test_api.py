"""
HTTP API tests - every calculator endpoint through the FastAPI test client.
"""


def test_health(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json()["status"] == "ok"


def test_list_calculators(client):
    response = client.get("/api/calculators/")
    assert response.status_code == 200
    assert set(response.json()["calculators"]) == {
        "overhang_angle", "flow_calibration", "layer_height", "volumetric_speed",
    }


def test_list_nozzles(client):
    response = client.get("/api/calculators/nozzles")
    assert response.status_code == 200
    assert 0.4 in response.json()["nozzle_diameters"]


# ============================================================
# Typed endpoints
# ============================================================

def test_overhang_endpoint(client):
    response = client.post("/api/calculators/overhang-angle", json={
        "nozzle_diameter": "0.4", "layer_height": 0.2, "slicer": "cura",
    })
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "ok"
    assert data["angle_degrees"] == 45.0
    assert "Ultimaker Cura" in data["message"]


def test_overhang_endpoint_rejects_unknown_slicer(client):
    """Enum validation happens before the calculator runs."""
    response = client.post("/api/calculators/overhang-angle", json={
        "nozzle_diameter": 0.4, "layer_height": 0.2, "slicer": "simplify3d",
    })
    assert response.status_code == 422


def test_flow_endpoint(client, uniform_measurements):
    response = client.post("/api/calculators/flow-calibration", json={
        "measurements": uniform_measurements,
        "extrusion_width": 0.40,
        "configured_flow": "100",
    })
    data = response.json()
    assert data["status"] == "ok"
    assert data["new_flow_percent"] == 95.24


def test_flow_endpoint_validation_failure_is_200(client, uniform_measurements):
    measurements = uniform_measurements[:19] + [None]
    response = client.post("/api/calculators/flow-calibration", json={
        "measurements": measurements, "extrusion_width": 0.4, "configured_flow": 100,
    })
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "error"
    assert data["new_flow_percent"] is None
    assert data["errors"][0]["code"] == "incomplete_measurements"


def test_layer_height_endpoint(client):
    response = client.post("/api/calculators/layer-height", json={
        "angle": 45, "slicer": "orca", "nozzle_diameter": 0.4,
    })
    data = response.json()
    assert data["height_mm"] == 0.2
    assert data["is_valid"] is True


def test_layer_height_endpoint_out_of_range(client):
    response = client.post("/api/calculators/layer-height", json={
        "angle": 90, "nozzle_diameter": 0.4,
    })
    data = response.json()
    assert data["status"] == "error"
    assert data["errors"][0]["code"] == "angle_out_of_range"


def test_layer_height_endpoint_suggestion(client):
    response = client.post("/api/calculators/layer-height", json={
        "angle": "20", "nozzle_diameter": "0.4",
    })
    data = response.json()
    assert data["is_valid"] is False
    assert data["suggested_angle"] == 21.0
    assert len(data["advisories"]) == 2


def test_volumetric_endpoint_both_modes(client):
    response = client.post("/api/calculators/volumetric-speed", json={
        "layer_height": 0.2, "nozzle_diameter": 0.4,
        "mode": "solve_for_flow", "print_speed": 60,
    })
    assert response.json()["derived_value"] == 4.8

    response = client.post("/api/calculators/volumetric-speed", json={
        "layer_height": 0.2, "nozzle_diameter": 0.4,
        "mode": "solve_for_speed", "volumetric_speed": 4.8,
        "print_speed": 999,
    })
    data = response.json()
    assert data["derived_value"] == 60.0
    assert data["mode"] == "solve_for_speed"


def test_volumetric_endpoint_accumulates_errors(client):
    response = client.post("/api/calculators/volumetric-speed", json={
        "mode": "solve_for_flow", "print_speed": 60,
    })
    data = response.json()
    assert data["status"] == "error"
    assert len(data["errors"]) == 2


# ============================================================
# Generic dispatch
# ============================================================

def test_generic_dispatch(client):
    response = client.post("/api/calculators/volumetric_speed", json={"fields": {
        "layer_height": "0.2", "nozzle_diameter": "0.4",
        "mode": "solve_for_speed", "volumetric_speed": "4.8",
    }})
    assert response.status_code == 200
    assert response.json()["derived_value"] == 60.0


def test_generic_dispatch_unknown_calculator(client):
    response = client.post("/api/calculators/retraction", json={"fields": {}})
    assert response.status_code == 404
    assert "retraction" in response.json()["detail"]


# ============================================================
# Malformed and non-finite input over HTTP
# ============================================================

def test_generic_dispatch_scalar_measurements(client):
    """A bare number for measurements is a validation error, not a 500."""
    response = client.post("/api/calculators/flow_calibration", json={"fields": {
        "measurements": 0.42, "extrusion_width": 0.4, "configured_flow": 100,
    }})
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "error"
    assert data["errors"][0]["code"] == "incomplete_measurements"


def test_infinity_in_request_body_is_rejected(client):
    """The JSON parser accepts Infinity; the calculator must not."""
    response = client.post(
        "/api/calculators/volumetric-speed",
        content='{"layer_height": 0.2, "nozzle_diameter": 0.4, '
                '"mode": "solve_for_flow", "print_speed": Infinity}',
        headers={"Content-Type": "application/json"},
    )
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "error"
    assert data["derived_value"] is None
    assert data["errors"][0]["field"] == "print_speed"


def test_list_calculators_includes_routes(client):
    routes = client.get("/api/calculators/").json()["routes"]
    assert routes["overhang_angle"] == "/api/calculators/overhang-angle"
