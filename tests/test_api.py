"""Tests for the parachute FastAPI endpoints."""

from fastapi.testclient import TestClient

from parachute.main import app

client = TestClient(app)


class TestHealthEndpoint:
    def test_health_returns_200(self):
        resp = client.get("/health")
        assert resp.status_code == 200
        data = resp.json()
        assert data["status"] == "healthy"
        assert data["service"] == "parachute"

    def test_health_includes_version(self):
        resp = client.get("/health")
        assert "version" in resp.json()


class TestPresetsEndpoint:
    def test_lists_presets(self):
        resp = client.get("/presets")
        assert resp.status_code == 200
        assert "perseverance" in resp.json()["presets"]


class TestEncodeEndpoint:
    def test_encode_png_returns_image(self):
        resp = client.post("/encode", json={"size": 128, "inner_radius": 16, "outer_radius": 64})
        assert resp.status_code == 200
        assert resp.headers["content-type"] == "image/png"
        assert resp.content[:4] == b"\x89PNG"

    def test_encode_svg_default_pattern(self):
        resp = client.post("/encode/svg", json={})
        assert resp.status_code == 200
        assert "image/svg+xml" in resp.headers["content-type"]
        assert "<svg" in resp.text
        assert 'class="arc"' in resp.text

    def test_encode_svg_custom_rings(self):
        resp = client.post(
            "/encode/svg",
            json={
                "rings": [
                    {"message": "hello", "char_count": 6},
                    {"message": "world", "char_count": 6, "char_offset": 2},
                ],
                "pattern_color": "#00FF00",
            },
        )
        assert resp.status_code == 200
        assert "#00FF00" in resp.text

    def test_encode_svg_preset(self):
        resp = client.post("/encode/svg", json={"preset": "empty"})
        assert resp.status_code == 200
        assert resp.text.count('class="arc"') == 1

    def test_encode_unknown_preset_returns_422(self):
        resp = client.post("/encode/svg", json={"preset": "curiosity"})
        assert resp.status_code == 422

    def test_encode_insufficient_digits_returns_422(self):
        resp = client.post(
            "/encode",
            json={"rings": [{"message": "mighty", "digit_width": 3}]},
        )
        assert resp.status_code == 422
        assert "too small" in resp.json()["detail"]

    def test_encode_invalid_radii_returns_422(self):
        resp = client.post("/encode/svg", json={"inner_radius": 300, "outer_radius": 100})
        assert resp.status_code == 422

    def test_encode_rejects_invalid_color(self):
        resp = client.post("/encode/svg", json={"pattern_color": 'red" onload="x'})
        assert resp.status_code == 422

    def test_encode_accepts_color_name(self):
        resp = client.post("/encode/svg", json={"background_color": "black"})
        assert resp.status_code == 200
        assert 'fill="black"' in resp.text

    def test_encode_respects_size_limits(self):
        resp = client.post("/encode", json={"size": 32})
        assert resp.status_code == 422


class TestRingEndpoint:
    def test_single_character_ring(self):
        resp = client.post(
            "/ring",
            json={"message": "c", "char_count": 1, "digit_width": 7, "padding_length": 3},
        )
        assert resp.status_code == 200
        data = resp.json()
        assert data["bits"] == "0000011000"
        assert data["total_slots"] == 10
        assert data["min_digit_width"] == 2
        assert len(data["arcs"]) == 1

    def test_degenerate_ring_returns_422(self):
        resp = client.post("/ring", json={"message": "c", "char_count": 0})
        assert resp.status_code == 422

    def test_negative_count_rejected(self):
        resp = client.post("/ring", json={"message": "c", "padding_length": -1})
        assert resp.status_code == 422


class TestDecodeEndpoint:
    def test_decode_roundtrip(self):
        ring = {"message": "mighty", "char_offset": 4}
        bits = client.post("/ring", json=ring).json()["bits"]
        resp = client.post(
            "/decode",
            json={
                "bits": bits,
                "char_count": 8,
                "digit_width": 7,
                "padding_length": 3,
                "char_offset": 4,
            },
        )
        assert resp.status_code == 200
        assert resp.json()["message"] == "mighty"

    def test_decode_bad_length_returns_422(self):
        resp = client.post(
            "/decode",
            json={"bits": "0101", "char_count": 1, "digit_width": 7, "padding_length": 3},
        )
        assert resp.status_code == 422
