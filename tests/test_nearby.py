"""Location search using the great-circle distance formula."""

import math

import pytest

from educify.core.geo import haversine_km


def test_manual_distance_reference_points():
    assert haversine_km(0, 0, 0.005, 0) == pytest.approx(0.556, abs=0.001)
    assert haversine_km(0, 0, 1, 0) == pytest.approx(111.19, abs=0.01)
    assert haversine_km(12.5, -3.25, 12.5, -3.25) == pytest.approx(0, abs=1e-3)
    assert haversine_km(8, 0, -8, 180) == pytest.approx(math.pi * 6371, rel=1e-9)


class TestNearby:

    def test_lat_and_lng_are_required(self, client):
        response = client.get("/api/tutors/nearby", params={"lat": 10})
        assert response.status_code == 400
        assert response.json() == {"error": "Latitude and longitude required"}

    def test_radius_filters_by_distance(self, client, create_tutor):
        close = create_tutor(location_lat=0.005, location_lng=0)
        create_tutor(location_lat=1, location_lng=0)

        response = client.get("/api/tutors/nearby", params={"lat": 0, "lng": 0, "radius": 1})
        assert response.status_code == 200
        body = response.json()
        assert [t["id"] for t in body["tutors"]] == [close["id"]]
        assert body["tutors"][0]["distance"] == pytest.approx(haversine_km(0, 0, 0.005, 0), rel=1e-6)
        assert body["center"] == {"lat": 0, "lng": 0}
        assert body["radius"] == 1

    def test_results_are_nearest_first(self, client, create_tutor):
        far = create_tutor(location_lat=0.05, location_lng=0.05)
        near = create_tutor(location_lat=0.01, location_lng=0)
        same_spot = create_tutor(location_lat=0, location_lng=0)

        body = client.get("/api/tutors/nearby", params={"lat": 0, "lng": 0}).json()
        assert [t["id"] for t in body["tutors"]] == [same_spot["id"], near["id"], far["id"]]
        assert body["tutors"][0]["distance"] == pytest.approx(0, abs=1e-6)

    def test_default_radius_is_ten_km(self, client, create_tutor):
        inside = create_tutor(location_lat=0.08, location_lng=0)  # ~8.9 km
        create_tutor(location_lat=0.1, location_lng=0)  # ~11.1 km

        body = client.get("/api/tutors/nearby", params={"lat": 0, "lng": 0}).json()
        assert body["radius"] == 10
        assert [t["id"] for t in body["tutors"]] == [inside["id"]]

    def test_tutors_without_coordinates_are_skipped(self, client, create_tutor):
        create_tutor()
        body = client.get("/api/tutors/nearby", params={"lat": 0, "lng": 0, "radius": 20000}).json()
        assert body["tutors"] == []

    def test_rows_carry_owner_details(self, client, create_tutor):
        create_tutor(location_lat=0, location_lng=0.001)
        tutor = client.get("/api/tutors/nearby", params={"lat": 0, "lng": 0}).json()["tutors"][0]
        assert tutor["name"] == "Tutor 1"
        assert tutor["email"] == "tutor1@example.com"

    def test_antipodal_tutor_is_half_the_globe_away(self, client, create_tutor):
        opposite = create_tutor(location_lat=-8, location_lng=180)

        response = client.get("/api/tutors/nearby", params={"lat": 8, "lng": 0, "radius": 30000})
        assert response.status_code == 200
        tutors = response.json()["tutors"]
        assert [t["id"] for t in tutors] == [opposite["id"]]
        assert tutors[0]["distance"] == pytest.approx(math.pi * 6371, rel=1e-6)
