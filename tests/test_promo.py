"""Promo code validation, application and creation."""

import pytest

from educify.models import PromoCode
from educify.services import promo_service
from educify.services.promo_service import compute_discount, format_discount

CURRENT_WINDOW = {"valid_from": "2020-01-01T00:00:00Z", "valid_until": "2099-12-31T23:59:59Z"}


@pytest.fixture
def create_code(client, auth_headers):
    def _create(code="save20", discount_type="percentage", discount_value=20, **overrides):
        payload = {"code": code, "discount_type": discount_type, "discount_value": discount_value, **CURRENT_WINDOW}
        payload.update(overrides)
        response = client.post("/api/promo/create", json=payload, headers=auth_headers)
        assert response.status_code == 201, response.text
        return response.json()

    return _create


class TestDiscountMath:

    def test_percentage(self):
        assert compute_discount("percentage", 20, 100) == (20, 80)

    def test_fixed_is_floored_at_zero(self):
        assert compute_discount("fixed", 50, 30) == (50, 0)

    def test_fixed_below_amount(self):
        assert compute_discount("fixed", 15, 40) == (15, 25)

    def test_messages(self):
        assert format_discount("percentage", 20) == "20% discount applied!"
        assert format_discount("fixed", 12.5) == "$12.5 discount applied!"


class TestCreate:

    def test_code_is_upper_cased(self, create_code):
        promo = create_code(code="welcome10", max_uses=5)
        assert promo["code"] == "WELCOME10"
        assert promo["used_count"] == 0
        assert promo["is_active"] is True
        assert promo["max_uses"] == 5

    def test_duplicate_code_is_rejected(self, client, auth_headers, create_code):
        create_code(code="ONCE")
        response = client.post(
            "/api/promo/create",
            json={"code": "once", "discount_type": "fixed", "discount_value": 5, **CURRENT_WINDOW},
            headers=auth_headers,
        )
        assert response.status_code == 400
        assert response.json() == {"error": "Promo code already exists"}

    def test_unique_constraint_race_is_reported_as_conflict(self, client, auth_headers, create_code, db_session, monkeypatch):
        create_code(code="RACE")
        monkeypatch.setattr(promo_service, "code_taken", lambda db, code: False)

        response = client.post(
            "/api/promo/create",
            json={"code": "race", "discount_type": "fixed", "discount_value": 5, **CURRENT_WINDOW},
            headers=auth_headers,
        )
        assert response.status_code == 400
        assert response.json() == {"error": "Promo code already exists"}
        assert db_session.query(PromoCode).filter(PromoCode.code == "RACE").count() == 1

    def test_unknown_discount_type_is_rejected(self, client, auth_headers):
        response = client.post(
            "/api/promo/create",
            json={"code": "X", "discount_type": "bogo", "discount_value": 5, **CURRENT_WINDOW},
            headers=auth_headers,
        )
        assert response.status_code == 400


class TestValidate:

    def test_missing_code(self, client, auth_headers):
        response = client.post("/api/promo/validate", json={}, headers=auth_headers)
        assert response.status_code == 400
        assert response.json() == {"error": "Promo code required"}

    def test_valid_code_is_matched_case_insensitively(self, client, auth_headers, create_code):
        create_code(code="SAVE20")
        response = client.post("/api/promo/validate", json={"code": "save20"}, headers=auth_headers)
        assert response.status_code == 200
        assert response.json() == {
            "valid": True,
            "code": "SAVE20",
            "discount_type": "percentage",
            "discount_value": 20,
            "message": "20% discount applied!",
        }

    def test_fixed_code_message(self, client, auth_headers, create_code):
        create_code(code="FIVE", discount_type="fixed", discount_value=5)
        body = client.post("/api/promo/validate", json={"code": "five"}, headers=auth_headers).json()
        assert body["message"] == "$5 discount applied!"

    def test_unknown_code_is_not_found(self, client, auth_headers):
        response = client.post("/api/promo/validate", json={"code": "NOPE"}, headers=auth_headers)
        assert response.status_code == 404
        assert response.json() == {"error": "Invalid or expired promo code"}

    def test_expired_code_is_not_found(self, client, auth_headers, create_code):
        create_code(code="OLD", valid_from="2019-01-01T00:00:00Z", valid_until="2019-12-31T00:00:00Z")
        response = client.post("/api/promo/validate", json={"code": "OLD"}, headers=auth_headers)
        assert response.status_code == 404

    def test_future_code_is_not_found(self, client, auth_headers, create_code):
        create_code(code="SOON", valid_from="2098-01-01T00:00:00Z")
        response = client.post("/api/promo/validate", json={"code": "SOON"}, headers=auth_headers)
        assert response.status_code == 404

    def test_inactive_code_is_not_found(self, client, auth_headers, create_code, db_session):
        create_code(code="OFF")
        db_session.query(PromoCode).filter(PromoCode.code == "OFF").update({PromoCode.is_active: False})
        db_session.commit()
        response = client.post("/api/promo/validate", json={"code": "OFF"}, headers=auth_headers)
        assert response.status_code == 404

    def test_exhausted_code_reports_maximum_usage(self, client, auth_headers, create_code):
        create_code(code="ONE", max_uses=1)
        client.post("/api/promo/apply", json={"code": "ONE", "original_amount": 10}, headers=auth_headers)

        response = client.post("/api/promo/validate", json={"code": "ONE"}, headers=auth_headers)
        assert response.status_code == 400
        assert response.json() == {"error": "Promo code has reached maximum usage"}


class TestApply:

    def test_percentage_discount(self, client, auth_headers, create_code):
        create_code(code="TWENTY", discount_type="percentage", discount_value=20)
        response = client.post("/api/promo/apply", json={"code": "twenty", "original_amount": 100}, headers=auth_headers)
        assert response.status_code == 200
        assert response.json() == {"original_amount": 100, "discount": 20, "final_amount": 80, "promo_code": "TWENTY"}

    def test_fixed_discount_never_goes_negative(self, client, auth_headers, create_code):
        create_code(code="FIFTY", discount_type="fixed", discount_value=50)
        body = client.post("/api/promo/apply", json={"code": "FIFTY", "original_amount": 30}, headers=auth_headers).json()
        assert body["discount"] == 50
        assert body["final_amount"] == 0

    def test_every_apply_counts_a_use(self, client, auth_headers, create_code, db_session):
        create_code(code="COUNT")
        for _ in range(3):
            client.post("/api/promo/apply", json={"code": "COUNT", "original_amount": 10}, headers=auth_headers)
        assert db_session.query(PromoCode).filter(PromoCode.code == "COUNT").one().used_count == 3

    def test_apply_ignores_usage_cap(self, client, auth_headers, create_code, db_session):
        create_code(code="CAPPED", max_uses=1)
        client.post("/api/promo/apply", json={"code": "CAPPED", "original_amount": 10}, headers=auth_headers)
        assert client.post("/api/promo/validate", json={"code": "CAPPED"}, headers=auth_headers).status_code == 400

        response = client.post("/api/promo/apply", json={"code": "CAPPED", "original_amount": 10}, headers=auth_headers)
        assert response.status_code == 200
        assert db_session.query(PromoCode).filter(PromoCode.code == "CAPPED").one().used_count == 2

    def test_unknown_code_is_not_found(self, client, auth_headers):
        response = client.post("/api/promo/apply", json={"code": "GHOST", "original_amount": 10}, headers=auth_headers)
        assert response.status_code == 404
        assert response.json() == {"error": "Invalid promo code"}
