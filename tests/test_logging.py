import logging

import pytest

from config.settings import mask_sensitive_data


def _events(caplog):
    return [r.msg for r in caplog.records if isinstance(r.msg, dict)]


class TestSensitiveDataMasking:
    def test_password_field_masked(self):
        event_dict = {"event": "user.created", "user_id": 7, "password": "s3cret123"}
        result = mask_sensitive_data(None, None, event_dict)
        assert result["password"] == "***MASKED***"
        assert result["user_id"] == 7

    def test_authorization_key_masked(self):
        event_dict = {"event": "request_started", "Authorization": "Bearer eyJabc"}
        result = mask_sensitive_data(None, None, event_dict)
        assert result["Authorization"] == "***MASKED***"

    @pytest.mark.parametrize(
        "raw, secret",
        [
            ("Authorization: Bearer eyJhbGciOi.payload", "eyJhbGciOi.payload"),
            ("authorization=Basic YW5hOnB3", "YW5hOnB3"),
            ('{"password": "hunter2", "email": "ana@example.com"}', "hunter2"),
            ("secret=rotate-me", "rotate-me"),
        ],
    )
    def test_credentials_inside_values_masked(self, raw, secret):
        result = mask_sensitive_data(None, None, {"event": "test", "body": raw})
        assert secret not in result["body"]
        assert "***MASKED***" in result["body"]

    def test_masking_keeps_surrounding_text(self):
        raw = '{"password": "hunter2", "email": "ana@example.com"}'
        result = mask_sensitive_data(None, None, {"event": "test", "body": raw})
        assert "ana@example.com" in result["body"]

    def test_stock_events_unchanged(self):
        event_dict = {"event": "stock.created", "serial": "SN-001", "stock_id": 7}
        result = mask_sensitive_data(None, None, event_dict)
        assert result == {"event": "stock.created", "serial": "SN-001", "stock_id": 7}


class TestUserEventsCarryNoPassword:
    def test_user_creation_never_logs_raw_password(self, api_client, caplog):
        with caplog.at_level(logging.INFO):
            response = api_client.post(
                "/api/users/",
                {"name": "Ana", "email": "ana@example.com", "password": "pl4in-text"},
                format="json",
            )
        assert response.status_code == 201

        events = _events(caplog)
        created = [e for e in events if e.get("event") == "user.created"]
        assert len(created) == 1
        assert created[0]["user_id"] == response.data["id"]
        assert all("pl4in-text" not in str(e) for e in events)
