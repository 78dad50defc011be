import pytest

from config.settings import mask_sensitive_data

pytestmark = pytest.mark.unit


class TestSensitiveDataMasking:
    def test_email_local_part_masked(self):
        event_dict = {"event": "customer.created", "email": "joao@example.com"}
        result = mask_sensitive_data(None, None, event_dict)
        assert "joao" not in result["email"]
        assert result["email"] == "***@example.com"

    def test_email_inside_message_masked(self):
        event_dict = {"event": "No active customer found with email ana@example.com."}
        result = mask_sensitive_data(None, None, event_dict)
        assert "ana@" not in result["event"]
        assert "***@example.com" in result["event"]

    def test_password_masked_in_log_output(self):
        event_dict = {"event": "test", "data": "password='s3cret123'"}
        result = mask_sensitive_data(None, None, event_dict)
        assert "s3cret123" not in result["data"]
        assert "***MASKED***" in result["data"]

    def test_token_masked_in_log_output(self):
        event_dict = {"event": "test", "header": "token=abc123xyz"}
        result = mask_sensitive_data(None, None, event_dict)
        assert "abc123xyz" not in result["header"]
        assert "***MASKED***" in result["header"]

    def test_non_sensitive_data_unchanged(self):
        event_dict = {"event": "order.created", "order_id": 12, "status": "PENDING"}
        result = mask_sensitive_data(None, None, event_dict)
        assert result == {"event": "order.created", "order_id": 12, "status": "PENDING"}
