import pytest

pytestmark = pytest.mark.unit


class TestSensitiveDataMasking:
    def test_phone_number_masked(self):
        from config.settings import mask_sensitive_data

        event_dict = {"event": "test", "phone": "+34600123456"}
        result = mask_sensitive_data(None, None, event_dict)
        assert "+34600123456" not in result["phone"]
        assert "***MASKED***" in result["phone"]

    def test_phone_number_inside_message_masked(self):
        from config.settings import mask_sensitive_data

        event_dict = {
            "event": "Customer with email a@b.co and phone number 34600123456 already exists"
        }
        result = mask_sensitive_data(None, None, event_dict)
        assert "34600123456" not in result["event"]

    def test_password_masked(self):
        from config.settings import mask_sensitive_data

        event_dict = {"event": "test", "data": "password='s3cret123'"}
        result = mask_sensitive_data(None, None, event_dict)
        assert "s3cret123" not in result["data"]
        assert "***MASKED***" in result["data"]

    def test_token_masked(self):
        from config.settings import mask_sensitive_data

        event_dict = {"event": "test", "header": "token=abc123xyz"}
        result = mask_sensitive_data(None, None, event_dict)
        assert "abc123xyz" not in result["header"]
        assert "***MASKED***" in result["header"]

    def test_non_sensitive_data_unchanged(self):
        from config.settings import mask_sensitive_data

        event_dict = {
            "event": "customer.created",
            "request_id": "3f2b8c1e-0d4a-4c55-9f8e-1a2b3c4d5e6f",
            "customer_id": 12345678901,
        }
        result = mask_sensitive_data(None, None, event_dict)
        assert result == {
            "event": "customer.created",
            "request_id": "3f2b8c1e-0d4a-4c55-9f8e-1a2b3c4d5e6f",
            "customer_id": 12345678901,
        }

    def test_numeric_amounts_unchanged(self):
        from config.settings import mask_sensitive_data

        event_dict = {"event": "customer.credit_adjusted", "amount": 123456789.5}
        result = mask_sensitive_data(None, None, event_dict)
        assert result["amount"] == 123456789.5
