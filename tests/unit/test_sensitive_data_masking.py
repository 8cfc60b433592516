import pytest

pytestmark = pytest.mark.unit


class TestSensitiveDataMasking:
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
        assert result["header"] == "token=***MASKED***"

    def test_authorization_header_masked(self):
        from config.settings import mask_sensitive_data

        event_dict = {"event": "test", "raw": "Authorization: eyJhbGciOi"}
        result = mask_sensitive_data(None, None, event_dict)
        assert "eyJhbGciOi" not in result["raw"]

    def test_api_key_masked(self):
        from config.settings import mask_sensitive_data

        event_dict = {"event": "test", "query": "api_key=k-123"}
        result = mask_sensitive_data(None, None, event_dict)
        assert "k-123" not in result["query"]

    def test_non_string_values_untouched(self):
        from config.settings import mask_sensitive_data

        event_dict = {"event": "test", "stock": 5}
        result = mask_sensitive_data(None, None, event_dict)
        assert result["stock"] == 5

    def test_non_sensitive_data_unchanged(self):
        from config.settings import mask_sensitive_data

        event_dict = {"event": "product.created", "slug": "classic_tee"}
        result = mask_sensitive_data(None, None, event_dict)
        assert result["slug"] == "classic_tee"
        assert result["event"] == "product.created"
