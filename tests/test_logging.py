import structlog

from matomo_client.utils.logging import logging_context, mask_secrets


def test_mask_secrets_hides_token():
    params = {"method": "API.getMatomoVersion", "token_auth": "secret"}

    assert mask_secrets(params=params) == {"method": "API.getMatomoVersion", "token_auth": "***"}
    assert params["token_auth"] == "secret"


def test_logging_context_binds_missing_keys_only():
    with structlog.contextvars.bound_contextvars(batch_size=1):
        with logging_context(batch_size=5, method="API.getBulkRequest"):
            context = structlog.contextvars.get_contextvars()
            assert context["batch_size"] == 1
            assert context["method"] == "API.getBulkRequest"
        assert "method" not in structlog.contextvars.get_contextvars()
