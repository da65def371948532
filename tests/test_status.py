import pytest

from mistral_client.core.status import RETRY_STATUS_CODES, StatusClass, classify


@pytest.mark.parametrize("code", sorted(RETRY_STATUS_CODES))
def test_retryable_codes(code):
    assert classify(code) is StatusClass.RETRYABLE


@pytest.mark.parametrize("code", [c for c in range(400, 500) if c != 429])
def test_client_error_codes(code):
    assert classify(code) is StatusClass.CLIENT_ERROR


@pytest.mark.parametrize("code", [501, 505, 507, 511, 599, 600, 999])
def test_server_error_codes(code):
    assert classify(code) is StatusClass.SERVER_ERROR


@pytest.mark.parametrize("code", [100, 200, 201, 204, 301, 302, 399])
def test_success_codes(code):
    assert classify(code) is StatusClass.SUCCESS
