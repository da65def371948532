import pytest

from mistral_client import MistralClient

from tests.helpers import FakeTransport


@pytest.fixture
def sleeps():
    return []


@pytest.fixture
def transport():
    return FakeTransport()


@pytest.fixture
def client(transport, sleeps):
    return MistralClient(api_key="test_api_key", transport=transport, sleep=sleeps.append)
