import pytest

from zendesk_client import ZendeskClient


@pytest.fixture
def client():
    """Client pointed at a fake account; requests are intercepted by respx."""
    with ZendeskClient(
        endpoint="https://acme.zendesk.com",
        username="agent@acme.com",
        token="secret-token",
    ) as zendesk:
        yield zendesk
