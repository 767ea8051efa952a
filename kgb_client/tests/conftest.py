import pytest

from kgb_client.config import KGBClientConfig
from kgb_client.models.session import Endpoint, ProjectSession
from kgb_client.tests.utils.mock_transport import MockTransport

ADDRESS = "http://localhost:5391"
PROJECT_ID = "example-repo-id"
PASSWORD = "example-repo-password"


@pytest.fixture
def config() -> KGBClientConfig:
    return KGBClientConfig()


@pytest.fixture
def mock_transport() -> MockTransport:
    return MockTransport()


@pytest.fixture
def endpoint() -> Endpoint:
    return Endpoint(ADDRESS)


@pytest.fixture
def session(endpoint: Endpoint) -> ProjectSession:
    return endpoint.project(PROJECT_ID, PASSWORD)
