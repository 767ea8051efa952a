import os

import pytest

_ENV_VARS = ("KGB_TEST_ADDRESS", "KGB_TEST_PROJECT", "KGB_TEST_PASSWORD")


def pytest_collection_modifyitems(config: pytest.Config, items: list) -> None:
    missing = not all(os.getenv(name) for name in _ENV_VARS)
    if not missing:
        return
    mark_expr = getattr(config.option, "markexpr", "")
    if "integration" in mark_expr:
        return
    skip = pytest.mark.skip(reason="KGB_TEST_ADDRESS / KGB_TEST_PROJECT / KGB_TEST_PASSWORD not set")
    for item in items:
        if item.get_closest_marker("integration"):
            item.add_marker(skip)


@pytest.fixture(scope="session")
def kgb_credentials() -> tuple[str, str, str]:
    values = [os.getenv(name) for name in _ENV_VARS]
    if not all(values):
        pytest.fail(f"{', '.join(_ENV_VARS)} must be set to run integration tests.")
    address, project_id, password = values
    return address, project_id, password
