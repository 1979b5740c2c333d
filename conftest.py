import pytest
from pytest_asyncio import is_async_test


def pytest_collection_modifyitems(items: list[pytest.Function]):
    for item in items:
        if is_async_test(item):
            item.add_marker(pytest.mark.asyncio)
