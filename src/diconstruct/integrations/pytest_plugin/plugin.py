from __future__ import annotations

import pytest

from diconstruct.container import Container


@pytest.fixture()
def diconstruct_container() -> Container:
    """Create a per-test container.

    The fixture is function-scoped, so cached instances and providers are
    isolated between tests. Override it in a test suite to pre-register
    values or providers, for example fakes standing in for real services.

    Returns:
        A new ``Container`` instance.

    """
    return Container()
