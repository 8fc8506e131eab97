from __future__ import annotations

from diconstruct import Container


class _Service:
    pass


def test_public_diconstruct_container_fixture_is_available(
    diconstruct_container: Container,
) -> None:
    assert isinstance(diconstruct_container, Container)
    assert _Service not in diconstruct_container


def test_fixture_constructs_services(diconstruct_container: Container) -> None:
    service = diconstruct_container.construct(_Service)

    assert diconstruct_container.construct(_Service) is service


def test_fixture_is_isolated_between_tests(diconstruct_container: Container) -> None:
    assert _Service not in diconstruct_container
