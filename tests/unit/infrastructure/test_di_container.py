import pytest

from design_patterns.domain.creational.singleton import Database
from design_patterns.infrastructure.di.container import DIContainer
from design_patterns.infrastructure.di.exceptions import FactoryError, UnregisteredDependencyError
from design_patterns.infrastructure.patterns.singleton_access import get_singleton


@pytest.fixture
def container():
    return DIContainer()


def test_singleton_type_is_built_once(container):
    container.register_singleton(Database)

    assert container.get(Database) is container.get(Database)


def test_singleton_instance_is_returned_as_is(container):
    database = Database(url="memory://test")
    container.register_singleton(Database, database)

    assert container.get(Database) is database


def test_singleton_factory_receives_container(container):
    container.register_singleton(Database, lambda c: Database(url=f"memory://{id(c)}"))

    assert container.get(Database).url == f"memory://{id(container)}"


def test_factory_builds_new_instance_each_time(container):
    container.register_factory(Database, lambda c: Database())

    assert container.get(Database) is not container.get(Database)


def test_registered_instance(container):
    database = Database()
    container.register_instance(Database, database)

    assert container.has(Database)
    assert container.get(Database) is database


def test_unregistered_type_raises(container):
    assert not container.is_registered(Database)

    with pytest.raises(UnregisteredDependencyError, match="Database"):
        container.get(Database)


def test_failing_factory_raises_factory_error(container):
    def broken(_container):
        raise RuntimeError("boom")

    container.register_factory(Database, broken)

    with pytest.raises(FactoryError) as exc_info:
        container.get(Database)

    assert isinstance(exc_info.value.cause, RuntimeError)


def test_get_singleton_registers_on_first_use(container):
    first = get_singleton(Database, container)

    assert container.has(Database)
    assert get_singleton(Database, container) is first


def test_get_singleton_reuses_registered_instance(container):
    database = Database()
    container.register_singleton(Database, database)

    assert get_singleton(Database, container) is database


def test_separate_containers_own_separate_instances():
    assert get_singleton(Database, DIContainer()) is not get_singleton(Database, DIContainer())
