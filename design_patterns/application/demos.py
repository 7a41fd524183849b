"""
Demonstration drivers.

Each driver builds the objects for one pattern, exercises them once and
writes every line through ``emit``.
"""
from typing import Optional

from design_patterns.domain.behavioral.iterator import NumberIterator
from design_patterns.domain.behavioral.mediator import ChatUser, Chatroom
from design_patterns.domain.behavioral.observer import MessagePublisher, User
from design_patterns.domain.behavioral.state import Context
from design_patterns.domain.core.output import OutputSink, default_sink
from design_patterns.domain.creational.builder import HouseBuilder
from design_patterns.domain.creational.factory import AnimalFactory
from design_patterns.domain.creational.prototype import Circle
from design_patterns.domain.creational.singleton import Database
from design_patterns.domain.structural.facade import OrderFacade
from design_patterns.domain.structural.inheritance import Car, Motorcycle
from design_patterns.domain.structural.proxy import ProxyImage
from design_patterns.infrastructure.di.container import DIContainer
from design_patterns.infrastructure.patterns.singleton_access import get_singleton


def run_singleton_demo(emit: Optional[OutputSink] = None) -> None:
    emit = emit or default_sink
    container = DIContainer()
    container.register_singleton(Database)

    db1 = container.get(Database)
    db2 = get_singleton(Database, container)

    emit(str(db1 is db2))


def run_inheritance_demo(emit: Optional[OutputSink] = None) -> None:
    car = Car("Mercedes", emit)
    motorcycle = Motorcycle("Ducati Monster", emit)

    car.honk()
    motorcycle.honk()


def run_prototype_demo(emit: Optional[OutputSink] = None) -> None:
    emit = emit or default_sink
    original_circle = Circle(5)
    cloned_circle = original_circle.clone()

    emit(str(original_circle.radius))
    emit(str(cloned_circle.radius))


def run_builder_demo(emit: Optional[OutputSink] = None) -> None:
    emit = emit or default_sink
    house = (
        HouseBuilder()
        .add_structure("Walls")
        .add_structure("Roof")
        .build()
    )

    emit(str(house.builders))


def run_factory_demo(emit: Optional[OutputSink] = None) -> None:
    animal_factory = AnimalFactory(emit)
    dog = animal_factory.create_animal("dog")
    cat = animal_factory.create_animal("cat")

    dog.make_sound()
    cat.make_sound()


def run_facade_demo(emit: Optional[OutputSink] = None) -> None:
    OrderFacade(emit).place_order(100)


def run_proxy_demo(emit: Optional[OutputSink] = None) -> None:
    image = ProxyImage("snimka.jpg", emit)
    image.display()  # loads, then displays
    image.display()  # displays only


def run_iterator_demo(emit: Optional[OutputSink] = None) -> None:
    emit = emit or default_sink
    iterator = NumberIterator([1, 2, 3, 4, 5])

    while iterator.has_next():
        emit(str(iterator.next().value))


def run_observer_demo(emit: Optional[OutputSink] = None) -> None:
    publisher = MessagePublisher()
    john = User("John", emit)
    jane = User("Jane", emit)

    publisher.attach(john)
    publisher.attach(jane)
    publisher.notify("Hello, World!")

    publisher.detach(john)
    publisher.notify("New message!")


def run_mediator_demo(emit: Optional[OutputSink] = None) -> None:
    chatroom = Chatroom()
    user1 = ChatUser(chatroom, "John", emit)
    user2 = ChatUser(chatroom, "Jane", emit)

    chatroom.add_colleague(user1)
    chatroom.add_colleague(user2)

    user1.send_message("Hello from User 1!")
    user2.send_message("Hi from User 2!")


def run_state_demo(emit: Optional[OutputSink] = None) -> None:
    context = Context(emit=emit)

    for _ in range(4):
        context.request()
