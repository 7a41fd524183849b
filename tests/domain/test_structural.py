from design_patterns.domain.structural.facade import OrderFacade
from design_patterns.domain.structural.inheritance import Car, Motorcycle, Vehicle
from design_patterns.domain.structural.proxy import ProxyImage, RealImage


def test_subclasses_inherit_honk(lines):
    car = Car("Mercedes", lines.append)
    motorcycle = Motorcycle("Ducati Monster", lines.append)

    car.honk()
    motorcycle.honk()

    assert lines == ["Honk", "Honk"]
    assert isinstance(car, Vehicle)
    assert motorcycle.brand == "Ducati Monster"


def test_place_order_calls_services_in_order(lines):
    # Act
    OrderFacade(lines.append).place_order(100)

    # Assert
    assert lines == [
        "Logging message: Order placed",
        "Processing payment: 100",
        "Sending notification: Order placed successfully",
    ]


def test_real_image_loads_on_construction(lines):
    RealImage("photo.png", lines.append)

    assert lines == ["Loading image: photo.png"]


def test_proxy_defers_loading_until_display(lines):
    image = ProxyImage("snimka.jpg", lines.append)

    assert lines == []
    assert not image.is_loaded


def test_proxy_loads_once(lines):
    image = ProxyImage("snimka.jpg", lines.append)

    image.display()
    image.display()

    assert image.is_loaded
    assert lines == [
        "Loading image: snimka.jpg",
        "Displaying image: snimka.jpg",
        "Displaying image: snimka.jpg",
    ]
