import pytest

from broadside.game.core.models import ShipType
from broadside.game.core.ship import Ship, create_ship


def test_ship_sinks_when_hits_reach_length() -> None:
    ship = Ship.of(ShipType.SUBMARINE)
    ship.register_hit()
    ship.register_hit()
    assert not ship.is_sunk
    ship.register_hit()
    assert ship.is_sunk


def test_extra_hits_keep_ship_sunk() -> None:
    ship = Ship.of(ShipType.FRIGATE)
    ship.register_hit()
    ship.register_hit()
    assert ship.hits == 2
    assert ship.is_sunk


def test_zero_length_ship_is_sunk_on_creation() -> None:
    assert Ship(ShipType.FRIGATE, length=0).is_sunk


def test_negative_length_rejected() -> None:
    with pytest.raises(ValueError):
        Ship(ShipType.FRIGATE, length=-1)


@pytest.mark.parametrize(
    ("name", "ship_type", "length"),
    [
        ("carrier", ShipType.CARRIER, 4),
        ("Submarine", ShipType.SUBMARINE, 3),
        ("DESTROYER", ShipType.DESTROYER, 2),
        (" frigate ", ShipType.FRIGATE, 1),
    ],
)
def test_create_ship_by_name(name: str, ship_type: ShipType, length: int) -> None:
    ship = create_ship(name)
    assert ship.ship_type is ship_type
    assert ship.length == length
    assert ship.cells == []
    assert ship.hits == 0


def test_create_ship_unknown_type() -> None:
    with pytest.raises(ValueError, match="Unknown ship type"):
        create_ship("battleship")


def test_ships_compare_by_identity() -> None:
    assert Ship.of(ShipType.FRIGATE) != Ship.of(ShipType.FRIGATE)
