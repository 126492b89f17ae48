import pytest

from tests.helpers import FakeRepository, city_row, hotel_row, place_row


@pytest.fixture
def june_repository() -> FakeRepository:
    return FakeRepository(
        cities=[
            city_row("Kochi", '["June", "July"]', rating=4.3),
            city_row("Goa", ["May", "June"], rating=4.6, state="Goa"),
            city_row("Jaipur", "October, November", rating=4.5, state="Rajasthan"),
        ],
        places=[
            place_row("Kochi", "Fort Kochi Beach", '["Beach"]', price=0),
            place_row("Kochi", "Mattancherry Palace", "History", price=20),
            place_row("Goa", "Baga Beach", ["Beach", "Nightlife"], price=100),
            place_row("Jaipur", "Amber Fort", '["History"]', price=500),
        ],
        hotels=[
            hotel_row("Kochi", "Brunton Boatyard", 9000, rating=4.6),
            hotel_row("Kochi", "Homestay", 800, rating=4.1),
            hotel_row("Goa", "Zostel Goa", 900, rating=4.2),
        ],
    )
