"""
Bus catalog provider.
"""

import random
from datetime import date
from typing import Dict, List, Optional

from ...core.models import Bus, Offer, Seat

# Seats on some buses cost more than the base fare
PREMIUM_SURCHARGE = 50
PREMIUM_SHARE = 0.3


class CatalogProvider:
    """Provides the read-only bus catalog for the booking flow."""

    BUSES = [
        {
            "id": "bus-001",
            "name": "TravelGlide Express",
            "departure_time": "07:00",
            "arrival_time": "11:30",
            "duration": "4h 30m",
            "price": 450,
            "seats_available": 25,
            "rating": 4.8,
            "amenities": ["WiFi", "USB Charging", "Air Conditioning", "Snacks"],
            "bus_type": "Volvo AC Sleeper",
            "total_seats": 30,
            "booked": [1, 4, 8, 12, 20],
        },
        {
            "id": "bus-002",
            "name": "WonderTour Deluxe",
            "departure_time": "09:30",
            "arrival_time": "14:45",
            "duration": "5h 15m",
            "price": 380,
            "seats_available": 18,
            "rating": 4.5,
            "amenities": ["WiFi", "Air Conditioning", "Blankets"],
            "bus_type": "AC Seater",
            "total_seats": 25,
            "booked": [2, 5, 9, 13, 17, 21, 22],
        },
        {
            "id": "bus-003",
            "name": "FleetCruise Premium",
            "departure_time": "14:00",
            "arrival_time": "19:15",
            "duration": "5h 15m",
            "price": 500,
            "seats_available": 22,
            "rating": 4.9,
            "amenities": ["WiFi", "USB Charging", "Air Conditioning", "TV", "Food"],
            "bus_type": "Volvo AC Sleeper Premium",
            "total_seats": 28,
            "booked": [3, 7, 11, 15, 23, 24],
        },
        {
            "id": "bus-004",
            "name": "RapidCoach Standard",
            "departure_time": "18:30",
            "arrival_time": "23:00",
            "duration": "4h 30m",
            "price": 320,
            "seats_available": 30,
            "rating": 4.2,
            "amenities": ["Air Conditioning"],
            "bus_type": "Non-AC Sleeper",
            "total_seats": 35,
            "booked": [6, 10, 14, 19, 25, 28, 32],
        },
        {
            "id": "bus-005",
            "name": "OceanTour Luxury",
            "departure_time": "22:00",
            "arrival_time": "04:30",
            "duration": "6h 30m",
            "price": 550,
            "seats_available": 15,
            "rating": 4.7,
            "amenities": ["WiFi", "USB Charging", "Air Conditioning", "Blankets", "Pillows", "Snacks", "Washroom"],
            "bus_type": "Volvo AC Sleeper Luxury",
            "total_seats": 20,
            "booked": [2, 8, 13, 16],
        },
    ]

    CITIES = [
        "New York", "Los Angeles", "Chicago", "Houston", "Phoenix",
        "Philadelphia", "San Antonio", "San Diego", "Dallas", "San Jose",
        "Austin", "Jacksonville", "Fort Worth", "Columbus", "Charlotte",
        "Indianapolis", "San Francisco", "Seattle", "Denver", "Boston",
    ]

    POPULAR_ROUTES = [
        {"from": "New York", "to": "Boston"},
        {"from": "Los Angeles", "to": "San Francisco"},
        {"from": "Chicago", "to": "Detroit"},
        {"from": "Miami", "to": "Orlando"},
        {"from": "Seattle", "to": "Portland"},
        {"from": "Austin", "to": "Houston"},
    ]

    OFFERS = [
        {
            "id": "offer1",
            "title": "First Trip Discount",
            "code": "FIRST10",
            "discount": 10,
            "valid_until": date(2025, 12, 31),
            "description": "Get 10% off on your first booking with TravelGlide",
        },
        {
            "id": "offer2",
            "title": "Weekend Special",
            "code": "WEEKEND20",
            "discount": 20,
            "valid_until": date(2025, 6, 30),
            "description": "Enjoy 20% off on weekend travels",
        },
        {
            "id": "offer3",
            "title": "Summer Vacation Offer",
            "code": "SUMMER15",
            "discount": 15,
            "valid_until": date(2025, 9, 30),
            "description": "15% discount on all summer bookings",
        },
    ]

    def __init__(self, seed: Optional[int] = None):
        rng = random.Random(seed)
        self._buses = [self._build_bus(entry, rng) for entry in self.BUSES]

    @staticmethod
    def generate_seats(bus_id: str, total_seats: int, booked: List[int], base_price: float, rng: random.Random) -> List[Seat]:
        """Build a seat map with ids ``<bus_id>-seat-NN``."""
        seats = []
        for i in range(1, total_seats + 1):
            number = f"{i:02d}"
            premium = PREMIUM_SURCHARGE if rng.random() < PREMIUM_SHARE else 0
            seats.append(
                Seat(
                    id=f"{bus_id}-seat-{number}",
                    number=number,
                    is_booked=i in booked,
                    price=base_price + premium,
                )
            )
        return seats

    def _build_bus(self, entry: Dict, rng: random.Random) -> Bus:
        fields = {k: v for k, v in entry.items() if k not in ("total_seats", "booked")}
        seats = self.generate_seats(entry["id"], entry["total_seats"], entry["booked"], entry["price"], rng)
        return Bus(seats=seats, **fields)

    def list_buses(self) -> List[Bus]:
        return list(self._buses)

    def find_bus(self, bus_id: str) -> Optional[Bus]:
        """Find a bus by its catalog id."""
        for bus in self._buses:
            if bus.id == bus_id:
                return bus
        return None

    def cities(self) -> List[str]:
        return list(self.CITIES)

    def popular_routes(self) -> List[Dict[str, str]]:
        return [dict(route) for route in self.POPULAR_ROUTES]

    def offers(self) -> List[Offer]:
        return [Offer(**offer) for offer in self.OFFERS]
