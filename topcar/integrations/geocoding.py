# topcar/integrations/geocoding.py
import time
from abc import ABC, abstractmethod

from topcar.core import config

MOCK_ADDRESSES = [
    "Sydney CBD, NSW 2000",
    "Parramatta, NSW 2150",
    "Bondi Beach, NSW 2026",
    "Manly, NSW 2095",
    "Chatswood, NSW 2067",
]


class Geocoder(ABC):
    @abstractmethod
    def reverse(self, latitude: float, longitude: float) -> str:
        ...


class MockGeocoder(Geocoder):
    """Picks a fixed suburb from the coordinates; same input, same answer."""

    def __init__(self, delay: float = 0.0):
        self.delay = delay

    def reverse(self, latitude, longitude):
        if self.delay:
            time.sleep(self.delay)
        return MOCK_ADDRESSES[int(abs(latitude + longitude) % len(MOCK_ADDRESSES))]


_geocoder: Geocoder = MockGeocoder(delay=config.GEOCODER_DELAY_SECONDS)


def get_geocoder() -> Geocoder:
    return _geocoder
