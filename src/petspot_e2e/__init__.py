"""PetSpot end-to-end UI test automation (web, Android, iOS)."""

__version__ = "0.1.0"
