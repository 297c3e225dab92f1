"""Domain error types."""

from __future__ import annotations

from enum import StrEnum


class BroadsideError(Exception):
    """Base class for game errors surfaced to callers."""


class PlacementError(StrEnum):
    """Reasons a ship placement can be rejected."""

    OUT_OF_BOUNDS = "OUT_OF_BOUNDS"
    OVERLAP = "OVERLAP"
    FLEET_COMPLETE = "FLEET_COMPLETE"


class InvalidPlacementError(BroadsideError, ValueError):
    """Raised when a ship cannot be placed; the caller may retry."""

    def __init__(self, reason: PlacementError, message: str | None = None) -> None:
        self.reason = reason
        super().__init__(message or _DEFAULT_MESSAGES[reason])


_DEFAULT_MESSAGES: dict[PlacementError, str] = {
    PlacementError.OUT_OF_BOUNDS: "Ship goes out of bounds.",
    PlacementError.OVERLAP: "Position occupied by another ship.",
    PlacementError.FLEET_COMPLETE: "All ships are already placed.",
}
