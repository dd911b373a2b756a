"""Booking records kept as a plain JSON array."""

from __future__ import annotations

from datetime import datetime, timezone
import logging
from pathlib import Path
from threading import Lock
from typing import Any, Dict, List

from core import Booking, BookingCreate
from .json_files import read_json, write_json_atomic


logger = logging.getLogger(__name__)


def _now_ms() -> int:
    return int(datetime.now(timezone.utc).timestamp() * 1000)


class JsonBookingStore:
    """Append/filter store over ``bookings.json``."""

    def __init__(self, path: Path) -> None:
        self.path = Path(path)
        self._lock = Lock()
        self._last_id = 0

    def ensure_initialized(self) -> None:
        with self._lock:
            if not self.path.exists():
                write_json_atomic(self.path, [])

    def list(self) -> List[Dict[str, Any]]:
        payload = read_json(self.path, fallback=[])
        return payload if isinstance(payload, list) else []

    def _next_id(self) -> int:
        # millisecond ids, bumped when two bookings land in the same ms
        candidate = max(_now_ms(), self._last_id + 1)
        self._last_id = candidate
        return candidate

    def create(self, payload: BookingCreate) -> Booking:
        with self._lock:
            bookings = self.list()
            booking = Booking(id=self._next_id(), **payload.model_dump())
            bookings.append(booking.to_record())
            write_json_atomic(self.path, bookings)
        logger.info(f"New booking: {booking.id} ({booking.driver}, {booking.date} {booking.time_slot})")
        return booking

    def delete(self, booking_id: int) -> bool:
        with self._lock:
            bookings = self.list()
            kept = [item for item in bookings if not (isinstance(item, dict) and item.get("id") == booking_id)]
            write_json_atomic(self.path, kept)
        return len(kept) != len(bookings)
