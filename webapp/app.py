"""Booking API served next to the static feed viewer."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Optional

from fastapi import Body, FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
from pydantic import ValidationError

from core import BookingCreate
from storage.booking_store import JsonBookingStore
from utils.exceptions import StorageError


logger = logging.getLogger(__name__)


def create_app(
    bookings_path: Optional[Path] = None,
    static_dir: Optional[Path] = None,
) -> FastAPI:
    """Build the app. Defaults come from ``ServerSettings``."""
    if bookings_path is None or static_dir is None:
        from config import get_server_settings

        settings = get_server_settings()
        bookings_path = bookings_path or Path(settings.bookings_path)
        static_dir = static_dir or Path(settings.static_dir)

    store = JsonBookingStore(bookings_path)
    store.ensure_initialized()

    app = FastAPI(title="juoru-feed bookings")
    app.state.booking_store = store
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.get("/api/bookings")
    def list_bookings():
        try:
            return store.list()
        except StorageError as exc:
            logger.error(f"Error reading bookings: {exc}")
            return []

    @app.post("/api/bookings")
    def create_booking(payload: Any = Body(default=None)):
        if not isinstance(payload, dict):
            return JSONResponse(status_code=400, content={"error": "Missing required fields"})
        try:
            request = BookingCreate.model_validate(payload)
        except ValidationError:
            return JSONResponse(status_code=400, content={"error": "Missing required fields"})

        try:
            booking = store.create(request)
        except StorageError as exc:
            logger.error(f"Error creating booking: {exc}")
            return JSONResponse(status_code=500, content={"error": "Failed to create booking"})
        return {"success": True, "booking": booking.to_record()}

    @app.delete("/api/bookings/{booking_id}")
    def delete_booking(booking_id: str):
        try:
            numeric_id = int(booking_id)
        except ValueError:
            # no stored booking can match a non-numeric id
            return {"success": True}
        try:
            store.delete(numeric_id)
        except StorageError as exc:
            logger.error(f"Error deleting booking: {exc}")
            return JSONResponse(status_code=500, content={"error": "Failed to delete booking"})
        return {"success": True}

    # registered last so the API routes win over the static mount
    if static_dir.is_dir():
        app.mount("/", StaticFiles(directory=str(static_dir), html=True), name="viewer")

    return app
