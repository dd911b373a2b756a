"""
Storage Module
JSON-file stores for the item archive and bookings
"""
from .archive_store import JsonArchiveStore, load_subject_names
from .booking_store import JsonBookingStore
from .json_files import read_json, write_json_atomic

__all__ = [
    "JsonArchiveStore",
    "JsonBookingStore",
    "load_subject_names",
    "read_json",
    "write_json_atomic",
]
