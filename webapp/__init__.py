"""Booking API and static viewer server."""
