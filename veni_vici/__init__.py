"""Discover random cats by breed, with an in-memory ban list."""
