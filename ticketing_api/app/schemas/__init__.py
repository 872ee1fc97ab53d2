"""
Pydantic schema definitions for API payloads.

Each domain (events, users, admin actions) defines its own models for
request and response bodies, separate from the SQLite rows they are
built from.
"""
