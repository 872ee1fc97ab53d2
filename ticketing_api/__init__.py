"""
Top-level package for the Event Ticketing API.

All functionality lives in the ``app`` subpackage; import the ASGI
application as ``ticketing_api.app.main:app``.
"""

__all__ = []
