"""
Versioned HTTP API.

Each version subpackage (``v1``, ...) exposes a ``router`` that the
application mounts under ``/api/<version>``.
"""
