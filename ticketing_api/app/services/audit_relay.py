"""
Client for the admin-action audit service.

``AuditRelay.relay`` POSTs a record to ``settings.audit_service_url``
and authenticates with the bearer token of the request that caused
the action.  The call is made inline; transport errors and non-2xx
responses are raised as ``RelayError`` without retrying.
"""

import logging
from typing import Optional

import httpx

from ticketing_api.app.core.config import settings
from ticketing_api.app.core.errors import RelayError


logger = logging.getLogger(__name__)


class AuditRelay:
    """Forward admin-action records to the audit service."""

    # Overridable transport, e.g. ``httpx.MockTransport`` in tests.
    transport: Optional[httpx.AsyncBaseTransport] = None

    @classmethod
    async def relay(cls, record: dict, auth_token: str) -> None:
        """Send ``record`` to the audit service as the caller identified by ``auth_token``."""
        headers = {"Authorization": f"Bearer {auth_token}"}
        try:
            async with httpx.AsyncClient(
                transport=cls.transport,
                timeout=settings.audit_timeout_seconds,
            ) as client:
                response = await client.post(settings.audit_service_url, json=record, headers=headers)
                response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            logger.error(
                "Audit service rejected '%s' for %s %s: HTTP %s",
                record.get("action"),
                record.get("targetType"),
                record.get("targetId"),
                exc.response.status_code,
            )
            raise RelayError(
                f"Audit service responded with HTTP {exc.response.status_code}"
            ) from exc
        except httpx.HTTPError as exc:
            logger.error("Audit service unreachable at %s: %s", settings.audit_service_url, exc)
            raise RelayError(f"Audit service unreachable: {exc}") from exc
        logger.info(
            "Relayed admin action '%s' for %s %s",
            record.get("action"),
            record.get("targetType"),
            record.get("targetId"),
        )
