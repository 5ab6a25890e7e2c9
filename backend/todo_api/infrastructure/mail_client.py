"""Mail Clients — one-shot templated mail dispatch behind the MailClient protocol.

Invariants:
    - send() makes at most one outbound call; no retries
    - Transport failures and non-2xx provider responses map to MailDeliveryError
    - The provider API key never appears in logs or error messages

Design Decisions:
    - LoggingMailClient is the default backend: the service runs without a provider
    - HttpMailClient opens an httpx.AsyncClient per send; no pooled client
      lifecycle to manage at startup/shutdown
"""

import logging

import httpx

from todo_api.config import Settings
from todo_api.core.controller_protocols import MailClient
from todo_api.core.domain_types import MailBackend
from todo_api.core.errors import MailDeliveryError

logger = logging.getLogger(__name__)


class LoggingMailClient:
    """Records the dispatch in the log instead of sending it."""

    def __init__(self, sender: str):
        self.sender = sender

    async def send(
        self, email: str, template_id: str, variables: dict[str, str],
    ) -> None:
        logger.info(
            f"Mail dispatched (log backend) from {self.sender} to {email}",
            extra={"template_id": template_id, "mail_backend": MailBackend.LOG.value},
        )


class HttpMailClient:
    """Posts templated mail requests to a JSON mail-provider API."""

    def __init__(
        self,
        api_url: str,
        api_key: str,
        sender: str,
        timeout_seconds: int = 10,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.api_url = api_url
        self.api_key = api_key
        self.sender = sender
        self.timeout_seconds = timeout_seconds
        self._transport = transport

    async def send(
        self, email: str, template_id: str, variables: dict[str, str],
    ) -> None:
        payload = {
            "from": self.sender,
            "to": email,
            "template_id": template_id,
            "variables": variables,
        }
        try:
            async with httpx.AsyncClient(
                timeout=self.timeout_seconds, transport=self._transport,
            ) as client:
                response = await client.post(
                    self.api_url,
                    json=payload,
                    headers={"Authorization": f"Bearer {self.api_key}"},
                )
                response.raise_for_status()
        except httpx.HTTPStatusError as e:
            logger.error(
                f"Mail provider rejected dispatch: HTTP {e.response.status_code}",
                extra={
                    "template_id": template_id,
                    "status_code": e.response.status_code,
                    "mail_backend": MailBackend.HTTP.value,
                },
            )
            raise MailDeliveryError(
                f"provider returned HTTP {e.response.status_code}", template_id,
            )
        except httpx.TimeoutException:
            logger.error(
                "Mail provider timed out",
                extra={"template_id": template_id, "mail_backend": MailBackend.HTTP.value},
            )
            raise MailDeliveryError("provider timed out", template_id)
        except httpx.RequestError as e:
            logger.error(
                f"Mail provider unreachable: {type(e).__name__}",
                extra={"template_id": template_id, "mail_backend": MailBackend.HTTP.value},
            )
            raise MailDeliveryError("provider unreachable", template_id)


def build_mail_client(settings: Settings) -> MailClient:
    if settings.mail_backend == MailBackend.HTTP:
        return HttpMailClient(
            api_url=settings.mail_api_url,
            api_key=settings.mail_api_key,
            sender=settings.mail_sender,
            timeout_seconds=settings.mail_timeout_seconds,
        )
    return LoggingMailClient(sender=settings.mail_sender)
