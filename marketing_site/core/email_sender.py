"""
Transactional email delivery.

EmailSender is the capability the contact handler depends on; ResendEmailSender
delivers through the Resend HTTP API. Provider and transport failures are
returned as an unsuccessful EmailDispatchResult instead of raised.
"""

import logging
from abc import ABC, abstractmethod
from typing import Optional, Dict, Any

import httpx

from marketing_site.models.contact import EmailDispatchResult, OutboundEmail

logger = logging.getLogger(__name__)

RESEND_API_URL = "https://api.resend.com/emails"


class EmailSender(ABC):
    @abstractmethod
    async def send(self, email: OutboundEmail) -> EmailDispatchResult:
        ...


class ResendEmailSender(EmailSender):
    def __init__(
        self,
        api_key: str,
        api_url: str = RESEND_API_URL,
        timeout: float = 10.0,
        client: Optional[httpx.AsyncClient] = None,
    ):
        self.api_key = api_key
        self.api_url = api_url
        self.timeout = timeout
        self._client = client

    def build_payload(self, email: OutboundEmail) -> Dict[str, Any]:
        payload = {
            "from": email.from_email,
            "to": [email.to],
            "subject": email.subject,
            "html": email.html,
            "text": email.text,
        }
        if email.reply_to:
            payload["reply_to"] = email.reply_to
        return payload

    async def send(self, email: OutboundEmail) -> EmailDispatchResult:
        """
        Send one email through Resend.

        Args:
            email: Message to deliver

        Returns:
            EmailDispatchResult: success with the Resend message id, or the provider error
        """
        try:
            if self._client is not None:
                response = await self._post(self._client, email)
            else:
                async with httpx.AsyncClient() as client:
                    response = await self._post(client, email)
        except httpx.HTTPError as e:
            logger.error(f"Resend request failed: {str(e)}")
            return EmailDispatchResult(success=False, error=f"Unable to reach email provider: {str(e)}")

        if not response.is_success:
            error = self._error_message(response)
            logger.error(f"Resend API error {response.status_code}: {error}")
            return EmailDispatchResult(success=False, error=error)

        data = response.json()
        return EmailDispatchResult(success=True, id=data.get("id"))

    async def _post(self, client: httpx.AsyncClient, email: OutboundEmail) -> httpx.Response:
        return await client.post(
            self.api_url,
            json=self.build_payload(email),
            headers={
                "Authorization": f"Bearer {self.api_key}",
                "Content-Type": "application/json",
            },
            timeout=self.timeout,
        )

    @staticmethod
    def _error_message(response: httpx.Response) -> str:
        try:
            data = response.json()
        except ValueError:
            return response.text or f"HTTP {response.status_code}"
        if isinstance(data, dict) and data.get("message"):
            return str(data["message"])
        return f"HTTP {response.status_code}"
