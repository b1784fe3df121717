"""
Completion gateway. Sends the NutriBot prompt plus the user's message to an
OpenAI-compatible chat completions endpoint.

A single attempt is made per call. Any failure is logged and turned into a
friendly fallback reply; callers never see an exception from here.
"""

import logging
from typing import Optional

import httpx

from config import Settings
from exceptions import CompletionError
from prompts import SYSTEM_PROMPT

logger = logging.getLogger(__name__)

FALLBACK_REPLY = (
    "Hey there! I'm having a little trouble connecting right now 😅 "
    "But I'm still here to help! Try asking me again in a moment!"
)


class CompletionGateway:
    def __init__(self, settings: Settings, transport: Optional[httpx.AsyncBaseTransport] = None):
        self.settings = settings
        self.transport = transport

    def build_messages(self, user_message: str) -> list:
        return [
            {"role": "system", "content": SYSTEM_PROMPT},
            {"role": "user", "content": user_message},
        ]

    async def send(self, messages: list) -> dict:
        """Call the completion API and return the decoded JSON body."""
        if not self.settings.openai_api_key:
            raise CompletionError("OPENAI_API_KEY not configured")

        async with httpx.AsyncClient(timeout=self.settings.openai_timeout, transport=self.transport) as client:
            response = await client.post(
                self.settings.openai_api_url,
                headers={
                    "Authorization": f"Bearer {self.settings.openai_api_key}",
                    "Content-Type": "application/json",
                },
                json={
                    "model": self.settings.openai_model,
                    "messages": messages,
                    "max_tokens": self.settings.max_tokens,
                    "temperature": self.settings.temperature,
                },
            )
            response.raise_for_status()
            return response.json()

    async def generate_reply(self, user_message: str, user_name: Optional[str] = None) -> str:
        # user_name is not part of the prompt; the system prompt stays constant.
        try:
            result = await self.send(self.build_messages(user_message))
            content = result["choices"][0]["message"]["content"]
            if not isinstance(content, str):
                raise CompletionError("completion response has no text content")
            return content
        except httpx.HTTPStatusError as e:
            logger.error("OpenAI API error: HTTP %s: %s", e.response.status_code, e.response.text[:200])
        except httpx.TimeoutException:
            logger.error("OpenAI API timeout after %ss", self.settings.openai_timeout)
        except Exception:
            logger.exception("OpenAI API error")
        return FALLBACK_REPLY
