"""Anthropic Claude provider implementation."""

from typing import Optional

import anthropic
from anthropic import AsyncAnthropic

from commitmuse.config import ANTHROPIC_VERSION, LLMProvider
from commitmuse.failures import FailureKind
from commitmuse.llm.base import BaseLLMProvider
from commitmuse.llm.prompts import GenerationRequest


class AnthropicProvider(BaseLLMProvider):
    """Anthropic Claude LLM provider.

    Request: ``{model, max_tokens, system, messages: [user]}`` with
    ``x-api-key`` and ``anthropic-version`` headers. Text at ``content[0].text``.
    """

    provider = LLMProvider.ANTHROPIC

    def _create_client(self) -> AsyncAnthropic:
        return AsyncAnthropic(
            api_key=self.api_key,
            timeout=self.timeout,
            max_retries=0,
            default_headers={"anthropic-version": ANTHROPIC_VERSION},
        )

    async def _complete(self, request: GenerationRequest) -> Optional[str]:
        """Call the messages endpoint.

        Raises:
            LLMError: Classified from the SDK's exception.
        """
        try:
            async with self._create_client() as client:
                message = await client.messages.create(
                    model=self.model,
                    max_tokens=self.max_tokens,
                    system=self.system_prompt,
                    messages=[{"role": "user", "content": request.to_prompt()}],
                )
        except anthropic.APITimeoutError as e:
            raise self._error(FailureKind.NETWORK_TIMEOUT, detail=str(e))
        except anthropic.APIConnectionError as e:
            raise self._error(FailureKind.CONNECTIVITY_ERROR, detail=str(e))
        except anthropic.APIStatusError as e:
            raise self._status_error(e.status_code, e.body, e.message)
        except anthropic.APIError as e:
            raise self._error(FailureKind.BACKEND_ERROR, detail=e.message)

        if not message.content:
            return None
        return getattr(message.content[0], "text", None)
