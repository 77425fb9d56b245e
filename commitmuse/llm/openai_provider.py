"""OpenAI provider implementation.

Also the base for OpenAI-compatible backends (see mistral_provider).
"""

from typing import Optional

import openai
from openai import AsyncOpenAI

from commitmuse.config import LLMProvider
from commitmuse.failures import FailureKind
from commitmuse.llm.base import BaseLLMProvider
from commitmuse.llm.prompts import GenerationRequest


class OpenAIProvider(BaseLLMProvider):
    """OpenAI chat completions provider.

    Request: ``{model, messages: [system, user], max_tokens, temperature}``
    with ``Authorization: Bearer <key>``. Text at ``choices[0].message.content``.
    """

    provider = LLMProvider.OPENAI
    base_url: Optional[str] = None

    def _create_client(self) -> AsyncOpenAI:
        # Retries are owned by the gateway; the SDK must not retry on its own
        return AsyncOpenAI(
            api_key=self.api_key,
            base_url=self.base_url,
            timeout=self.timeout,
            max_retries=0,
        )

    def build_messages(self, request: GenerationRequest) -> list[dict]:
        return [
            {"role": "system", "content": self.system_prompt},
            {"role": "user", "content": request.to_prompt()},
        ]

    async def _complete(self, request: GenerationRequest) -> Optional[str]:
        """Call the chat completions endpoint.

        Raises:
            LLMError: Classified from the SDK's exception.
        """
        try:
            async with self._create_client() as client:
                response = await client.chat.completions.create(
                    model=self.model,
                    messages=self.build_messages(request),
                    max_tokens=self.max_tokens,
                    temperature=self.temperature,
                )
        except openai.APITimeoutError as e:
            raise self._error(FailureKind.NETWORK_TIMEOUT, detail=str(e))
        except openai.APIConnectionError as e:
            raise self._error(FailureKind.CONNECTIVITY_ERROR, detail=str(e))
        except openai.APIStatusError as e:
            raise self._status_error(e.status_code, e.body, e.message)
        except openai.APIError as e:
            raise self._error(FailureKind.BACKEND_ERROR, detail=e.message)

        if not response.choices:
            return None
        return response.choices[0].message.content
