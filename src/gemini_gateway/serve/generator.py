"""Shared Gemini generation client."""
from __future__ import annotations
import logging
import time

import google.generativeai as genai

from gemini_gateway.common.errors import GenerationError
from gemini_gateway.common.schema import GenerationRequest

LOGGER = logging.getLogger("gemini_gateway.generator")

class GeminiGenerator:
    """
    One-shot content generation against a Gemini model.

    Built once per app and shared by all requests; holds no per-request state.
    """

    def __init__(self, api_key: str | None, model_id: str) -> None:
        genai.configure(api_key=api_key)
        self.model_id = model_id
        self._model = genai.GenerativeModel(model_id)

    async def generate(self, request: GenerationRequest) -> str:
        """
        Send the prompt (and attachment, if any) and return the generated text.

        Raises:
            GenerationError: on any failure from the SDK, with its message.
        """
        start = time.time()
        try:
            response = await self._model.generate_content_async(request.contents())
            text = response.text
        except Exception as e:
            raise GenerationError(str(e)) from e
        LOGGER.info(
            "Generated %d chars in %dms (attachment=%s)",
            len(text),
            int((time.time() - start) * 1000),
            request.attachment is not None,
        )
        return text
