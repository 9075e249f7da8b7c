"""
Generative-language client used for answering and translating.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, Optional

from langchain_google_genai import ChatGoogleGenerativeAI

from ..config import settings
from ..errors import ExternalServiceError
from ..utils import log_processing_info, handle_processing_error
import logging

logger = logging.getLogger(__name__)


class TextGenerator(ABC):
    """Prompt in, text out."""

    @abstractmethod
    async def generate(self, prompt: str, model: Optional[str] = None) -> str:
        """
        Generate text for ``prompt``.

        Raises:
            ExternalServiceError: If the call fails for any reason
        """


class GeminiClient(TextGenerator):
    """TextGenerator backed by Google Gemini chat models."""

    def __init__(
        self,
        api_key: Optional[str] = None,
        default_model: Optional[str] = None,
        temperature: Optional[float] = None
    ):
        self.api_key = api_key or settings.google_api_key
        self.default_model = default_model or settings.google_chat_model
        self.temperature = settings.google_temperature if temperature is None else temperature
        self._models: Dict[str, ChatGoogleGenerativeAI] = {}

    def _get_llm(self, model: str) -> ChatGoogleGenerativeAI:
        """Create the chat model on first use and reuse it afterwards."""
        llm = self._models.get(model)
        if llm is None:
            kwargs: Dict[str, Any] = {}
            if settings.google_max_tokens:
                kwargs['max_output_tokens'] = settings.google_max_tokens
            llm = ChatGoogleGenerativeAI(
                model=model,
                api_key=self.api_key,
                temperature=self.temperature,
                **kwargs
            )
            self._models[model] = llm

            log_processing_info("LLM initialized", {
                "model": model,
                "temperature": self.temperature
            })
        return llm

    @staticmethod
    def _content_to_text(content: Any) -> str:
        if isinstance(content, str):
            return content
        parts = []
        for part in content or []:
            if isinstance(part, str):
                parts.append(part)
            elif isinstance(part, dict) and part.get("type") == "text":
                parts.append(part.get("text", ""))
        return "".join(parts)

    async def generate(self, prompt: str, model: Optional[str] = None) -> str:
        model_name = model or self.default_model
        try:
            response = await self._get_llm(model_name).ainvoke(prompt)
        except Exception as e:
            handle_processing_error("llm_generate", e, {"model": model_name})
            raise ExternalServiceError(str(e)) from e

        text = self._content_to_text(response.content)
        log_processing_info("LLM response received", {
            "model": model_name,
            "prompt_length": len(prompt),
            "response_length": len(text)
        })
        return text
