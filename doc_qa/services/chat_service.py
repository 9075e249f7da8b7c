"""
Chat service for answering questions and translating text with the LLM.
"""

from typing import Optional, Sequence

from .answer_parser import parse_answer
from .context_builder import format_citation
from .llm_client import GeminiClient, TextGenerator
from ..config import settings
from ..errors import ExternalServiceError
from ..models import AskResponse, DocumentRecord
from ..utils import log_processing_info
import logging

logger = logging.getLogger(__name__)


class ChatService:
    """Service for generating answers and translations using the LLM."""

    def __init__(self, llm: Optional[TextGenerator] = None):
        """Initialize the chat service."""
        self.llm = llm or GeminiClient()

    def _create_prompt(self, question: str, context: str) -> str:
        """
        Create a question-answering prompt for the LLM.

        Args:
            question: User's question
            context: Source-annotated text of the selected documents

        Returns:
            Formatted prompt string
        """
        prompt = f"""
You are a helpful assistant that answers questions based on the provided documents.
The documents may be in various Indian languages (Hindi, Tamil, Telugu, Bengali, etc.) or English.

Context from documents:
{context}

Question: {question}

Instructions:
1. Answer the question based ONLY on the information in the provided documents
2. If the answer spans multiple pages or documents, mention all relevant sources
3. When citing sources, use the format: {format_citation('filename', 'X')}
4. If you cannot find the answer in the documents, say so clearly
5. Provide the answer in clear, fluent English regardless of the source language

Answer:"""
        return prompt.strip()

    def _create_translation_prompt(self, text: str, target_language: str) -> str:
        prompt = f"""
Translate the following text to {target_language}.
If the text is already in {target_language}, return it as is.

Text: {text}

Translation:"""
        return prompt.strip()

    async def answer_question(
        self,
        question: str,
        context: str,
        documents: Sequence[DocumentRecord]
    ) -> AskResponse:
        """
        Generate an answer to the user's question.

        Args:
            question: User's question
            context: Context assembled from the selected documents
            documents: Records of the selected documents, used to resolve citations

        Returns:
            AskResponse with the cleaned answer, cited sources and confidence

        Raises:
            ExternalServiceError: If the LLM call fails
        """
        prompt = self._create_prompt(question, context)

        try:
            text = await self.llm.generate(prompt, model=settings.google_chat_model)
        except ExternalServiceError as e:
            raise ExternalServiceError(f"Error generating answer: {e.message}") from e

        response = parse_answer(text, documents, settings.answer_confidence)

        log_processing_info("Response generated", {
            "question_length": len(question),
            "context_length": len(context),
            "answer_length": len(response.answer),
            "sources_count": len(response.sources),
            "confidence": response.confidence
        })

        return response

    async def translate(self, text: str, target_language: str = "en") -> str:
        """Translate text with the LLM, returning its output verbatim."""
        prompt = self._create_translation_prompt(text, target_language)

        try:
            translated = await self.llm.generate(prompt, model=settings.google_translate_model)
        except ExternalServiceError as e:
            raise ExternalServiceError(f"Error translating text: {e.message}") from e

        log_processing_info("Text translated", {
            "target_language": target_language,
            "text_length": len(text),
            "translated_length": len(translated)
        })

        return translated
