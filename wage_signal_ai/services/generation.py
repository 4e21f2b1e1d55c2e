"""Generation collaborators: generate(messages) -> text via any OpenAI-compatible endpoint."""

from abc import ABC, abstractmethod
from typing import Dict, List, Optional

from openai import AsyncOpenAI

from config import (
    EXTRACTOR_MODEL_NAME,
    LLM_TIMEOUT_SECONDS,
    MODEL_NAME,
    OPENAI_API_KEY,
    OPENAI_BASE_URL,
    TRANSLATOR_MODEL_NAME,
)
from prompts import EXTRACTOR_INSTRUCTIONS, TRANSLATOR_INSTRUCTIONS
from utils.logger import get_logger

logger = get_logger(__name__)

Message = Dict[str, str]


class GenerationClient(ABC):
    """Abstract text-generation capability injected into each pipeline stage."""

    @abstractmethod
    async def generate(self, messages: List[Message]) -> str:
        """Return the model's text reply for an ordered list of {role, content} messages."""
        ...


class OpenAIGenerationClient(GenerationClient):
    """Chat completions on OpenAI or any compatible API (Groq, local servers)."""

    def __init__(
        self,
        model: str = MODEL_NAME,
        instructions: Optional[str] = None,
        temperature: float = 0.1,
        api_key: str = OPENAI_API_KEY,
        base_url: str = OPENAI_BASE_URL,
        client: Optional[AsyncOpenAI] = None,
    ) -> None:
        self._model = model
        self._instructions = instructions
        self._temperature = temperature
        self._api_key = api_key
        self._base_url = base_url or None
        self._client = client

    def _get_client(self) -> AsyncOpenAI:
        if self._client is None:
            self._client = AsyncOpenAI(
                api_key=self._api_key,
                base_url=self._base_url,
                timeout=LLM_TIMEOUT_SECONDS,
            )
        return self._client

    async def generate(self, messages: List[Message]) -> str:
        # Pre-bound instructions go first, as a system message
        full_messages = list(messages)
        if self._instructions:
            full_messages.insert(0, {"role": "system", "content": self._instructions})
        response = await self._get_client().chat.completions.create(
            model=self._model,
            messages=full_messages,
            temperature=self._temperature,
        )
        choice = response.choices[0] if response.choices else None
        if not choice or not choice.message or not choice.message.content:
            logger.warning("Empty completion from model %s", self._model)
            return ""
        return choice.message.content


def get_generation_client(role: str) -> GenerationClient:
    """
    Return the configured collaborator for a pipeline role (dependency injection).
    role: "extractor", "translator" or "explainer".
    """
    r = (role or "").strip().lower()
    if not OPENAI_API_KEY:
        logger.warning("OPENAI_API_KEY is not set; %s calls will fail", r or "generation")
    if r == "extractor":
        return OpenAIGenerationClient(model=EXTRACTOR_MODEL_NAME, instructions=EXTRACTOR_INSTRUCTIONS)
    if r == "translator":
        return OpenAIGenerationClient(model=TRANSLATOR_MODEL_NAME, instructions=TRANSLATOR_INSTRUCTIONS, temperature=0.0)
    if r == "explainer":
        return OpenAIGenerationClient(model=MODEL_NAME, temperature=0.3)
    raise ValueError(f"Unknown generation role: {role!r}")
