"""Shared fakes: scripted generation collaborators and a mock prediction endpoint."""

from __future__ import annotations

import json
from typing import Any, Callable, Dict, List, Optional, Union

import httpx
import pytest

from services.generation import GenerationClient
from services.prediction_client import PredictionClient

Reply = Union[str, Exception]


class ScriptedGenerator(GenerationClient):
    """Returns queued replies in order (or from a responder); exceptions in the queue are raised."""

    def __init__(
        self,
        replies: Optional[List[Reply]] = None,
        responder: Optional[Callable[[List[Dict[str, str]]], Reply]] = None,
    ) -> None:
        self.replies: List[Reply] = list(replies or [])
        self.responder = responder
        self.calls: List[List[Dict[str, str]]] = []

    async def generate(self, messages: List[Dict[str, str]]) -> str:
        self.calls.append(list(messages))
        if self.responder is not None:
            reply = self.responder(messages)
        elif self.replies:
            reply = self.replies.pop(0)
        else:
            raise AssertionError("ScriptedGenerator ran out of replies")
        if isinstance(reply, Exception):
            raise reply
        return reply


def make_translator(
    language: str = "en",
    translated: Optional[str] = None,
    localized: Optional[Reply] = None,
) -> ScriptedGenerator:
    """Translator fake: answers detection prompts with JSON and localization prompts with `localized`."""

    def respond(messages: List[Dict[str, str]]) -> Reply:
        content = messages[-1]["content"]
        if content.startswith("Detect the language"):
            text = content.split("Text:\n", 1)[1]
            return json.dumps({"language": language, "translated": translated or text})
        if localized is None:
            return f"[{language}] " + content.split("Message:\n", 1)[1]
        return localized

    return ScriptedGenerator(responder=respond)


def extraction_json(missing: Optional[List[str]] = None, question: Optional[str] = None, **fields: Any) -> str:
    payload: Dict[str, Any] = {
        "age": None,
        "years_experience": None,
        "education": None,
        "gender": None,
        "country": None,
        "industry": None,
    }
    payload.update(fields)
    payload["missingFields"] = missing if missing is not None else [k for k, v in payload.items() if v is None]
    payload["nextQuestion"] = question
    return json.dumps(payload)


def make_predictor(handler: Callable[[httpx.Request], httpx.Response]) -> PredictionClient:
    return PredictionClient(url="https://wage.test/predict", transport=httpx.MockTransport(handler))


def wage_handler(body: Any, status_code: int = 200, seen: Optional[List[dict]] = None):
    def handler(request: httpx.Request) -> httpx.Response:
        if seen is not None:
            seen.append(json.loads(request.content))
        return httpx.Response(status_code, json=body)

    return handler


COMPLETE_PROFILE: Dict[str, str] = {
    "age": "25-29",
    "years_experience": "2-3",
    "education": "Master’s degree",
    "gender": "Male",
    "country": "Germany",
    "industry": "Computers/Technology",
}


@pytest.fixture
def complete_profile() -> Dict[str, str]:
    return dict(COMPLETE_PROFILE)
