"""End-to-end turn scenarios with scripted collaborators and a mock prediction API."""

from __future__ import annotations

import asyncio
import json

import httpx

from agents.wage_prediction_agent import WagePredictionPipeline, run_wage_prediction_turn
from conftest import (
    COMPLETE_PROFILE,
    ScriptedGenerator,
    extraction_json,
    make_predictor,
    make_translator,
    wage_handler,
)
from services.prediction_client import SERVICE_UNAVAILABLE_MESSAGE
from services.profile_merger import DATA_QUALITY_MESSAGE

EXPLANATION_REPLY = "EXPLANATION: Tech pays well in Germany.\nFACTORS:\n1. Industry\n2. Country\n3. Education"


def _pipeline(extractor, translator=None, predictor=None, explainer=None) -> WagePredictionPipeline:
    return WagePredictionPipeline(
        extractor=extractor,
        translator=translator or make_translator("en"),
        predictor=predictor or make_predictor(wage_handler({"predictedWage": [55000]})),
        explainer=explainer,
        enable_explanations=explainer is not None,
    )


def _turn(pipeline: WagePredictionPipeline, text: str, state=None) -> dict:
    return asyncio.run(run_wage_prediction_turn(text, state, pipeline=pipeline))


def test_incomplete_profile_asks_next_question() -> None:
    extractor = ScriptedGenerator(
        [extraction_json(age="25-29", question="How many years of work experience do you have?")]
    )
    out = _turn(_pipeline(extractor), "I'm 28")
    assert out["status"] == "need_more_info"
    assert out["message"] == "How many years of work experience do you have?"
    assert out["structuredData"]["age"] == "25-29"
    assert all(out["structuredData"][f] is None for f in COMPLETE_PROFILE if f != "age")
    assert out["language"] == "en"
    assert "predictedWage" not in out
    assert "keyFactors" not in out


def test_existing_profile_is_sent_to_extractor_as_context() -> None:
    extractor = ScriptedGenerator([extraction_json(age="25-29", gender="Female")])
    _turn(_pipeline(extractor), "I'm a woman", {"age": "25-29"})
    system, user = extractor.calls[0]
    assert system["role"] == "system"
    assert '"age": "25-29"' in system["content"]
    assert user == {"role": "user", "content": "I'm a woman"}


def test_completion_across_turns() -> None:
    seen: list = []
    extractor = ScriptedGenerator(
        [
            extraction_json(
                age="25-29",
                years_experience="2-3",
                question="What is your highest level of education?",
            ),
            # Second reply omits the fields learned in turn one
            extraction_json(
                missing=[],
                education="Master’s degree",
                gender="Male",
                country="Germany",
                industry="Computers/Technology",
            ),
        ]
    )
    pipeline = _pipeline(extractor, predictor=make_predictor(wage_handler({"predictedWage": 55000}, seen=seen)))

    first = _turn(pipeline, "I'm 28, 3 years experience")
    assert first["status"] == "need_more_info"
    assert [f for f, v in first["structuredData"].items() if v is None] == [
        "education",
        "gender",
        "country",
        "industry",
    ]

    second = _turn(
        pipeline,
        "Master's degree, male, I work in tech in Berlin",
        first["structuredData"],
    )
    assert second["status"] == "success"
    assert second["predictedWage"] == 55000
    assert isinstance(second["predictedWage"], float)
    assert second["structuredData"] == COMPLETE_PROFILE
    assert seen == [COMPLETE_PROFILE]


def test_standardized_profile_is_sent_and_echoed() -> None:
    seen: list = []
    raw = dict(
        COMPLETE_PROFILE,
        country="  Germany ",
        education="Some college/university study without earning a bachelor’s degree",
    )
    extractor = ScriptedGenerator([extraction_json(missing=[], **raw)])
    pipeline = _pipeline(extractor, predictor=make_predictor(wage_handler({"predictedWage": 40000}, seen=seen)))
    out = _turn(pipeline, "everything at once")
    assert seen[0]["country"] == "Germany"
    assert seen[0]["education"] == "Some college"
    assert out["structuredData"]["education"] == "Some college"


def test_success_with_explanation() -> None:
    extractor = ScriptedGenerator([extraction_json(missing=[], **COMPLETE_PROFILE)])
    explainer = ScriptedGenerator([EXPLANATION_REPLY])
    out = _turn(_pipeline(extractor, explainer=explainer), "all details")
    assert out["status"] == "success"
    assert out["message"] == "Your predicted wage is $55000.00 per year."
    assert out["explanation"] == "Tech pays well in Germany."
    assert out["keyFactors"] == ["Industry", "Country", "Education"]


def test_explainer_failure_still_succeeds_with_fallback_factors() -> None:
    extractor = ScriptedGenerator([extraction_json(missing=[], **COMPLETE_PROFILE)])
    explainer = ScriptedGenerator([RuntimeError("explainer down")])
    out = _turn(_pipeline(extractor, explainer=explainer), "all details")
    assert out["status"] == "success"
    assert "explanation" not in out
    assert 0 < len(out["keyFactors"]) <= 3


def test_service_outage() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(500, json={"error": "internal"})

    extractor = ScriptedGenerator([extraction_json(missing=[], **COMPLETE_PROFILE)])
    explainer = ScriptedGenerator([])
    out = _turn(_pipeline(extractor, predictor=make_predictor(handler), explainer=explainer), "all details")
    assert out["status"] == "error"
    assert out["message"] == SERVICE_UNAVAILABLE_MESSAGE
    assert "predictedWage" not in out
    assert "explanation" not in out
    assert out["structuredData"] == COMPLETE_PROFILE
    assert explainer.calls == []


def test_non_english_input_is_localized() -> None:
    translator = make_translator(
        "es",
        translated="I am 28, 3 years of experience, master's, male, Germany, tech",
        localized="Su salario previsto es de $55000.00 al año.",
    )
    extractor = ScriptedGenerator([extraction_json(missing=[], **COMPLETE_PROFILE)])
    out = _turn(_pipeline(extractor, translator=translator), "Tengo 28 años, ...")
    assert out["status"] == "success"
    assert out["language"] == "es"
    assert out["message"] == "Su salario previsto es de $55000.00 al año."
    # Extraction ran on the English pivot text
    assert extractor.calls[0][-1]["content"].startswith("I am 28")


def test_non_english_translate_back_failure_keeps_english_message() -> None:
    translator = make_translator("es", translated="I am 28 ...", localized=RuntimeError("translator down"))
    extractor = ScriptedGenerator([extraction_json(missing=[], **COMPLETE_PROFILE)])
    out = _turn(_pipeline(extractor, translator=translator), "Tengo 28 años, ...")
    assert out["status"] == "success"
    assert out["message"] == "Your predicted wage is $55000.00 per year."
    assert out["predictedWage"] == 55000


def test_non_english_question_is_localized() -> None:
    translator = make_translator("fr", translated="I am 28")
    extractor = ScriptedGenerator([extraction_json(age="25-29", question="What is your gender?")])
    out = _turn(_pipeline(extractor, translator=translator), "J'ai 28 ans")
    assert out["status"] == "need_more_info"
    assert out["message"] == "[fr] What is your gender?"
    assert out["language"] == "fr"


def test_parse_failure_echoes_error_marker_not_last_good_profile() -> None:
    extractor = ScriptedGenerator(["I could not find any data, sorry!"])
    out = _turn(_pipeline(extractor), "blah", {"age": "25-29", "country": "Germany"})
    assert out["status"] == "need_more_info"
    assert out["message"] == DATA_QUALITY_MESSAGE
    assert out["structuredData"] == {"error": "Invalid model output", "raw": "I could not find any data, sorry!"}


def test_error_marker_resent_as_state_restarts_from_empty_profile() -> None:
    # Callers that resend the echoed marker lose earlier fields; keeping last-known-good is their call
    extractor = ScriptedGenerator([extraction_json(gender="Female")])
    marker = {"error": "Invalid model output", "raw": "x"}
    out = _turn(_pipeline(extractor), "I'm a woman", marker)
    assert out["structuredData"]["gender"] == "Female"
    assert out["structuredData"]["age"] is None
    assert json.loads(extractor.calls[0][0]["content"].split("state is: ", 1)[1].split("\n\n", 1)[0]) == {
        f: None for f in COMPLETE_PROFILE
    }


def test_extractor_outage_is_reported_as_error() -> None:
    extractor = ScriptedGenerator([ConnectionError("llm down")])
    out = _turn(_pipeline(extractor), "I'm 28", {"age": "25-29"})
    assert out["status"] == "error"
    assert out["message"] == SERVICE_UNAVAILABLE_MESSAGE
    assert out["structuredData"]["age"] == "25-29"


def test_fenced_extraction_with_prose_reaches_prediction() -> None:
    reply = "Here is the JSON:\n```json\n" + extraction_json(missing=[], **COMPLETE_PROFILE) + "\n```"
    out = _turn(_pipeline(ScriptedGenerator([reply])), "all details")
    assert out["status"] == "success"


def test_same_inputs_give_same_outcome() -> None:
    reply = extraction_json(age="25-29", question="Experience?")
    pipeline = _pipeline(ScriptedGenerator([reply, reply]))
    assert _turn(pipeline, "I'm 28") == _turn(pipeline, "I'm 28")


def test_blank_or_null_state_values_are_not_sent_for_prediction() -> None:
    seen: list = []
    state = dict(COMPLETE_PROFILE, age="   ", gender="null")
    extractor = ScriptedGenerator([extraction_json(missing=["age", "gender"], question="How old are you?")])
    pipeline = _pipeline(extractor, predictor=make_predictor(wage_handler({"predictedWage": 55000}, seen=seen)))
    out = _turn(pipeline, "hello", state)
    assert out["status"] == "need_more_info"
    assert out["message"] == "How old are you?"
    assert out["structuredData"]["age"] is None
    assert out["structuredData"]["gender"] is None
    assert seen == []
