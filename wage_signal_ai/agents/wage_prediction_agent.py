"""
Wage Prediction Agent: one conversational turn through the full pipeline.

capture input -> normalize language -> extract -> validate -> merge/gate
-> (standardize -> predict -> explain)? -> localize

The pipeline holds no state between turns. The caller persists
``structuredData`` from each result and passes it back as ``current_state``.
"""

import asyncio
from typing import Any, Dict, Mapping, Optional

from config import ENABLE_EXPLANATIONS
from agents.explainer_agent import run_explainer_agent
from agents.extractor_agent import run_extractor_agent
from agents.language_agent import localize_text, normalize_language
from schemas.turn import TurnContext, TurnInput, TurnResult
from schemas.wage_profile import WageProfile
from services.generation import GenerationClient, get_generation_client
from services.prediction_client import SERVICE_UNAVAILABLE_MESSAGE, PredictionClient
from services.profile_merger import evaluate_readiness
from services.standardizer import standardize_profile
from utils.logger import get_logger

logger = get_logger(__name__)


class WagePredictionPipeline:
    """Stateless turn processor; every collaborator is injected."""

    def __init__(
        self,
        extractor: GenerationClient,
        translator: GenerationClient,
        predictor: PredictionClient,
        explainer: Optional[GenerationClient] = None,
        enable_explanations: bool = ENABLE_EXPLANATIONS,
    ) -> None:
        self.extractor = extractor
        self.translator = translator
        self.predictor = predictor
        self.explainer = explainer
        self.enable_explanations = enable_explanations and explainer is not None

    async def run_turn(self, text: str, current_state: Optional[Mapping[str, Any]] = None) -> TurnResult:
        turn = TurnInput(text=text or "", current_state=dict(current_state) if current_state else None)
        ctx = TurnContext(
            user_text=turn.text,
            existing_profile=WageProfile.from_state(turn.current_state),
        )

        ctx.pivot_text, ctx.language = await normalize_language(self.translator, ctx.user_text)

        try:
            ctx.extraction = await run_extractor_agent(self.extractor, ctx.pivot_text, ctx.existing_profile)
        except Exception as e:
            logger.error("Extractor call failed: %s: %s", type(e).__name__, e)
            result = TurnResult(
                status="error",
                message=SERVICE_UNAVAILABLE_MESSAGE,
                structured_data=ctx.existing_profile.as_state(),
                language=ctx.language,
            )
            return await self._localize(ctx, result)

        ctx.decision = evaluate_readiness(ctx.existing_profile, ctx.extraction)
        if not ctx.decision.ready_for_prediction:
            result = TurnResult(
                status="need_more_info",
                message=ctx.decision.next_question or "",
                structured_data=ctx.decision.merged_profile,
                language=ctx.language,
            )
            return await self._localize(ctx, result)

        ctx.clean_profile = standardize_profile(WageProfile.from_state(ctx.decision.merged_profile))
        prediction = await self.predictor.predict(ctx.clean_profile)
        if prediction.status != "success" or prediction.predicted_wage is None:
            logger.error("Prediction failed for turn: diagnostics=%s", prediction.diagnostics)
            result = TurnResult(
                status="error",
                message=prediction.message,
                structured_data=ctx.clean_profile.as_state(),
                language=ctx.language,
            )
            return await self._localize(ctx, result)

        result = TurnResult(
            status="success",
            message=prediction.message,
            predicted_wage=prediction.predicted_wage,
            structured_data=ctx.clean_profile.as_state(),
            language=ctx.language,
        )
        if self.enable_explanations:
            explained = await run_explainer_agent(self.explainer, ctx.clean_profile, prediction.predicted_wage)
            result.explanation = explained.explanation
            result.key_factors = explained.key_factors
        return await self._localize(ctx, result)

    async def _localize(self, ctx: TurnContext, result: TurnResult) -> TurnResult:
        result.message = await localize_text(self.translator, result.message, ctx.language)
        if result.explanation:
            result.explanation = await localize_text(self.translator, result.explanation, ctx.language)
        logger.info(
            "Turn finished: status=%s language=%s missing=%s",
            result.status,
            result.language,
            ctx.decision.missing_fields if ctx.decision else None,
        )
        return result


def create_default_pipeline() -> WagePredictionPipeline:
    """Pipeline wired to the configured LLM endpoint and prediction API."""
    return WagePredictionPipeline(
        extractor=get_generation_client("extractor"),
        translator=get_generation_client("translator"),
        explainer=get_generation_client("explainer"),
        predictor=PredictionClient(),
    )


async def run_wage_prediction_turn(
    text: str,
    current_state: Optional[Mapping[str, Any]] = None,
    pipeline: Optional[WagePredictionPipeline] = None,
) -> Dict[str, Any]:
    """
    Run one turn and return the caller contract:
    {status, message, structuredData, language, predictedWage?, explanation?, keyFactors?}.
    """
    pipeline = pipeline or create_default_pipeline()
    result = await pipeline.run_turn(text, current_state)
    return result.to_response()


def run_turn_sync(
    text: str,
    current_state: Optional[Mapping[str, Any]] = None,
    pipeline: Optional[WagePredictionPipeline] = None,
) -> Dict[str, Any]:
    """Run one turn from a synchronous host (e.g. Streamlit) on a fresh event loop."""
    loop = asyncio.new_event_loop()
    asyncio.set_event_loop(loop)
    try:
        return loop.run_until_complete(run_wage_prediction_turn(text, current_state, pipeline))
    finally:
        loop.close()
