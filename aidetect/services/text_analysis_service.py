"""Text verdicts: remote classifier first, local pattern scorer as fallback."""
from aidetect.core.config import Config
from aidetect.core.exceptions import GatewayError
from aidetect.core.logging import get_logger
from aidetect.dtos.analysis_dto import (
    TextAnalysisInputDTO,
    TextAnalysisResultDTO,
    TextStatsDTO,
    VerdictSource,
)
from aidetect.services.gateway_client import GatewayClient
from aidetect.services.gateway_schemas import TextVerdictPayload
from aidetect.services.prompts import TEXT_SYSTEM_PROMPT, build_text_prompt
from aidetect.utils.remote_reconciler import remote_percent, score_from_remote
from aidetect.utils.sentence_scorer import SentenceScorer
from aidetect.utils.sentence_tokenizer import count_words, tokenize
from aidetect.utils.verdict_aggregator import aggregate, build_verdict, describe_sentences

logger = get_logger(__name__)


def text_stats(text: str, min_chars: int) -> TextStatsDTO:
    stripped = text.strip()
    return TextStatsDTO(
        word_count=count_words(stripped),
        sentence_count=len(tokenize(stripped)),
        analyzable=len(stripped) >= min_chars,
    )


class TextAnalysisService:
    """Orchestrates the gateway attempt with the local scorer as automatic fallback."""

    def __init__(self, gateway: GatewayClient, scorer: SentenceScorer, config: Config) -> None:
        self._gateway = gateway
        self._scorer = scorer
        self._max_prompt_chars = config.analysis.max_prompt_chars

    async def attempt_gateway(self, text: str) -> TextVerdictPayload:
        """Ask the remote classifier for a verdict. Raises GatewayError."""
        prompt = build_text_prompt(text, self._max_prompt_chars)
        return await self._gateway.request_verdict(TEXT_SYSTEM_PROMPT, prompt, TextVerdictPayload)

    def local_fallback(self, sentences: list[str]) -> TextAnalysisResultDTO:
        """Score every sentence locally and average them."""
        scores = self._scorer.score_all(sentences)
        return TextAnalysisResultDTO(
            source=VerdictSource.FALLBACK,
            verdict=aggregate(scores),
            sentences=describe_sentences(sentences, scores),
        )

    def from_gateway(
        self,
        payload: TextVerdictPayload,
        sentences: list[str],
    ) -> TextAnalysisResultDTO:
        """Use the remote overall percentage; breakdown from its sentences when given."""
        if payload.sentences:
            texts = [s.text or "" for s in payload.sentences]
            scores = [score_from_remote(s.classification, s.confidence) for s in payload.sentences]
        else:
            texts = sentences
            scores = self._scorer.score_all(sentences)

        return TextAnalysisResultDTO(
            source=VerdictSource.GATEWAY,
            verdict=build_verdict(remote_percent(payload.ai_probability), scores),
            sentences=describe_sentences(texts, scores),
            reasoning=payload.reasoning,
        )

    async def analyze(self, dto: TextAnalysisInputDTO) -> TextAnalysisResultDTO:
        text = dto.text.strip()
        sentences = tokenize(text)

        try:
            payload = await self.attempt_gateway(text)
        except GatewayError as e:
            logger.warning(
                "gateway_failed_falling_back_to_local_scorer",
                error=str(e),
                error_type=type(e).__name__,
            )
            result = self.local_fallback(sentences)
        else:
            result = self.from_gateway(payload, sentences)

        logger.info(
            "text_analysis_completed",
            source=result.source.value,
            sentences=len(result.sentences),
            ai_percent=result.verdict.ai_percent,
        )
        return result
