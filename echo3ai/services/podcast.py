import logging
from typing import List, Optional

from echo3ai.core.config import settings
from echo3ai.core.errors import ConfigError
from echo3ai.core.prompts import FactCheckPrompts, ChatPrompts, LanguageCheckPrompts
from echo3ai.schemas.podcast import FactCheckResult
from echo3ai.schemas.search import SearchResult
from echo3ai.services.llm import generate
from echo3ai.services.search import search, fetch_first_paragraph

logger = logging.getLogger(__name__)


async def enrich_evidence(results: List[SearchResult]) -> List[SearchResult]:
    """Appends the first paragraph of each result's page to its snippet.

    Pages are fetched one at a time, in result order. Results whose page yields no
    paragraph keep their snippet unchanged.

    Args:
        results (List[SearchResult]): Search results, updated in place.

    Returns:
        List[SearchResult]: The same list.
    """
    enriched = 0
    for result in results:
        if not result.link:
            continue
        excerpt = await fetch_first_paragraph(result.link)
        if excerpt:
            result.snippet = f"{result.snippet}\nExcerpt: {excerpt}"
            enriched += 1

    logger.info(f"Evidence enrichment complete: {enriched}/{len(results)} results have excerpts")
    return results


async def fact_check(transcript: str, api_key: str) -> FactCheckResult:
    """Fact-checks a transcript against web evidence.

    A missing API key or an empty search yields a placeholder report rather than an error.

    Args:
        transcript (str): The statement or transcript to check.
        api_key (str): Gemini API key.

    Raises:
        NetworkError: If the search or the generative call fails.

    Returns:
        FactCheckResult: The report and the evidence it was based on.
    """
    if not api_key:
        logger.warning("Fact-check requested without GEMINI_API_KEY")
        return FactCheckResult(report=FactCheckPrompts.REPORT_NOT_CONFIGURED, evidence=[])

    results = await search(transcript, settings.search_limit)

    if not results:
        logger.warning("No web evidence found for fact-check")
        return FactCheckResult(report=FactCheckPrompts.REPORT_NO_EVIDENCE, evidence=[])

    results = await enrich_evidence(results)

    evidence_block = FactCheckPrompts.get_evidence_block(results)
    prompt = FactCheckPrompts.get_prompt(transcript, evidence_block)

    report = await generate(prompt, api_key, FactCheckPrompts.REPORT_FALLBACK)
    logger.info(f"Fact-check complete with {len(results)} evidence sources")

    return FactCheckResult(report=report, evidence=results)


async def chat(
    transcript: str,
    question: str,
    creator: Optional[str],
    guest: Optional[str],
    api_key: str,
) -> str:
    if not api_key:
        raise ConfigError(ChatPrompts.NOT_CONFIGURED)

    logger.info(f"Starting chat conversation: transcript {len(transcript)} chars, question '{question[:100]}'")
    prompt = ChatPrompts.get_prompt(transcript, question, creator, guest)
    return await generate(prompt, api_key, ChatPrompts.ANSWER_FALLBACK)


async def language_check(
    transcript: str,
    title: Optional[str],
    creator: Optional[str],
    guest: Optional[str],
    api_key: str,
) -> str:
    """Produces the seven-section language analysis report for a transcript.

    An empty model response yields the fixed fallback report.

    Raises:
        ConfigError: If `api_key` is empty.
        NetworkError: If the generative call fails.
    """
    if not api_key:
        raise ConfigError(LanguageCheckPrompts.NOT_CONFIGURED)

    logger.info(f"Starting language analysis: transcript {len(transcript)} chars, title '{title}'")
    prompt = LanguageCheckPrompts.get_prompt(transcript, title, creator, guest)
    analysis = await generate(prompt, api_key, LanguageCheckPrompts.FALLBACK_REPORT)

    if not analysis.strip():
        return LanguageCheckPrompts.FALLBACK_REPORT
    return analysis
