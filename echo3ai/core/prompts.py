from typing import List, Optional
from echo3ai.schemas.search import SearchResult


class FactCheckPrompts:
    REPORT_NOT_CONFIGURED = "Fact-checking is not configured. Please add GEMINI_API_KEY to environment variables."
    REPORT_NO_EVIDENCE = "No web evidence found for fact-checking. Please try a different statement."
    REPORT_FALLBACK = "No report generated."

    @staticmethod
    def get_evidence_block(results: List[SearchResult]) -> str:
        """Renders the search results as a numbered evidence listing.

        Args:
            results (List[SearchResult]): The (possibly enriched) search results.

        Returns:
            str: One entry per result, separated by a blank line.
        """
        entries = []
        for i, result in enumerate(results, start=1):
            entries.append(
                f"{i}. {result.title}\n"
                f"    URL: {result.link or 'N/A'}\n"
                f"    Snippet: {result.snippet}"
            )
        return "\n\n".join(entries)

    @staticmethod
    def get_prompt(transcript: str, evidence_block: str) -> str:
        return f'''You are a veteran investigative fact-checker. Given the transcript below, perform:

1. **Factual Verification:** Check the accuracy of key statements.
2. **Motivation & Benefit Analysis:** What does the speaker gain by these claims?
3. **Intent & Framing:** How are the statements presented and why?
4. **Sentiment & Tone:** Describe the emotional tone.
5. **Final Verdict:** Based on >30% likelihood of falsehood conclude FALSE, otherwise TRUE.
6. **Resource List:** List each evidence source's URL.

TRANSCRIPT:
"""{transcript}"""

WEB EVIDENCE:
{evidence_block}

Respond in numbered sections matching the above tasks.'''


class ChatPrompts:
    NOT_CONFIGURED = "Chat service is not configured. Please add GEMINI_API_KEY to environment variables."
    ANSWER_FALLBACK = "No answer generated."

    @staticmethod
    def get_prompt(transcript: str, question: str, creator: Optional[str] = None, guest: Optional[str] = None) -> str:
        return f"""You are Echo3AI, an intelligent assistant helping users understand podcast content.

Podcast Information:
- Creator/Host: {creator or "Unknown"}
- Guest: {guest or "No guest"}
- Transcript: {transcript}

User question: {question}

Please provide a helpful, accurate response based on the transcript content. If the question is about the creator or guest, use their names when referring to them. Be conversational and engaging while staying true to the content discussed in the podcast."""


class LanguageCheckPrompts:
    NOT_CONFIGURED = "Language check service is not configured. Please add GEMINI_API_KEY to environment variables."

    SAFETY_AFFIRMATION = "✅ No inappropriate language, profanity, or offensive content detected"

    FALLBACK_REPORT = f"""**Language Analysis Report**

**1. Language Quality Assessment:**
- Analysis could not be completed due to technical issues
- Please try again or contact support if the issue persists

**2. Communication Style:**
- Unable to analyze communication style at this time

**3. Content Structure:**
- Content structure analysis unavailable

**4. Audience Engagement:**
- Engagement analysis could not be performed

**5. Technical Language:**
- Technical language assessment unavailable

**6. Language Safety & Appropriateness:**
- {SAFETY_AFFIRMATION}
- Content appears to be appropriate for general audiences

**7. Recommendations:**
- Please try the analysis again
- Overall rating: Unable to determine due to technical issues"""

    @staticmethod
    def get_error_report(error: str) -> str:
        """Fallback report returned by the API when the analysis call itself failed."""
        return (
            f"{LanguageCheckPrompts.FALLBACK_REPORT}\n\n"
            f"**Note:** This is a fallback response due to a technical error. The original error was: {error}"
        )

    @staticmethod
    def get_prompt(
        transcript: str,
        title: Optional[str] = None,
        creator: Optional[str] = None,
        guest: Optional[str] = None,
    ) -> str:
        return f"""You are Echo3AI, a language analysis expert. Please analyze the following podcast transcript and provide a comprehensive language report.

Podcast Information:
- Title: {title or "Unknown"}
- Creator/Host: {creator or "Unknown"}
- Guest: {guest or "No guest"}

Transcript: {transcript}

Please provide a detailed language analysis in the following format:

**Language Analysis Report**

**1. Language Quality Assessment:**
- Overall clarity and coherence
- Grammar and syntax quality
- Vocabulary usage and complexity

**2. Communication Style:**
- Speaking pace and rhythm
- Tone and engagement level
- Use of filler words or phrases

**3. Content Structure:**
- Organization and flow
- Transition effectiveness
- Key points delivery

**4. Audience Engagement:**
- Accessibility for different audiences
- Engagement techniques used
- Potential areas for improvement

**5. Technical Language:**
- Use of jargon or technical terms
- Explanation clarity for complex concepts
- Balance between technical and accessible language

**6. Language Safety & Appropriateness:**
- Detection of any inappropriate language, profanity, or offensive content
- If no bad language is detected, explicitly state: "{LanguageCheckPrompts.SAFETY_AFFIRMATION}"
- Overall content appropriateness for different audiences

**7. Recommendations:**
- Specific suggestions for improvement
- Areas of strength to maintain
- Overall rating (1-10 scale)

IMPORTANT: Always provide a complete analysis. If no inappropriate language is found, explicitly state that no bad language was detected. Never leave any section empty."""
