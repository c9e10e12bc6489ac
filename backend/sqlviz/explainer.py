"""
Query Explainer — asks the model for a beginner-friendly, step-by-step
explanation of a user-supplied SQL query.
"""

import logging
from typing import Optional

from pydantic import BaseModel

from config import config
from sqlviz.formatter import format_ai_response
from sqlviz.llm_client import LLMServiceError, call_llm

logger = logging.getLogger(__name__)

EMPTY_QUERY_MESSAGE = "Please enter a SQL query."

EXPLAIN_PROMPT = """You are an expert SQL analyst. Explain the following SQL query step-by-step for a beginner.
Do not use markdown for the final output. Use bold for headings, and standard paragraphs.

Query:
```sql
{query}
```

Explanation:"""


class ExplanationResult(BaseModel):
    explanation: Optional[str] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None


def explain_query(query: str) -> ExplanationResult:
    """Explain ``query``; failures come back as user-facing text, never raised."""
    if not query or not query.strip():
        return ExplanationResult(error=EMPTY_QUERY_MESSAGE)

    try:
        explanation = call_llm(
            EXPLAIN_PROMPT.format(query=query),
            temperature=config.LLM_TEMPERATURE,
            max_tokens=config.LLM_MAX_TOKENS,
        )
    except LLMServiceError as e:
        logger.error("Explanation request failed: %s", e.message)
        return ExplanationResult(error=f"An error occurred: {e.message}")

    return ExplanationResult(explanation=explanation)


def explain_and_format(query: str) -> ExplanationResult:
    """Same as explain_query, with the explanation converted to HTML."""
    result = explain_query(query)
    if result.ok:
        result.explanation = format_ai_response(result.explanation or "")
    return result
