"""
Best-effort draw parsing through the Gemini API (``google-genai`` SDK).

The deterministic parser in :mod:`lotofacil.parse` is always authoritative.
``resolve_official_draws`` only consults a fallback when the local parse came
back empty or the pasted text is large, and any failure there is logged and
ignored.

Set ``GEMINI_API_KEY`` (or ``API_KEY``) for credentials and
``LOTOFACIL_AI_MODEL`` to override the model.
"""

from __future__ import annotations

import json
import logging
import os
from typing import Any, Callable, List, Optional, Sequence

import httpx
from google import genai
from google.genai import errors, types

from .parse import parse_official_draws
from .schema import NUMBER_MAX, NUMBER_MIN, NUMBERS_PER_GAME, UNKNOWN_CONTEST, OfficialDraw, UserTicket

logger = logging.getLogger(__name__)

DEFAULT_MODEL = "gemini-3-flash-preview"
SMART_PARSE_THRESHOLD = 500
_ANALYZE_SAMPLE = 50

DrawParser = Callable[[str], Sequence[OfficialDraw]]

_DRAWS_PROMPT = """Parse the following Lotofácil draw results.
The primary format is: {{concurso}} ({{date}}) {{numbers}}
Example: 0001 (29/09/2003) 02 03 05 06 09 10 11 13 14 16 18 20 23 24 25

Rules:
- Extract 'concurso' number (usually 4 digits).
- Extract 'data' from between parentheses.
- Extract exactly 15 'numeros' (values between 1-25).
- If the format varies slightly, use your reasoning to map it correctly.

Text to parse:
{text}"""

_ANALYZE_PROMPT = """Analyze these Lotofácil games and provide a brief professional summary about balance (odds/evens, sums, quadrants). Suggest if the set is well-distributed. Limit to 100 words.
Games:
{games}"""

_DRAWS_SCHEMA = types.Schema(
    type=types.Type.ARRAY,
    items=types.Schema(
        type=types.Type.OBJECT,
        properties={
            "concurso": types.Schema(type=types.Type.STRING),
            "data": types.Schema(type=types.Type.STRING),
            "numeros": types.Schema(
                type=types.Type.ARRAY,
                items=types.Schema(type=types.Type.INTEGER),
                description="Array of exactly 15 numbers",
            ),
        },
        required=["concurso", "numeros"],
    ),
)


class SmartParseError(RuntimeError):
    """Raised when the AI service is unreachable or answers with something unusable."""


def _draw_from_item(item: Any) -> Optional[OfficialDraw]:
    if not isinstance(item, dict):
        return None
    raw_numbers = item.get("numeros")
    if not isinstance(raw_numbers, list):
        return None
    try:
        numbers = tuple(int(n) for n in raw_numbers)
    except (TypeError, ValueError):
        return None
    if len(numbers) != NUMBERS_PER_GAME:
        return None
    if not all(NUMBER_MIN <= n <= NUMBER_MAX for n in numbers):
        return None
    contest = str(item.get("concurso") or UNKNOWN_CONTEST).strip() or UNKNOWN_CONTEST
    return OfficialDraw(contest_id=contest, draw_date=str(item.get("data") or ""), numbers=numbers)


class GeminiClient:
    """Wrapper around ``client.models.generate_content`` for draw parsing and ticket summaries."""

    def __init__(
        self,
        api_key: str | None = None,
        model: str | None = None,
        *,
        client: Optional[genai.Client] = None,
        timeout: float = 30,
    ):
        self.api_key = api_key or os.environ.get("GEMINI_API_KEY") or os.environ.get("API_KEY")
        self.model = model or os.environ.get("LOTOFACIL_AI_MODEL") or DEFAULT_MODEL
        self.timeout = timeout
        self._client = client

    @property
    def client(self) -> genai.Client:
        if self._client is None:
            if not self.api_key:
                raise SmartParseError("No API key configured (set GEMINI_API_KEY)")
            self._client = genai.Client(
                api_key=self.api_key,
                http_options=types.HttpOptions(timeout=int(self.timeout * 1000)),
            )
        return self._client

    def _generate(self, prompt: str, config: Optional[types.GenerateContentConfig] = None) -> str:
        try:
            response = self.client.models.generate_content(
                model=self.model, contents=prompt, config=config
            )
        except (errors.APIError, httpx.HTTPError) as exc:
            raise SmartParseError(f"Gemini request failed: {exc}") from exc
        return response.text or ""

    def parse_official_draws(self, text: str) -> List[OfficialDraw]:
        """Ask the model to extract draws; items without 15 valid numbers are dropped."""

        reply = self._generate(
            _DRAWS_PROMPT.format(text=text),
            types.GenerateContentConfig(
                response_mime_type="application/json", response_schema=_DRAWS_SCHEMA
            ),
        )
        if not reply.strip():
            return []
        try:
            items = json.loads(reply)
        except json.JSONDecodeError as exc:
            raise SmartParseError(f"Failed to decode AI draw list: {exc}") from exc
        if not isinstance(items, list):
            raise SmartParseError("AI draw list is not a JSON array")

        draws = [draw for draw in (_draw_from_item(item) for item in items) if draw is not None]
        if len(draws) < len(items):
            logger.info("Dropped %d malformed AI draw records", len(items) - len(draws))
        return draws

    def analyze_tickets(self, tickets: Sequence[UserTicket]) -> str:
        summarized = "\n".join(
            ",".join(str(n) for n in ticket.numbers) for ticket in tickets[:_ANALYZE_SAMPLE]
        )
        return self._generate(_ANALYZE_PROMPT.format(games=summarized)).strip()


def resolve_official_draws(
    text: str,
    fallback: Optional[DrawParser] = None,
    *,
    threshold: int = SMART_PARSE_THRESHOLD,
) -> List[OfficialDraw]:
    """
    Parse draws locally, then let ``fallback`` replace the result when it helps.

    The fallback runs only if the local parse is empty or ``text`` is longer
    than ``threshold`` characters. A non-empty fallback answer wins; an empty
    answer or an exception leaves the local parse in place.
    """

    if not text.strip():
        return []

    local = parse_official_draws(text)
    if fallback is None or (local and len(text) <= threshold):
        return local

    try:
        smart = list(fallback(text))
    except Exception as exc:
        logger.warning("AI draw parsing failed, keeping %d locally parsed draws: %s", len(local), exc)
        return local

    if smart:
        logger.info("Using %d AI-parsed draws instead of %d local ones", len(smart), len(local))
        return smart
    return local


__all__ = [
    "DEFAULT_MODEL",
    "SMART_PARSE_THRESHOLD",
    "GeminiClient",
    "SmartParseError",
    "resolve_official_draws",
]
