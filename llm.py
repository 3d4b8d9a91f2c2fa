# Gemini integration: journal prompts and sentiment labels, with local fallback.
import asyncio
import logging
import random
from dataclasses import dataclass, field
from typing import Optional, Sequence, Union

import httpx

import sentiment
from config import settings

logger = logging.getLogger("ClearMind.LLM")

PROMPT_TIMEOUT_S = 10.0
SENTIMENT_TIMEOUT_S = 8.0
PROMPT_TEMPERATURE = 0.7
PROMPT_MAX_TOKENS = 100
SENTIMENT_TEMPERATURE = 0.1
SENTIMENT_MAX_TOKENS = 10
CONTEXT_ENTRIES = 2
FIRST_ENTRY_CONTEXT = "This is their first entry."

MIN_MOOD, MAX_MOOD, NEUTRAL_MOOD = 1, 5, 3
MOOD_DESCRIPTIONS = {
    1: "very low/difficult",
    2: "low/challenging",
    3: "neutral/okay",
    4: "good/positive",
    5: "excellent/amazing",
}

FALLBACK_PROMPTS = [
    "What's one thing that happened today that you'd like to explore more deeply?",
    "How did you take care of yourself today, and what made you feel good?",
    "What emotions came up for you today, and what might have triggered them?",
    "If you could tell your past self from this morning one thing, what would it be?",
    "What's something you're grateful for today, even if it was a small moment?",
    "What challenged you today, and how did you handle it?",
    "What would you like to let go of from today before tomorrow begins?",
    "How did you connect with others today, or how would you like to connect tomorrow?",
    "What did you learn about yourself today?",
    "What's one thing you're looking forward to, no matter how small?",
]


@dataclass(frozen=True)
class Online:
    api_key: str = field(repr=False)


@dataclass(frozen=True)
class Offline:
    pass


AIMode = Union[Online, Offline]


@dataclass(frozen=True)
class Generation:
    """Outcome of one call. ``degraded`` means ``text`` is the local default."""

    text: str
    degraded: bool = False
    reason: Optional[str] = None


class GenerationError(Exception):
    def __init__(self, reason: str, detail: str = ""):
        super().__init__(f"{reason}: {detail}" if detail else reason)
        self.reason = reason
        self.detail = detail


def resolve_mode(api_key: Optional[str] = None) -> AIMode:
    key = (settings.GEMINI_API_KEY if api_key is None else api_key) or ""
    return Online(key.strip()) if key.strip() else Offline()


# Out-of-range levels clamp to 1..5; unparseable ones use neutral.
def clamp_mood(mood) -> int:
    try:
        level = int(mood)
    except (TypeError, ValueError):
        logger.warning("Mood level %r is not a number; using %d", mood, NEUTRAL_MOOD)
        return NEUTRAL_MOOD
    clamped = min(max(level, MIN_MOOD), MAX_MOOD)
    if clamped != level:
        logger.warning("Mood level %d out of range; clamped to %d", level, clamped)
    return clamped


def mood_phrase(mood) -> str:
    return MOOD_DESCRIPTIONS[clamp_mood(mood)]


def context_snippet(recent_texts: Optional[Sequence[str]]) -> str:
    recent = list(recent_texts or [])[-CONTEXT_ENTRIES:]
    return ". ".join(recent) or FIRST_ENTRY_CONTEXT


def build_prompt_instruction(mood, recent_texts: Optional[Sequence[str]] = None) -> str:
    return f"""As a supportive mental health assistant for teenagers, generate a thoughtful, gentle journal prompt for someone feeling {mood_phrase(mood)} today.

Guidelines:
- Keep it warm, understanding, and non-judgmental
- Make it specific enough to inspire reflection but open enough for personal interpretation
- Use language that feels natural for teenagers
- Focus on growth, self-compassion, and emotional awareness
- Avoid clinical language or overly formal tone
- Keep it to 1-2 sentences maximum

Previous context: {context_snippet(recent_texts)}

Generate only the journal prompt, nothing else."""


def build_sentiment_instruction(text: str) -> str:
    return f"""Analyze the emotional sentiment of this journal entry from a teenager. Respond with only one word: "positive", "neutral", or "negative".

Text: "{text}\""""


def build_request_body(instruction: str, temperature: float, max_tokens: int) -> dict:
    return {
        "contents": [{"parts": [{"text": instruction}]}],
        "generationConfig": {"temperature": temperature, "maxOutputTokens": max_tokens},
    }


def extract_text(data) -> str:
    try:
        text = data["candidates"][0]["content"]["parts"][0]["text"]
    except (KeyError, IndexError, TypeError):
        raise GenerationError("malformed", "no candidates[0].content.parts[0].text")
    if not isinstance(text, str):
        raise GenerationError("malformed", f"text is {type(text).__name__}")
    return text


class TextGenerator:
    """Best-effort Gemini calls over an always-available local default.

    One request per call, no retries. Each call runs under its own deadline
    and any failure resolves to the fallback value.
    """

    def __init__(
        self,
        mode: AIMode,
        *,
        url: Optional[str] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        prompt_timeout: float = PROMPT_TIMEOUT_S,
        sentiment_timeout: float = SENTIMENT_TIMEOUT_S,
        rng: Optional[random.Random] = None,
    ):
        self.mode = mode
        self.url = url or settings.gemini_url
        self.prompt_timeout = prompt_timeout
        self.sentiment_timeout = sentiment_timeout
        self._transport = transport
        self._rng = rng or random.Random()

    @property
    def online(self) -> bool:
        return isinstance(self.mode, Online)

    def fallback_prompt(self) -> str:
        return self._rng.choice(FALLBACK_PROMPTS)

    async def _post(self, body: dict, timeout: float) -> httpx.Response:
        async with httpx.AsyncClient(transport=self._transport, timeout=httpx.Timeout(timeout)) as client:
            return await client.post(self.url, params={"key": self.mode.api_key}, json=body)

    async def _generate(self, instruction: str, temperature: float, max_tokens: int, timeout: float) -> str:
        body = build_request_body(instruction, temperature, max_tokens)
        try:
            response = await asyncio.wait_for(self._post(body, timeout), timeout)
        except (asyncio.TimeoutError, httpx.TimeoutException):
            raise GenerationError("timeout", f"no response within {timeout:g}s")
        except httpx.HTTPError as e:
            # the request URL carries the key; log the error type only
            raise GenerationError("transport", type(e).__name__)
        if not response.is_success:
            raise GenerationError("status", f"HTTP {response.status_code}")
        try:
            data = response.json()
        except ValueError:
            raise GenerationError("malformed", "response is not JSON")
        return extract_text(data)

    def _degraded(self, text: str, reason: str, what: str, detail: str = "") -> Generation:
        if reason == "offline":
            logger.debug("Gemini API key not configured; using fallback %s", what)
        else:
            logger.warning("Gemini %s failed (%s%s); using fallback", what, reason, f": {detail}" if detail else "")
        return Generation(text, degraded=True, reason=reason)

    async def prompt_result(self, mood, recent_texts: Optional[Sequence[str]] = None) -> Generation:
        if not self.online:
            return self._degraded(self.fallback_prompt(), "offline", "prompt")
        try:
            raw = await self._generate(
                build_prompt_instruction(mood, recent_texts),
                PROMPT_TEMPERATURE, PROMPT_MAX_TOKENS, self.prompt_timeout,
            )
            text = raw.strip()
            if not text:
                raise GenerationError("empty", "blank prompt text")
            return Generation(text)
        except GenerationError as e:
            return self._degraded(self.fallback_prompt(), e.reason, "prompt", e.detail)
        except Exception:
            logger.exception("Unexpected error generating journal prompt")
            return Generation(self.fallback_prompt(), degraded=True, reason="unexpected")

    async def sentiment_result(self, text: str) -> Generation:
        if not self.online:
            return self._degraded(sentiment.DEFAULT_SENTIMENT, "offline", "sentiment")
        try:
            raw = await self._generate(
                build_sentiment_instruction(text),
                SENTIMENT_TEMPERATURE, SENTIMENT_MAX_TOKENS, self.sentiment_timeout,
            )
            label = sentiment.parse_label(raw)
            if label is None:
                raise GenerationError("invalid_label", repr(raw[:40]))
            return Generation(label)
        except GenerationError as e:
            return self._degraded(sentiment.DEFAULT_SENTIMENT, e.reason, "sentiment", e.detail)
        except Exception:
            logger.exception("Unexpected error classifying sentiment")
            return Generation(sentiment.DEFAULT_SENTIMENT, degraded=True, reason="unexpected")

    async def generate_prompt(self, mood, recent_texts: Optional[Sequence[str]] = None) -> str:
        return (await self.prompt_result(mood, recent_texts)).text

    async def classify_sentiment(self, text: str) -> str:
        return (await self.sentiment_result(text)).text


_generator: Optional[TextGenerator] = None


# Mode is resolved on first use and kept for the life of the process.
def get_generator() -> TextGenerator:
    global _generator
    if _generator is None:
        _generator = TextGenerator(resolve_mode())
        logger.info("Text generation mode: %s", "online" if _generator.online else "offline")
    return _generator


def is_online() -> bool:
    return get_generator().online


async def generate_prompt(mood, recent_texts: Optional[Sequence[str]] = None) -> str:
    return await get_generator().generate_prompt(mood, recent_texts)


async def classify_sentiment(text: str) -> str:
    return await get_generator().classify_sentiment(text)
