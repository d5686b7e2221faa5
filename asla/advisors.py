"""Account suggestions and management advice from a language model.

Both are advisory. Whatever goes wrong on the provider side (error,
timeout, malformed answer) ends up as ``None`` for the caller and never
touches the books.
"""

import asyncio
from typing import Any, Awaitable, Protocol, Sequence, TypeVar, runtime_checkable

import google.generativeai as genai
import simplejson as json  # type: ignore
import structlog

from .base import Side
from .chart import Account, ChartOfAccounts
from .config import Settings, get_settings
from .reports import TrialBalance

log = structlog.get_logger(__name__)

T = TypeVar("T")


@runtime_checkable
class SuggestionProvider(Protocol):
    async def suggest(
        self, description: str, side: Side, candidates: Sequence[str]
    ) -> str | None:
        """Return one of *candidates* that fits the line description."""
        ...


@runtime_checkable
class AdviceProvider(Protocol):
    async def advise(self, snapshot: list[dict]) -> str | None:
        """Return narrative text about a trial balance snapshot."""
        ...


async def ask(call: Awaitable[T], timeout: float, what: str) -> T | None:
    """Await a provider call, turning failures into None.

    Cancellation is not a failure and propagates to the caller.
    """
    try:
        return await asyncio.wait_for(call, timeout)
    except asyncio.TimeoutError:
        log.warning("provider_timeout", what=what, timeout=timeout)
    except Exception as e:
        log.warning("provider_failed", what=what, error=repr(e))
    return None


async def suggest_account(
    provider: SuggestionProvider,
    chart: ChartOfAccounts,
    description: str,
    side: Side,
    timeout: float | None = None,
) -> Account | None:
    """Account from *chart* whose name the provider picked, if any."""
    if not description.strip():
        return None
    if timeout is None:
        timeout = get_settings().provider_timeout
    name = await ask(
        provider.suggest(description, side, chart.names), timeout, "suggestion"
    )
    if not isinstance(name, str):
        return None
    account = chart.by_name(name.strip())
    if account is None:
        log.info("suggestion_not_in_chart", name=name)
    return account


async def get_advice(
    provider: AdviceProvider, tb: TrialBalance, timeout: float | None = None
) -> str | None:
    if timeout is None:
        timeout = get_settings().provider_timeout
    text = await ask(provider.advise(tb.to_dict()), timeout, "advice")
    if isinstance(text, str) and text.strip():
        return text
    return None


SUGGESTION_PROMPT = """Pick the single best ledger account for this {side} line.
Line description: "{description}"
Candidate accounts: {candidates}
Answer in JSON: {{"accountName": "<account name>"}}"""

ADVICE_PROMPT = """Analyse the trial balance of a logistics company and give
three bullet points of advice on improving the business.
Amounts are in the smallest currency unit.
Data: {data}"""

ADVISOR_ROLE = "You are a management consultant specialising in logistics."


class GeminiModel:
    """Holds a configured Gemini model. Tests may pass any object with
    an async ``generate_content_async(prompt)`` method instead."""

    def __init__(
        self,
        settings: Settings | None = None,
        model: Any = None,
        **model_kwargs,
    ):
        self.settings = settings or get_settings()
        if model is None:
            genai.configure(api_key=self.settings.gemini_api_key)
            model = genai.GenerativeModel(
                model_name=self.settings.gemini_model, **model_kwargs
            )
        self.model = model

    async def generate(self, prompt: str) -> str:
        response = await self.model.generate_content_async(prompt)
        return response.text


class GeminiSuggestionProvider(GeminiModel):
    def __init__(self, settings: Settings | None = None, model: Any = None):
        super().__init__(
            settings,
            model,
            generation_config={
                "response_mime_type": "application/json",
                "temperature": 0.1,
            },
        )

    async def suggest(
        self, description: str, side: Side, candidates: Sequence[str]
    ) -> str | None:
        prompt = SUGGESTION_PROMPT.format(
            side=side.value,
            description=description,
            candidates=", ".join(candidates),
        )
        data = json.loads(await self.generate(prompt) or "{}")
        return data.get("accountName")


class GeminiAdviceProvider(GeminiModel):
    def __init__(self, settings: Settings | None = None, model: Any = None):
        super().__init__(settings, model, system_instruction=ADVISOR_ROLE)

    async def advise(self, snapshot: list[dict]) -> str | None:
        data = json.dumps(snapshot, ensure_ascii=False)
        return await self.generate(ADVICE_PROMPT.format(data=data))
