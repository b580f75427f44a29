"""Thin adapter over the natural-language reasoning service.

Every call returns a value already validated against the caller's response
schema, or raises ``ReasoningError``. Callers are expected to catch the error
and substitute their own documented fallback; the client never retries.
"""

import asyncio
import hashlib
import logging
from typing import TypeVar

from agents import Runner
from pydantic import BaseModel

from reel_template.common.openai_model_identifier import OpenAIModelIdentifier
from reel_template.reasoning.agent_factory import create_agent

logger = logging.getLogger(__name__)

ResponseT = TypeVar("ResponseT", bound=BaseModel)

DEFAULT_REASONING_TIMEOUT_SECONDS = 30.0


class ReasoningError(Exception):
    """Transport, timeout or schema failure at the reasoning boundary."""

    def __init__(self, cause: BaseException) -> None:
        super().__init__(f"Reasoning call failed: {type(cause).__name__}: {cause}")
        self.cause = cause


class ReasoningClient:
    """Runs one structured prompt against the reasoning service per call."""

    def __init__(
        self,
        model_identifier: OpenAIModelIdentifier,
        timeout_seconds: float = DEFAULT_REASONING_TIMEOUT_SECONDS,
        cache_enabled: bool = False,
    ) -> None:
        """Initialize the reasoning client.

        Args:
            model_identifier: The model every call is routed to.
            timeout_seconds: Upper bound for a single call.
            cache_enabled: Memoise successful responses by prompt hash.
        """
        self._model_identifier = model_identifier
        self._timeout_seconds = timeout_seconds
        self._cache: dict[str, BaseModel] | None = {} if cache_enabled else None

    async def ask(
        self,
        system_prompt: str,
        user_prompt: str,
        output_type: type[ResponseT],
        *,
        strict_schema: bool = True,
        name: str = "ReasoningAgent",
    ) -> ResponseT:
        """Ask the reasoning service for a response matching ``output_type``.

        Args:
            system_prompt: Instructions describing the agent's role.
            user_prompt: The stage-specific request.
            output_type: Pydantic model the response must validate against.
            strict_schema: Use a strict JSON schema for structured output.
                Disable for schemas carrying free-form payloads.
            name: Agent name, used in traces.

        Returns:
            The validated response.

        Raises:
            ReasoningError: On any transport, timeout or validation failure.
        """
        cache_key: str | None = None
        if self._cache is not None:
            cache_key = _prompt_hash(output_type, system_prompt, user_prompt)
            cached = self._cache.get(cache_key)
            if cached is not None:
                logger.debug("Reasoning cache hit for %s (%s)", name, cache_key[:12])
                return cached  # type: ignore[return-value]

        agent = create_agent(
            name=name,
            instructions=system_prompt,
            model_identifier=self._model_identifier,
            output_type=output_type,
            strict_schema=strict_schema,
        )

        try:
            result = await asyncio.wait_for(
                Runner.run(agent, user_prompt),
                timeout=self._timeout_seconds,
            )
            response = _parse_output(result.final_output, output_type)
        except Exception as e:
            logger.warning("%s call failed: %s: %s", name, type(e).__name__, e)
            raise ReasoningError(e) from e

        if self._cache is not None and cache_key is not None:
            self._cache[cache_key] = response
        return response


def _parse_output(output: object, output_type: type[ResponseT]) -> ResponseT:
    """Validate the agent's final output against the response schema."""
    if isinstance(output, output_type):
        return output
    if output is None:
        msg = "Reasoning service returned no output"
        raise ValueError(msg)
    if isinstance(output, str | bytes):
        return output_type.model_validate_json(output)
    return output_type.model_validate(output)


def _prompt_hash(output_type: type[BaseModel], system_prompt: str, user_prompt: str) -> str:
    digest = hashlib.sha256()
    for part in (output_type.__qualname__, system_prompt, user_prompt):
        digest.update(part.encode("utf-8"))
        digest.update(b"\x00")
    return digest.hexdigest()
