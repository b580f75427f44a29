"""Builds single-purpose structured-output agents for the reasoning client."""

from typing import Any

from agents import Agent, AgentOutputSchema
from agents.extensions.models.litellm_model import LitellmModel

from reel_template.common.openai_model_identifier import OpenAIModelIdentifier

# Models served through LiteLLM instead of the OpenAI API
LITELLM_MODEL_MAP: dict[OpenAIModelIdentifier, str] = {
    OpenAIModelIdentifier.GPT_OSS_120B: "ollama/gpt-oss:120b-cloud",
}


def resolve_model(model_identifier: OpenAIModelIdentifier) -> str | LitellmModel:
    """Map a model identifier to what ``Agent(model=...)`` accepts."""
    litellm_name = LITELLM_MODEL_MAP.get(model_identifier)
    if litellm_name is not None:
        return LitellmModel(model=litellm_name)
    return model_identifier.value


def create_agent(
    *,
    name: str,
    instructions: str,
    model_identifier: OpenAIModelIdentifier,
    output_type: type[Any],
    strict_schema: bool = True,
) -> Agent[Any]:
    """Create a tool-less agent that answers with one ``output_type`` value.

    Args:
        name: Agent name, shown in traces.
        instructions: System prompt for the stage.
        model_identifier: Model the agent runs on.
        output_type: Pydantic model describing the expected answer.
        strict_schema: When false, the output schema is sent non-strict so
            models with free-form ``dict`` fields are accepted.

    Returns:
        The configured agent.
    """
    return Agent(
        name=name,
        instructions=instructions,
        model=resolve_model(model_identifier),
        output_type=(
            output_type
            if strict_schema
            else AgentOutputSchema(output_type, strict_json_schema=False)
        ),
    )
