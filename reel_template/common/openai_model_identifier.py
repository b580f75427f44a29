"""OpenAI model identifiers."""

from enum import StrEnum


class OpenAIModelIdentifier(StrEnum):
    """Supported OpenAI model identifiers."""

    GPT_4O = "gpt-4o"
    GPT_4O_MINI = "gpt-4o-mini"
    GPT_OSS_120B = "gpt-oss-120b"
