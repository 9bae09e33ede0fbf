"""
Configurable parameters for the agent.

The chat model defaults to the first registered model whose API keys are
present in the settings. Both models are served through ChatOpenAI: OpenAI
directly, Claude through the OpenRouter OpenAI-compatible endpoint.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Dict, List, Optional

from langchain_core.runnables import RunnableConfig
from langchain_openai import ChatOpenAI

from ..config import Settings, get_settings
from ..exceptions import ConfigurationError
from .prompts import SYSTEM_PROMPT

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ModelSpec:
    """A chat model and the settings it needs."""
    name: str
    api_key_setting: str
    env_var: str
    base_url_setting: Optional[str] = None


# Checked in order; the first model with its key present is the default
REGISTERED_MODELS: Dict[str, ModelSpec] = {
    "anthropic/claude-haiku-4.5": ModelSpec(
        name="anthropic/claude-haiku-4.5",
        api_key_setting="openrouter_api_key",
        env_var="OPENROUTER_API_KEY",
        base_url_setting="openrouter_base_url",
    ),
    "gpt-4.1-mini": ModelSpec(
        name="gpt-4.1-mini",
        api_key_setting="openai_api_key",
        env_var="OPENAI_API_KEY",
    ),
}


def available_models(settings: Optional[Settings] = None) -> List[str]:
    settings = settings or get_settings()
    return [
        name for name, spec in REGISTERED_MODELS.items()
        if getattr(settings, spec.api_key_setting)
    ]


def default_model(settings: Optional[Settings] = None) -> str:
    """Pick the model to use when the caller does not name one.

    Raises:
        ConfigurationError: If no registered model has its API key set
    """
    settings = settings or get_settings()
    if settings.llm_model:
        return settings.llm_model

    models = available_models(settings)
    if not models:
        missing = ", ".join(spec.env_var for spec in REGISTERED_MODELS.values())
        raise ConfigurationError(
            "No language model API keys found in environment variables. "
            f"Please set any of the following environment variables: {missing}",
            details={"required_any_of": [spec.env_var for spec in REGISTERED_MODELS.values()]},
        )
    return models[0]


def render_system_prompt(now: Optional[datetime] = None) -> str:
    now = now or datetime.now(timezone.utc)
    return SYSTEM_PROMPT.format(system_time=now.isoformat())


@dataclass
class Configuration:
    """The configurable fields of one agent run."""

    system_prompt: str
    model: str

    @classmethod
    def from_runnable_config(cls, config: Optional[RunnableConfig] = None) -> "Configuration":
        """Read ``configurable`` from the run config, filling in defaults."""
        configurable = (config or {}).get("configurable") or {}
        return cls(
            system_prompt=configurable.get("system_prompt") or render_system_prompt(),
            model=configurable.get("model") or default_model(),
        )


def load_chat_model(model: str, settings: Optional[Settings] = None) -> ChatOpenAI:
    """Initialize the chat model named ``model``.

    Unregistered names containing a provider prefix ("vendor/model") go
    through OpenRouter, anything else through OpenAI.
    """
    settings = settings or get_settings()
    spec = REGISTERED_MODELS.get(model)
    if spec is None:
        spec = REGISTERED_MODELS["anthropic/claude-haiku-4.5"] if "/" in model else REGISTERED_MODELS["gpt-4.1-mini"]

    api_key = getattr(settings, spec.api_key_setting)
    if not api_key:
        raise ConfigurationError(
            f"{spec.env_var} is required to use model '{model}'",
            details={"model": model, "env_var": spec.env_var},
        )

    kwargs = {}
    if spec.base_url_setting:
        kwargs["base_url"] = getattr(settings, spec.base_url_setting)

    logger.info(f"Loading chat model: {model}")
    return ChatOpenAI(
        model=model,
        api_key=api_key,
        temperature=settings.llm_temperature,
        **kwargs,
    )
