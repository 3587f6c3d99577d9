import logging

from folderscope.ai.cerebras_provider import CerebrasProvider
from folderscope.ai.gemini_provider import GeminiProvider
from folderscope.ai.groq_provider import GroqProvider
from folderscope.ai.rotation import KeyRotator
from folderscope.ai.sambanova_provider import SambaNovaProvider
from folderscope.config import (
    CEREBRAS_MODEL,
    GEMINI_MODEL,
    GROQ_MODEL,
    ROTATION_DEADLINE_SECONDS,
    ROTATION_DELAY_SECONDS,
    SAMBANOVA_MODEL,
)

logger = logging.getLogger(__name__)

PROVIDERS = {
    "gemini": GeminiProvider,
    "groq": GroqProvider,
    "cerebras": CerebrasProvider,
    "sambanova": SambaNovaProvider,
}


def get_provider_class(provider_name):
    try:
        return PROVIDERS[provider_name]
    except KeyError:
        raise ValueError(
            f"Unknown provider '{provider_name}'. "
            f"Expected one of: {', '.join(PROVIDERS)}"
        ) from None


def resolve_model(provider_name):
    if provider_name == "groq":
        return GROQ_MODEL
    if provider_name == "cerebras":
        return CEREBRAS_MODEL
    if provider_name == "sambanova":
        return SAMBANOVA_MODEL
    return GEMINI_MODEL


def build_rotator(observer=None):
    logger.debug(
        "Key rotator: deadline=%ss, delay=%ss",
        ROTATION_DEADLINE_SECONDS,
        ROTATION_DELAY_SECONDS,
    )
    return KeyRotator(
        deadline_seconds=ROTATION_DEADLINE_SECONDS,
        rotation_delay=ROTATION_DELAY_SECONDS,
        observer=observer,
    )
