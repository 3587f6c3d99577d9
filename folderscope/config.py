import os

from dotenv import load_dotenv

from folderscope.ai.credentials import resolve_credentials

load_dotenv()

# Upstream provider
ANALYZER_PROVIDER = os.getenv("ANALYZER_PROVIDER", "gemini").strip().lower()

# Model Configuration
GEMINI_MODEL = os.getenv("GEMINI_MODEL", "gemini-2.5-pro")
GROQ_MODEL = os.getenv("GROQ_MODEL", "llama-3.3-70b-versatile")
CEREBRAS_MODEL = os.getenv("CEREBRAS_MODEL", "llama-3.3-70b")
SAMBANOVA_MODEL = os.getenv("SAMBANOVA_MODEL", "Meta-Llama-3.3-70B-Instruct")

# Key rotation
ROTATION_DEADLINE_SECONDS = float(os.getenv("ROTATION_DEADLINE_SECONDS", "240"))
ROTATION_DELAY_SECONDS = float(os.getenv("ROTATION_DELAY_SECONDS", "1.0"))

# Folder reading limits
MAX_FILE_CHARS = int(os.getenv("MAX_FILE_CHARS", "100000"))
MAX_CONTEXT_CHARS = int(os.getenv("MAX_CONTEXT_CHARS", "2000000"))

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()


def api_key_env_names(provider):
    prefix = provider.upper()
    names = [f"{prefix}_API_KEYS", f"{prefix}_API_KEY"]
    if provider == "gemini":
        names.append("geminiApiKey")
    return names


def load_api_keys(provider=None):
    """Read the key pool for ``provider`` from the environment at call time."""
    provider = provider or ANALYZER_PROVIDER
    for name in api_key_env_names(provider):
        keys = resolve_credentials(os.getenv(name))
        if keys:
            return keys
    return []
