"""LLM Client Package"""

from pfcli.llm.base import LLMClient, LLMResponse, LLMError, clean_commit_message
from pfcli.llm.claude import ClaudeClient
from pfcli.llm.openai import OpenAIClient

PROVIDERS = {
    "openai": OpenAIClient,
    "claude": ClaudeClient,
}

# provider -> (env vars in lookup order, required key prefix, placeholder values)
CREDENTIALS = {
    "openai": (("OPENAI_API_KEY", "REACT_APP_OPENAI_API_KEY"), "sk-", {"your-openai-api-key-here"}),
    "claude": (("ANTHROPIC_API_KEY",), "sk-ant-", {"your-anthropic-api-key-here", "your-key-here"}),
}


def credential_env_names(provider: str) -> tuple[str, ...]:
    if provider not in CREDENTIALS:
        raise LLMError(f"Unknown provider: {provider}. Use 'openai' or 'claude'.")
    return CREDENTIALS[provider][0]


def resolve_api_key(provider: str, environ: dict) -> str | None:
    """Return a usable API key for provider, or None when absent or malformed.

    The first variable that is set wins, so an invalid OPENAI_API_KEY is not
    rescued by REACT_APP_OPENAI_API_KEY.
    """
    names, prefix, placeholders = CREDENTIALS.get(provider, ((), "", set()))
    key = next((environ[name] for name in names if environ.get(name)), None)
    if not key:
        return None
    key = key.strip()
    if key in placeholders or not key.startswith(prefix):
        return None
    return key


def get_client(provider: str, api_key: str, model: str | None = None) -> LLMClient:
    """Get an LLM client for 'openai' or 'claude'."""
    if provider in PROVIDERS:
        return PROVIDERS[provider](api_key=api_key, model=model)
    raise LLMError(f"Unknown provider: {provider}. Use 'openai' or 'claude'.")


__all__ = [
    "LLMClient",
    "LLMResponse",
    "LLMError",
    "OpenAIClient",
    "ClaudeClient",
    "get_client",
    "resolve_api_key",
    "credential_env_names",
    "clean_commit_message",
    "PROVIDERS",
]
