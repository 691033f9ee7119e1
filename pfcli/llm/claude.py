"""Claude (Anthropic) LLM Client"""

from pfcli.llm.base import LLMClient, LLMResponse, LLMError, clean_commit_message
from pfcli.prompts.builder import CommitPrompt


class ClaudeClient(LLMClient):
    """Claude API client. Needs a validated ANTHROPIC_API_KEY."""

    DEFAULT_MODEL = "claude-sonnet-4-20250514"
    MAX_TOKENS = 100
    TEMPERATURE = 0.7

    def __init__(self, api_key: str, model: str | None = None):
        if not api_key:
            raise LLMError(
                "No API key found. Set ANTHROPIC_API_KEY environment variable:\n"
                "  export ANTHROPIC_API_KEY='sk-ant-your-key'"
            )
        self.model = model or self.DEFAULT_MODEL

        try:
            from anthropic import Anthropic
            self._client = Anthropic(api_key=api_key)
        except ImportError:
            raise LLMError(
                "Anthropic SDK not installed. Run:\n"
                "  pip install anthropic"
            )

    @property
    def name(self) -> str:
        return f"Claude ({self.model})"

    def generate(self, prompt: CommitPrompt) -> LLMResponse:
        from anthropic import APIError, AuthenticationError

        try:
            response = self._client.messages.create(
                model=self.model,
                max_tokens=self.MAX_TOKENS,
                temperature=self.TEMPERATURE,
                system=prompt.system,
                messages=[{"role": "user", "content": prompt.user}]
            )
        except AuthenticationError:
            raise LLMError("Invalid API key. Check your ANTHROPIC_API_KEY.")
        except APIError as e:
            raise LLMError(f"Claude API error: {e.message}")

        content = ""
        for block in response.content:
            if block.type == "text":
                content = clean_commit_message(block.text)
                break
        if not content:
            raise LLMError("Claude returned an empty commit message")

        return LLMResponse(
            content=content,
            model=self.model,
            tokens_used=response.usage.input_tokens + response.usage.output_tokens
        )
