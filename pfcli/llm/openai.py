"""OpenAI Chat Completions Client"""

from pfcli.llm.base import LLMClient, LLMResponse, LLMError, clean_commit_message
from pfcli.prompts.builder import CommitPrompt


class OpenAIClient(LLMClient):
    """OpenAI chat completions client. Needs a validated API key."""

    DEFAULT_MODEL = "gpt-3.5-turbo"
    MAX_TOKENS = 100
    TEMPERATURE = 0.7

    def __init__(self, api_key: str, model: str | None = None):
        if not api_key:
            raise LLMError(
                "No OpenAI API key found. Set OPENAI_API_KEY environment variable:\n"
                "  export OPENAI_API_KEY='sk-your-real-key'"
            )
        self.model = model or self.DEFAULT_MODEL

        try:
            from openai import OpenAI
            self._client = OpenAI(api_key=api_key)
        except ImportError:
            raise LLMError(
                "OpenAI SDK not installed. Run:\n"
                "  pip install openai"
            )

    @property
    def name(self) -> str:
        return f"OpenAI ({self.model})"

    def generate(self, prompt: CommitPrompt) -> LLMResponse:
        from openai import APIError, AuthenticationError, RateLimitError

        try:
            response = self._client.chat.completions.create(
                model=self.model,
                messages=[
                    {"role": "system", "content": prompt.system},
                    {"role": "user", "content": prompt.user},
                ],
                max_tokens=self.MAX_TOKENS,
                temperature=self.TEMPERATURE,
            )
        except AuthenticationError:
            raise LLMError("OpenAI API key is invalid, check OPENAI_API_KEY")
        except RateLimitError as e:
            if getattr(e, 'code', None) == 'insufficient_quota':
                raise LLMError("OpenAI API quota exhausted, check your account balance")
            raise LLMError(f"OpenAI rate limit reached: {e.message}")
        except APIError as e:
            if getattr(e, 'code', None) == 'invalid_api_key':
                raise LLMError("OpenAI API key is invalid, check OPENAI_API_KEY")
            raise LLMError(f"AI service temporarily unavailable: {e.message}")

        content = ""
        if response.choices:
            content = clean_commit_message(response.choices[0].message.content or "")
        if not content:
            raise LLMError("OpenAI returned an empty commit message")

        return LLMResponse(
            content=content,
            model=self.model,
            tokens_used=response.usage.total_tokens if response.usage else 0
        )
