"""LLM Base Classes and Shared Code"""

import re
from abc import ABC, abstractmethod
from dataclasses import dataclass

from pfcli.prompts.builder import CommitPrompt


FENCE_RE = re.compile(r'^```[\w-]*\s*$')
PREAMBLE_RE = re.compile(r'^(commit message|here is|here\'s)[^:]*:\s*$', re.IGNORECASE)


def clean_commit_message(text: str) -> str:
    """Strip code fences, preambles and wrapping quotes from an LLM reply."""
    lines = [line for line in text.strip().split('\n') if not FENCE_RE.match(line.strip())]
    while lines and (not lines[0].strip() or PREAMBLE_RE.match(lines[0].strip())):
        lines.pop(0)
    cleaned = '\n'.join(lines).strip()

    for quote in ('"', "'", '`'):
        if len(cleaned) >= 2 and cleaned.startswith(quote) and cleaned.endswith(quote):
            cleaned = cleaned[1:-1].strip()
    return cleaned


@dataclass
class LLMResponse:
    """Structured response from any LLM provider."""
    content: str
    model: str = ""
    tokens_used: int = 0


class LLMError(Exception):
    """Raised when LLM operations fail."""
    pass


class LLMClient(ABC):
    """Abstract base for LLM clients."""

    @abstractmethod
    def generate(self, prompt: CommitPrompt) -> LLMResponse:
        pass

    @property
    @abstractmethod
    def name(self) -> str:
        pass
