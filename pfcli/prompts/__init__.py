"""LLM Prompt Package"""

from pfcli.prompts.builder import PromptBuilder, CommitPrompt, SYSTEM_PROMPT

__all__ = ["PromptBuilder", "CommitPrompt", "SYSTEM_PROMPT"]
