"""Prompt Builder - Turn git status and diff into a chat request."""

from dataclasses import dataclass


SYSTEM_PROMPT = """You are a professional, slightly witty git commit message assistant. Based on the git diff provided, write one concise, accurate commit message with a touch of humor.

Requirements:
1. Write in English
2. Keep it under 50 characters
3. Describe the change accurately
4. Humor is welcome, but stay professional
5. Start with a fitting emoji
6. Format: <emoji> <type>: <summary>

Examples:
- 🐛 fix: null pointer on user login
- ✨ feat: AI generated commit messages
- 🎨 refactor: restructure user service
- 📝 docs: flesh out the README
- 🔧 chore: add lint rule configuration

Reply with the commit message only."""


@dataclass
class CommitPrompt:
    """System and user messages for a single chat completion."""
    system: str
    user: str
    truncated: bool = False


class PromptBuilder:
    """Builds the commit message request from staged changes."""

    DEFAULT_MAX_DIFF_CHARS = 3000

    def __init__(self, max_diff_chars: int = DEFAULT_MAX_DIFF_CHARS):
        self.max_diff_chars = max_diff_chars

    def truncate_diff(self, diff: str) -> tuple[str, bool]:
        """Keep a bounded prefix of the diff to respect request size limits."""
        if len(diff) <= self.max_diff_chars:
            return diff, False
        return diff[:self.max_diff_chars], True

    def build(self, status: str, diff: str) -> CommitPrompt:
        diff_text, truncated = self.truncate_diff(diff)
        note = "\n\n(diff truncated due to size)" if truncated else ""
        user = f"""Write a commit message for the following git changes:

Git Status:
{status.rstrip()}

Git Diff:
{diff_text}{note}"""
        return CommitPrompt(system=SYSTEM_PROMPT, user=user, truncated=truncated)
