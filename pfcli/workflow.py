"""Git Workflow - stage, AI commit message, commit, pull, push.

Each step finishes before the next one starts. Recoverable conditions
(clean tree, no remote, no upstream, AI unavailable) are handled in place;
anything else raises a GitError subclass for the CLI to report.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional

from pfcli.cli.utils import edit_message, not_empty
from pfcli.context import ExecutionContext
from pfcli.errors import GitError, MergeConflictError, PromptAborted
from pfcli.git import FileStatus, GitRepository
from pfcli.llm import LLMClient, LLMError, credential_env_names, get_client, resolve_api_key
from pfcli.output import (
    Spinner, bold, colorize_status, dim, error, info, print_error, success, warning,
)
from pfcli.prompts import PromptBuilder

CONFLICT_MARKERS = ('CONFLICT', 'conflict')
NO_UPSTREAM_MARKER = 'no upstream branch'

STATUS_ICONS = {
    'Modified': '📝',
    'Added': '➕',
    'Deleted': '🗑️',
    'Renamed': '🔀',
    'Untracked': '❓',
}


class Outcome(Enum):
    COMMITTED = "committed"
    NOTHING_TO_COMMIT = "nothing_to_commit"
    CANCELLED = "cancelled"


@dataclass
class WorkflowResult:
    outcome: Outcome
    message: str = ""


class StageChoice:
    ALL = "all"
    TRACKED = "updated"
    SELECTED = "selective"
    CANCEL = "cancel"


class MessageChoice:
    ACCEPT = "accept"
    EDIT = "edit"
    REPLACE = "replace"


def _format_change(change: FileStatus) -> str:
    icon = STATUS_ICONS.get(change.label, '📄')
    return f"{icon} {colorize_status(change.label)} {change.display_path}"


class GitWorkflow:
    """Runs the full git add / commit / pull / push sequence."""

    def __init__(
        self,
        ctx: ExecutionContext,
        repo: Optional[GitRepository] = None,
        client_factory: Callable[..., LLMClient] = get_client,
        editor: Callable[[str], Optional[str]] = edit_message,
    ):
        self.ctx = ctx
        self.repo = repo or GitRepository(ctx.runner)
        self.client_factory = client_factory
        self.editor = editor
        self.prompter = ctx.prompter
        self.remote = ctx.config.remote

    def run(self) -> WorkflowResult:
        print(info("🤖 AI Git workflow assistant\n"))
        self.repo.verify()

        try:
            outcome = self.stage()
            if outcome is not None:
                return WorkflowResult(outcome)
            message = self.compose_message()
        except PromptAborted:
            print(warning("🚫 Cancelled by user"))
            return WorkflowResult(Outcome.CANCELLED)

        self.commit(message)
        self.pull()
        self.push()

        print(success("\n🎉 Git workflow complete!"))
        print(dim(f"📋 Final commit: {message}"))
        return WorkflowResult(Outcome.COMMITTED, message)

    # -- Stage -------------------------------------------------------------

    def stage(self) -> Optional[Outcome]:
        """Stage the operator's choice of files.

        Returns an Outcome when the run ends here, None to continue.
        """
        with Spinner("Checking file status...") as spinner:
            changes = self.repo.status()
        if not changes:
            spinner.info(warning("No changes detected"))
            print(dim("  The working tree has nothing to commit"))
            return Outcome.NOTHING_TO_COMMIT
        spinner.succeed(success("Changes detected"))

        print(info("\n📁 Changed files:"))
        for change in changes:
            print(f"  {_format_change(change)}")
        print()

        choice = self.prompter.select("📦 Which files should be staged?", [
            ("🌍 Everything (git add .)", StageChoice.ALL),
            ("📝 Tracked modifications only (git add -u)", StageChoice.TRACKED),
            ("🎯 Pick files", StageChoice.SELECTED),
            ("🚫 Cancel", StageChoice.CANCEL),
        ])

        if choice == StageChoice.CANCEL:
            print(warning("🚫 Operation cancelled"))
            return Outcome.CANCELLED

        paths = []
        if choice == StageChoice.SELECTED:
            paths = self.prompter.checkbox(
                "Select files to stage:",
                [(_format_change(c), c.stage_path) for c in changes],
                validate=lambda picked: None if picked else "Select at least one file",
            )

        with Spinner("Staging files...") as spinner:
            try:
                if choice == StageChoice.ALL:
                    self.repo.add_all()
                elif choice == StageChoice.TRACKED:
                    self.repo.add_tracked()
                else:
                    self.repo.add_paths(paths)
            except GitError:
                spinner.fail(error("Staging files failed"))
                raise
            spinner.succeed(success("Files staged"))
        self.ctx.debug(f"staged with choice={choice} paths={paths}")
        return None

    # -- Commit message ----------------------------------------------------

    def compose_message(self) -> str:
        diff = self.repo.staged_diff()
        if not diff.strip():
            print(warning("⚠️  Nothing is staged"))
            raise GitError("No staged changes to commit")
        status = self.repo.status_text()

        provider = self.ctx.config.provider
        api_key = resolve_api_key(provider, self.ctx.environ)
        if api_key is None:
            env_name = credential_env_names(provider)[0]
            print_error(f"{provider} API key is missing or invalid")
            print(dim(f"  🔑 Set {env_name}, e.g. export {env_name}=\"sk-your-real-key\""))
            return self._manual_message()

        prompt = PromptBuilder(self.ctx.config.max_diff_chars).build(status, diff)
        if prompt.truncated:
            self.ctx.debug(f"diff truncated to {self.ctx.config.max_diff_chars} chars")

        with Spinner("🧠 AI is analyzing your changes...") as spinner:
            try:
                client = self.client_factory(provider, api_key, self.ctx.config.model)
                response = client.generate(prompt)
            except LLMError as e:
                spinner.fail(error("Could not generate a commit message"))
                print_error(str(e))
                return self._manual_message()
            except Exception as e:
                # SDK or transport errors the clients do not map
                spinner.fail(error("Could not generate a commit message"))
                print_error(f"AI request failed: {e}")
                self.ctx.debug(f"{type(e).__name__}: {e}")
                return self._manual_message()
            spinner.succeed(success(f"Commit message drafted by {client.name}"))
        self.ctx.debug(f"tokens used: {response.tokens_used}")

        return self._review_suggestion(response.content)

    def _review_suggestion(self, suggestion: str) -> str:
        print(info("\n🤖 Suggested commit message:"))
        print(bold(f"  {suggestion}\n"))

        choice = self.prompter.select("Use this commit message?", [
            ("✅ Yes, commit with it", MessageChoice.ACCEPT),
            ("✏️  Edit it in $EDITOR", MessageChoice.EDIT),
            ("📝 Write a different one", MessageChoice.REPLACE),
        ])
        if choice == MessageChoice.ACCEPT:
            return suggestion
        if choice == MessageChoice.EDIT:
            edited = self.editor(suggestion)
            if edited:
                return edited
            print(warning("Editor returned nothing, enter the message here instead"))
        return self.prompter.text("Commit message:", default=suggestion, validate=not_empty).strip()

    def _manual_message(self) -> str:
        print(info("\n📝 Falling back to manual entry:"))
        return self.prompter.text("Commit message:", validate=not_empty).strip()

    # -- Commit / pull / push ----------------------------------------------

    def commit(self, message: str) -> None:
        with Spinner("💾 Committing changes...") as spinner:
            try:
                self.repo.commit(message)
            except GitError:
                spinner.fail(error("Commit failed"))
                raise
            spinner.succeed(success("Committed"))
        print(dim(f"  📋 {message}"))

    def _pick_remote(self, remotes: list[str]) -> str:
        """Configured remote when present, else the first one git lists."""
        return self.remote if self.remote in remotes else remotes[0]

    def pull(self) -> None:
        with Spinner("📥 Pulling remote updates...") as spinner:
            self._pull(spinner)

    def _pull(self, spinner: Spinner) -> None:
        remotes = self.repo.remotes()
        if not remotes:
            spinner.info(warning("No remote configured, skipping pull"))
            return
        self.remote = self._pick_remote(remotes)

        branch = self.repo.current_branch()
        if not branch:
            spinner.info(warning("Current branch unknown, skipping pull"))
            return

        if not self.repo.remote_branch_exists(self.remote, branch):
            spinner.info(warning(f"Branch {branch} does not exist on {self.remote} yet, skipping pull"))
            return

        result = self.repo.pull(self.remote, branch)
        if not result.ok:
            spinner.fail(error("Pull failed"))
            conflicts = self.repo.conflicted_files()
            if conflicts or any(marker in result.output for marker in CONFLICT_MARKERS):
                print(error("💥 Merge conflicts detected"))
                for path in conflicts:
                    print(f"  {warning(path)}")
                print(warning("📝 Resolve the conflicts, then run: git add . && git commit"))
                raise MergeConflictError("Merge conflicts need manual resolution", files=conflicts)
            raise GitError(f"Git pull failed: {result.output.strip()}")

        if 'Already up to date' in result.stdout:
            spinner.succeed(success("Already up to date"))
        else:
            spinner.succeed(success("Pulled remote updates"))
            print(dim(result.stdout.strip()))

    def push(self) -> None:
        with Spinner("📤 Pushing to remote...") as spinner:
            self._push(spinner)

    def _push(self, spinner: Spinner) -> None:
        remotes = self.repo.remotes()
        if not remotes:
            spinner.info(warning("No remote configured, skipping push"))
            return
        self.remote = self._pick_remote(remotes)

        branch = self.repo.current_branch()
        if not branch:
            spinner.fail(error("Current branch unknown"))
            raise GitError("Could not determine the current branch")

        result = self.repo.push(self.remote, branch)
        if result.ok:
            spinner.succeed(success(f"Pushed {branch} to {self.remote}"))
            return

        if NO_UPSTREAM_MARKER not in result.output:
            spinner.fail(error("Push failed"))
            raise GitError(f"Git push failed: {result.output.strip()}")

        spinner.text = "📡 Setting upstream branch..."
        self.ctx.debug(f"retrying push with -u {self.remote} {branch}")
        retry = self.repo.push(self.remote, branch, set_upstream=True)
        if not retry.ok:
            spinner.fail(error("Push failed"))
            raise GitError(f"Setting upstream branch failed: {retry.output.strip()}")
        spinner.succeed(success(f"Pushed {branch} and set upstream to {self.remote}/{branch}"))
