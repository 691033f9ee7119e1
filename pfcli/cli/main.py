"""CLI Main Entry Point"""

import sys

from pfcli.cli.args import COMMIT_COMMANDS, parse_args
from pfcli.cli.commands import display_config, run_commit, run_generate
from pfcli.context import ExecutionContext
from pfcli.errors import MergeConflictError, PfError, PromptAborted
from pfcli.output import dim, print_error, warning


def _report_failure(exc: PfError, is_git: bool) -> None:
    """Print a fatal error and what to do about it."""
    if is_git:
        print_error(f"Git workflow failed: {exc}")
        if isinstance(exc, MergeConflictError) and exc.files:
            print(dim(f"  Conflicted files: {', '.join(exc.files)}"), file=sys.stderr)
        print(warning("💡 Resolve the issue manually and retry"), file=sys.stderr)
    else:
        print_error(f"Error: {exc}")
        print(dim("  Check the URL, type name and save path, then retry"), file=sys.stderr)


def main(argv: list[str] | None = None, ctx: ExecutionContext | None = None) -> int:
    """Main entry point for the CLI."""
    args = parse_args(argv)
    ctx = ctx or ExecutionContext.create(verbose=args.verbose)
    if args.verbose:
        ctx.verbose = True

    if args.display_config:
        return display_config(ctx)

    is_git = args.command in COMMIT_COMMANDS
    try:
        if is_git:
            return run_commit(ctx)
        return run_generate(ctx, url=args.url, name=args.name, path=args.path)
    except PromptAborted:
        print(warning("\n🚫 Cancelled"))
        return 0
    except PfError as e:
        _report_failure(e, is_git)
        return 1


if __name__ == "__main__":
    sys.exit(main())
