"""CLI Commands"""

from pfcli import __version__
from pfcli.cli.utils import open_in_editor
from pfcli.context import ExecutionContext
from pfcli.errors import PfError
from pfcli.llm import credential_env_names, resolve_api_key
from pfcli.output import (
    Spinner, bold, dim, error, info, print_box, success, warning,
)
from pfcli.typegen import (
    TypeGenRequest, generate_types, validate_directory, validate_type_name, validate_url, write_type_file,
)
from pfcli.workflow import GitWorkflow, Outcome

CUSTOM_PATH = "custom"


def display_config(ctx: ExecutionContext) -> int:
    """Display current configuration."""
    config = ctx.config

    print(f"\n{bold('Current Configuration')}\n")

    if ctx.config_path:
        print(f"  {dim('Loaded from:')} {ctx.config_path}")
    else:
        print(f"  {dim('Loaded from:')} defaults (no .pfclirc found)")

    env_provider = ctx.environ.get('PF_PROVIDER')
    env_model = ctx.environ.get('PF_MODEL')
    if env_provider or env_model:
        print(f"  {dim('Environment overrides:')}")
        if env_provider:
            print(f"    PF_PROVIDER={env_provider}")
        if env_model:
            print(f"    PF_MODEL={env_model}")

    key_state = "configured" if resolve_api_key(config.provider, ctx.environ) else "missing or invalid"

    print()
    print(f"  {bold('Settings:')}")
    print(f"    provider:          {info(config.provider)}")
    print(f"    model:             {info(config.model or 'default')}")
    print(f"    api key:           {info(key_state)} {dim('(' + ' / '.join(credential_env_names(config.provider)) + ')')}")
    print(f"    default_type_name: {info(config.default_type_name)}")
    print(f"    max_diff_chars:    {info(str(config.max_diff_chars))}")
    print(f"    remote:            {info(config.remote)}")
    print(f"    editor:            {info(config.editor)} {dim('(found)' if ctx.has_editor else '(not found)')}")
    print(f"    timeout:           {info(str(config.timeout))}s")

    print(f"\n  {dim('Config locations:')}")
    print(f"    Local:  .pfclirc (in current directory)")
    print(f"    Global: ~/.pfclirc\n")

    return 0


def _print_banner() -> None:
    print_box(f"✨ PF-CLI {__version__} ✨\nAPI JSON -> Python types")
    print(info("\n👋 Welcome! Let's generate some types.\n"))


def prompt_for_request(ctx: ExecutionContext, name: str | None = None) -> TypeGenRequest:
    """Ask for URL, type name and save location."""
    _print_banner()
    prompter = ctx.prompter

    url = prompter.text("🌐 API URL:", validate=validate_url)
    type_name = prompter.text(
        "📝 Type name:",
        default=name or ctx.config.default_type_name,
        validate=validate_type_name,
    )
    path = prompter.select("📂 Save to:", [
        (f"💻 Desktop ({ctx.desktop})", str(ctx.desktop)),
        (f"📁 Current directory ({ctx.cwd})", str(ctx.cwd)),
        ("🔍 Custom path", CUSTOM_PATH),
    ])
    if path == CUSTOM_PATH:
        path = prompter.text("📁 Save path:", default=str(ctx.cwd), validate=validate_directory)

    return TypeGenRequest(url=url.strip(), name=type_name, path=path)


def run_generate(ctx: ExecutionContext, url: str | None = None, name: str | None = None, path: str | None = None) -> int:
    """Fetch sample JSON, infer types, save them and offer to open the file."""
    if url:
        request = TypeGenRequest(
            url=url,
            name=name or ctx.config.default_type_name,
            path=path or str(ctx.cwd),
        ).validate()
    else:
        request = prompt_for_request(ctx, name=name)
    ctx.debug(f"request: {request}")

    with Spinner("🚀 Fetching API data...") as spinner:

        def progress(text: str) -> None:
            spinner.text = text
            ctx.debug(text)

        try:
            lines = generate_types(request.url, request.name, timeout=ctx.config.timeout, progress=progress)
        except PfError:
            spinner.fail(error("Type generation failed"))
            raise
        spinner.succeed(success("✨ Type definitions generated!"))

    with Spinner("💾 Saving file...") as spinner:
        try:
            saved = write_type_file(request.path, request.name, lines)
        except OSError as e:
            spinner.fail(error("Saving failed"))
            raise PfError(f"Could not write type file to {request.path}: {e}")
        spinner.succeed(success("🎉 File saved!"))

    print(f"\n{info('📍 Saved to:')} {saved}")
    print(warning("\n👀 Preview:\n"))
    print_box('\n'.join(lines))

    if ctx.has_editor:
        if ctx.prompter.confirm(f"🔍 Open it with '{ctx.config.editor}'?", default=False):
            if open_in_editor(ctx.runner, ctx.config.editor, saved):
                print(success("\n📝 Opened in editor"))
            else:
                print(warning("\n⚠️  Could not open the file, please open it manually"))

    print(success("\n👋 Thanks for using PF-CLI, happy coding!\n"))
    return 0


def run_commit(ctx: ExecutionContext) -> int:
    """Git add / AI commit / pull / push."""
    result = GitWorkflow(ctx).run()
    ctx.debug(f"workflow outcome: {result.outcome.value}")
    if result.outcome is Outcome.CANCELLED:
        print(dim("No commit was made."))
    return 0
