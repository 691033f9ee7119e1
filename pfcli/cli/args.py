"""CLI Argument Parsing"""

import argparse
import argcomplete

from pfcli import __version__

COMMIT_COMMANDS = ('commit', 'c')


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='pf',
        description='Generate Python types from an API response, plus an AI git assistant',
        epilog='Examples: pf --url https://api.example.com/users --name User | pf commit'
    )

    parser.add_argument('-v', '--version', action='version', version=f'%(prog)s {__version__}')

    # Type generation options (omit --url to be asked interactively)
    parser.add_argument('-u', '--url', type=str, metavar='URL', help='API URL returning sample JSON')
    parser.add_argument('-n', '--name', type=str, metavar='NAME', help='Root type name (default: ApiTypes)')
    parser.add_argument('-p', '--path', type=str, metavar='PATH', help='Directory to save into (default: current directory)')

    # Output / config
    parser.add_argument('--verbose', action='store_true', help='Show debug info on stderr')
    parser.add_argument('--display-config', action='store_true', help='Show current configuration')

    subparsers = parser.add_subparsers(dest='command', metavar='COMMAND')
    commit = subparsers.add_parser(
        'commit',
        aliases=['c'],
        help='Stage, AI-draft a commit message, commit, pull and push',
    )
    commit.add_argument('--verbose', action='store_true', default=argparse.SUPPRESS, help='Show debug info on stderr')

    return parser


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = build_parser()
    argcomplete.autocomplete(parser)
    return parser.parse_args(argv)
