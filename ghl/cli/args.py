"""CLI Argument Parsing"""

import argparse
import argcomplete

from ghl import __version__


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='ghl',
        description='Create conventional branches, commits and pull requests',
        epilog='Example: ghl pr (branch, empty commit, push and PR from a Linear branch name)'
    )

    parser.add_argument('-v', '--version', action='version', version=f'%(prog)s {__version__}')

    subparsers = parser.add_subparsers(dest='command', metavar='COMMAND')

    # Workflows
    subparsers.add_parser('init', help='Create a branch, commit staged changes and push')
    subparsers.add_parser('pr', help='Create a branch, an empty commit, push and open a pull request')

    # Preferences
    subparsers.add_parser('token', help='Store your GitHub token')
    subparsers.add_parser('desc', help='Edit the default pull request description')

    # Setup/config
    subparsers.add_parser('setup', help='Configure defaults')
    subparsers.add_parser('config', help='Show current configuration')
    subparsers.add_parser('completion', help='Install shell tab completion')

    return parser


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = build_parser()
    argcomplete.autocomplete(parser)
    args = parser.parse_args(argv)
    if args.command is None:
        parser.print_help()
    return args
