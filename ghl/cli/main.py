"""CLI Main Entry Point"""

from ghl.config import load_config
from ghl.git import GitError
from ghl.github import GitHubError
from ghl.output import dim, print_error
from ghl.prefs import PreferenceError, PreferenceNotFound
from ghl.prompts import PromptError, UserCancelled

from ghl.cli.args import parse_args
from ghl.cli.commands import (
    display_config,
    run_init,
    run_install_completion,
    run_pr,
    run_setup,
    set_default_description,
    set_token,
)


def _dispatch(command: str) -> int:
    if command == 'init':
        return run_init(load_config())
    if command == 'pr':
        return run_pr(load_config())
    if command == 'token':
        return set_token()
    if command == 'desc':
        return set_default_description(load_config())
    if command == 'setup':
        return run_setup()
    if command == 'config':
        return display_config()
    if command == 'completion':
        return run_install_completion()
    return 1


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the CLI."""
    args = parse_args(argv)
    if args.command is None:
        return 1

    try:
        return _dispatch(args.command)
    except UserCancelled:
        print(dim("Cancelled."))
        return 0
    except PreferenceNotFound as e:
        print_error(f"{e}. Run: ghl token" if e.path and e.path.name == 'token' else str(e))
        return 1
    except (PreferenceError, GitError, GitHubError, PromptError) as e:
        print_error(str(e))
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
