"""CLI Commands"""

import os
import sys
from typing import Callable

from ghl.config import Config, get_config_path, load_config, save_config
from ghl.git import GitRepo
from ghl.github import GitHubClient
from ghl.output import bold, colorize_commit_type, dim, info, print_step, print_success, print_warning
from ghl.prefs import PreferenceNotFound, PreferenceStore
from ghl.prompts import ask_confirm, ask_editor, ask_optional_text
from ghl.workflow import ask_init, ask_pr, confirm_pr


def run_init(config: Config, git: GitRepo | None = None) -> int:
    """Plain flow: branch, commit, push, then print the compare URL."""
    git = git or GitRepo(remote=config.remote)
    plan = ask_init(resolve_repository=git.current_repository)

    print_step(f"Creating branch {info(plan.branch_name)}")
    git.create_branch(plan.branch_name)
    print_step(f"Committing {colorize_commit_type(plan.commit_message)}")
    git.commit(plan.commit_message)
    print_step(f"Pushing to {config.remote}")
    git.push(plan.branch_name)

    print_success("Branch pushed. Open a pull request:")
    print(f"  {plan.compare_url}")
    return 0


def run_pr(
    config: Config,
    store: PreferenceStore | None = None,
    git: GitRepo | None = None,
    client_factory: Callable[[str], GitHubClient] = GitHubClient,
) -> int:
    """PR flow: branch, empty commit, push, open the PR and assign it.

    The token is read before any prompt so a missing token fails fast.
    """
    store = store or PreferenceStore()
    git = git or GitRepo(remote=config.remote)

    client = client_factory(store.get_token())
    repo = git.current_repository()

    plan = ask_pr()
    if not confirm_pr(plan):
        print(dim("Cancelled."))
        return 0

    print_step(f"Creating branch {info(plan.branch_name)}")
    git.create_branch(plan.branch_name)
    print_step("Creating an empty commit")
    git.commit(plan.commit_message, allow_empty=True)
    print_step(f"Pushing to {config.remote}")
    git.push(plan.branch_name)

    base = config.base_branch or client.default_branch(repo)
    body = store.default_description_or_empty() if config.use_default_description else ""
    print_step(f"Opening pull request {colorize_commit_type(plan.pr_name)} against {base}")
    pull = client.create_pull_request(repo, title=plan.pr_name, head=plan.branch_name, base=base, body=body)

    if config.assign_self:
        login = client.current_user()
        print_step(f"Assigning {login}")
        client.assign(repo, pull.number, [login])

    print_success(f"Pull request #{pull.number} created:")
    print(f"  {pull.url}")
    return 0


def set_token(store: PreferenceStore | None = None) -> int:
    """Ask for the GitHub token and store it."""
    store = store or PreferenceStore()
    token = ask_optional_text("Github token:")
    if store.set_token(token):
        print_success(f"Token saved to {store.token_path}")
    else:
        print(dim("No token entered, nothing saved."))
    return 0


def set_default_description(config: Config, store: PreferenceStore | None = None) -> int:
    """Edit the default pull request description in the user's editor."""
    store = store or PreferenceStore()
    current = store.default_description_or_empty()
    description = ask_editor("Pull request description", predefined=current, editor=config.resolved_editor())
    if store.set_default_description(description):
        print_success(f"Default description saved to {store.description_path}")
    else:
        print(dim("Default description unchanged."))
    return 0


def display_config(store: PreferenceStore | None = None) -> int:
    """Display current configuration and preference locations."""
    store = store or PreferenceStore()
    config = load_config()
    config_path = get_config_path()

    print(f"\n{bold('Current Configuration')}\n")

    if config_path:
        print(f"  {dim('Loaded from:')} {config_path}")
    else:
        print(f"  {dim('Loaded from:')} defaults (no .ghlrc found)")

    if os.environ.get('GHL_EDITOR'):
        print(f"  {dim('Environment overrides:')}")
        print(f"    GHL_EDITOR={os.environ['GHL_EDITOR']}")

    print()
    print(f"  {bold('Settings:')}")
    print(f"    editor:                  {info(config.resolved_editor() or '$EDITOR')}")
    print(f"    remote:                  {info(config.remote)}")
    print(f"    base_branch:             {info(config.base_branch or 'repository default')}")
    print(f"    assign_self:             {info(str(config.assign_self).lower())}")
    print(f"    use_default_description: {info(str(config.use_default_description).lower())}")

    print()
    print(f"  {bold('Preferences:')}")
    try:
        store.get_token()
        token_state = info('set')
    except PreferenceNotFound:
        token_state = dim('not set (run ghl token)')
    description_state = info('set') if store.default_description_or_empty() else dim('not set (run ghl desc)')
    print(f"    token:        {token_state}  {dim(str(store.token_path))}")
    print(f"    description:  {description_state}  {dim(str(store.description_path))}")

    print(f"\n  {dim('Config locations:')}")
    print(f"    Local:  .ghlrc (in current directory)")
    print(f"    Global: ~/.ghlrc")
    print(f"\n  {dim('Run')} ghl setup {dim('to configure')}\n")

    return 0


def run_setup() -> int:
    """Quick setup wizard."""
    display_config()
    print(f"{bold('Setup Wizard')}\n")

    current = load_config()
    remote = ask_optional_text(f"Remote (Enter for {current.remote}):") or current.remote
    base_branch = ask_optional_text("Base branch (Enter for the repository default):")
    editor = ask_optional_text("Editor for descriptions (Enter for $EDITOR):")
    assign_self = ask_confirm("Assign yourself new pull requests? (y/n)")
    use_default_description = ask_confirm("Use the default description as PR body? (y/n)")

    config = Config(
        editor=editor,
        remote=remote,
        base_branch=base_branch,
        assign_self=assign_self,
        use_default_description=use_default_description,
    )
    path = save_config(config, global_config=True)

    print_success(f"Saved to {path}")
    return 0


def run_install_completion() -> int:
    """Install shell tab completion."""
    shell = os.environ.get('SHELL', '')

    print(f"\n{bold('Tab Completion Setup')}\n")

    if 'zsh' in shell or 'bash' in shell:
        rc_file = os.path.expanduser('~/.zshrc' if 'zsh' in shell else '~/.bashrc')
        line = 'eval "$(register-python-argcomplete ghl)"'
        print(f"Add this line to {dim(rc_file)}:\n")
        print(f"  {line}\n")
        print(f"Then run: {dim(f'source {rc_file}')}")
    elif sys.platform == 'win32':
        print("For PowerShell, run:\n")
        print("  register-python-argcomplete --shell powershell ghl | Out-String | Invoke-Expression\n")
        print("To make it permanent, add it to your $PROFILE.")
    else:
        print_warning(f"Unrecognized shell '{shell or 'unknown'}'")
        print("Run one of these based on your shell:\n")
        print(f"  {dim('# Bash/Zsh')}")
        print('  eval "$(register-python-argcomplete ghl)"\n')
        print(f"  {dim('# Fish')}")
        print("  register-python-argcomplete --shell fish ghl | source")

    print(f"\n{dim('After setup, press TAB to autocomplete commands.')}")
    return 0
