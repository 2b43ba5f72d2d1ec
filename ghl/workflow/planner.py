"""Workflow Planner - Turn a commit descriptor into a confirmed branch/commit/PR plan."""

from dataclasses import dataclass
from typing import Callable

from ghl.commit import ask_commit
from ghl.git import resolve_current_repository
from ghl.output import colorize_commit_type, info
from ghl.prompts import OperationCancelled, ask_confirm, ask_text, not_empty

COMPARE_URL_TEMPLATE = "https://github.com/{repo}/compare/{branch}?expand=1"


@dataclass(frozen=True)
class WorkflowPlan:
    """Plain flow: create a branch, commit staged changes, push."""
    commit_message: str
    branch_name: str
    compare_url: str


@dataclass(frozen=True)
class PullRequestPlan:
    """PR flow: branch, empty commit, push, open PR, self-assign."""
    pr_name: str
    branch_name: str
    commit_message: str


def slugify(text: str) -> str:
    """Branch-safe form of free text: spaces to hyphens, no apostrophes, lower-case."""
    return text.replace(' ', '-').replace("'", '').lower()


def extract_issue_tag(issue_branch: str) -> str | None:
    """
    Issue id from a tracker branch name, e.g. "proj-123-title" -> "PROJ-123".

    Returns None unless the second dash-separated segment is a number.
    """
    segments = issue_branch.split('-')
    if len(segments) > 1 and segments[1].isascii() and segments[1].isdigit():
        return f"{segments[0].upper()}-{segments[1]}"
    return None


def render_init_plan(plan: WorkflowPlan) -> str:
    return (
        "This will:\n"
        f"1. Create a branch called {info(plan.branch_name)}.\n"
        f"2. Create a commit called {colorize_commit_type(plan.commit_message)}.\n"
        "3. Push to the remote repository."
    )


def render_pr_plan(plan: PullRequestPlan) -> str:
    return (
        "This will:\n"
        f"1. Create a branch called {info(plan.branch_name)}.\n"
        "2. Create an empty commit.\n"
        "3. Push to the remote repository.\n"
        f"4. Create a pull request named {colorize_commit_type(plan.pr_name)}.\n"
        "5. Assign you the pull request."
    )


def ask_init(resolve_repository: Callable[[], str] = resolve_current_repository) -> WorkflowPlan:
    """Plain flow: ask for a commit, derive the branch and confirm.

    Raises:
        UserCancelled: if a prompt is aborted
        OperationCancelled: if the user answers "no" to the confirmation
        GitError: if the repository cannot be resolved
    """
    descriptor = ask_commit()

    branch_name = f"{descriptor.type.value}/{slugify(descriptor.name)}"
    repo = resolve_repository()
    plan = WorkflowPlan(
        commit_message=descriptor.message,
        branch_name=branch_name,
        compare_url=COMPARE_URL_TEMPLATE.format(repo=repo, branch=branch_name),
    )

    print(render_init_plan(plan))
    if not ask_confirm("Confirm? (y/n)"):
        raise OperationCancelled("Declined at confirmation")
    return plan


def ask_pr() -> PullRequestPlan:
    """PR flow: ask for the issue branch and a commit, derive PR name and branch.

    The issue branch is kept verbatim in the branch name. Confirmation is a
    separate step, see confirm_pr().
    """
    issue_branch = ask_text("Linear branch name:", validator=not_empty)
    descriptor = ask_commit()

    pr_name = descriptor.message
    tag = extract_issue_tag(issue_branch)
    if tag:
        pr_name = f"{pr_name} [{tag}]"

    return PullRequestPlan(
        pr_name=pr_name,
        branch_name=f"{descriptor.type.value}/{issue_branch}",
        commit_message=descriptor.message,
    )


def confirm_pr(plan: PullRequestPlan) -> bool:
    """Show the PR plan and return the user's answer. "No" is False, not an error."""
    print(render_pr_plan(plan))
    return ask_confirm("Confirm? (y/n)")
