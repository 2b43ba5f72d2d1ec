"""Workflow Planning Package"""

from ghl.workflow.planner import (
    WorkflowPlan,
    PullRequestPlan,
    COMPARE_URL_TEMPLATE,
    slugify,
    extract_issue_tag,
    render_init_plan,
    render_pr_plan,
    ask_init,
    ask_pr,
    confirm_pr,
)

__all__ = [
    "WorkflowPlan",
    "PullRequestPlan",
    "COMPARE_URL_TEMPLATE",
    "slugify",
    "extract_issue_tag",
    "render_init_plan",
    "render_pr_plan",
    "ask_init",
    "ask_pr",
    "confirm_pr",
]
