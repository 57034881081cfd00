"""Read-only branch listing and commit graph display."""

from dataclasses import dataclass

import click

from mygit.core.context import MygitContext
from mygit.core.outcome import WorkflowResult
from mygit.core.sync_status import SyncClassification, SyncStatus
from mygit.output import ORANGE, machine_output, user_output


@dataclass(frozen=True)
class BranchRow:
    """One line of the branch listing.

    ``classification`` is None for branches that only exist on the remote.
    """

    name: str
    is_current: bool
    classification: SyncClassification | None


def collect_branch_rows(ctx: MygitContext, *, has_remote: bool) -> list[BranchRow]:
    """Classify every local branch, then append remote-only branches."""
    current = ctx.git.current_branch()
    classifier = ctx.classifier
    rows: list[BranchRow] = []

    local_branches = ctx.git.list_local_branches()
    for branch in local_branches:
        commit = ctx.git.commit_id(branch)
        if has_remote and commit:
            classification = classifier.classify(branch, commit)
        else:
            classification = SyncClassification.of(SyncStatus.LOCAL_ONLY)
        rows.append(
            BranchRow(name=branch, is_current=branch == current, classification=classification)
        )

    if has_remote:
        prefix = f"{ctx.remote}/"
        known = set(local_branches)
        for tracking in ctx.git.list_remote_branches():
            if not tracking.startswith(prefix):
                continue
            name = tracking[len(prefix) :]
            if name in known:
                continue
            known.add(name)
            rows.append(BranchRow(name=name, is_current=False, classification=None))

    return rows


def render_branch_row(row: BranchRow, *, dirty: bool) -> str:
    if row.is_current:
        marker = click.style(" *", fg="yellow", bold=True) if dirty else ""
        return f"* {click.style(row.name, fg='cyan', bold=True)}{marker}"
    if row.classification is None:
        return f"  {click.style(row.name, fg='blue')} {click.style('(remote only)', dim=True)}"
    if row.classification.status is SyncStatus.SYNCED:
        return f"  {click.style(row.name, fg='blue')}"
    line = f"  {click.style(row.name, fg=ORANGE)}"
    if row.classification.note:
        line += " " + click.style(f"({row.classification.note})", dim=True)
    return line


def list_branches(ctx: MygitContext) -> WorkflowResult:
    """Print every branch colored by its sync status with the remote."""
    remote = ctx.remote
    has_remote = ctx.git.remote_url(remote) is not None
    if has_remote:
        ctx.git.fetch_prune(remote)
        user_output(f"Branches (including remote '{remote}'):")
    else:
        user_output(f"Local branches (remote '{remote}' is not configured):")

    dirty = ctx.git.has_uncommitted_changes()
    for row in collect_branch_rows(ctx, has_remote=has_remote):
        machine_output(render_branch_row(row, dirty=dirty))
    return WorkflowResult.done()


def show_tree(ctx: MygitContext, *, max_count: int | None) -> WorkflowResult:
    """Print the commit graph of every branch in topological order."""
    if not ctx.git.ref_exists("HEAD"):
        user_output("No commits yet.")
        return WorkflowResult.done()
    graph = ctx.git.commit_graph(max_count=max_count)
    if not graph:
        user_output("No commits yet.")
        return WorkflowResult.done()
    machine_output(graph)
    return WorkflowResult.done()
