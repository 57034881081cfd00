"""Repository setup workflows: init, create, delete and remote configuration."""

import shutil

import click

from mygit.core.context import MygitContext
from mygit.core.outcome import WorkflowResult
from mygit.errors import ValidationFailure
from mygit.output import machine_output, success_text, user_output


def init_repository(ctx: MygitContext) -> WorkflowResult:
    if (ctx.cwd / ".git").exists():
        user_output(f"{ctx.cwd} is already a git repository.")
        return WorkflowResult.aborted("Already initialized.")
    ctx.git.init()
    user_output(success_text(f"Initialized a git repository in {ctx.cwd}."))
    return WorkflowResult.done()


def create_repository(ctx: MygitContext, *, name: str) -> WorkflowResult:
    """Create directory ``name`` below the working directory as a new repository.

    Raises:
        ValidationFailure: If the name is empty or the path already exists
    """
    directory = name.strip()
    if not directory:
        raise ValidationFailure("A repository name is required.")
    target = ctx.cwd / directory
    if target.exists():
        raise ValidationFailure(f"'{target}' already exists.")
    ctx.git.init_at(directory)
    user_output(success_text(f"Created repository {target}."))
    return WorkflowResult.done()


def delete_repository(ctx: MygitContext) -> WorkflowResult:
    """Delete the working directory's .git directory, i.e. its whole history.

    Requires a confirmation followed by typing the directory name.

    Raises:
        ValidationFailure: If the working directory is not a repository root
    """
    git_dir = ctx.cwd / ".git"
    if not git_dir.is_dir():
        raise ValidationFailure(f"{ctx.cwd} is not the root of a git repository.")

    user_output(
        click.style(
            f"This deletes {git_dir}: every commit, branch and stash. Files stay in place.",
            fg="red",
            bold=True,
        )
    )
    if not ctx.console.confirm("Delete the repository history?", default=False):
        user_output("Deletion cancelled.")
        return WorkflowResult.aborted("Deletion cancelled.")

    expected = ctx.cwd.name
    typed = ctx.console.prompt(f"Type the directory name '{expected}' to confirm")
    if typed != expected:
        user_output("The name did not match; nothing was deleted.")
        return WorkflowResult.aborted("Deletion cancelled.")

    shutil.rmtree(git_dir)
    user_output(f"Deleted {git_dir}.")
    return WorkflowResult.done()


def _require_url(ctx: MygitContext, url: str | None) -> str:
    value = url if url is not None else ctx.console.prompt(f"URL for remote '{ctx.remote}'")
    value = value.strip()
    if not value:
        raise ValidationFailure("A remote URL is required.")
    return value


def add_remote(ctx: MygitContext, *, url: str | None) -> WorkflowResult:
    """Raises ValidationFailure if the remote already exists or the URL is empty."""
    remote = ctx.remote
    current = ctx.git.remote_url(remote)
    if current is not None:
        raise ValidationFailure(
            f"Remote '{remote}' already exists ({current}). Use 'mygit repo remote set-url'."
        )
    value = _require_url(ctx, url)
    ctx.git.remote_add(remote, value)
    user_output(f"Added remote '{remote}' with URL {click.style(value, fg='cyan')}.")
    return WorkflowResult.done()


def set_remote_url(ctx: MygitContext, *, url: str | None) -> WorkflowResult:
    """Raises ValidationFailure if the remote does not exist or the URL is empty."""
    remote = ctx.remote
    current = ctx.git.remote_url(remote)
    if current is None:
        raise ValidationFailure(
            f"Remote '{remote}' is not configured. Use 'mygit repo remote add'."
        )
    value = _require_url(ctx, url)
    if value == current:
        user_output("The URL is unchanged.")
        return WorkflowResult.aborted("URL unchanged.")
    ctx.git.remote_set_url(remote, value)
    user_output(f"Changed the URL of remote '{remote}' to {click.style(value, fg='cyan')}.")
    return WorkflowResult.done()


def remove_remote(ctx: MygitContext) -> WorkflowResult:
    """Raises ValidationFailure if the remote does not exist."""
    remote = ctx.remote
    if ctx.git.remote_url(remote) is None:
        raise ValidationFailure(f"Remote '{remote}' is not configured.")
    if not ctx.console.confirm(f"Remove remote '{remote}' (stop tracking it)?", default=False):
        user_output("Removal cancelled.")
        return WorkflowResult.aborted("Removal cancelled.")
    ctx.git.remote_remove(remote)
    user_output(f"Removed remote '{remote}'.")
    return WorkflowResult.done()


def show_remote(ctx: MygitContext) -> WorkflowResult:
    remote = ctx.remote
    url = ctx.git.remote_url(remote)
    if url is None:
        user_output(f"Remote '{remote}' is not configured.")
        return WorkflowResult.done()
    machine_output(f"{remote}\t{url}")
    return WorkflowResult.done()
