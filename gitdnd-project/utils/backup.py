# What it does: Snapshots a branch tip under refs/backup/<tool>/<branch>-<timestamp> before it is rewritten, and puts the branch back from that snapshot when a rewrite fails
# How it does: `git update-ref` writes the extra ref; nothing here ever deletes one. Restoring uses `reset --hard` when the branch is checked out (so the index and files follow) and `update-ref` otherwise
# What data structure it uses: Refs are plain pointers into the commit DAG; the backup is one more pointer

import sys
from datetime import datetime, timezone
from . import repository, config
from .errors import GitCommandError, BackupFailed

BACKUP_NAMESPACE = 'refs/backup'


def _timestamp(now=None): # ISO-8601 in UTC with ':' and '.' replaced so git accepts it in a ref name
    now = now or datetime.now(timezone.utc)
    iso = now.astimezone(timezone.utc).isoformat(timespec='milliseconds').replace('+00:00', 'Z')
    return iso.replace(':', '-').replace('.', '-')


def backup_ref_name(tool, branch, now=None):
    return f"{BACKUP_NAMESPACE}/{tool}/{branch}-{_timestamp(now)}"


def create_backup(repo_root, branch):
    """Record the current tip of `branch` under the backup namespace.

    Returns the new ref name. If git refuses to write it, a warning is
    printed and None is returned so the caller knows there is nothing to
    roll back to; with `backup.required = true` in the config the failure
    raises BackupFailed instead.
    """
    tool, required = config.get_backup_settings(repo_root)
    ref = backup_ref_name(tool, branch)
    try:
        tip = repository.resolve_commit(repo_root, repository.branch_ref(branch))
        repository.update_ref(repo_root, ref, tip)
    except GitCommandError as e:
        if required:
            raise BackupFailed(f"Could not create backup ref {ref}: {e}") from e
        print(f"warning: could not create backup ref {ref}: {e}", file=sys.stderr)
        return None
    return ref


def restore_backup(repo_root, branch, backup_ref): # Best effort: failures are reported, never raised
    if not backup_ref:
        print(f"warning: no backup ref exists for '{branch}', leaving it as it is.", file=sys.stderr)
        return False
    try:
        if repository.get_current_branch(repo_root) == branch:
            repository.reset_hard(repo_root, backup_ref)
        else:
            repository.update_ref(repo_root, repository.branch_ref(branch), backup_ref)
    except GitCommandError as e:
        print(f"warning: could not restore '{branch}' from {backup_ref}: {e}", file=sys.stderr)
        return False
    return True
