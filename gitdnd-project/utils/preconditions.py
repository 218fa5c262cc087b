# What it does: The checks that must pass before a branch's history is touched: the commit belongs to the branch, the repository is clean and idle, and (for root rewrites) the history is linear
# How it does: Each check is one or two read-only git queries. A failed check raises the matching MutationError; nothing here mutates the repository
# What data structure it uses: Treats history as a DAG. The merge scan reads the parent list of every reachable commit

from . import repository, runner
from .errors import GitCommandError, NotReachable, DirtyWorkingState, OperationInProgress


def ensure_reachable(repo_root, branch, commit):
    # An unknown hash makes merge-base error out; that is reported the same way as "not an ancestor"
    if not runner.succeeds(repo_root, 'merge-base', '--is-ancestor', commit, repository.branch_ref(branch)):
        raise NotReachable(f"Commit {commit} is not reachable from {branch}.")


def ensure_clean_state(repo_root):
    dirty_worktree = not runner.succeeds(repo_root, 'diff', '--quiet')
    dirty_index = not runner.succeeds(repo_root, 'diff', '--cached', '--quiet')
    if dirty_worktree or dirty_index:
        raise DirtyWorkingState(
            "Working tree has uncommitted changes. Please commit or stash before proceeding."
        )

    try:
        in_progress = repository.get_in_progress_operations(repo_root)
    except GitCommandError:
        in_progress = ['unknown']
    if in_progress:
        raise OperationInProgress(
            "Another Git operation is in progress (rebase/merge/cherry-pick/revert). "
            "Please abort or finish it first."
        )


def has_merges_in_history(repo_root, ref): # True if any commit reachable from `ref` has more than one parent
    output = runner.run_git(repo_root, 'rev-list', '--parents', ref)
    for line in runner.lines(output):
        if len(line.split()) > 2:
            return True
    return False
