# The rebase drivers used by make-head and delete
# What it does: Rewrites a branch either from its very first commit (`git rebase -i --root` with a precomputed todo list)
#               or from a given point (`git rebase --onto <newbase> <upstream> [<branch>]`)
# How it does:
#   - rebase_root: renders the desired commit order as `pick` lines, injects them through the sequence editor
#     (no interactive editor ever opens), and runs the rebase from the root. Picks that end up empty are dropped,
#     the same as the cherry-pick path skips them.
#   - rebase_onto: replays everything after <upstream> onto <newbase>.
#   - On any failure both abort the rebase, put the branch back from its backup ref and raise.
# What data structure it uses: List (the replay sequence), DAG (commit/parent relationship)

import sys
from utils import runner, backup, sequence
from utils.errors import GitCommandError, RewriteFailed, ReplayConflict


def abort(repo_root):
    try:
        runner.run_git(repo_root, 'rebase', '--abort')
    except GitCommandError as e:
        print(f"warning: rebase --abort failed: {e}", file=sys.stderr)


def rebase_root(repo_root, branch, backup_ref, order, editor=sequence.sequence_editor):
    """Rebuild the checked-out `branch` from the root, picking exactly `order` (oldest first).

    `editor` is a context manager factory taking the todo text and yielding
    the environment overrides git needs to read it non-interactively.
    """
    todo = sequence.render_todo(order)
    try:
        with editor(todo) as env:
            runner.run_git(repo_root, 'rebase', '-i', '--root', '--empty=drop', env=env)
    except GitCommandError as e:
        abort(repo_root)
        backup.restore_backup(repo_root, branch, backup_ref)
        raise RewriteFailed(f"Rewriting {branch} from its root commit failed. {e}") from e


def rebase_onto(repo_root, branch, backup_ref, newbase, upstream, name_branch=False):
    args = ['rebase', '--onto', newbase, upstream]
    if name_branch:
        args.append(branch)
    try:
        runner.run_git(repo_root, *args)
    except GitCommandError as e:
        abort(repo_root)
        backup.restore_backup(repo_root, branch, backup_ref)
        raise ReplayConflict(f"Rebase failed while deleting commit. {e}") from e
