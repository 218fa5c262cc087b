# Checkout helpers used by make-head and delete (no command of its own)
# What it does: Temporarily switches the working checkout to the branch being rewritten, and always switches back afterwards
# How it does:
#   - Reads the current checkout once: a branch name, or the commit hash if HEAD is detached.
#   - If that is not the target branch, runs `git checkout <branch>` and remembers that a switch-back is owed.
#   - On leaving the `with` block (normally or through an exception) checks the original back out,
#     unless HEAD is already there. A failed switch-back only prints a warning so the real error is not hidden.
# What data structure it uses: None beyond the two strings it remembers (original and target).

import sys
from contextlib import contextmanager
from utils import repository, runner
from utils.errors import GitCommandError


def get_current_checkout(repo_root): # Returns (name, detached): the branch name, or the HEAD commit when detached
    branch = repository.get_current_branch(repo_root)
    if branch:
        return branch, False
    return repository.get_head_commit(repo_root), True


def checkout(repo_root, target, detached=False):
    if detached:
        runner.run_git(repo_root, 'checkout', '--quiet', '--detach', target)
    else:
        runner.run_git(repo_root, 'checkout', '--quiet', target)


def _is_checked_out(repo_root, original, detached):
    if detached:
        return repository.get_current_branch(repo_root) is None and repository.get_head_commit(repo_root) == original
    return repository.get_current_branch(repo_root) == original


def restore_checkout(repo_root, original, detached):
    if not original:
        return
    try:
        if not _is_checked_out(repo_root, original, detached):
            checkout(repo_root, original, detached)
    except GitCommandError as e:
        print(f"warning: could not switch back to '{original}': {e}", file=sys.stderr)


@contextmanager
def scoped_checkout(repo_root, branch):
    original, detached = get_current_checkout(repo_root)
    if detached or original != branch:
        checkout(repo_root, branch)
    try:
        yield original
    finally:
        restore_checkout(repo_root, original, detached)


@contextmanager
def preserved_checkout(repo_root):
    # For git commands that switch branches on their own (`rebase <upstream> <branch>`)
    original, detached = get_current_checkout(repo_root)
    try:
        yield original
    finally:
        restore_checkout(repo_root, original, detached)
