# What it does: Provides high-level queries about a git repository, like finding the repo root, the current checkout, branch tips and commit parents
# How it does: `find_repo_root` walks up the directory tree looking for `.git`. Everything else asks git itself through the runner (`rev-parse`, `symbolic-ref`, `rev-list`), so refs, packed refs and worktrees are all handled by git
# What data structure it uses: Uses recursion (linear recursion) to find the repo root. Conceptually it reads pointers (HEAD and branch refs) into the commit DAG

import os
from . import runner
from .errors import GitCommandError

# Files and directories git leaves behind while a multi-step operation is stopped
IN_PROGRESS_MARKERS = [
    'rebase-merge',
    'rebase-apply',
    'MERGE_HEAD',
    'CHERRY_PICK_HEAD',
    'REVERT_HEAD',
]


def find_repo_root(path='.'): # Recursively searches for .git (a directory, or a file in linked worktrees)
    path = os.path.abspath(path)
    if os.path.exists(os.path.join(path, '.git')):
        return path
    parent_path = os.path.dirname(path)
    if parent_path == path:
        return None
    return find_repo_root(parent_path)


def get_git_dir(repo_root): # Absolute path of the git directory for this working tree
    return runner.run_git(repo_root, 'rev-parse', '--absolute-git-dir').strip()


def branch_ref(branch_name): # Full ref of a local branch, so a tag with the same name can never be picked instead
    return f'refs/heads/{branch_name}'


def get_current_branch(repo_root): # Name of the checked-out branch, or None when HEAD is detached
    try:
        ref = runner.run_git(repo_root, 'symbolic-ref', '--quiet', 'HEAD').strip()
    except GitCommandError:
        return None
    # not --short: it answers 'heads/<name>' when a tag shares the name
    if ref.startswith('refs/heads/'):
        return ref[len('refs/heads/'):]
    return ref


def get_head_commit(repo_root):
    try:
        return runner.run_git(repo_root, 'rev-parse', '--verify', '--quiet', 'HEAD').strip()
    except GitCommandError:
        return None


def get_branch_commit(repo_root, branch_name): # Tip of a local branch, or None if it doesn't exist
    try:
        return runner.run_git(repo_root, 'rev-parse', '--verify', '--quiet', branch_ref(branch_name)).strip()
    except GitCommandError:
        return None


def resolve_commit(repo_root, revision): # Expands a full or abbreviated hash (or any revision) to a full commit hash
    return runner.run_git(repo_root, 'rev-parse', '--verify', f'{revision}^{{commit}}').strip()


def get_commit_parents(repo_root, commit_hash): # Parent hashes recorded in a commit, [] for a root commit
    parts = runner.run_git(repo_root, 'rev-list', '--parents', '-n', '1', commit_hash).split()
    return parts[1:]


def list_commits(repo_root, revision): # Commits reachable from `revision` (may be a range), oldest first
    return runner.lines(runner.run_git(repo_root, 'rev-list', '--reverse', revision))


def revision_exists(repo_root, revision):
    return runner.succeeds(repo_root, 'rev-parse', '--verify', '--quiet', revision)


def get_in_progress_operations(repo_root): # Which rebase/merge/cherry-pick/revert markers are present
    git_dir = get_git_dir(repo_root)
    return [name for name in IN_PROGRESS_MARKERS if os.path.exists(os.path.join(git_dir, name))]


def update_ref(repo_root, ref, new_value, old_value=None): # Points `ref` at `new_value`, optionally only if it still holds `old_value`
    args = ['update-ref', ref, new_value]
    if old_value:
        args.append(old_value)
    runner.run_git(repo_root, *args)


def reset_hard(repo_root, commit_hash): # Moves the current branch, index and working tree to `commit_hash`
    runner.run_git(repo_root, 'reset', '--hard', commit_hash)
