# The replay step used by make-head: applies one existing commit on top of the current branch
# What it does: Runs `git cherry-pick <commit>` to re-create the commit's change with a new identity on the current HEAD
# How it does:
#   1. Runs the cherry-pick.
#   2. If git stops because the change is already present (the pick "is now empty"), runs `git cherry-pick --skip`
#      and reports the commit as skipped. A commit that becomes a no-op after reordering is expected, not an error.
#   3. Any other failure propagates to the caller, which decides how to roll back.
# What data structure it uses: Directed Acyclic Graph (DAG) for commit/parent relationship

import sys
from utils import runner
from utils.errors import GitCommandError

EMPTY_PICK_MARKER = 'is now empty'


def became_empty(error): # Did git refuse the pick only because it would introduce no change?
    text = f"{error.stderr}\n{error.stdout}\n{error.message}".lower()
    return EMPTY_PICK_MARKER in text


def replay(repo_root, commit_hash): # Returns True if a new commit was created, False if the pick was skipped as empty
    try:
        runner.run_git(repo_root, 'cherry-pick', commit_hash)
        return True
    except GitCommandError as e:
        if not became_empty(e):
            raise
    runner.run_git(repo_root, 'cherry-pick', '--skip')
    print(f"Skipped {commit_hash[:7]}: its change is already present.")
    return False


def abort(repo_root): # Best effort; there may be nothing to abort
    try:
        runner.run_git(repo_root, 'cherry-pick', '--abort')
    except GitCommandError as e:
        print(f"warning: cherry-pick --abort failed: {e}", file=sys.stderr)
