# The command: gitdnd branches
# What it does: Lists the local branches, marking the one that is currently checked out with an asterisk
# How it does: Asks `git branch` for a `<name> NUL <HEAD marker>` line per branch and splits each line
# What data structure it uses: List of Dictionaries ({'name': ..., 'current': ...}), one per branch

import sys
from utils import repository, runner
from utils.errors import GitCommandError


def list_branches(repo_root):
    output = runner.run_git(repo_root, 'branch', '--format=%(refname:lstrip=2)%00%(HEAD)')
    branches = []
    for line in runner.lines(output):
        name, _, head_marker = line.partition('\0')
        branches.append({'name': name, 'current': head_marker.strip() == '*'})
    return branches


def run(args):
    repo_root = repository.find_repo_root()
    if not repo_root:
        print("fatal: not a git repository", file=sys.stderr)
        sys.exit(1)

    try:
        branches = list_branches(repo_root)
    except GitCommandError as e:
        print(f"error: {e}", file=sys.stderr)
        sys.exit(1)

    for branch in branches:
        if branch['current']:
            print(f"* {branch['name']}")
        else:
            print(f"  {branch['name']}")
