# The command: gitdnd log [<branch>] [-n <limit>]
# What it does: Shows the commits a branch adds on top of its comparison base (the configured compare.base, else main or master)
# How it does: Picks the base, builds a `<base>..<branch>` range (or just `<branch>` when there is no base or the branch is the base),
#   and runs `git log` with a pretty format that separates fields with \x1f and records with \x1e so subjects may contain anything
# What data structure it uses: List of Dictionaries, one per commit, newest first

import sys
from utils import repository, runner, config
from utils.errors import GitCommandError

MAX_LIMIT = 500
FALLBACK_BASES = ['main', 'master']
PRETTY_FORMAT = '%H%x1f%s%x1f%an%x1f%ad%x1e'


def find_compare_base(repo_root): # The configured base if it resolves, else the first of main/master that exists
    configured = config.get_compare_base(repo_root)
    if configured and repository.revision_exists(repo_root, configured):
        return configured
    for candidate in FALLBACK_BASES:
        if repository.revision_exists(repo_root, candidate):
            return candidate
    return None


def get_commits(repo_root, ref, limit=50):
    limit = max(1, min(MAX_LIMIT, limit))
    base = find_compare_base(repo_root)
    range_expr = f'{base}..{ref}' if base and base != ref else ref

    output = runner.run_git(
        repo_root, 'log', '--no-color', '--date=short', f'--pretty=format:{PRETTY_FORMAT}',
        '-n', str(limit), range_expr, '--'
    )
    commits = []
    for record in output.split('\x1e'):
        record = record.strip()
        if not record:
            continue
        full_hash, subject, author, date = (record.split('\x1f') + ['', '', '', ''])[:4]
        commits.append({
            'hash': full_hash[:7],
            'fullHash': full_hash,
            'subject': subject,
            'author': author,
            'date': date,
        })
    return commits


def run(args):
    repo_root = repository.find_repo_root()
    if not repo_root:
        print("fatal: not a git repository", file=sys.stderr)
        sys.exit(1)

    ref = args.branch or repository.get_current_branch(repo_root)
    if not ref:
        print("fatal: HEAD is detached; name a branch to show.", file=sys.stderr)
        sys.exit(1)

    limit = args.limit if args.limit is not None else config.get_log_limit(repo_root)
    try:
        commits = get_commits(repo_root, ref, limit)
    except GitCommandError as e:
        print(f"error: {e}", file=sys.stderr)
        sys.exit(1)

    if not commits:
        print(f"No commits on {ref} beyond its comparison base.")
        return
    for c in commits:
        print(f"{c['hash']} {c['date']} {c['author']} {c['subject']}")
