# The command: gitdnd make-head <branch> <commit>
# What it does: Moves one commit to the top of a branch. Every other commit after the target's parent keeps its
#               relative order and ends up stacked beneath it
# How it does:
#   1. Refuses early (nothing touched) if the commit is not on the branch or the repository is dirty or mid-operation.
#   2. Saves the branch tip under refs/backup/..., then checks the branch out for the duration of the rewrite.
#   3. Merge commit: refused. Root commit: the whole history is replayed with `rebase -i --root` and a generated todo
#      list (refused if the history has merges). Otherwise: `reset --hard <parent>` and cherry-pick the rest of the
#      range followed by the target.
#   4. A failed pick is aborted and the branch is put back from the backup ref. The original checkout is always restored.
# What data structure it uses: DAG (commit/parent links), List (replay sequence, oldest first)

import sys
from utils import repository, preconditions, backup
from utils.errors import (
    GitCommandError, MutationError, MergeCommitUnsupported, CrossMergeReorderUnsupported, ReplayConflict
)
from commands import checkout, cherry_pick, rebase


def run(args):
    repo_root = repository.find_repo_root()
    if not repo_root:
        print("fatal: not a git repository", file=sys.stderr)
        sys.exit(1)

    try:
        make_head(repo_root, args.branch, args.commit)
    except (MutationError, GitCommandError) as e:
        print(f"error: {e}", file=sys.stderr)
        sys.exit(1)
    print(f"Moved {args.branch} to {args.commit[:7]}")


def reorder_last(hashes, commit_hash): # Same order, with the target moved to the end
    return [h for h in hashes if h != commit_hash] + [commit_hash]


def make_head(repo_root, branch, commit):
    preconditions.ensure_reachable(repo_root, branch, commit)
    preconditions.ensure_clean_state(repo_root)
    commit_hash = repository.resolve_commit(repo_root, commit)

    backup_ref = backup.create_backup(repo_root, branch)

    with checkout.scoped_checkout(repo_root, branch):
        parents = repository.get_commit_parents(repo_root, commit_hash)
        if len(parents) > 1:
            raise MergeCommitUnsupported("Reordering merge commits is not supported.")
        if not parents:
            _reorder_from_root(repo_root, branch, commit_hash, backup_ref)
        else:
            _reorder_after_parent(repo_root, branch, commit_hash, parents[0], backup_ref)


def _reorder_from_root(repo_root, branch, commit_hash, backup_ref):
    if preconditions.has_merges_in_history(repo_root, repository.branch_ref(branch)):
        raise CrossMergeReorderUnsupported("Reordering from root across merge commits is not supported.")

    hashes = repository.list_commits(repo_root, repository.branch_ref(branch))
    if len(hashes) <= 1:
        return # nothing to reorder

    rebase.rebase_root(repo_root, branch, backup_ref, reorder_last(hashes, commit_hash))


def _reorder_after_parent(repo_root, branch, commit_hash, parent, backup_ref):
    commit_range = repository.list_commits(repo_root, f'{parent}..{repository.branch_ref(branch)}')
    sequence = reorder_last(commit_range, commit_hash)

    repository.reset_hard(repo_root, parent)
    for h in sequence:
        try:
            cherry_pick.replay(repo_root, h)
        except GitCommandError as e:
            cherry_pick.abort(repo_root)
            backup.restore_backup(repo_root, branch, backup_ref)
            raise ReplayConflict(f"Could not replay {h[:7]} onto {branch}. {e}") from e
