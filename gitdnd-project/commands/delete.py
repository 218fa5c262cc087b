# The command: gitdnd delete <branch> <commit>
# What it does: Removes one commit from a branch's history, keeping the changes of every other commit
# How it does:
#   1. Same refusals as make-head (not on the branch, dirty tree, operation in progress), then a backup ref.
#   2. Merge commit: refused.
#   3. Root commit: the history is replayed from the root without its first commit (refused if it has merges,
#      or if the root is the only commit).
#   4. Tip commit: the branch simply moves to the parent (`reset --hard` if checked out, `update-ref` if not).
#   5. Any other commit: `git rebase --onto <parent> <commit> [<branch>]`.
#   6. A failed rewrite is aborted and the branch is put back from the backup ref.
# What data structure it uses: DAG (commit/parent links), List (replay sequence, oldest first)

import sys
from utils import repository, preconditions, backup
from utils.errors import (
    GitCommandError, MutationError, MergeCommitUnsupported, CrossMergeDeleteUnsupported, CannotDeleteOnlyCommit
)
from commands import checkout, rebase


def run(args):
    repo_root = repository.find_repo_root()
    if not repo_root:
        print("fatal: not a git repository", file=sys.stderr)
        sys.exit(1)

    try:
        delete_commit(repo_root, args.branch, args.commit)
    except (MutationError, GitCommandError) as e:
        print(f"error: {e}", file=sys.stderr)
        sys.exit(1)
    print(f"Deleted commit {args.commit[:7]} from {args.branch}")


def delete_commit(repo_root, branch, commit):
    preconditions.ensure_reachable(repo_root, branch, commit)
    preconditions.ensure_clean_state(repo_root)
    commit_hash = repository.resolve_commit(repo_root, commit)

    parents = repository.get_commit_parents(repo_root, commit_hash)
    backup_ref = backup.create_backup(repo_root, branch)

    if len(parents) > 1:
        raise MergeCommitUnsupported("Deleting merge commits is not supported.")
    if not parents:
        _delete_root(repo_root, branch, backup_ref)
        return

    parent = parents[0]
    tip = repository.get_branch_commit(repo_root, branch)
    is_current = repository.get_current_branch(repo_root) == branch

    if tip == commit_hash:
        # Fast path: nothing to replay
        if is_current:
            repository.reset_hard(repo_root, parent)
        else:
            repository.update_ref(repo_root, repository.branch_ref(branch), parent, tip)
        return

    # `rebase ... <branch>` checks the branch out and leaves it there
    with checkout.preserved_checkout(repo_root):
        rebase.rebase_onto(repo_root, branch, backup_ref, parent, commit_hash, name_branch=not is_current)


def _delete_root(repo_root, branch, backup_ref):
    if preconditions.has_merges_in_history(repo_root, repository.branch_ref(branch)):
        raise CrossMergeDeleteUnsupported("Deleting the root across merge commits is not supported.")

    with checkout.scoped_checkout(repo_root, branch):
        hashes = repository.list_commits(repo_root, repository.branch_ref(branch))
        if len(hashes) <= 1:
            raise CannotDeleteOnlyCommit("Cannot delete the only commit on the branch. Delete the branch instead.")
        rebase.rebase_root(repo_root, branch, backup_ref, hashes[1:])
