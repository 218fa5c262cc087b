# Unit tests for utils/preconditions.py

import pytest
import os
import sys

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', '..', 'gitdnd-project'))

from utils import preconditions, repository
from utils.errors import NotReachable, DirtyWorkingState, OperationInProgress


class TestEnsureReachable:
    # Tests for preconditions.ensure_reachable()

    def test_ancestor_passes(self, feature_repo):
        repo_root, hashes = feature_repo
        preconditions.ensure_reachable(repo_root, 'feature', hashes['B'])

    def test_tip_itself_passes(self, feature_repo):
        repo_root, hashes = feature_repo
        preconditions.ensure_reachable(repo_root, 'feature', hashes['D'])

    def test_commit_on_other_branch(self, feature_repo):
        # C is on feature only, so main cannot reach it
        repo_root, hashes = feature_repo
        with pytest.raises(NotReachable, match='not reachable from main'):
            preconditions.ensure_reachable(repo_root, 'main', hashes['C'])

    def test_unknown_hash_reported_the_same_way(self, feature_repo):
        repo_root, _ = feature_repo
        with pytest.raises(NotReachable):
            preconditions.ensure_reachable(repo_root, 'feature', '0123456789abcdef')


class TestEnsureCleanState:
    # Tests for preconditions.ensure_clean_state()

    def test_clean_repo_passes(self, feature_repo):
        repo_root, _ = feature_repo
        preconditions.ensure_clean_state(repo_root)

    def test_untracked_files_are_allowed(self, feature_repo):
        repo_root, _ = feature_repo
        with open(os.path.join(repo_root, 'scratch.txt'), 'w') as f:
            f.write('not tracked')
        preconditions.ensure_clean_state(repo_root)

    def test_modified_tracked_file(self, feature_repo):
        repo_root, _ = feature_repo
        with open(os.path.join(repo_root, 'a.txt'), 'w') as f:
            f.write('changed\n')
        with pytest.raises(DirtyWorkingState):
            preconditions.ensure_clean_state(repo_root)

    def test_staged_change(self, feature_repo, git):
        repo_root, _ = feature_repo
        with open(os.path.join(repo_root, 'new.txt'), 'w') as f:
            f.write('staged\n')
        git(repo_root, 'add', 'new.txt')
        with pytest.raises(DirtyWorkingState):
            preconditions.ensure_clean_state(repo_root)

    @pytest.mark.parametrize('marker, is_dir', [
        ('rebase-merge', True),
        ('rebase-apply', True),
        ('MERGE_HEAD', False),
        ('CHERRY_PICK_HEAD', False),
        ('REVERT_HEAD', False),
    ])
    def test_operation_in_progress(self, feature_repo, marker, is_dir):
        repo_root, hashes = feature_repo
        path = os.path.join(repository.get_git_dir(repo_root), marker)
        if is_dir:
            os.makedirs(path)
        else:
            with open(path, 'w') as f:
                f.write(hashes['A'] + '\n')
        with pytest.raises(OperationInProgress):
            preconditions.ensure_clean_state(repo_root)


class TestHasMergesInHistory:
    # Tests for preconditions.has_merges_in_history()

    def test_linear_history(self, feature_repo):
        repo_root, _ = feature_repo
        assert not preconditions.has_merges_in_history(repo_root, 'feature')

    def test_history_with_merge(self, merge_repo):
        repo_root, _ = merge_repo
        assert preconditions.has_merges_in_history(repo_root, 'feature')

    def test_scans_the_given_branch_not_the_checkout(self, merge_repo, git):
        # The checkout is on main (linear) but feature has a merge
        repo_root, _ = merge_repo
        git(repo_root, 'checkout', '-q', 'main')
        assert preconditions.has_merges_in_history(repo_root, 'feature')
        assert not preconditions.has_merges_in_history(repo_root, 'main')
