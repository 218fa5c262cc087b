# Shared pytest fixtures for gitdnd tests

import pytest
import os
import sys
import shutil
import subprocess
import tempfile

# Add gitdnd-project to path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'gitdnd-project'))

from utils import runner


def _git(repo_root, *args):
    result = subprocess.run(['git', *args], cwd=repo_root, capture_output=True, text=True, check=True)
    return result.stdout.strip()


def _commit_file(repo_root, path, content, message):
    # Writes (or overwrites) a file, commits it and returns the new commit hash
    full_path = os.path.join(repo_root, path)
    with open(full_path, 'w') as f:
        f.write(content)
    _git(repo_root, 'add', path)
    _git(repo_root, 'commit', '-q', '-m', message)
    return _git(repo_root, 'rev-parse', 'HEAD')


def _remove_file(repo_root, path, message):
    _git(repo_root, 'rm', '-q', path)
    _git(repo_root, 'commit', '-q', '-m', message)
    return _git(repo_root, 'rev-parse', 'HEAD')


@pytest.fixture
def git():
    if shutil.which('git') is None:
        pytest.skip("git executable not available")
    return _git


@pytest.fixture
def commit_file(git):
    return _commit_file


@pytest.fixture
def remove_file(git):
    return _remove_file


@pytest.fixture
def temp_dir():
    # Creates a temporary directory that is cleaned up after the test
    # Also saves/restores cwd to prevent issues when tests change directories
    original_dir = os.getcwd()
    tmp = os.path.realpath(tempfile.mkdtemp())
    yield tmp
    os.chdir(original_dir)
    shutil.rmtree(tmp, ignore_errors=True)


@pytest.fixture
def temp_repo(temp_dir, git):
    # An empty git repository on branch 'main' with a local identity configured
    git(temp_dir, 'init', '-q')
    git(temp_dir, 'symbolic-ref', 'HEAD', 'refs/heads/main')
    git(temp_dir, 'config', 'user.name', 'Test User')
    git(temp_dir, 'config', 'user.email', 'test@example.com')
    git(temp_dir, 'config', 'commit.gpgsign', 'false')
    git(temp_dir, 'config', 'core.autocrlf', 'false')
    return temp_dir


@pytest.fixture
def repo_with_commit(temp_repo):
    # Creates a repo with one committed file on 'main'
    commit_hash = _commit_file(temp_repo, 'README.md', '# Test Project\n', 'Initial commit')
    return temp_repo, commit_hash


@pytest.fixture
def feature_repo(temp_repo, git):
    # feature = A(root) -> B -> C -> D, each commit adding its own file; 'main' stays at A
    # The returned repo has 'feature' checked out
    hashes = {}
    hashes['A'] = _commit_file(temp_repo, 'a.txt', 'a\n', 'A')
    git(temp_repo, 'checkout', '-q', '-b', 'feature')
    hashes['B'] = _commit_file(temp_repo, 'b.txt', 'b\n', 'B')
    hashes['C'] = _commit_file(temp_repo, 'c.txt', 'c\n', 'C')
    hashes['D'] = _commit_file(temp_repo, 'd.txt', 'd\n', 'D')
    return temp_repo, hashes


@pytest.fixture
def merge_repo(temp_repo, git):
    # feature = A(root) -> B -> M, where M merges side (A -> S) with --no-ff
    hashes = {}
    hashes['A'] = _commit_file(temp_repo, 'a.txt', 'a\n', 'A')
    git(temp_repo, 'checkout', '-q', '-b', 'side')
    hashes['S'] = _commit_file(temp_repo, 's.txt', 's\n', 'S')
    git(temp_repo, 'checkout', '-q', 'main')
    git(temp_repo, 'checkout', '-q', '-b', 'feature')
    hashes['B'] = _commit_file(temp_repo, 'b.txt', 'b\n', 'B')
    git(temp_repo, 'merge', '-q', '--no-ff', '--no-edit', 'side')
    hashes['M'] = git(temp_repo, 'rev-parse', 'HEAD')
    return temp_repo, hashes


@pytest.fixture
def command_trace(monkeypatch):
    # Records every command gitdnd runs, in order
    calls = []
    original_run = runner.run

    def recording_run(command, cwd, env=None):
        calls.append(list(command))
        return original_run(command, cwd, env=env)

    monkeypatch.setattr(runner, 'run', recording_run)
    return calls


def subjects(repo_root, ref):
    # Commit subjects reachable from ref, oldest first
    output = _git(repo_root, 'log', '--reverse', '--format=%s', ref)
    return output.splitlines()


@pytest.fixture
def history():
    return subjects


# Mock args object for command functions
class MockArgs:
    def __init__(self, **kwargs):
        for key, value in kwargs.items():
            setattr(self, key, value)


@pytest.fixture
def mock_args():
    return MockArgs
