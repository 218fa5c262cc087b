# What it does: Runs a single external command (almost always `git`) inside a repository and hands back its output
# How it does: `subprocess.run` with captured text output. Environment overrides are layered over the current process environment. A non-zero exit becomes a `GitCommandError` carrying stderr, so callers never have to inspect return codes
# What data structure it uses: Lists for the argument vector, a Dictionary for the environment

import os
import subprocess
from .errors import GitCommandError


def run(command, cwd, env=None): # Runs `command` (a list) in `cwd`, returns stdout or raises GitCommandError
    full_env = None
    if env:
        full_env = dict(os.environ)
        full_env.update(env)
    try:
        result = subprocess.run(
            command,
            cwd=cwd,
            env=full_env,
            capture_output=True,
            text=True,
        )
    except OSError as e:
        raise GitCommandError(command, None, f"could not run '{command[0]}': {e}") from e

    if result.returncode != 0:
        message = result.stderr.strip() or result.stdout.strip()
        if not message:
            message = f"'{' '.join(command)}' exited with status {result.returncode}"
        raise GitCommandError(command, result.returncode, message, result.stdout, result.stderr)
    return result.stdout


def run_git(cwd, *args, env=None): # Shorthand for run(['git', ...])
    return run(['git', *args], cwd, env=env)


def succeeds(cwd, *args): # Runs a git query whose answer is its exit status
    try:
        run_git(cwd, *args)
        return True
    except GitCommandError:
        return False


def lines(output): # Splits command output into non-empty, stripped lines
    return [line.strip() for line in output.splitlines() if line.strip()]
