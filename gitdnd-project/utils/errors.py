# What it does: Defines the exceptions raised while querying or rewriting a branch's history
# How it does: `GitCommandError` wraps a failed git process. Every refusal or failed mutation is a `MutationError` subclass whose message is ready to show to the user as-is
# What data structure it uses: A small class hierarchy (the taxonomy), so callers can catch the whole family or one case


class GitCommandError(Exception):
    # Raised by the runner when a command exits with a non-zero status
    def __init__(self, command, returncode, message, stdout='', stderr=''):
        super().__init__(message)
        self.command = command
        self.returncode = returncode
        self.message = message
        self.stdout = stdout
        self.stderr = stderr


class MutationError(Exception):
    """Base class for every failure reported by make-head and delete."""


class NotReachable(MutationError):
    pass


class DirtyWorkingState(MutationError):
    pass


class OperationInProgress(MutationError):
    pass


class MergeCommitUnsupported(MutationError):
    pass


class CrossMergeReorderUnsupported(MutationError):
    pass


class CrossMergeDeleteUnsupported(MutationError):
    pass


class CannotDeleteOnlyCommit(MutationError):
    pass


class ReplayConflict(MutationError):
    # A cherry-pick or rebase step failed for a reason other than becoming empty
    pass


class RewriteFailed(MutationError):
    # The synthesized `rebase -i --root` failed
    pass


class BackupFailed(MutationError):
    # Only raised when backup.required is set
    pass
