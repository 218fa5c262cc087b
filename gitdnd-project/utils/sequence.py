# What it does: Lets `git rebase -i` run without a human: the todo list is computed up front and handed to git in place of the interactive editor
# How it does: The todo is written to a private temp directory. GIT_SEQUENCE_EDITOR is set to a one-line Python program that copies that file over the one git asks to be edited. The temp directory is removed when the context exits, whatever happened
# What data structure it uses: List (ordered commit hashes -> one `pick` line each)

import os
import shlex
import shutil
import sys
import tempfile
from contextlib import contextmanager

# git invokes the editor as `<editor> <path-of-todo-file>`
_COPY_PROGRAM = 'import shutil, sys; shutil.copyfile(sys.argv[1], sys.argv[2])'


def render_todo(hashes): # One `pick <hash>` line per commit, oldest first
    return ''.join(f"pick {h}\n" for h in hashes)


@contextmanager
def sequence_editor(todo):
    """Yield environment overrides that make git use `todo` as the rebase instruction list.

    Any context manager factory with this shape (todo text in, env dict out)
    can be passed to rebase.rebase_root in its place.
    """
    tmp_dir = tempfile.mkdtemp(prefix='git-dnd-')
    try:
        todo_path = os.path.join(tmp_dir, 'todo.txt')
        with open(todo_path, 'w', encoding='utf-8', newline='\n') as f:
            f.write(todo)
        editor = shlex.join([sys.executable, '-c', _COPY_PROGRAM, todo_path])
        yield {'GIT_SEQUENCE_EDITOR': editor}
    finally:
        shutil.rmtree(tmp_dir, ignore_errors=True)
