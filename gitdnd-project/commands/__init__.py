# This file makes the 'commands' directory a Python package
# Importing command modules from here

from . import checkout
from . import cherry_pick
from . import rebase
from . import branch
from . import log
from . import config
from . import make_head
from . import delete
