from .value_set import *
from .errors import *

from .version import __version__, VERSION_STRING
from . import errors, hashing, value_set

from .hashing import HASH_MULTIPLIER, content_hash
