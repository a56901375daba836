## nameless — Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘

from .types import *
from .errors import *
from .context import Context, empty
from .dialects import DIALECTS, ARITH, UNTYPED, SIMPLEBOOL
from .runtime import Runtime

_RUNTIME = Runtime()

def runtime_for(dialect) -> Runtime:
    return Runtime(dialect)

def __getattr__(name):
    return getattr(_RUNTIME, name)
