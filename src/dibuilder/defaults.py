from dibuilder.lock_mode import LockMode
from dibuilder.scope import Scope

ARGUMENT_PREFIX = "arg_"
"""Key prefix of injected arguments stored in a container."""

SINGLETON_PREFIX = "sing_"
"""Key prefix of memoized singleton holders stored in a container."""

RESERVED_PREFIXES: tuple[str, ...] = (ARGUMENT_PREFIX, SINGLETON_PREFIX)

DEFAULT_SCOPE = Scope.PROTOTYPE

DEFAULT_LOCK_MODE = LockMode.NONE
