class KCommonError(Exception):
    """Base class of every error raised by kcommon"""


class InvalidArgumentError(KCommonError, ValueError):
    """Malformed input given to a public entry point"""


class InvariantViolationError(KCommonError, RuntimeError):
    """
    An internal invariant does not hold.
    This is a bug in kcommon, never a property of the input.
    """
