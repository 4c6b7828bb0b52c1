"""
Exceptions raised by the lens algebra.

Absence inside optional() and exhaustion inside list() are ordinary
outcomes and never surface as one of these.
"""


class LensError(Exception):
    """Base class for errors raised by optics itself."""


class MutatingLensError(LensError, TypeError):
    """
    A multi-result lift was requested on a lens that mutates its target.
    Use SelfLens.list(cloner) instead.
    """


class LazyLensError(LensError, TypeError):
    """
    optional() or list() was requested on a lens over a lazy stream,
    whose foci would only be visited after the lift returned.
    """


class ProbeLimitError(LensError, RuntimeError):
    """list() probed more indices than the configured limit allows."""


class FocusMismatchError(LensError, RuntimeError):
    """
    The commit pass of a mutating optional() visited a different number
    of foci than its read pass.
    """
