"""
Failure results for the translation and compilation stages.

The translator and the closure builder never raise for an expression they
cannot handle. They return a falsy Failure instead, which the caller checks
and passes along:

    result = translate(node)
    if isinstance(result, Failure):
        return result

Only the top-level lambdify() turns a Failure into an exception.
"""


class Failure:
    """
    A stage failure carrying a human-readable reason.

    Failures are falsy. Note that a successful result can be falsy too
    (the literal 0), so test with isinstance() rather than truthiness.
    """

    __slots__ = ('reason',)

    stage = "failure"

    def __init__(self, reason: str):
        self.reason = reason

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.reason!r})"

    def __str__(self) -> str:
        return f"{self.stage}: {self.reason}"

    def __eq__(self, other):
        if type(other) is type(self):
            return self.reason == other.reason
        return False

    def __hash__(self):
        return hash((type(self), self.reason))


class NotTranslatable(Failure):
    """A node has no translation rule (unknown leaf, malformed rational, ...)."""

    __slots__ = ()

    stage = "translation"


class CompilationFailed(Failure):
    """A target expression could not be turned into a callable."""

    __slots__ = ()

    stage = "compilation"
