"""Parse context and the backtracking trial wrapper.

Every production has the signature::

    def parse_foo(cursor: Cursor, context: ParseContext) -> ParseResult[Foo] | None

``None`` is a grammar failure: the production could not match at ``cursor``.
Because cursors are immutable, the caller still holds the cursor it passed
in, so rolling back after a failed trial costs nothing. Productions record
why they failed on the shared FailureTracker so the top level can report
the furthest point the grammar reached.

Fatal conditions (nesting depth exceeded) are raised as exceptions and are
never absorbed by a trial.
"""

from collections.abc import Callable
from dataclasses import dataclass, field

from jparse.constants import MAX_DEPTH
from jparse.diagnostics import DiagnosticCode, ErrorTemplate, JsonNestingDepthError
from jparse.syntax.cursor import Cursor, ParseError, ParseResult

__all__ = ["FailureTracker", "ParseContext", "Production", "attempt"]


@dataclass(slots=True)
class FailureTracker:
    """Furthest grammar failure seen during one parse.

    Mutable: one tracker is shared by every ParseContext derived
    for a single document, and never across documents.

    Attributes:
        furthest: Failure at the highest source offset (later wins on ties)
        trials: Number of trial executions, for debug logging
    """

    furthest: ParseError | None = None
    trials: int = 0

    def record(self, error: ParseError) -> None:
        """Keep ``error`` if it is at least as far into the source as the current one."""
        if self.furthest is None or error.cursor.pos >= self.furthest.cursor.pos:
            self.furthest = error


@dataclass(frozen=True, slots=True)
class ParseContext:
    """Explicit context for parsing operations.

    Replaces thread-local state with explicit parameter passing for:
    - Thread safety without global state
    - Independent concurrent parses
    - Easier testing (no state reset needed)

    Attributes:
        max_nesting_depth: Maximum allowed array/object nesting
        current_depth: Current nesting depth (0 = top level)
        failures: Failure record shared by all contexts of one parse
    """

    max_nesting_depth: int = MAX_DEPTH
    current_depth: int = 0
    failures: FailureTracker = field(default_factory=FailureTracker)

    def is_depth_exceeded(self) -> bool:
        """Check if maximum nesting depth has been exceeded."""
        return self.current_depth >= self.max_nesting_depth

    def enter_nested(self, cursor: Cursor) -> "ParseContext":
        """Create new context one level deeper, for the array/object at ``cursor``.

        Raises:
            JsonNestingDepthError: If the new level would exceed max_nesting_depth
        """
        if self.is_depth_exceeded():
            raise JsonNestingDepthError(
                ErrorTemplate.nesting_depth_exceeded(self.max_nesting_depth, cursor.pos)
            )
        return ParseContext(
            max_nesting_depth=self.max_nesting_depth,
            current_depth=self.current_depth + 1,
            failures=self.failures,
        )

    def fail(
        self,
        message: str,
        cursor: Cursor,
        expected: tuple[str, ...] = (),
        code: DiagnosticCode = DiagnosticCode.UNEXPECTED_CHARACTER,
    ) -> None:
        """Record a grammar failure at ``cursor`` and return None.

        Lets productions write ``return context.fail(...)``.
        """
        self.failures.record(ParseError(message, cursor, expected, code))


type Production[T] = Callable[[Cursor, ParseContext], ParseResult[T] | None]


def attempt[T](
    production: Production[T], cursor: Cursor, context: ParseContext
) -> ParseResult[T] | None:
    """Run a production as a backtracking trial.

    Commit: on success the returned ParseResult carries the advanced cursor.
    Rollback: on grammar failure returns None and the caller continues from
    ``cursor``, which no production can have modified.

    Only grammar failure (the None return) is absorbed. Exceptions such as
    JsonNestingDepthError propagate unchanged.

    Args:
        production: Grammar rule to try
        cursor: Position to try it at
        context: Current parse context

    Returns:
        The production's result, or None if it did not match
    """
    context.failures.trials += 1
    return production(cursor, context)
