"""
Operation Scripts for dynarray.

A script is a list of one-line operations such as ``push_back 3`` or
``set_at 5 x``. Replaying a script applies each operation in order to
one DynamicArray and records the result and resulting state per step.

Value tokens:
    None / nil   -> None
    integer      -> int
    decimal      -> float
    anything else -> str (quote it to keep spaces)
"""

from __future__ import annotations

import shlex
from dataclasses import dataclass, field
from typing import Any, Callable, Iterable, Optional

from ..log import get_logger
from ..sequence import DynamicArray
from ..validation import SequenceError

logger = get_logger("cli.script")


class ScriptError(ValueError):
    """Raised when an operation line cannot be parsed."""

    def __init__(self, line: str, reason: str):
        self.line = line
        self.reason = reason
        super().__init__(f"{reason}: {line!r}")


# =============================================================================
# OPERATION TABLE
# =============================================================================

# name -> (argument kinds, applier); "i" is an index, "v" is a value
OPERATIONS: dict[str, tuple[str, Callable[..., Any]]] = {
    "push_back": ("v", lambda seq, value: seq.push_back(value)),
    "push_front": ("v", lambda seq, value: seq.push_front(value)),
    "pop_back": ("", lambda seq: seq.pop_back()),
    "pop_front": ("", lambda seq: seq.pop_front()),
    "set_at": ("iv", lambda seq, index, value: seq.set_at(index, value)),
    "at": ("i", lambda seq, index: seq.at(index)),
    "remove": ("v", lambda seq, value: seq.remove(value)),
    "insert": ("iv", lambda seq, index, value: seq.insert(index, value)),
    "delete_at": ("i", lambda seq, index: seq.delete_at(index)),
    "clear": ("", lambda seq: seq.clear()),
}


# =============================================================================
# PARSING
# =============================================================================

def parse_value(token: str) -> Any:
    """Convert a value token to None, int, float or str."""
    if token in ("None", "nil"):
        return None
    try:
        return int(token)
    except ValueError:
        pass
    try:
        return float(token)
    except ValueError:
        return token


@dataclass(frozen=True)
class Operation:
    """One parsed script line."""
    name: str
    args: tuple[Any, ...] = ()
    source: str = ""

    def apply(self, seq: DynamicArray) -> Any:
        _, applier = OPERATIONS[self.name]
        return applier(seq, *self.args)


def parse_operation(line: str) -> Operation:
    """
    Parse ``name [args...]`` into an Operation.

    Raises:
        ScriptError: For unknown names, wrong arity, or a bad index
    """
    try:
        tokens = shlex.split(line)
    except ValueError as e:
        raise ScriptError(line, str(e)) from None

    if not tokens:
        raise ScriptError(line, "empty operation")

    name, raw_args = tokens[0], tokens[1:]
    if name not in OPERATIONS:
        raise ScriptError(line, f"unknown operation {name!r}")

    kinds, _ = OPERATIONS[name]
    if len(raw_args) != len(kinds):
        raise ScriptError(
            line, f"{name} takes {len(kinds)} argument(s), got {len(raw_args)}"
        )

    args = []
    for kind, token in zip(kinds, raw_args):
        if kind == "i":
            try:
                args.append(int(token))
            except ValueError:
                raise ScriptError(line, f"index must be an integer, got {token!r}") from None
        else:
            args.append(parse_value(token))

    return Operation(name=name, args=tuple(args), source=line.strip())


def parse_script(lines: Iterable[str]) -> list[Operation]:
    """Parse lines, skipping blanks and ``#`` comments."""
    operations = []
    for line in lines:
        stripped = line.strip()
        if not stripped or stripped.startswith("#"):
            continue
        operations.append(parse_operation(stripped))
    return operations


# =============================================================================
# REPLAY
# =============================================================================

@dataclass
class ScriptStep:
    """Outcome of one applied operation."""
    operation: Operation
    result: Any
    state: str

    def format_result(self) -> str:
        # Chaining operations return the container itself
        if isinstance(self.result, DynamicArray):
            return "ok"
        return repr(self.result)


@dataclass
class ScriptResult:
    """Every step of a replay plus the final container."""
    sequence: DynamicArray
    steps: list[ScriptStep] = field(default_factory=list)
    error: Optional[SequenceError] = None

    @property
    def succeeded(self) -> bool:
        return self.error is None


def run_script(
    operations: Iterable[Operation],
    sequence: Optional[DynamicArray] = None,
) -> ScriptResult:
    """
    Apply operations in order.

    Replay stops at the first SequenceError, which is kept on the
    result rather than raised.
    """
    if sequence is None:
        sequence = DynamicArray()
    result = ScriptResult(sequence=sequence)

    for operation in operations:
        try:
            value = operation.apply(sequence)
        except SequenceError as e:
            logger.debug("replay stopped at %r: %s", operation.source, e)
            result.error = e
            break
        result.steps.append(
            ScriptStep(operation=operation, result=value, state=sequence.describe())
        )

    return result


# =============================================================================
# DEMO SCRIPT
# =============================================================================

DEMO_SCRIPT = """
# Build [3, 7, 7, 2] from the tail
push_back 3
push_back 7
push_back 7
push_back 2
# Remove only the first 7
remove 7
# Head operations shift every element
push_front 1
pop_front
# Writing past the end leaves gap slots
set_at 6 x
at 4
pop_back
pop_back
"""
