"""TAP (Test Anything Protocol, version 12) rendering and parsing."""

import logging
import re
from collections.abc import Sequence
from typing import Any

from pydantic_core import to_json

from tap_harness.models.result import ResultLog, StackFrame
from tap_harness.models.summary import ResultSummary

log = logging.getLogger(__name__)

PLAN_RE = re.compile(r"^1\.\.(\d+)$", re.MULTILINE)
NOT_OK_RE = re.compile(r"^not\s+ok.*?$", re.MULTILINE)
OK_RE = re.compile(r"^ok.*?$", re.MULTILINE)
TODO_RE = re.compile(r"#\s+TODO", re.IGNORECASE)
SKIP_RE = re.compile(r"#\s+SKIP", re.IGNORECASE)

FRAME_KEYS = ("file", "line", "function", "class")


def encode_json(value: Any) -> str:
    """Encode a value as compact JSON.

    Unknown types are encoded as their repr() string. Values that cannot be
    encoded at all, such as self-referencing containers, render as repr().
    """
    try:
        return to_json(value, fallback=repr).decode()
    except ValueError as e:
        log.debug("Cannot encode %s as JSON: %s", type(value).__name__, e)
        return repr(value)


def render_directive(entry: ResultLog) -> str | None:
    """Pick the directive text for a result line, if any."""
    directive = entry.directive
    if isinstance(directive, str):
        return directive
    if isinstance(directive, BaseException):
        return f"{type(directive).__name__}: {directive}"
    if directive is not None:
        return encode_json(directive)
    if entry.skipped:
        return f"SKIP {entry.reason}"
    if entry.todo:
        return f"TODO {entry.reason}"
    return None


def render_frame(frame: StackFrame, depth: int = 1) -> str:
    """Render one stack frame as indented TAP comment lines."""
    indent = "  " * depth
    values = {
        "file": frame.file,
        "line": frame.line,
        "function": frame.function,
        "class": frame.class_name,
    }
    return "".join(
        f"#{indent}{key}: {values[key]}\n"
        for key in FRAME_KEYS
        if values[key] is not None
    )


def render_trace(entry: ResultLog) -> str:
    """Render the stack trace diagnostics of a failed result."""
    if not entry.stack_trace:
        return ""
    if entry.full_trace:
        return "".join(
            render_frame(frame, depth)
            for depth, frame in enumerate(entry.stack_trace, start=1)
        )
    if (frame := entry.reported_frame) is None:
        return ""
    return render_frame(frame)


def render_comparison(entry: ResultLog) -> str:
    """Render the expected/got/op block of a failed comparison."""
    if (details := entry.comparison) is None:
        return ""
    if details.stringify:
        got, want = encode_json(details.got), encode_json(details.wanted)
    else:
        got, want = str(details.got), str(details.wanted)
    out = f"#  expected: {want}\n#       got: {got}\n"
    if details.comparator is not None:
        out += f"#        op: {details.comparator}\n"
    return out


def render_log(entry: ResultLog, number: int) -> str:
    """Render a result as a TAP line followed by its diagnostics."""
    out = f"{'ok' if entry.ok else 'not ok'} {number}"
    if entry.description is not None:
        out += f" - {entry.description}"
    if (directive := render_directive(entry)) is not None:
        out += f" # {directive}"
    out += "\n"
    return out + render_trace(entry) + render_comparison(entry)


def render_diagnostic(message: Any) -> str:
    """Render a raw diagnostic: strings verbatim, anything else as JSON."""
    text = message if isinstance(message, str) else encode_json(message)
    return text if text.endswith("\n") else f"{text}\n"


def render_footer(*, planned: int, ran: int, failed: int, skipped: int) -> str:
    """Render the trailing skip, failure and plan-mismatch comments."""
    out = ""
    if skipped:
        out += f"# Skipped {skipped} tests\n"
    if failed:
        out += f"# Failed {failed} {'tests' if failed > 1 else 'test'}"
        if planned:
            out += f" out of {planned}"
        out += "\n"
    if planned > 0 and planned != ran:
        out += f"# Looks like you planned '{planned}' but ran '{ran}' tests\n"
    return out


def render_tap(
    entries: Sequence[ResultLog | str],
    *,
    planned: int,
    ran: int,
    failed: int,
    skipped: int,
) -> str:
    """Render a complete TAP document."""
    out = f"1..{planned}\n" if planned > 0 else ""
    number = 0
    for entry in entries:
        if isinstance(entry, ResultLog):
            number += 1
            out += render_log(entry, number)
        else:
            out += entry
    return out + render_footer(
        planned=planned, ran=ran, failed=failed, skipped=skipped
    )


class TAPParser:
    """Recovers summary counts from TAP text.

    Parsing is lenient: text that is not TAP simply yields zero counts.
    """

    def parse(self, tap: str) -> ResultSummary:
        """Parse a TAP document into a ResultSummary."""
        planned = ran = failed = skipped = todo = 0

        if (plan := PLAN_RE.search(tap)) is not None:
            planned = int(plan.group(1))

        for line in NOT_OK_RE.findall(tap):
            ran += 1
            failed += 1
            if TODO_RE.search(line):
                todo += 1

        for line in OK_RE.findall(tap):
            ran += 1
            if SKIP_RE.search(line):
                skipped += 1

        summary = ResultSummary(
            planned=planned, ran=ran, failed=failed, skipped=skipped, todo=todo
        )
        log.debug("Parsed TAP summary: %s", summary)
        return summary


def parse_tap(tap: str) -> ResultSummary:
    """Parse a TAP document into a ResultSummary."""
    return TAPParser().parse(tap)
