"""Call stack capture for failed assertions."""

import sys
from types import FrameType

from tap_harness.models.result import StackFrame


def _class_name(frame: FrameType) -> str | None:
    qualname = frame.f_code.co_qualname
    owner, _, _ = qualname.rpartition(".")
    if not owner or owner.endswith("<locals>"):
        return None
    return owner


def capture_stack(skip: int = 0) -> tuple[StackFrame, ...]:
    """Capture the current call stack, innermost first.

    Args:
        skip: Number of frames to drop above the caller of this function

    Returns:
        Frames from the caller (after skipping) out to the outermost frame

    """
    frames: list[StackFrame] = []
    frame: FrameType | None = sys._getframe(skip + 1)
    while frame is not None:
        frames.append(
            StackFrame(
                file=frame.f_code.co_filename,
                line=frame.f_lineno,
                function=frame.f_code.co_name,
                class_name=_class_name(frame),
            )
        )
        frame = frame.f_back
    return tuple(frames)
