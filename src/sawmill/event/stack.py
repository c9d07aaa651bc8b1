"""Call-stack capture for events.

Frames are resolved when the event is built, not lazily, so a captured
stack stays valid after the calling frames have returned.

"""

from __future__ import annotations

import functools
import linecache
import logging
from dataclasses import dataclass
from pathlib import Path
from types import FrameType

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class StackFrame:
    """One resolved entry of a captured call stack.

    Attributes:
        pc: Bytecode offset of the instruction being executed.
        file: Source file path as recorded by the code object.
        line: Line number currently executing.
        function: Fully qualified name, ``module.Qualified.name``.
        func: Bare function name, without module or class prefix.

    """

    pc: int
    file: str
    line: int
    function: str
    func: str

    def source(self) -> str | None:
        """Return the source line of this frame, or ``None`` if unreadable."""
        if self.line <= 0:
            return None
        text = linecache.getline(self.file, self.line)
        if not text:
            return None
        return text.rstrip("\r\n")


def frame_from(frame: FrameType) -> StackFrame | None:
    """Resolve a live frame, or ``None`` when it carries no usable code info."""
    code = frame.f_code
    lineno = frame.f_lineno
    if not code.co_filename or lineno is None:
        logger.debug("unresolvable frame %r", code)
        return None
    module = frame.f_globals.get("__name__", "")
    qualname = getattr(code, "co_qualname", code.co_name)
    return StackFrame(
        pc=frame.f_lasti,
        file=code.co_filename,
        line=lineno,
        function=f"{module}.{qualname}" if module else qualname,
        func=code.co_name,
    )


@functools.lru_cache(maxsize=1024)
def _in_tree(filename: str, root: Path) -> bool:
    # Pseudo-files such as "<string>" or "<frozen ...>" never belong to a tree.
    if filename.startswith("<"):
        return False
    return Path(filename).resolve().is_relative_to(root)


def capture_stack(
    start: FrameType | None,
    *,
    repo_path: Path,
    max_depth: int = 100,
) -> tuple[StackFrame | None, ...]:
    """Capture the stack from ``start`` outward, innermost frame first.

    Leading frames whose file lies under ``repo_path`` are skipped, so the
    first entry is the first frame outside the library.  At most
    ``max_depth`` frames are recorded after that point.  A frame that cannot
    be resolved is kept as ``None`` so positions stay meaningful.

    """
    frame = start
    while frame is not None and _in_tree(frame.f_code.co_filename, repo_path):
        frame = frame.f_back

    frames: list[StackFrame | None] = []
    while frame is not None and len(frames) < max_depth:
        frames.append(frame_from(frame))
        frame = frame.f_back
    return tuple(frames)
