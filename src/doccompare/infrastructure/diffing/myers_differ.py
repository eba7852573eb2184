"""Line-level text differ based on Myers' O(ND) shortest edit script."""

import logging
import re
import time
from collections.abc import Sequence

from doccompare.application.dto.diff_config import DiffConfig, TextDiff
from doccompare.domain.value_objects import DiffSegment, SegmentKind

logger = logging.getLogger(__name__)

# A line keeps its terminating "\n" so joined segments reproduce the input byte for byte.
_LINE_RE = re.compile(r"[^\n]*\n|[^\n]+")


def split_lines(text: str) -> list[str]:
    """Split text into lines, keeping line terminators."""
    return _LINE_RE.findall(text)


def _common_prefix(a: Sequence[str], b: Sequence[str]) -> int:
    n = min(len(a), len(b))
    i = 0
    while i < n and a[i] == b[i]:
        i += 1
    return i


def _common_suffix(a: Sequence[str], b: Sequence[str], skip: int) -> int:
    n = min(len(a), len(b)) - skip
    i = 0
    while i < n and a[len(a) - 1 - i] == b[len(b) - 1 - i]:
        i += 1
    return i


def _shortest_edit(
    a: Sequence[int],
    b: Sequence[int],
    limit: int,
    deadline: float | None,
) -> list[tuple[SegmentKind, int]] | None:
    """Return the edit script aligning a to b, or None when a bound is hit.

    Each entry is (kind, index); index points into a for equal/delete and
    into b for insert. Diagonal moves are taken greedily, and on ties the
    rightward (delete) move wins, so removals come before additions.
    """
    n, m = len(a), len(b)
    offset = limit + 1
    v = [0] * (2 * limit + 3)
    trace: list[list[int]] = []
    found = -1
    for d in range(limit + 1):
        if deadline is not None and time.monotonic() > deadline:
            return None
        # snapshot of k in [-d-1, d+1] before step d
        trace.append(v[offset - d - 1 : offset + d + 2])
        for k in range(-d, d + 1, 2):
            if k == -d or (k != d and v[offset + k - 1] < v[offset + k + 1]):
                x = v[offset + k + 1]
            else:
                x = v[offset + k - 1] + 1
            y = x - k
            while x < n and y < m and a[x] == b[y]:
                x += 1
                y += 1
            v[offset + k] = x
            if x >= n and y >= m:
                found = d
                break
        if found >= 0:
            break
    if found < 0:
        return None

    edits: list[tuple[SegmentKind, int]] = []
    x, y = n, m
    for d in range(found, -1, -1):
        snap = trace[d]
        k = x - y
        if k == -d or (k != d and snap[k - 1 + d + 1] < snap[k + 1 + d + 1]):
            prev_k = k + 1
        else:
            prev_k = k - 1
        prev_x = snap[prev_k + d + 1]
        prev_y = prev_x - prev_k
        while x > prev_x and y > prev_y:
            x -= 1
            y -= 1
            edits.append((SegmentKind.EQUAL, x))
        if d > 0:
            if x == prev_x:
                edits.append((SegmentKind.INSERT, prev_y))
            else:
                edits.append((SegmentKind.DELETE, prev_x))
        x, y = prev_x, prev_y
    edits.reverse()
    return edits


class _SegmentBuilder:
    """Collects line edits into merged segments, deletions before insertions per hunk."""

    def __init__(self) -> None:
        self.segments: list[DiffSegment] = []
        self._deleted: list[str] = []
        self._inserted: list[str] = []

    def _append(self, kind: SegmentKind, text: str) -> None:
        if not text:
            return
        if self.segments and self.segments[-1].kind == kind:
            last = self.segments.pop()
            text = last.text + text
        self.segments.append(DiffSegment(text=text, kind=kind))

    def flush(self) -> None:
        self._append(SegmentKind.DELETE, "".join(self._deleted))
        self._append(SegmentKind.INSERT, "".join(self._inserted))
        self._deleted.clear()
        self._inserted.clear()

    def equal(self, lines: Sequence[str]) -> None:
        if not lines:
            return
        self.flush()
        self._append(SegmentKind.EQUAL, "".join(lines))

    def delete(self, line: str) -> None:
        self._deleted.append(line)

    def insert(self, line: str) -> None:
        self._inserted.append(line)

    def finish(self) -> list[DiffSegment]:
        self.flush()
        return self.segments


def _deadline(config: DiffConfig) -> float | None:
    if config.timeout_seconds is None:
        return None
    return time.monotonic() + config.timeout_seconds


def diff_text_detailed(old: str, new: str, config: DiffConfig | None = None) -> TextDiff:
    """Diff two texts line by line, reporting whether the bounded fallback kicked in."""
    config = config or DiffConfig()
    if old == new:
        segments = [DiffSegment(text=old, kind=SegmentKind.EQUAL)] if old else []
        return TextDiff(segments=segments)

    a = split_lines(old)
    b = split_lines(new)
    prefix = _common_prefix(a, b)
    suffix = _common_suffix(a, b, prefix)
    mid_a = a[prefix : len(a) - suffix]
    mid_b = b[prefix : len(b) - suffix]

    builder = _SegmentBuilder()
    builder.equal(a[:prefix])

    truncated = False
    if mid_a and mid_b:
        # Compare interned ids instead of strings inside the hot loop.
        ids: dict[str, int] = {}
        ia = [ids.setdefault(line, len(ids)) for line in mid_a]
        ib = [ids.setdefault(line, len(ids)) for line in mid_b]
        limit = len(ia) + len(ib)
        if config.max_edit_distance is not None:
            limit = min(limit, config.max_edit_distance)
        edits = _shortest_edit(ia, ib, limit, _deadline(config))
        if edits is None:
            truncated = True
            logger.warning(
                "Diff bound reached (%d vs %d lines), falling back to coarse diff",
                len(mid_a),
                len(mid_b),
            )
            for line in mid_a:
                builder.delete(line)
            for line in mid_b:
                builder.insert(line)
        else:
            for kind, index in edits:
                if kind == SegmentKind.EQUAL:
                    builder.equal([mid_a[index]])
                elif kind == SegmentKind.DELETE:
                    builder.delete(mid_a[index])
                else:
                    builder.insert(mid_b[index])
    else:
        for line in mid_a:
            builder.delete(line)
        for line in mid_b:
            builder.insert(line)

    builder.equal(a[len(a) - suffix :] if suffix else [])
    return TextDiff(segments=builder.finish(), truncated=truncated)


def diff_text(old: str, new: str, config: DiffConfig | None = None) -> list[DiffSegment]:
    """Diff two texts line by line into equal/insert/delete segments."""
    return diff_text_detailed(old, new, config).segments


class MyersTextDiffer:
    """TextDiffer using Myers' algorithm with a bounded coarse fallback."""

    def diff(self, old: str, new: str, config: DiffConfig) -> TextDiff:
        """Diff old against new."""
        return diff_text_detailed(old, new, config)
