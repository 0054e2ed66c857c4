"""Matcher for byte sequences with a hex-dump style difference report."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Sequence

from matchkit.reporting import ToNotMatch, is_set


def _diffs(want: Sequence[int], got: Sequence[int]) -> list[int]:
    result = []
    for i, w in enumerate(want):
        if i >= len(got):
            return result + [i]
        if w != got[i]:
            result.append(i)
    if len(got) > len(want):
        result.append(len(want))
    return result


@dataclass
class EqualBytesMatcher:
    """Matches a sequence of bytes against an expected sequence."""

    expected: Sequence[int]

    def match(self, got: Sequence[int], *args: Any) -> bool:
        return list(self.expected) == list(got)

    def on_test_failure(self, got: Sequence[int], *args: Any) -> list[str]:
        if is_set(args, ToNotMatch(True)):
            return ["unexpected: []byte should not be equal"]

        want = list(self.expected)
        got = list(got)
        diffs = _diffs(want, got)

        out = ["bytes not equal:"]
        diff = -1
        if len(want) != len(got):
            out.append(f"  different lengths: expected {len(want)}, got {len(got)}")
            diff = len(diffs) - 1
        if (diff == -1 and diffs) or len(diffs) > 1:
            out.append("  differences at: [" + ", ".join(map(str, diffs)) + "]")
            if diff == -1:
                diff = 0

        fd = diffs[diff]
        start = max(0, min(fd - 2, len(want) - 2, len(got) - 2))
        want_end = min(fd + 3, len(want))
        got_end = min(fd + 3, len(got))
        prefix = "" if start == 0 else "..."

        exp_parts = [prefix]
        got_parts = [prefix]
        markers = [" " * len(prefix)]
        for i in range(start, max(want_end, got_end)):
            if i < len(want):
                if i > start:
                    exp_parts.append(" ")
                    markers.append(" ")
                exp_parts.append(f"{want[i]:02x}")
                if i < len(got):
                    markers.append("**" if want[i] != got[i] else "  ")
                else:
                    markers.append("--")
            if i < len(got):
                if i > start:
                    got_parts.append(" ")
                    if i >= len(want):
                        markers.append(" ")
                got_parts.append(f"{got[i]:02x}")
                if i >= len(want):
                    markers.append("++")

        exp_parts.append("" if want_end == len(want) else "...")
        got_parts.append("" if got_end == len(got) else "...")
        if not want:
            exp_parts.append("<empty>")
        if not got:
            got_parts.append("<empty>")

        out.append("expected: " + "".join(exp_parts))
        out.append(("        | " + "".join(markers)).rstrip())
        out.append("got     : " + "".join(got_parts))
        return out