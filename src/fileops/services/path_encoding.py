from __future__ import annotations

"""Multi-string encoding for SHFILEOPSTRUCTW.pFrom / pTo.

Each path is followed by a NUL and the list ends with one more NUL:
["a", "b"] -> "a\\0b\\0\\0". An empty entry or an embedded NUL would end the
list early, so both are rejected.
"""

from typing import Iterable, List

NUL = "\0"


def check_path(path: str) -> bool:
    return isinstance(path, str) and path != "" and NUL not in path


def encode_path_list(paths: Iterable[str]) -> str:
    out = []
    for p in paths:
        if not check_path(p):
            raise ValueError(f"cannot encode path {p!r}")
        out.append(p + NUL)
    out.append(NUL)
    return "".join(out)


def decode_path_list(encoded: str) -> List[str]:
    """Inverse of encode_path_list, reading entries up to the empty one."""
    paths: List[str] = []
    start = 0
    while True:
        end = encoded.find(NUL, start)
        if end == -1:
            raise ValueError("path list is not NUL terminated")
        if end == start:
            return paths
        paths.append(encoded[start:end])
        start = end + 1
