"""가상 경로 도우미./Virtual path helpers.

임베디드 저장소 경로는 항상 ``/`` 구분자를 사용합니다. 호스트 경로는
``os.path`` 규칙을 그대로 따릅니다.
Embedded store paths always use ``/``; host paths keep native semantics.
"""

from __future__ import annotations

import os
import posixpath

ROOT = "."


def sanitize(path: str) -> str:
    """윈도우 구분자를 ``/``로 바꿉니다./Convert backslashes to forward slashes."""

    return path.replace("\\", "/")


def join_virtual(dirpath: str, name: str) -> str:
    """디렉터리와 이름을 가상 경로로 결합합니다./Join a directory and a name into a virtual path."""

    return posixpath.normpath(sanitize(os.path.join(dirpath, name)))


def split_virtual(path: str) -> tuple[str, ...]:
    """가상 경로를 구성 요소로 나눕니다./Split a virtual path into components.

    루트(``"."`` 또는 ``""``)는 빈 튜플입니다. ``..`` 로 루트를 벗어나는
    경로는 거부합니다.
    The root is an empty tuple; paths escaping the root raise ``ValueError``.
    """

    normalized = posixpath.normpath(sanitize(path) or ROOT)
    if normalized == ROOT:
        return ()
    parts = tuple(part for part in normalized.split("/") if part)
    if normalized.startswith("/") or ".." in parts:
        raise ValueError(f"virtual path escapes root: {path!r}")
    return parts


def is_basename(name: str) -> bool:
    """단일 경로 요소인지 확인합니다./Return True for a plain path component."""

    if name in ("", ".", ".."):
        return False
    return "/" not in name and "\\" not in name


__all__ = ["ROOT", "is_basename", "join_virtual", "sanitize", "split_virtual"]
