"""순회 전용 예외를 정의합니다./Define traversal specific exceptions."""

from __future__ import annotations

import errno


class WalkErrorBase(Exception):
    """순회 오류 기본 믹스인./Marker base for walker errors."""


class NoFolderFoundError(WalkErrorBase, FileNotFoundError):
    """시작 경로를 나열할 수 없음./Start path could not be listed."""

    def __init__(self, path: str, cause: BaseException) -> None:
        super().__init__(errno.ENOENT, f"no folder found: {cause}", path)
        self.path = path


class InvalidEntryError(WalkErrorBase, ValueError):
    """저장소가 잘못된 항목 이름을 보고함./Store reported a bad entry name."""

    def __init__(self, path: str, name: str) -> None:
        super().__init__(f"invalid entry name {name!r} under {path!r}")
        self.path = path
        self.name = name
