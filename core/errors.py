"""구체화 예외 정의(KR). Materialization exception definitions (EN)."""

from __future__ import annotations

import errno


class AlreadyExistsError(FileExistsError):
    """대상에 같은 경로의 파일이 이미 있음 · Host already has a file at an embedded path."""

    def __init__(self, path: str) -> None:
        super().__init__(errno.EEXIST, "file already exists", path)
        self.path = path


__all__ = ["AlreadyExistsError"]
