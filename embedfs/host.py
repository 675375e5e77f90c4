"""호스트 파일시스템 추상화./Host filesystem abstraction."""

from __future__ import annotations

import os
import stat
from typing import BinaryIO, Protocol

from .models import HostStat


class HostFilesystem(Protocol):
    """쓰기 가능한 대상 파일시스템./Writable target filesystem."""

    def create_dir_all(self, path: str, mode: int) -> None:
        """누락된 상위 디렉터리까지 생성합니다./Create a directory and missing parents."""

    def create_file(self, path: str) -> BinaryIO:
        """파일을 생성하거나 비웁니다./Create or truncate a file for writing."""

    def stat(self, path: str) -> HostStat:
        """존재 여부를 확인합니다./Report whether ``path`` exists.

        "없음"만 ``HostStat(exists=False)``로 보고하고 그 외 오류는 전파합니다.
        Only "not found" maps to ``exists=False``; other errors propagate.
        """


class LocalFilesystem:
    """운영체제 파일시스템 구현./Operating system filesystem implementation."""

    def create_dir_all(self, path: str, mode: int) -> None:
        os.makedirs(path, mode=mode, exist_ok=True)

    def create_file(self, path: str) -> BinaryIO:
        return open(path, "wb")

    def stat(self, path: str) -> HostStat:
        try:
            result = os.stat(path)
        except FileNotFoundError:
            return HostStat(exists=False)
        return HostStat(exists=True, is_dir=stat.S_ISDIR(result.st_mode))


__all__ = ["HostFilesystem", "LocalFilesystem"]
