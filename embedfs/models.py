"""가상 파일시스템 데이터 모델./Virtual filesystem data models."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True, frozen=True)
class VirtualEntry:
    """임베디드 트리의 단일 노드./A single node of the embedded tree."""

    name: str
    is_dir: bool

    @property
    def kind(self) -> str:
        """항목 종류 문자열./Return ``"dir"`` or ``"file"``."""

        return "dir" if self.is_dir else "file"


@dataclass(slots=True, frozen=True)
class HostStat:
    """호스트 경로 존재 정보./Existence info for a host path."""

    exists: bool
    is_dir: bool = False
