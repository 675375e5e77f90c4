"""구체화 설정 모델(KR). Materialization configuration models (EN)."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Literal

import yaml

from embedfs import ResourceStore

from .base import Field, RebedBaseModel

SourceKind = Literal["directory", "zip", "package"]
PolicyName = Literal["tree", "touch", "write", "patch", "create"]


class SourceConfig(RebedBaseModel):
    """임베디드 소스 위치를 보관 · Describe where the embedded tree lives."""

    kind: SourceKind = "directory"
    location: str = "."
    subdir: str = ""

    def open_store(self) -> ResourceStore:
        """설정에 맞는 저장소를 연다 · Open the matching read-only store."""

        if self.kind == "package":
            return ResourceStore.from_package(self.location, self.subdir)
        if self.kind == "zip":
            return ResourceStore.from_zip(Path(self.location).expanduser(), at=self.subdir)
        root = Path(self.location).expanduser()
        if self.subdir:
            root = root / self.subdir
        return ResourceStore.from_directory(root)


class RebedConfig(RebedBaseModel):
    """구체화 설정 전체를 표현 · Represent complete materialization settings."""

    source: SourceConfig = Field(default_factory=SourceConfig)
    destination: Path = Field(default_factory=Path.cwd)
    policy: PolicyName = "patch"
    log_file: Path = Field(default_factory=lambda: Path(".cache/rebed.log"))
    log_level: str = "INFO"

    @classmethod
    def from_file(cls, config_file: Path) -> "RebedConfig":
        """설정 파일에서 로드 · Load settings from config file."""

        data = (
            yaml.safe_load(config_file.read_text(encoding="utf-8"))
            if config_file.exists()
            else {}
        )
        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ValueError("configuration file must contain a mapping")
        return cls.model_validate(data)

    def to_dict(self) -> Dict[str, Any]:
        """사전을 반환 · Return dictionary representation."""

        return dict(self.model_dump())


__all__ = ["RebedConfig", "SourceConfig"]
