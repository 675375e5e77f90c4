"""KR: 설정 모델 공통 기반. EN: Shared base for settings models."""

from __future__ import annotations

from typing import Sequence

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict


class RebedBaseModel(BaseModel):
    """Pydantic v2 기반 공통 모델."""

    model_config = ConfigDict(extra="ignore", validate_assignment=True)


__all__: Sequence[str] = ("RebedBaseModel", "Field")
