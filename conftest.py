'''KR: 테스트 공용 픽스처. EN: Shared pytest fixtures.'''

from __future__ import annotations

from pathlib import Path

import pytest

from embedfs import MappingStore
from tests.fixtures.virtual_fs import SAMPLE_FILES


@pytest.fixture
def sample_files() -> dict[str, str]:
    '''임베디드 샘플 트리를 정의한다(KR). Define the embedded sample tree (EN).'''

    return dict(SAMPLE_FILES)


@pytest.fixture
def sample_store(sample_files: dict[str, str]) -> MappingStore:
    '''샘플 트리를 메모리 저장소로 제공한다(KR). Provide the sample tree as a mapping store (EN).'''

    return MappingStore(sample_files)


@pytest.fixture
def destination(tmp_path: Path) -> Path:
    '''아직 존재하지 않는 대상 루트(KR). Destination root that does not exist yet (EN).'''

    return tmp_path / 'out' / 'nested'
