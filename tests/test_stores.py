"""임베디드 저장소 구현을 검증합니다./Validate embedded store implementations."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

from embedfs import MappingStore, ResourceStore, VirtualEntry
from embedfs.paths import join_virtual, sanitize, split_virtual
from tests.fixtures.virtual_fs import (
    SAMPLE_WALK_ORDER,
    collect_entries,
    create_virtual_tree,
    create_zip_tree,
)


@pytest.fixture()
def directory_store(tmp_path: Path, sample_files: dict[str, str]) -> ResourceStore:
    """디렉터리 기반 저장소./Directory-backed store."""

    create_virtual_tree(tmp_path / "embedded", sample_files)
    return ResourceStore.from_directory(tmp_path / "embedded")


@pytest.fixture()
def zip_store(tmp_path: Path, sample_files: dict[str, str]) -> ResourceStore:
    """ZIP 기반 저장소./Zip-backed store."""

    return ResourceStore.from_zip(create_zip_tree(tmp_path / "bundle.zip", sample_files))


def test_sanitize_and_join() -> None:
    """경로 정규화 규칙을 확인합니다./Check path normalization rules."""

    assert sanitize("a\\b\\c.txt") == "a/b/c.txt"
    assert join_virtual(".", "a") == "a"
    assert join_virtual("a/b", "c") == "a/b/c"
    assert split_virtual(".") == ()
    assert split_virtual("") == ()
    assert split_virtual("a\\b/") == ("a", "b")
    with pytest.raises(ValueError):
        split_virtual("../etc")
    with pytest.raises(ValueError):
        split_virtual("/abs")


def test_mapping_store_lists_sorted_children(sample_store: MappingStore) -> None:
    """자식을 이름순으로 나열합니다./Children are listed by name."""

    assert sample_store.list_children(".") == [
        VirtualEntry("README.md", False),
        VirtualEntry("config", True),
        VirtualEntry("data", True),
        VirtualEntry("templates", True),
    ]
    assert sample_store.list_children("data") == []


def test_mapping_store_open_file(sample_store: MappingStore) -> None:
    """파일 바이트를 읽습니다./Read file bytes."""

    with sample_store.open_file("config/profiles/dev.yml") as handle:
        assert handle.read() == b"debug: true\n"


def test_mapping_store_errors(sample_store: MappingStore) -> None:
    """없는 경로와 종류 불일치를 구분합니다./Distinguish missing paths from kind mismatches."""

    with pytest.raises(FileNotFoundError):
        sample_store.list_children("missing")
    with pytest.raises(FileNotFoundError):
        sample_store.list_children("../outside")
    with pytest.raises(NotADirectoryError):
        sample_store.list_children("README.md")
    with pytest.raises(IsADirectoryError):
        sample_store.open_file("config")
    with pytest.raises(FileNotFoundError):
        sample_store.open_file("config/nope.yml")


def test_mapping_store_rejects_conflicting_keys() -> None:
    """파일과 디렉터리가 겹치면 거부합니다./Reject keys that are both file and folder."""

    with pytest.raises(ValueError):
        MappingStore({"a": b"file", "a/b": b"nested"})
    with pytest.raises(ValueError):
        MappingStore({"a/b": b"nested", "a": b"file"})
    with pytest.raises(ValueError):
        MappingStore({"../escape": b"x"})


def test_mapping_store_accepts_native_keys() -> None:
    """역슬래시 키를 정규화합니다./Backslash keys are normalized."""

    store = MappingStore({"a\\b.txt": "x", "c\\": ""})
    assert store.list_children(".") == [VirtualEntry("a", True), VirtualEntry("c", True)]
    assert store.open_file("a/b.txt").read() == b"x"


def test_directory_store_matches_mapping(directory_store: ResourceStore) -> None:
    """디렉터리 저장소도 같은 순서를 보고합니다./Directory store reports the same order."""

    assert collect_entries(directory_store) == SAMPLE_WALK_ORDER
    with directory_store.open_file("config/app.yml") as handle:
        assert handle.read() == b"name: demo\n"


def test_zip_store_matches_mapping(zip_store: ResourceStore) -> None:
    """ZIP 저장소도 같은 순서를 보고합니다./Zip store reports the same order."""

    assert collect_entries(zip_store) == SAMPLE_WALK_ORDER
    with zip_store.open_file("templates/base.html") as handle:
        assert handle.read() == b"<html></html>\n"


def test_zip_store_with_prefix(tmp_path: Path, sample_files: dict[str, str]) -> None:
    """아카이브 하위 경로를 루트로 씁니다./Use an archive sub-path as the root."""

    archive = create_zip_tree(tmp_path / "bundle.zip", sample_files)
    store = ResourceStore.from_zip(archive, at="config")
    assert [name for name, _ in collect_entries(store)] == [
        "app.yml",
        "profiles",
        "profiles/dev.yml",
        "profiles/prod.yml",
    ]


def test_resource_store_errors(directory_store: ResourceStore) -> None:
    """리소스 저장소 오류 종류를 확인합니다./Check resource store error kinds."""

    with pytest.raises(FileNotFoundError):
        directory_store.list_children("missing")
    with pytest.raises(NotADirectoryError):
        directory_store.list_children("README.md")
    with pytest.raises(IsADirectoryError):
        directory_store.open_file("config")
    with pytest.raises(FileNotFoundError):
        directory_store.open_file("config/none.yml")
    with pytest.raises(FileNotFoundError):
        directory_store.list_children("../")


def test_resource_store_from_package(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch, sample_files: dict[str, str]
) -> None:
    """패키지 데이터에서 저장소를 만듭니다./Build a store from package data."""

    package = tmp_path / "site" / "bundled_defaults"
    package.mkdir(parents=True)
    (package / "__init__.py").write_text("", encoding="utf-8")
    create_virtual_tree(package / "skeleton", sample_files)
    monkeypatch.syspath_prepend(str(tmp_path / "site"))
    monkeypatch.delitem(sys.modules, "bundled_defaults", raising=False)

    store = ResourceStore.from_package("bundled_defaults", "skeleton")
    assert collect_entries(store) == SAMPLE_WALK_ORDER
