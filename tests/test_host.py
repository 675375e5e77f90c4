"""호스트 파일시스템 구현을 검증합니다./Validate the host filesystem implementation."""

from __future__ import annotations

from pathlib import Path

import pytest

from embedfs import HostStat, LocalFilesystem


def test_stat_reports_missing_and_kind(tmp_path: Path) -> None:
    """없음/파일/폴더를 구분합니다./Distinguish missing, file and folder."""

    host = LocalFilesystem()
    (tmp_path / "file.txt").write_text("x", encoding="utf-8")
    assert host.stat(str(tmp_path / "missing")) == HostStat(exists=False)
    assert host.stat(str(tmp_path / "file.txt")) == HostStat(exists=True, is_dir=False)
    assert host.stat(str(tmp_path)) == HostStat(exists=True, is_dir=True)


def test_stat_through_file_is_an_error(tmp_path: Path) -> None:
    """파일 아래 경로는 없음이 아니라 오류입니다./A path below a file is an error, not missing."""

    (tmp_path / "file.txt").write_text("x", encoding="utf-8")
    with pytest.raises(NotADirectoryError):
        LocalFilesystem().stat(str(tmp_path / "file.txt" / "child"))


def test_create_dir_all_and_file(tmp_path: Path) -> None:
    """중첩 폴더와 파일을 만듭니다./Create nested folders and a truncating file."""

    host = LocalFilesystem()
    target = tmp_path / "a" / "b" / "c"
    host.create_dir_all(str(target), 0o755)
    host.create_dir_all(str(target), 0o755)
    assert target.is_dir()
    (target / "f.bin").write_bytes(b"old content")
    with host.create_file(str(target / "f.bin")) as handle:
        handle.write(b"new")
    assert (target / "f.bin").read_bytes() == b"new"


def test_create_dir_all_over_file_fails(tmp_path: Path) -> None:
    """파일 위치에 폴더를 만들 수 없습니다./A folder cannot replace a file."""

    (tmp_path / "taken").write_text("x", encoding="utf-8")
    with pytest.raises(FileExistsError):
        LocalFilesystem().create_dir_all(str(tmp_path / "taken"), 0o755)
