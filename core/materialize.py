"""임베디드 트리 구체화 정책 구현(KR). Embedded tree materialization policies (EN).

모든 정책은 ``walk(store, ".", visitor)``로 동작하며 방문자가 디렉터리와
파일에 대해 무엇을 할지만 다릅니다.
Every policy drives ``walk(store, ".", visitor)``; they differ only in what
the visitor does for directories and files.
"""

from __future__ import annotations

import logging
import os
import shutil
from pathlib import Path
from typing import Callable, Dict

from embedfs import (
    EmbeddedStore,
    HostFilesystem,
    LocalFilesystem,
    VirtualEntry,
    join_virtual,
    sanitize,
    walk,
)
from embedfs.paths import ROOT

from .errors import AlreadyExistsError

# rwxr-xr-x
FOLDER_MODE = 0o755

OutputPath = str | os.PathLike[str]
Policy = Callable[..., None]

logger = logging.getLogger(__name__)


def _target(output_path: OutputPath, embed_path: str) -> str:
    return os.path.join(os.fspath(output_path), embed_path)


def check_destination(store: EmbeddedStore, output_path: OutputPath) -> None:
    """대상이 소스 폴더 안에 있지 않은지 확인 · Refuse a destination inside a directory-backed source.

    소스와 같은 폴더에 쓰면 원본이 잘리고, 소스 안쪽에 쓰면 새로 만든 폴더가
    다음 레벨에서 다시 나열되어 순회가 끝나지 않습니다.
    Writing onto the source truncates it; writing inside it makes every level
    list the folders the previous level created.
    """

    root = getattr(store, "filesystem_root", None)
    if root is None:
        return
    source = Path(root).resolve()
    target = Path(os.fspath(output_path)).resolve()
    if target == source or source in target.parents:
        raise ValueError(f"destination {target} is inside embedded source {source}")


def _prepare(
    policy: str, store: EmbeddedStore, output_path: OutputPath, host: HostFilesystem
) -> None:
    check_destination(store, output_path)
    host.create_dir_all(os.fspath(output_path), FOLDER_MODE)
    logger.info("materializing", extra={"policy": policy, "target": os.fspath(output_path)})


def copy_embedded_file(
    store: EmbeddedStore, embed_path: str, path: str, host: HostFilesystem
) -> None:
    """임베디드 파일 내용을 호스트 파일로 복사 · Copy an embedded file onto the host."""

    with store.open_file(sanitize(embed_path)) as source:
        with host.create_file(path) as sink:
            shutil.copyfileobj(source, sink)


def structure(
    store: EmbeddedStore, output_path: OutputPath, *, host: HostFilesystem | None = None
) -> None:
    """디렉터리 구조만 생성 · Create the directory structure only."""

    host = host or LocalFilesystem()

    def visit(dirpath: str, entry: VirtualEntry) -> None:
        if entry.is_dir:
            fullpath = _target(output_path, join_virtual(dirpath, entry.name))
            host.create_dir_all(fullpath, FOLDER_MODE)
            logger.debug("created folder", extra={"policy": "tree", "target": fullpath})

    _prepare("tree", store, output_path, host)
    walk(store, ROOT, visit)


def stub(
    store: EmbeddedStore, output_path: OutputPath, *, host: HostFilesystem | None = None
) -> None:
    """구조와 빈 파일을 생성, 기존 파일은 유지 · Create folders and empty files, keep existing files."""

    host = host or LocalFilesystem()

    def visit(dirpath: str, entry: VirtualEntry) -> None:
        fullpath = _target(output_path, join_virtual(dirpath, entry.name))
        if entry.is_dir:
            host.create_dir_all(fullpath, FOLDER_MODE)
            return
        if host.stat(fullpath).exists:
            logger.debug("kept existing", extra={"policy": "touch", "target": fullpath})
            return
        host.create_file(fullpath).close()
        logger.debug("touched", extra={"policy": "touch", "target": fullpath})

    _prepare("touch", store, output_path, host)
    walk(store, ROOT, visit)


def overwrite(
    store: EmbeddedStore, output_path: OutputPath, *, host: HostFilesystem | None = None
) -> None:
    """모든 파일을 임베디드 내용으로 덮어씀 · Write every file, replacing existing content."""

    host = host or LocalFilesystem()

    def visit(dirpath: str, entry: VirtualEntry) -> None:
        embed_path = join_virtual(dirpath, entry.name)
        fullpath = _target(output_path, embed_path)
        if entry.is_dir:
            host.create_dir_all(fullpath, FOLDER_MODE)
            return
        copy_embedded_file(store, embed_path, fullpath, host)
        logger.debug("wrote", extra={"policy": "write", "target": fullpath})

    _prepare("write", store, output_path, host)
    walk(store, ROOT, visit)


def conservative_create(
    store: EmbeddedStore, output_path: OutputPath, *, host: HostFilesystem | None = None
) -> None:
    """누락된 파일만 생성, 기존 파일은 유지 · Create missing files, never touch existing ones."""

    host = host or LocalFilesystem()

    def visit(dirpath: str, entry: VirtualEntry) -> None:
        embed_path = join_virtual(dirpath, entry.name)
        fullpath = _target(output_path, embed_path)
        if entry.is_dir:
            host.create_dir_all(fullpath, FOLDER_MODE)
            return
        if host.stat(fullpath).exists:
            logger.debug("kept existing", extra={"policy": "patch", "target": fullpath})
            return
        copy_embedded_file(store, embed_path, fullpath, host)
        logger.debug("patched", extra={"policy": "patch", "target": fullpath})

    _prepare("patch", store, output_path, host)
    walk(store, ROOT, visit)


def preflight_create(
    store: EmbeddedStore, output_path: OutputPath, *, host: HostFilesystem | None = None
) -> None:
    """충돌이 없을 때만 트리를 생성 · Materialize only when no file would collide.

    먼저 모든 파일 경로의 충돌 여부를 검사하고, 하나라도 있으면
    ``AlreadyExistsError``를 발생시킵니다. 디렉터리는 충돌로 보지 않습니다.
    Every file target is checked first; any existing host entry raises
    ``AlreadyExistsError`` before anything is written. Folders never conflict.
    """

    host = host or LocalFilesystem()

    def check(dirpath: str, entry: VirtualEntry) -> None:
        if entry.is_dir:
            return
        fullpath = _target(output_path, join_virtual(dirpath, entry.name))
        if host.stat(fullpath).exists:
            logger.info("conflict", extra={"policy": "create", "target": fullpath})
            raise AlreadyExistsError(fullpath)

    check_destination(store, output_path)
    walk(store, ROOT, check)
    conservative_create(store, output_path, host=host)


POLICIES: Dict[str, Policy] = {
    "tree": structure,
    "touch": stub,
    "write": overwrite,
    "patch": conservative_create,
    "create": preflight_create,
}


def materialize(
    policy: str,
    store: EmbeddedStore,
    output_path: OutputPath,
    *,
    host: HostFilesystem | None = None,
) -> None:
    """이름으로 정책을 실행 · Run a policy by its name."""

    try:
        runner = POLICIES[policy]
    except KeyError:
        raise ValueError(f"unknown policy: {policy!r}") from None
    runner(store, output_path, host=host)


__all__ = [
    "FOLDER_MODE",
    "POLICIES",
    "check_destination",
    "conservative_create",
    "copy_embedded_file",
    "materialize",
    "overwrite",
    "preflight_create",
    "structure",
    "stub",
]
