"""읽기 전용 임베디드 저장소 구현./Read-only embedded store implementations."""

from __future__ import annotations

import errno
import importlib.resources
import io
import os
import zipfile
from pathlib import Path
from typing import TYPE_CHECKING, BinaryIO, Mapping, Protocol, Union

from .models import VirtualEntry
from .paths import split_virtual

if TYPE_CHECKING:
    from importlib.resources.abc import Traversable

_Tree = dict[str, Union["_Tree", bytes]]


class EmbeddedStore(Protocol):
    """임베디드 저장소가 제공해야 하는 기능./Capabilities an embedded store provides."""

    def list_children(self, path: str) -> list[VirtualEntry]:
        """직계 자식을 반환합니다./Return immediate children of ``path``."""

    def open_file(self, path: str) -> BinaryIO:
        """파일 바이트 스트림을 엽니다./Open a readable byte stream for ``path``."""


def _not_found(path: str) -> FileNotFoundError:
    return FileNotFoundError(errno.ENOENT, os.strerror(errno.ENOENT), path)


def _components(path: str) -> tuple[str, ...]:
    try:
        return split_virtual(path)
    except ValueError as exc:
        raise FileNotFoundError(errno.ENOENT, str(exc), path) from exc


class MappingStore:
    """메모리 매핑 기반 저장소./Store backed by an in-memory mapping.

    ``{"conf/app.yml": b"..."}`` 형태의 매핑을 받습니다. ``/``로 끝나는 키는
    빈 디렉터리를 선언하고, 중간 디렉터리는 자동으로 생성됩니다.
    Keys ending in ``/`` declare empty directories; parents are implicit.
    """

    def __init__(self, files: Mapping[str, bytes | str]) -> None:
        self._root: _Tree = {}
        for key, content in files.items():
            self._add(key, content)

    def _add(self, key: str, content: bytes | str) -> None:
        parts = split_virtual(key)
        declares_dir = key.replace("\\", "/").endswith("/")
        if not parts:
            if declares_dir:
                return
            raise ValueError(f"file key must name a path: {key!r}")
        node = self._root
        for part in parts if declares_dir else parts[:-1]:
            child = node.setdefault(part, {})
            if not isinstance(child, dict):
                raise ValueError(f"{key!r} nests under file {part!r}")
            node = child
        if declares_dir:
            return
        name = parts[-1]
        if isinstance(node.get(name), dict):
            raise ValueError(f"{key!r} is already a directory")
        node[name] = content.encode("utf-8") if isinstance(content, str) else bytes(content)

    def _lookup(self, path: str) -> _Tree | bytes:
        node: _Tree | bytes = self._root
        for part in _components(path):
            if not isinstance(node, dict):
                raise NotADirectoryError(errno.ENOTDIR, os.strerror(errno.ENOTDIR), path)
            child = node.get(part)
            if child is None:
                raise _not_found(path)
            node = child
        return node

    def list_children(self, path: str) -> list[VirtualEntry]:
        """직계 자식을 이름순으로 반환합니다./Return children sorted by name."""

        node = self._lookup(path)
        if not isinstance(node, dict):
            raise NotADirectoryError(errno.ENOTDIR, os.strerror(errno.ENOTDIR), path)
        return [VirtualEntry(name, isinstance(child, dict)) for name, child in sorted(node.items())]

    def open_file(self, path: str) -> BinaryIO:
        """파일 내용을 메모리 스트림으로 엽니다./Open file content as an in-memory stream."""

        node = self._lookup(path)
        if isinstance(node, dict):
            raise IsADirectoryError(errno.EISDIR, os.strerror(errno.EISDIR), path)
        return io.BytesIO(node)


class ResourceStore:
    """Traversable 기반 저장소./Store backed by an ``importlib.resources`` Traversable.

    패키지 데이터, ``zipfile.Path``, 일반 ``pathlib.Path`` 모두 사용할 수 있습니다.
    Works with package data, ``zipfile.Path`` and plain ``pathlib.Path`` roots.
    """

    def __init__(self, root: Traversable) -> None:
        self._root = root

    @property
    def filesystem_root(self) -> Path | None:
        """실제 폴더 위의 루트 경로./Root folder on disk, ``None`` for archives."""

        return self._root if isinstance(self._root, Path) else None

    @classmethod
    def from_package(cls, package: str, subdir: str = "") -> "ResourceStore":
        """패키지 리소스에서 생성합니다./Build from package resources."""

        root = importlib.resources.files(package)
        for part in split_virtual(subdir):
            root = root.joinpath(part)
        return cls(root)

    @classmethod
    def from_directory(cls, path: str | os.PathLike[str]) -> "ResourceStore":
        """디렉터리를 읽기 전용으로 노출합니다./Expose a directory read-only."""

        return cls(Path(path))

    @classmethod
    def from_zip(
        cls, archive: str | os.PathLike[str] | zipfile.ZipFile, at: str = ""
    ) -> "ResourceStore":
        """ZIP 아카이브에서 생성합니다./Build from a zip archive."""

        prefix = "/".join(split_virtual(at))
        return cls(zipfile.Path(archive, at=f"{prefix}/" if prefix else ""))

    def _resolve(self, path: str) -> Traversable:
        node = self._root
        for part in _components(path):
            node = node.joinpath(part)
        return node

    def list_children(self, path: str) -> list[VirtualEntry]:
        """직계 자식을 이름순으로 반환합니다./Return children sorted by name."""

        node = self._resolve(path)
        if not node.is_dir():
            if node.is_file():
                raise NotADirectoryError(errno.ENOTDIR, os.strerror(errno.ENOTDIR), path)
            raise _not_found(path)
        children = sorted(node.iterdir(), key=lambda child: child.name)
        return [VirtualEntry(child.name, child.is_dir()) for child in children]

    def open_file(self, path: str) -> BinaryIO:
        """리소스 파일을 바이너리로 엽니다./Open a resource file in binary mode."""

        node = self._resolve(path)
        if node.is_dir():
            raise IsADirectoryError(errno.EISDIR, os.strerror(errno.EISDIR), path)
        if not node.is_file():
            raise _not_found(path)
        return node.open("rb")


__all__ = ["EmbeddedStore", "MappingStore", "ResourceStore"]
