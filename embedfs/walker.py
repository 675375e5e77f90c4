"""너비 우선 가상 트리 순회./Breadth-first virtual tree traversal."""

from __future__ import annotations

import logging
from typing import Callable

from .exceptions import InvalidEntryError, NoFolderFoundError
from .models import VirtualEntry
from .paths import is_basename, join_virtual, sanitize
from .stores import EmbeddedStore

Visitor = Callable[[str, VirtualEntry], None]

logger = logging.getLogger(__name__)


def _visit_entries(path: str, entries: list[VirtualEntry], visit: Visitor) -> None:
    for entry in entries:
        if not is_basename(entry.name):
            raise InvalidEntryError(path, entry.name)
        visit(path, entry)


def walk_level(store: EmbeddedStore, path: str, visit: Visitor) -> None:
    """한 디렉터리의 직계 항목에 ``visit``을 적용합니다./Apply ``visit`` to every entry of one directory.

    ``visit``의 첫 번째 인자는 탐색 중인 디렉터리 경로입니다. 재귀하지 않으며
    ``visit``이 발생시킨 예외는 즉시 그대로 전파됩니다.
    The first argument to ``visit`` is the directory being scanned. Does not
    recurse; the first exception raised by ``visit`` propagates unchanged.
    """

    path = sanitize(path)
    _visit_entries(path, store.list_children(path), visit)


def walk(store: EmbeddedStore, start_path: str, visit: Visitor) -> None:
    """``start_path``부터 모든 항목을 너비 우선으로 방문합니다./Visit every entry under ``start_path`` breadth-first.

    ``"."``을 넘기면 저장소 전체를 순회합니다. 각 디렉터리의 항목이 모두
    보고된 뒤에야 하위 디렉터리를 나열합니다.

    ``visit``이 발생시킨 예외는 감싸지 않고 그대로 전파되므로 호출자는 자신의
    센티널 예외를 ``is``로 비교할 수 있습니다. 시작 경로를 나열하지 못하면
    ``NoFolderFoundError``가 발생합니다.

    Passing ``"."`` walks the whole store. Exceptions from ``visit`` propagate
    verbatim; failing to list the start path raises ``NoFolderFoundError``.
    """

    folders: list[str] = []

    def queue_and_visit(dirpath: str, entry: VirtualEntry) -> None:
        if entry.is_dir:
            folders.append(join_virtual(dirpath, entry.name))
        visit(dirpath, entry)

    start = sanitize(start_path)
    try:
        entries = store.list_children(start)
    except OSError as exc:
        raise NoFolderFoundError(start, exc) from exc
    _visit_entries(start, entries, queue_and_visit)

    level = 0
    pending = len(folders)
    while pending:
        level += 1
        logger.debug(
            "walking level", extra={"target": start, "depth": level, "pending": pending}
        )
        # folders found while processing this batch land after index `pending`
        for folder in folders[:pending]:
            walk_level(store, folder, queue_and_visit)
        del folders[:pending]
        pending = len(folders)


__all__ = ["Visitor", "walk", "walk_level"]
