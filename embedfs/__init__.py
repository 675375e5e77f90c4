"""임베디드 가상 파일시스템 API./Embedded virtual filesystem API."""

from __future__ import annotations

from .exceptions import InvalidEntryError, NoFolderFoundError, WalkErrorBase
from .host import HostFilesystem, LocalFilesystem
from .models import HostStat, VirtualEntry
from .paths import join_virtual, sanitize, split_virtual
from .stores import EmbeddedStore, MappingStore, ResourceStore
from .walker import Visitor, walk, walk_level

__all__ = [
    "EmbeddedStore",
    "HostFilesystem",
    "HostStat",
    "InvalidEntryError",
    "LocalFilesystem",
    "MappingStore",
    "NoFolderFoundError",
    "ResourceStore",
    "VirtualEntry",
    "Visitor",
    "WalkErrorBase",
    "join_virtual",
    "sanitize",
    "split_virtual",
    "walk",
    "walk_level",
]
