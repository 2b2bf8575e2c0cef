"""Core pubdocs data models."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timedelta
from types import MappingProxyType
from typing import List, Mapping, Optional, Tuple


@dataclass(frozen=True, slots=True)
class DocumentRecord:
    """A single indexed file."""

    id: str
    path: str
    name: str
    size: int
    mod_time: datetime
    full_path: str


def _empty_documents() -> Mapping[str, Tuple[DocumentRecord, ...]]:
    return MappingProxyType({})


@dataclass(frozen=True, slots=True)
class IndexSnapshot:
    """One complete scan result, never mutated after construction."""

    documents: Mapping[str, Tuple[DocumentRecord, ...]] = field(default_factory=_empty_documents)
    last_scan: Optional[datetime] = None

    @classmethod
    def build(
        cls, documents: Mapping[str, List[DocumentRecord]], last_scan: datetime
    ) -> "IndexSnapshot":
        frozen = {doc_id: tuple(records) for doc_id, records in documents.items()}
        return cls(documents=MappingProxyType(frozen), last_scan=last_scan)

    @property
    def unique_ids(self) -> int:
        return len(self.documents)

    @property
    def total_files(self) -> int:
        return sum(len(records) for records in self.documents.values())


@dataclass(slots=True)
class SearchResult:
    query: str
    results: List[DocumentRecord]
    count: int
    search_time: datetime


@dataclass(slots=True)
class IndexStats:
    unique_ids: int
    total_files: int
    last_scan: Optional[datetime]
    index_age: Optional[timedelta]


@dataclass(slots=True)
class FileEntry:
    """File or directory shown in a directory listing."""

    name: str
    relative_path: str
    is_dir: bool
    size: int
    mod_time: datetime
    extension: str = ""
    can_view: bool = False


@dataclass(slots=True)
class DirectoryListing:
    path: str
    files: List[FileEntry]
    directories: List[FileEntry]
    scan_time: datetime

    @property
    def total_files(self) -> int:
        return len(self.files)

    @property
    def total_dirs(self) -> int:
        return len(self.directories)


@dataclass(slots=True)
class BreadcrumbPart:
    name: str
    path: str
