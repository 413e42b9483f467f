from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple


@dataclass(frozen=True)
class LessonEntry:
    id: str
    title: str
    path: str
    order: int
    parent_chapter_id: str
    course_id: str
    description: str = ""
    topics: Tuple[str, ...] = ()

    @property
    def chapter_path(self) -> str:
        return f"/learn/{self.course_id}/{self.parent_chapter_id}"

    def __str__(self):
        return self.title


@dataclass(frozen=True)
class Chapter:
    id: str
    title: str
    lessons: Tuple[LessonEntry, ...]
    course_id: str
    path: str
    summary: str = ""
    description: str = ""

    @property
    def label(self) -> str:
        """Short chapter label used in back links, e.g. 'B10'."""
        return self.id.upper()


@dataclass(frozen=True)
class Course:
    id: str
    title: str
    nav_title: str
    icon: str
    path: str
    chapters: Tuple[Chapter, ...]
    summary: str = ""
    description: str = ""

    @property
    def lesson_count(self) -> int:
        return sum(len(ch.lessons) for ch in self.chapters)


@dataclass(frozen=True)
class CodeSample:
    source: str
    language: str = "javascript"


@dataclass(frozen=True)
class Neighbors:
    """Result of a navigation lookup. Empty when the path is unknown."""
    previous: Optional[LessonEntry] = None
    next: Optional[LessonEntry] = None
    siblings: Tuple[LessonEntry, ...] = ()

    @property
    def found(self) -> bool:
        return bool(self.siblings)
