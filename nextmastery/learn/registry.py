"""
nextmastery/learn/registry.py
Immutable lesson index built from the static catalogue.

The registry answers the navigation questions every page asks:
which lesson lives at a path, which lessons share its chapter, and
which lessons come before and after it.
"""
from __future__ import annotations

import logging
from typing import Any, Dict, Iterator, List, Optional, Tuple

from nextmastery.learn.content import COURSES
from nextmastery.models import Chapter, Course, LessonEntry, Neighbors

logger = logging.getLogger(__name__)

LEARN_ROOT = "/learn"


def _lesson_from_dict(course_id: str, chapter_id: str, raw: Dict[str, Any]) -> LessonEntry:
    lesson_id = str(raw["id"])
    return LessonEntry(
        id=lesson_id,
        title=str(raw["title"]),
        path=f"{LEARN_ROOT}/{course_id}/{chapter_id}/{lesson_id}",
        order=int(raw["order"]),
        parent_chapter_id=chapter_id,
        course_id=course_id,
        description=str(raw.get("description", "")),
        topics=tuple(str(t) for t in raw.get("topics", [])),
    )


def _chapter_from_dict(course_id: str, raw: Dict[str, Any]) -> Chapter:
    chapter_id = str(raw["id"])
    lessons = [_lesson_from_dict(course_id, chapter_id, item) for item in raw.get("lessons", [])]

    seen: Dict[int, str] = {}
    for lesson in lessons:
        if lesson.order in seen:
            raise ValueError(
                f"Duplicate lesson order {lesson.order} in chapter '{course_id}/{chapter_id}' "
                f"({seen[lesson.order]} and {lesson.id})"
            )
        seen[lesson.order] = lesson.id

    lessons.sort(key=lambda item: item.order)
    return Chapter(
        id=chapter_id,
        title=str(raw["title"]),
        lessons=tuple(lessons),
        course_id=course_id,
        path=f"{LEARN_ROOT}/{course_id}/{chapter_id}",
        summary=str(raw.get("summary", "")),
        description=str(raw.get("description", "")),
    )


def _course_from_dict(raw: Dict[str, Any]) -> Course:
    course_id = str(raw["id"])
    chapters = [_chapter_from_dict(course_id, item) for item in raw.get("chapters", [])]

    chapter_ids = set()
    for chapter in chapters:
        if chapter.id in chapter_ids:
            raise ValueError(f"Duplicate chapter id '{chapter.id}' in course '{course_id}'")
        chapter_ids.add(chapter.id)

    return Course(
        id=course_id,
        title=str(raw["title"]),
        nav_title=str(raw.get("nav_title") or raw["title"]),
        icon=str(raw.get("icon", "")),
        path=f"{LEARN_ROOT}/{course_id}",
        chapters=tuple(chapters),
        summary=str(raw.get("summary", "")),
        description=str(raw.get("description", "")),
    )


class LessonRegistry:
    """
    Read-only index over courses, chapters and lessons.

    Built once per process and shared between requests; nothing in it
    is mutated after construction.
    """

    def __init__(self, courses: List[Course]):
        self.courses: Tuple[Course, ...] = tuple(courses)
        self._courses: Dict[str, Course] = {}
        self._chapters: Dict[Tuple[str, str], Chapter] = {}
        self._by_path: Dict[str, LessonEntry] = {}
        # lessons of each course flattened in chapter order; drives prev/next
        self._sequence: Dict[str, Tuple[LessonEntry, ...]] = {}
        self._position: Dict[str, int] = {}

        for course in self.courses:
            if course.id in self._courses:
                raise ValueError(f"Duplicate course id: {course.id}")
            self._courses[course.id] = course

            sequence: List[LessonEntry] = []
            for chapter in course.chapters:
                self._chapters[(course.id, chapter.id)] = chapter
                for lesson in chapter.lessons:
                    if lesson.path in self._by_path:
                        raise ValueError(f"Duplicate lesson path: {lesson.path}")
                    self._by_path[lesson.path] = lesson
                    self._position[lesson.path] = len(sequence)
                    sequence.append(lesson)
            self._sequence[course.id] = tuple(sequence)

    @classmethod
    def from_content(cls, raw_courses: List[Dict[str, Any]]) -> "LessonRegistry":
        return cls([_course_from_dict(raw) for raw in raw_courses])

    # ── Lookups ───────────────────────────────────────────────────────────────

    def __len__(self) -> int:
        return len(self._by_path)

    def __contains__(self, path: str) -> bool:
        return path in self._by_path

    def lessons(self) -> Iterator[LessonEntry]:
        """All lessons, course by course, in navigation order."""
        for course in self.courses:
            yield from self._sequence[course.id]

    def get_lesson(self, path: str) -> Optional[LessonEntry]:
        return self._by_path.get(path)

    def get_course(self, course_id: str) -> Optional[Course]:
        return self._courses.get(course_id)

    def get_chapter(self, course_id: str, chapter_id: str) -> Optional[Chapter]:
        return self._chapters.get((course_id, chapter_id))

    def chapter_of(self, lesson: LessonEntry) -> Chapter:
        return self._chapters[(lesson.course_id, lesson.parent_chapter_id)]

    # ── Navigation ────────────────────────────────────────────────────────────

    def resolve_neighbors(self, current_path: str) -> Neighbors:
        """
        Previous/next lesson and chapter siblings for a lesson path.

        Previous and next follow lesson order inside the chapter. At a
        chapter boundary they continue into the last lesson of the
        preceding chapter or the first lesson of the following one, but
        never leave the course. An unknown path yields an empty result.
        """
        lesson = self._by_path.get(current_path)
        if lesson is None:
            logger.debug("No lesson registered at %s", current_path)
            return Neighbors()

        sequence = self._sequence[lesson.course_id]
        idx = self._position[current_path]
        previous = sequence[idx - 1] if idx > 0 else None
        following = sequence[idx + 1] if idx + 1 < len(sequence) else None

        return Neighbors(
            previous=previous,
            next=following,
            siblings=self.chapter_of(lesson).lessons,
        )

    # ── Integrity ─────────────────────────────────────────────────────────────

    def check_links(self) -> List[str]:
        """Return a list of navigation problems; empty when consistent."""
        problems: List[str] = []
        for lesson in self.lessons():
            nav = self.resolve_neighbors(lesson.path)
            if not nav.found:
                problems.append(f"{lesson.path}: lesson does not resolve")
                continue
            if lesson not in nav.siblings:
                problems.append(f"{lesson.path}: missing from its own chapter")
            if nav.next is not None:
                if nav.next.path not in self._by_path:
                    problems.append(f"{lesson.path}: next link {nav.next.path} is broken")
                elif self.resolve_neighbors(nav.next.path).previous != lesson:
                    problems.append(
                        f"{lesson.path}: next link {nav.next.path} does not point back"
                    )
            if nav.previous is not None:
                if nav.previous.path not in self._by_path:
                    problems.append(f"{lesson.path}: previous link {nav.previous.path} is broken")
                elif self.resolve_neighbors(nav.previous.path).next != lesson:
                    problems.append(
                        f"{lesson.path}: previous link {nav.previous.path} does not point forward"
                    )
        return problems


# Process-wide catalogue index.
registry = LessonRegistry.from_content(COURSES)
