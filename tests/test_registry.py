"""
tests/test_registry.py
Lesson catalogue integrity and navigation lookups.

Run with:
    pytest tests/test_registry.py -v
"""

from __future__ import annotations

import copy

import pytest

from nextmastery.learn.content import COURSES
from nextmastery.learn.registry import LessonRegistry, registry
from nextmastery.models import Neighbors


def _lesson(order, title=None):
    return {
        "id": f"lesson-{order}",
        "order": order,
        "title": title or f"Lesson {order}",
        "description": "",
        "topics": [],
    }


def _small_catalogue():
    return [
        {
            "id": "app-router",
            "title": "App Router Mastery",
            "nav_title": "App Router",
            "icon": "⚡",
            "chapters": [
                {"id": "b9", "title": "B9", "lessons": [_lesson(1), _lesson(2)]},
                {"id": "b10", "title": "B10", "lessons": [_lesson(3), _lesson(1), _lesson(2)]},
                {"id": "b11", "title": "B11", "lessons": []},
                {"id": "b12", "title": "B12", "lessons": [_lesson(1)]},
            ],
        },
        {
            "id": "pages-router",
            "title": "Pages Router Mastery",
            "chapters": [
                {"id": "a1", "title": "A1", "lessons": [_lesson(1), _lesson(2)]},
            ],
        },
    ]


# ══════════════════════════════════════════════════════════════════════════════
# 1. CATALOGUE INVARIANTS
# ══════════════════════════════════════════════════════════════════════════════

class TestCatalogueInvariants:

    def test_every_path_is_unique(self):
        paths = [lesson.path for lesson in registry.lessons()]
        assert len(paths) == len(set(paths))
        assert len(paths) == len(registry)

    def test_orders_unique_within_chapter(self):
        for course in registry.courses:
            for chapter in course.chapters:
                orders = [lesson.order for lesson in chapter.lessons]
                assert len(orders) == len(set(orders)), chapter.path

    def test_lessons_sorted_by_order(self):
        for course in registry.courses:
            for chapter in course.chapters:
                orders = [lesson.order for lesson in chapter.lessons]
                assert orders == sorted(orders)

    def test_paths_follow_url_structure(self):
        for lesson in registry.lessons():
            assert lesson.path == (
                f"/learn/{lesson.course_id}/{lesson.parent_chapter_id}/{lesson.id}"
            )

    def test_known_courses_present(self):
        ids = [course.id for course in registry.courses]
        assert ids == ["app-router", "pages-router", "comparison", "recent-updates"]

    def test_catalogue_size(self):
        assert len(registry) == 130

    def test_no_broken_links(self):
        assert registry.check_links() == []

    def test_b13_includes_debugging_lesson(self):
        chapter = registry.get_chapter("app-router", "b13")
        assert chapter.lessons[-1].id == "lesson-11"
        assert chapter.lessons[-1].order == 11


class TestRegistryValidation:

    def test_duplicate_order_rejected(self):
        raw = _small_catalogue()
        raw[0]["chapters"][0]["lessons"].append(_lesson(2, "Another two"))
        raw[0]["chapters"][0]["lessons"][-1]["id"] = "lesson-2b"
        with pytest.raises(ValueError, match="Duplicate lesson order 2"):
            LessonRegistry.from_content(raw)

    def test_duplicate_path_rejected(self):
        raw = _small_catalogue()
        duplicate = copy.deepcopy(raw[0]["chapters"][0]["lessons"][0])
        duplicate["order"] = 9
        raw[0]["chapters"][0]["lessons"].append(duplicate)
        with pytest.raises(ValueError, match="Duplicate lesson path"):
            LessonRegistry.from_content(raw)

    def test_duplicate_chapter_rejected(self):
        raw = _small_catalogue()
        raw[0]["chapters"].append({"id": "b9", "title": "again", "lessons": []})
        with pytest.raises(ValueError, match="Duplicate chapter id 'b9'"):
            LessonRegistry.from_content(raw)

    def test_duplicate_course_rejected(self):
        raw = _small_catalogue()
        raw.append(copy.deepcopy(raw[1]))
        with pytest.raises(ValueError, match="Duplicate course id"):
            LessonRegistry.from_content(raw)

    def test_static_content_is_not_mutated(self):
        before = copy.deepcopy(COURSES)
        LessonRegistry.from_content(COURSES)
        assert COURSES == before


# ══════════════════════════════════════════════════════════════════════════════
# 2. NEIGHBOUR RESOLUTION
# ══════════════════════════════════════════════════════════════════════════════

class TestResolveNeighbors:

    def setup_method(self):
        self.reg = LessonRegistry.from_content(_small_catalogue())

    def test_middle_lesson(self):
        nav = registry.resolve_neighbors("/learn/app-router/b10/lesson-2")
        assert nav.previous.path == "/learn/app-router/b10/lesson-1"
        assert nav.next.path == "/learn/app-router/b10/lesson-3"
        assert [l.id for l in nav.siblings][:3] == ["lesson-1", "lesson-2", "lesson-3"]

    def test_unknown_path_is_empty(self):
        nav = registry.resolve_neighbors("/does/not/exist")
        assert nav == Neighbors(previous=None, next=None, siblings=())
        assert nav.previous is None
        assert nav.next is None
        assert nav.siblings == ()
        assert not nav.found

    def test_chapter_index_path_is_not_a_lesson(self):
        assert not registry.resolve_neighbors("/learn/app-router/b10").found

    def test_idempotent(self):
        path = "/learn/comparison/c2/lesson-5"
        assert registry.resolve_neighbors(path) == registry.resolve_neighbors(path)

    def test_order_not_declaration_order(self):
        nav = self.reg.resolve_neighbors("/learn/app-router/b10/lesson-1")
        assert [l.id for l in nav.siblings] == ["lesson-1", "lesson-2", "lesson-3"]

    def test_first_lesson_of_chapter_links_back_into_previous_chapter(self):
        nav = self.reg.resolve_neighbors("/learn/app-router/b10/lesson-1")
        assert nav.previous.path == "/learn/app-router/b9/lesson-2"
        assert nav.next.path == "/learn/app-router/b10/lesson-2"

    def test_last_lesson_of_chapter_links_forward_into_next_chapter(self):
        nav = self.reg.resolve_neighbors("/learn/app-router/b9/lesson-2")
        assert nav.next.path == "/learn/app-router/b10/lesson-1"

    def test_empty_chapter_is_skipped(self):
        nav = self.reg.resolve_neighbors("/learn/app-router/b10/lesson-3")
        assert nav.next.path == "/learn/app-router/b12/lesson-1"
        back = self.reg.resolve_neighbors("/learn/app-router/b12/lesson-1")
        assert back.previous.path == "/learn/app-router/b10/lesson-3"

    def test_never_crosses_course_boundary(self):
        last = self.reg.resolve_neighbors("/learn/app-router/b12/lesson-1")
        first = self.reg.resolve_neighbors("/learn/pages-router/a1/lesson-1")
        assert last.next is None
        assert first.previous is None

    def test_first_and_last_lessons_of_catalogue(self):
        first = registry.resolve_neighbors("/learn/app-router/b1/lesson-1")
        assert first.previous is None
        last = registry.resolve_neighbors("/learn/recent-updates/v16/lesson-8")
        assert last.next is None

    def test_real_chapter_boundary(self):
        nav = registry.resolve_neighbors("/learn/app-router/b9/lesson-5")
        assert nav.next.path == "/learn/app-router/b10/lesson-1"
        nav = registry.resolve_neighbors("/learn/app-router/b10/lesson-1")
        assert nav.previous.path == "/learn/app-router/b9/lesson-5"

    def test_adjacency_is_symmetric(self):
        for lesson in registry.lessons():
            nav = registry.resolve_neighbors(lesson.path)
            if nav.next is not None:
                assert registry.resolve_neighbors(nav.next.path).previous == lesson
            if nav.previous is not None:
                assert registry.resolve_neighbors(nav.previous.path).next == lesson

    def test_siblings_share_chapter(self):
        nav = registry.resolve_neighbors("/learn/pages-router/a3/lesson-2")
        assert {l.parent_chapter_id for l in nav.siblings} == {"a3"}
        assert len(nav.siblings) == 5


class TestLookups:

    def test_get_lesson(self):
        lesson = registry.get_lesson("/learn/app-router/b10/lesson-2")
        assert lesson.title == "B10.2: Route Segment Config"
        assert lesson.chapter_path == "/learn/app-router/b10"
        assert "dynamic option" in lesson.topics

    def test_get_lesson_unknown(self):
        assert registry.get_lesson("/learn/app-router/b10/lesson-99") is None

    def test_get_chapter(self):
        chapter = registry.get_chapter("comparison", "c3")
        assert chapter.title == "C3: Migration Considerations"
        assert chapter.label == "C3"
        assert chapter.path == "/learn/comparison/c3"

    def test_get_course(self):
        course = registry.get_course("recent-updates")
        assert course.nav_title == "Recent Updates"
        assert course.lesson_count == 8
        assert registry.get_course("nope") is None

    def test_contains(self):
        assert "/learn/app-router/b1/lesson-1" in registry
        assert "/learn/app-router/b1" not in registry

    def test_check_links_reports_asymmetry(self):
        reg = LessonRegistry.from_content(_small_catalogue())
        lesson = reg.get_lesson("/learn/app-router/b9/lesson-1")
        stray = lesson.__class__(
            id="lesson-9", title="Stray", path="/learn/app-router/b9/lesson-9",
            order=9, parent_chapter_id="b9", course_id="app-router",
        )
        reg._sequence["app-router"] = reg._sequence["app-router"] + (stray,)
        problems = reg.check_links()
        assert any("lesson-9 is broken" in p for p in problems)
