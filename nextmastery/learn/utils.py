from __future__ import annotations

from typing import Any, Dict, List

from nextmastery.learn.registry import LessonRegistry

HOME_ITEMS = [
    {"name": "Home",         "href": "/",      "icon": "🏠"},
    {"name": "Learning Hub", "href": "/learn", "icon": "📚"},
]


# ── Helpers ───────────────────────────────────────────────────────────────────
def _is_within(current_path: str, href: str) -> bool:
    """True when current_path is href itself or a page below it."""
    if href == "/":
        return current_path == "/"
    return current_path == href or current_path.startswith(href.rstrip("/") + "/")


def _nav_item(name: str, href: str, current_path: str, icon: str = "",
              children: List[Dict[str, Any]] | None = None) -> Dict[str, Any]:
    children = children or []
    return {
        "name": name,
        "href": href,
        "icon": icon,
        "active": current_path == href,
        "open": bool(children) and _is_within(current_path, href),
        "children": children,
    }


def _navigation_tree(reg: LessonRegistry, current_path: str) -> List[Dict[str, Any]]:
    """Sidebar tree: home links, then course -> chapter -> lesson."""
    tree = [_nav_item(i["name"], i["href"], current_path, i["icon"]) for i in HOME_ITEMS]

    for course in reg.courses:
        chapters = []
        for chapter in course.chapters:
            lessons = [
                _nav_item(lesson.title, lesson.path, current_path)
                for lesson in chapter.lessons
            ]
            chapters.append(_nav_item(chapter.title, chapter.path, current_path, children=lessons))
        tree.append(_nav_item(course.nav_title, course.path, current_path, course.icon, chapters))

    return tree


def _nav_label(title: str) -> str:
    """'B10.1: Middleware' -> 'B10.1 Middleware' for previous/next links."""
    return title.replace(": ", " ", 1)


def _lesson_body_template(course_id: str, chapter_id: str, lesson_id: str) -> str:
    return f"lessons/{course_id}/{chapter_id}/{lesson_id}.html"
