from __future__ import annotations

from flask import abort, current_app, render_template
from jinja2 import TemplateNotFound

from nextmastery.learn import learn
from nextmastery.learn.registry import registry
from nextmastery.learn.utils import _lesson_body_template, _nav_label


@learn.app_template_filter("nav_label")
def nav_label(title: str) -> str:
    return _nav_label(title)


def _has_template(name: str) -> bool:
    try:
        current_app.jinja_env.get_template(name)
    except TemplateNotFound:
        return False
    return True


# ── Routes ──────────────────────────────────────────────────────────────────
@learn.route("/learn")
def hub():
    return render_template(
        "learn/hub.html",
        title="Learning Hub",
        courses=registry.courses,
    )


@learn.route("/learn/<course_id>")
def course_page(course_id):
    course = registry.get_course(course_id)
    if not course:
        current_app.logger.info("Unknown course requested: %s", course_id)
        abort(404)

    return render_template(
        "learn/course.html",
        title=course.title,
        course=course,
    )


@learn.route("/learn/<course_id>/<chapter_id>")
def chapter_page(course_id, chapter_id):
    course = registry.get_course(course_id)
    chapter = registry.get_chapter(course_id, chapter_id)
    if not course or not chapter:
        current_app.logger.info("Unknown chapter requested: %s/%s", course_id, chapter_id)
        abort(404)

    return render_template(
        "learn/chapter.html",
        title=chapter.title,
        course=course,
        chapter=chapter,
    )


@learn.route("/learn/<course_id>/<chapter_id>/<lesson_id>")
def lesson_page(course_id, chapter_id, lesson_id):
    path = f"/learn/{course_id}/{chapter_id}/{lesson_id}"
    lesson = registry.get_lesson(path)
    if not lesson:
        current_app.logger.info("Unknown lesson requested: %s", path)
        abort(404)

    chapter = registry.chapter_of(lesson)
    neighbors = registry.resolve_neighbors(path)

    # Lessons without a body template fall back to their topic overview.
    body_template = _lesson_body_template(course_id, chapter_id, lesson_id)
    if not _has_template(body_template):
        body_template = None

    return render_template(
        "learn/lesson.html",
        title=lesson.title,
        description=lesson.description,
        course=registry.get_course(course_id),
        chapter=chapter,
        lesson=lesson,
        neighbors=neighbors,
        body_template=body_template,
    )
