"""
tests/test_nextmastery.py
=========================
Route, template and CLI tests for the Next.js Mastery Flask application.

Run with:
    pytest tests/test_nextmastery.py -v
"""

from __future__ import annotations

import re

from nextmastery.learn.registry import registry
from nextmastery.learn.utils import _is_within, _nav_label, _navigation_tree


# ══════════════════════════════════════════════════════════════════════════════
# 1. MAIN ROUTES
# ══════════════════════════════════════════════════════════════════════════════

class TestMainRoutes:

    def test_home_get(self, client):
        resp = client.get("/")
        assert resp.status_code == 200
        assert b"Next.js Mastery" in resp.data
        assert b"Start with App Router" in resp.data

    def test_home_alias(self, client):
        resp = client.get("/home")
        assert resp.status_code == 200

    def test_home_links_every_course(self, client):
        resp = client.get("/")
        for course in registry.courses:
            assert f'href="{course.path}"'.encode() in resp.data

    def test_code_css(self, client):
        resp = client.get("/code.css")
        assert resp.status_code == 200
        assert resp.mimetype == "text/css"
        assert b".codeblock .highlight" in resp.data

    def test_static_clipboard_script(self, client):
        resp = client.get("/static/js/codeblock.js")
        assert resp.status_code == 200
        assert b"navigator.clipboard" in resp.data
        resp.close()


# ══════════════════════════════════════════════════════════════════════════════
# 2. LEARN ROUTES
# ══════════════════════════════════════════════════════════════════════════════

class TestLearnRoutes:

    def test_hub(self, client):
        resp = client.get("/learn")
        assert resp.status_code == 200
        assert b"App Router Mastery" in resp.data
        assert b"Pages Router Mastery" in resp.data
        assert b"Recent Updates" in resp.data

    def test_course_page(self, client):
        resp = client.get("/learn/app-router")
        assert resp.status_code == 200
        assert b"B1: Foundation &amp; Setup" in resp.data
        assert b"B13: Interview Cheatsheet" in resp.data
        assert b"Back to Learning Hub" in resp.data

    def test_unknown_course_404(self, client):
        resp = client.get("/learn/vue-router")
        assert resp.status_code == 404
        assert b"Page Not Found" in resp.data

    def test_chapter_page(self, client):
        resp = client.get("/learn/app-router/b10")
        assert resp.status_code == 200
        assert b"B10: Advanced Features" in resp.data
        assert b"Topics Covered:" in resp.data
        assert b'href="/learn/app-router/b10/lesson-6"' in resp.data
        assert b"Back to App Router Chapters" in resp.data

    def test_unknown_chapter_404(self, client):
        resp = client.get("/learn/app-router/b99")
        assert resp.status_code == 404

    def test_chapter_of_other_course_404(self, client):
        resp = client.get("/learn/app-router/a1")
        assert resp.status_code == 404

    def test_lesson_page(self, client):
        resp = client.get("/learn/app-router/b10/lesson-2")
        assert resp.status_code == 200
        assert b"B10.2: Route Segment Config" in resp.data
        assert b"Back to B10 Lessons" in resp.data

    def test_lesson_page_title(self, client):
        resp = client.get("/learn/app-router/b10/lesson-2")
        assert b"<title>B10.2: Route Segment Config - Next.js Mastery</title>" in resp.data

    def test_lesson_prev_next_links(self, client):
        resp = client.get("/learn/app-router/b10/lesson-2")
        assert b'href="/learn/app-router/b10/lesson-1"' in resp.data
        assert b"Previous: B10.1 Middleware" in resp.data
        assert b'href="/learn/app-router/b10/lesson-3"' in resp.data
        assert b"Next: B10.3 Internationalization" in resp.data

    def test_cross_chapter_next_link(self, client):
        resp = client.get("/learn/app-router/b9/lesson-5")
        assert resp.status_code == 200
        assert b'class="next" href="/learn/app-router/b10/lesson-1"' in resp.data

    def test_first_lesson_has_back_link_instead_of_previous(self, client):
        resp = client.get("/learn/app-router/b1/lesson-1")
        assert b"Previous:" not in resp.data
        assert b'class="prev" href="/learn/app-router/b1"' in resp.data

    def test_last_lesson_links_back_to_course(self, client):
        resp = client.get("/learn/comparison/c3/lesson-4")
        assert resp.status_code == 200
        assert b"Next:" not in resp.data
        assert b'class="next" href="/learn/comparison"' in resp.data

    def test_unknown_lesson_404(self, client):
        resp = client.get("/learn/app-router/b10/lesson-42")
        assert resp.status_code == 404
        assert b"Page Not Found" in resp.data

    def test_every_lesson_renders(self, client):
        for lesson in registry.lessons():
            resp = client.get(lesson.path)
            assert resp.status_code == 200, lesson.path


class TestLessonBodies:

    def test_lesson_with_body_renders_code_blocks(self, client):
        resp = client.get("/learn/app-router/b10/lesson-2")
        assert b'class="codeblock"' in resp.data
        assert b'data-language="javascript"' in resp.data
        assert b"export const dynamic = &#39;force-static&#39;;" in resp.data

    def test_lesson_body_escapes_jsx(self, client):
        resp = client.get("/learn/app-router/b10/lesson-2")
        assert b"&lt;div&gt;Static Page&lt;/div&gt;" in resp.data

    def test_text_and_bash_samples(self, client):
        resp = client.get("/learn/app-router/b1/lesson-1")
        assert b'data-language="bash"' in resp.data
        assert b'data-language="text"' in resp.data
        assert b"npx create-next-app@latest my-app" in resp.data

    def test_typescript_sample(self, client):
        resp = client.get("/learn/pages-router/a3/lesson-1")
        assert b'data-language="typescript"' in resp.data

    def test_lesson_without_body_shows_topics(self, client):
        resp = client.get("/learn/app-router/b10/lesson-3")
        assert b"What this lesson covers" in resp.data
        assert b"next-intl library" in resp.data
        assert b'class="codeblock"' not in resp.data


# ══════════════════════════════════════════════════════════════════════════════
# 3. SIDEBAR NAVIGATION
# ══════════════════════════════════════════════════════════════════════════════

class TestSidebar:

    def test_sidebar_on_every_page(self, client):
        for url in ["/", "/learn", "/learn/comparison", "/learn/comparison/c1"]:
            resp = client.get(url)
            assert b'class="sidebar"' in resp.data
            assert b"Learning Hub" in resp.data

    def test_current_lesson_marked(self, client):
        resp = client.get("/learn/app-router/b10/lesson-2")
        marked = re.search(
            rb'href="/learn/app-router/b10/lesson-2"[^>]*aria-current="page"', resp.data
        )
        assert marked is not None
        assert resp.data.count(b'aria-current="page"') == 1

    def test_tree_top_level(self):
        tree = _navigation_tree(registry, "/")
        names = [item["name"] for item in tree]
        assert names == [
            "Home", "Learning Hub", "App Router", "Pages Router",
            "Comparison & Common Features", "Recent Updates",
        ]
        assert tree[0]["active"]

    def test_tree_expands_current_branch(self):
        tree = _navigation_tree(registry, "/learn/app-router/b10/lesson-2")
        app_router = tree[2]
        assert app_router["open"]
        b10 = next(ch for ch in app_router["children"] if ch["href"] == "/learn/app-router/b10")
        b9 = next(ch for ch in app_router["children"] if ch["href"] == "/learn/app-router/b9")
        assert b10["open"]
        assert not b9["open"]
        lesson = next(l for l in b10["children"] if l["active"])
        assert lesson["href"] == "/learn/app-router/b10/lesson-2"
        assert not tree[3]["open"]

    def test_prefix_does_not_leak_between_chapters(self):
        assert not _is_within("/learn/app-router/b10/lesson-1", "/learn/app-router/b1")
        assert _is_within("/learn/app-router/b1/lesson-1", "/learn/app-router/b1")
        assert not _is_within("/learn", "/")

    def test_nav_label(self):
        assert _nav_label("B10.1: Middleware (App Router)") == "B10.1 Middleware (App Router)"
        assert _nav_label("No colon") == "No colon"


# ══════════════════════════════════════════════════════════════════════════════
# 4. CLI
# ══════════════════════════════════════════════════════════════════════════════

class TestCli:

    def test_lessons_check(self, runner):
        result = runner.invoke(args=["lessons", "check"])
        assert result.exit_code == 0
        assert "OK: 130 lessons" in result.output

    def test_lessons_check_reports_problems(self, runner, monkeypatch):
        monkeypatch.setattr(registry, "check_links", lambda: ["/learn/x: broken"])
        result = runner.invoke(args=["lessons", "check"])
        assert result.exit_code == 1
        assert "/learn/x: broken" in result.output
        assert "FAILED: 1" in result.output

    def test_lessons_list(self, runner):
        result = runner.invoke(args=["lessons", "list"])
        assert result.exit_code == 0
        assert "/learn/recent-updates/v16/lesson-8" in result.output
        assert "130 lessons" in result.output

    def test_lessons_neighbors(self, runner):
        result = runner.invoke(args=["lessons", "neighbors", "/learn/app-router/b10/lesson-2"])
        assert result.exit_code == 0
        assert "previous: /learn/app-router/b10/lesson-1" in result.output
        assert "next:     /learn/app-router/b10/lesson-3" in result.output
        assert "* /learn/app-router/b10/lesson-2" in result.output

    def test_lessons_neighbors_unknown(self, runner):
        result = runner.invoke(args=["lessons", "neighbors", "/does/not/exist"])
        assert result.exit_code == 1
        assert "No lesson at /does/not/exist" in result.output
