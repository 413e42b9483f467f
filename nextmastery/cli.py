# nextmastery/cli.py
import sys

import click
from flask import current_app
from flask.cli import AppGroup

from nextmastery.learn.registry import registry

lessons_cli = AppGroup("lessons", help="Inspect the lesson catalogue.")


@lessons_cli.command("list")
def list_lessons():
    """Print every course, chapter and lesson with its path."""
    for course in registry.courses:
        click.echo(f"{course.icon} {course.title}  {course.path}")
        for chapter in course.chapters:
            click.echo(f"  {chapter.title}  {chapter.path}")
            for lesson in chapter.lessons:
                click.echo(f"    {lesson.title}  {lesson.path}")
    click.echo(f"{len(registry)} lessons")


@lessons_cli.command("neighbors")
@click.argument("path")
def show_neighbors(path):
    """Show previous/next links and chapter siblings for PATH."""
    nav = registry.resolve_neighbors(path)
    if not nav.found:
        click.echo(f"No lesson at {path}")
        sys.exit(1)

    click.echo(f"previous: {nav.previous.path if nav.previous else '-'}")
    click.echo(f"next:     {nav.next.path if nav.next else '-'}")
    click.echo("siblings:")
    for lesson in nav.siblings:
        marker = "*" if lesson.path == path else " "
        click.echo(f"  {marker} {lesson.path}")


@lessons_cli.command("check")
def check_links():
    """Verify that every previous/next link resolves and points back."""
    problems = registry.check_links()
    for problem in problems:
        current_app.logger.error("Broken navigation: %s", problem)
        click.echo(problem)

    if problems:
        click.echo(f"FAILED: {len(problems)} navigation problem(s)")
        sys.exit(1)
    click.echo(f"OK: {len(registry)} lessons, navigation consistent")


def register_cli(app):
    app.cli.add_command(lessons_cli)
