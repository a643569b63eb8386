"""
Terminal output for use-views.

Everything the user reads goes through click; diagnostics go through logging.
"""

from __future__ import annotations

from contextlib import contextmanager
from pathlib import Path
from typing import Iterator

import click

from .installer import run_command
from .project import ProjectKind


DOCS_URL = "https://github.com/viewstools/docs"
SYNTAX_HIGHLIGHTING_URL = "https://github.com/viewstools/docs#syntax-highlighting"
TWITTER_URL = "https://twitter.com/viewstools"
SLACK_URL = "https://slack.views.tools"
NATIVE_DEVICE_URL = "https://github.com/react-community/create-react-native-app#npm-run-ios"


def blue(text: str) -> str:
    return click.style(text, fg="blue")


def green(text: str) -> str:
    return click.style(text, fg="green")


def yellow(text: str) -> str:
    return click.style(text, fg="yellow")


@contextmanager
def step(message: str) -> Iterator[None]:
    """Show a step as pending, then as done or failed."""
    click.echo(f"⏳ {message}")
    try:
        yield
    except Exception:
        click.echo(f"{click.style('✗', fg='red')} {message}", err=True)
        raise
    click.echo(f"{green('✓')} {message}")


def print_intro(kind: ProjectKind) -> None:
    click.echo(f"In a few minutes, your {kind.label} project will be ready to use Views! 😇\n")


def print_already_views() -> None:
    click.echo(blue("This is already a Views project! 🔥 🎉 \n"))


def print_done() -> None:
    click.echo("🦄 \n")
    click.echo(blue("This is now a Views project 🎉!!!"))
    click.echo(
        f"Go ahead and open the file {green('src/Main/App.view')} in your editor "
        f"and change something ✏️"
    )
    click.echo(
        "If this is your first time using Views, here's how to get your editor "
        f"to understand Views files {blue(SYNTAX_HIGHLIGHTING_URL)}"
    )


def print_get_in_touch() -> None:
    click.echo(f"\nIf you need any help, get in touch at {blue(TWITTER_URL)} or")
    click.echo(f"join our Slack community at {blue(SLACK_URL)}\n")


def print_help(kind: ProjectKind, manager: str) -> None:
    """How to run the converted project."""
    if kind is ProjectKind.WEB:
        click.echo(f"Run it with {green(run_command(manager))}\n")
    else:
        click.echo(
            f"Run the iOS simulator with {green('npm run ios')} "
            f"and the Android one with {green('npm run android')}"
        )
        click.echo(
            "\nSometimes the simulator fails to load. You will want to stop the command by pressing\n"
            f"{yellow('ctrl+c')} and running {yellow('npm start')} instead.\n"
            "If the simulator is already open, press the button to try again.\n"
            "\n"
            f"You can also use a real device for testing, {NATIVE_DEVICE_URL}\n"
            "for more info."
        )
    click.echo(f"You can find the docs at {blue(DOCS_URL)}")
    print_get_in_touch()
    click.echo("Happy coding! :)")


def print_unsupported(project_root: Path) -> None:
    """Explain how to get a project use-views can convert."""
    click.echo(
        "It looks like the directory you're on isn't either a create-react-app "
        "or create-react-native-app project."
    )
    click.echo(f"Is {yellow(str(project_root))} the right folder?\n")
    click.echo("If you don't have a project and want to make a new one, follow these instructions:")
    click.echo(f"For {blue('React DOM')}, ie, a web project:")
    click.echo(green(
        "npm install --global create-react-app\n"
        "create-react-app my-app\n"
        "cd my-app\n"
        "use-views"
    ))
    click.echo(f"\nFor {blue('React Native')}, ie, an iOS or Android project:")
    click.echo(green(
        "npm install --global create-react-native-app\n"
        "create-react-native-app my-native-app\n"
        "cd my-native-app\n"
        "use-views"
    ))
    print_get_in_touch()
