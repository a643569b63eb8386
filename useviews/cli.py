"""
use-views CLI - Turn a create-react-app or create-react-native-app project
into a Views project.

Steps:
    1. Get the latest versions of the Views dependencies
    2. Set up package.json (dependencies and scripts)
    3. Install the dependencies with yarn or npm
    4. Write a sample View to work with
"""

from __future__ import annotations

import logging
import os
import sys

import click
from dotenv import load_dotenv

# Load .env file from current directory
load_dotenv()

from . import __version__
from . import console
from .config import PACKAGE_MANAGERS, UseViewsConfig, get_project_root
from .errors import UnsupportedProjectError, UseViewsError
from .installer import detect_package_manager, install_dependencies
from .project import Project, ProjectKind
from .registry import RegistryClient, fetch_latest_versions
from .scaffold import scaffold


logger = logging.getLogger(__name__)


def configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    # Keep requests/urllib3 quiet unless debugging
    logging.getLogger("urllib3").setLevel(logging.DEBUG if verbose else logging.WARNING)


def resolve_dependencies(project: Project, client: RegistryClient, max_concurrency: int) -> None:
    """Add the Views packages to package.json at ^latest."""
    dev_versions = fetch_latest_versions(
        client, project.required_dev_dependencies(), max_concurrency=max_concurrency
    )
    for name, version in dev_versions.items():
        project.add_dev_dependency(name, version)

    versions = fetch_latest_versions(
        client, project.required_dependencies(), max_concurrency=max_concurrency
    )
    for name, version in versions.items():
        project.add_dependency(name, version)


@click.command()
@click.version_option(version=__version__)
@click.option(
    "--path",
    "project_path",
    type=click.Path(exists=True, file_okay=False),
    default=None,
    help="Project directory to convert (default: current directory)",
)
@click.option("--skip-install", is_flag=True, help="Don't install the dependencies")
@click.option(
    "--package-manager",
    type=click.Choice(PACKAGE_MANAGERS),
    default=None,
    help="Package manager to install with (default: yarn if there is a yarn.lock, npm otherwise)",
)
@click.option("--registry", default=None, help="npm registry to get package versions from")
@click.option("--verbose", "-v", is_flag=True, help="Show debug logs")
def main(
    project_path: str | None,
    skip_install: bool,
    package_manager: str | None,
    registry: str | None,
    verbose: bool,
):
    """Turn a React DOM or React Native project into a Views project."""
    configure_logging(verbose)

    project_root = get_project_root(project_path)
    load_dotenv(project_root / ".env")

    try:
        config = UseViewsConfig.load(project_root)
    except UseViewsError as e:
        click.echo(f"❌ Error: {e}", err=True)
        sys.exit(1)

    manager = detect_package_manager(
        project_root, package_manager or config.install.package_manager
    )

    try:
        project = Project.load(
            project_root,
            extra_dependencies=config.extra_dependencies,
            extra_dev_dependencies=config.extra_dev_dependencies,
        )
    except UnsupportedProjectError as e:
        logger.debug("Unsupported project: %s", e)
        console.print_unsupported(project_root)
        sys.exit(1)

    kind = project.kind

    if project.is_views_project:
        console.print_already_views()
        # Without react-dom the help falls back to the native instructions
        console.print_help(kind or ProjectKind.NATIVE, manager)
        return

    if kind is None:
        console.print_unsupported(project_root)
        sys.exit(1)

    console.print_intro(kind)

    client = RegistryClient(
        project_root=project_root,
        registry=registry or os.environ.get("USE_VIEWS_REGISTRY") or config.registry.url,
        timeout=config.registry.timeout,
        retries=config.registry.retries,
    )

    try:
        with console.step("Getting the latest versions of Views dependencies"):
            resolve_dependencies(project, client, config.registry.max_concurrency)

        with console.step("Setting up the project"):
            project.setup_scripts()
            project.save()

        if skip_install or not config.install.enabled:
            logger.info("Skipping dependency installation")
        else:
            with console.step("Installing the dependencies"):
                install_dependencies(project_root, manager)

        with console.step("Preparing a sample View for you to work with"):
            result = scaffold(project)
    except UseViewsError as e:
        logger.debug("Conversion failed", exc_info=True)
        click.echo(f"\n❌ Error: {e}", err=True)
        sys.exit(1)

    logger.info(
        "Wrote %s; updated %s; removed %s",
        ", ".join(result.written) or "nothing",
        ", ".join(result.updated) or "nothing",
        ", ".join(result.removed) or "nothing",
    )

    console.print_done()
    console.print_help(kind, manager)


if __name__ == "__main__":
    main()
