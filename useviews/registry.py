"""
npm registry client for use-views.

Looks up the latest published version of packages.

Supports:
- Registry resolution from the environment and .npmrc (scoped registries too)
- Retries with back-off on transport errors
- Concurrent lookups of a list of packages
"""

from __future__ import annotations

import asyncio
import logging
import os
import time
from pathlib import Path
from typing import Any, Mapping
from urllib.parse import quote

import requests

from . import __version__
from .errors import PackageNotFoundError, RegistryError


logger = logging.getLogger(__name__)

DEFAULT_REGISTRY = "https://registry.npmjs.org/"
# Abbreviated install metadata still carries dist-tags
INSTALL_ACCEPT = "application/vnd.npm.install-v1+json; q=1.0, application/json; q=0.8, */*"
RETRY_DELAY = 1.0


def _read_npmrc(path: Path) -> dict[str, str]:
    """Parse key=value pairs out of an .npmrc file."""
    values: dict[str, str] = {}
    if not path.is_file():
        return values

    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        logger.warning("Ignoring unreadable %s: %s", path, e)
        return values

    for line in text.splitlines():
        line = line.strip()
        if not line or line.startswith(("#", ";")) or "=" not in line:
            continue
        key, value = line.split("=", 1)
        values[key.strip()] = value.strip().strip("\"'")
    return values


def _ensure_trailing_slash(url: str) -> str:
    return url if url.endswith("/") else url + "/"


def resolve_registry_url(
    package: str,
    project_root: Path | None = None,
    env: Mapping[str, str] | None = None,
    override: str | None = None,
    home: Path | None = None,
) -> str:
    """
    Find the registry a package should be fetched from.

    Precedence:
    1. explicit override (--registry, USE_VIEWS_REGISTRY or use-views.yml)
    2. USE_VIEWS_REGISTRY, then npm_config_registry
    3. the project's .npmrc, then ~/.npmrc (a "@scope:registry" entry
       beats a plain "registry" entry in the same file)
    4. the public npm registry

    Returns:
        Registry URL ending with "/"
    """
    if override:
        return _ensure_trailing_slash(override)

    env = os.environ if env is None else env
    for var in ("USE_VIEWS_REGISTRY", "npm_config_registry", "NPM_CONFIG_REGISTRY"):
        if env.get(var):
            return _ensure_trailing_slash(env[var])

    scope = package.split("/", 1)[0] if package.startswith("@") else None
    home = Path.home() if home is None else home

    npmrc_paths = []
    if project_root is not None:
        npmrc_paths.append(project_root / ".npmrc")
    npmrc_paths.append(home / ".npmrc")

    for npmrc_path in npmrc_paths:
        npmrc = _read_npmrc(npmrc_path)
        if scope and npmrc.get(f"{scope}:registry"):
            return _ensure_trailing_slash(npmrc[f"{scope}:registry"])
        if npmrc.get("registry"):
            return _ensure_trailing_slash(npmrc["registry"])

    return DEFAULT_REGISTRY


def package_url(registry: str, package: str) -> str:
    """Build the metadata URL for a package, e.g. <registry>@viewstools%2Fmorph."""
    encoded = quote(package, safe="")
    if encoded.startswith("%40"):
        encoded = "@" + encoded[3:]
    return _ensure_trailing_slash(registry) + encoded


class RegistryClient:
    """npm registry client with retry handling."""

    def __init__(
        self,
        project_root: Path | None = None,
        registry: str | None = None,
        timeout: float = 10.0,
        retries: int = 3,
    ):
        self.project_root = project_root
        self.registry = registry
        self.timeout = timeout
        self.retries = max(retries, 1)
        self.session = requests.Session()

        self.session.headers["Accept"] = INSTALL_ACCEPT
        self.session.headers["User-Agent"] = f"use-views/{__version__}"

    def _request(self, url: str, package: str) -> Any:
        """GET a metadata document with retry handling."""
        for attempt in range(self.retries):
            try:
                response = self.session.get(url, timeout=self.timeout)
            except requests.RequestException as e:
                if attempt < self.retries - 1:
                    logger.debug("Request to %s failed (%s), retrying", url, e)
                    time.sleep(RETRY_DELAY * (attempt + 1))
                    continue
                raise RegistryError(f"Request failed for {package}: {e}") from e

            if response.status_code == 404:
                raise PackageNotFoundError(package)

            if response.status_code >= 400:
                raise RegistryError(
                    f"Registry error for {package}: {response.status_code} - {response.text}",
                    response.status_code,
                )

            try:
                return response.json()
            except ValueError as e:
                raise RegistryError(f"Invalid metadata for {package}: {e}") from e

        raise RegistryError("Max retries exceeded")

    def get_latest_version(self, package: str) -> str:
        """Get the version the "latest" dist-tag points to."""
        registry = resolve_registry_url(
            package,
            project_root=self.project_root,
            override=self.registry,
        )
        url = package_url(registry, package)
        logger.debug("Fetching %s", url)

        data = self._request(url, package)
        dist_tags = data.get("dist-tags", {}) if isinstance(data, dict) else None
        if not isinstance(dist_tags, dict):
            raise RegistryError(f"Invalid metadata for {package}")

        version = dist_tags.get("latest")
        if not version:
            raise RegistryError(f"No latest version published for {package}")

        logger.debug("Latest %s is %s", package, version)
        return version


async def fetch_latest_versions_async(
    client: RegistryClient,
    packages: list[str],
    max_concurrency: int = 8,
) -> dict[str, str]:
    """Look up every package concurrently."""
    semaphore = asyncio.Semaphore(max(max_concurrency, 1))

    async def fetch_one(package: str) -> str:
        async with semaphore:
            return await asyncio.to_thread(client.get_latest_version, package)

    versions = await asyncio.gather(*(fetch_one(package) for package in packages))
    return dict(zip(packages, versions))


def fetch_latest_versions(
    client: RegistryClient,
    packages: list[str],
    max_concurrency: int = 8,
) -> dict[str, str]:
    """
    Resolve the latest version of each package.

    Lookups run in parallel; the result keeps the order of `packages`.
    The first failing lookup raises and the other results are dropped.
    """
    if not packages:
        return {}
    return asyncio.run(fetch_latest_versions_async(client, packages, max_concurrency))
