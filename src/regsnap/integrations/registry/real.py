"""Production registry reader using the GCR tags/list extension.

GCR-compatible registries answer GET /v2/<repo>/tags/list with:

    {
        "child": ["sub-repo", ...],
        "manifest": {"sha256:...": {"mediaType": "...", "tag": ["v1", ...]}, ...},
        "name": "<repo>",
        "tags": [...]
    }

Repositories are crawled breadth-first; each level is fetched on a thread pool.
Reads are anonymous. Registry authentication is out of scope.
"""

import logging
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from typing import Any

import requests

from regsnap.core.errors import RegistryReadError
from regsnap.core.types import (
    MANIFEST_LIST_MEDIA_TYPES,
    DigestTags,
    ParentDigests,
    RegInvImage,
    RegistryContext,
    RegistryState,
    normalize_tags,
)
from regsnap.integrations.registry.abc import RegistryReader

logger = logging.getLogger(__name__)

REQUEST_TIMEOUT_SECONDS = 60
MANIFEST_LIST_ACCEPT = ", ".join(sorted(MANIFEST_LIST_MEDIA_TYPES))


@dataclass(frozen=True)
class TagsListing:
    """Parsed tags/list response for one repository."""

    repo_path: str
    children: list[str]
    digest_tags: DigestTags
    media_types: dict[str, str]


def split_registry_name(registry_name: str) -> tuple[str, str]:
    """Split "gcr.io/foo/bar" into ("gcr.io", "foo/bar").

    Raises:
        RegistryReadError: If the name has no repository path
    """
    host, _, path = registry_name.strip("/").partition("/")
    if not host or not path:
        raise RegistryReadError(
            f"registry name {registry_name!r} must be of the form <host>/<repository>"
        )
    return host, path


def parse_tags_listing(repo_path: str, data: dict[str, Any]) -> TagsListing:
    """Parse a tags/list JSON body into a TagsListing.

    Raises:
        RegistryReadError: If the body does not have the expected shape
    """
    manifests = data.get("manifest") or {}
    children = data.get("child") or []
    if not isinstance(manifests, dict) or not isinstance(children, list):
        raise RegistryReadError(f"unexpected tags/list response for {repo_path}")

    digest_tags: DigestTags = {}
    media_types: dict[str, str] = {}
    for digest, info in manifests.items():
        if not isinstance(info, dict):
            raise RegistryReadError(f"unexpected manifest entry {digest} in {repo_path}")
        tags = info.get("tag") or []
        if not isinstance(tags, list) or not all(isinstance(tag, str) for tag in tags):
            raise RegistryReadError(f"unexpected tag list for {digest} in {repo_path}")
        digest_tags[digest] = normalize_tags(tags)
        media_type = info.get("mediaType")
        if media_type:
            media_types[digest] = media_type

    return TagsListing(
        repo_path=repo_path,
        children=[str(child) for child in children],
        digest_tags=digest_tags,
        media_types=media_types,
    )


class RealRegistryReader(RegistryReader):
    """Registry reader backed by HTTP calls to the registry v2 API."""

    def __init__(self, *, threads: int, session: requests.Session | None = None) -> None:
        """Create a reader.

        Args:
            threads: Number of concurrent requests while crawling
            session: HTTP session to use (a new one if None)
        """
        self._threads = threads
        self._session = session if session is not None else requests.Session()

    def _get_json(self, url: str, *, accept: str | None = None) -> dict[str, Any]:
        headers = {"Accept": accept} if accept else {}
        logger.debug("GET %s", url)
        try:
            response = self._session.get(url, headers=headers, timeout=REQUEST_TIMEOUT_SECONDS)
            response.raise_for_status()
            data = response.json()
        except requests.RequestException as e:
            raise RegistryReadError(f"reading {url}: {e}") from e
        except ValueError as e:
            raise RegistryReadError(f"reading {url}: invalid JSON response") from e

        if not isinstance(data, dict):
            raise RegistryReadError(f"reading {url}: expected a JSON object")
        return data

    def _read_tags(self, host: str, repo_path: str) -> TagsListing:
        data = self._get_json(f"https://{host}/v2/{repo_path}/tags/list")
        return parse_tags_listing(repo_path, data)

    def _read_registry(
        self, registry: RegistryContext, *, recursive: bool, media_types: dict[str, str]
    ) -> RegInvImage:
        host, root_path = split_registry_name(registry.name)
        inventory: RegInvImage = {}

        level = [root_path]
        with ThreadPoolExecutor(max_workers=self._threads) as executor:
            while level:
                listings = list(executor.map(lambda path: self._read_tags(host, path), level))
                level = []
                for listing in listings:
                    media_types.update(listing.media_types)
                    if listing.repo_path != root_path and listing.digest_tags:
                        image_name = listing.repo_path[len(root_path) + 1 :]
                        inventory[image_name] = listing.digest_tags
                    if recursive:
                        level.extend(f"{listing.repo_path}/{child}" for child in listing.children)

        logger.debug("Read %d images from %s", len(inventory), registry.name)
        return inventory

    def read_registries(
        self, registries: list[RegistryContext], *, recursive: bool
    ) -> RegistryState:
        inventory: dict[str, RegInvImage] = {}
        media_types: dict[str, str] = {}
        for registry in registries:
            inventory[registry.name] = self._read_registry(
                registry, recursive=recursive, media_types=media_types
            )
        return RegistryState(inventory=inventory, media_types=media_types)

    def _read_manifest_list_children(self, host: str, repo_path: str, digest: str) -> list[str]:
        url = f"https://{host}/v2/{repo_path}/manifests/{digest}"
        data = self._get_json(url, accept=MANIFEST_LIST_ACCEPT)
        entries = data.get("manifests") or []
        if not isinstance(entries, list):
            raise RegistryReadError(f"reading {url}: 'manifests' must be a list")

        children: list[str] = []
        for entry in entries:
            if not isinstance(entry, dict) or not isinstance(entry.get("digest"), str):
                raise RegistryReadError(f"reading {url}: manifest entry without a digest")
            children.append(entry["digest"])
        return children

    def read_manifest_lists(self, state: RegistryState) -> ParentDigests:
        # One fetch per distinct manifest list digest
        targets: dict[str, tuple[str, str]] = {}
        for registry_name, images in state.inventory.items():
            host, root_path = split_registry_name(registry_name)
            for image_name, digest_tags in images.items():
                for digest in digest_tags:
                    if state.is_manifest_list(digest) and digest not in targets:
                        targets[digest] = (host, f"{root_path}/{image_name}")

        parent_digests: ParentDigests = {}
        with ThreadPoolExecutor(max_workers=self._threads) as executor:
            futures = {
                parent: executor.submit(self._read_manifest_list_children, host, path, parent)
                for parent, (host, path) in targets.items()
            }
            for parent, future in futures.items():
                for child in future.result():
                    parent_digests[child] = parent

        logger.debug(
            "Resolved %d child digests from %d manifest lists", len(parent_digests), len(targets)
        )
        return parent_digests
