"""Site manifest model and generation."""

import hashlib
import json
from pathlib import Path

from pydantic import BaseModel, ValidationError

from ..config import GENERATOR_VERSION, SCHEMA_VERSION


class PageInfo(BaseModel):
    """A rendered page in the site manifest."""

    source: str
    path: str
    title: str
    sha256: str


class SiteManifest(BaseModel):
    """Everything needed to verify a site build was reproduced."""

    schema_version: int = SCHEMA_VERSION
    generator_version: str = GENERATOR_VERSION
    style_sha256: str
    pages: list[PageInfo]
    warnings: list[str]


def compute_sha256(content: bytes | str) -> str:
    """Compute SHA256 hash of content.

    Args:
        content: Bytes or string to hash

    Returns:
        Hex-encoded SHA256 hash
    """
    if isinstance(content, str):
        content = content.encode("utf-8")
    return hashlib.sha256(content).hexdigest()


def write_manifest(manifest: SiteManifest, output_dir: Path) -> Path:
    """Write manifest to ``site.json`` in ``output_dir``."""
    manifest_path = output_dir / "site.json"
    payload = manifest.model_dump(mode="json")
    manifest_path.write_text(
        json.dumps(payload, indent=2, sort_keys=True, ensure_ascii=False) + "\n",
        encoding="utf-8",
    )
    return manifest_path


def read_manifest(output_dir: Path) -> SiteManifest | None:
    """Load ``site.json`` from a previous build, or None if absent or unreadable."""
    manifest_path = output_dir / "site.json"
    if not manifest_path.is_file():
        return None
    try:
        return SiteManifest.model_validate_json(manifest_path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, ValidationError):
        return None
