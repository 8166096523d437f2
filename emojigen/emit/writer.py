"""Writing the generated catalogue and lookup tables to disk."""

from __future__ import annotations

import logging
from pathlib import Path

from ..core.models.catalog import Catalog, LookupTable

logger = logging.getLogger(__name__)

FORMATS = ("json", "yaml")


def write_outputs(
    catalog: Catalog,
    lookup: LookupTable,
    directory: Path | str,
    fmt: str = "json",
) -> list[Path]:
    """Write ``catalog.<fmt>`` and ``lookup.json`` into a directory.

    Raises:
        ValueError: If the format is not json or yaml.
    """
    if fmt not in FORMATS:
        raise ValueError(f"Unknown output format: {fmt!r} (expected json or yaml)")

    directory = Path(directory)
    directory.mkdir(parents=True, exist_ok=True)

    catalog_path = directory / f"catalog.{fmt}"
    if fmt == "yaml":
        catalog.to_yaml(catalog_path)
    else:
        catalog.to_json(catalog_path)
    logger.info("Wrote %s", catalog_path)

    lookup_path = directory / "lookup.json"
    lookup.to_json(lookup_path)
    logger.info("Wrote %s", lookup_path)

    return [catalog_path, lookup_path]
