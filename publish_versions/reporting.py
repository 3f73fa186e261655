"""
Reporting and export utilities.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Iterable, List

import pandas as pd

from .models import PublishResolution


logger = logging.getLogger(__name__)

RESOLUTION_COLUMNS = ["name", "intended_version", "resolved_version", "retried"]


def print_summary(resolutions: Iterable[PublishResolution]) -> None:
    resolutions = list(resolutions)
    retried = [r for r in resolutions if r.retried]
    logger.info("=" * 60)
    logger.info("DEPRECATION VERSIONS")
    logger.info("=" * 60)
    for resolution in resolutions:
        if resolution.retried:
            logger.info(
                "%s: %s -> %s",
                resolution.name, resolution.intended_version, resolution.resolved_version,
            )
        else:
            logger.info("%s: %s", resolution.name, resolution.intended_version)
    logger.info("-" * 60)
    logger.info("Not-needed packages: %d", len(resolutions))
    logger.info("Bumped after failed publish: %d", len(retried))
    logger.info("=" * 60)


def resolutions_frame(resolutions: Iterable[PublishResolution]) -> pd.DataFrame:
    rows: List[dict] = [r.to_dict() for r in resolutions]
    return pd.DataFrame(rows, columns=RESOLUTION_COLUMNS)


def save_resolutions_json(resolutions: Iterable[PublishResolution], output_dir: Path) -> Path:
    output_dir.mkdir(parents=True, exist_ok=True)
    results_file = output_dir / "resolutions.json"
    with open(results_file, 'w') as f:
        json.dump([r.to_dict() for r in resolutions], f, indent=2)
    return results_file


def export_resolutions_csv(resolutions: Iterable[PublishResolution], output_dir: Path) -> Path:
    output_dir.mkdir(parents=True, exist_ok=True)
    csv_file = output_dir / "resolutions.csv"
    resolutions_frame(resolutions).to_csv(csv_file, index=False)
    return csv_file
