"""Reference data loader: reads the YAML definition from disk."""

from __future__ import annotations

import logging
from datetime import date
from functools import lru_cache
from pathlib import Path
from types import MappingProxyType
from typing import Any

import yaml

from resultpages.core.reference.models import (
    BmiBand,
    BodyFatBand,
    DeficitProfile,
    DeficitRate,
    GenderOption,
    MacroDiet,
    MacroGoal,
    ParameterDomains,
    ReferenceData,
    StandardDeviations,
    TdeeActivity,
    TdeeBand,
    TdeeRanking,
)

logger = logging.getLogger(__name__)

# Packaged reference data lives under src/resultpages/domains/health/data/
DEFAULT_REFERENCE_PATH = (
    Path(__file__).resolve().parent.parent.parent / "domains" / "health" / "data" / "reference_data.yaml"
)


class ReferenceDataError(ValueError):
    """Raised when a reference data document is missing keys or malformed."""


def expand_range(bounds: dict[str, int]) -> tuple[int, ...]:
    """Expand a ``{start, stop, step}`` mapping into an inclusive tuple."""
    start, stop, step = bounds["start"], bounds["stop"], bounds["step"]
    if step <= 0:
        raise ReferenceDataError(f"Range step must be positive, got {step}")
    return tuple(range(start, stop + 1, step))


@lru_cache(maxsize=1)
def load_default_reference_data() -> ReferenceData:
    """Load the packaged reference data once per process."""
    return load_reference_file(DEFAULT_REFERENCE_PATH)


def load_reference_file(
    path: str | Path,
    *,
    projection_start: date | None = None,
    tdee_limit: int | None = None,
) -> ReferenceData:
    """Parse a YAML file into a ReferenceData instance.

    ``projection_start`` and ``tdee_limit`` override the values in the file.
    """
    path = Path(path)
    with open(path) as f:
        data: dict[str, Any] = yaml.safe_load(f)
    if not isinstance(data, dict):
        raise ReferenceDataError(f"Reference data in {path} is not a mapping")

    try:
        reference = build_reference_data(
            data, projection_start=projection_start, tdee_limit=tdee_limit
        )
    except KeyError as exc:
        raise ReferenceDataError(f"Missing key {exc.args[0]!r} in {path}") from exc

    logger.info(
        "Loaded reference data v%s from %s (%d ages, %d weights, %d heights)",
        reference.version,
        path,
        len(reference.domains.ages),
        len(reference.domains.weights_lb),
        len(reference.domains.heights_in),
    )
    return reference


def build_reference_data(
    data: dict[str, Any],
    *,
    projection_start: date | None = None,
    tdee_limit: int | None = None,
) -> ReferenceData:
    """Build ReferenceData from an already-parsed document."""
    domains_data = data["domains"]
    ranking_data = data["tdee_ranking"]
    stddev_data = data["stddevs"]

    start = projection_start or data["projection_start"]
    if not isinstance(start, date):
        start = date.fromisoformat(str(start))

    genders = tuple(GenderOption(slug=g["slug"], label=g["label"]) for g in data["genders"])
    gender_slugs = [g.slug for g in genders]

    return ReferenceData(
        version=str(data.get("version", "0")),
        projection_start=start,
        domains=ParameterDomains(
            ages=tuple(int(a) for a in domains_data["ages"]),
            weights_lb=expand_range(domains_data["weights_lb"]),
            heights_in=expand_range(domains_data["heights_in"]),
            macro_calories=expand_range(domains_data["macro_calories"]),
        ),
        genders=genders,
        bmi_bands=_by_gender(
            data["bmi_bands"],
            gender_slugs,
            lambda b: BmiBand(
                label=b["label"],
                min_age=b["min_age"],
                max_age=b["max_age"],
                average_bmi=float(b["average_bmi"]),
            ),
        ),
        tdee_bands=_by_gender(
            data["tdee_bands"],
            gender_slugs,
            lambda b: TdeeBand(
                label=b["label"],
                min_age=b["min_age"],
                max_age=b["max_age"],
                average_weight_lb=b["average_weight_lb"],
            ),
        ),
        body_fat_bands=_by_gender(
            data["body_fat_bands"],
            gender_slugs,
            lambda b: BodyFatBand(
                label=b["label"],
                min_age=b["min_age"],
                max_age=b["max_age"],
                average_bmi=float(b["average_bmi"]),
                average_body_fat=float(b["average_body_fat"]),
            ),
        ),
        tdee_activities=tuple(
            TdeeActivity(slug=a["slug"], label=a["label"], multiplier=float(a["multiplier"]))
            for a in data["tdee_activities"]
        ),
        deficit_rates=tuple(
            DeficitRate(slug=r["slug"], label=r["label"], weekly_loss_label=r["weekly_loss_label"])
            for r in data["deficit_rates"]
        ),
        macro_goals=tuple(
            MacroGoal(
                slug=g["slug"],
                label=g["label"],
                average_calories=g["average_calories"],
                calorie_stddev=g["calorie_stddev"],
            )
            for g in data["macro_goals"]
        ),
        macro_diets=tuple(
            MacroDiet(
                slug=d["slug"],
                label=d["label"],
                protein_percent=d["protein_percent"],
                carbs_percent=d["carbs_percent"],
                fat_percent=d["fat_percent"],
                description=d.get("description", "").strip(),
            )
            for d in data["macro_diets"]
        ),
        tdee_reference_height_cm=MappingProxyType(
            {g: data["tdee_reference_height_cm"][g] for g in gender_slugs}
        ),
        tdee_ranking=TdeeRanking(
            limit=tdee_limit if tdee_limit is not None else ranking_data["limit"],
            target_bmi=ranking_data["target_bmi"],
            age_pivot=ranking_data["age_pivot"],
            age_divisor=ranking_data["age_divisor"],
            ranking_height_in=MappingProxyType(
                {g: ranking_data["ranking_height_in"][g] for g in gender_slugs}
            ),
            activity_penalties=MappingProxyType(dict(ranking_data["activity_penalties"])),
        ),
        calorie_deficit_profiles=MappingProxyType(
            {
                g: DeficitProfile(
                    age=p["age"],
                    height_cm=p["height_cm"],
                    activity_level=p["activity_level"],
                    average_daily_target=p["average_daily_target"],
                )
                for g, p in ((g, data["calorie_deficit_profiles"][g]) for g in gender_slugs)
            }
        ),
        stddevs=StandardDeviations(
            bmi=stddev_data["bmi"],
            tdee=stddev_data["tdee"],
            body_fat=stddev_data["body_fat"],
            calorie_deficit=stddev_data["calorie_deficit"],
        ),
    )


def _by_gender(section: dict[str, list[dict]], genders: list[str], make) -> MappingProxyType:
    """Build a read-only gender -> tuple-of-bands mapping, requiring every gender."""
    bands = {}
    for gender in genders:
        rows = section[gender]
        if not rows:
            raise ReferenceDataError(f"No reference bands declared for {gender!r}")
        bands[gender] = tuple(make(row) for row in rows)
    return MappingProxyType(bands)
