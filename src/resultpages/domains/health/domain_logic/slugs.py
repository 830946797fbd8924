"""Slug codec: bijective mapping between parameter records and URL slugs.

Each result kind has one canonical ``build_*`` formatter and one ``parse_*``
validator. Parsing is two-stage: the slug must fully match the kind's grammar,
then every captured value must belong to the kind's declared domain.
Parsers never raise; any violation returns ``None``.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Any, Callable, Literal

from resultpages.core.reference.loader import load_default_reference_data
from resultpages.core.reference.models import Gender, ReferenceData

logger = logging.getLogger(__name__)


ResultKind = Literal["bmi", "tdee", "calorie-deficit", "body-fat", "macro"]

RESULT_KINDS: tuple[ResultKind, ...] = ("bmi", "tdee", "calorie-deficit", "body-fat", "macro")

# URL segment each kind is published under: /<segment>/results/<slug>
ROUTE_SEGMENTS: dict[ResultKind, str] = {
    "bmi": "bmi",
    "tdee": "tdee",
    "calorie-deficit": "calorie-deficit",
    "body-fat": "body-fat",
    "macro": "macro",
}


def canonical_path(kind: ResultKind, slug: str) -> str:
    return f"/{ROUTE_SEGMENTS[kind]}/results/{slug}"


# ---------------------------------------------------------------------------
# Parameter records
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class BmiParams:
    height_in: int
    weight_lb: int
    gender: Gender


@dataclass(frozen=True)
class TdeeParams:
    age: int
    gender: Gender
    weight_lb: int
    activity: str  # sedentary | moderate | active


@dataclass(frozen=True)
class CalorieDeficitParams:
    weight_lb: int
    gender: Gender
    rate: str  # mild | moderate | aggressive


@dataclass(frozen=True)
class BodyFatParams:
    age: int
    gender: Gender
    method: str = "bmi"


@dataclass(frozen=True)
class MacroParams:
    calories: int
    goal: str  # weight-loss | maintenance | muscle-gain
    diet: str  # balanced | high-protein | lower-carb | higher-carb


# ---------------------------------------------------------------------------
# Grammars
# ---------------------------------------------------------------------------

# Numbers: ASCII digits, no sign, no leading zero.
_NUM = r"([1-9][0-9]*)"
_GENDER = r"(male|female)"

BMI_PATTERN = re.compile(rf"{_NUM}-{_NUM}-{_GENDER}", re.ASCII)
TDEE_PATTERN = re.compile(
    rf"{_NUM}-year-old-{_GENDER}-{_NUM}-lbs-(sedentary|moderate|active)", re.ASCII
)
CALORIE_DEFICIT_PATTERN = re.compile(
    rf"{_NUM}-lbs-{_GENDER}-lose-(mild|moderate|aggressive)-per-week", re.ASCII
)
BODY_FAT_PATTERN = re.compile(rf"{_NUM}-year-old-{_GENDER}-(bmi)", re.ASCII)
MACRO_PATTERN = re.compile(
    rf"{_NUM}-calories-(weight-loss|maintenance|muscle-gain)"
    r"-(balanced|high-protein|lower-carb|higher-carb)",
    re.ASCII,
)


def _match(pattern: re.Pattern[str], slug: Any) -> re.Match[str] | None:
    if not isinstance(slug, str):
        return None
    return pattern.fullmatch(slug)


def _reject(kind: str, slug: Any, reason: str) -> None:
    logger.debug("Rejected %s slug %r: %s", kind, slug, reason)
    return None


def _ref(reference: ReferenceData | None) -> ReferenceData:
    return reference if reference is not None else load_default_reference_data()


# ---------------------------------------------------------------------------
# BMI: <height-in>-<weight-lb>-<gender>
# ---------------------------------------------------------------------------

def build_bmi_slug(params: BmiParams) -> str:
    return f"{params.height_in}-{params.weight_lb}-{params.gender}"


def parse_bmi_slug(slug: str, reference: ReferenceData | None = None) -> BmiParams | None:
    match = _match(BMI_PATTERN, slug)
    if not match:
        return _reject("bmi", slug, "grammar")

    ref = _ref(reference)
    height_in, weight_lb, gender = int(match[1]), int(match[2]), match[3]
    if (
        height_in not in ref.domains.heights_in
        or weight_lb not in ref.domains.weights_lb
        or gender not in ref.gender_slugs
    ):
        return _reject("bmi", slug, "out of domain")

    return BmiParams(height_in=height_in, weight_lb=weight_lb, gender=gender)


# ---------------------------------------------------------------------------
# TDEE: <age>-year-old-<gender>-<weight>-lbs-<activity>
# ---------------------------------------------------------------------------

def build_tdee_slug(params: TdeeParams) -> str:
    return f"{params.age}-year-old-{params.gender}-{params.weight_lb}-lbs-{params.activity}"


def parse_tdee_slug(slug: str, reference: ReferenceData | None = None) -> TdeeParams | None:
    match = _match(TDEE_PATTERN, slug)
    if not match:
        return _reject("tdee", slug, "grammar")

    ref = _ref(reference)
    age, gender, weight_lb, activity = int(match[1]), match[2], int(match[3]), match[4]
    if (
        age not in ref.domains.ages
        or weight_lb not in ref.domains.weights_lb
        or gender not in ref.gender_slugs
        or activity not in {a.slug for a in ref.tdee_activities}
    ):
        return _reject("tdee", slug, "out of domain")

    return TdeeParams(age=age, gender=gender, weight_lb=weight_lb, activity=activity)


# ---------------------------------------------------------------------------
# Calorie deficit: <weight>-lbs-<gender>-lose-<rate>-per-week
# ---------------------------------------------------------------------------

def build_calorie_deficit_slug(params: CalorieDeficitParams) -> str:
    return f"{params.weight_lb}-lbs-{params.gender}-lose-{params.rate}-per-week"


def parse_calorie_deficit_slug(
    slug: str, reference: ReferenceData | None = None
) -> CalorieDeficitParams | None:
    match = _match(CALORIE_DEFICIT_PATTERN, slug)
    if not match:
        return _reject("calorie-deficit", slug, "grammar")

    ref = _ref(reference)
    weight_lb, gender, rate = int(match[1]), match[2], match[3]
    if (
        weight_lb not in ref.domains.weights_lb
        or gender not in ref.gender_slugs
        or rate not in {r.slug for r in ref.deficit_rates}
    ):
        return _reject("calorie-deficit", slug, "out of domain")

    return CalorieDeficitParams(weight_lb=weight_lb, gender=gender, rate=rate)


# ---------------------------------------------------------------------------
# Body fat: <age>-year-old-<gender>-<method>
# ---------------------------------------------------------------------------

def build_body_fat_slug(params: BodyFatParams) -> str:
    return f"{params.age}-year-old-{params.gender}-{params.method}"


def parse_body_fat_slug(slug: str, reference: ReferenceData | None = None) -> BodyFatParams | None:
    match = _match(BODY_FAT_PATTERN, slug)
    if not match:
        return _reject("body-fat", slug, "grammar")

    ref = _ref(reference)
    age, gender, method = int(match[1]), match[2], match[3]
    if age not in ref.domains.ages or gender not in ref.gender_slugs:
        return _reject("body-fat", slug, "out of domain")

    return BodyFatParams(age=age, gender=gender, method=method)


# ---------------------------------------------------------------------------
# Macro: <calories>-calories-<goal>-<diet>
# ---------------------------------------------------------------------------

def build_macro_slug(params: MacroParams) -> str:
    return f"{params.calories}-calories-{params.goal}-{params.diet}"


def parse_macro_slug(slug: str, reference: ReferenceData | None = None) -> MacroParams | None:
    match = _match(MACRO_PATTERN, slug)
    if not match:
        return _reject("macro", slug, "grammar")

    ref = _ref(reference)
    calories, goal, diet = int(match[1]), match[2], match[3]
    if (
        calories not in ref.domains.macro_calories
        or goal not in {g.slug for g in ref.macro_goals}
        or diet not in {d.slug for d in ref.macro_diets}
    ):
        return _reject("macro", slug, "out of domain")

    return MacroParams(calories=calories, goal=goal, diet=diet)


# ---------------------------------------------------------------------------
# Per-kind lookup
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class SlugCodec:
    """The build/parse pair for one result kind."""

    kind: ResultKind
    build: Callable[[Any], str]
    parse: Callable[..., Any]

    def is_valid(self, params: Any, reference: ReferenceData | None = None) -> bool:
        """True when ``params`` survives a build/parse round trip."""
        return self.parse(self.build(params), reference) is not None


SLUG_CODECS: dict[ResultKind, SlugCodec] = {
    "bmi": SlugCodec("bmi", build_bmi_slug, parse_bmi_slug),
    "tdee": SlugCodec("tdee", build_tdee_slug, parse_tdee_slug),
    "calorie-deficit": SlugCodec(
        "calorie-deficit", build_calorie_deficit_slug, parse_calorie_deficit_slug
    ),
    "body-fat": SlugCodec("body-fat", build_body_fat_slug, parse_body_fat_slug),
    "macro": SlugCodec("macro", build_macro_slug, parse_macro_slug),
}


def get_codec(kind: str) -> SlugCodec:
    """Codec for ``kind``.

    Raises:
        ValueError: for an unknown result kind.
    """
    codec = SLUG_CODECS.get(kind)  # type: ignore[call-overload]
    if codec is None:
        raise ValueError(
            f"Unknown result kind: {kind!r}. Expected one of: {', '.join(RESULT_KINDS)}"
        )
    return codec
