import re
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal
from typing import Final, Iterable, Optional, Tuple, Union

from django.core.exceptions import ImproperlyConfigured
from django.db import models


PRECISION: Final[int] = 3
_QUANTUM: Final[Decimal] = Decimal(1).scaleb(-PRECISION)
_RATIO_PATTERN: Final = re.compile(r"^\s*(\d+)\s*:\s*(\d+)\s*$")


class Orientation(models.TextChoices):
    SQUARE = "square", "Square"
    PORTRAIT = "portrait", "Portrait"
    LANDSCAPE = "landscape", "Landscape"


class Reason(models.TextChoices):
    """
    判定に失敗した理由。値はそのままValidationErrorのcodeとして使う
    """
    METADATA_MISSING = "image_metadata_missing", "Metadata missing"
    NOT_SQUARE = "aspect_ratio_not_square", "Not square"
    NOT_PORTRAIT = "aspect_ratio_not_portrait", "Not portrait"
    NOT_LANDSCAPE = "aspect_ratio_not_landscape", "Not landscape"
    NO_RATIO_MATCH = "aspect_ratio_is_not_match_any_ratio", "No ratio match"
    UNKNOWN_CONSTRAINT = "aspect_ratio_unknown", "Unknown constraint"


def round_ratio(numerator: float, denominator: float) -> Decimal:
    """
    numerator / denominator を小数点以下PRECISION桁に丸める(四捨五入)
    """
    return Decimal(repr(float(numerator) / float(denominator))).quantize(_QUANTUM, rounding=ROUND_HALF_UP)


@dataclass(frozen=True)
class Ratio:
    numerator: float
    denominator: float

    def __post_init__(self):
        if not self.denominator > 0:
            raise ImproperlyConfigured(f"縦横比「{self}」の分母には正の数を指定してください")

    @classmethod
    def from_string(cls, value: str) -> "Ratio":
        match = _RATIO_PATTERN.match(value)
        if match is None:
            raise ImproperlyConfigured(f"縦横比「{value}」は「16:9」の形式で指定してください")

        return cls(numerator=float(match.group(1)), denominator=float(match.group(2)))

    @property
    def rounded(self) -> Decimal:
        return round_ratio(self.numerator, self.denominator)

    def __str__(self):
        return f"{_format_number(self.numerator)}:{_format_number(self.denominator)}"


def _format_number(value: float) -> str:
    if float(value).is_integer():
        return str(int(value))

    return str(value)


@dataclass(frozen=True)
class RatioList:
    ratios: Tuple[Ratio, ...]

    def __str__(self):
        return ", ".join(str(ratio) for ratio in self.ratios)


Constraint = Union[Orientation, RatioList]


@dataclass(frozen=True)
class EvaluationResult:
    passed: bool
    reason: Optional[Reason] = None


PASSED: Final = EvaluationResult(passed=True)


def parse_constraint(value) -> Constraint:
    """
    設定値(:square / :portrait / :landscape / ["16:9", ...])をConstraintに変換する。
    不正な設定はレコードの検証前にImproperlyConfiguredとして失敗させる
    """
    if value is None:
        raise ImproperlyConfigured('You must pass "with_" option to the aspect ratio validator')

    if isinstance(value, (Orientation, RatioList)):
        return value

    if isinstance(value, str):
        try:
            return Orientation(value)
        except ValueError:
            pass

        raise ImproperlyConfigured(
            f"縦横比「{value}」は指定できません。{', '.join(Orientation.values)}または比率のリストを指定してください"
        )

    if isinstance(value, (list, tuple)):
        if len(value) == 0:
            raise ImproperlyConfigured("縦横比のリストには1つ以上の比率を指定してください")

        return RatioList(ratios=tuple(_to_ratio(item) for item in value))

    raise ImproperlyConfigured(f"縦横比の指定が不正です: {value!r}")


def _to_ratio(item: Union[str, Ratio]) -> Ratio:
    if isinstance(item, Ratio):
        return item

    if isinstance(item, str):
        return Ratio.from_string(item)

    raise ImproperlyConfigured(f"縦横比の指定が不正です: {item!r}")


def evaluate(width: int, height: int, constraint: Constraint) -> EvaluationResult:
    if width <= 0 or height <= 0:
        return EvaluationResult(passed=False, reason=Reason.METADATA_MISSING)

    if constraint == Orientation.SQUARE:
        return PASSED if width == height else EvaluationResult(passed=False, reason=Reason.NOT_SQUARE)

    if constraint == Orientation.PORTRAIT:
        return PASSED if height > width else EvaluationResult(passed=False, reason=Reason.NOT_PORTRAIT)

    if constraint == Orientation.LANDSCAPE:
        return PASSED if width > height else EvaluationResult(passed=False, reason=Reason.NOT_LANDSCAPE)

    if isinstance(constraint, RatioList):
        if _matches_any(round_ratio(width, height), constraint.ratios):
            return PASSED

        return EvaluationResult(passed=False, reason=Reason.NO_RATIO_MATCH)

    return EvaluationResult(passed=False, reason=Reason.UNKNOWN_CONSTRAINT)


def _matches_any(file_ratio: Decimal, ratios: Iterable[Ratio]) -> bool:
    return any(ratio.rounded == file_ratio for ratio in ratios)
