"""Foundation Foods domain models."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class NutrientMeasurement:
    """Single nutrient reading for a food."""

    name: str
    unit_name: str
    amount: float
    nutrient_id: int | None = None
    number: str | None = None
    data_points: int | None = None
    min: float | None = None
    max: float | None = None
    median: float | None = None


@dataclass(frozen=True)
class MeasureUnit:
    """Household measurement unit for a portion."""

    name: str
    abbreviation: str


@dataclass(frozen=True)
class FoodPortion:
    """Portion / serving size for a food."""

    value: float
    measure_unit: MeasureUnit
    gram_weight: float
    amount: float


@dataclass(frozen=True)
class FoodRecord:
    """A Foundation Foods record as loaded from the dataset."""

    fdc_id: int
    description: str
    nutrients: tuple[NutrientMeasurement, ...] = ()
    portions: tuple[FoodPortion, ...] = ()
    category: str = ""
    data_type: str | None = None
    food_class: str | None = None
    ndb_number: int | None = None
    publication_date: str | None = None


@dataclass(frozen=True)
class ScoredCandidate:
    """Food paired with its relevance score for one search."""

    food: FoodRecord
    score: float


@dataclass(frozen=True)
class SimplifiedNutrient:
    """Reduced nutrient view."""

    name: str
    unit_name: str
    amount: float
    data_points: int | None = None
    min: float | None = None
    max: float | None = None
    median: float | None = None


@dataclass(frozen=True)
class SimplifiedPortion:
    """Reduced portion view."""

    value: float
    measure_unit: MeasureUnit
    gram_weight: float
    amount: float


@dataclass(frozen=True)
class SimplifiedFood:
    """Food reduced to its name, filtered nutrients and portions."""

    name: str
    nutrients: tuple[SimplifiedNutrient, ...] = ()
    portions: tuple[SimplifiedPortion, ...] = ()


@dataclass(frozen=True)
class SimplifiedNutrientResponse:
    """Wrapper returned by the simplified search."""

    found: bool
    count: int
    foods: tuple[SimplifiedFood, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class SearchResponse:
    """Wrapper returned by the full-record search."""

    found: bool
    count: int
    items: tuple[FoodRecord, ...] = field(default_factory=tuple)
