"""Immutable in-memory store of Foundation Foods records."""

import logging
from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Protocol

from foundation_foods.domain.errors import (
    CorpusLoadError,
    CorpusNotReadyError,
    FoodNotFoundError,
)
from foundation_foods.domain.foods import FoodRecord

_logger = logging.getLogger(__name__)


class FoodSource(Protocol):
    """Interface for loading food records from a dataset."""

    @property
    def location(self) -> str:
        """Human readable location of the dataset."""

    def load_foods(self) -> list[FoodRecord]:
        """Return all foods in dataset order."""


@dataclass(frozen=True)
class Corpus:
    """Ordered, read-only collection of foods with an id index."""

    foods: tuple[FoodRecord, ...]
    _by_id: Mapping[int, FoodRecord] = field(repr=False, compare=False)

    @classmethod
    def from_foods(cls, foods: Iterable[FoodRecord], source: str = "<memory>") -> "Corpus":
        """Build a corpus, rejecting duplicate FDC ids."""
        ordered = tuple(foods)
        by_id: dict[int, FoodRecord] = {}
        for food in ordered:
            if food.fdc_id in by_id:
                raise CorpusLoadError(source, f"duplicate fdcId {food.fdc_id}")
            by_id[food.fdc_id] = food
        return cls(foods=ordered, _by_id=MappingProxyType(by_id))

    def __len__(self) -> int:
        return len(self.foods)

    def __iter__(self) -> Iterator[FoodRecord]:
        return iter(self.foods)

    def get(self, fdc_id: int) -> FoodRecord | None:
        return self._by_id.get(fdc_id)


@dataclass
class CorpusStore:
    """Holds the corpus loaded once at startup."""

    corpus: Corpus | None = None

    def load(self, source: FoodSource) -> Corpus:
        """Load the corpus from a source. Only one load is allowed."""
        if self.corpus is not None:
            raise CorpusLoadError(source.location, "corpus is already loaded")
        _logger.info("Loading Foundation Foods data from %s", source.location)
        corpus = Corpus.from_foods(source.load_foods(), source=source.location)
        self.corpus = corpus
        _logger.info("Foundation Foods data loaded: food_count=%s", len(corpus))
        return corpus

    def is_ready(self) -> bool:
        return self.corpus is not None and len(self.corpus) > 0

    def ensure_ready(self) -> Corpus:
        """Return the loaded corpus or raise if it is missing or empty."""
        if self.corpus is None:
            raise CorpusNotReadyError("Foundation Foods data not loaded")
        if len(self.corpus) == 0:
            raise CorpusNotReadyError("Foundation Foods data is empty")
        return self.corpus

    def lookup(self, fdc_id: int) -> FoodRecord:
        """Return the food with the given FDC id."""
        food = self.ensure_ready().get(fdc_id)
        if food is None:
            raise FoodNotFoundError(fdc_id)
        return food
