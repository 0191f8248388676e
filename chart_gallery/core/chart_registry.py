"""
Chart registry mapping every chart variant to the example class that draws it.

The registry is built once, checked for full coverage of ``ChartVariant`` and
read-only afterwards. All per-variant facets (title, category, overview and
detail views, accessibility descriptor) are answered by dispatching to the
registered example class, so there is no per-accessor switch to keep in sync.
"""

from functools import lru_cache
from types import MappingProxyType
from typing import Callable, Dict, Iterable, Iterator, List, Mapping, Optional, Sequence, Tuple, Type, Union

import pandas as pd

from .accessibility import ChartDescriptor
from .constants import ChartCategory, ChartVariant
from .examples import BUILTIN_EXAMPLES, ChartExample, ChartView
from .exceptions import RegistryError, UnknownVariantError
from .sample_data import generate_sample_data

VariantLike = Union[ChartVariant, str]
DataSource = Callable[[ChartVariant], pd.DataFrame]


def resolve_variant(identifier: VariantLike) -> ChartVariant:
    """Turn a variant or its string id into a ChartVariant."""
    if isinstance(identifier, ChartVariant):
        return identifier
    if isinstance(identifier, str):
        try:
            return ChartVariant(identifier)
        except ValueError:
            raise UnknownVariantError(identifier) from None
    raise UnknownVariantError(identifier)


def resolve_category(identifier: Union[ChartCategory, str]) -> ChartCategory:
    """Turn a category or its string id into a ChartCategory."""
    if isinstance(identifier, ChartCategory):
        return identifier
    try:
        return ChartCategory(identifier)
    except ValueError:
        raise ValueError(f"Unknown chart category: {identifier!r}") from None


class ChartRegistry:
    """Registry mapping chart variants to chart example classes."""

    def __init__(
        self,
        examples: Iterable[Type[ChartExample]] = BUILTIN_EXAMPLES,
        data_source: Optional[DataSource] = None,
        palette: Optional[Sequence[str]] = None,
        overview_figsize: Optional[Tuple[float, float]] = None,
        detail_figsize: Optional[Tuple[float, float]] = None,
    ):
        self._examples: Dict[ChartVariant, Type[ChartExample]] = {}
        self.data_source = data_source or generate_sample_data
        self.palette = list(palette) if palette else None
        self.overview_figsize = overview_figsize
        self.detail_figsize = detail_figsize

        for example in examples:
            self._register(example)
        self._check_coverage()

    def _register(self, example: Type[ChartExample]) -> None:
        """Register the example class for its declared variant."""
        variant = resolve_variant(example.variant)
        if variant in self._examples:
            raise ValueError(
                f"Chart variant '{variant}' is already registered to {self._examples[variant].__name__}."
            )
        self._examples[variant] = example

    def _check_coverage(self) -> None:
        missing = [variant.value for variant in ChartVariant if variant not in self._examples]
        if missing:
            raise RegistryError(f"No chart example registered for variants: {', '.join(missing)}")

        for variant, example in self._examples.items():
            if not isinstance(example.category, ChartCategory) or example.category is ChartCategory.ALL:
                raise RegistryError(f"Chart variant '{variant}' must declare a concrete category, got {example.category!r}")
            if not example.title:
                raise RegistryError(f"Chart variant '{variant}' has an empty title")

    @property
    def examples(self) -> Mapping[ChartVariant, Type[ChartExample]]:
        return MappingProxyType(self._examples)

    def __iter__(self) -> Iterator[ChartVariant]:
        """Iterate over variants in declaration order."""
        return iter(self.variants())

    def __len__(self) -> int:
        return len(self._examples)

    def __contains__(self, identifier) -> bool:
        try:
            return resolve_variant(identifier) in self._examples
        except UnknownVariantError:
            return False

    def title_of(self, variant: VariantLike) -> str:
        return self._examples[resolve_variant(variant)].title

    def category_of(self, variant: VariantLike) -> ChartCategory:
        return self._examples[resolve_variant(variant)].category

    def example_for(self, variant: VariantLike, is_overview: bool = True, **options) -> ChartExample:
        """Instantiate the variant's example with its dataset."""
        variant = resolve_variant(variant)
        example_class = self._examples[variant]
        figsize = self.overview_figsize if is_overview else self.detail_figsize
        return example_class(
            self.data_source(variant),
            is_overview=is_overview,
            palette=self.palette,
            figsize=figsize,
            **options,
        )

    def overview_view(self, variant: VariantLike, **options) -> ChartView:
        return self.example_for(variant, is_overview=True, **options).render()

    def detail_view(self, variant: VariantLike, **options) -> ChartView:
        return self.example_for(variant, is_overview=False, **options).render()

    def accessibility_descriptor(self, variant: VariantLike) -> ChartDescriptor:
        """
        Build the variant's accessibility descriptor from its overview example.

        Raises:
            UnimplementedDescriptorError: the example does not describe its data.
        """
        return self.example_for(variant, is_overview=True).make_chart_descriptor()

    def variants(self, category: Union[ChartCategory, str] = ChartCategory.ALL) -> List[ChartVariant]:
        """Variants in declaration order, optionally limited to one category."""
        category = resolve_category(category)
        return [
            variant for variant in ChartVariant
            if category is ChartCategory.ALL or self._examples[variant].category is category
        ]

    def grouped_by_category(self) -> Dict[ChartCategory, List[ChartVariant]]:
        """Partition of all variants by category, in category order."""
        groups: Dict[ChartCategory, List[ChartVariant]] = {
            category: [] for category in ChartCategory if category is not ChartCategory.ALL
        }
        for variant in ChartVariant:
            groups[self._examples[variant].category].append(variant)
        return groups


@lru_cache(maxsize=None)
def default_registry() -> ChartRegistry:
    """Process-wide registry over the built-in examples and sample data."""
    return ChartRegistry()


def title_of(variant: VariantLike) -> str:
    return default_registry().title_of(variant)


def category_of(variant: VariantLike) -> ChartCategory:
    return default_registry().category_of(variant)


def overview_view(variant: VariantLike, **options) -> ChartView:
    return default_registry().overview_view(variant, **options)


def detail_view(variant: VariantLike, **options) -> ChartView:
    return default_registry().detail_view(variant, **options)


def accessibility_descriptor(variant: VariantLike) -> ChartDescriptor:
    return default_registry().accessibility_descriptor(variant)


def variants(category: Union[ChartCategory, str] = ChartCategory.ALL) -> List[ChartVariant]:
    return default_registry().variants(category)


def grouped_by_category() -> Dict[ChartCategory, List[ChartVariant]]:
    return default_registry().grouped_by_category()
