"""Equipment catalog: label -> protection category lookup.

The catalog is a flat table. Synonym groups only exist so that a UI can
show related labels together; the normalizer never follows them.

Example:
    >>> from ppeguard.catalog import DEFAULT_CATALOG
    >>> DEFAULT_CATALOG.category_of("hard hat")
    <ProtectionCategory.HEAD: 'head_protection'>
    >>> DEFAULT_CATALOG.category_of("umbrella") is None
    True
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Iterable, Iterator, Mapping, Optional, Sequence

from ppeguard.errors import ConfigError
from ppeguard.types import CatalogEntry, ProtectionCategory

DEFAULT_PERSON_LABELS = frozenset({"person"})

# Labels per category; each label's synonyms are the rest of its group.
DEFAULT_EQUIPMENT_GROUPS: Mapping[ProtectionCategory, Sequence[str]] = MappingProxyType({
    ProtectionCategory.HEAD: ("helmet", "hard hat", "safety helmet"),
    ProtectionCategory.VISIBILITY: ("safety vest", "reflective vest", "hi-vis vest"),
    ProtectionCategory.EYE: ("safety glasses", "goggles", "protective eyewear"),
    ProtectionCategory.HAND: ("gloves", "safety gloves", "work gloves"),
    ProtectionCategory.FOOT: ("boots", "safety boots", "work boots"),
})


@dataclass(frozen=True)
class EquipmentCatalog:
    """Immutable label -> CatalogEntry table plus the labels meaning "person".

    Build with :meth:`from_groups` rather than passing ``entries`` by hand.
    """

    entries: Mapping[str, CatalogEntry]
    person_labels: frozenset[str] = DEFAULT_PERSON_LABELS

    @classmethod
    def from_groups(
        cls,
        groups: Mapping[ProtectionCategory | str, Iterable[str]],
        person_labels: Iterable[str] = DEFAULT_PERSON_LABELS,
    ) -> EquipmentCatalog:
        """Build a catalog from ``{category: [label, ...]}``.

        Categories may be given as enum members or their string values.

        Raises:
            ConfigError: On an unknown category, a label listed under two
                different categories, or labels that are not a list of
                strings.
        """
        if not isinstance(groups, Mapping):
            raise ConfigError(f"Catalog must be a mapping of category -> labels, got {type(groups).__name__}")
        entries: dict[str, CatalogEntry] = {}
        for raw_category, labels in groups.items():
            category = _parse_category(raw_category)
            group = list(dict.fromkeys(_label_list(f"catalog.{category.value}", labels)))
            for label in group:
                existing = entries.get(label)
                if existing is not None and existing.category != category:
                    raise ConfigError(
                        f"Label '{label}' mapped to both "
                        f"{existing.category.value} and {category.value}"
                    )
                entries[label] = CatalogEntry(
                    label=label,
                    category=category,
                    synonyms=frozenset(l for l in group if l != label),
                )
        return cls(
            entries=MappingProxyType(entries),
            person_labels=frozenset(_label_list("person_labels", person_labels)),
        )

    def lookup(self, label: str) -> Optional[CatalogEntry]:
        return self.entries.get(label)

    def category_of(self, label: str) -> Optional[ProtectionCategory]:
        entry = self.entries.get(label)
        return entry.category if entry is not None else None

    def is_person(self, label: str) -> bool:
        return label in self.person_labels

    def labels_for(self, category: ProtectionCategory) -> list[str]:
        """All labels that count toward ``category``, in catalog order."""
        return [e.label for e in self.entries.values() if e.category == category]

    def categories(self) -> list[ProtectionCategory]:
        """Distinct categories covered by the catalog, in catalog order."""
        return list(dict.fromkeys(e.category for e in self.entries.values()))

    def __contains__(self, label: object) -> bool:
        return label in self.entries

    def __iter__(self) -> Iterator[CatalogEntry]:
        return iter(self.entries.values())

    def __len__(self) -> int:
        return len(self.entries)


def _parse_category(raw: ProtectionCategory | str) -> ProtectionCategory:
    try:
        return ProtectionCategory(raw)
    except ValueError:
        valid = ", ".join(c.value for c in ProtectionCategory)
        raise ConfigError(f"Unknown protection category: {raw!r}. Use one of: {valid}")


def _label_list(field: str, labels: Iterable[str]) -> list[str]:
    # a bare string would otherwise iterate as single characters
    if labels is None or isinstance(labels, (str, bytes, Mapping)):
        raise ConfigError(f"{field} must be a list of labels, got {labels!r}")
    try:
        result = list(labels)
    except TypeError:
        raise ConfigError(f"{field} must be a list of labels, got {labels!r}")
    for label in result:
        if not isinstance(label, str) or not label:
            raise ConfigError(f"{field}: labels must be non-empty strings, got {label!r}")
    return result


DEFAULT_CATALOG = EquipmentCatalog.from_groups(DEFAULT_EQUIPMENT_GROUPS)


__all__ = [
    "EquipmentCatalog",
    "DEFAULT_CATALOG",
    "DEFAULT_EQUIPMENT_GROUPS",
    "DEFAULT_PERSON_LABELS",
]
