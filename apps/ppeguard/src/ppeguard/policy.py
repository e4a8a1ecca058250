"""Policy profile registry.

Maps a work environment name to the ordered protection categories it
requires. Unknown names fall back to ``general`` unless the caller asks
for strict resolution.

Example:
    >>> from ppeguard.policy import resolve
    >>> [c.value for c in resolve("laboratory").required_categories]
    ['eye_protection', 'hand_protection']
    >>> resolve("not-a-real-profile") == resolve("general")
    True
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Iterable, Mapping, Optional

from ppeguard.types import PolicyProfile, ProtectionCategory, WorkEnvironment
from ppeguard.errors import InvalidProfile

logger = logging.getLogger(__name__)

FALLBACK_PROFILE = WorkEnvironment.GENERAL.value

_HEAD = ProtectionCategory.HEAD
_VIS = ProtectionCategory.VISIBILITY
_EYE = ProtectionCategory.EYE
_HAND = ProtectionCategory.HAND
_FOOT = ProtectionCategory.FOOT

DEFAULT_REQUIREMENTS: Mapping[str, tuple[ProtectionCategory, ...]] = MappingProxyType({
    WorkEnvironment.CONSTRUCTION.value: (_HEAD, _VIS, _EYE, _HAND, _FOOT),
    WorkEnvironment.MANUFACTURING.value: (_HEAD, _EYE, _HAND, _FOOT),
    WorkEnvironment.LABORATORY.value: (_EYE, _HAND),
    WorkEnvironment.HEALTHCARE.value: (_HAND, _EYE),
    WorkEnvironment.GENERAL.value: (_HEAD, _VIS, _EYE, _HAND, _FOOT),
})


@dataclass(frozen=True)
class PolicyRegistry:
    """Immutable set of named policy profiles.

    Always contains a ``general`` profile, which is what unknown names
    resolve to.
    """

    profiles: Mapping[str, PolicyProfile]

    @classmethod
    def from_requirements(
        cls, requirements: Mapping[str, Iterable[ProtectionCategory | str]]
    ) -> PolicyRegistry:
        """Build a registry from ``{name: [category, ...]}``.

        The built-in profiles are used as a base; entries in
        ``requirements`` replace or extend them.

        Raises:
            InvalidProfile: If a profile lists no categories, an unknown
                category, or the same category twice.
        """
        merged: dict[str, PolicyProfile] = {
            name: PolicyProfile(name=name, required_categories=cats)
            for name, cats in DEFAULT_REQUIREMENTS.items()
        }
        for name, raw_categories in requirements.items():
            merged[name] = _build_profile(name, raw_categories)
        return cls(profiles=MappingProxyType(merged))

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> PolicyRegistry:
        """Build a registry from configuration data.

        Accepts either ``{name: [categories]}`` or
        ``{name: {"required_categories": [categories]}}``.
        """
        if not isinstance(data, Mapping):
            raise InvalidProfile(f"Profiles must be a mapping of name -> categories, got {type(data).__name__}")
        requirements = {}
        for name, value in data.items():
            if isinstance(value, Mapping):
                value = value.get("required_categories", [])
            requirements[str(name)] = value
        return cls.from_requirements(requirements)

    def resolve(self, name: Optional[str], strict: bool = False) -> PolicyProfile:
        """Return the profile for ``name``.

        Unknown or missing names resolve to the ``general`` profile. With
        ``strict=True`` they raise instead.

        Raises:
            InvalidProfile: In strict mode, if ``name`` is not registered.
        """
        key = name.value if isinstance(name, WorkEnvironment) else name
        profile = self.profiles.get(key) if key is not None else None
        if profile is not None:
            return profile
        if strict:
            known = ", ".join(sorted(self.profiles))
            raise InvalidProfile(f"Unknown profile: {name!r}. Known profiles: {known}")
        logger.debug("Unknown profile %r, using %r", name, FALLBACK_PROFILE)
        return self.profiles[FALLBACK_PROFILE]

    def names(self) -> list[str]:
        return list(self.profiles)

    def __contains__(self, name: object) -> bool:
        return name in self.profiles


def _build_profile(name: str, raw_categories: Iterable[ProtectionCategory | str]) -> PolicyProfile:
    if raw_categories is None or isinstance(raw_categories, (str, bytes, Mapping)):
        raise InvalidProfile(f"Profile '{name}': categories must be a list, got {raw_categories!r}")
    try:
        raw_list = list(raw_categories)
    except TypeError:
        raise InvalidProfile(f"Profile '{name}': categories must be a list, got {raw_categories!r}")

    categories: list[ProtectionCategory] = []
    for raw in raw_list:
        try:
            category = ProtectionCategory(raw)
        except ValueError:
            raise InvalidProfile(f"Profile '{name}': unknown protection category {raw!r}")
        if category in categories:
            raise InvalidProfile(f"Profile '{name}': duplicate category {category.value}")
        categories.append(category)

    if not categories:
        raise InvalidProfile(f"Profile '{name}' must require at least one category")
    return PolicyProfile(name=name, required_categories=tuple(categories))


DEFAULT_REGISTRY = PolicyRegistry.from_requirements({})


def resolve(name: Optional[str], registry: PolicyRegistry = DEFAULT_REGISTRY) -> PolicyProfile:
    """Resolve a profile name, falling back to ``general``."""
    return registry.resolve(name)


__all__ = [
    "PolicyRegistry",
    "DEFAULT_REGISTRY",
    "DEFAULT_REQUIREMENTS",
    "FALLBACK_PROFILE",
    "resolve",
]
