"""Tests for the policy profile registry."""

import pytest

from ppeguard.errors import InvalidProfile
from ppeguard.policy import DEFAULT_REGISTRY, PolicyRegistry, resolve
from ppeguard.types import ProtectionCategory as PC, WorkEnvironment


class TestDefaultProfiles:
    @pytest.mark.parametrize("name,expected", [
        ("construction", (PC.HEAD, PC.VISIBILITY, PC.EYE, PC.HAND, PC.FOOT)),
        ("manufacturing", (PC.HEAD, PC.EYE, PC.HAND, PC.FOOT)),
        ("laboratory", (PC.EYE, PC.HAND)),
        ("healthcare", (PC.HAND, PC.EYE)),
        ("general", (PC.HEAD, PC.VISIBILITY, PC.EYE, PC.HAND, PC.FOOT)),
    ])
    def test_required_categories(self, name, expected):
        profile = resolve(name)
        assert profile.name == name
        assert profile.required_categories == expected

    def test_every_profile_non_empty(self):
        for name in DEFAULT_REGISTRY.names():
            assert DEFAULT_REGISTRY.resolve(name).required_categories

    def test_all_environments_registered(self):
        for env in WorkEnvironment:
            assert env.value in DEFAULT_REGISTRY


class TestFallback:
    def test_unknown_name_is_general(self):
        assert resolve("not-a-real-profile") == resolve("general")

    def test_none_is_general(self):
        assert resolve(None).name == "general"

    def test_empty_string_is_general(self):
        assert resolve("").name == "general"

    def test_enum_member(self):
        assert resolve(WorkEnvironment.LABORATORY).name == "laboratory"

    def test_strict_unknown_raises(self):
        with pytest.raises(InvalidProfile, match="Unknown profile"):
            DEFAULT_REGISTRY.resolve("not-a-real-profile", strict=True)

    def test_strict_known_ok(self):
        assert DEFAULT_REGISTRY.resolve("healthcare", strict=True).name == "healthcare"


class TestFromDict:
    def test_adds_profile_keeps_defaults(self):
        registry = PolicyRegistry.from_dict({"warehouse": ["visibility", "foot_protection"]})
        assert registry.resolve("warehouse").required_categories == (PC.VISIBILITY, PC.FOOT)
        assert registry.resolve("laboratory").required_categories == (PC.EYE, PC.HAND)

    def test_overrides_builtin(self):
        registry = PolicyRegistry.from_dict({"laboratory": ["eye_protection"]})
        assert registry.resolve("laboratory").required_categories == (PC.EYE,)

    def test_nested_form(self):
        registry = PolicyRegistry.from_dict(
            {"kitchen": {"required_categories": ["hand_protection"]}}
        )
        assert registry.resolve("kitchen").required_categories == (PC.HAND,)

    def test_empty_profile_rejected(self):
        with pytest.raises(InvalidProfile, match="at least one"):
            PolicyRegistry.from_dict({"empty": []})

    def test_unknown_category_rejected(self):
        with pytest.raises(InvalidProfile, match="unknown protection category"):
            PolicyRegistry.from_dict({"noisy": ["ear_protection"]})

    def test_duplicate_category_rejected(self):
        with pytest.raises(InvalidProfile, match="duplicate"):
            PolicyRegistry.from_dict({"dup": ["visibility", "visibility"]})

    def test_bare_string_rejected(self):
        with pytest.raises(InvalidProfile):
            PolicyRegistry.from_dict({"oops": "visibility"})

    def test_missing_categories_rejected(self):
        # "warehouse:" with no value in YAML
        with pytest.raises(InvalidProfile, match="must be a list"):
            PolicyRegistry.from_dict({"warehouse": None})

    def test_non_iterable_rejected(self):
        with pytest.raises(InvalidProfile, match="must be a list"):
            PolicyRegistry.from_dict({"warehouse": 5})

    def test_list_of_profiles_rejected(self):
        with pytest.raises(InvalidProfile, match="must be a mapping"):
            PolicyRegistry.from_dict(["warehouse"])
