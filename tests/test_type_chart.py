"""Tests for the static type chart queries."""

from __future__ import annotations

from poke_team.data.type_chart import (
    TYPE_EFFECTIVENESS,
    TYPE_ORDER,
    damage_multiplier,
    effectiveness,
    immunities,
    resistances,
    super_effective_against,
    type_profile,
    types_effective_against,
    types_resistant_to,
    weaknesses,
)


def test_chart_covers_eighteen_types() -> None:
    assert len(TYPE_ORDER) == 18
    assert set(TYPE_EFFECTIVENESS) == set(TYPE_ORDER)


def test_unlisted_pairs_are_neutral() -> None:
    for attack in TYPE_ORDER:
        for defender in TYPE_ORDER:
            expected = TYPE_EFFECTIVENESS[attack].get(defender, 1.0)
            assert effectiveness(attack, defender) == expected
    assert effectiveness("normal", "fire") == 1.0


def test_unknown_types_are_neutral_and_lookup_ignores_case() -> None:
    assert effectiveness("shadow", "fire") == 1.0
    assert effectiveness("fire", "shadow") == 1.0
    assert effectiveness("FIRE", "Grass") == 2.0


def test_dual_type_multipliers_stack() -> None:
    assert damage_multiplier("rock", ["fire", "flying"]) == 4.0
    assert damage_multiplier("ice", ["water", "flying"]) == 1.0
    assert damage_multiplier("ground", ["steel", "flying"]) == 0.0
    assert damage_multiplier("fire", ["water", "dragon"]) == 0.25
    assert damage_multiplier("fire", []) == 1.0


def test_weaknesses_resistances_and_immunities_are_disjoint() -> None:
    for typing in (["ghost", "dark"], ["fire", "flying"], ["steel", "fairy"], ["normal"]):
        weak = set(weaknesses(typing))
        resist = set(resistances(typing))
        immune = set(immunities(typing))
        assert not weak & resist
        assert not weak & immune
        assert not resist & immune


def test_ghost_dark_profile() -> None:
    assert immunities(["ghost", "dark"]) == ["normal", "fighting", "psychic"]
    assert "poison" in resistances(["ghost", "dark"])
    assert "normal" not in resistances(["ghost", "dark"])
    assert weaknesses(["ghost", "dark"]) == ["fairy"]


def test_charizard_weaknesses_follow_type_order() -> None:
    assert weaknesses(["fire", "flying"]) == ["water", "electric", "rock"]


def test_super_effective_against_deduplicates_targets() -> None:
    targets = super_effective_against(["fire", "flying"])
    assert targets == ["grass", "ice", "bug", "steel", "fighting"]
    assert len(targets) == len(set(targets))


def test_single_type_lookups() -> None:
    assert types_resistant_to("electric") == ["electric", "grass", "ground", "dragon"]
    assert types_effective_against("normal") == ["fighting"]
    assert types_effective_against("grass") == ["fire", "ice", "poison", "flying", "bug"]


def test_type_profile_lowercases_input() -> None:
    profile = type_profile(["Water", "GROUND"])
    assert profile["types"] == ["water", "ground"]
    assert profile["weaknesses"] == ["grass"]
    assert profile["immunities"] == ["electric"]
    assert set(profile) == {
        "types",
        "weaknesses",
        "resistances",
        "immunities",
        "super_effective_against",
    }
