import pytest

from roundnetpairing.constants import GROUP_SIZE_4, MODE_FIXED_4, MODE_MIXED
from roundnetpairing.exceptions import (
    GroupConfigurationException,
    InvalidConfigurationException,
    PlayerCountValidationException,
)
from roundnetpairing.models import CustomGroupConfiguration
from roundnetpairing.pairing import calculate_groups, preview_group_configuration
from roundnetpairing.pairing.group_sizes import solve_mixed_groups


@pytest.mark.parametrize("total", range(8, 41))
def test_fixed4_layout_covers_everyone(total):
    config = calculate_groups(total, MODE_FIXED_4)

    assert config.byes == total % GROUP_SIZE_4
    assert config.groups_of_8 == config.groups_of_12 == 0
    assert config.groups_of_4 * 4 == config.active_players_per_round
    assert config.active_players_per_round + config.byes == total
    assert config.total_groups == config.groups_of_4


@pytest.mark.parametrize("total", range(8, 31))
def test_mixed_layout_covers_everyone(total):
    config = calculate_groups(total, MODE_MIXED)

    assert config.byes == total % GROUP_SIZE_4
    assert config.groups_of_4 == 0
    assert (
        config.groups_of_8 * 8 + config.groups_of_12 * 12
        == config.active_players_per_round
    )
    assert config.total_groups == config.groups_of_8 + config.groups_of_12 > 0


def test_fixed4_examples():
    assert calculate_groups(8, MODE_FIXED_4).groups_of_4 == 2

    nine = calculate_groups(9, MODE_FIXED_4)
    assert (nine.byes, nine.groups_of_4) == (1, 2)

    thirty = calculate_groups(30, MODE_FIXED_4)
    assert (thirty.byes, thirty.groups_of_4) == (2, 7)


def test_mixed_examples():
    eight = calculate_groups(8, MODE_MIXED)
    assert (eight.groups_of_8, eight.groups_of_12, eight.byes) == (1, 0, 0)

    thirty = calculate_groups(30, MODE_MIXED)
    assert (thirty.groups_of_8, thirty.groups_of_12, thirty.byes) == (2, 1, 2)
    assert thirty.group_sizes == [8, 8, 12]


def test_mixed_prefers_larger_groups_by_default():
    larger = calculate_groups(24, MODE_MIXED)
    smaller = calculate_groups(24, MODE_MIXED, prefer_larger=False)

    assert (larger.groups_of_8, larger.groups_of_12) == (0, 2)
    assert (smaller.groups_of_8, smaller.groups_of_12) == (3, 0)


def test_mixed_without_solution_yields_no_groups():
    assert solve_mixed_groups(1, True) is None
    config = calculate_groups(5, MODE_MIXED)
    assert config.total_groups == 0


def test_custom_groups_override_mode():
    custom = CustomGroupConfiguration(groups_of_4=2, groups_of_8=1)
    config = calculate_groups(17, MODE_MIXED, custom=custom)

    assert config.active_players_per_round == 16
    assert config.byes == 1
    assert config.group_sizes == [4, 4, 8]
    assert config.total_groups == 3


def test_disabled_custom_groups_are_ignored():
    custom = CustomGroupConfiguration(groups_of_4=1, use_custom_groups=False)
    config = calculate_groups(12, MODE_FIXED_4, custom=custom)
    assert config.groups_of_4 == 3


def test_unknown_mode_raises():
    with pytest.raises(InvalidConfigurationException):
        calculate_groups(12, "groups-of-six")


@pytest.mark.parametrize(
    "total, mode", [(7, MODE_FIXED_4), (41, MODE_FIXED_4), (31, MODE_MIXED)]
)
def test_preview_rejects_out_of_bounds_counts(total, mode):
    with pytest.raises(PlayerCountValidationException):
        preview_group_configuration(total, mode)


def test_preview_rejects_bad_custom_groups():
    custom = CustomGroupConfiguration(groups_of_8=3)
    with pytest.raises(GroupConfigurationException, match="cannot exceed"):
        preview_group_configuration(20, MODE_FIXED_4, custom)


def test_preview_returns_layout():
    config = preview_group_configuration(22, MODE_MIXED)
    assert config.to_dict() == {
        "total_players": 22,
        "byes": 2,
        "active_players_per_round": 20,
        "groups_of_4": 0,
        "groups_of_8": 1,
        "groups_of_12": 1,
        "total_groups": 2,
    }
