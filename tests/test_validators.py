from __future__ import annotations

from dataclasses import replace

import pytest

from inputs.params import ProjectionFailure, ProjectionParams
from inputs.validators import blocking_failures, validate_params


def test_valid_params_pass(huracan_params):
    result = validate_params(huracan_params)

    assert result.is_valid
    assert result.failure is None
    assert result.warnings == []
    assert result.summary() == "✓ All checks passed."


def test_all_failures_collected_in_order():
    result = validate_params(ProjectionParams())

    assert not result.is_valid
    assert result.failures == [
        ProjectionFailure.INVALID_PRICE,
        ProjectionFailure.INVALID_TARGET,
        ProjectionFailure.INSUFFICIENT_INPUTS,
    ]
    assert result.failure is ProjectionFailure.INVALID_PRICE
    assert "ERRORS (3):" in result.summary()


def test_contribution_alone_is_enough(huracan_params):
    params = replace(huracan_params, current_holdings_units=0.0, monthly_contribution=100.0)
    assert validate_params(params).is_valid


def test_negative_holdings_and_contribution_insufficient(huracan_params):
    params = replace(huracan_params, current_holdings_units=-1.0, monthly_contribution=-5.0)
    assert validate_params(params).failure is ProjectionFailure.INSUFFICIENT_INPUTS


def test_percent_form_rate_warns(huracan_params):
    result = validate_params(replace(huracan_params, annual_growth_rate=20.0))

    assert result.is_valid
    assert len(result.warnings) == 1
    assert "percent vs decimal" in result.warnings[0]


def test_out_of_range_rates_warn(huracan_params):
    result = validate_params(
        replace(huracan_params, annual_growth_rate=0.60, annual_inflation_rate=0.20)
    )

    assert result.is_valid
    assert len(result.warnings) == 2
    assert "WARNINGS (2):" in result.summary()


def test_holdings_above_supply_cap_warn(huracan_params):
    result = validate_params(replace(huracan_params, current_holdings_units=22_000_000.0))
    assert any("21M supply cap" in w for w in result.warnings)


@pytest.mark.parametrize("rate", [-1.0, -1.5, float("nan"), float("inf")])
def test_unusable_growth_rate_blocks(huracan_params, rate):
    result = validate_params(replace(huracan_params, annual_growth_rate=rate))

    assert not result.is_valid
    assert result.failure is ProjectionFailure.INVALID_RATE
    assert not any("percent vs decimal" in w for w in result.warnings)


def test_unusable_inflation_rate_blocks(huracan_params):
    result = validate_params(replace(huracan_params, annual_inflation_rate=-1.0))
    assert result.failure is ProjectionFailure.INVALID_RATE


def test_deflation_above_minus_one_is_allowed(huracan_params):
    result = validate_params(replace(huracan_params, annual_inflation_rate=-0.5))

    assert result.is_valid
    assert len(result.warnings) == 1


class TestBlockingFailures:

    def test_valid_params_have_none(self, huracan_params):
        assert blocking_failures(huracan_params) == []

    def test_out_of_range_rates_do_not_block(self, huracan_params):
        params = replace(huracan_params, annual_growth_rate=20.0, current_holdings_units=3e7)
        assert blocking_failures(params) == []

    def test_check_order(self):
        params = ProjectionParams(annual_growth_rate=-2.0)
        assert blocking_failures(params) == [
            ProjectionFailure.INVALID_PRICE,
            ProjectionFailure.INVALID_TARGET,
            ProjectionFailure.INSUFFICIENT_INPUTS,
            ProjectionFailure.INVALID_RATE,
        ]

    @pytest.mark.parametrize(
        "changes",
        [{}, {"current_unit_price": None}, {"annual_inflation_rate": float("nan")},
         {"current_holdings_units": 0.0}, {"annual_growth_rate": 0.9}],
    )
    def test_matches_validate_params_failures(self, huracan_params, changes):
        params = replace(huracan_params, **changes)
        assert blocking_failures(params) == validate_params(params).failures
