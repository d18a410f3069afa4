import pytest

from lp_hedge.calculator.math import calculate_positions, derive_price_range


class TestCalculatePositions:

    def test_default_example(self):
        positions = calculate_positions(0.7110, 2500, 10000)
        assert positions.token1_amount == pytest.approx(7032.3488, abs=1e-4)
        assert positions.token2_amount == 2.0
        assert positions.pair_price == pytest.approx(0.0002844)
        assert positions.token1_value_usd == pytest.approx(5000)
        assert positions.token2_value_usd == pytest.approx(5000)

    @pytest.mark.parametrize("p1,p2,total", [
        (0.7110, 2500, 10000),
        (1.0, 1.0, 1.0),
        (65000, 0.9998, 123456.78),
        (1e-8, 3500, 50),
        (3.3, 3.3, 7),
    ])
    def test_values_sum_to_total(self, p1, p2, total):
        positions = calculate_positions(p1, p2, total)
        assert positions.token1_value_usd + positions.token2_value_usd == pytest.approx(total)

    @pytest.mark.parametrize("p1,p2,total", [
        (0.7110, 2500, 10000),
        (17.25, 0.031, 999.99),
    ])
    def test_hedge_is_half_of_position(self, p1, p2, total):
        positions = calculate_positions(p1, p2, total)
        assert positions.token1_hedge == positions.token1_amount / 2
        assert positions.token2_hedge == positions.token2_amount / 2

    def test_pair_price_is_price_ratio(self):
        positions = calculate_positions(0.7110, 2500, 10000)
        assert positions.pair_price == 0.7110 / 2500


class TestDerivePriceRange:

    def test_symmetric_bounds(self):
        p = 0.7110 / 2500
        price_range = derive_price_range(p, 4.44, 4.44)
        assert price_range.current == p
        assert price_range.upper == pytest.approx(p * 1.0444)
        assert price_range.lower == pytest.approx(p * 0.9556)

    def test_asymmetric_bounds(self):
        price_range = derive_price_range(100.0, 10, 5)
        assert price_range.upper == pytest.approx(110.0)
        assert price_range.lower == pytest.approx(95.0)

    def test_zero_bounds_collapse_to_current(self):
        price_range = derive_price_range(3.5, 0, 0)
        assert price_range.lower == price_range.current == price_range.upper == 3.5

    def test_lower_over_100_percent_goes_negative(self):
        price_range = derive_price_range(2.0, 0, 150)
        assert price_range.lower == pytest.approx(-1.0)
        assert price_range.upper == 2.0
