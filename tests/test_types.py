import json

import pytest

from lp_hedge.calculator.types import (
    CalculationResult,
    FormInputs,
    Positions,
    PriceRange,
)
from lp_hedge.core.exceptions import UnknownFieldError


class TestFormInputs:

    def test_defaults(self):
        assert FormInputs().as_dict() == {
            "token1_symbol": "S",
            "token2_symbol": "WETH",
            "token1_price": "0.7110",
            "token2_price": "2500",
            "total_liquidity": "10000",
            "upper_bound": "4.44",
            "lower_bound": "4.44",
        }

    def test_set_accepts_both_spellings(self):
        form = FormInputs()
        assert form.set("token1Price", "0.8") == "token1_price"
        assert form.set("total_liquidity", 500) == "total_liquidity"
        assert form.token1_price == "0.8"
        assert form.get("totalLiquidity") == "500"

    def test_set_none_clears(self):
        form = FormInputs()
        form.set("token1Symbol", None)
        assert form.token1_symbol == ""

    def test_unknown_field(self):
        form = FormInputs()
        with pytest.raises(UnknownFieldError):
            form.set("slippage", "1")
        with pytest.raises(UnknownFieldError):
            form.get("slippage")

    def test_from_mapping(self):
        form = FormInputs.from_mapping({"token2Symbol": "USDC", "token2_price": "1"})
        assert form.token2_symbol == "USDC"
        assert form.token2_price == "1"
        assert form.token1_symbol == "S"


class TestCalculationResult:

    def test_to_dict_is_json_ready(self):
        positions = Positions(1.0, 2.0, 3.0, 4.0, 0.5, 1.0, 0.25)
        result = CalculationResult.build("S", "WETH", positions, PriceRange(0.2, 0.25, 0.3))
        data = json.loads(json.dumps(result.to_dict()))
        assert data == {
            "token1Symbol": "S",
            "token2Symbol": "WETH",
            "token1Amount": 1.0,
            "token2Amount": 2.0,
            "token1ValueUSD": 3.0,
            "token2ValueUSD": 4.0,
            "token1Hedge": 0.5,
            "token2Hedge": 1.0,
            "pairPrice": 0.25,
            "priceRange": {"lower": 0.2, "current": 0.25, "upper": 0.3},
        }
