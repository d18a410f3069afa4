from lp_hedge.calculator.controller import CalculatorController
from lp_hedge.calculator.render import render_error, render_fields, render_result
from lp_hedge.calculator.types import FormInputs


def test_render_result_defaults():
    result = CalculatorController().calculate()
    text = render_result(result)
    assert "S Amount: 7032.3488 ($5000.00)" in text
    assert "WETH Amount: 2.0000 ($5000.00)" in text
    assert "Optimal S Hedge: 3516.1744 tokens" in text
    assert "Optimal WETH Hedge: 1.0000 tokens" in text
    assert "Price Range (S/WETH)" in text
    assert "Lower: 0.000272" in text
    assert "Current: 0.000284" in text
    assert "Upper: 0.000297" in text


def test_render_error():
    assert render_error("Token 1 symbol is required") == "Error: Token 1 symbol is required"


def test_render_fields_uses_current_symbols():
    form = FormInputs(token1_symbol="ARB", token2_symbol="USDC")
    text = render_fields(form)
    assert "ARB Price (USD): '0.7110'" in text
    assert "USDC Price (USD): '2500'" in text
    assert "Percentage range above the current price for the liquidity position" in text
    assert "total_liquidity (totalLiquidity)" in text
