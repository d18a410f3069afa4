"""Text rendering of results, errors and the field list"""

from .fields import FIELDS

RULE_WIDTH = 60


def render_position_details(result):
    """Amounts, USD values and hedge sizes"""
    s1, s2 = result.token1_symbol, result.token2_symbol
    return [
        "Position Details",
        f"  {s1} Amount: {result.token1_amount:.4f} (${result.token1_value_usd:.2f})",
        f"  {s2} Amount: {result.token2_amount:.4f} (${result.token2_value_usd:.2f})",
        f"  Optimal {s1} Hedge: {result.token1_hedge:.4f} tokens",
        f"  Optimal {s2} Hedge: {result.token2_hedge:.4f} tokens",
    ]


def render_price_range(result):
    """Lower, current and upper pair price"""
    price_range = result.price_range
    return [
        f"Price Range ({result.token1_symbol}/{result.token2_symbol})",
        f"  Lower: {price_range.lower:.6f}",
        f"  Current: {price_range.current:.6f}",
        f"  Upper: {price_range.upper:.6f}",
    ]


def render_result(result):
    """Full results panel as a single string"""
    lines = ["=" * RULE_WIDTH, "Token Pair LP Calculator", "=" * RULE_WIDTH, ""]
    lines += render_position_details(result)
    lines.append("")
    lines += render_price_range(result)
    lines += ["", "=" * RULE_WIDTH]
    return "\n".join(lines)


def render_error(message):
    return f"Error: {message}"


def render_fields(form):
    """List every field with its label, current value and help text"""
    lines = []
    for spec in FIELDS:
        label = spec.render_label(form.token1_symbol, form.token2_symbol)
        lines.append(f"{spec.name} ({spec.key})")
        lines.append(f"  {label}: {getattr(form, spec.name)!r}")
        lines.append(f"  {spec.help}")
    return "\n".join(lines)
