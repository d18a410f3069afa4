"""Form field definitions: names, defaults, labels and help text"""

from dataclasses import dataclass


@dataclass(frozen=True)
class FieldSpec:
    """
    Static description of one form field.

    Attributes:
        name: Attribute name on FormInputs (snake_case)
        key: Original camelCase key, also accepted when setting by name
        default: Default raw text
        label: Display label; "{token1}" / "{token2}" are filled with symbols
        help: Contextual help shown next to the field
        numeric: Whether the field holds a number
    """

    name: str
    key: str
    default: str
    label: str
    help: str
    numeric: bool = True

    def render_label(self, token1_symbol="", token2_symbol=""):
        return self.label.format(token1=token1_symbol, token2=token2_symbol)


# Display order
FIELDS = (
    FieldSpec(
        name="token1_symbol",
        key="token1Symbol",
        default="S",
        label="Token 1 Symbol",
        help="The symbol of the first token in the trading pair",
        numeric=False,
    ),
    FieldSpec(
        name="token2_symbol",
        key="token2Symbol",
        default="WETH",
        label="Token 2 Symbol",
        help="The symbol of the second token in the trading pair",
        numeric=False,
    ),
    FieldSpec(
        name="token1_price",
        key="token1Price",
        default="0.7110",
        label="{token1} Price (USD)",
        help="Current market price of the first token in USD",
    ),
    FieldSpec(
        name="token2_price",
        key="token2Price",
        default="2500",
        label="{token2} Price (USD)",
        help="Current market price of the second token in USD",
    ),
    FieldSpec(
        name="total_liquidity",
        key="totalLiquidity",
        default="10000",
        label="Total Liquidity (USD)",
        help="Total value of liquidity you want to provide to the trading pair",
    ),
    FieldSpec(
        name="upper_bound",
        key="upperBound",
        default="4.44",
        label="Upper Bound (%)",
        help="Percentage range above the current price for the liquidity position",
    ),
    FieldSpec(
        name="lower_bound",
        key="lowerBound",
        default="4.44",
        label="Lower Bound (%)",
        help="Percentage range below the current price for the liquidity position",
    ),
)

FIELD_NAMES = tuple(f.name for f in FIELDS)

DEFAULT_VALUES = {f.name: f.default for f in FIELDS}

_BY_NAME = {f.name: f for f in FIELDS}
_BY_NAME.update({f.key: f for f in FIELDS})


def lookup_field(name):
    """Get FieldSpec by snake_case or camelCase name, or None"""
    return _BY_NAME.get(name)
