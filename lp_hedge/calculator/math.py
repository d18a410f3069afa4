"""Math for sizing a 50/50 LP position, its hedge and its price range"""

from .types import Positions, PriceRange

# Share of each token position held as the hedge
HEDGE_RATIO = 0.5


def calculate_positions(token1_price_usd, token2_price_usd, total_value):
    """
    Split a USD amount evenly between two tokens and size the hedge.

    Args:
        token1_price_usd: Token 1 price in USD (> 0)
        token2_price_usd: Token 2 price in USD (> 0)
        total_value: Total USD value of the position (> 0)

    Returns:
        Positions with token amounts, USD values, hedges and the pair price
    """
    value_per_side = total_value / 2

    token1_amount = value_per_side / token1_price_usd
    token2_amount = value_per_side / token2_price_usd

    return Positions(
        token1_amount=token1_amount,
        token2_amount=token2_amount,
        token1_value_usd=token1_amount * token1_price_usd,
        token2_value_usd=token2_amount * token2_price_usd,
        token1_hedge=token1_amount * HEDGE_RATIO,
        token2_hedge=token2_amount * HEDGE_RATIO,
        pair_price=token1_price_usd / token2_price_usd,
    )


def derive_price_range(pair_price, upper_pct, lower_pct):
    """
    Price range around the current pair price.

    Args:
        pair_price: Token 1 price in units of token 2
        upper_pct: Distance above current price, in percent (4.44 = 4.44%)
        lower_pct: Distance below current price, in percent

    Returns:
        PriceRange(lower, current, upper). Edges are not reordered, and a
        lower_pct above 100 gives a negative lower edge.
    """
    return PriceRange(
        lower=pair_price * (1 - lower_pct / 100),
        current=pair_price,
        upper=pair_price * (1 + upper_pct / 100),
    )
