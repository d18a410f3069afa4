"""Calculator type definitions: form state, results and controller states"""

from __future__ import annotations

from dataclasses import dataclass, fields as dataclass_fields
from enum import Enum
from typing import Dict

from ..core.exceptions import UnknownFieldError
from .fields import DEFAULT_VALUES, lookup_field


@dataclass
class FormInputs:
    """
    Raw text of the seven form fields.

    Values are kept exactly as typed; nothing is parsed until Calculate.
    """

    token1_symbol: str = DEFAULT_VALUES["token1_symbol"]
    token2_symbol: str = DEFAULT_VALUES["token2_symbol"]
    token1_price: str = DEFAULT_VALUES["token1_price"]
    token2_price: str = DEFAULT_VALUES["token2_price"]
    total_liquidity: str = DEFAULT_VALUES["total_liquidity"]
    upper_bound: str = DEFAULT_VALUES["upper_bound"]
    lower_bound: str = DEFAULT_VALUES["lower_bound"]

    @classmethod
    def from_mapping(cls, values: Dict[str, str]) -> FormInputs:
        """Build from a mapping keyed by snake_case or camelCase names"""
        form = cls()
        for name, value in values.items():
            form.set(name, value)
        return form

    def set(self, name: str, value) -> str:
        """
        Set a field by name.

        Returns:
            The canonical (snake_case) field name

        Raises:
            UnknownFieldError: If no such field exists
        """
        spec = lookup_field(name)
        if spec is None:
            raise UnknownFieldError(f"Unknown field: {name}")
        setattr(self, spec.name, "" if value is None else str(value))
        return spec.name

    def get(self, name: str) -> str:
        spec = lookup_field(name)
        if spec is None:
            raise UnknownFieldError(f"Unknown field: {name}")
        return getattr(self, spec.name)

    def as_dict(self) -> Dict[str, str]:
        return {f.name: getattr(self, f.name) for f in dataclass_fields(self)}


@dataclass(frozen=True)
class ValidatedInputs:
    """Parsed form values, only ever built by a successful validation"""

    token1_symbol: str
    token2_symbol: str
    token1_price: float
    token2_price: float
    total_liquidity: float
    upper_bound: float
    lower_bound: float


@dataclass(frozen=True)
class Positions:
    """Output of the 50/50 position and hedge sizing"""

    token1_amount: float
    token2_amount: float
    token1_value_usd: float
    token2_value_usd: float
    token1_hedge: float
    token2_hedge: float
    pair_price: float


@dataclass(frozen=True)
class PriceRange:
    """Range edges in token2 per token1"""

    lower: float
    current: float
    upper: float

    def to_dict(self) -> dict:
        return {"lower": self.lower, "current": self.current, "upper": self.upper}


@dataclass(frozen=True)
class CalculationResult:
    """
    Complete result of one Calculate.

    Symbols are captured at calculation time so rendering is unaffected
    by later edits to the form.
    """

    token1_symbol: str
    token2_symbol: str
    token1_amount: float
    token2_amount: float
    token1_value_usd: float
    token2_value_usd: float
    token1_hedge: float
    token2_hedge: float
    pair_price: float
    price_range: PriceRange

    @classmethod
    def build(
        cls, token1_symbol: str, token2_symbol: str, positions: Positions, price_range: PriceRange
    ) -> CalculationResult:
        return cls(
            token1_symbol=token1_symbol,
            token2_symbol=token2_symbol,
            token1_amount=positions.token1_amount,
            token2_amount=positions.token2_amount,
            token1_value_usd=positions.token1_value_usd,
            token2_value_usd=positions.token2_value_usd,
            token1_hedge=positions.token1_hedge,
            token2_hedge=positions.token2_hedge,
            pair_price=positions.pair_price,
            price_range=price_range,
        )

    def to_dict(self) -> dict:
        """JSON-ready dict with camelCase keys"""
        return {
            "token1Symbol": self.token1_symbol,
            "token2Symbol": self.token2_symbol,
            "token1Amount": self.token1_amount,
            "token2Amount": self.token2_amount,
            "token1ValueUSD": self.token1_value_usd,
            "token2ValueUSD": self.token2_value_usd,
            "token1Hedge": self.token1_hedge,
            "token2Hedge": self.token2_hedge,
            "pairPrice": self.pair_price,
            "priceRange": self.price_range.to_dict(),
        }


class CalculatorState(Enum):
    """Controller states"""

    IDLE = "idle"
    VALIDATING = "validating"
    DISPLAYING = "displaying"
    ERROR_DISPLAYED = "error_displayed"
