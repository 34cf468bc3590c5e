"""Request parameter validation.

Checks run in a fixed order and the first failure wins. The outcome is a
value (``SimulationParameters`` or ``Rejection``), never an exception, so
the HTTP and CLI layers format it however they need.
"""

import math
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any

from pricepath.analysis.sim_models import SimulationParameters

FIELDS = ("precio_actual", "volatilidad", "dias", "simulaciones")
INTEGER_FIELDS = ("dias", "simulaciones")

MAX_VOLATILITY_PCT = 200
MIN_DAYS, MAX_DAYS = 1, 365
MIN_PATHS, MAX_PATHS = 100, 10000


class RejectionCode(str, Enum):
    INVALID_PARAMETERS = "invalid_parameters"
    INVALID_PRICE = "invalid_price"
    INVALID_VOLATILITY = "invalid_volatility"
    INVALID_DAYS = "invalid_days"
    INVALID_SIMULATIONS = "invalid_simulations"


@dataclass(frozen=True)
class Rejection:
    code: RejectionCode
    message: str


def _is_number(value: Any) -> bool:
    # bool is an int subclass but never a valid price or count
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    try:
        return math.isfinite(float(value))
    except OverflowError:
        return False


def _is_integral(value: int | float) -> bool:
    return isinstance(value, int) or value.is_integer()


def _well_typed(body: Mapping[str, Any]) -> bool:
    if not all(_is_number(body.get(field)) for field in FIELDS):
        return False
    return all(_is_integral(body[field]) for field in INTEGER_FIELDS)


_CHECKS: tuple[tuple[Callable[[Mapping[str, Any]], bool], RejectionCode, str], ...] = (
    (
        _well_typed,
        RejectionCode.INVALID_PARAMETERS,
        "Parámetros inválidos",
    ),
    (
        lambda b: b["precio_actual"] > 0,
        RejectionCode.INVALID_PRICE,
        "El precio actual debe ser mayor que 0",
    ),
    (
        lambda b: 0 <= b["volatilidad"] <= MAX_VOLATILITY_PCT,
        RejectionCode.INVALID_VOLATILITY,
        f"La volatilidad debe estar entre 0 y {MAX_VOLATILITY_PCT}",
    ),
    (
        lambda b: MIN_DAYS <= b["dias"] <= MAX_DAYS,
        RejectionCode.INVALID_DAYS,
        f"Los días deben estar entre {MIN_DAYS} y {MAX_DAYS}",
    ),
    (
        lambda b: MIN_PATHS <= b["simulaciones"] <= MAX_PATHS,
        RejectionCode.INVALID_SIMULATIONS,
        f"Las simulaciones deben estar entre {MIN_PATHS} y {MAX_PATHS}",
    ),
)


def validate_parameters(body: Any) -> SimulationParameters | Rejection:
    """Validate a request body and build simulation parameters.

    Args:
        body: Decoded JSON body; anything other than a mapping is rejected.

    Returns:
        SimulationParameters when every check passes, otherwise the
        Rejection of the first failing check.
    """
    if not isinstance(body, Mapping):
        return Rejection(RejectionCode.INVALID_PARAMETERS, _CHECKS[0][2])

    for check, code, message in _CHECKS:
        if not check(body):
            return Rejection(code, message)

    return SimulationParameters(
        current_price=float(body["precio_actual"]),
        annual_volatility_pct=float(body["volatilidad"]),
        horizon_days=int(body["dias"]),
        path_count=int(body["simulaciones"]),
    )
