"""Tests for ordered request parameter validation."""

import pytest

from pricepath.analysis.sim_models import SimulationParameters
from pricepath.analysis.validation import Rejection, RejectionCode, validate_parameters


def _with(body, **overrides):
    return {**body, **overrides}


class TestAccepts:
    def test_valid_body(self, valid_body):
        params = validate_parameters(valid_body)
        assert params == SimulationParameters(100.0, 20.0, 30, 1000)

    def test_types_are_normalised(self, valid_body):
        params = validate_parameters(_with(valid_body, dias=30.0, simulaciones=1000.0))
        assert isinstance(params.horizon_days, int)
        assert isinstance(params.path_count, int)
        assert isinstance(params.current_price, float)

    @pytest.mark.parametrize("overrides", [
        {"volatilidad": 200},
        {"volatilidad": 0},
        {"dias": 1},
        {"dias": 365},
        {"simulaciones": 100},
        {"simulaciones": 10000},
        {"precio_actual": 0.01},
    ])
    def test_boundaries_accepted(self, valid_body, overrides):
        assert isinstance(validate_parameters(_with(valid_body, **overrides)), SimulationParameters)


class TestRejects:
    @pytest.mark.parametrize("overrides, code", [
        ({"precio_actual": 0}, RejectionCode.INVALID_PRICE),
        ({"precio_actual": -5}, RejectionCode.INVALID_PRICE),
        ({"volatilidad": 201}, RejectionCode.INVALID_VOLATILITY),
        ({"volatilidad": -0.1}, RejectionCode.INVALID_VOLATILITY),
        ({"dias": 0}, RejectionCode.INVALID_DAYS),
        ({"dias": 366}, RejectionCode.INVALID_DAYS),
        ({"simulaciones": 99}, RejectionCode.INVALID_SIMULATIONS),
        ({"simulaciones": 10001}, RejectionCode.INVALID_SIMULATIONS),
    ])
    def test_out_of_range(self, valid_body, overrides, code):
        outcome = validate_parameters(_with(valid_body, **overrides))
        assert isinstance(outcome, Rejection)
        assert outcome.code == code

    @pytest.mark.parametrize("overrides", [
        {"precio_actual": "100"},
        {"volatilidad": None},
        {"dias": True},
        {"dias": 10.5},
        {"simulaciones": float("nan")},
        {"precio_actual": float("inf")},
        {"simulaciones": [1000]},
        {"precio_actual": 10**400},
        {"simulaciones": -(10**400)},
    ])
    def test_wrong_type(self, valid_body, overrides):
        outcome = validate_parameters(_with(valid_body, **overrides))
        assert outcome.code == RejectionCode.INVALID_PARAMETERS
        assert outcome.message == "Parámetros inválidos"

    def test_missing_field(self, valid_body):
        del valid_body["dias"]
        assert validate_parameters(valid_body).code == RejectionCode.INVALID_PARAMETERS

    @pytest.mark.parametrize("body", [None, [], "x", 42])
    def test_not_an_object(self, body):
        assert validate_parameters(body).code == RejectionCode.INVALID_PARAMETERS

    def test_type_check_runs_first(self, valid_body):
        outcome = validate_parameters(_with(valid_body, precio_actual=0, dias="1"))
        assert outcome.code == RejectionCode.INVALID_PARAMETERS

    def test_first_violation_wins(self):
        body = {"precio_actual": -1, "volatilidad": 500, "dias": 0, "simulaciones": 1}
        outcome = validate_parameters(body)
        assert outcome.code == RejectionCode.INVALID_PRICE
        assert outcome.message == "El precio actual debe ser mayor que 0"

    def test_order_after_price(self, valid_body):
        assert validate_parameters(
            _with(valid_body, volatilidad=500, dias=0)
        ).code == RejectionCode.INVALID_VOLATILITY
        assert validate_parameters(
            _with(valid_body, dias=0, simulaciones=1)
        ).code == RejectionCode.INVALID_DAYS

    def test_messages(self, valid_body):
        assert validate_parameters(_with(valid_body, volatilidad=201)).message == (
            "La volatilidad debe estar entre 0 y 200"
        )
        assert validate_parameters(_with(valid_body, dias=0)).message == (
            "Los días deben estar entre 1 y 365"
        )
        assert validate_parameters(_with(valid_body, simulaciones=99)).message == (
            "Las simulaciones deben estar entre 100 y 10000"
        )
