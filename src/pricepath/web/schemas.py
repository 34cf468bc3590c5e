"""Pydantic request/response schemas for the pricepath API."""

from pydantic import BaseModel, Field


class SimulationRequest(BaseModel):
    precio_actual: float = Field(description="Current price, > 0")
    volatilidad: float = Field(description="Annualized volatility in percent, 0-200")
    dias: int = Field(description="Horizon in days, 1-365")
    simulaciones: int = Field(description="Number of simulated paths, 100-10000")


class SimulationResponse(BaseModel):
    simulaciones: list[list[float]] = Field(
        description="Trajectory matrix, one row per path, horizon + 1 prices each"
    )
    promedio: list[float] = Field(description="Mean price per step")
    percentil_5: list[float] = Field(description="5th percentile per step")
    percentil_95: list[float] = Field(description="95th percentile per step")
    precio_final_promedio: float
    precio_final_minimo: float
    precio_final_maximo: float
    var_95: float = Field(description="95% Value-at-Risk in price units")
    var_percentaje: float = Field(description="5th percentile terminal return (%)")


class ErrorResponse(BaseModel):
    error: str = Field(description="Human-readable message")
    code: str = Field(description="Machine-readable error code")


# --- System schemas ---


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str = "0.1.0"
    service: str = "pricepath-api"
