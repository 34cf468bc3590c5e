from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="PP_",
    )

    # API Server
    api_host: str = "0.0.0.0"
    api_port: int = 8000
    cors_origins: list[str] = ["http://localhost:3000"]

    # Monte Carlo simulation
    simulation_seed: int | None = None  # fixed seed for reproducible runs
    simulation_max_workers: int = 1  # >1 spreads paths over worker processes

    # Logging
    log_dir: str = "logs"
    log_level: str = "INFO"
