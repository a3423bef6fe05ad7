from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}

    # Rate quotes
    # Endpoint returning {"rates": [...]}; empty means the built-in table
    rate_quote_url: str = ""
    rate_quote_timeout: float = 10.0

    # Simulation cache (entries, keyed by the loan parameter tuple)
    simulation_cache_size: int = 256

    # App
    debug: bool = False
    log_level: str = "INFO"


settings = Settings()
