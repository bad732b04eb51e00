"""Application configuration using pydantic settings with structured sections."""

from functools import lru_cache
from typing import Literal

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class ServerSettings(BaseModel):
    host: str = "0.0.0.0"
    port: int = 4000
    reload: bool = False


class SecuritySettings(BaseModel):
    secret_key: str = Field(default="change-me-gmgn", min_length=8)
    algorithm: str = "HS256"
    access_token_expire_minutes: int = 60
    refresh_token_expire_minutes: int = 60 * 24 * 7


class WalletSettings(BaseModel):
    default_user_id: str = "user-1"
    default_usd_balance: float = Field(default=10_000, ge=0)
    default_token_id: str = "sol"
    default_token_amount: float = Field(default=5, ge=0)
    history_limit: int = Field(default=100, ge=1)


class TradingSettings(BaseModel):
    fee_rate: float = Field(default=0.001, ge=0)
    default_slippage: float = Field(default=0.5, ge=0)
    max_slippage: float = 50.0
    quote_ttl_seconds: int = 30


class MarketDataSettings(BaseModel):
    live_prices: bool = False
    dexscreener_base_url: str = "https://api.dexscreener.com/latest"
    request_timeout: float = 5.0
    cache_ttl_seconds: float = 15.0
    price_variance: float = 0.02


class LoggingSettings(BaseModel):
    level: str = "INFO"
    format: str = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


class Settings(BaseSettings):
    """Top-level application settings with nested sections."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_nested_delimiter="__",
        extra="ignore",
        case_sensitive=False,
    )

    environment: Literal["development", "staging", "production", "test"] = "development"
    debug: bool = False
    project_name: str = "GMGN Paper Trading API"
    api_prefix: str = "/api"

    server: ServerSettings = ServerSettings()
    security: SecuritySettings = SecuritySettings()
    wallet: WalletSettings = WalletSettings()
    trading: TradingSettings = TradingSettings()
    market_data: MarketDataSettings = MarketDataSettings()
    logging: LoggingSettings = LoggingSettings()

    @property
    def host(self) -> str:
        return self.server.host

    @property
    def port(self) -> int:
        return self.server.port

    @property
    def secret_key(self) -> str:
        return self.security.secret_key

    @property
    def algorithm(self) -> str:
        return self.security.algorithm

    @property
    def access_token_expire_minutes(self) -> int:
        return self.security.access_token_expire_minutes

    @property
    def default_user_id(self) -> str:
        return self.wallet.default_user_id


@lru_cache()
def get_settings() -> Settings:
    return Settings()
