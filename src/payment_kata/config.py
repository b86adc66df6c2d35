"""
Runtime configuration.

Every value can be overridden from the environment with the
``PAYMENT_KATA_`` prefix, e.g. ``PAYMENT_KATA_API_KEY=sk_live_...``.
The default API key is a test key; the refactored processor never embeds it.
"""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="PAYMENT_KATA_", env_file=".env", extra="ignore")

    api_key: str = Field(default="sk_test_12345")
    log_file_path: str = Field(default="payment_logs.txt")
    log_level: str = Field(default="INFO")

    card_endpoint: str = Field(default="https://api.cardprocessor.com/charge")
    paypal_endpoint: str = Field(default="https://api.paypal.com/payment")
    bank_endpoint: str = Field(default="https://api.bank.com/transfer")


@lru_cache
def get_settings() -> Settings:
    return Settings()
