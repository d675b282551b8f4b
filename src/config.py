from decimal import Decimal

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}

    # App
    debug: bool = False
    log_level: str = "INFO"

    # Input limits enforced at the API boundary (the engine itself has none)
    max_term_months: int = 480  # 40 years
    max_principal: Decimal = Decimal("999999999.99")
    max_interest_rate: Decimal = Decimal("100")
    max_extra_payment_amount: Decimal = Decimal("999999999.99")

    # Currency is carried as scenario metadata only
    default_currency: str = "USD"
    supported_currencies: list[str] = ["USD", "COP", "EUR", "MXN", "ARS", "GBP"]


settings = Settings()
