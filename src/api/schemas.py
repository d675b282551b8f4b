"""Pydantic schemas for API request/response models."""

from datetime import date
from decimal import Decimal

from pydantic import BaseModel, Field, field_validator

from src.config import settings


# ---- Request schemas ----

class LoanScenarioRequest(BaseModel):
    name: str | None = Field(None, max_length=255)
    principal: Decimal = Field(..., gt=0, le=settings.max_principal)
    interest_rate: Decimal = Field(
        ..., gt=0, le=settings.max_interest_rate, description="EA rate in percent"
    )
    term_months: int = Field(..., gt=0, le=settings.max_term_months)
    start_date: date
    currency: str = settings.default_currency

    @field_validator("currency")
    @classmethod
    def currency_supported(cls, v: str) -> str:
        if v not in settings.supported_currencies:
            raise ValueError(f"Unsupported currency: {v}")
        return v


class ExtraPaymentRequest(BaseModel):
    payment_number: int = Field(..., gt=0)
    amount: Decimal = Field(..., gt=0, le=settings.max_extra_payment_amount)
    description: str | None = Field(None, max_length=500)


class ScheduleRequest(BaseModel):
    scenario: LoanScenarioRequest
    extra_payments: list[ExtraPaymentRequest] = []
    include_extra_payments: bool = True


class ComparisonRequest(BaseModel):
    scenario: LoanScenarioRequest
    additional_rates: list[Decimal] = []

    @field_validator("additional_rates")
    @classmethod
    def rates_in_range(cls, v: list[Decimal]) -> list[Decimal]:
        for rate in v:
            if rate <= 0 or rate > settings.max_interest_rate:
                raise ValueError(f"Interest rate out of range: {rate}")
        return v


class RangeSummaryRequest(BaseModel):
    scenario: LoanScenarioRequest
    start_payment: int = Field(1, gt=0)
    end_payment: int | None = Field(None, gt=0)


# ---- Response schemas ----

class LoanSummaryResponse(BaseModel):
    monthly_payment: Decimal
    total_principal: Decimal
    total_interest: Decimal
    total_payment: Decimal
    payoff_date: date
    term_months: int


class AmortizationPaymentResponse(BaseModel):
    payment_number: int
    date: date
    payment_amount: Decimal
    principal_portion: Decimal
    interest_portion: Decimal
    remaining_balance: Decimal
    is_extra_payment: bool = False
    extra_amount: Decimal | None = None


class PaymentScheduleResponse(BaseModel):
    summary: LoanSummaryResponse
    payments: list[AmortizationPaymentResponse]
    extra_payments: list[ExtraPaymentRequest] = []
    original_summary: LoanSummaryResponse | None = None
    months_saved: int | None = None
    interest_saved: Decimal | None = None


class LoanComparisonResponse(BaseModel):
    interest_rate: Decimal
    monthly_payment: Decimal
    total_interest: Decimal
    total_payment: Decimal
    is_base_rate: bool = False


class YearlySummaryResponse(BaseModel):
    year: int
    principal: Decimal
    interest: Decimal
    total_paid: Decimal
    ending_balance: Decimal


class PaymentRangeResponse(BaseModel):
    payment_count: int
    total_principal: Decimal
    total_interest: Decimal
    total_paid: Decimal
