"""Loan simulator routes.

Stateless: the scenario and its extra payments arrive in the request body.
Loading them from storage is the caller's concern.
"""

import logging
from dataclasses import asdict

from fastapi import APIRouter, HTTPException

from src.api.schemas import (
    LoanScenarioRequest,
    ScheduleRequest,
    ComparisonRequest,
    RangeSummaryRequest,
    LoanSummaryResponse,
    AmortizationPaymentResponse,
    PaymentScheduleResponse,
    LoanComparisonResponse,
    YearlySummaryResponse,
    PaymentRangeResponse,
)
from src.engine.comparison import generate_loan_comparisons
from src.engine.errors import InvalidLoanParameters
from src.engine.impact import extra_payment_impact
from src.engine.payment import loan_summary
from src.engine.schedule import generate_schedule, payment_range_summary, yearly_summary
from src.models.loan import ExtraPayment, LoanScenario

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1/loans", tags=["loans"])


def _build_scenario(req: LoanScenarioRequest) -> LoanScenario:
    return LoanScenario(
        principal=req.principal,
        annual_rate=req.interest_rate,
        term_months=req.term_months,
        start_date=req.start_date,
        name=req.name,
        currency=req.currency,
    )


def _summary_response(summary) -> LoanSummaryResponse:
    return LoanSummaryResponse(**asdict(summary))


@router.post("/summary", response_model=LoanSummaryResponse)
async def summary(req: LoanScenarioRequest):
    """Level-payment summary, ignoring extra payments."""
    try:
        result = loan_summary(req.principal, req.interest_rate, req.term_months, req.start_date)
    except InvalidLoanParameters as e:
        raise HTTPException(status_code=400, detail=str(e))
    return _summary_response(result)


@router.post("/schedule", response_model=PaymentScheduleResponse)
async def schedule(req: ScheduleRequest):
    """Full amortization schedule plus the savings from extra payments."""
    scenario = _build_scenario(req.scenario)
    extra_reqs = req.extra_payments if req.include_extra_payments else []
    extras = [
        ExtraPayment(payment_number=ep.payment_number, amount=ep.amount, description=ep.description)
        for ep in extra_reqs
    ]

    try:
        payments = generate_schedule(scenario, extras)
        impact = extra_payment_impact(scenario, extras)
    except InvalidLoanParameters as e:
        raise HTTPException(status_code=400, detail=str(e))

    logger.info(
        "Schedule generated: %d installments, %d extra payments, %d months saved",
        len(payments), len(extras), impact.months_saved,
    )

    return PaymentScheduleResponse(
        summary=_summary_response(impact.new_summary),
        payments=[AmortizationPaymentResponse(**asdict(p)) for p in payments],
        extra_payments=sorted(extra_reqs, key=lambda ep: ep.payment_number),
        original_summary=_summary_response(impact.original_summary),
        months_saved=impact.months_saved,
        interest_saved=impact.interest_saved,
    )


@router.post("/comparison", response_model=list[LoanComparisonResponse])
async def comparison(req: ComparisonRequest):
    """Compare the scenario's rate with additional candidate rates."""
    scenario = _build_scenario(req.scenario)
    try:
        rows = generate_loan_comparisons(scenario, req.additional_rates)
    except InvalidLoanParameters as e:
        raise HTTPException(status_code=400, detail=str(e))

    return [
        LoanComparisonResponse(**asdict(c), is_base_rate=c.interest_rate == scenario.annual_rate)
        for c in rows
    ]


@router.post("/yearly", response_model=list[YearlySummaryResponse])
async def yearly(req: ScheduleRequest):
    """Schedule aggregated by calendar year, for projection charts."""
    scenario = _build_scenario(req.scenario)
    extras = [
        ExtraPayment(payment_number=ep.payment_number, amount=ep.amount)
        for ep in (req.extra_payments if req.include_extra_payments else [])
    ]
    try:
        payments = generate_schedule(scenario, extras)
    except InvalidLoanParameters as e:
        raise HTTPException(status_code=400, detail=str(e))
    return [YearlySummaryResponse(**asdict(y)) for y in yearly_summary(payments)]


@router.post("/range-summary", response_model=PaymentRangeResponse)
async def range_summary(req: RangeSummaryRequest):
    """Principal and interest totals over a range of installments."""
    if req.end_payment is not None and req.end_payment < req.start_payment:
        raise HTTPException(status_code=400, detail="end_payment must not precede start_payment")

    scenario = _build_scenario(req.scenario)
    try:
        result = payment_range_summary(scenario, req.start_payment, req.end_payment)
    except InvalidLoanParameters as e:
        raise HTTPException(status_code=400, detail=str(e))
    return PaymentRangeResponse(**asdict(result))
