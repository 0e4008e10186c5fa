"""
Lease Calculator Module - Buy vs. lease comparison for vehicle financing
"""

from dataclasses import dataclass, field, asdict
from typing import Dict, Iterator, List


MAX_TERM_MONTHS = 600

BUYING_LABEL = 'Net Cost of Buying (Including Car Value)'
LEASING_LABEL = 'Net Cost of Leasing (Including Investment Returns)'


def monthly_loan_payment(principal: float, annual_rate_pct: float, term_months: int) -> float:
    """Monthly payment on an amortizing loan (standard annuity formula)"""
    if term_months <= 0:
        raise ValueError("term_months must be positive")
    if principal == 0:
        return 0.0
    rate = annual_rate_pct / 1200
    if abs(rate) < 1e-12:
        return principal / term_months
    growth = (1 + rate) ** term_months
    return principal * rate * growth / (growth - 1)


def residual_value(initial_price: float, months: float, annual_depreciation_pct: float) -> float:
    """Value of the car after `months` of compound annual depreciation"""
    if annual_depreciation_pct >= 100:
        return 0.0
    return initial_price * (1 - annual_depreciation_pct / 100) ** (months / 12)


def investment_schedule(initial: float, monthly_contribution: float,
                        annual_return_pct: float, months: int) -> Iterator[float]:
    """Yield the investment balance at the end of each month"""
    monthly_rate = annual_return_pct / 1200
    balance = initial
    for _ in range(months):
        # contributions land at the start of the month and earn that month's return
        balance = (balance + monthly_contribution) * (1 + monthly_rate)
        yield balance


def investment_balance(initial: float, monthly_contribution: float,
                       annual_return_pct: float, months: int) -> float:
    """Balance after `months` of monthly contributions and compounding"""
    balance = initial
    for balance in investment_schedule(initial, monthly_contribution, annual_return_pct, months):
        pass
    return balance


def lease_cost_to_date(month: int, lease_payment: float, lease_term: int,
                       lease_down_payment: float) -> float:
    """Cumulative lease spend through the end of `month`

    Each completed lease costs its full term of payments plus its down
    payment; months into an unfinished lease cost the monthly payment only.
    """
    if lease_term <= 0:
        raise ValueError("lease_term must be positive")
    full_leases, remaining_months = divmod(month, lease_term)
    return (lease_payment * lease_term + lease_down_payment) * full_leases + remaining_months * lease_payment


def buy_cost_to_date(month: int, down_payment: float, monthly_payment: float,
                     car_price: float, annual_depreciation_pct: float) -> float:
    """Cash paid toward the car so far, less what the car is still worth"""
    paid = down_payment + month * monthly_payment
    return paid - residual_value(car_price, month, annual_depreciation_pct)


@dataclass
class ComparisonInputs:
    """Everything the user enters on the calculator form"""
    car_price: float = 30000
    down_payment: float = 3000
    lease_payment: float = 400
    lease_term: int = 36
    lease_down_payment: float = 2000
    loan_term: int = 60
    interest_rate: float = 4.5
    investment_return: float = 8
    annual_depreciation: float = 15

    def validate(self):
        for name in ('loan_term', 'lease_term'):
            value = getattr(self, name)
            if int(value) != value or value <= 0:
                raise ValueError(f"{name} must be a positive whole number of months")
            if value > MAX_TERM_MONTHS:
                raise ValueError(f"{name} must not exceed {MAX_TERM_MONTHS} months")
        for name in ('car_price', 'down_payment', 'lease_payment', 'lease_down_payment'):
            if getattr(self, name) < 0:
                raise ValueError(f"{name} must not be negative")
        if self.down_payment > self.car_price:
            raise ValueError("down_payment must not exceed car_price")
        if not 0 <= self.annual_depreciation <= 100:
            raise ValueError("annual_depreciation must be between 0 and 100")
        for name in ('interest_rate', 'investment_return'):
            if getattr(self, name) <= -100:
                raise ValueError(f"{name} must be greater than -100")

    @property
    def down_payment_percent(self) -> int:
        if not self.car_price:
            return 0
        return round(self.down_payment / self.car_price * 100)


@dataclass
class ComparisonResult:
    """Scalar summary plus the month-by-month series for charting"""
    monthly_loan_payment: float
    total_loan_cost: float
    residual_value_at_lease_end: float
    residual_value_at_loan_end: float
    net_buying_cost: float
    number_of_full_leases: int
    remaining_months: int
    total_lease_payments: float
    down_payment_difference: float
    monthly_investment: float
    investment_value: float
    net_lease_cost: float
    recommendation: str
    labels: List[int] = field(default_factory=list)
    buying_series: List[float] = field(default_factory=list)
    leasing_series: List[float] = field(default_factory=list)

    def to_dict(self) -> Dict:
        return asdict(self)

    def summary(self) -> Dict:
        """Scalar values rounded to cents, without the series"""
        data = self.to_dict()
        for key in ('labels', 'buying_series', 'leasing_series'):
            data.pop(key)
        return {k: round(v, 2) if isinstance(v, float) else v for k, v in data.items()}

    def chart_data(self) -> Dict:
        """Chart.js line chart payload"""
        return {
            'labels': self.labels,
            'datasets': [
                {
                    'label': BUYING_LABEL,
                    'data': [round(v, 2) for v in self.buying_series],
                    'borderColor': 'rgb(255, 99, 132)',
                    'tension': 0.1,
                },
                {
                    'label': LEASING_LABEL,
                    'data': [round(v, 2) for v in self.leasing_series],
                    'borderColor': 'rgb(75, 192, 192)',
                    'tension': 0.1,
                },
            ],
        }


class LeaseBuyCalculator:
    """Compares the net cost of financing a car against leasing one"""

    def compare(self, inputs: ComparisonInputs) -> ComparisonResult:
        """Run the full comparison over the loan term"""
        inputs.validate()
        loan_term = int(inputs.loan_term)
        lease_term = int(inputs.lease_term)

        loan_amount = inputs.car_price - inputs.down_payment
        payment = monthly_loan_payment(loan_amount, inputs.interest_rate, loan_term)

        residual_at_lease_end = residual_value(inputs.car_price, lease_term, inputs.annual_depreciation)
        residual_at_loan_end = residual_value(inputs.car_price, loan_term, inputs.annual_depreciation)

        total_loan_cost = payment * loan_term + inputs.down_payment
        net_buying_cost = total_loan_cost - residual_at_loan_end

        total_lease_payments = lease_cost_to_date(
            loan_term, inputs.lease_payment, lease_term, inputs.lease_down_payment
        )

        # the buyer's extra outlay is what the lessee gets to invest
        down_payment_difference = inputs.down_payment - inputs.lease_down_payment
        monthly_investment = payment - inputs.lease_payment

        labels = list(range(1, loan_term + 1))
        investments = list(investment_schedule(
            down_payment_difference, monthly_investment, inputs.investment_return, loan_term
        ))

        buying_series = [
            buy_cost_to_date(m, inputs.down_payment, payment, inputs.car_price, inputs.annual_depreciation)
            for m in labels
        ]
        leasing_series = [
            lease_cost_to_date(m, inputs.lease_payment, lease_term, inputs.lease_down_payment) - investments[m - 1]
            for m in labels
        ]

        investment_value = investments[-1]
        net_lease_cost = total_lease_payments - investment_value

        return ComparisonResult(
            monthly_loan_payment=payment,
            total_loan_cost=total_loan_cost,
            residual_value_at_lease_end=residual_at_lease_end,
            residual_value_at_loan_end=residual_at_loan_end,
            net_buying_cost=net_buying_cost,
            number_of_full_leases=loan_term // lease_term,
            remaining_months=loan_term % lease_term,
            total_lease_payments=total_lease_payments,
            down_payment_difference=down_payment_difference,
            monthly_investment=monthly_investment,
            investment_value=investment_value,
            net_lease_cost=net_lease_cost,
            recommendation='Lease' if net_lease_cost < net_buying_cost else 'Buy',
            labels=labels,
            buying_series=buying_series,
            leasing_series=leasing_series,
        )
