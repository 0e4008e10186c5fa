"""
Price Estimator Module - Rough car price estimate from year and make

This is a placeholder, not a valuation engine: it takes the midpoint of a
hand-maintained price range per make and depreciates it by vehicle age.
"""

from datetime import datetime
from typing import Dict, Optional


DEFAULT_ANNUAL_DEPRECIATION = 15


class DepreciationModel:
    """Models vehicle depreciation at a flat annual rate"""

    def __init__(self, original_price: float, year: int, annual_rate: float = 0.15,
                 current_year: Optional[int] = None):
        self.original_price = original_price
        self.year = year
        self.annual_rate = annual_rate
        current_year = current_year or datetime.now().year
        self.age = max(0, current_year - year)

    def calculate_current_value(self) -> float:
        """Calculate current value after `age` years of depreciation"""
        return self.original_price * (1 - self.annual_rate) ** self.age

    def get_depreciation_schedule(self) -> Dict[int, float]:
        """Get year-by-year value from new up to the current age"""
        return {
            year: round(self.original_price * (1 - self.annual_rate) ** year, 2)
            for year in range(self.age + 1)
        }

    def get_total_depreciation(self) -> float:
        return round(self.original_price - self.calculate_current_value(), 2)

    def get_depreciation_percentage(self) -> float:
        if not self.original_price:
            return 0.0
        return round((self.get_total_depreciation() / self.original_price) * 100, 1)


class PriceEstimator:
    """Estimates a car's price from a static base price table"""

    # New-car price ranges by make
    BASE_PRICE_RANGES = {
        'BMW': {'min': 35000, 'max': 85000},
        'Mercedes-Benz': {'min': 35000, 'max': 90000},
        'Toyota': {'min': 20000, 'max': 40000},
        'Honda': {'min': 20000, 'max': 35000},
        'Ford': {'min': 20000, 'max': 45000},
    }
    DEFAULT_RANGE = {'min': 25000, 'max': 45000}

    def get_price_range(self, make: str) -> Dict[str, int]:
        """Look up the price range for a make, ignoring case"""
        wanted = make.strip().lower()
        for name, price_range in self.BASE_PRICE_RANGES.items():
            if name.lower() == wanted:
                return dict(price_range)
        return dict(self.DEFAULT_RANGE)

    def get_base_price(self, make: str) -> float:
        price_range = self.get_price_range(make)
        return (price_range['min'] + price_range['max']) / 2

    def estimate(self, year, make: str, model: str, current_year: Optional[int] = None) -> Dict:
        """Estimate the current price of a year/make/model"""
        if not year or not make or not model:
            raise ValueError("year, make and model are all required")
        year = int(year)

        base_price = self.get_base_price(make)
        depreciation = DepreciationModel(
            base_price, year, DEFAULT_ANNUAL_DEPRECIATION / 100, current_year
        )

        return {
            'vehicle': f"{year} {make} {model}",
            'price_range': self.get_price_range(make),
            'base_price': base_price,
            'age': depreciation.age,
            'estimated_price': round(depreciation.calculate_current_value()),
            'annual_depreciation': DEFAULT_ANNUAL_DEPRECIATION,
            'depreciation_percent': depreciation.get_depreciation_percentage(),
        }


def down_payment_from_percent(price: float, percent: float) -> int:
    """Down payment in dollars for a percentage of the price"""
    return round(price * percent / 100)


def percent_from_down_payment(price: float, down_payment: float) -> int:
    """Down payment as a whole percentage of the price"""
    if not price:
        return 0
    return round(down_payment / price * 100)
