"""
Leasing Library - Buy vs. lease arithmetic, price estimates and vehicle lookups
"""

from .lease_calculator import LeaseBuyCalculator, ComparisonInputs, ComparisonResult
from .price_estimator import PriceEstimator, DepreciationModel
from .vehicle_catalog import VehicleCatalog, model_years

__version__ = "1.0.0"
__all__ = [
    'LeaseBuyCalculator', 'ComparisonInputs', 'ComparisonResult',
    'PriceEstimator', 'DepreciationModel',
    'VehicleCatalog', 'model_years',
]
