"""
Vehicle Catalog Module - Year/make/model lookups against the NHTSA vPIC API
"""

import logging
from datetime import datetime
from typing import Dict, List, Optional
from urllib.parse import quote

import requests

VPIC_API_URL = 'https://vpic.nhtsa.dot.gov/api/vehicles'
FIRST_MODEL_YEAR = 1995

logger = logging.getLogger(__name__)


def model_years(current_year: Optional[int] = None, first_year: int = FIRST_MODEL_YEAR) -> List[str]:
    """Selectable model years, newest first"""
    current_year = current_year or datetime.now().year
    return [str(year) for year in range(current_year, first_year - 1, -1)]


class VehicleCatalog:
    """Looks up makes and models for a model year"""

    def __init__(self, base_url: str = VPIC_API_URL, timeout: float = 10,
                 session: Optional[requests.Session] = None):
        self.base_url = base_url.rstrip('/')
        self.timeout = timeout
        self.session = session or requests.Session()

    def _get_results(self, path: str, params: Dict) -> List[Dict]:
        response = self.session.get(f"{self.base_url}/{path}", params=params, timeout=self.timeout)
        response.raise_for_status()
        return response.json()['Results']

    @staticmethod
    def _sorted_names(results: List[Dict], key: str) -> List[str]:
        return sorted({str(r[key]).strip() for r in results if r.get(key)})

    def get_makes(self, year) -> Dict:
        """Car makes sold in a model year"""
        if not year:
            return {'success': True, 'makes': []}
        try:
            results = self._get_results(
                'GetMakesForVehicleType/car',
                {'format': 'json', 'modelyear': year}
            )
            return {'success': True, 'makes': self._sorted_names(results, 'MakeName')}
        except (requests.RequestException, ValueError, KeyError, TypeError) as e:
            logger.error(f"vPIC makes lookup failed for {year}: {e}")
            return {'success': False, 'error': str(e), 'makes': []}

    def get_models(self, year, make: str) -> Dict:
        """Models of a make for a model year"""
        if not year or not make:
            return {'success': True, 'models': []}
        try:
            results = self._get_results(
                f"GetModelsForMakeYear/make/{quote(make, safe='')}/modelyear/{year}",
                {'format': 'json'}
            )
            return {'success': True, 'models': self._sorted_names(results, 'Model_Name')}
        except (requests.RequestException, ValueError, KeyError, TypeError) as e:
            logger.error(f"vPIC models lookup failed for {year} {make}: {e}")
            return {'success': False, 'error': str(e), 'models': []}
