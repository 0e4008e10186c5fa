"""
Vehicle valuation client - forwards value lookups to the third-party pricing API
"""

import logging

import requests

KBB_API_URL = 'https://api.kbb.com/v1'

logger = logging.getLogger(__name__)


class VehicleValuationService:
    """Bearer-token client for the vehicle values endpoint"""

    def __init__(self, api_url=KBB_API_URL, api_key=None, timeout=10, session=None,
                 ssm_service=None, api_key_parameter=None):
        self.api_url = api_url.rstrip('/')
        self._api_key = api_key
        self.timeout = timeout
        self.session = session or requests.Session()
        self.ssm_service = ssm_service
        self.api_key_parameter = api_key_parameter
        self._parameter_checked = False

    @property
    def api_key(self):
        # Parameter Store is asked at most once, whether or not it answers
        if not self._api_key and not self._parameter_checked and self.ssm_service and self.api_key_parameter:
            self._parameter_checked = True
            result = self.ssm_service.get_parameter(self.api_key_parameter)
            if result['success']:
                self._api_key = result['value']
        return self._api_key

    def get_vehicle_value(self, year, make, model, mileage=0, condition='excellent'):
        """Fetch the value of a vehicle from the pricing API"""
        api_key = self.api_key
        if not api_key:
            logger.error("Vehicle valuation API key is not configured")
            return {'success': False, 'error': 'API key not configured'}

        try:
            response = self.session.get(
                f"{self.api_url}/vehicle/values",
                headers={
                    'Authorization': f'Bearer {api_key}',
                    'Content-Type': 'application/json'
                },
                params={
                    'year': year,
                    'make': make,
                    'model': model,
                    'mileage': mileage,
                    'condition': condition
                },
                timeout=self.timeout
            )
            response.raise_for_status()
            return {'success': True, 'data': response.json()}
        except (requests.RequestException, ValueError) as e:
            logger.error(f"Error fetching vehicle value: {e}")
            return {'success': False, 'error': str(e)}
