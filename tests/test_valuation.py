import requests

from leasecalc.valuation import VehicleValuationService

from fakes import FakeResponse, FakeSession


class FakeSSM:
    def __init__(self, result):
        self.result = result
        self.names = []

    def get_parameter(self, name, decrypt=True):
        self.names.append(name)
        return self.result


def test_forwards_request_with_bearer_token():
    session = FakeSession(FakeResponse({'value': 21000}))
    service = VehicleValuationService(api_url='https://kbb.example/v1/', api_key='secret', session=session)

    result = service.get_vehicle_value(2020, 'Toyota', 'Camry', mileage=30000, condition='good')

    assert result == {'success': True, 'data': {'value': 21000}}
    url, kwargs = session.calls[0]
    assert url == 'https://kbb.example/v1/vehicle/values'
    assert kwargs['headers']['Authorization'] == 'Bearer secret'
    assert kwargs['headers']['Content-Type'] == 'application/json'
    assert kwargs['params'] == {
        'year': 2020, 'make': 'Toyota', 'model': 'Camry', 'mileage': 30000, 'condition': 'good'
    }


def test_defaults_mileage_and_condition():
    session = FakeSession(FakeResponse({}))
    VehicleValuationService(api_key='secret', session=session).get_vehicle_value(2020, 'Ford', 'Focus')

    params = session.calls[0][1]['params']
    assert params['mileage'] == 0
    assert params['condition'] == 'excellent'


def test_missing_api_key_sends_nothing():
    session = FakeSession()
    result = VehicleValuationService(api_key=None, session=session).get_vehicle_value(2020, 'Ford', 'Focus')

    assert result['success'] is False
    assert session.calls == []


def test_api_key_read_once_from_parameter_store():
    ssm = FakeSSM({'success': True, 'value': 'from-ssm'})
    session = FakeSession(FakeResponse({}), FakeResponse({}))
    service = VehicleValuationService(session=session, ssm_service=ssm, api_key_parameter='/leasecalc/kbb-api-key')

    service.get_vehicle_value(2020, 'Ford', 'Focus')
    service.get_vehicle_value(2021, 'Ford', 'Focus')

    assert ssm.names == ['/leasecalc/kbb-api-key']
    assert session.calls[1][1]['headers']['Authorization'] == 'Bearer from-ssm'


def test_failed_parameter_lookup_is_not_retried():
    ssm = FakeSSM({'success': False, 'error': 'ParameterNotFound'})
    session = FakeSession()
    service = VehicleValuationService(session=session, ssm_service=ssm, api_key_parameter='/leasecalc/kbb-api-key')

    assert service.get_vehicle_value(2020, 'Ford', 'Focus')['success'] is False
    assert service.get_vehicle_value(2021, 'Ford', 'Focus')['success'] is False
    assert ssm.names == ['/leasecalc/kbb-api-key']
    assert session.calls == []


def test_upstream_failure_is_reported():
    session = FakeSession(FakeResponse(status_code=401))
    result = VehicleValuationService(api_key='bad', session=session).get_vehicle_value(2020, 'Ford', 'Focus')
    assert result['success'] is False


def test_timeout_is_reported():
    session = FakeSession(requests.Timeout('slow'))
    result = VehicleValuationService(api_key='secret', session=session).get_vehicle_value(2020, 'Ford', 'Focus')
    assert result == {'success': False, 'error': 'slow'}
