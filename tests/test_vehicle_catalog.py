import requests

from leasing_lib.vehicle_catalog import VehicleCatalog, model_years

from fakes import FakeResponse, FakeSession


def test_model_years_newest_first():
    years = model_years(current_year=2024)
    assert years[0] == '2024'
    assert years[-1] == '1995'
    assert len(years) == 30


def test_get_makes_sorted_and_unique():
    session = FakeSession(FakeResponse({'Results': [
        {'MakeName': 'TOYOTA'}, {'MakeName': 'BMW'}, {'MakeName': 'TOYOTA'}, {'MakeName': None},
    ]}))
    catalog = VehicleCatalog(base_url='https://vpic.example/api/vehicles/', session=session)

    result = catalog.get_makes('2020')

    assert result == {'success': True, 'makes': ['BMW', 'TOYOTA']}
    url, kwargs = session.calls[0]
    assert url == 'https://vpic.example/api/vehicles/GetMakesForVehicleType/car'
    assert kwargs['params'] == {'format': 'json', 'modelyear': '2020'}


def test_get_models_quotes_make():
    session = FakeSession(FakeResponse({'Results': [
        {'Model_Name': 'Range Rover'}, {'Model_Name': 'Defender'},
    ]}))
    catalog = VehicleCatalog(session=session)

    result = catalog.get_models('2021', 'Land Rover')

    assert result['models'] == ['Defender', 'Range Rover']
    url, _ = session.calls[0]
    assert url.endswith('/GetModelsForMakeYear/make/Land%20Rover/modelyear/2021')


def test_blank_year_skips_request():
    session = FakeSession()
    catalog = VehicleCatalog(session=session)

    assert catalog.get_makes('') == {'success': True, 'makes': []}
    assert catalog.get_models('2020', '') == {'success': True, 'models': []}
    assert session.calls == []


def test_network_error_is_reported():
    catalog = VehicleCatalog(session=FakeSession(requests.ConnectionError('down')))
    result = catalog.get_makes('2020')
    assert result['success'] is False
    assert result['makes'] == []


def test_http_error_is_reported():
    catalog = VehicleCatalog(session=FakeSession(FakeResponse(status_code=503)))
    result = catalog.get_models('2020', 'Honda')
    assert result['success'] is False
    assert result['models'] == []


def test_malformed_payload_is_reported():
    catalog = VehicleCatalog(session=FakeSession(FakeResponse({'Message': 'no results key'})))
    assert catalog.get_makes('2020')['success'] is False
