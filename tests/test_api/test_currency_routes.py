from datetime import date

import pytest
from fastapi.testclient import TestClient

from api.dependencies import get_conversion_service
from api.main import app
from application.services import ConversionService
from domain.exceptions.currency import ProviderError
from infrastructure.cache.rate_cache import RateCache


@pytest.fixture
def service(provider, clock):
    return ConversionService(
        cache=RateCache(clock=clock),
        provider=provider,
        today=lambda: date(2025, 6, 15),
    )


@pytest.fixture
def client(service):
    # Override the real dependency with one backed by the fake provider
    app.dependency_overrides[get_conversion_service] = lambda: service
    client = TestClient(app, raise_server_exceptions=False)
    yield client
    app.dependency_overrides.clear()


def test_list_currencies(client):
    response = client.get('/api/currencies')

    assert response.status_code == 200
    data = response.json()
    assert data['success'] is True
    assert data['currencies'][:3] == ['USD', 'EUR', 'GBP']
    assert len(data['currencies']) == 12


def test_convert_success(client, provider):
    response = client.post('/api/convert', json={'amount': 100, 'from': 'USD', 'to': 'EUR'})

    assert response.status_code == 200
    body = response.json()
    assert body['success'] is True
    assert body['data'] == {
        'amount': 100,
        'from': 'USD',
        'to': 'EUR',
        'rate': 0.9,
        'convertedAmount': 90,
        'lastUpdate': '2024-01-01',
    }
    assert provider.calls == ['USD']


def test_convert_lowercase_currencies_normalized(client):
    response = client.post('/api/convert', json={'amount': '10', 'from': 'usd', 'to': 'eur'})

    assert response.status_code == 200
    data = response.json()['data']
    assert data['from'] == 'USD'
    assert data['to'] == 'EUR'
    assert data['convertedAmount'] == 9


def test_convert_same_currency(client, provider):
    response = client.post('/api/convert', json={'amount': 5, 'from': 'JPY', 'to': 'JPY'})

    assert response.status_code == 200
    data = response.json()['data']
    assert data['rate'] == 1
    assert data['convertedAmount'] == 5
    assert data['lastUpdate'] == '2025-06-15'
    assert provider.calls == []


@pytest.mark.parametrize('payload, missing', [
    ({'from': 'USD', 'to': 'EUR'}, 'amount'),
    ({'amount': 10, 'to': 'EUR'}, 'from'),
    ({'amount': 10, 'from': 'USD'}, 'to'),
])
def test_convert_missing_parameters(client, payload, missing):
    response = client.post('/api/convert', json=payload)

    assert response.status_code == 400
    body = response.json()
    assert body['success'] is False
    assert body['message'].startswith('missing required parameters')
    assert missing in body['message']


@pytest.mark.parametrize('amount', [0, -5, 'abc', True, False, None, ''])
def test_convert_invalid_amount(client, amount):
    response = client.post('/api/convert', json={'amount': amount, 'from': 'USD', 'to': 'EUR'})

    assert response.status_code == 400
    assert response.json()['message'] == 'amount must be greater than 0'


def test_convert_unsupported_currency(client):
    response = client.post('/api/convert', json={'amount': 10, 'from': 'USD', 'to': 'ZZZ'})

    assert response.status_code == 400
    assert 'ZZZ' in response.json()['message']


def test_convert_no_rate_for_pair(client):
    response = client.post('/api/convert', json={'amount': 10, 'from': 'USD', 'to': 'GBP'})

    assert response.status_code == 400
    assert response.json()['message'] == 'no rate found from USD to GBP'


def test_convert_provider_failure(client, provider):
    provider.error = ProviderError('ExchangeRate-API request failed: ConnectError')

    response = client.post('/api/convert', json={'amount': 10, 'from': 'USD', 'to': 'EUR'})

    assert response.status_code == 503
    body = response.json()
    assert body == {'success': False, 'message': 'unable to fetch latest exchange rate data'}


def test_convert_malformed_body(client):
    response = client.post('/api/convert', content='not json', headers={'content-type': 'application/json'})

    assert response.status_code == 400
    assert response.json()['success'] is False


def test_get_rates_success(client):
    response = client.get('/api/rates/usd')

    assert response.status_code == 200
    body = response.json()
    assert body['data'] == {
        'base': 'USD',
        'rates': {'EUR': 0.9, 'JPY': 150.0},
        'lastUpdate': '2024-01-01',
    }


def test_get_rates_unsupported_currency(client, provider):
    response = client.get('/api/rates/ZZZ')

    assert response.status_code == 400
    assert response.json()['message'] == 'unsupported currency: ZZZ'
    assert provider.calls == []


def test_get_rates_provider_failure(client, provider):
    provider.error = ProviderError('boom')

    response = client.get('/api/rates/USD')

    assert response.status_code == 503


def test_clear_cache(client, provider, service):
    client.get('/api/rates/USD')
    assert len(service.cache) == 1

    response = client.delete('/api/cache')

    assert response.status_code == 200
    assert response.json() == {'success': True, 'message': 'cache cleared'}
    assert len(service.cache) == 0

    client.get('/api/rates/USD')
    assert provider.calls == ['USD', 'USD']


def test_unknown_route_returns_404_envelope(client):
    response = client.get('/api/nope')

    assert response.status_code == 404
    assert response.json() == {'success': False, 'message': 'resource not found'}


def test_convert_boolean_amount_rejected(client, provider):
    response = client.post('/api/convert', json={'amount': True, 'from': 'USD', 'to': 'EUR'})

    assert response.status_code == 400
    assert response.json() == {'success': False, 'message': 'amount must be greater than 0'}
    assert provider.calls == []


def test_cache_stats(client):
    client.get('/api/rates/USD')
    client.post('/api/convert', json={'amount': 1, 'from': 'USD', 'to': 'USD'})

    response = client.get('/api/cache')

    assert response.status_code == 200
    body = response.json()
    assert body['success'] is True
    assert body['data'] == {'entries': 1, 'keys': ['USD']}

    client.delete('/api/cache')
    assert client.get('/api/cache').json()['data'] == {'entries': 0, 'keys': []}
