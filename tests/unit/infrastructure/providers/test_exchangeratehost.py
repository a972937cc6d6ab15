# nosec B101


import pytest
from unittest.mock import Mock, AsyncMock
import httpx

from infrastructure.providers.exchangeratehost import ExchangeRateHostProvider
from domain.exceptions.currency import ProviderError
from domain.models.currency import LiveRates, LiveRatesFailure


def make_client(payload):
    mock_client = AsyncMock(spec=httpx.AsyncClient)
    mock_response = Mock()
    mock_response.json.return_value = payload
    mock_response.raise_for_status = Mock()
    mock_client.get.return_value = mock_response
    return mock_client


@pytest.mark.asyncio
async def test_fetch_live_success_returns_live_rates():
    mock_client = make_client({
        'success': True,
        'terms': 'https://currencylayer.com/terms',
        'source': 'USD',
        'timestamp': 1700000000,
        'quotes': {'USDEUR': 0.92, 'USDGBP': 0.79}
    })

    provider = ExchangeRateHostProvider(api_key='test_key', client=mock_client)

    result = await provider.fetch_live('USD')

    assert isinstance(result, LiveRates)
    assert result.success is True
    assert result.source == 'USD'
    assert result.timestamp == 1700000000
    assert list(result.quotes.items()) == [('USDEUR', 0.92), ('USDGBP', 0.79)]


@pytest.mark.asyncio
async def test_fetch_live_sends_expected_query():
    mock_client = make_client({'success': True, 'source': 'EUR', 'timestamp': 1, 'quotes': {}})

    provider = ExchangeRateHostProvider(api_key='test_key', client=mock_client)
    await provider.fetch_live('EUR')

    mock_client.get.assert_called_once()
    call_args = mock_client.get.call_args
    assert call_args[0][0] == 'https://api.exchangerate.host/live'
    assert call_args[1]['params'] == {'source': 'EUR', 'format': 1, 'access_key': 'test_key'}


@pytest.mark.asyncio
async def test_fetch_live_sends_empty_access_key_as_is():
    mock_client = make_client({'success': True, 'source': 'USD', 'timestamp': 1, 'quotes': {}})

    provider = ExchangeRateHostProvider(api_key='', client=mock_client)
    await provider.fetch_live('USD')

    assert mock_client.get.call_args[1]['params']['access_key'] == ''


@pytest.mark.asyncio
async def test_fetch_live_custom_base_url():
    mock_client = make_client({'success': True, 'source': 'USD', 'timestamp': 1, 'quotes': {}})

    provider = ExchangeRateHostProvider(
        api_key='test_key', client=mock_client, base_url='http://localhost:8080/'
    )
    await provider.fetch_live('USD')

    assert mock_client.get.call_args[0][0] == 'http://localhost:8080/live'


@pytest.mark.asyncio
async def test_fetch_live_empty_quotes_is_not_an_error():
    mock_client = make_client({'success': True, 'source': 'USD', 'timestamp': 1, 'quotes': {}})

    provider = ExchangeRateHostProvider(api_key='test_key', client=mock_client)
    result = await provider.fetch_live('USD')

    assert isinstance(result, LiveRates)
    assert result.quotes == {}


@pytest.mark.asyncio
async def test_fetch_live_provider_error_is_returned_not_raised():
    mock_client = make_client({
        'success': False,
        'error': {
            'code': 101,
            'type': 'invalid_access_key',
            'info': 'You have not supplied a valid API Access Key.'
        }
    })

    provider = ExchangeRateHostProvider(api_key='invalid_key', client=mock_client)
    result = await provider.fetch_live('USD')

    assert isinstance(result, LiveRatesFailure)
    assert result.success is False
    assert result.error.code == '101'
    assert result.error.type == 'invalid_access_key'
    assert 'valid API Access Key' in result.error.info


@pytest.mark.asyncio
async def test_fetch_live_http_500_error():
    mock_client = AsyncMock(spec=httpx.AsyncClient)

    error_response = Mock()
    error_response.status_code = 500
    error_response.text = 'Internal Server Error'

    mock_client.get.side_effect = httpx.HTTPStatusError(
        'Server error',
        request=Mock(),
        response=error_response
    )

    provider = ExchangeRateHostProvider(api_key='test_key', client=mock_client)

    with pytest.raises(ProviderError) as exc_info:
        await provider.fetch_live('USD')

    assert 'HTTP error 500' in str(exc_info.value)
    assert isinstance(exc_info.value.__cause__, httpx.HTTPStatusError)


@pytest.mark.asyncio
async def test_fetch_live_network_timeout():
    mock_client = AsyncMock(spec=httpx.AsyncClient)
    mock_client.get.side_effect = httpx.TimeoutException('Request timed out')
    provider = ExchangeRateHostProvider(api_key='test_key', client=mock_client)
    with pytest.raises(ProviderError) as exc_info:
        await provider.fetch_live('USD')

    assert 'request failed' in str(exc_info.value).lower()


@pytest.mark.asyncio
async def test_fetch_live_connection_error():
    mock_client = AsyncMock(spec=httpx.AsyncClient)
    mock_client.get.side_effect = httpx.ConnectError('Connection refused')
    provider = ExchangeRateHostProvider(api_key='test_key', client=mock_client)
    with pytest.raises(ProviderError) as exc_info:
        await provider.fetch_live('USD')

    assert 'ConnectError' in str(exc_info.value)


@pytest.mark.asyncio
async def test_fetch_live_invalid_json_response():
    mock_client = AsyncMock(spec=httpx.AsyncClient)
    mock_response = Mock()
    mock_response.raise_for_status = Mock()

    mock_response.json.side_effect = ValueError('Invalid JSON')
    mock_client.get.return_value = mock_response

    provider = ExchangeRateHostProvider(api_key='test_key', client=mock_client)
    with pytest.raises(ProviderError) as exc_info:
        await provider.fetch_live('USD')

    assert 'parsing error' in str(exc_info.value).lower()


@pytest.mark.asyncio
@pytest.mark.parametrize('payload', [
    {'success': True, 'source': 'USD'},
    {'success': False},
    {'quotes': {'USDEUR': 0.92}},
    ['not', 'an', 'object'],
])
async def test_fetch_live_unexpected_shape_is_transport_error(payload):
    mock_client = make_client(payload)

    provider = ExchangeRateHostProvider(api_key='test_key', client=mock_client)
    with pytest.raises(ProviderError) as exc_info:
        await provider.fetch_live('USD')

    assert 'parsing error' in str(exc_info.value).lower()


@pytest.mark.asyncio
async def test_close_leaves_injected_client_open():
    mock_client = AsyncMock(spec=httpx.AsyncClient)
    provider = ExchangeRateHostProvider(api_key='test_key', client=mock_client)

    await provider.close()

    mock_client.aclose.assert_not_called()


@pytest.mark.asyncio
async def test_close_closes_owned_client():
    provider = ExchangeRateHostProvider(api_key='test_key')

    await provider.close()

    assert provider._client.is_closed
