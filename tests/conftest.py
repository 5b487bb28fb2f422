from datetime import datetime, timezone

import pytest

from purchase_mapping.core import MapperConfig, OrderMapper

FIXED_NOW = datetime(2025, 3, 14, 9, 26, 53, tzinfo=timezone.utc)


@pytest.fixture
def fixed_clock():
    return lambda: FIXED_NOW


@pytest.fixture
def mapper(fixed_clock):
    return OrderMapper(MapperConfig(clock=fixed_clock))


@pytest.fixture
def sonos_order():
    return {
        "itemId": "123",
        "title": "Sonos Play5 Speaker",
        "seller": "abc",
        "currentPrice": "99.99",
        "shippingCost": 5,
        "endTime": "2024-01-01T00:00:00Z",
    }


@pytest.fixture
def fulfillment_order():
    return {
        "orderId": "12-34567-89012",
        "creationTime": "2024-05-02T10:15:00.000Z",
        "orderFulfillmentStatus": "FULFILLED",
        "seller": {"username": "gadget_store", "userId": "U-77"},
        "pricingSummary": {
            "total": {"value": "61.98", "currency": "GBP"},
            "deliveryCost": {"value": "3.99", "currency": "GBP"},
        },
        "lineItems": [
            {
                "title": "Apple AirPods Pro 2nd Generation",
                "sku": "APP-2",
                "legacyItemId": "334455",
                "quantity": 2,
                "lineItemCost": {"value": "28.99", "currency": "GBP"},
            },
        ],
    }


@pytest.fixture
def trading_order():
    return {
        "OrderID": 998877,
        "transactionArray": {
            "transaction": [
                {
                    "createdDate": "2023-11-20T18:00:00Z",
                    "Item": {"Title": "Bose QuietComfort 45", "ItemID": "555"},
                    "QuantityPurchased": "1",
                    "TransactionPrice": {"value": "179.00"},
                    "ActualShippingCost": {"value": "0.00"},
                },
            ],
        },
    }
