"""Pytest fixtures for testing"""

import copy
import pytest
from typing import Any, Dict


ADDRESS = {
    "streetAddress": "123 State Street",
    "unit": "2A",
    "postalCode": "10005",
    "city": "New York",
    "provinceCode": "NY",
    "countryCode": "US",
}


@pytest.fixture
def address_payload() -> Dict[str, Any]:
    return dict(ADDRESS)


@pytest.fixture
def transaction_payload() -> Dict[str, Any]:
    """Card transaction with checkout details, account holder and billing address"""
    return {
        "parentTransactionId": None,
        "transactionId": "txn_1001",
        "createdAt": "2026-10-19T10:15:00+00:00",
        "gateway": "stripe",
        "paymentMethod": "CREDIT_CARD",
        "type": "AUTHORIZATION",
        "gatewayStatusCode": "SUCCESS",
        "gatewayStatusMessage": "Approved",
        "currency": "EUR",
        "amount": 74.99,
        "avsResponseCode": "Y",
        "cvvResponseCode": "M",
        "checkoutPaymentDetails": {
            "holderName": "Jane Doe",
            "cardBin": "411111",
            "cardLast4": "1111",
            "cardExpiryMonth": "09",
            "cardExpiryYear": "2029",
            "billingAddress": dict(ADDRESS),
        },
        "paymentAccountHolder": {
            "accountId": "acct_77",
            "accountHolderName": "Jane Doe",
            "accountIsVerified": True,
            "accountBalance": 1520.5,
        },
        "billingAddress": dict(ADDRESS),
    }


@pytest.fixture
def case_payload(transaction_payload: Dict[str, Any]) -> Dict[str, Any]:
    """Full case creation payload with two recipients and one seller"""
    return {
        "purchase": {
            "browserIpAddress": "192.0.2.10",
            "orderId": "order_5001",
            "createdAt": "2026-10-19T10:14:00+00:00",
            "orderChannel": "WEB",
            "totalPrice": 74.99,
            "products": [
                {"itemId": "sku_1", "itemName": "Sneakers", "itemQuantity": 1, "itemPrice": 59.99},
                {"itemId": "sku_2", "itemName": "Socks", "itemQuantity": 3, "itemPrice": 5.0},
            ],
        },
        "recipients": [
            {"fullName": "Jane Doe", "confirmationEmail": "jane@example.com", "deliveryAddress": dict(ADDRESS)},
            {"fullName": "John Roe", "organization": "Acme"},
        ],
        "transactions": [copy.deepcopy(transaction_payload)],
        "userAccount": {"email": "jane@example.com", "username": "jane", "aggregateOrderCount": 4},
        "sellers": [
            {"name": "Shoe Shop", "domain": "shoes.example.com", "shipFromAddress": dict(ADDRESS)},
        ],
    }
