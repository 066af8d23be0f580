"""Unit tests for transaction and payment instrument models"""

import pytest

from fraud_sdk.domain.models import Address
from fraud_sdk.domain.payments import CheckoutPaymentDetails, PaymentAccountHolder, Transaction


def test_transaction_scalars(transaction_payload):
    txn = Transaction.from_payload(transaction_payload)

    assert txn.transaction_id == "txn_1001"
    assert txn.gateway == "stripe"
    assert txn.type == "AUTHORIZATION"
    assert txn.currency == "EUR"
    assert txn.amount == 74.99
    assert txn.parent_transaction_id is None


def test_transaction_currency_defaults_to_usd():
    """Test absent currency falls back to USD"""
    assert Transaction().currency == "USD"
    assert Transaction.from_payload({"amount": 10}).currency == "USD"


def test_transaction_builds_checkout_payment_details(transaction_payload):
    """Test non-empty checkout sub-map yields a matching nested model"""
    txn = Transaction.from_payload(transaction_payload)
    details = txn.checkout_payment_details

    assert isinstance(details, CheckoutPaymentDetails)
    assert details.holder_name == "Jane Doe"
    assert details.card_bin == "411111"
    assert details.card_last4 == "1111"
    assert details.card_expiry_month == "09"
    assert details.card_expiry_year == "2029"
    assert details.bank_account_number is None
    assert details.billing_address == Address.from_payload(transaction_payload["billingAddress"])


def test_transaction_builds_account_holder_and_billing_address(transaction_payload):
    txn = Transaction.from_payload(transaction_payload)

    assert txn.payment_account_holder == PaymentAccountHolder(
        account_id="acct_77",
        account_holder_name="Jane Doe",
        account_is_verified=True,
        account_balance=1520.5,
    )
    assert txn.billing_address.city == "New York"
    assert txn.billing_address.country_code == "US"


@pytest.mark.parametrize("value", [{}, None, [], "", "411111"])
def test_empty_or_non_mapping_sub_map_yields_none(value):
    """Test nested object fields are never populated from scalars"""
    txn = Transaction.from_payload({"transactionId": "txn_1", "checkoutPaymentDetails": value})

    assert txn.transaction_id == "txn_1"
    assert txn.checkout_payment_details is None


def test_absent_sub_map_yields_none():
    txn = Transaction.from_payload({"transactionId": "txn_1"})

    assert txn.checkout_payment_details is None
    assert txn.payment_account_holder is None
    assert txn.billing_address is None


def test_nested_models_are_not_shared(transaction_payload):
    """Test each parent owns its own nested instances"""
    first = Transaction.from_payload(transaction_payload)
    second = Transaction.from_payload(transaction_payload)

    assert first.checkout_payment_details == second.checkout_payment_details
    assert first.checkout_payment_details is not second.checkout_payment_details


@pytest.mark.parametrize(
    "payload",
    [
        {},
        {"cardLast4": "12"},
        {"cardExpiryMonth": "13", "cardExpiryYear": "1999"},
        {"cardBin": None, "billingAddress": {"postalCode": ""}},
    ],
)
def test_checkout_payment_details_validate_always_true(payload):
    assert CheckoutPaymentDetails.from_payload(payload).validate() is True


@pytest.mark.parametrize(
    "payload",
    [
        {},
        {"accountHolderEmail": "not-an-email"},
        {"accountBalance": -5, "accountIsActive": "maybe"},
    ],
)
def test_payment_account_holder_validate_always_true(payload):
    assert PaymentAccountHolder.from_payload(payload).validate() is True


@pytest.mark.parametrize(
    "payload",
    [
        {},
        {"amount": -1, "currency": "XXXX"},
        {"checkoutPaymentDetails": {"cardLast4": "1"}},
    ],
)
def test_transaction_validate_always_true(payload):
    assert Transaction.from_payload(payload).validate() is True
