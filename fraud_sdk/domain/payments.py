"""Payment models - transactions and the payment instruments they carry"""

from typing import Any, Optional

from pydantic import Field

from fraud_sdk.domain.base import Model, ValidationResult, default_currency
from fraud_sdk.domain.models import Address


class CheckoutPaymentDetails(Model):
    """Payment method as submitted by the purchaser during checkout"""

    holder_name: Any = Field(None, alias="holderName")
    card_bin: Any = Field(None, alias="cardBin")  # first six digits
    card_last4: Any = Field(None, alias="cardLast4")
    card_expiry_month: Any = Field(None, alias="cardExpiryMonth")  # MM
    card_expiry_year: Any = Field(None, alias="cardExpiryYear")  # yyyy
    bank_account_number: Any = Field(None, alias="bankAccountNumber")  # last four digits
    bank_routing_number: Any = Field(None, alias="bankRoutingNumber")  # ABA
    billing_address: Optional[Address] = Field(None, alias="billingAddress")

    def validate(self) -> ValidationResult:
        return True


class PaymentAccountHolder(Model):
    """Identity and verification attributes of a stored payment account"""

    account_created_at: Any = Field(None, alias="accountCreatedAt")
    account_id: Any = Field(None, alias="accountId")
    account_holder_name: Any = Field(None, alias="accountHolderName")
    account_holder_phone: Any = Field(None, alias="accountHolderPhone")
    account_holder_email: Any = Field(None, alias="accountHolderEmail")
    account_holder_dob: Any = Field(None, alias="accountHolderDob")
    account_holder_annual_income: Any = Field(None, alias="accountHolderAnnualIncome")
    account_is_verified: Any = Field(None, alias="accountIsVerified")
    account_is_active: Any = Field(None, alias="accountIsActive")
    account_credit_line: Any = Field(None, alias="accountCreditLine")
    account_balance: Any = Field(None, alias="accountBalance")
    billing_address: Optional[Address] = Field(None, alias="billingAddress")

    def validate(self) -> ValidationResult:
        return True


class Transaction(Model):
    """
    Single payment event processed by a payment provider.

    `amount` is the positive amount charged to the payment method and
    `currency` its ISO 4217 code. A partial AUTHORIZATION or SALE carries the
    originating transaction id in `parent_transaction_id`.
    """

    parent_transaction_id: Any = Field(None, alias="parentTransactionId")
    transaction_id: Any = Field(None, alias="transactionId")
    created_at: Any = Field(None, alias="createdAt")
    gateway: Any = Field(None, alias="gateway")
    payment_method: Any = Field(None, alias="paymentMethod")
    type: Any = Field(None, alias="type")
    gateway_status_code: Any = Field(None, alias="gatewayStatusCode")
    gateway_status_message: Any = Field(None, alias="gatewayStatusMessage")
    gateway_error_code: Any = Field(None, alias="gatewayErrorCode")
    currency: Any = Field(default_factory=default_currency, alias="currency")
    amount: Any = Field(None, alias="amount")
    avs_response_code: Any = Field(None, alias="avsResponseCode")
    cvv_response_code: Any = Field(None, alias="cvvResponseCode")
    paypal_pending_reason_code: Any = Field(None, alias="paypalPendingReasonCode")
    paypal_protection_eligibility: Any = Field(None, alias="paypalProtectionEligibility")
    paypal_protection_eligibility_type: Any = Field(None, alias="paypalProtectionEligibilityType")
    checkout_payment_details: Optional[CheckoutPaymentDetails] = Field(None, alias="checkoutPaymentDetails")
    payment_account_holder: Optional[PaymentAccountHolder] = Field(None, alias="paymentAccountHolder")
    billing_address: Optional[Address] = Field(None, alias="billingAddress")

    def validate(self) -> ValidationResult:
        return True
