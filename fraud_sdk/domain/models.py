"""Supporting case models - addresses, purchase, recipients, accounts and sellers"""

from typing import Any, List, Optional

from pydantic import Field

from fraud_sdk.domain.base import Model, default_currency


class Address(Model):
    """Postal address attached to a payment instrument, recipient or seller"""

    street_address: Any = Field(None, alias="streetAddress")
    unit: Any = Field(None, alias="unit")
    postal_code: Any = Field(None, alias="postalCode")
    city: Any = Field(None, alias="city")
    province_code: Any = Field(None, alias="provinceCode")
    country_code: Any = Field(None, alias="countryCode")  # ISO 3166-1 alpha-2


class Product(Model):
    """Single line item of a purchase"""

    item_id: Any = Field(None, alias="itemId")
    item_name: Any = Field(None, alias="itemName")
    item_url: Any = Field(None, alias="itemUrl")
    item_image: Any = Field(None, alias="itemImage")
    item_quantity: Any = Field(None, alias="itemQuantity")
    item_price: Any = Field(None, alias="itemPrice")
    item_weight: Any = Field(None, alias="itemWeight")
    item_is_digital: Any = Field(None, alias="itemIsDigital")
    item_category: Any = Field(None, alias="itemCategory")
    item_sub_category: Any = Field(None, alias="itemSubCategory")


class Purchase(Model):
    """Purchase event represented in the case creation request"""

    browser_ip_address: Any = Field(None, alias="browserIpAddress")
    order_id: Any = Field(None, alias="orderId")
    created_at: Any = Field(None, alias="createdAt")
    order_channel: Any = Field(None, alias="orderChannel")
    received_by: Any = Field(None, alias="receivedBy")
    total_price: Any = Field(None, alias="totalPrice")
    currency: Any = Field(default_factory=default_currency, alias="currency")
    order_session_id: Any = Field(None, alias="orderSessionId")
    checkout_token: Any = Field(None, alias="checkoutToken")
    discount_codes: Any = Field(None, alias="discountCodes")
    shipments: Any = Field(None, alias="shipments")
    products: List[Product] = Field(default_factory=list, alias="products")

    def add_product(self, product: Product) -> None:
        self.products.append(product)


class Recipient(Model):
    """Person or organization receiving the purchased items"""

    full_name: Any = Field(None, alias="fullName")
    confirmation_email: Any = Field(None, alias="confirmationEmail")
    confirmation_phone: Any = Field(None, alias="confirmationPhone")
    organization: Any = Field(None, alias="organization")
    delivery_address: Optional[Address] = Field(None, alias="deliveryAddress")


class UserAccount(Model):
    """Merchant-side account of the purchaser, when one exists"""

    email: Any = Field(None, alias="email")
    username: Any = Field(None, alias="username")
    phone: Any = Field(None, alias="phone")
    created_date: Any = Field(None, alias="createdDate")
    account_number: Any = Field(None, alias="accountNumber")
    last_order_id: Any = Field(None, alias="lastOrderId")
    aggregate_order_count: Any = Field(None, alias="aggregateOrderCount")
    aggregate_order_dollars: Any = Field(None, alias="aggregateOrderDollars")
    last_update_date: Any = Field(None, alias="lastUpdateDate")


class Seller(Model):
    """Seller of the purchased products (marketplaces)"""

    name: Any = Field(None, alias="name")
    domain: Any = Field(None, alias="domain")
    seller_id: Any = Field(None, alias="sellerId")
    onboarding_ip_address: Any = Field(None, alias="onboardingIpAddress")
    onboarding_email: Any = Field(None, alias="onboardingEmail")
    ship_from_address: Optional[Address] = Field(None, alias="shipFromAddress")
    corporate_address: Optional[Address] = Field(None, alias="corporateAddress")
