"""Case model - top-level aggregate sent to the case creation endpoint"""

import logging
from typing import Any, List, Optional, Union

from pydantic import Field

from fraud_sdk.domain.base import Model, ValidationResult
from fraud_sdk.domain.models import Purchase, Recipient, Seller, UserAccount
from fraud_sdk.domain.payments import Transaction
from fraud_sdk.infrastructure.observability.logging import log_case_built
from fraud_sdk.infrastructure.observability.metrics import record_validation_failure

logger = logging.getLogger(__name__)


class CaseModel(Model):
    """Fraud review request: purchase, recipients, transactions, account and sellers"""

    purchase: Optional[Purchase] = Field(None, alias="purchase")
    recipients: List[Recipient] = Field(default_factory=list, alias="recipients")
    transactions: List[Transaction] = Field(default_factory=list, alias="transactions")
    user_account: Optional[UserAccount] = Field(None, alias="userAccount")
    sellers: List[Seller] = Field(default_factory=list, alias="sellers")

    @classmethod
    def from_payload(cls, payload: Any) -> "CaseModel":
        case = super().from_payload(payload)
        log_case_built(case)
        return case

    @classmethod
    def from_json(cls, document: Union[str, bytes]) -> "CaseModel":
        case = super().from_json(document)
        log_case_built(case)
        return case

    def add_recipient(self, recipient: Recipient) -> None:
        self.recipients.append(recipient)

    def add_transaction(self, transaction: Transaction) -> None:
        self.transactions.append(transaction)

    def add_seller(self, seller: Seller) -> None:
        self.sellers.append(seller)

    def validate(self) -> ValidationResult:
        """
        Validate every populated nested model.

        Returns:
            True if all nested results are True, otherwise the non-true
            results in field then item order
        """
        invalid = []
        for spec in self.field_table().values():
            value = getattr(self, spec.attr)
            if value is None:
                continue
            items = list(value) if spec.many else [value]
            for item in items:
                result = item.validate()
                if result is not True:
                    invalid.append(result)

        if not invalid:
            return True

        logger.warning(
            "Case validation failed",
            extra={"model": type(self).__name__, "failure_count": len(invalid)},
        )
        record_validation_failure(type(self).__name__)
        return invalid
