import logging

from models import PaymentDetails
from storage import PersistedStore, load_json

logger = logging.getLogger(__name__)

DEFAULT_PAYMENT = PaymentDetails(
    bank_name="Earth Trust Bank",
    account_name="Fifi Bags Official",
    account_number="123-456-7890",
    instructions="Please include your name in the transfer description.",
)


class PaymentSettingsStore(PersistedStore):
    def __init__(self, details: PaymentDetails | None = None, notifier=None):
        super().__init__(notifier)
        self._details = details or DEFAULT_PAYMENT

    @classmethod
    def load(cls, storage, key: str, notifier=None):
        raw = load_json(storage, key, None)
        if isinstance(raw, dict):
            return cls(PaymentDetails.from_dict(raw), notifier)
        return cls(None, notifier)

    @property
    def details(self) -> PaymentDetails:
        return self._details

    def snapshot(self):
        return self._details.to_dict()

    def update(self, details: PaymentDetails):
        self._details = details
        self._notify("Payment settings saved", "success")
        self._commit()
