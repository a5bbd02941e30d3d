# topcar/integrations/payments.py
import logging
import random
import time
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional

from topcar.core import config
from topcar.core.security import generate_id

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class ChargeResult:
    status: str            # success / failed
    transaction_id: str
    message: str

    @property
    def succeeded(self) -> bool:
        return self.status == "success"


class PaymentProcessor(ABC):
    @abstractmethod
    def charge(self, *, appointment_id: str, amount: float, method: str, customer_email: Optional[str]) -> ChargeResult:
        ...


class MockPaymentProcessor(PaymentProcessor):
    """Gateway stand-in: waits, then succeeds with probability ``success_rate``."""

    def __init__(self, success_rate: float = 0.9, delay: float = 0.0, rng: Optional[random.Random] = None):
        self.success_rate = success_rate
        self.delay = delay
        self.rng = rng or random.Random()

    def charge(self, *, appointment_id, amount, method, customer_email):
        if self.delay:
            time.sleep(self.delay)

        ok = self.rng.random() < self.success_rate
        result = ChargeResult(
            status="success" if ok else "failed",
            transaction_id=f"TXN_{generate_id().upper()}",
            message="Payment processed successfully" if ok else "Payment failed - please try again",
        )
        if method == "online":
            log.info(f"[PAYMENT] Mock gateway charged ${amount:.2f} for appointment {appointment_id}: {result.status} ({result.transaction_id})")
        else:
            log.info(f"[PAYMENT] In-person payment of ${amount:.2f} recorded for appointment {appointment_id}")
        return result


_processor: PaymentProcessor = MockPaymentProcessor(
    success_rate=config.PAYMENT_SUCCESS_RATE,
    delay=config.PAYMENT_DELAY_SECONDS,
)


def get_payment_processor() -> PaymentProcessor:
    return _processor
