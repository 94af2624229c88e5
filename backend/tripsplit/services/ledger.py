"""Expense ledger: add, remove and list records for one trip."""
import itertools
import logging
import math
import re
from datetime import date
from typing import Optional

from tripsplit.config import TripSettings
from tripsplit.errors import NotFoundError, ValidationError
from tripsplit.schemas import ExpenseCreate, ExpenseRecord
from tripsplit.services.normalizer import normalize

logger = logging.getLogger(__name__)

# Separators and currency symbols users type along with the number.
_AMOUNT_NOISE = re.compile(r"[\s,_₩¥$]")


def parse_amount(raw) -> float:
    if raw is None:
        raise ValidationError("Amount is required")
    if isinstance(raw, bool):
        raise ValidationError("Amount must be a number")
    if isinstance(raw, str):
        text = _AMOUNT_NOISE.sub("", raw)
        if not text:
            raise ValidationError("Amount is required")
        try:
            value = float(text)
        except ValueError:
            raise ValidationError(f"Amount must be a number, got {raw!r}")
    else:
        try:
            value = float(raw)
        except (TypeError, ValueError):
            raise ValidationError(f"Amount must be a number, got {raw!r}")
    if not math.isfinite(value) or value <= 0:
        raise ValidationError(f"Amount must be positive, got {raw!r}")
    return value


class Ledger:
    """
    Owns the record collection. Records are immutable once added and can only
    be removed by id. Participant and category sets come from TripSettings.
    """

    def __init__(self):
        self._records: list[ExpenseRecord] = []
        self._ids = itertools.count(1)

    @property
    def records(self) -> list[ExpenseRecord]:
        return list(self._records)

    def __len__(self) -> int:
        return len(self._records)

    def sorted_records(self) -> list[ExpenseRecord]:
        return sorted(self._records, key=lambda r: (r.date, r.id))

    def add_expense(self, data: ExpenseCreate, settings: TripSettings) -> ExpenseRecord:
        amount = parse_amount(data.amount)
        description = (data.description or "").strip()
        if not description:
            raise ValidationError("Description is required")
        if data.payer not in settings.participants:
            raise ValidationError(
                f"Invalid payer. Must be one of: {', '.join(settings.participants)}"
            )
        # omitted falls back to the first category; an explicit "" is rejected below
        category = settings.categories[0] if data.category is None else data.category
        if category not in settings.categories:
            raise ValidationError(
                f"Invalid category. Must be one of: {', '.join(settings.categories)}"
            )

        normalized = normalize(amount, data.currency, settings.exchange_rate)
        running_total = sum(r.normalized_amount for r in self._records) + normalized
        if not math.isfinite(normalized) or not math.isfinite(running_total):
            raise ValidationError(
                f"Amount {amount} {data.currency.value} is too large at rate {settings.exchange_rate}"
            )

        record = ExpenseRecord(
            id=next(self._ids),
            date=data.date or date.today(),
            payer=data.payer,
            amount=amount,
            currency=data.currency,
            category=category,
            description=description,
            normalized_amount=normalized,
        )
        self._records.append(record)
        logger.info(
            "Added expense %d: %s paid %s %s (%s home)",
            record.id, record.payer, record.amount, record.currency.value, record.normalized_amount,
        )
        return record

    def get_expense(self, expense_id: int) -> ExpenseRecord:
        record = self._find(expense_id)
        if record is None:
            raise NotFoundError(f"Expense {expense_id} not found")
        return record

    def remove_expense(self, expense_id: int) -> bool:
        """Remove by id. Unknown ids are ignored and return False."""
        record = self._find(expense_id)
        if record is None:
            logger.warning("Ignoring delete of unknown expense %s", expense_id)
            return False
        self._records.remove(record)
        logger.info("Removed expense %d", expense_id)
        return True

    def clear(self) -> None:
        logger.info("Cleared %d expenses", len(self._records))
        self._records.clear()

    def _find(self, expense_id: int) -> Optional[ExpenseRecord]:
        return next((r for r in self._records if r.id == expense_id), None)
