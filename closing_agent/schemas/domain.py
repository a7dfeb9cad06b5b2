"""Domain models for contract facts, timeline milestones and email drafts."""

import datetime as dt
import enum
import logging
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, ValidationInfo, field_validator
from pydantic.alias_generators import to_camel

logger = logging.getLogger(__name__)

# Days after acceptance, used when a period is absent, blank or non-numeric
DEFAULT_INSPECTION_PERIOD = 10
DEFAULT_APPRAISAL_PERIOD = 21
DEFAULT_FINANCING_DEADLINE = 30

PERIOD_DEFAULTS = {
    "inspection_period": DEFAULT_INSPECTION_PERIOD,
    "appraisal_period": DEFAULT_APPRAISAL_PERIOD,
    "financing_deadline": DEFAULT_FINANCING_DEADLINE,
}


class Priority(str, enum.Enum):
    critical = "critical"
    high = "high"
    medium = "medium"
    low = "low"


class _CamelModel(BaseModel):
    """Snake_case attributes, camelCase on the wire."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)


def _coerce_date(value: Any, field_name: str) -> Optional[dt.date]:
    if value is None:
        return None
    if isinstance(value, dt.datetime):
        return value.date()
    if isinstance(value, dt.date):
        return value
    text = str(value).strip()
    if not text:
        return None
    try:
        return dt.date.fromisoformat(text[:10])
    except ValueError:
        logger.warning("Ignoring unparseable %s: %r", field_name, value)
        return None


def _coerce_period(value: Any, default: int) -> int:
    if value is None or isinstance(value, bool):
        return default
    if isinstance(value, int):
        return value
    try:
        number = float(str(value).strip())
    except ValueError:
        return default
    if not number.is_integer():
        return default
    return int(number)


class ContractFacts(_CamelModel):
    """User-entered (or extracted) facts of an accepted offer.

    Construction never fails on messy input: blank or unparseable dates
    become None and malformed periods fall back to their defaults.
    """

    property_address: str = ""
    buyer_name: str = ""
    seller_name: str = ""
    sale_price: str = ""

    acceptance_date: Optional[dt.date] = None
    closing_date: Optional[dt.date] = None

    inspection_period: int = DEFAULT_INSPECTION_PERIOD
    appraisal_period: int = DEFAULT_APPRAISAL_PERIOD
    financing_deadline: int = DEFAULT_FINANCING_DEADLINE

    @field_validator("property_address", "buyer_name", "seller_name", "sale_price", mode="before")
    @classmethod
    def _text(cls, value: Any) -> str:
        if value is None:
            return ""
        return value if isinstance(value, str) else str(value)

    @field_validator("acceptance_date", "closing_date", mode="before")
    @classmethod
    def _date(cls, value: Any, info: ValidationInfo) -> Optional[dt.date]:
        return _coerce_date(value, info.field_name)

    @field_validator("inspection_period", "appraisal_period", "financing_deadline", mode="before")
    @classmethod
    def _period(cls, value: Any, info: ValidationInfo) -> int:
        return _coerce_period(value, PERIOD_DEFAULTS[info.field_name])

    @property
    def effective_closing_date(self) -> Optional[dt.date]:
        """Closing date, or the acceptance date when no closing date is set."""
        return self.closing_date or self.acceptance_date


class Milestone(_CamelModel):
    """A single dated, prioritized task in the transaction timeline."""

    task: str
    date: dt.date
    priority: Priority = Priority.low
    responsible: str
    agent_action: bool = False


class EmailDraft(_CamelModel):
    """A ready-to-send notification email."""

    title: str
    subject: str
    body: str


class ExtractedFacts(_CamelModel):
    """Partial contract facts as returned by a document extractor.

    Values are kept as raw strings; ContractFacts does the coercion when
    they are merged in.
    """

    property_address: Optional[str] = None
    buyer_name: Optional[str] = None
    seller_name: Optional[str] = None
    sale_price: Optional[str] = None
    acceptance_date: Optional[str] = None
    closing_date: Optional[str] = None
    inspection_period: Optional[str] = None
    appraisal_period: Optional[str] = None
    financing_deadline: Optional[str] = None

    def updates(self) -> dict[str, str]:
        """Fields the extractor actually found, keyed by attribute name."""
        return self.model_dump(exclude_none=True)

    @property
    def is_empty(self) -> bool:
        return not self.updates()
