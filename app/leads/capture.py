import re
import time
from dataclasses import dataclass

from app.leads.exceptions import LeadError
from app.logging.logger import Log

_EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")


@dataclass(frozen=True)
class Lead:
    email: str
    ts: int | str
    ua: str = ""


def capture_lead(email: str | None, ts: int | str | None = None, ua: str | None = None) -> Lead:
    """Validate a lead and record it in the application log.

    Nothing is persisted.

    Raises:
        LeadError: if the email address is missing or malformed.
    """
    if not email or not _EMAIL_PATTERN.match(email):
        raise LeadError("Invalid email")
    lead = Lead(email=email, ts=ts or int(time.time() * 1000), ua=ua or "")
    Log.info(f"[lead] email={lead.email} ts={lead.ts!r} ua={lead.ua!r}")
    return lead
