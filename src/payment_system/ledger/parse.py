from __future__ import annotations

import logging

from . import wire
from .models import TransactionRecord

logger = logging.getLogger(__name__)

_TEXT_FIELDS = {
    "date": "date",
    "type": "type",
    "status": "status",
    "description": "description",
    "account": "account_number",
}


def parse_record(line: str) -> TransactionRecord:
    """
    Parse a single feed line. Never raises: unknown keys are ignored, an
    unparseable amount stays 0, and a line with neither a description nor
    a non-zero amount keeps the whole raw line as its description.
    """
    fields: dict[str, str] = {}
    amount = 0

    for key, value in wire.iter_pairs(line):
        if key == "amount":
            parsed = wire.parse_amount(value)
            if parsed is None:
                logger.debug("Unparseable amount %r in line %r", value, line)
            else:
                amount = parsed
            continue

        attr = _TEXT_FIELDS.get(key)
        if attr is not None:
            fields[attr] = value

    if not fields.get("description") and amount == 0:
        logger.debug("No description or amount recognised, using raw line: %r", line)
        fields["description"] = line

    return TransactionRecord(raw_text=line, amount=amount, **fields)


def parse_transactions(raw_blob: str | None) -> list[TransactionRecord]:
    if wire.is_empty_feed(raw_blob):
        return []
    return [parse_record(line) for line in wire.iter_lines(raw_blob)]
