"""
Grammar of the backend's transaction-history feed.

The `info` field of the history response is plain text, one transaction
per line:

    Transaction: Amount: $100, Date: 2025-01-01, Type: DEBIT, Status: COMPLETE, Description: Rent, Account: 123456789012

Fields are joined by ", " and keys are separated from values by ": ".
Neither delimiter is escaped, so a value containing ", " splits into
extra tokens. Only the first ": " of a token separates key and value.
"""

from __future__ import annotations

from typing import Iterator

NO_DATA_SENTINEL = "No transaction data found for the given user ID."
LINE_PREFIX = "Transaction: "
FIELD_SEP = ", "
KV_SEP = ": "
CURRENCY_SYMBOL = "$"


def is_empty_feed(blob: str | None) -> bool:
    return not blob or blob == NO_DATA_SENTINEL


def iter_lines(blob: str) -> Iterator[str]:
    for line in blob.split("\n"):
        if line.strip():
            yield line


def strip_prefix(line: str) -> str:
    if line.startswith(LINE_PREFIX):
        return line[len(LINE_PREFIX):]
    return line


def split_fields(body: str) -> list[str]:
    return body.split(FIELD_SEP)


def split_pair(token: str) -> tuple[str, str] | None:
    key, sep, value = token.partition(KV_SEP)
    if not sep:
        return None
    return key.strip().lower(), value.strip()


def iter_pairs(line: str) -> Iterator[tuple[str, str]]:
    for token in split_fields(strip_prefix(line)):
        pair = split_pair(token)
        if pair is not None:
            yield pair


def parse_amount(value: str) -> int | None:
    v = value.strip()
    if v.startswith(CURRENCY_SYMBOL):
        v = v[len(CURRENCY_SYMBOL):]
    # int() also accepts "_" separators and non-ASCII digits
    if "_" in v or not v.isascii():
        return None
    try:
        return int(v)
    except ValueError:
        return None
