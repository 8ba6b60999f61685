# app/rules/ruleset.py
from __future__ import annotations
import math
import re
from decimal import Decimal, MAX_EMAX, MIN_EMIN, localcontext
from fractions import Fraction
from typing import Callable, List, Optional, Tuple

from app.schemas import Receipt

# -----------------------------
# Business constants (fixed)
# -----------------------------
ROUND_TOTAL_POINTS = 50
QUARTER_TOTAL_POINTS = 25
ITEM_PAIR_POINTS = 5
ODD_DAY_POINTS = 6
AFTERNOON_POINTS = 10

QUARTERS_PER_UNIT = 4
DESCRIPTION_DIVISOR = 5  # price * 0.2
MAX_PRICE_DIGITS = 4300  # integer digits; matches the interpreter's int digit limit
AFTERNOON_HOURS = {14, 15}

_ALNUM_RE = re.compile(r"[A-Za-z0-9]")
_DECIMAL_RE = re.compile(r"[+-]?([0-9]+(\.[0-9]*)?|\.[0-9]+)([eE][+-]?[0-9]+)?")
_INT_RE = re.compile(r"[+-]?[0-9]+")

RuleResult = Tuple[int, str]
Rule = Callable[[Receipt], RuleResult]

# -----------------------------
# Parsing helpers
# -----------------------------
def parse_amount(text: str | None) -> Optional[Decimal]:
    """Parse a plain decimal literal ("35.00", "6.49", "1e2"); None when it isn't one."""
    if not text or not _DECIMAL_RE.fullmatch(text):
        return None
    return Decimal(text)

def parse_int(text: str | None) -> Optional[int]:
    if not text or not _INT_RE.fullmatch(text):
        return None
    try:
        return int(text)
    except ValueError:
        # longer than the interpreter's int digit limit
        return None

def is_whole(value: Decimal) -> bool:
    """True when the literal has no nonzero digit after the decimal point."""
    _, digits, exponent = value.as_tuple()
    if exponent >= 0:
        return True
    return not any(digits[exponent:])

def is_quarter_multiple(value: Decimal) -> bool:
    # one extra digit and unbounded exponents keep value * 4 exact
    with localcontext() as ctx:
        ctx.prec = len(value.as_tuple().digits) + 1
        ctx.Emax, ctx.Emin = MAX_EMAX, MIN_EMIN
        return is_whole(value * QUARTERS_PER_UNIT)

def description_bonus(price: Decimal) -> Optional[int]:
    """ceil(price * 0.2), floored at 0; None when the price is too large to expand."""
    if price <= 0:
        return 0
    if price.adjusted() < 0:
        # 0 < price < 1, so 0 < price / 5 < 1
        return 1
    if price.adjusted() >= MAX_PRICE_DIGITS:
        return None
    return math.ceil(Fraction(price) / DESCRIPTION_DIVISOR)

# -----------------------------
# Rules: each returns (points, reason)
# -----------------------------
def retailer_name(receipt: Receipt) -> RuleResult:
    return len(_ALNUM_RE.findall(receipt.retailer)), "retailer_name"

def round_total(receipt: Receipt) -> RuleResult:
    total = parse_amount(receipt.total)
    if total is not None and is_whole(total):
        return ROUND_TOTAL_POINTS, "round_total"
    return 0, "round_total"

def quarter_total(receipt: Receipt) -> RuleResult:
    total = parse_amount(receipt.total)
    if total is not None and is_quarter_multiple(total):
        return QUARTER_TOTAL_POINTS, "quarter_total"
    return 0, "quarter_total"

def item_pairs(receipt: Receipt) -> RuleResult:
    return (len(receipt.items) // 2) * ITEM_PAIR_POINTS, "item_pairs"

def description_length(receipt: Receipt) -> RuleResult:
    points = 0
    for item in receipt.items:
        if len(item.short_description.strip()) % 3 != 0:
            continue
        price = parse_amount(item.price)
        if price is None:
            continue
        bonus = description_bonus(price)
        if bonus is not None:
            points += bonus
    return points, "description_length"

def odd_day(receipt: Receipt) -> RuleResult:
    parts = receipt.purchase_date.split("-")
    if len(parts) != 3:
        return 0, "odd_day"
    day = parse_int(parts[2])
    if day is not None and day % 2 == 1:
        return ODD_DAY_POINTS, "odd_day"
    return 0, "odd_day"

def afternoon(receipt: Receipt) -> RuleResult:
    # Matches hour 14 or 15 at any minute, so 16:00 itself never scores.
    parts = receipt.purchase_time.split(":")
    if len(parts) != 2:
        return 0, "afternoon"
    hour, minute = parse_int(parts[0]), parse_int(parts[1])
    if hour is None or minute is None:
        return 0, "afternoon"
    if hour in AFTERNOON_HOURS:
        return AFTERNOON_POINTS, "afternoon"
    return 0, "afternoon"

DEFAULT_RULES: List[Rule] = [
    retailer_name,
    round_total,
    quarter_total,
    item_pairs,
    description_length,
    odd_day,
    afternoon,
]
