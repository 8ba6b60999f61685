# scoring.py
from __future__ import annotations
from typing import Any, Dict, List, Sequence

from app.rules.ruleset import DEFAULT_RULES, Rule
from app.schemas import Receipt
from app.utils.logging import logger

# -----------------------------
# Main entry
# -----------------------------
def compute_points(receipt: Receipt, rules: Sequence[Rule] = DEFAULT_RULES) -> Dict[str, Any]:
    """
    Returns:
      {
        "points": int (>= 0),
        "reasons": [str],          # rules that contributed points
        "breakdown": {rule: int},  # every rule, including zero contributions
      }
    Rules are independent; a field that fails to parse only zeroes its own rule.
    """
    total = 0
    reasons: List[str] = []
    breakdown: Dict[str, int] = {}

    for rule in rules:
        inc, why = rule(receipt)
        breakdown[why] = inc
        if inc:
            total += inc; reasons.append(why)

    logger.debug("Scored receipt from %r: %s points %s", receipt.retailer, total, breakdown)
    return {"points": total, "reasons": reasons, "breakdown": breakdown}

def score(receipt: Receipt) -> int:
    return compute_points(receipt)["points"]
