# billing_engine/domain/services/jurisdiction.py
"""
Interstate / intrastate resolution.

Every place that shows totals (editor preview, document lists, printed and
shared documents) must go through ``resolve_interstate`` so the tax buckets
never disagree between views.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Mapping
from typing import Any

from billing_engine.domain.models.document import IssuerProfile

logger = logging.getLogger("jurisdiction")

# "Delhi (07)" -> "07"
_SUPPLY_CODE_RE = re.compile(r"\((\d+)\)")
_LEADING_DIGITS_RE = re.compile(r"^\s*(\d+)")


def as_issuer(issuer: IssuerProfile | Mapping[str, Any] | None) -> IssuerProfile:
    """Accept a model or the stored profile dict (nested ``address`` included)."""
    if isinstance(issuer, IssuerProfile):
        return issuer
    if not isinstance(issuer, Mapping):
        return IssuerProfile()
    return IssuerProfile.model_validate(issuer)


def parse_state_code(code: str | None) -> int | None:
    """Read a state code numerically so that "07" and "7" compare equal."""
    if not code:
        return None
    m = _LEADING_DIGITS_RE.match(str(code))
    return int(m.group(1)) if m else None


def extract_supply_code(place_of_supply: str | None) -> str | None:
    """Return the parenthesised numeric code in a place-of-supply label, if any."""
    if not place_of_supply:
        return None
    m = _SUPPLY_CODE_RE.search(place_of_supply)
    return m.group(1) if m else None


def resolve_interstate(
    place_of_supply: str | None,
    issuer: IssuerProfile | Mapping[str, Any] | None,
) -> bool:
    """
    Decide whether a transaction crosses the issuer's home state.

    1. If the place of supply carries a "(NN)" code and the issuer has a
       state code, compare the two numerically.
    2. Otherwise, intrastate when the place of supply contains the issuer's
       home-state name (case-insensitive), interstate when it does not.
    3. With nothing to compare, default to intrastate.

    Never raises.
    """
    issuer = as_issuer(issuer)
    pos = place_of_supply or ""
    supply_code = extract_supply_code(pos)
    home_code = (issuer.home_state_code or "").strip()

    if supply_code and home_code:
        # An unreadable home code can never match, so it reads as interstate.
        home = parse_state_code(home_code)
        interstate = home is None or int(supply_code) != home
        logger.debug(
            "Place of supply %r vs home code %r -> interstate=%s",
            pos, home_code, interstate,
        )
        return interstate

    # Substring match can misfire when one state name contains another;
    # kept as-is because stored documents rely on it.
    pos_lower = pos.lower().strip()
    home_lower = (issuer.home_state or "").lower().strip()
    if pos_lower and home_lower:
        interstate = home_lower not in pos_lower
        logger.debug(
            "Place of supply %r vs home state %r -> interstate=%s",
            pos, issuer.home_state, interstate,
        )
        return interstate

    return False
