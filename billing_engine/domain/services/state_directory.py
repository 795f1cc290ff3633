# billing_engine/domain/services/state_directory.py
"""
GST state directory and place-of-supply labels.

The table mirrors the two-digit state codes that prefix every GSTIN.
"""

from __future__ import annotations

from dataclasses import dataclass

from billing_engine.domain.models.document import Client
from billing_engine.domain.services.jurisdiction import parse_state_code


@dataclass(frozen=True)
class State:
    name: str
    code: str
    capital: str


INDIAN_STATES: tuple[State, ...] = (
    State("Jammu and Kashmir", "01", "Srinagar"),
    State("Himachal Pradesh", "02", "Shimla"),
    State("Punjab", "03", "Chandigarh"),
    State("Chandigarh", "04", "Chandigarh"),
    State("Uttarakhand", "05", "Dehradun"),
    State("Haryana", "06", "Chandigarh"),
    State("Delhi", "07", "New Delhi"),
    State("Rajasthan", "08", "Jaipur"),
    State("Uttar Pradesh", "09", "Lucknow"),
    State("Bihar", "10", "Patna"),
    State("Sikkim", "11", "Gangtok"),
    State("Arunachal Pradesh", "12", "Itanagar"),
    State("Nagaland", "13", "Kohima"),
    State("Manipur", "14", "Imphal"),
    State("Mizoram", "15", "Aizawl"),
    State("Tripura", "16", "Agartala"),
    State("Meghalaya", "17", "Shillong"),
    State("Assam", "18", "Dispur"),
    State("West Bengal", "19", "Kolkata"),
    State("Jharkhand", "20", "Ranchi"),
    State("Odisha", "21", "Bhubaneswar"),
    State("Chhattisgarh", "22", "Raipur"),
    State("Madhya Pradesh", "23", "Bhopal"),
    State("Gujarat", "24", "Gandhinagar"),
    State("Dadra and Nagar Haveli and Daman and Diu", "26", "Daman"),
    State("Maharashtra", "27", "Mumbai"),
    State("Karnataka", "29", "Bengaluru"),
    State("Goa", "30", "Panaji"),
    State("Lakshadweep", "31", "Kavaratti"),
    State("Kerala", "32", "Thiruvananthapuram"),
    State("Tamil Nadu", "33", "Chennai"),
    State("Puducherry", "34", "Puducherry"),
    State("Andaman and Nicobar Islands", "35", "Port Blair"),
    State("Telangana", "36", "Hyderabad"),
    State("Andhra Pradesh", "37", "Amaravati"),
    State("Ladakh", "38", "Leh"),
)

_BY_CODE = {int(s.code): s for s in INDIAN_STATES}


def state_by_code(code: str | None) -> State | None:
    """Look a state up by its GST code; "7" and "07" both find Delhi."""
    num = parse_state_code(code)
    if num is None:
        return None
    return _BY_CODE.get(num)


def place_of_supply_label(name: str, code: str = "") -> str:
    if name and code:
        return f"{name} ({code})"
    return name


def place_of_supply_for_client(client: Client) -> str:
    """
    Build the "Name (NN)" label pre-filled when a client is picked.

    The code comes from the GSTIN prefix when there is one, otherwise from
    the client's address. The name comes from the directory, falling back
    to the client's own state name.
    """
    gstin = (client.gstin or "").strip()
    if len(gstin) >= 2:
        code = gstin[:2]
    else:
        code = (client.state_code or "").strip()

    state = state_by_code(code) if code else None
    name = state.name if state else (client.state or "").strip()

    if not name:
        return ""
    return place_of_supply_label(name, code)
