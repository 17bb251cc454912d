"""Closed categorical domains shared by the generator and the filter panel"""

from typing import Dict, List, Tuple

PROCESSORS: List[str] = ["AcquireMax", "Kushki", "dLocal", "LatamPay"]
COUNTRIES: List[str] = ["MX", "CO", "AR", "BR"]
PAYMENT_METHODS: List[str] = ["credit_card", "debit_card", "pix", "oxxo", "pse"]
DECLINE_CATEGORIES: List[str] = ["soft_decline", "hard_decline", "processing_error"]

COUNTRY_METHODS: Dict[str, List[str]] = {
    "MX": ["credit_card", "debit_card", "oxxo"],
    "CO": ["credit_card", "debit_card", "pse"],
    "AR": ["credit_card", "debit_card"],
    "BR": ["credit_card", "debit_card", "pix"],
}

COUNTRY_CURRENCY: Dict[str, str] = {
    "MX": "MXN",
    "CO": "COP",
    "AR": "ARS",
    "BR": "BRL",
}

# Each decline code belongs to exactly one category
DECLINE_CODE_CATEGORY: Dict[str, str] = {
    "issuer_unavailable": "processing_error",
    "insufficient_funds": "soft_decline",
    "suspected_fraud": "hard_decline",
    "card_expired": "hard_decline",
    "invalid_card": "hard_decline",
    "do_not_honor": "soft_decline",
    "card_velocity_exceeded": "soft_decline",
    "processing_error": "processing_error",
    "timeout": "processing_error",
    "network_error": "processing_error",
}

DECLINE_CODES: List[str] = list(DECLINE_CODE_CATEGORY)

# Share of daily volume routed to each processor
PROCESSOR_VOLUME: List[Tuple[str, float]] = [
    ("AcquireMax", 0.30),
    ("Kushki", 0.30),
    ("dLocal", 0.20),
    ("LatamPay", 0.20),
]

PROCESSOR_BASE_DECLINE: Dict[str, float] = {
    "AcquireMax": 0.28,
    "Kushki": 0.32,
    "dLocal": 0.38,
    "LatamPay": 0.75,
}

# Degraded for the whole window, unaffected by the crisis ramp
BROKEN_PROCESSOR = "LatamPay"

DECLINE_CODES_NORMAL: List[Tuple[str, float]] = [
    ("insufficient_funds", 0.30),
    ("card_expired", 0.15),
    ("suspected_fraud", 0.10),
    ("do_not_honor", 0.15),
    ("card_velocity_exceeded", 0.10),
    ("invalid_card", 0.10),
    ("processing_error", 0.05),
    ("timeout", 0.03),
    ("network_error", 0.02),
]

DECLINE_CODES_CRISIS: List[Tuple[str, float]] = [
    ("issuer_unavailable", 0.40),
    ("insufficient_funds", 0.20),
    ("suspected_fraud", 0.10),
    ("card_expired", 0.07),
    ("do_not_honor", 0.07),
    ("invalid_card", 0.06),
    ("card_velocity_exceeded", 0.05),
    ("processing_error", 0.03),
    ("timeout", 0.01),
    ("network_error", 0.01),
]

BAD_BINS: List[str] = ["400001", "400002", "400003"]
