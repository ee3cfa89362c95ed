"""Human-readable codes assigned to worker and staff records at creation."""

import random
from typing import Optional

WORKER_FALLBACK_INITIALS = "GEN"
STAFF_FALLBACK_INITIALS = "HOS"


def initials(name: Optional[str]) -> str:
    """Uppercased first letter of each whitespace-separated word ("City General" -> "CG")."""
    if not name:
        return ""
    return "".join(word[0] for word in name.split() if word[0].isalpha()).upper()


def _serial() -> int:
    return random.randint(100, 999)


def worker_code(hospital_name: Optional[str]) -> str:
    prefix = initials(hospital_name) or WORKER_FALLBACK_INITIALS
    return f"{prefix}_{_serial()}"


def staff_code(hospital_name: Optional[str], role: str) -> str:
    prefix = initials(hospital_name) or STAFF_FALLBACK_INITIALS
    role = role.lower()
    if "nurse" in role:
        return f"{prefix}{_serial()}"
    if "doctor" in role:
        return f"{prefix}@{_serial()}"
    return f"{prefix}_{_serial()}"
