import re
from typing import Pattern, Tuple

# Applied in order, each one globally. Case-sensitive on purpose so each
# variant keeps its own casing: YALE -> FALE, Yale -> Fale, yale -> fale.
REPLACEMENT_RULES: Tuple[Tuple[Pattern[str], str], ...] = (
    (re.compile("YALE"), "FALE"),
    (re.compile("Yale"), "Fale"),
    (re.compile("yale"), "fale"),
)

def apply_rules(text: str) -> str:
    """Apply every replacement rule to ``text`` left to right."""
    for pattern, replacement in REPLACEMENT_RULES:
        text = pattern.sub(replacement, text)
    return text
