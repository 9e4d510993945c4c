"""
Result cards — the display form of a calculator result.

A card is {key, label, value, display}. Only keys with a label are shown,
in label order; None values (quantities that don't apply) are skipped.
Advisory text lists are returned as-is in the result, not as cards.
"""

CURRENCY = "$"


def format_value(value, unit: str = "") -> str:
    """Format a number the way the result cards show it."""
    if isinstance(value, bool):
        return "Yes" if value else "No"
    if isinstance(value, str):
        return value
    if isinstance(value, dict):
        return ", ".join("%s: %s" % (k, format_value(v)) for k, v in value.items())
    if unit == CURRENCY:
        return f"${float(value):,.2f}"
    if unit == "%":
        return f"{float(value):g}%"
    if isinstance(value, int):
        text = f"{value:,}"
    else:
        text = f"{float(value):,.2f}"
    return f"{text} {unit}" if unit else text


def format_result_cards(result: dict, labels: dict) -> list:
    cards = []
    for key, (label, unit) in labels.items():
        value = result.get(key)
        if value is None or isinstance(value, list):
            continue
        cards.append({
            "key": key,
            "label": label,
            "value": value,
            "display": format_value(value, unit),
        })
    return cards
