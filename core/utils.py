# core/utils.py

def clean(value):
    """Normalize blank → None, strip surrounding whitespace."""
    if value is None:
        return None
    if isinstance(value, str):
        stripped = value.strip()
        return stripped or None
    return value


def sanitize(data: dict) -> dict:
    """
    Prepare a form payload for the gateway:
    - Strip string whitespace
    - Empty strings → None
    - Drop None values (let the database apply its defaults)
    - Preserve booleans and numbers as-is

    Strings are never coerced to numbers: room numbers and ID
    numbers are text even when they look numeric.
    """
    clean_data = {}

    for k, v in data.items():
        v = clean(v)
        if v is None:
            continue
        clean_data[k] = v

    return clean_data
