"""Label and identifier helpers used by the input projector."""
import re
from uuid import uuid4

_WORD_BOUNDARY = re.compile(r"(?<=[a-z0-9])(?=[A-Z])|(?<=[A-Z])(?=[A-Z][a-z])|[_\-\s]+")


def create_label(name: str) -> str:
    """Turn a field key into a label: 'firstName' / 'first_name' -> 'First name'."""
    words = [w for w in _WORD_BOUNDARY.split(name) if w]
    if not words:
        return name
    text = " ".join(w.lower() for w in words)
    return text[0].upper() + text[1:]


def generate_id() -> str:
    return str(uuid4())
