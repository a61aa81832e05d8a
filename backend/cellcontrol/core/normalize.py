"""User Normalization — pure text transforms applied before persistence.

Invariants:
    - Identity fields are whitespace-insensitive; email is also case-insensitive
    - Functions are pure and deterministic (no IO, no ORM)
    - No validation here: format/required checks happen at the HTTP boundary

Design Decisions:
    - Returns a plain dict of column values so core never imports the ORM model
"""


def normalize_text(value: str) -> str:
    """Trim surrounding whitespace."""
    return value.strip()


def normalize_email(value: str) -> str:
    """Trim surrounding whitespace and lower-case."""
    return value.strip().lower()


def normalize_user_fields(
    nombre: str, apellido: str, email: str, reparto: str,
) -> dict[str, str]:
    """Normalize the four user-supplied fields into column values."""
    return {
        "nombre": normalize_text(nombre),
        "apellido": normalize_text(apellido),
        "email": normalize_email(email),
        "reparto": normalize_text(reparto),
    }
