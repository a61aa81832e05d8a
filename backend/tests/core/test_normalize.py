"""Tests for user normalization — pure transforms, no IO."""

from cellcontrol.core.normalize import (
    normalize_email, normalize_text, normalize_user_fields,
)


def test_normalize_text_trims_surrounding_whitespace():
    assert normalize_text("  Juan  ") == "Juan"
    assert normalize_text("\tIT\n") == "IT"


def test_normalize_text_keeps_inner_whitespace_and_case():
    assert normalize_text(" María José ") == "María José"


def test_normalize_email_trims_and_lowercases():
    assert normalize_email("  JUAN@EXAMPLE.COM ") == "juan@example.com"


def test_emails_differing_in_case_and_padding_normalize_equal():
    assert normalize_email("Ana@Example.com") == normalize_email(" ana@example.COM ")


def test_normalize_user_fields_maps_all_four_columns():
    fields = normalize_user_fields("  Juan  ", "Pérez", "JUAN@EXAMPLE.COM", "  IT  ")
    assert fields == {
        "nombre": "Juan",
        "apellido": "Pérez",
        "email": "juan@example.com",
        "reparto": "IT",
    }
