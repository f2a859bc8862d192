"""Test factories for records and filter rules.

Centralized builders to avoid duplication across test modules.
Each call returns a fresh object, so tests may consume or mutate it.
"""

from params_filter.domain.model.filter_config import FilterConfig

CONTACT_REQUIRED = ("name", "email")
CONTACT_ACCEPTED = ("phone", "address", "city", "state", "zip")
CONTACT_EXCLUDED = ("ssn", "license", "card_number")


def make_contact(**overrides: object) -> dict[str, object]:
    """Create a contact record.

    Args:
        **overrides: Fields to add or replace

    Returns:
        Fresh dict with name, email, phone, city, state, zip, surf, ssn
    """
    record: dict[str, object] = {
        "name": "BVA",
        "email": "me@here.com",
        "phone": "427-555-9949",
        "city": "Los Angeles",
        "state": "CA",
        "zip": "",
        "surf": "Up",
        "ssn": "111-3245-90",
    }
    record.update(overrides)
    return record


def make_contact_config(debug: bool = False) -> FilterConfig:
    """Create contact rules: name/email required, address fields accepted, ids excluded."""
    return FilterConfig(
        required=CONTACT_REQUIRED,
        accepted=CONTACT_ACCEPTED,
        excluded=CONTACT_EXCLUDED,
        debug=debug,
    )


def make_config(
    required: tuple[str, ...] = (),
    accepted: tuple[str, ...] = (),
    excluded: tuple[str, ...] = (),
    debug: bool = False,
) -> FilterConfig:
    """Create FilterConfig from tuples."""
    return FilterConfig(required=required, accepted=accepted, excluded=excluded, debug=debug)
