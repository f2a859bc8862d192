#!/usr/bin/env python3
"""Demo: filter sample contact records and print results with rich.

Shows the one-shot function with and without debug warnings, then a
reusable filter applied to several records.
"""

from __future__ import annotations

import argparse

from rich.console import Console

from params_filter import ParamsFilter, filter_params
from params_filter.application.reporters import ConsoleConfig, ConsoleReporter

REQUIRED = ["name", "email"]
ACCEPTED = ["phone", "address", "city", "state", "zip"]
EXCLUDED = ["ssn", "license", "card_number"]

CONTACT = {
    "name": "BVA",
    "email": "me@here.com",
    "phone": "427-555-9949",
    "city": "Los Angeles",
    "state": "CA",
    "zip": "",
    "surf": "Up",
    "ssn": "111-3245-90",
}

RECORDS = [
    # No name
    {
        "email": "yo@here.com",
        "phone": "333-555-3320",
        "city": "SF",
        "state": "CA",
        "zipcode": "",
        "surf": "Up",
    },
    {
        "name": "BVA",
        "email": "me@here.com",
        "phone": "111-555-2239",
        "city": "Los Angeles",
        "state": "CA",
        "zipcode": "",
        "ssn": "444-9999-22",
        "card_number": "2222-2222-1111-1111",
    },
    {
        "name": "Lulu",
        "email": "yo@here.com",
        "phone": "774-555-3692",
        "city": "SF",
        "state": "CA",
        "zip": "",
        "surf": "Up",
    },
]


def main() -> None:
    """Run demo and print formatted results."""
    parser = argparse.ArgumentParser(description="params_filter demo")
    parser.add_argument("--width", type=int, default=100, help="Console width")
    parser.add_argument("--no-debug", action="store_true", help="Disable debug warnings")
    args = parser.parse_args()

    console = Console(width=args.width)
    debug = not args.no_debug

    def show(title: str, result: object) -> None:
        reporter = ConsoleReporter(ConsoleConfig(title=title, width=args.width))
        console.print(reporter.report(result), end="")

    show(
        "One-shot: accepted list",
        filter_params({"TESTING": 1, "Ready": "ok"}, ["TESTING"], ["Ready", "Preparing"]),
    )
    show(
        "One-shot: accepted + excluded, debug",
        filter_params(CONTACT, REQUIRED, ACCEPTED, EXCLUDED, debug),
    )
    show("One-shot: required only", filter_params(CONTACT, REQUIRED))

    flt = ParamsFilter(
        {
            "required": REQUIRED,
            "accepted": ACCEPTED,
            "excluded": EXCLUDED,
            "DEBUG": debug,
        }
    )
    for index, record in enumerate(RECORDS, start=1):
        show(f"Reusable filter: record {index}", flt.apply(record))

    show("Reusable filter: accept all", flt.accept_all().apply(RECORDS[1]))


if __name__ == "__main__":
    main()
