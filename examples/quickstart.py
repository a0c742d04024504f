"""localeparser Quickstart.

Validate and parse numeric form input in the user's locale:
- build_number_pattern: accept only numbers matching a digit-count spec
- parse_locale_number / parse_locale_decimal: locale text -> Python value

API Notes:
- Value parsing never raises: NaN for garbage, None for empty input
- Type guards (is_valid_number, is_valid_decimal) accept None
- Malformed digit specs raise DigitSpecError (a programming error)
"""

from decimal import Decimal

from localeparser import (
    DigitSpecError,
    build_number_pattern,
    is_valid_decimal,
    is_valid_number,
    parse_locale_decimal,
    parse_locale_number,
)


def example_validate_then_parse() -> None:
    """Validate a price field, then parse it."""
    print("[Example 1] Price field (German locale)")
    print("-" * 60)

    pattern = build_number_pattern("de-DE", "1.2-2")
    print(f"Pattern: {pattern.pattern}")

    for user_input in ("12,50", "12.50", "12,5", "-0,99", "1.234,50"):
        if not pattern.matches(user_input):
            print(f"  {user_input!r:12} rejected")
            continue
        price = parse_locale_decimal(user_input, "de-DE")
        if is_valid_decimal(price):
            print(f"  {user_input!r:12} -> {price} (incl. VAT {price * Decimal('1.19'):.2f})")
    print()


def example_sentinels() -> None:
    """Show the NaN / None sentinels."""
    print("[Example 2] Sentinels")
    print("-" * 60)

    for user_input in ("123", "12a3", ""):
        value = parse_locale_number(user_input, "en-US")
        status = "valid" if is_valid_number(value) else "invalid"
        print(f"  {user_input!r:8} -> {value!r} ({status})")
    print()


def example_bad_spec() -> None:
    """Malformed digit specs fail loudly."""
    print("[Example 3] Malformed digit spec")
    print("-" * 60)

    try:
        build_number_pattern("en-US", "two.decimals")
    except DigitSpecError as e:
        print(e)
    print()


if __name__ == "__main__":
    example_validate_then_parse()
    example_sentinels()
    example_bad_spec()
