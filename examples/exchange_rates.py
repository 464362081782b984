"""Exchange-rate formatting example for moneyfmt.

Demonstrates printing rates in a currency-pair layout, fixing the number
of decimal places, quoting rates per 100 units, and parsing rate tables.
"""

from decimal import ROUND_HALF_UP

from moneyfmt import ExchangeRate, ExchangeRateFormatError, ExchangeRateFormatterBuilder


def pair_builder() -> ExchangeRateFormatterBuilder:
    """Builder for 'TARGET/SOURCE rate' layouts."""
    return (
        ExchangeRateFormatterBuilder()
        .append_target_currency()
        .append_literal("/")
        .append_source_currency()
        .append_literal(" ")
        .append_rate()
    )


# Example 1: Currency pairs
print("=" * 50)
print("Example 1: Currency Pairs")
print("=" * 50)

eur_pln = ExchangeRate.of("4.1927", "PLN", "EUR")
print(eur_pln)
# Output: 1 EUR = 4.1927 PLN

pair = pair_builder().to_formatter("pl-PL")
print(pair.print(eur_pln))
# Output: EUR/PLN 4,1927

print(pair.with_locale("en-GB").print(eur_pln))
# Output: EUR/PLN 4.1927

# Example 2: Fixed scale
print("\n" + "=" * 50)
print("Example 2: Fixed Scale")
print("=" * 50)

rounded = pair_builder().set_scale(2, ROUND_HALF_UP).to_formatter("pl-PL")
print(rounded.print(eur_pln))
# Output: EUR/PLN 4,19

strict = pair_builder().set_scale(2).to_formatter("pl-PL")
try:
    strict.print(eur_pln)
except ArithmeticError as e:
    print(f"[ERROR] {e}")
# Output: [ERROR] Rate 4.1927 needs rounding to fit scale 2

# Example 3: Quoting per 100 units
print("\n" + "=" * 50)
print("Example 3: Target Unit Count")
print("=" * 50)

per_hundred = (
    ExchangeRateFormatterBuilder()
    .append_target_unit_count()
    .append_literal(" ")
    .append_target_currency()
    .append_literal(" = ")
    .append_rate()
    .append_literal(" ")
    .append_source_currency()
    .set_target_units_exponent(2)
    .to_formatter("pl-PL")
)
jpy_pln = ExchangeRate.of("0.041455", "PLN", "JPY")
print(per_hundred.print(jpy_pln))
# Output: 100 JPY = 4,1455 PLN

print(per_hundred.parse("100 JPY = 4,1455 PLN"))
# Output: 1 JPY = 0.041455 PLN

# Example 4: Parsing a rate table
print("\n" + "=" * 50)
print("Example 4: Parsing a Rate Table")
print("=" * 50)

table = """\
USD/PLN 3,9512
EUR/PLN 4,1927
GBP/PLN 4,9xx
CHF/PLN 4,4810"""

for line in table.splitlines():
    try:
        rate = pair.parse(line)
    except ExchangeRateFormatError as e:
        print(f"[SKIP] {e.diagnostic}")
        continue
    print(f"[OK] {rate}")
# Output:
# [OK] 1 USD = 3.9512 PLN
# [OK] 1 EUR = 4.1927 PLN
# [SKIP] Unparsed text found at index 11: GBP/PLN 4,9xx
# [OK] 1 CHF = 4.4810 PLN

print("\n" + "=" * 50)
print("[SUCCESS] All examples completed successfully!")
print("=" * 50)
