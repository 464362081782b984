"""Quickstart example for moneyfmt.

This example demonstrates building money formatters, printing values in
several locales and parsing text back into money.

Note: Strict parsing raises on any failure. Use MoneyFormatter.parse() when
you need to inspect partial results instead.
"""

from decimal import ROUND_HALF_UP

from moneyfmt import (
    BigMoney,
    GroupingStyle,
    Money,
    MoneyAmountStyle,
    MoneyFormatterBuilder,
    MoneyParseError,
)

# Example 1: Code and amount
print("=" * 50)
print("Example 1: Currency Code and Amount")
print("=" * 50)

formatter = (
    MoneyFormatterBuilder()
    .append_currency_code()
    .append_literal(" ")
    .append_amount()
    .to_formatter("en-GB")
)

print(formatter.print(Money.of("GBP", "1234567.8")))
# Output: GBP 1,234,567.80

print(formatter.print(BigMoney.of("GBP", "-0.125")))
# Output: GBP -0.125

print(f"Pattern: {formatter}")
# Output: Pattern: ${code}' '${amount}

# Example 2: Localized amounts
print("\n" + "=" * 50)
print("Example 2: Localized Amounts")
print("=" * 50)

localized = (
    MoneyFormatterBuilder()
    .append_amount_localized()
    .append_literal(" ")
    .append_currency_code()
    .to_formatter("en-GB")
)

amount = Money.of("EUR", "1234567.89")
for locale in ("en-GB", "de-DE", "hi-IN"):
    print(f"{locale}: {localized.with_locale(locale).print(amount)}")
# Output:
# en-GB: 1,234,567.89 EUR
# de-DE: 1.234.567,89 EUR
# hi-IN: 12,34,567.89 EUR

# Example 3: Custom amount styles
print("\n" + "=" * 50)
print("Example 3: Custom Amount Styles")
print("=" * 50)

swiss = (
    MoneyAmountStyle.ASCII_DECIMAL_POINT_GROUP3_COMMA
    .with_grouping_character("'")
    .with_grouping_style(GroupingStyle.BEFORE_DECIMAL_POINT)
)
swiss_formatter = (
    MoneyFormatterBuilder()
    .append_currency_code()
    .append_literal(" ")
    .append_amount(swiss)
    .to_formatter("en-GB")
)
print(swiss_formatter.print(BigMoney.of("CHF", "1234567.12345")))
# Output: CHF 1'234'567.12345

# Example 4: Accounting-style negatives
print("\n" + "=" * 50)
print("Example 4: Sign-Dependent Formatting")
print("=" * 50)

plain = MoneyFormatterBuilder().append_amount().to_formatter("en-GB")
bracketed = (
    MoneyFormatterBuilder()
    .append_literal("(")
    .append_amount(MoneyAmountStyle.ASCII_DECIMAL_POINT_GROUP3_COMMA.with_abs_value(True))
    .append_literal(")")
    .to_formatter("en-GB")
)
accounting = (
    MoneyFormatterBuilder()
    .append_currency_code()
    .append_literal(" ")
    .append_signed(plain, bracketed)
    .to_formatter("en-GB")
)
print(accounting.print(Money.of("USD", "-1500")))
# Output: USD (1,500.00)
print(accounting.parse_money("USD (1,500.00)"))
# Output: USD -1500.00

# Example 5: Parsing
print("\n" + "=" * 50)
print("Example 5: Strict and Lenient Parsing")
print("=" * 50)

print(formatter.parse_money("GBP 12.30"))
# Output: GBP 12.30

try:
    formatter.parse_big_money("GBP 12.30 extra")
except MoneyParseError as e:
    print(f"[ERROR] {e.diagnostic}")
# Output: [ERROR] Unparsed text found at index 9: GBP 12.30 extra

context = formatter.parse("GBP 12.30 extra")
print(f"Parsed up to index {context.index}: {context.to_big_money()}")
# Output: Parsed up to index 9: GBP 12.30

# Example 6: Rounding to the currency scale
print("\n" + "=" * 50)
print("Example 6: Rounding")
print("=" * 50)

parsed = formatter.parse_big_money("GBP 9.995")
print(parsed.to_money(ROUND_HALF_UP))
# Output: GBP 10.00

print("\n" + "=" * 50)
print("[SUCCESS] All examples completed successfully!")
print("=" * 50)
