"""
Weighted mod-10 check digit generation and validation.
"""

from itertools import cycle

from barcode1d.barcode.tables import ChecksumRule


def is_digits(value: str) -> bool:
    """True for a non-empty string of ASCII digits."""
    return value.isascii() and value.isdigit()


def generate_check_digit(digits: str, rule: ChecksumRule) -> int:
    """
    Calculate the check digit for a payload.

    Algorithm:
    1. Walk the digits from the end named by the rule (left or right)
    2. Multiply each digit by the next weight of the repeating weight cycle
    3. Sum all results
    4. Check digit = (modulus - (sum mod modulus)) mod modulus

    Input is expected to be validated by the caller.
    """
    ordered = digits if rule.direction == "left" else digits[::-1]
    total = sum(int(digit) * weight for digit, weight in zip(ordered, cycle(rule.weights)))
    return (rule.modulus - (total % rule.modulus)) % rule.modulus


def validate_check_digit(code: str, rule: ChecksumRule) -> bool:
    """
    Validate a code whose last digit is the check digit.

    Args:
        code: Payload followed by its check digit

    Returns:
        True if the check digit matches; False for any mismatch or malformed input
    """
    if len(code) < 2 or not is_digits(code):
        return False

    expected_checksum = generate_check_digit(code[:-1], rule)
    actual_checksum = int(code[-1])

    return expected_checksum == actual_checksum
