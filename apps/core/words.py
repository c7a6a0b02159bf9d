"""
Amount-in-words conversion using the Indian numbering system
(crore, lakh, thousand, hundred).
"""

ONES = [
    '', 'One', 'Two', 'Three', 'Four', 'Five', 'Six', 'Seven', 'Eight',
    'Nine', 'Ten', 'Eleven', 'Twelve', 'Thirteen', 'Fourteen', 'Fifteen',
    'Sixteen', 'Seventeen', 'Eighteen', 'Nineteen',
]
TENS = [
    '', '', 'Twenty', 'Thirty', 'Forty', 'Fifty', 'Sixty', 'Seventy',
    'Eighty', 'Ninety',
]

CRORE = 10_000_000
LAKH = 100_000
THOUSAND = 1_000


def _two_digits_to_words(n: int) -> str:
    if n < 20:
        return ONES[n]
    ten_part, one_part = divmod(n, 10)
    if one_part:
        return f"{TENS[ten_part]} {ONES[one_part]}"
    return TENS[ten_part]


def _three_digits_to_words(n: int) -> str:
    hundred, rest = divmod(n, 100)
    parts = []
    if hundred:
        parts.append(f"{ONES[hundred]} Hundred")
    if rest:
        parts.append(_two_digits_to_words(rest))
    return ' '.join(parts)


def _groups_to_words(num: int) -> str:
    crore, num = divmod(num, CRORE)
    lakh, num = divmod(num, LAKH)
    thousand, hundreds = divmod(num, THOUSAND)

    words = []
    if crore:
        # Counts of a thousand crore and up are spelled out recursively.
        if crore < THOUSAND:
            words.append(_three_digits_to_words(crore) + ' Crore')
        else:
            words.append(_groups_to_words(crore) + ' Crore')
    if lakh:
        words.append(_three_digits_to_words(lakh) + ' Lakh')
    if thousand:
        words.append(_three_digits_to_words(thousand) + ' Thousand')
    if hundreds:
        words.append(_three_digits_to_words(hundreds))
    return ' '.join(words)


def number_to_words_indian(num: int) -> str:
    """
    Spell out a rupee amount in words.

    Examples:
        number_to_words_indian(0) → 'Zero Rupees'
        number_to_words_indian(100000) → 'One Lakh Rupees.'
        number_to_words_indian(-50) → 'Minus Fifty Rupees.'

    Args:
        num: Whole rupee amount. Negative values are prefixed with 'Minus'.

    Returns:
        The amount in words, ending in 'Rupees.' (zero has no period).
    """
    if num == 0:
        return 'Zero Rupees'
    if num < 0:
        return 'Minus ' + number_to_words_indian(abs(num))

    result = _groups_to_words(num) + ' Rupees'
    return result.strip() + '.'
