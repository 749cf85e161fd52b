"""
Hebrew numerals, as used to write the day and year of a Jewish date.

Numbers are written with the letters of the alphabet added together: 400s
are repeated tavs, 15 and 16 are written 9+6 and 9+7 to avoid spelling the
name of God. Thousands are a single letter written before the rest.
"""

from .exceptions import DateOutOfRange


ONES = ('', 'א', 'ב', 'ג', 'ד', 'ה', 'ו', 'ז', 'ח', 'ט')
TENS = ('', 'י', 'כ', 'ל', 'מ', 'נ', 'ס', 'ע', 'פ', 'צ')
HUNDREDS = ('', 'ק', 'ר', 'ש', 'ת')

GERESH = '׳'
GERSHAYIM = '״'
ALAFIM = 'אלפים'


def _letters_below_1000(n):
    r = HUNDREDS[4] * (n // 400)
    n %= 400
    r += HUNDREDS[n // 100]
    n %= 100
    if n in (15, 16):
        return r + ONES[9] + ONES[n - 9]
    return r + TENS[n // 10] + ONES[n % 10]


def split_hebrew_numerals(n):
    """Returns the letters of the thousands and of the rest of `n`.

    >>> split_hebrew_numerals(5784)
    ('ה', 'תשפד')
    """
    if not 1 <= n <= 9999:
        raise DateOutOfRange('%r cannot be written in Hebrew numerals (1-9999)' % (n,))
    thousands, n = divmod(n, 1000)
    return ONES[thousands], _letters_below_1000(n)


def hebrew_numerals(n):
    return ''.join(split_hebrew_numerals(n))


def format_hebrew_number(n, alafim_garesh=False, alafim=False, gereshayim=False):
    """Writes `n` in Hebrew numerals, with optional punctuation.

    `alafim_garesh` puts a geresh after the thousands, `alafim` adds the word
    "thousands" after them, and `gereshayim` marks the rest of the number as a
    numeral: a geresh after a single letter, or a gershayim before the last one.

    >>> format_hebrew_number(5784, True, True, True)
    'ה׳ אלפים תשפ״ד'
    >>> format_hebrew_number(15, gereshayim=True)
    'ט״ו'
    """
    thousands, rest = split_hebrew_numerals(n)
    r = thousands
    if thousands:
        if alafim_garesh:
            r += GERESH
        if alafim:
            r += ' %s ' % ALAFIM
    if gereshayim:
        if len(rest) == 1:
            rest += GERESH
        elif len(rest) > 1:
            rest = rest[:-1] + GERSHAYIM + rest[-1]
    return (r + rest).rstrip(' ')
