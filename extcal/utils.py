import re
import sys
from unicodedata import combining, normalize


spaces_re = re.compile(r'\s+', re.U)


def log(*args, **kw):
    kw.setdefault('file', sys.stderr)
    print(*args, **kw)


def strip_accents(s):
    return ''.join(c for c in normalize('NFKD', s) if not combining(c))


def strip_down(s):
    """
    >>> strip_down("Nivôse")
    'nivose'
    >>> strip_down("  Jour  de l'Opinion ")
    "jour de l'opinion"
    """
    return spaces_re.sub(' ', strip_accents(s).lower()).strip()


def strip_prefix(s, prefix):
    i = len(prefix)
    if s[:i] == prefix:
        return s[i:]
    return s
