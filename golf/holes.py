# =========================
# holes.py
# Static hole and language tables, built once at import and never mutated.
# =========================

from collections import namedtuple
from types import MappingProxyType

Hole = namedtuple("Hole", ["id", "name", "preamble"])
Lang = namedtuple("Lang", ["id", "name"])

HOLES = (
    Hole(
        "99-bottles-of-beer",
        "99 Bottles of Beer",
        "Print the lyrics to the song 99 Bottles of Beer.",
    ),
    Hole(
        "fibonacci",
        "Fibonacci",
        "Print the first 31 Fibonacci numbers from F<sub>0</sub> = 0 to "
        "F<sub>30</sub> = 832040 (inclusive), each on a separate line.",
    ),
    Hole(
        "fizzbuzz",
        "FizzBuzz",
        "Print the numbers from 1 to 100 inclusive, each on their own line.</p>"
        "<p>If, however, the number is a multiple of three then print "
        "<b>Fizz</b> instead, and if the number is a multiple of five then "
        "print <b>Buzz</b>.</p>"
        "<p>For numbers which are multiples of both three and five then print "
        "<b>FizzBuzz</b>.",
    ),
    Hole(
        "pascals-triangle",
        "Pascal's Triangle",
        "Print the first 20 rows of Pascal's triangle, one row per line with "
        "the numbers separated by a single space.",
    ),
    Hole(
        "seven-segment",
        "Seven Segment",
        "Using pipes and underscores, draw each argument as a seven-segment "
        "display.",
    ),
)

# Order here is the tab order on every hole page.
LANGS = (
    Lang("bash", "Bash"),
    Lang("go", "Go"),
    Lang("haskell", "Haskell"),
    Lang("javascript", "JavaScript"),
    Lang("lisp", "Lisp"),
    Lang("lua", "Lua"),
    Lang("perl", "Perl"),
    Lang("perl6", "Perl 6"),
    Lang("php", "PHP"),
    Lang("python", "Python"),
    Lang("ruby", "Ruby"),
)

HOLE_BY_ID = MappingProxyType({hole.id: hole for hole in HOLES})


def hole_by_id(hole_id):
    """Configured hole, or a blank one so unknown ids still render."""
    return HOLE_BY_ID.get(hole_id, Hole(hole_id, "", ""))
