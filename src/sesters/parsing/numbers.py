"""Price formats, like "1,000.00" or "1.000,00", and the numbers they match.

A NumberFormat is defined by two disjoint sets of separator characters:
thousand separators, which may appear anywhere between digits (even inside
the fractional part, as in "7 00 0 00 0,0 7"), and decimal separators, which
split the integer part from the fractional part. The format compiles one
regular expression at construction time; scanning text afterwards never raises.

Scanning is best effort, not validation: a capture that cannot be converted to
a float is logged and skipped.

Thread-safe. Instances are immutable.

Python 3.13+.
"""

from __future__ import annotations

import functools
import logging
import re
from collections.abc import Iterable, Iterator
from dataclasses import dataclass

from babel import UnknownLocaleError
from babel.numbers import get_decimal_symbol, get_group_symbol

from sesters.constants import MAX_LOCALE_CACHE_SIZE
from sesters.diagnostics import (
    DiagnosticFormatter,
    ErrorTemplate,
    NumberFormatConfigError,
    OutputFormat,
    TextSpan,
)
from sesters.locale_utils import get_babel_locale, normalize_locale

__all__ = [
    "COMMON",
    "FR",
    "US",
    "NumberFormat",
    "NumberMatch",
]

logger = logging.getLogger(__name__)

_LOG_FORMATTER = DiagnosticFormatter(output_format=OutputFormat.SIMPLE, sanitize=True)

# Space-like characters CLDR uses as group symbols (fr, ru, sv, ...).
_SPACE_SEPARATORS: frozenset[str] = frozenset({" ", "\u00a0", "\u202f"})


@dataclass(frozen=True, slots=True)
class NumberMatch:
    """Number found in text.

    Attributes:
        start: Start character offset of the match
        end: End character offset of the match (exclusive)
        value: Parsed value
    """

    start: int
    end: int
    value: float

    @property
    def span(self) -> TextSpan:
        """Character span of the match."""
        return TextSpan(self.start, self.end)


def _separator_set(format_name: str, separators: Iterable[str]) -> str:
    """Deduplicate separators, keeping first-seen order, and validate each one."""
    seen: list[str] = []
    for sep in separators:
        if len(sep) != 1 or sep.isdigit() or sep == "-":
            raise NumberFormatConfigError(ErrorTemplate.separator_invalid(format_name, sep))
        if sep not in seen:
            seen.append(sep)
    return "".join(seen)


class NumberFormat:
    """Recognizer for signed decimal numbers written with given separators.

    Regular expression captures:
        sign: "-", optionally followed by one thousand separator ("- 100")
        int: digits, each optionally followed by thousand separators
        dec: same shape as int, after zero or more decimal separators

    Thousand separators trailing a digit run belong to the match: in "12 €"
    with a space thousand separator, the match is "12 ".

    Example:
        >>> [m.value for m in COMMON.finditer("-20 000.02 or 7 00 0 00 0,0 7")]
        [-20000.02, 7000000.07]
        >>> US.parse("USD 1,234.56")
        1234.56
    """

    __slots__ = ("_decimal", "_name", "_pattern", "_strip", "_thousand")

    def __init__(
        self,
        thousand_separators: Iterable[str],
        decimal_separators: Iterable[str],
        *,
        name: str = "custom",
    ) -> None:
        """Build the recognizer.

        Args:
            thousand_separators: Characters grouping digits (e.g. " " or ", ")
            decimal_separators: Characters before the fractional part (e.g. ",.")
            name: Label used in diagnostics and repr

        Raises:
            NumberFormatConfigError: If a separator is not a single character,
                is a digit or '-', or belongs to both sets.
        """
        self._name = name
        self._thousand = _separator_set(name, thousand_separators)
        self._decimal = _separator_set(name, decimal_separators)

        shared = set(self._thousand) & set(self._decimal)
        if shared:
            raise NumberFormatConfigError(
                ErrorTemplate.separator_overlap(name, "".join(sorted(shared)))
            )

        self._pattern = re.compile(self._build_pattern(self._thousand, self._decimal))
        self._strip = str.maketrans("", "", self._thousand)
        logger.debug("NumberFormat %s compiled: %s", name, self._pattern.pattern)

    @staticmethod
    def _build_pattern(thousand: str, decimal: str) -> str:
        tsep = "".join(re.escape(c) for c in thousand)
        dsep = "".join(re.escape(c) for c in decimal)

        digits = rf"(?:\d[{tsep}]*)+" if tsep else r"\d+"
        sign = rf"-[{tsep}]?" if tsep else "-"
        fraction = rf"(?:[{dsep}]*(?P<dec>{digits}))?" if dsep else ""

        return rf"(?P<sign>{sign})?(?P<int>{digits}){fraction}"

    @classmethod
    def for_locale(cls, locale_code: str) -> NumberFormat:
        """Number format using a locale's CLDR group and decimal symbols.

        A plain space is always accepted as thousand separator, and so is the
        no-break space when the locale groups digits with a space variant.
        Results are cached per locale.

        Raises:
            NumberFormatConfigError: If Babel does not know the locale.

        Example:
            >>> NumberFormat.for_locale("de_DE").parse("1.234,56")
            1234.56
        """
        return _locale_number_format(normalize_locale(locale_code))

    @property
    def name(self) -> str:
        """Label of the format."""
        return self._name

    @property
    def thousand_separators(self) -> str:
        """Thousand separator characters."""
        return self._thousand

    @property
    def decimal_separators(self) -> str:
        """Decimal separator characters."""
        return self._decimal

    @property
    def pattern(self) -> re.Pattern[str]:
        """Compiled recognizer."""
        return self._pattern

    def finditer(self, text: str) -> Iterator[NumberMatch]:
        """Yield every number found in text, left to right."""
        for m in self._pattern.finditer(text):
            number = self._to_number(m)
            if number is not None:
                yield number

    def find_all(self, text: str) -> list[NumberMatch]:
        """All numbers found in text, left to right."""
        return list(self.finditer(text))

    def parse(self, text: str) -> float | None:
        """Value of the first number in text, or None."""
        return next((m.value for m in self.finditer(text)), None)

    def _to_number(self, m: re.Match[str]) -> NumberMatch | None:
        sign = (m.group("sign") or "").translate(self._strip)
        integer = m.group("int").translate(self._strip)
        fraction = (m.groupdict().get("dec") or "").translate(self._strip)
        cleaned = f"{sign}{integer}.{fraction}"
        try:
            value = float(cleaned)
        except ValueError:
            diagnostic = ErrorTemplate.number_unparsable(m.group(0), cleaned, m.start(), m.end())
            logger.warning("%s", _LOG_FORMATTER.format(diagnostic))
            return None
        return NumberMatch(m.start(), m.end(), value)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, NumberFormat):
            return NotImplemented
        return (self._thousand, self._decimal) == (other._thousand, other._decimal)

    def __hash__(self) -> int:
        return hash((self._thousand, self._decimal))

    def __repr__(self) -> str:
        return (
            f"NumberFormat({self._name!r}, thousand={self._thousand!r}, "
            f"decimal={self._decimal!r})"
        )


@functools.lru_cache(maxsize=MAX_LOCALE_CACHE_SIZE)
def _locale_number_format(locale_code: str) -> NumberFormat:
    try:
        locale = get_babel_locale(locale_code)
    except (UnknownLocaleError, ValueError) as e:
        raise NumberFormatConfigError(ErrorTemplate.locale_unknown(locale_code)) from e

    group = get_group_symbol(locale=locale)
    decimal = get_decimal_symbol(locale=locale)

    thousand = [group, " "]
    if group in _SPACE_SEPARATORS:
        thousand.extend(sorted(_SPACE_SEPARATORS))
    logger.debug("Locale %s: group=%r decimal=%r", locale_code, group, decimal)
    return NumberFormat(thousand, decimal, name=locale_code)


# ============================================================================
# NAMED FORMATS
# ============================================================================

# Common price format, should match most texts
COMMON = NumberFormat(" ", ",.", name="common")

# US price format: 10,000.87
US = NumberFormat(", ", ".", name="us")

# French price format: 10 000,87 with regular, no-break or narrow no-break spaces
FR = NumberFormat(" \u00a0\u202f", ",.", name="fr")
