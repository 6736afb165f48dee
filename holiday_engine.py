# holiday_engine.py
# Computes concrete holiday dates for a year from a list of holiday rules.

import logging
from dataclasses import dataclass
from datetime import date, datetime, timedelta
from enum import IntEnum
from typing import Callable, Iterable, List, Optional

logger = logging.getLogger(__name__)

# ---------------------------
# Errors
# ---------------------------

class HolidayError(Exception):
    """Base class for every error raised while resolving holidays."""


class InvalidInput(HolidayError):
    """The caller passed no date, no year, or a year outside 1-9999."""


class InvalidCalendarDate(HolidayError):
    def __init__(self, rule_name, year, month=None, day=None, reason=None):
        self.rule_name = rule_name
        self.year = year
        self.month = month
        self.day = day
        if reason is None:
            reason = f"names a date that does not exist: year={year} month={month} day={day}"
        super().__init__(f"Rule {rule_name!r} {reason}")


class InvalidRuleType(HolidayError):
    def __init__(self, rule_name, rule_type):
        self.rule_name = rule_name
        self.rule_type = rule_type
        super().__init__(f"Rule {rule_name!r} has an unrecognised type: {rule_type!r}")

# ---------------------------
# Types
# ---------------------------

class RuleType(IntEnum):
    FIXED = 1
    FIXED_MONDAY_SHIFTED = 2
    EASTER_RELATIVE = 3
    EASTER_RELATIVE_MONDAY_SHIFTED = 4


# Names accepted besides the integer ids stored in the rule table
_RULE_TYPE_NAMES = {
    "fixed": RuleType.FIXED,
    "fixedmondayshifted": RuleType.FIXED_MONDAY_SHIFTED,
    "easterrelative": RuleType.EASTER_RELATIVE,
    "easterrelativemondayshifted": RuleType.EASTER_RELATIVE_MONDAY_SHIFTED,
}


def parse_rule_type(value, rule_name=None) -> RuleType:
    """
    Turn a stored type tag into a RuleType.

    Accepts a RuleType, its integer id (1-4) or its name, either
    "FixedMondayShifted" or "FIXED_MONDAY_SHIFTED" style.
    Anything else raises InvalidRuleType.
    """
    if isinstance(value, RuleType):
        return value

    # bool is an int subclass; True must not become FIXED
    if isinstance(value, int) and not isinstance(value, bool):
        try:
            return RuleType(value)
        except ValueError:
            raise InvalidRuleType(rule_name, value) from None

    if isinstance(value, str):
        key = value.strip().replace("_", "").lower()
        if key in _RULE_TYPE_NAMES:
            return _RULE_TYPE_NAMES[key]

    raise InvalidRuleType(rule_name, value)


@dataclass(frozen=True)
class HolidayRule:
    """
    One row of the rule table.

    day / month only matter for the fixed types, easter_offset_days only
    for the Easter-relative types. The unused group is never looked at.
    """
    name: str
    rule_type: object
    day: Optional[int] = None
    month: Optional[int] = None
    easter_offset_days: int = 0
    id: Optional[int] = None


@dataclass(frozen=True)
class ResolvedHoliday:
    name: str
    date: date
    rule_type: RuleType
    easter_offset_days: int = 0
    rule_id: Optional[int] = None

    def to_dict(self):
        return {
            "id": self.rule_id,
            "name": self.name,
            "date": self.date.isoformat(),
            "day": self.date.day,
            "month": self.date.month,
            "easter_offset_days": self.easter_offset_days,
            "rule_type": int(self.rule_type),
        }


@dataclass(frozen=True)
class HolidayCheck:
    is_holiday: bool
    name: Optional[str] = None

# ---------------------------
# Calendar arithmetic
# ---------------------------

def easter_sunday(year: int) -> date:
    """
    Easter Sunday for a Gregorian year.

    Palm Sunday is found first as March 15 plus (d + e) days, Easter
    Sunday is the Sunday after it.
    """
    a = year % 19
    b = year % 4
    c = year % 7
    d = (19 * a + 24) % 30
    e = (2 * b + 4 * c + 6 * d + 5) % 7

    palm_sunday = date(year, 3, 15) + timedelta(days=d + e)
    return palm_sunday + timedelta(days=7)


def next_or_same_monday(d: date) -> date:
    """Return d if it is a Monday, otherwise the following Monday."""
    # weekday(): 0=Mon, 6=Sun
    while d.weekday() != 0:
        d += timedelta(days=1)
    return d


def _fixed_date(rule: HolidayRule, year: int) -> date:
    try:
        return date(year, rule.month, rule.day)
    except (TypeError, ValueError):
        raise InvalidCalendarDate(rule.name, year, rule.month, rule.day) from None


def _easter_date(rule: HolidayRule, year: int) -> date:
    if rule.easter_offset_days is None:
        raise InvalidCalendarDate(rule.name, year, reason="has no Easter offset")
    return easter_sunday(year) + timedelta(days=rule.easter_offset_days)

# ---------------------------
# Rule evaluation
# ---------------------------

def resolve(rule: HolidayRule, year: int) -> date:
    """
    Concrete date of a single rule in the given year.

    Raises InvalidRuleType for an unknown type tag and InvalidCalendarDate
    when a fixed rule names a day that does not exist in that year, or
    when an Easter rule has no offset.
    """
    return _resolve(rule, parse_rule_type(rule.rule_type, rule.name), year)


def _resolve(rule: HolidayRule, rule_type: RuleType, year: int) -> date:
    if rule_type == RuleType.FIXED:
        return _fixed_date(rule, year)
    if rule_type == RuleType.FIXED_MONDAY_SHIFTED:
        return next_or_same_monday(_fixed_date(rule, year))
    if rule_type == RuleType.EASTER_RELATIVE:
        return _easter_date(rule, year)
    if rule_type == RuleType.EASTER_RELATIVE_MONDAY_SHIFTED:
        return next_or_same_monday(_easter_date(rule, year))

    raise InvalidRuleType(rule.name, rule.rule_type)


def _check_year(year):
    if year is None:
        raise InvalidInput("A year is required")
    if not date.min.year <= year <= date.max.year:
        raise InvalidInput(f"Year out of range: {year}")


def build_year(rules: Iterable[HolidayRule], year: int) -> List[ResolvedHoliday]:
    """
    Resolve every rule for the year, keeping the order of `rules`.

    Either every rule resolves or the first error propagates; a partial
    list is never returned.
    """
    _check_year(year)

    resolved = []
    for rule in rules:
        rule_type = parse_rule_type(rule.rule_type, rule.name)
        resolved.append(ResolvedHoliday(
            name=rule.name,
            date=_resolve(rule, rule_type, year),
            rule_type=rule_type,
            easter_offset_days=rule.easter_offset_days or 0,
            rule_id=rule.id,
        ))

    logger.debug("Resolved %d holidays for %s", len(resolved), year)
    return resolved

# ---------------------------
# Query service
# ---------------------------

class HolidayQueryService:
    """
    Answers holiday queries against a rule source.

    `load_rules` is called once per query and must return the rules in
    the order they should be listed.
    """

    def __init__(self, load_rules: Callable[[], Iterable[HolidayRule]]):
        self._load_rules = load_rules

    def list_year(self, year: int) -> List[ResolvedHoliday]:
        _check_year(year)
        return build_year(list(self._load_rules()), year)

    def is_holiday(self, d: date) -> HolidayCheck:
        if d is None:
            raise InvalidInput("A date is required")
        if isinstance(d, datetime):
            d = d.date()

        # First match in rule order wins when two rules land on the same day
        for holiday in self.list_year(d.year):
            if holiday.date == d:
                return HolidayCheck(is_holiday=True, name=holiday.name)
        return HolidayCheck(is_holiday=False)
