# public_holidays.py
# Colombian national holiday rules used to seed an empty rule table.
#
# Rule types:
#   1 = fixed date
#   2 = fixed date, moved to the next Monday (Ley Emiliani)
#   3 = days relative to Easter Sunday
#   4 = days relative to Easter Sunday, moved to the next Monday

from holiday_engine import HolidayRule, RuleType

DEFAULT_RULES = [
    HolidayRule("Año Nuevo", RuleType.FIXED, day=1, month=1),
    HolidayRule("Santos Reyes", RuleType.FIXED_MONDAY_SHIFTED, day=6, month=1),
    HolidayRule("San José", RuleType.FIXED_MONDAY_SHIFTED, day=19, month=3),
    HolidayRule("Jueves Santo", RuleType.EASTER_RELATIVE, easter_offset_days=-3),
    HolidayRule("Viernes Santo", RuleType.EASTER_RELATIVE, easter_offset_days=-2),
    HolidayRule("Día del Trabajo", RuleType.FIXED, day=1, month=5),
    HolidayRule("Ascensión del Señor", RuleType.EASTER_RELATIVE_MONDAY_SHIFTED, easter_offset_days=39),
    HolidayRule("Corpus Christi", RuleType.EASTER_RELATIVE_MONDAY_SHIFTED, easter_offset_days=60),
    HolidayRule("Sagrado Corazón de Jesús", RuleType.EASTER_RELATIVE_MONDAY_SHIFTED, easter_offset_days=68),
    HolidayRule("San Pedro y San Pablo", RuleType.FIXED_MONDAY_SHIFTED, day=29, month=6),
    HolidayRule("Independencia de Colombia", RuleType.FIXED, day=20, month=7),
    HolidayRule("Batalla de Boyacá", RuleType.FIXED, day=7, month=8),
    HolidayRule("Asunción de la Virgen", RuleType.FIXED_MONDAY_SHIFTED, day=15, month=8),
    HolidayRule("Día de la Raza", RuleType.FIXED_MONDAY_SHIFTED, day=12, month=10),
    HolidayRule("Todos los Santos", RuleType.FIXED_MONDAY_SHIFTED, day=1, month=11),
    HolidayRule("Independencia de Cartagena", RuleType.FIXED_MONDAY_SHIFTED, day=11, month=11),
    HolidayRule("Inmaculada Concepción", RuleType.FIXED, day=8, month=12),
    HolidayRule("Navidad", RuleType.FIXED, day=25, month=12),
]
