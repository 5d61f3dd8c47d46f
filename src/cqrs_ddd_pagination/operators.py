from enum import Enum


class SearchOperation(str, Enum):
    """Operators accepted in ``field__operator`` search parameters."""

    # Comparison
    EQUALS = "equals"
    NOT_EQUALS = "notequals"
    GREATER_THAN = "greaterthan"
    LESS_THAN = "lessthan"
    GREATER_EQUAL = "gthanorequals"
    LESS_EQUAL = "lthanorequals"

    # Pattern matching
    STARTSWITH = "startswith"
    ENDSWITH = "endswith"
    CONTAINS = "contains"

    # Temporal
    AFTER = "after"
    BEFORE = "before"
    YEAR = "year"
    MONTH = "month"
    DAY = "day"
