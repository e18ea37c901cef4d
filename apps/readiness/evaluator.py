"""
Export readiness evaluation.

A batch is export ready when every check below passes. The checks are fixed,
ordered and independent; a missing or malformed field fails its check instead
of raising, so the evaluator can be run over any stored record.

The GI check is a starter rule and applies to every destination.
"""

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from typing import Any, Callable, Mapping

from .normalization import normalize_batch


# The only form that still has to be dried before export
UNPROCESSED_FORM = 'green'


@dataclass(frozen=True)
class ReadinessCheck:
    key: str
    label: str
    passed: bool


@dataclass(frozen=True)
class ReadinessResult:
    overall: bool
    checks: tuple[ReadinessCheck, ...]

    @property
    def failed(self) -> tuple[ReadinessCheck, ...]:
        return tuple(check for check in self.checks if not check.passed)


def _is_present(value: Any) -> bool:
    if value is None:
        return False
    if isinstance(value, str):
        return bool(value.strip())
    return True


def _is_positive_number(value: Any) -> bool:
    # bools are ints in Python; a weight of True is not a weight
    if value is None or isinstance(value, bool):
        return False
    try:
        number = Decimal(str(value).strip())
    except (InvalidOperation, ValueError):
        return False
    if not number.is_finite():
        return False
    return number > 0


def _is_processed(form: Any) -> bool:
    return _is_present(form) and form != UNPROCESSED_FORM


RULES: tuple[tuple[str, str, Callable[[Mapping[str, Any]], bool]], ...] = (
    ('form', 'Form is Dry/Powder (not Green)', lambda b: _is_processed(b['form'])),
    ('lab', 'Lab test available', lambda b: b['lab'] == 'yes'),
    ('gi', 'GI claimed (starter rule)', lambda b: b['gi'] == 'yes'),
    ('cultivar', 'Cultivar recorded', lambda b: _is_present(b['cultivar'])),
    ('harvest_date', 'Harvest date recorded', lambda b: _is_present(b['harvest_date'])),
    ('weight', 'Weight recorded', lambda b: _is_positive_number(b['weight'])),
)


def evaluate_readiness(batch: Any) -> ReadinessResult:
    """
    Run the readiness checks against a batch.

    Args:
        batch: A ``Batch`` instance or a batch mapping in either naming
            convention. It is normalized before any rule looks at it.

    Returns:
        ReadinessResult with one check per rule, in rule order. ``overall`` is
        True only when every check passed.
    """
    record = normalize_batch(batch)
    checks = tuple(
        ReadinessCheck(key=key, label=label, passed=bool(rule(record)))
        for key, label, rule in RULES
    )
    return ReadinessResult(
        overall=all(check.passed for check in checks),
        checks=checks,
    )
