"""Load rule sets from Python import references.

A reference has the form ``package.module:attribute``. The attribute may
be a built CheckList or an iterable of (field, rule) pairs, in which case
it is composed with into_checklist().

Usage:
    from fieldcheck.ruleset import load_ruleset

    checklist = load_ruleset("myapp.rules:CHECKS")
"""

from __future__ import annotations

import importlib
from collections.abc import Iterable, Mapping

from loguru import logger

from fieldcheck.checklist import CheckList, into_checklist
from fieldcheck.errors import RulesetLoadError
from fieldcheck.rules.base import Checker


def load_ruleset(reference: str) -> CheckList:
    """Import and build the CheckList named by ``module:attribute``.

    Raises:
        RulesetLoadError: If the reference is malformed, the module or
            attribute cannot be found, the module fails while importing, or
            the attribute is not a CheckList or a sequence of (str, rule) pairs.
        SignatureMismatchError: If the pairs cannot be composed.
    """
    module_name, sep, attr_name = reference.partition(":")
    if not sep or not module_name or not attr_name:
        msg = f"Expected 'module:attribute', got {reference!r}"
        raise RulesetLoadError(msg)

    try:
        module = importlib.import_module(module_name)
    except ImportError as exc:
        msg = f"Cannot import module {module_name!r}: {exc}"
        raise RulesetLoadError(msg) from exc
    except Exception as exc:
        msg = f"Module {module_name!r} failed during import: {exc!r}"
        raise RulesetLoadError(msg) from exc

    try:
        target = getattr(module, attr_name)
    except AttributeError as exc:
        msg = f"Module {module_name!r} has no attribute {attr_name!r}"
        raise RulesetLoadError(msg) from exc

    if isinstance(target, CheckList):
        logger.debug("Loaded checklist {} ({} fields)", reference, len(target))
        return target

    if isinstance(target, str | bytes | Mapping) or not isinstance(target, Iterable):
        msg = (
            f"{reference} must be a CheckList or an iterable of (field, rule) "
            f"pairs, got {type(target).__name__}"
        )
        raise RulesetLoadError(msg)

    checklist = into_checklist(_validate_pairs(reference, target))
    logger.debug("Built checklist from {} ({} fields)", reference, len(checklist))
    return checklist


def _validate_pairs(reference: str, target: Iterable[object]) -> list[tuple[str, Checker]]:
    """Check that every item is a (str, Checker) pair."""
    pairs: list[tuple[str, Checker]] = []
    for index, item in enumerate(target):
        if not isinstance(item, tuple) or len(item) != 2:
            msg = f"{reference} item {index} must be a (field, rule) pair, got {item!r}"
            raise RulesetLoadError(msg)
        field, rule = item
        if not isinstance(field, str):
            msg = f"{reference} item {index} field must be a str, got {type(field).__name__}"
            raise RulesetLoadError(msg)
        if not isinstance(rule, Checker):
            msg = (
                f"{reference} item {index} rule for field {field!r} does not "
                f"implement check/expecting, got {type(rule).__name__}"
            )
            raise RulesetLoadError(msg)
        pairs.append((field, rule))
    return pairs
