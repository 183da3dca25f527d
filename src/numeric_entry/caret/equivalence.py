"""Character-equivalence predicates for caret remapping.

When formatting silently rewrites a typed character (an alternate decimal
key normalised to the configured separator), an identity comparison would
lose track of it; these predicates let the engine pair the two up.
"""

from __future__ import annotations

from collections.abc import Iterable

from numeric_entry.models.caret import EquivalenceContext, IsCharacterEquivalent


def default_is_character_equivalent(
    old_char: str, new_char: str, context: EquivalenceContext | None = None
) -> bool:
    return old_char == new_char


def create_decimal_separator_equivalence(
    allowed_decimal_separators: Iterable[str],
    decimal_separator: str,
    thousand_separator: str | None = None,
) -> IsCharacterEquivalent:
    """Build a predicate treating a typed alternate separator as the canonical one.

    The pairing only holds for characters inside the edited span
    (``context.typed_range``), and never for the thousand separator itself.
    """
    allowed = frozenset(allowed_decimal_separators)

    def is_equivalent(old_char: str, new_char: str, context: EquivalenceContext) -> bool:
        if old_char == new_char:
            return True
        typed = context.typed_range
        if typed is None or not (typed.start <= context.old_index < typed.end):
            return False
        if old_char not in allowed or new_char != decimal_separator:
            return False
        return old_char != thousand_separator

    return is_equivalent
