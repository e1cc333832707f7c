"""
Fuzzy matching of recipe ingredient names against scanned ingredients.

The recipe model is told to reuse scanned names verbatim but often doesn't
("chicken" for "Chicken Breast", "rice" for "Basmati Rice"). Matching is a
first-match heuristic, not best-match: the first pool entry that satisfies
any rule wins, so ties are decided by pool order.

Known over-matches are kept on purpose and pinned in tests:
"egg" matches "eggplant" and "milk" matches "buttermilk".
"""

from typing import Iterable, Optional, Sequence

from app.services.recipe_types import ScannedIngredient

MIN_TOKEN_LENGTH = 3


def _normalize(name: Optional[str]) -> str:
    return (name or "").lower().strip()


def _tokens(name: str) -> list[str]:
    return [t for t in name.split() if len(t) >= MIN_TOKEN_LENGTH]


def names_match(candidate: Optional[str], reference: Optional[str]) -> bool:
    """
    True when two ingredient names refer to the same thing.

    Rules (case-insensitive, trimmed):
    1. exact equality
    2. either name contains the other
    3. some token longer than two characters in one name contains, or is
       contained in, such a token of the other name
    """
    a = _normalize(candidate)
    b = _normalize(reference)

    if a == b:
        return True
    if a in b or b in a:
        return True

    reference_tokens = _tokens(b)
    return any(
        word in other or other in word
        for word in _tokens(a)
        for other in reference_tokens
    )


def match_ingredient(
    candidate_name: Optional[str], pool: Sequence[ScannedIngredient]
) -> Optional[ScannedIngredient]:
    """Return the first pool entry whose name matches, or None."""
    return first_match(candidate_name, pool, key=lambda item: item.name)


def first_match(candidate_name, items: Iterable, key):
    """First item in `items` whose `key(item)` matches `candidate_name`."""
    for item in items:
        if names_match(candidate_name, key(item)):
            return item
    return None
