"""Static morpheme suggestions used when no generator is reachable."""

import random
from collections.abc import Collection
from dataclasses import dataclass

MAX_SUGGESTIONS = 5


@dataclass(frozen=True)
class MorphemeSuggestion:
    """A candidate morpheme offered to the learner."""

    id: str
    meaning: str


def _pool(*pairs: tuple[str, str]) -> tuple[MorphemeSuggestion, ...]:
    return tuple(MorphemeSuggestion(id=id, meaning=meaning) for id, meaning in pairs)


FALLBACK_POOLS: dict[str, tuple[MorphemeSuggestion, ...]] = {
    "root": _pool(
        ("rupt", "break"),
        ("scrib", "write"),
        ("duct", "lead"),
        ("tract", "pull / draw"),
        ("ject", "throw"),
        ("mit", "send"),
        ("cred", "believe"),
        ("vis", "see"),
        ("aud", "hear"),
        ("ven", "come"),
        ("voc", "call / voice"),
        ("form", "shape"),
        ("pend", "hang / weigh"),
        ("pos", "put / place"),
        ("cept", "take / seize"),
    ),
    "prefix": _pool(
        ("un-", "not / reverse"),
        ("re-", "again / back"),
        ("pre-", "before"),
        ("mis-", "wrong / bad"),
        ("dis-", "not / apart"),
        ("over-", "excessive"),
        ("sub-", "under / below"),
        ("inter-", "between"),
        ("anti-", "against"),
        ("super-", "above / beyond"),
    ),
    "suffix": _pool(
        ("-tion", "state / action"),
        ("-ment", "result / action"),
        ("-ness", "state / quality"),
        ("-able", "capable of"),
        ("-ful", "full of"),
        ("-less", "without"),
        ("-ous", "having quality"),
        ("-ive", "tending to"),
        ("-ly", "in manner of"),
        ("-er", "one who"),
    ),
}

DEFAULT_CATEGORY = "root"


class SuggestionFallbackTable:
    """
    Picks up to five morphemes from the static pool of a category.

    The query is a soft filter: when it matches nothing in the remaining
    pool it is dropped, so the learner never gets an empty list just
    because of what they typed.
    """

    def __init__(
        self,
        rng: random.Random | None = None,
        pools: dict[str, tuple[MorphemeSuggestion, ...]] | None = None,
    ) -> None:
        self.rng = rng or random.Random()
        self.pools = pools if pools is not None else FALLBACK_POOLS

    def suggest(
        self,
        category: str,
        exclude_ids: Collection[str],
        query: str | None = None,
    ) -> list[MorphemeSuggestion]:
        """
        Suggest morphemes for a category.

        Args:
            category: root, prefix or suffix; anything else uses the root pool
            exclude_ids: Ids that are already known and must not be offered
            query: Optional free text matched against id and meaning

        Returns:
            At most five suggestions in random order
        """
        pool = self.pools.get(category, self.pools[DEFAULT_CATEGORY])
        excluded = set(exclude_ids)
        candidates = [s for s in pool if s.id not in excluded]

        needle = (query or "").strip().lower()
        if needle:
            matching = [
                s for s in candidates if needle in s.id or needle in s.meaning.lower()
            ]
            if matching:
                candidates = matching

        self.rng.shuffle(candidates)
        return candidates[:MAX_SUGGESTIONS]
