"""
Morpheme entity: a root, prefix or suffix studied as a vocabulary building block.
"""

from dataclasses import dataclass
from typing import Literal, get_args

from wordroots.domain.common.exceptions import ValidationError

MorphemeType = Literal["root", "prefix", "suffix"]

MORPHEME_TYPES: tuple[str, ...] = get_args(MorphemeType)

PENDING_MEANING = "(pending generation)"


def normalize_morpheme_id(raw: str) -> str:
    """Trim and lowercase a user-supplied morpheme token."""
    return raw.strip().lower()


def validate_morpheme_id(morpheme_id: str) -> str:
    """
    Check that a morpheme id is usable as a file name token.

    Raises:
        ValidationError: If the id is empty, a dot path or contains a separator
    """
    if not morpheme_id or not morpheme_id.strip():
        raise ValidationError("Morpheme id cannot be empty", field="id")
    if morpheme_id in (".", "..") or "/" in morpheme_id or "\\" in morpheme_id:
        raise ValidationError("Morpheme id is not a valid token", field="id", value=morpheme_id)
    return morpheme_id


@dataclass(frozen=True)
class Morpheme:
    """
    Registry entry for a known morpheme.

    Business Rules:
    - id is unique within the registry and safe to use as a file name
    - type is one of root, prefix, suffix
    - meaning may be empty or the pending placeholder until content exists
    """

    id: str
    type: MorphemeType
    meaning: str

    def __post_init__(self) -> None:
        """Validate invariants."""
        validate_morpheme_id(self.id)
        if self.type not in MORPHEME_TYPES:
            raise ValidationError(
                f"Morpheme type must be one of {', '.join(MORPHEME_TYPES)}",
                field="type",
                value=self.type,
            )

    @classmethod
    def create(cls, raw_id: str, type: MorphemeType, meaning: str = "") -> "Morpheme":
        """Create a morpheme from user input, normalizing the id."""
        return cls(id=normalize_morpheme_id(raw_id), type=type, meaning=meaning)

    @classmethod
    def pending(cls, raw_id: str, type: MorphemeType) -> "Morpheme":
        """Create a placeholder morpheme awaiting content generation."""
        return cls.create(raw_id, type, PENDING_MEANING)
