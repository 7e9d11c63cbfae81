"""
Base classes and data structures for word alignment.

Design Philosophy:
- Options and costs are immutable dataclasses, passed by value
- An alignment op carries both the words and their source indices, so
  callers never have to search word lists to find display forms
- Op names follow the classic edit-distance vocabulary: match/sub/del/ins
"""

from dataclasses import dataclass, field, fields
from typing import Any, Dict, Iterator, List, Literal, Mapping, Optional, Union
import logging

logger = logging.getLogger(__name__)


OpType = Literal["match", "sub", "del", "ins"]

MATCH = "match"
SUBSTITUTE = "sub"
DELETE = "del"
INSERT = "ins"

OP_TYPES = (MATCH, SUBSTITUTE, DELETE, INSERT)


# =============================================================================
# Configuration
# =============================================================================

@dataclass(frozen=True)
class ComparisonOptions:
    """
    Options for comparing a typed transcription with its reference.

    Attributes:
        ignore_case: Treat case-only differences as correct (default: True)
        ignore_punctuation: Strip punctuation before comparing (default: True)
    """
    ignore_case: bool = True
    ignore_punctuation: bool = True

    # camelCase aliases accepted from callers that speak the browser dialect
    _ALIASES = {
        "ignoreCase": "ignore_case",
        "ignorePunctuation": "ignore_punctuation",
    }

    @classmethod
    def from_mapping(cls, values: Optional[Mapping[str, Any]]) -> "ComparisonOptions":
        """
        Build options from a partial mapping.

        Missing fields take their defaults; unknown keys are ignored.

        Example:
            >>> ComparisonOptions.from_mapping({"ignoreCase": False})
            ComparisonOptions(ignore_case=False, ignore_punctuation=True)
        """
        if not values:
            return cls()

        known = {f.name for f in fields(cls)}
        kwargs = {}
        for key, value in values.items():
            name = cls._ALIASES.get(key, key)
            if name not in known:
                logger.debug(f"Ignoring unknown comparison option: {key}")
                continue
            if value is None:
                continue
            kwargs[name] = bool(value)
        return cls(**kwargs)

    @classmethod
    def coerce(
        cls, options: Union["ComparisonOptions", Mapping[str, Any], None]
    ) -> "ComparisonOptions":
        """Accept ComparisonOptions, a mapping, or None."""
        if options is None:
            return cls()
        if isinstance(options, cls):
            return options
        if isinstance(options, Mapping):
            return cls.from_mapping(options)
        raise TypeError(
            f"options must be ComparisonOptions, a mapping or None, "
            f"got {type(options).__name__}"
        )

    def to_dict(self) -> Dict[str, bool]:
        return {
            "ignore_case": self.ignore_case,
            "ignore_punctuation": self.ignore_punctuation,
        }


@dataclass(frozen=True)
class AlignmentCosts:
    """
    Cost model for word alignment.

    Insertion and deletion are cheaper than substitution, so two very
    dissimilar words are reported as one missing and one extra word rather
    than as a substitution pair whenever that is no more expensive.

    Attributes:
        match: Cost for identical words (default: 0)
        substitution: Cost for replacing a word (default: 3)
        insertion: Cost for an extra user word (default: 2)
        deletion: Cost for a missing reference word (default: 2)
    """
    match: int = 0
    substitution: int = 3
    insertion: int = 2
    deletion: int = 2

    def __post_init__(self):
        for f in fields(self):
            if getattr(self, f.name) < 0:
                raise ValueError(f"Alignment cost '{f.name}' must be non-negative")


DEFAULT_COSTS = AlignmentCosts()


# =============================================================================
# Alignment operations
# =============================================================================

@dataclass(frozen=True)
class AlignmentOp:
    """
    One step of a word alignment.

    Attributes:
        op: "match", "sub", "del" or "ins"
        ref_word: Reference word (None for insertions)
        user_word: User word (None for deletions)
        ref_index: Position of ref_word in the reference word list
        user_index: Position of user_word in the user word list

    Example:
        >>> AlignmentOp.substitute("führen", "führ", 0, 0)
        AlignmentOp(op='sub', ref_word='führen', user_word='führ', ...)
    """
    op: OpType
    ref_word: Optional[str] = None
    user_word: Optional[str] = None
    ref_index: Optional[int] = None
    user_index: Optional[int] = None

    @classmethod
    def match(cls, ref_word: str, user_word: str, ref_index: int = None, user_index: int = None):
        return cls(MATCH, ref_word, user_word, ref_index, user_index)

    @classmethod
    def substitute(cls, ref_word: str, user_word: str, ref_index: int = None, user_index: int = None):
        return cls(SUBSTITUTE, ref_word, user_word, ref_index, user_index)

    @classmethod
    def delete(cls, ref_word: str, ref_index: int = None):
        return cls(DELETE, ref_word, None, ref_index, None)

    @classmethod
    def insert(cls, user_word: str, user_index: int = None):
        return cls(INSERT, None, user_word, None, user_index)

    @property
    def is_match(self) -> bool:
        return self.op == MATCH

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "op": self.op,
            "ref_word": self.ref_word,
            "user_word": self.user_word,
        }


@dataclass
class Alignment:
    """
    Result of aligning a reference word list with a user word list.

    Attributes:
        ops: Alignment operations in reading order
        distance: Total cost of the alignment under the cost model used

    Invariant: the non-None ref_words of ops, in order, are exactly the
    reference words; likewise for user_words.
    """
    ops: List[AlignmentOp] = field(default_factory=list)
    distance: int = 0

    def __len__(self) -> int:
        return len(self.ops)

    def __iter__(self) -> Iterator[AlignmentOp]:
        return iter(self.ops)

    def __getitem__(self, idx) -> AlignmentOp:
        return self.ops[idx]

    @property
    def ref_words(self) -> List[str]:
        """Reference words recovered from the alignment."""
        return [op.ref_word for op in self.ops if op.ref_word is not None]

    @property
    def user_words(self) -> List[str]:
        """User words recovered from the alignment."""
        return [op.user_word for op in self.ops if op.user_word is not None]

    @property
    def op_types(self) -> List[str]:
        return [op.op for op in self.ops]

    def counts(self) -> Dict[str, int]:
        """Number of ops of each type."""
        result = {name: 0 for name in OP_TYPES}
        for op in self.ops:
            result[op.op] += 1
        return result

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "distance": self.distance,
            "ops": [op.to_dict() for op in self.ops],
        }

    def __repr__(self):
        return f"Alignment({len(self.ops)} ops, distance={self.distance})"
