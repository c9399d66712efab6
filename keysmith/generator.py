"""
keysmith.generator
Password string generator: builds a character pool from the enabled classes
and samples `length` characters from it.

This is a UI utility, not a credential factory: the default random source is
the general-purpose `random` module. Pass `secure=True` (or your own
`random.SystemRandom`) when the output is going to be used as a real password.
"""

import enum
import logging
import math
import random
from dataclasses import dataclass, field
from typing import FrozenSet, Iterable, Optional

from .errors import InvalidRequest, NoClassSelected

log = logging.getLogger(__name__)


class CharacterClass(enum.Enum):
    LOWERCASE = "abcdefghijklmnopqrstuvwxyz"
    UPPERCASE = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
    DIGIT = "1234567890"
    SYMBOL = "@#$&.!"

    @property
    def alphabet(self) -> str:
        return self.value


# pool order never depends on the order the classes were enabled in
CANONICAL_ORDER = (
    CharacterClass.LOWERCASE,
    CharacterClass.UPPERCASE,
    CharacterClass.DIGIT,
    CharacterClass.SYMBOL,
)


class SamplingMode(str, enum.Enum):
    UNIFORM = "uniform"
    LEGACY = "legacy"


class EmptyPoolPolicy(str, enum.Enum):
    EMPTY = "empty"
    RAISE = "raise"


@dataclass(frozen=True)
class GenerationRequest:
    length: int
    enabled_classes: FrozenSet[CharacterClass] = field(default_factory=frozenset)

    def __post_init__(self):
        # accept any iterable of classes but store an immutable set
        object.__setattr__(self, "enabled_classes", frozenset(self.enabled_classes))

    @classmethod
    def from_flags(
        cls,
        length: int,
        has_lower_case: bool = False,
        has_upper_case: bool = False,
        has_digit: bool = False,
        has_symbol: bool = False,
    ) -> "GenerationRequest":
        flags = {
            CharacterClass.LOWERCASE: has_lower_case,
            CharacterClass.UPPERCASE: has_upper_case,
            CharacterClass.DIGIT: has_digit,
            CharacterClass.SYMBOL: has_symbol,
        }
        return cls(length=length, enabled_classes=frozenset(c for c, on in flags.items() if on))


_default_rng = random.Random()
_system_rng = random.SystemRandom()


def build_pool(enabled_classes: Iterable[CharacterClass]) -> str:
    """Concatenate the alphabets of the enabled classes in canonical order."""
    enabled = set(enabled_classes)
    return "".join(c.alphabet for c in CANONICAL_ORDER if c in enabled)


def _js_round(x: float) -> int:
    # Math.round rounds halves up; Python's round() rounds them to even
    return int(math.floor(x + 0.5))


def sample_character(
    pool: str,
    rng: Optional[random.Random] = None,
    mode: SamplingMode = SamplingMode.UNIFORM,
) -> str:
    """
    Pick one character from a non-empty pool.

    UNIFORM draws floor(random() * len(pool)), always a valid index.
    LEGACY draws round(random() * len(pool)) the way the original form did;
    that can land one past the end, in which case the round contributes "".
    """
    if not pool:
        raise InvalidRequest("cannot sample from an empty pool")
    rng = rng or _default_rng
    if SamplingMode(mode) is SamplingMode.LEGACY:
        index = _js_round(rng.random() * len(pool))
        if index >= len(pool):
            return ""
        return pool[index]
    index = int(rng.random() * len(pool))
    return pool[index]


def generate(
    request: GenerationRequest,
    *,
    rng: Optional[random.Random] = None,
    sampling: SamplingMode = SamplingMode.UNIFORM,
    empty_pool: EmptyPoolPolicy = EmptyPoolPolicy.EMPTY,
    secure: bool = False,
) -> str:
    """
    Generate a password for `request`.

    With no class enabled the result is "" for any length, unless
    `empty_pool` is RAISE, in which case NoClassSelected is raised.
    """
    if request.length < 0:
        raise InvalidRequest("length must be >= 0")
    if rng is None:
        rng = _system_rng if secure else _default_rng

    pool = build_pool(request.enabled_classes)
    if not pool:
        if EmptyPoolPolicy(empty_pool) is EmptyPoolPolicy.RAISE:
            raise NoClassSelected()
        log.debug("no character class enabled, returning empty password")
        return ""

    log.debug("sampling %d chars from a pool of %d (%s)", request.length, len(pool), SamplingMode(sampling).value)
    return "".join(sample_character(pool, rng, sampling) for _ in range(request.length))


def generate_password(
    length: int,
    has_lower_case: bool = False,
    has_upper_case: bool = False,
    has_digit: bool = False,
    has_symbol: bool = False,
    **options,
) -> str:
    """Flag-shaped entry point used by the form front-ends."""
    request = GenerationRequest.from_flags(length, has_lower_case, has_upper_case, has_digit, has_symbol)
    return generate(request, **options)
