"""KeySmith: configurable password string generator."""

from .errors import InvalidRequest, KeySmithError, NoClassSelected, ValidationError
from .generator import (
    CharacterClass,
    EmptyPoolPolicy,
    GenerationRequest,
    SamplingMode,
    build_pool,
    generate,
    generate_password,
    sample_character,
)

__version__ = "0.1.0"
