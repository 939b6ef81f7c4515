from .codec import decode, encode
from .dictionary import Dictionary
from .engine import (
    ALPHABET,
    MAX_WORD_LENGTH,
    WORD_RE,
    CorrectionResult,
    SpellCorrectorEngine,
    apply_case,
    correct,
    iter_words,
    normalize_word,
    variants,
)
from .errors import ModelFormatError, ModelNotFoundError
from .loader import load_dictionary, load_models, resolve_model_source, write_model
from .policy import ModelSet

__all__ = [
    "ALPHABET",
    "MAX_WORD_LENGTH",
    "WORD_RE",
    "CorrectionResult",
    "Dictionary",
    "ModelFormatError",
    "ModelNotFoundError",
    "ModelSet",
    "SpellCorrectorEngine",
    "apply_case",
    "correct",
    "decode",
    "encode",
    "iter_words",
    "load_dictionary",
    "load_models",
    "normalize_word",
    "resolve_model_source",
    "variants",
    "write_model",
]
