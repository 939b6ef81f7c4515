from __future__ import annotations

import gzip
import logging
import zlib
from pathlib import Path
from typing import Mapping

from speller.common.config import Settings
from speller.spellcheck.codec import decode, encode
from speller.spellcheck.dictionary import Dictionary
from speller.spellcheck.errors import ModelFormatError, ModelNotFoundError
from speller.spellcheck.policy import ModelSet

logger = logging.getLogger(__name__)

MODEL_SUFFIX = ".gz"


def resolve_model_source(name: str, resource_dir: Path) -> Path:
    path = Path(name)
    if path.is_file():
        return path
    bundled = Path(resource_dir) / f"{name}{MODEL_SUFFIX}"
    if bundled.is_file():
        return bundled
    raise ModelNotFoundError(f"spelling model {name!r} not found as a file or in {resource_dir}")


def load_dictionary(path: Path) -> Dictionary:
    try:
        with open(path, "rb") as raw, gzip.GzipFile(fileobj=raw, mode="rb") as stream:
            dictionary = decode(stream)
    except FileNotFoundError as exc:
        raise ModelNotFoundError(f"spelling model file {path} does not exist") from exc
    except (gzip.BadGzipFile, zlib.error, EOFError) as exc:
        raise ModelFormatError(f"spelling model {path} is not a valid gzip stream: {exc}") from exc
    except OSError as exc:
        raise ModelFormatError(f"spelling model {path} could not be read: {exc}") from exc

    logger.debug("spelling model loaded from %s: %s entries", path, len(dictionary))
    return dictionary


def write_model(dictionary: Mapping[str, int], path: Path) -> Path:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with gzip.open(path, "wb") as sink:
        encode(dictionary, sink)
    return path


def load_models(settings: Settings) -> ModelSet:
    dictionaries: list[Dictionary] = []
    if settings.industry_model_name:
        source = resolve_model_source(settings.industry_model_name, settings.resource_dir)
        dictionaries.append(load_dictionary(source))

    source = resolve_model_source(settings.model_name, settings.resource_dir)
    dictionaries.append(load_dictionary(source))

    logger.info(
        "loaded %s spelling model(s): %s",
        len(dictionaries),
        ", ".join(name for name in (settings.industry_model_name, settings.model_name) if name),
    )
    return ModelSet(dictionaries)
