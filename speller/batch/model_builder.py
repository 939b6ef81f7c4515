from __future__ import annotations

import argparse
import logging
import re
from collections import Counter
from pathlib import Path
from typing import Iterable, Sequence

from speller.common.config import DEFAULT_MODEL_NAME
from speller.spellcheck.dictionary import Dictionary
from speller.spellcheck.loader import MODEL_SUFFIX, write_model

logger = logging.getLogger(__name__)

TOKEN_RE = re.compile(r"[a-z]+")
DICT_WORD_RE = re.compile(r"^[a-z]+$")
ENCODING = "utf-8"


def _read_lines(path: Path) -> Iterable[str]:
    with path.open("r", encoding=ENCODING, errors="ignore") as fp:
        for line in fp:
            yield line


def count_corpus_words(lines: Iterable[str], counts: Counter[str]) -> Counter[str]:
    for line in lines:
        counts.update(TOKEN_RE.findall(line.lower()))
    return counts


def add_corpus_words(counts: Counter[str], lines: Iterable[str]) -> Counter[str]:
    """Increment words already in `counts`; tokens outside it are ignored."""
    for line in lines:
        for token in TOKEN_RE.findall(line.lower()):
            if token in counts:
                counts[token] += 1
    return counts


def load_dictionary_words(counts: Counter[str], lines: Iterable[str]) -> Counter[str]:
    for line in lines:
        word = line.rstrip("\r\n").lower()
        if DICT_WORD_RE.match(word):
            counts[word] += 1
        else:
            logger.debug("ignoring dict token %r", word)
    return counts


def export_model(counts: Counter[str], output_dir: Path, model_name: str = DEFAULT_MODEL_NAME) -> Path:
    output_dir = Path(output_dir)
    ordered = Dictionary(sorted(counts.items()))
    model_path = write_model(ordered, output_dir / f"{model_name}{MODEL_SUFFIX}")

    listing_path = output_dir / f"{model_name}.txt"
    with listing_path.open("w", encoding=ENCODING) as fp:
        for word, count in ordered.items():
            fp.write(f"{word}\t{count}\n")

    logger.info("spelling model has %s words; written to %s", len(ordered), model_path)
    return model_path


def _corpus_files(source: Path) -> list[Path]:
    if source.is_dir():
        return sorted(p for p in source.glob("*.txt") if p.is_file())
    return [source]


def build_from_corpus(source: Path) -> Counter[str]:
    source = Path(source)
    files = _corpus_files(source)
    logger.info("building spelling model from %s file(s) in %s", len(files), source)
    counts: Counter[str] = Counter()
    for path in files:
        count_corpus_words(_read_lines(path), counts)
    return counts


def build_from_dictionary(dictionary_file: Path, corpus_file: Path) -> Counter[str]:
    logger.info("building spelling model from dictionary %s and corpus %s", dictionary_file, corpus_file)
    counts: Counter[str] = Counter()
    load_dictionary_words(counts, _read_lines(Path(dictionary_file)))
    add_corpus_words(counts, _read_lines(Path(corpus_file)))
    return counts


def run(sources: Sequence[Path], output_dir: Path | None = None, model_name: str = DEFAULT_MODEL_NAME) -> Path:
    if len(sources) == 1:
        counts = build_from_corpus(sources[0])
    elif len(sources) == 2:
        counts = build_from_dictionary(sources[0], sources[1])
    else:
        raise ValueError("expected a corpus source, or a dictionary file and a corpus file")

    target = Path(output_dir) if output_dir is not None else Path(sources[-1]).resolve().parent
    return export_model(counts, target, model_name)


def main(argv: Sequence[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        description="Build a spelling model from a text corpus, or from a word list plus a corpus."
    )
    parser.add_argument(
        "sources",
        nargs="+",
        type=Path,
        help="A corpus file or directory of .txt files; or a one-word-per-line dictionary followed by a corpus file",
    )
    parser.add_argument("--output-dir", type=Path, default=None, help="Where to write the model (default: next to the source)")
    parser.add_argument("--model-name", default=DEFAULT_MODEL_NAME, help="Base name of the model files")
    args = parser.parse_args(argv)

    if len(args.sources) > 2:
        parser.error("at most two sources are accepted")

    logging.basicConfig(level=logging.INFO)
    run(args.sources, output_dir=args.output_dir, model_name=args.model_name)


if __name__ == "__main__":
    main()
