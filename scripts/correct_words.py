#!/usr/bin/env python3
import argparse
import logging
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from speller.common.config import Settings
from speller.spellcheck.errors import ModelFormatError
from speller.spellcheck.loader import load_models


def main() -> None:
    parser = argparse.ArgumentParser(
        description="Load the spelling models and print a correction for each word."
    )
    parser.add_argument("words", nargs="+", help="Lower-case words to correct")
    parser.add_argument("--model", default=None, help="General model file or bundled model name")
    parser.add_argument("--industry-model", default=None, help="Industry model consulted before the general one")
    args = parser.parse_args()

    logging.basicConfig(level=logging.INFO)

    defaults = Settings()
    settings = Settings(
        model_name=args.model or defaults.model_name,
        industry_model_name=args.industry_model or defaults.industry_model_name,
        resource_dir=defaults.resource_dir,
    )
    try:
        models = load_models(settings)
    except ModelFormatError as exc:
        parser.exit(1, f"error: {exc}\n")

    for word, corrected in zip(args.words, models.correct(args.words)):
        print(f"'{word}' - '{corrected}'")


if __name__ == "__main__":
    main()
