from __future__ import annotations

import logging
from pathlib import Path

from cover_composer.cli import LOG_FORMAT, generate
from cover_composer.composer import OUTPUT_NAME


def main(out_path: Path):
    generate(out_path)


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format=LOG_FORMAT)
    main(Path(__file__).resolve().parent / OUTPUT_NAME)
