#!/usr/bin/env python3
"""
Main pipeline module for miRNA Primer Pipeline.

This module provides the command line entry point and runs one submission
through the document builder and the report writer.
"""

import logging
import sys
from pathlib import Path
from typing import Optional
import argparse

from loguru import logger as loguru_logger

from .config import PipelineConfig
from .core.builder import build_document
from .exceptions import InputError, PipelineError
from .models import Document
from .report import format_output


def setup_logging(log_level: str = "INFO") -> None:
    """Setup logging configuration."""
    # stderr keeps stdout free for the report
    logging.basicConfig(
        level=getattr(logging, log_level.upper()),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[
            logging.StreamHandler(sys.stderr),
        ]
    )
    loguru_logger.remove()
    loguru_logger.add(sys.stderr, level=log_level.upper())


def read_input(input_file: Optional[Path]) -> str:
    """Read raw text from a file, or from stdin when no file is given."""
    if input_file is None or str(input_file) == "-":
        return sys.stdin.read()

    input_file = Path(input_file)
    if not input_file.exists():
        raise InputError(f"Input file not found: {input_file}")

    try:
        with open(input_file, 'r', encoding='utf-8') as f:
            return f.read()
    except (IOError, UnicodeDecodeError) as e:
        raise InputError(f"Failed to read input file: {e}")


def run_pipeline(
    config: PipelineConfig,
    input_file: Optional[Path] = None,
    output_file: Optional[Path] = None,
    output_format: str = "text",
) -> Document:
    """
    Run one submission through the pipeline.

    Args:
        config: Pipeline configuration
        input_file: FASTA-style text file, None or "-" for stdin
        output_file: Report destination, None for stdout
        output_format: ``text`` or ``json``

    Returns:
        The built document
    """
    logger = logging.getLogger(__name__)

    logger.info("Starting miRNA Primer Pipeline")
    logger.info(f"Input: {input_file or 'stdin'}")
    logger.info(f"Primer prefix: {config.prefix}")
    logger.info(f"Primer suffix: {config.suffix}")

    raw_input = read_input(input_file)
    document = build_document(raw_input, config)

    format_output(
        document,
        output_file,
        output_format=output_format,
        primer_a_name=config.primer_a_name,
        primer_b_name=config.primer_b_name,
    )

    stats = document.get_statistics()
    logger.info(
        f"Processed {stats['total_lines']} lines: "
        f"{stats['transformed']} primer pairs designed, {stats['rejected']} sequences rejected"
    )
    return document


def main(argv=None) -> None:
    """Main entry point for command line interface."""
    parser = argparse.ArgumentParser(
        description="miRNA Primer Pipeline - Design stem-loop RT-qPCR primers from FASTA-style miRNA text"
    )

    parser.add_argument(
        "input_file",
        type=Path,
        nargs="?",
        default=None,
        help="Input FASTA-style text file (default: stdin, also '-')"
    )

    parser.add_argument(
        "-o", "--output",
        type=Path,
        default=None,
        help="Output report file (default: stdout)"
    )

    parser.add_argument(
        "-c", "--config",
        type=Path,
        default=None,
        help="YAML configuration file"
    )

    parser.add_argument(
        "--prefix",
        default=None,
        help="Forward primer 5' tail (default: GCGGCG)"
    )

    parser.add_argument(
        "--suffix",
        default=None,
        help="Stem-loop RT primer sequence"
    )

    parser.add_argument(
        "--min-length",
        type=int,
        default=None,
        help="Minimum miRNA length (default: 18)"
    )

    parser.add_argument(
        "--max-length",
        type=int,
        default=None,
        help="Maximum miRNA length (default: 25)"
    )

    parser.add_argument(
        "--rt-overlap",
        type=int,
        default=None,
        help="miRNA 3' bases covered by the RT primer (default: 6)"
    )

    parser.add_argument(
        "--format",
        choices=["text", "json"],
        default="text",
        help="Report format (default: text)"
    )

    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default=None,
        help="Logging level (default: INFO)"
    )

    args = parser.parse_args(argv)

    try:
        base = PipelineConfig.from_yaml(args.config) if args.config else None
        config = PipelineConfig.from_args(vars(args), base=base)
    except PipelineError as e:
        setup_logging("ERROR")
        logging.error(f"Invalid configuration: {e}")
        sys.exit(1)

    # Setup logging
    setup_logging(config.log_level)

    try:
        run_pipeline(config, args.input_file, args.output, args.format)
    except PipelineError as e:
        logging.error(f"Pipeline failed: {e}")
        sys.exit(1)
    except KeyboardInterrupt:
        logging.info("Pipeline interrupted by user")
        sys.exit(1)


if __name__ == "__main__":
    main()
