#!/usr/bin/env python3
"""
Matrix Multiplication Demo

This script builds two sample matrices, computes their dot product and prints
the result one row per line.
"""

from __future__ import annotations

import argparse
import logging
import sys
import time
from pathlib import Path
from typing import Dict, List, Optional

import yaml

# Add parent directory to path
sys.path.append(str(Path(__file__).resolve().parent.parent))

from matrices import Matrix, matrix_from_rows, x


# Set up logging
logging.basicConfig(
    level=logging.INFO,
    format="[%(asctime)s] [%(levelname)s] [%(name)s] %(message)s",
    handlers=[
        logging.StreamHandler(),
    ],
)
logger = logging.getLogger("demo")


def load_config(config_path: Optional[str] = None) -> Dict:
    """Load configuration from YAML file.

    Args:
        config_path: Path to configuration file

    Returns:
        Configuration dictionary
    """
    # Default config path
    if config_path is None:
        config_path = Path(__file__).resolve().parent.parent / "config.yaml"

    with open(config_path, "r") as f:
        config = yaml.safe_load(f)

    return config


def format_rows(matrix: Matrix, separator: str = " ") -> List[str]:
    """Render each row of a matrix as a line of text.

    Args:
        matrix: Matrix to render
        separator: String placed between elements of a row

    Returns:
        One string per row
    """
    return [separator.join(str(value) for value in row) for row in matrix.to_rows()]


def run_demo(config: Dict, separator: Optional[str] = None) -> Matrix:
    """Multiply the configured sample matrices and print the product.

    Args:
        config: Configuration dictionary
        separator: Overrides ``output.separator`` from the config

    Returns:
        The product matrix
    """
    a = matrix_from_rows(config["demo"]["a"]["rows"])
    b = matrix_from_rows(config["demo"]["b"]["rows"])
    logger.info(f"Matrix A ({a.cols}x{a.rows}): {a}")
    logger.info(f"Matrix B ({b.cols}x{b.rows}): {b}")

    start_time = time.perf_counter()
    result = x(a, b)
    logger.debug(f"Dot product took {time.perf_counter() - start_time:.6f}s")

    if separator is None:
        separator = config.get("output", {}).get("separator", " ")

    print("Result of matrix multiplication:")
    for line in format_rows(result, separator):
        print(line)

    return result


def main():
    """Main function to parse arguments and run the demo."""
    parser = argparse.ArgumentParser(description="Matrix multiplication demo")
    parser.add_argument(
        "--config", "-c", dest="config_path", default=None,
        help="Path to configuration file"
    )
    parser.add_argument(
        "--separator", "-s", dest="separator", default=None,
        help="Element separator for printed rows"
    )
    parser.add_argument(
        "--verbose", "-v", dest="verbose", action="store_true",
        help="Enable debug logging"
    )

    args = parser.parse_args()

    try:
        config = load_config(args.config_path)
        level = "DEBUG" if args.verbose else config.get("logging", {}).get("level", "INFO")
        logging.getLogger().setLevel(level)
        run_demo(config, args.separator)
    except Exception as e:
        logger.exception(f"Error running demo: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
