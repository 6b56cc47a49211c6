# run.py
"""
Fetch the WAI-ARIA 1.1 spec, extract roles / value types / attributes,
validate them and write data.json.
"""

import argparse
import json
import os
from typing import Any, Dict, List, Optional

import requests
from jsonschema import ValidationError

from aria_ingestor import AriaSpecIngestor, ExtractionError
from config import AppConfig
from document import SpecDocument, load_document, load_document_file
from schema import check_references, validate_data
from utils import ConsoleLogger

TOTAL_STEPS = 4


def extract_data(document: SpecDocument, cfg: AppConfig, logger: ConsoleLogger) -> Dict[str, Any]:
    """Parse ``document`` into the serialized structure; nothing is validated here."""
    ingestor = AriaSpecIngestor(cfg.ingest, logger=logger)
    return ingestor.parse(document).to_dict()


def validate(data: Dict[str, Any]) -> Dict[str, Any]:
    validate_data(data)
    check_references(data)
    return data


def write_data(data: Dict[str, Any], path: str, indent: int = 2) -> str:
    """Overwrite ``path`` with pretty-printed ``data``."""
    out_dir = os.path.dirname(os.path.abspath(path))
    os.makedirs(out_dir, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        json.dump(data, f, indent=indent, ensure_ascii=False)
        f.write("\n")
    return path


def run_pipeline(cfg: AppConfig, logger: ConsoleLogger, html_path: Optional[str] = None) -> Dict[str, Any]:
    """Load -> extract -> validate -> write. Any failure leaves the output file untouched."""
    url = cfg.loader.spec_url
    logger.step(1, TOTAL_STEPS, f"Loading WAI ARIA 1.1 spec from {html_path or url}...")
    if html_path:
        document = load_document_file(html_path, url)
    else:
        document = load_document(url, timeout=cfg.loader.timeout)

    logger.step(2, TOTAL_STEPS, "Parsing data from spec...")
    data = extract_data(document, cfg, logger)

    logger.step(3, TOTAL_STEPS, "Validating data...")
    validate(data)

    logger.step(4, TOTAL_STEPS, f"Updating {os.path.basename(cfg.output.output_path)}...")
    write_data(data, cfg.output.output_path, indent=cfg.output.indent)
    return data


def build_config(args: argparse.Namespace) -> AppConfig:
    cfg = AppConfig()
    if args.url:
        cfg.loader.spec_url = args.url
    if args.timeout is not None:
        cfg.loader.timeout = args.timeout if args.timeout > 0 else None
    if args.output:
        cfg.output.output_path = args.output
    if args.debug:
        cfg.debug = True
    return cfg


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    ap = argparse.ArgumentParser(description="Extract WAI-ARIA roles, value types and attributes to JSON")
    ap.add_argument("--url", help="Spec address (also used to resolve refs with --html)")
    ap.add_argument("--html", help="Read a saved copy of the spec page instead of fetching it")
    ap.add_argument("--output", help="Where to write the JSON document")
    ap.add_argument("--timeout", type=float, help="Page load timeout in seconds (0 waits forever)")
    ap.add_argument("--debug", action="store_true", help="Show warnings and info (same as DEBUG=true)")
    return ap.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> None:
    args = parse_args(argv)
    cfg = build_config(args)
    logger = ConsoleLogger(debug=cfg.debug)
    if cfg.debug:
        print("Running in debug mode...")

    try:
        run_pipeline(cfg, logger, html_path=args.html)
    except ExtractionError as e:
        logger.error(f"[ExtractionError] {e}")
        raise SystemExit(1)
    except ValidationError as e:
        logger.error(f"[SchemaError] invalid data: {e.message}")
        raise SystemExit(1)
    except requests.RequestException as e:
        logger.error(f"[LoadError] {e}")
        raise SystemExit(1)
    except OSError as e:
        logger.error(f"[IOError] {e}")
        raise SystemExit(1)

    print("Success!")


if __name__ == "__main__":
    main()
