"""Command line entry point: ``propatlas "P => P."`` or ``propatlas --file formulas.txt``."""

import argparse
import json
import logging
import sys
from typing import List, Optional

import yaml
from dotenv import load_dotenv
from tqdm import tqdm

from propatlas import prove
from propatlas.core.exceptions import ProverError
from propatlas.core.serialization import CoreJSONEncoder
from propatlas.loops import list_loops
from propatlas.normalform import list_expansion_tables
from propatlas.proofs import DISPLAY_ORDERS
from propatlas.utils.config import get_config

logger = logging.getLogger(__name__)

EXIT_THEOREM = 0
EXIT_NOT_THEOREM = 1
EXIT_ERROR = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="propatlas", description="Propositional theorem prover")
    parser.add_argument("formula", nargs="?", help="formula terminated by '.', e.g. 'P => P.'")
    parser.add_argument("--file", type=str, help="prove one formula per line of this file")
    parser.add_argument("--json", action="store_true", help="print reports as JSON")
    parser.add_argument("--strategy", type=str, choices=list_loops())
    parser.add_argument("--table", type=str, choices=list_expansion_tables())
    parser.add_argument("--order", type=str, choices=DISPLAY_ORDERS)
    parser.add_argument("--max_steps", type=int)
    parser.add_argument("--summary", action="store_true", help="print a short summary per formula")
    parser.add_argument("--config", type=str, help="YAML configuration file")
    return parser


def read_formulas(path: str) -> List[str]:
    with open(path, 'r') as f:
        lines = [line.strip() for line in f]
    return [line for line in lines if line and not line.startswith("#")]


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.formula is None and args.file is None:
        parser.error("a formula or --file is required")

    load_dotenv()
    try:
        config = get_config(args.config)
        level = config.log_level()
    except (OSError, ValueError, yaml.YAMLError) as e:
        print(f"propatlas: {e}", file=sys.stderr)
        return EXIT_ERROR
    logging.basicConfig(level=level)

    if args.file is not None:
        try:
            formulas = read_formulas(args.file)
        except OSError as e:
            print(f"propatlas: {e}", file=sys.stderr)
            return EXIT_ERROR
    else:
        formulas = [args.formula]

    reports = []
    errors = 0
    for text in (pbar := tqdm(formulas, desc="Proving", disable=args.file is None)):
        try:
            reports.append(prove(text, args.strategy, args.table, args.max_steps, args.order))
        except ProverError as e:
            errors += 1
            logger.debug("Failed on %r", text, exc_info=True)
            print(f"propatlas: {text}: {e}", file=sys.stderr)
        pbar.set_postfix({'Proven': sum(r.is_theorem for r in reports), 'Errors': errors})

    if args.json:
        payload = [report.to_dict() for report in reports]
        if args.file is None and payload:
            payload = payload[0]
        print(json.dumps(payload, cls=CoreJSONEncoder, indent=2))
    else:
        for report in reports:
            print(report.summary() if args.summary else report.render())

    if errors:
        return EXIT_ERROR
    if all(report.is_theorem for report in reports):
        return EXIT_THEOREM
    return EXIT_NOT_THEOREM


if __name__ == '__main__':
    sys.exit(main())
