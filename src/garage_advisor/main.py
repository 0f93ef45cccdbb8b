# File: src/garage_advisor/main.py
"""
Command line entry point for the Garage Advisor

Builds a ticket request (the sample request by default), runs one or both
evaluators and prints the recommendations as text, JSON or YAML.
"""

import argparse
import logging
import os
import sys
from datetime import datetime
from typing import List, Optional

import yaml
from pydantic import ValidationError

from .application.dtos import BaseDTO, EvaluationComparison, TicketRequest, TicketResponse
from .application.ticket_service import TicketService
from .config import AppConfig, OutputFormat
from .domain.exceptions import GarageAdvisorError
from .domain.models import catalog


def setup_logging(level: str = AppConfig.DEFAULT_LOG_LEVEL, log_file: Optional[str] = None):
    """Setup application logging configuration"""
    handlers: List[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    if log_file:
        log_dir = os.path.dirname(log_file)
        if log_dir and not os.path.exists(log_dir):
            os.makedirs(log_dir)
        handlers.append(logging.FileHandler(log_file))

    logging.basicConfig(
        level=getattr(logging, level.upper()),
        format=AppConfig.LOG_FORMAT,
        handlers=handlers,
        force=True
    )
    return logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="garage-advisor",
        description="Recommend a garage placement and price estimate for an entering car"
    )
    parser.add_argument('--model', default=AppConfig.SAMPLE_MODEL, help='Car model name (lowercase)')
    parser.add_argument('--year', type=int, default=AppConfig.SAMPLE_MAKE_YEAR, help='Make year')
    parser.add_argument(
        '--entry-time',
        type=datetime.fromisoformat,
        default=AppConfig.SAMPLE_ENTRY_TIME,
        help='Entry time in ISO 8601 format, e.g. 2013-01-18T01:30'
    )
    parser.add_argument(
        '--evaluator',
        choices=['tree', 'table', 'both'],
        default='both',
        help='Evaluator to run; "both" compares the two'
    )
    parser.add_argument(
        '--format',
        choices=[f.value for f in OutputFormat],
        default=AppConfig.DEFAULT_OUTPUT_FORMAT.value,
        help='Output format'
    )
    parser.add_argument(
        '--log-level',
        type=str.upper,
        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'],
        default=AppConfig.DEFAULT_LOG_LEVEL,
        help='Logging level'
    )
    parser.add_argument(
        '--log-file',
        default=None,
        help=f'Also write logs to this file, e.g. {os.path.join(AppConfig.LOG_DIR, AppConfig.LOG_FILE)}'
    )
    parser.add_argument('--list-models', action='store_true', help='List known car models and exit')
    return parser


# ============================================================================
# RENDERING
# ============================================================================

def format_response(label: str, response: TicketResponse) -> str:
    first, second = response.recommendations
    return f"  {label}: 1) {first}  2) {second}"


def render_text(result: BaseDTO) -> str:
    if isinstance(result, EvaluationComparison):
        lines = [
            f"{result.request.entry_timestamp.isoformat()}  {result.decision_tree.car}",
            format_response("decision tree", result.decision_tree),
            format_response("rule table   ", result.rule_table),
        ]
        if result.agree:
            lines.append("  evaluators agree")
        else:
            lines.append(f"  evaluators diverge on: {', '.join(result.differences)}")
        return "\n".join(lines)

    return "\n".join([
        f"{result.entry_timestamp.isoformat()}  {result.car}",
        format_response("recommendations", result),
    ])


def render(result: BaseDTO, output_format: str) -> str:
    """Render a DTO in the requested output format"""
    output_format = OutputFormat(output_format)
    if output_format == OutputFormat.JSON:
        return result.to_json(indent=AppConfig.JSON_INDENT)
    elif output_format == OutputFormat.YAML:
        return yaml.safe_dump(result.to_dict(mode="json"), sort_keys=False).rstrip()
    return render_text(result)


def render_catalog() -> str:
    lines = []
    for car_type, models in catalog().items():
        lines.append(f"{car_type.name} ({car_type.car_class.name}): {', '.join(models)}")
    return "\n".join(lines)


# ============================================================================
# MAIN
# ============================================================================

def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logger = setup_logging(args.log_level, args.log_file)

    if args.list_models:
        print(render_catalog())
        return 0

    try:
        request = TicketRequest(
            entry_timestamp=args.entry_time,
            model_name=args.model,
            make_year=args.year
        )
    except ValidationError as e:
        print(f"Invalid request: {e}", file=sys.stderr)
        return 2

    service = TicketService()
    try:
        if args.evaluator == 'both':
            result = service.compare(request)
        else:
            result = service.evaluate(request, args.evaluator)
    except GarageAdvisorError as e:
        logger.debug(f"Evaluation failed for {request.model_name!r}", exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(render(result, args.format))
    return 0


if __name__ == "__main__":
    sys.exit(main())
