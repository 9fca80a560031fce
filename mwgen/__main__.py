import argparse
import logging
import os
import sys
from typing import List, Optional

from .core.aspects import Aspect
from .core.config import load_config
from .core.constants import NARY_POLICIES
from .core.errors import GeneratorError, InterfaceNotFound, UsageError
from .core.reflector import list_interfaces
from .core.scaffold import build_spec, write_scaffold
from .core.synthesizer import generate, write_unit


def setup_logging(log_level: str = "INFO") -> None:
    """Configure application logging.

    Records go to stderr so ``--stdout`` output stays clean.
    """
    logging.basicConfig(
        level=getattr(logging, log_level.upper()),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[
            logging.StreamHandler(sys.stderr)
        ]
    )


logger = logging.getLogger(__name__)


def _add_log_level(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--log-level",
        type=str,
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level"
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="mwgen",
        description="Generate logging or tracing middleware for a Go interface",
    )
    parser.add_argument(
        "--interface",
        type=str,
        required=True,
        help="Name of the interface to wrap"
    )
    parser.add_argument(
        "--aspect",
        type=str,
        required=True,
        help=f"Aspect to generate ({', '.join(a.value for a in Aspect)})"
    )
    parser.add_argument(
        "--dir",
        type=str,
        default=None,
        help="Go package directory (default: current directory)"
    )
    parser.add_argument(
        "--output",
        type=str,
        default=None,
        help="Output subdirectory, relative to --dir (default: middleware)"
    )
    parser.add_argument(
        "--label",
        type=str,
        default=None,
        help="Service/tracer label (default: the interface name)"
    )
    parser.add_argument(
        "--service-import",
        type=str,
        default=None,
        help="Import path of the service package (default: derived from go.mod)"
    )
    parser.add_argument(
        "--nary",
        type=str,
        default=None,
        choices=list(NARY_POLICIES),
        help="Handling of methods returning more than two values"
    )
    parser.add_argument(
        "--config",
        type=str,
        default=None,
        help="YAML config file (default: <dir>/.mwgen.yaml)"
    )
    parser.add_argument(
        "--stdout",
        action="store_true",
        help="Print the generated unit instead of writing it"
    )
    _add_log_level(parser)
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the middleware generator."""
    args = build_parser().parse_args(argv)
    setup_logging(args.log_level)

    module_dir = args.dir or os.getcwd()
    try:
        if not args.interface.strip():
            raise UsageError("Please provide an interface name")
        aspect = Aspect.parse(args.aspect)

        config = load_config(module_dir, args.config).with_overrides(
            output_dir=args.output,
            label=args.label,
            service_import=args.service_import,
            nary_policy=args.nary,
        )

        unit = generate(module_dir, args.interface, aspect, config)

        if args.stdout:
            sys.stdout.write(unit.source)
        else:
            write_unit(unit, os.path.join(module_dir, config.output_dir))

    except InterfaceNotFound as e:
        logger.error(str(e))
        available = list_interfaces(module_dir)
        if available:
            logger.error(f"Interfaces declared in {module_dir}: {', '.join(available)}")
        return e.exit_code
    except GeneratorError as e:
        logger.error(str(e))
        return e.exit_code

    return 0


def scaffold_main(argv: Optional[List[str]] = None) -> int:
    """Entry point for the CRUD scaffold generator."""
    parser = argparse.ArgumentParser(
        prog="mwgen-scaffold",
        description="Generate a CRUD service/repository skeleton for a Go model",
    )
    parser.add_argument(
        "--model",
        type=str,
        required=True,
        help="Exported name of the model type, e.g. Order"
    )
    parser.add_argument(
        "--package",
        type=str,
        default=None,
        help="Go package name (default: lower-cased model name)"
    )
    parser.add_argument(
        "--dir",
        type=str,
        default=None,
        help="Directory the package directory is created in (default: current directory)"
    )
    parser.add_argument(
        "--force",
        action="store_true",
        help="Overwrite existing files"
    )
    _add_log_level(parser)
    args = parser.parse_args(argv)
    setup_logging(args.log_level)

    try:
        spec = build_spec(args.model, args.package)
        write_scaffold(spec, args.dir or os.getcwd(), force=args.force)
    except GeneratorError as e:
        logger.error(str(e))
        return e.exit_code

    return 0


if __name__ == "__main__":
    sys.exit(main())
