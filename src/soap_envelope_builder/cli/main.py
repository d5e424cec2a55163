"""Main CLI entry point for the soap-envelope command-line tool.

Renders SOAP envelopes from JSON definition files and produces ready-made
fault documents for stubbing error responses in mock services.
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from soap_envelope_builder import __version__
from soap_envelope_builder.envelope import (
    EnvelopeBuilder,
    SoapVersion,
    SoapXmlSerializer,
    load_envelope,
    soap_envelope,
)
from soap_envelope_builder.shared.config import ConfigError, SerializerConfig
from soap_envelope_builder.shared.errors import SoapBuilderError
from soap_envelope_builder.shared.logging import get_logger

logger = get_logger(__name__, component="cli")


def create_argument_parser() -> argparse.ArgumentParser:
    """Create the main argument parser."""
    parser = argparse.ArgumentParser(
        prog="soap-envelope",
        description="Build SOAP 1.1 and SOAP 1.2 envelopes and faults"
    )

    parser.add_argument("--version", action="version", version=__version__)

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Render command
    render_parser = subparsers.add_parser(
        "render", help="Render an envelope from a JSON definition file"
    )
    render_parser.add_argument(
        "definition",
        type=Path,
        help="JSON envelope definition"
    )
    _add_output_arguments(render_parser)

    # Fault command
    fault_parser = subparsers.add_parser("fault", help="Render a fault envelope")
    fault_parser.add_argument(
        "--soap-version",
        choices=[version.value for version in SoapVersion],
        default=SoapVersion.V1_2.value,
        help="SOAP version (default: 1.2)"
    )
    fault_parser.add_argument(
        "--prefix",
        default="soapenv",
        help="Envelope prefix (default: soapenv)"
    )
    fault_parser.add_argument("--code", required=True, help="Fault code, e.g. soapenv:Server")
    fault_parser.add_argument("--message", required=True, help="Human-readable fault text")
    fault_parser.add_argument("--actor", help="Fault actor URI (SOAP 1.1)")
    fault_parser.add_argument(
        "--subcode",
        action="append",
        default=[],
        help="Nested subcode, repeatable (SOAP 1.2)"
    )
    fault_parser.add_argument("--lang", help="Reason language tag (SOAP 1.2, default: en)")
    fault_parser.add_argument("--node", help="Fault node URI (SOAP 1.2)")
    fault_parser.add_argument("--role", help="Fault role URI (SOAP 1.2)")
    _add_output_arguments(fault_parser)

    # Global options
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable debug logging"
    )
    parser.add_argument(
        "--quiet", "-q",
        action="store_true",
        help="Only log errors"
    )

    return parser


def _add_output_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--compact",
        action="store_true",
        help="Emit single-line XML"
    )
    parser.add_argument(
        "--indent",
        type=int,
        default=2,
        help="Spaces per indentation level when pretty-printing (default: 2)"
    )
    parser.add_argument(
        "--output", "-o",
        type=Path,
        help="Output file (default: stdout)"
    )


def build_serializer_config(args: argparse.Namespace) -> SerializerConfig:
    """Map output flags onto a serializer configuration."""
    if args.compact:
        return SerializerConfig.compact()
    if args.indent < 0:
        raise ConfigError("--indent must be >= 0")
    return SerializerConfig.pretty(" " * args.indent)


def build_fault_envelope(args: argparse.Namespace) -> EnvelopeBuilder:
    """Build a fault-only envelope from ``fault`` command arguments."""
    version = SoapVersion.parse(args.soap_version)
    envelope = soap_envelope(version=version, envelope_prefix=args.prefix)
    fault = envelope.fault()

    if version is SoapVersion.V1_1:
        fault.fault_code(args.code)
        fault.fault_string(args.message)
        # SOAP 1.2 only flags are rejected by the builder
        if args.subcode or args.lang:
            fault.reason(args.message, args.lang)
    else:
        fault_code = fault.code(args.code)
        for subcode in args.subcode:
            fault_code.subcode(subcode)
        fault.reason(args.message, args.lang)

    if args.actor:
        fault.fault_actor(args.actor)
    if args.node:
        fault.node(args.node)
    if args.role:
        fault.role(args.role)
    return envelope


def write_output(document: str, output: Optional[Path]) -> None:
    """Write the rendered document to ``output`` or stdout."""
    if output:
        output.write_text(document, encoding="utf-8")
        print(f"Envelope written to {output}", file=sys.stderr)
    else:
        sys.stdout.write(document)
        if not document.endswith("\n"):
            sys.stdout.write("\n")


def cmd_render(args: argparse.Namespace) -> int:
    """Handle render command."""
    if not args.definition.exists():
        print(f"File not found: {args.definition}", file=sys.stderr)
        return 1

    envelope = load_envelope(args.definition)
    serializer = SoapXmlSerializer(build_serializer_config(args))
    write_output(serializer.serialize(envelope), args.output)
    return 0


def cmd_fault(args: argparse.Namespace) -> int:
    """Handle fault command."""
    envelope = build_fault_envelope(args)
    serializer = SoapXmlSerializer(build_serializer_config(args))
    write_output(serializer.serialize(envelope), args.output)
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point."""
    parser = create_argument_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    # Set up logging verbosity
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG)
    elif args.quiet:
        logging.basicConfig(level=logging.ERROR)

    # Route to appropriate command handler
    try:
        if args.command == "render":
            return cmd_render(args)
        elif args.command == "fault":
            return cmd_fault(args)
        else:
            print(f"Unknown command: {args.command}", file=sys.stderr)
            return 1

    except (SoapBuilderError, ConfigError) as e:
        logger.debug("Command failed", extra={"command": args.command}, exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except OSError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        print("\nOperation interrupted by user", file=sys.stderr)
        return 130  # Standard exit code for SIGINT


if __name__ == "__main__":
    sys.exit(main())
