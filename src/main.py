"""Application entry point."""

import argparse
import sys
import tomllib
from pathlib import Path

import structlog
from pydantic import ValidationError

from src.cli.container import Container
from src.domain.ports.config import AppConfig
from src.infrastructure.config import load_config
from src.shared.logging import setup_logging

log = structlog.get_logger()


def build_parser() -> argparse.ArgumentParser:
    """Command-line options. Each one overrides the matching config value."""
    parser = argparse.ArgumentParser(
        prog="jwizard",
        description="Collect key/value pairs interactively and copy a signed JWT to the clipboard.",
    )
    parser.add_argument(
        "secret",
        nargs="?",
        help="Signing secret (default: random secret for this run)",
    )
    parser.add_argument(
        "-r",
        "--require",
        action="append",
        metavar="FIELD",
        help="Field that must be entered before a token is generated (repeatable)",
    )
    parser.add_argument(
        "--algorithm",
        choices=["HS256", "HS384", "HS512"],
        help="JWT signing algorithm",
    )
    parser.add_argument(
        "--config-dir",
        type=Path,
        help="Directory with default.toml / development.toml",
    )
    parser.add_argument("--log-level", help="Log level (DEBUG, INFO, WARNING, ...)")
    return parser


def _apply_cli_overrides(config: AppConfig, args: argparse.Namespace) -> AppConfig:
    """Apply command-line overrides on top of file and env config."""
    signing = config.signing.model_dump()
    wizard = config.wizard.model_dump()
    if args.secret:
        signing["secret"] = args.secret
    if args.algorithm:
        signing["algorithm"] = args.algorithm
    if args.require:
        wizard["required_fields"] = args.require
    update = {"signing": signing, "wizard": wizard}
    if args.log_level:
        update["log_level"] = args.log_level.upper()
    return AppConfig.model_validate({**config.model_dump(), **update})


def _summarize_errors(error: ValidationError) -> str:
    """One-line summary of pydantic errors: "loc: msg; loc: msg"."""
    return "; ".join(
        f"{'.'.join(str(part) for part in err['loc']) or 'config'}: {err['msg']}"
        for err in error.errors()
    )


def main(argv: list[str] | None = None, container: Container | None = None) -> int:
    """Run the wizard. Returns process exit code."""
    args = build_parser().parse_args(argv)

    if container is None:
        try:
            config = _apply_cli_overrides(load_config(args.config_dir), args)
        except ValidationError as e:
            sys.stderr.write(f"Invalid configuration: {_summarize_errors(e)}\n")
            return 2
        except tomllib.TOMLDecodeError as e:
            sys.stderr.write(f"Invalid configuration file: {e}\n")
            return 2
        container = Container(config)

    c = container.config
    setup_logging(c.log_level)
    log.debug(
        "startup",
        algorithm=c.signing.algorithm,
        required=c.wizard.required_fields,
        random_secret=not c.signing.secret,
    )

    try:
        return container.runner.run(container.create_session())
    except KeyboardInterrupt:
        print()
        log.info("wizard_interrupted")
        return 130


if __name__ == "__main__":
    sys.exit(main())
