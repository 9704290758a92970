import argparse
import logging
import sys

from wlink.linker import Linker

from ._log_helper import setup_logging
from .config import LinkerConfig
from .exceptions import BaseError, InvalidManifestError

logger = logging.getLogger(__name__)


def link(
    components: str | None,
    wadm: str | None,
    name: str,
    version: str,
    description: str,
    out: str | None,
    config: str | None,
) -> str:
    """
    wlink Link
    """
    linker = Linker(config=LinkerConfig.load(config))
    manifest = linker.link(
        components=components,
        wadm=wadm,
        name=name,
        version=version,
        description=description,
    )
    if linker.report is not None:
        for warning in linker.report.warnings:
            logger.warning(warning)
    if out is not None:
        manifest.dump(out)
        logger.info("Wrote deployment description to %s", out)
    return manifest.to_yaml()


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="wlink",
        description="Link WebAssembly components into a wadm manifest",
    )
    arguments = [
        ("--components", str, None, "Components file"),
        ("--wadm", str, None, "Existing deployment description"),
        ("--name", str, "application", "Application name"),
        ("--version", str, "v0.0.1", "Application version"),
        ("--description", str, "", "Application description"),
        ("--out", str, None, "Output path, stdout when not set"),
        ("--config", str, None, "Linker config file"),
    ]
    for arg in arguments:
        parser.add_argument(arg[0], type=arg[1], default=arg[2], help=arg[3])
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Verbose logging"
    )

    args = parser.parse_args(argv)
    if args.components is None and args.wadm is None:
        parser.error("at least one of --components or --wadm is required")
    setup_logging(verbose=args.verbose)
    try:
        output = link(
            components=args.components,
            wadm=args.wadm,
            name=args.name,
            version=args.version,
            description=args.description,
            out=args.out,
            config=args.config,
        )
    except InvalidManifestError as e:
        for error in e.report.errors:
            print(f"Error: {error}", file=sys.stderr)
        for warning in e.report.warnings:
            print(f"Warning: {warning}", file=sys.stderr)
        return 1
    except BaseError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    if args.out is None:
        sys.stdout.write(output)
    return 0


if __name__ == "__main__":
    sys.exit(main())
