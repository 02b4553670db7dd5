import argparse
import logging
import sys
from pathlib import Path

from utils import setup_logging
from catalog.errors import CatalogError
from catalog.ingest import convert
from htmlgen.generate import generate_site
from settings import BuildConfig

DEFAULT_CONFIG_FILE = "catalog.conf"


def load_config(args):
    """Config file when present, environment otherwise; CLI flags override both."""
    if Path(args.config).exists():
        config = BuildConfig.from_config_file(args.config, root=args.root)
    else:
        config = BuildConfig.from_env(root=args.root)

    root = config.root
    if getattr(args, "input", None):
        config.xlsx_path = root / args.input
    if getattr(args, "output", None):
        config.data_path = root / args.output
    if getattr(args, "data", None):
        config.data_path = root / args.data
    if getattr(args, "template", None):
        config.template_path = root / args.template
    if getattr(args, "out", None):
        config.output_dir = root / args.out
    if getattr(args, "strict_placeholders", False):
        config.placeholder_policy = "strict"
    if getattr(args, "skip_invalid_ids", False):
        config.invalid_id_policy = "skip"
    return config


def run_convert(config):
    return convert(config.xlsx_path, config.data_path, config.ingest_site)


def run_generate(config):
    return generate_site(config)


def run_build(config):
    run_convert(config)
    return run_generate(config)


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Product catalog static site builder")
    parser.add_argument(
        "--config",
        type=str,
        default=DEFAULT_CONFIG_FILE,
        help=f"Path to configuration file (default: {DEFAULT_CONFIG_FILE})",
    )
    parser.add_argument("--root", type=str, default=None, help="Project root for relative paths")
    parser.add_argument("--log-file", type=str, default=None, help="Also write logs to this file")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")

    sub = parser.add_subparsers(dest="command", required=True)

    p_convert = sub.add_parser("convert", help="Convert products.xlsx to products.json")
    p_convert.add_argument("--input", type=str, help="Spreadsheet path (.xlsx or .csv)")
    p_convert.add_argument("--output", type=str, help="JSON document path")
    p_convert.set_defaults(func=run_convert)

    for name, func, help_text in (
        ("generate", run_generate, "Render product pages and the catalog index"),
        ("build", run_build, "convert, then generate"),
    ):
        p = sub.add_parser(name, help=help_text)
        p.add_argument("--data", type=str, help="JSON document path")
        p.add_argument("--template", type=str, help="Product page template")
        p.add_argument("--out", type=str, help="Output directory")
        p.add_argument(
            "--strict-placeholders",
            action="store_true",
            help="Fail when a template placeholder has no value",
        )
        p.add_argument(
            "--skip-invalid-ids",
            action="store_true",
            help="Skip products with invalid ids instead of aborting",
        )
        if name == "build":
            p.add_argument("--input", type=str, help="Spreadsheet path (.xlsx or .csv)")
        p.set_defaults(func=func)

    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    setup_logging(args.log_file, logging.DEBUG if args.verbose else logging.INFO)
    try:
        config = load_config(args)
        args.func(config)
    except (CatalogError, ValueError) as e:
        logging.error(str(e))
        print(f"Error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
