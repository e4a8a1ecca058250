"""CLI for ppeguard: ``ppeguard analyze`` and ``ppeguard info``."""

import argparse
import json
import logging
import sys

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_ERROR = 1
EXIT_NON_COMPLIANT = 2


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ppeguard",
        description="PPE compliance check for workplace photographs",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  ppeguard analyze site.jpg                       # construction profile
  ppeguard analyze lab.png -e laboratory          # laboratory profile
  ppeguard analyze site.jpg --seed 7 --json       # reproducible, JSON output
  ppeguard analyze site.jpg --report out.json     # save full result
  ppeguard info                                   # list profiles and catalog
""",
    )
    sub = parser.add_subparsers(dest="command")

    # ppeguard analyze
    an_p = sub.add_parser("analyze", help="Analyze an image for PPE compliance")
    an_p.add_argument("image", help="Path to the image file")
    an_p.add_argument(
        "-e", "--environment",
        default=None,
        help="Work environment profile (default: from config, else construction)",
    )
    an_p.add_argument(
        "-t", "--threshold",
        type=float,
        default=None,
        help="Confidence threshold; detections must score above it (default: 0.5)",
    )
    an_p.add_argument("--seed", type=int, default=None, help="Seed for the mock detector")
    an_p.add_argument("--config", "-c", default=None, help="YAML config file (default: $PPEGUARD_CONFIG)")
    an_p.add_argument("--report", default=None, metavar="PATH", help="Save the full result to a JSON file")
    an_p.add_argument("--json", action="store_true", help="Print the full result as JSON")
    an_p.add_argument(
        "--strict", action="store_true",
        help="Fail on unknown environment instead of using the general profile",
    )
    an_p.add_argument("-v", "--verbose", action="store_true", help="Enable verbose logging")

    # ppeguard info
    info_p = sub.add_parser("info", help="List policy profiles and equipment catalog")
    info_p.add_argument("--config", "-c", default=None, help="YAML config file (default: $PPEGUARD_CONFIG)")
    info_p.add_argument("-v", "--verbose", action="store_true", help="Show synonyms for each label")

    return parser


def _load_config(args: argparse.Namespace):
    """Load the config file and apply command-line overrides."""
    from dataclasses import replace

    from ppeguard.config import load_config

    config = load_config(args.config)
    overrides = {}
    if getattr(args, "threshold", None) is not None:
        overrides["confidence_threshold"] = args.threshold
    if getattr(args, "seed", None) is not None:
        overrides["detector_seed"] = args.seed
    if getattr(args, "environment", None):
        overrides["work_environment"] = args.environment
    if getattr(args, "strict", False):
        overrides["strict_profiles"] = True
    return replace(config, **overrides) if overrides else config


def _cmd_analyze(args: argparse.Namespace) -> int:
    """Handle ``ppeguard analyze``."""
    from ppeguard.analyzer import ComplianceAnalyzer
    from ppeguard.persistence import result_to_dict, save_result

    config = _load_config(args)
    analyzer = ComplianceAnalyzer(config=config)
    result = analyzer.analyze_image(args.image)

    if args.report:
        path = save_result(result, args.report)
        logger.info("Saved report to %s", path)

    if args.json:
        print(json.dumps(result_to_dict(result), indent=2, ensure_ascii=False))
    else:
        _print_summary(result)

    return EXIT_OK if result.report.compliant else EXIT_NON_COMPLIANT


def _print_summary(result) -> None:
    report = result.report
    verdict = "COMPLIANT" if report.compliant else "NON-COMPLIANT"
    print(f"Profile: {report.profile_name}  Score: {report.score}/100  {verdict}")
    print(f"Person detected: {'yes' if report.person_present else 'no'}")
    for item in report.items:
        print(f"  {item.category.value:16s} {item.label} ({item.confidence:.2f})")
    print("Recommendations:")
    for rec in result.recommendations:
        print(f"  [{rec.kind.value}/{rec.priority.value}] {rec.message}")


def _cmd_info(args: argparse.Namespace) -> int:
    """Handle ``ppeguard info``."""
    from ppeguard.recommendations import category_display_name

    config = _load_config(args)
    registry = config.build_registry()
    catalog = config.build_catalog()

    print("Profiles:")
    for name in registry.names():
        profile = registry.resolve(name)
        cats = ", ".join(category_display_name(c) for c in profile.required_categories)
        marker = " (default)" if name == config.work_environment else ""
        print(f"  {name:14s} {cats}{marker}")

    print("Catalog:")
    for category in catalog.categories():
        labels = catalog.labels_for(category)
        print(f"  {category_display_name(category):16s} {', '.join(labels)}")
        if args.verbose:
            for label in labels:
                synonyms = sorted(catalog.lookup(label).synonyms)
                print(f"      {label}: {', '.join(synonyms) or '-'}")
    print(f"Person labels: {', '.join(sorted(catalog.person_labels))}")
    return EXIT_OK


def main(argv=None) -> int:
    """Entry point for ``ppeguard`` CLI."""
    from ppeguard.errors import PPEGuardError

    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return EXIT_ERROR

    if getattr(args, "verbose", False):
        logging.basicConfig(level=logging.DEBUG)
    else:
        logging.basicConfig(level=logging.INFO)

    try:
        if args.command == "analyze":
            return _cmd_analyze(args)
        elif args.command == "info":
            return _cmd_info(args)
    except PPEGuardError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_ERROR
    return EXIT_ERROR


if __name__ == "__main__":
    sys.exit(main())
