"""CLI for figma-simplifier."""

import argparse
import logging
import sys

from figma_simplifier.design_extractor import parse_node_ids, simplify_design
from figma_simplifier.design_reader import DesignReader, DesignReadError
from figma_simplifier.domain.models import DumpOptions, DumpResult, SimplifyOptions
from figma_simplifier.extractor_registry import ExtractorRegistry
from figma_simplifier.output.json_dumper import JSONDumper


def _count_nodes(nodes) -> int:
    return sum(1 + _count_nodes(n.children) for n in nodes)


def dump_design(input_path: str, output_path: str, options: DumpOptions) -> DumpResult:
    """Main orchestration: saved API response -> simplified JSON output."""
    response = DesignReader().read(input_path)
    design = simplify_design(response, options.simplify)

    dumper = JSONDumper(pretty=options.pretty)
    dumper.write_design(design, output_path)
    dumper.write_warnings(design.warnings, output_path)

    return DumpResult(
        nodes_extracted=_count_nodes(design.nodes),
        styles_count=len(design.styles),
        warnings_count=len(design.warnings),
        output_path=output_path,
    )


def _positive_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"{value!r} is not an integer")
    if number < 1:
        raise argparse.ArgumentTypeError("depth must be a positive integer")
    return number


def main():
    parser = argparse.ArgumentParser(
        prog='figma-simplifier',
        description='Simplify Figma API responses into compact JSON',
    )
    parser.add_argument('-v', '--verbose', action='store_true', help='Enable debug logging')
    subparsers = parser.add_subparsers(dest='command')

    # dump command
    dump_parser = subparsers.add_parser('dump', help='Simplify a saved API response')
    dump_parser.add_argument('input', help='Path to a saved GET /v1/files (or /nodes) JSON response')
    dump_parser.add_argument('output', help='Output JSON file')
    dump_parser.add_argument('--depth', type=_positive_int, help='Maximum tree depth (default: unlimited)')
    dump_parser.add_argument('--node-ids', help='Only these node ids, separated by ";" or ","')
    dump_parser.add_argument('--extractors', help='Comma-separated extractor or preset names (default: all)')
    dump_parser.add_argument('--tables-to-markdown', action='store_true', help='Render TABLE nodes as markdown')
    dump_parser.add_argument('--simplify-connectors', action='store_true',
                             help='Reduce CONNECTOR nodes to their endpoints')
    dump_parser.add_argument('--simplify-instances', action='store_true',
                             help='Reduce INSTANCE nodes to component data and text')
    dump_parser.add_argument('--flatten-instances', action='store_true',
                             help='Collapse INSTANCE subtrees to one node holding all their text')
    dump_parser.add_argument('--exclude-styles', action='store_true', help='Drop all styling information')
    dump_parser.add_argument('--no-pretty', action='store_true', help='Disable pretty printing')

    # extractors command
    subparsers.add_parser('extractors', help='List available extractors and presets')

    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='%(levelname)s %(name)s: %(message)s',
    )

    if args.command == 'dump':
        options = DumpOptions(
            pretty=not args.no_pretty,
            simplify=SimplifyOptions(
                depth=args.depth,
                node_ids=parse_node_ids(args.node_ids),
                extractors=[e.strip() for e in args.extractors.split(',') if e.strip()]
                if args.extractors else None,
                tables_to_markdown=args.tables_to_markdown,
                simplify_connectors=args.simplify_connectors,
                simplify_component_instances=args.simplify_instances,
                flatten_component_instances=args.flatten_instances,
                exclude_styles=args.exclude_styles,
            ),
        )

        print(f"Simplifying {args.input}...")
        try:
            result = dump_design(args.input, args.output, options)
        except (DesignReadError, ValueError) as e:
            print(f"Error: {e}", file=sys.stderr)
            sys.exit(1)
        print(f"Done! Extracted {result.nodes_extracted} nodes, {result.styles_count} styles "
              f"({result.warnings_count} warnings)")
        print(f"Output: {result.output_path}")

    elif args.command == 'extractors':
        registry = ExtractorRegistry()
        print("Extractors:")
        for name in registry.get_supported_extractors():
            print(f"  {name}")
        print("Presets:")
        for name, members in registry.get_presets().items():
            print(f"  {name}: {', '.join(members)}")

    else:
        parser.print_help()


if __name__ == '__main__':
    main()
