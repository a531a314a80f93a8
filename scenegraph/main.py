#!/usr/bin/env python3
"""
SceneGraph - Main Entry Point

Exports a scene project file as XML, JSON or a PNG preview.
Run with: python -m scenegraph.main project.json --format xml
"""

import argparse
import json
import logging
import sys

logger = logging.getLogger(__name__)

FORMATS = ('xml', 'json', 'png')


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='scenegraph',
        description='Export a scene project file.'
    )
    parser.add_argument('project', help='Scene project file (.json)')
    parser.add_argument('-f', '--format', choices=FORMATS, default='xml',
                        help='Export format (default: xml)')
    parser.add_argument('-o', '--output',
                        help='Output file (default: stdout; required for png)')
    parser.add_argument('--width', type=int, default=200,
                        help='PNG width in pixels')
    parser.add_argument('--height', type=int, default=200,
                        help='PNG height in pixels')
    parser.add_argument('--scale', type=float, default=1.0,
                        help='PNG pixels per scene unit')
    parser.add_argument('-v', '--verbose', action='store_true',
                        help='Enable debug logging')
    return parser


def main(argv=None):
    """Main entry point for the SceneGraph exporter."""
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format='%(levelname)s %(name)s: %(message)s'
    )

    # Import here to keep --help fast
    from .export import XmlExportVisitor, JsonExportVisitor, RasterSettings
    from .io import load_scene, export_xml, export_json, export_png

    if args.format == 'png' and not args.output:
        logger.error("PNG export requires --output")
        return 1

    try:
        root = load_scene(args.project)

        if args.format == 'png':
            settings = RasterSettings(width=args.width, height=args.height,
                                      scale=args.scale)
            export_png(root, args.output, settings)
        elif args.output:
            if args.format == 'xml':
                export_xml(root, args.output)
            else:
                export_json(root, args.output)
        elif args.format == 'xml':
            print(root.accept(XmlExportVisitor()))
        else:
            print(json.dumps(root.accept(JsonExportVisitor()), indent=2))
    except (OSError, ValueError) as e:
        logger.error("Export failed: %s", e)
        return 1

    if args.output:
        logger.info("Wrote %s export to %s", args.format, args.output)
    return 0


if __name__ == "__main__":
    sys.exit(main())
