#!/usr/bin/env python
"""
Command-line interface for osmkit

Usage:
    python cli.py overpass 'node["amenity"="bench"](51.5,-0.13,51.51,-0.12)' --format json
    python cli.py get node/123 --dev
    python cli.py changeset --input edits.json --comment "Add benches" --dev --output benches.osc
"""

import os
import sys
import json
import argparse
import xml.etree.ElementTree as ET

from dotenv import load_dotenv
from loguru import logger
from pydantic import ValidationError

from osmkit.config import get_config, validate_config
from osmkit.exceptions import OSMKitError
from osmkit.models import ChangesetRequest
from osmkit.osm import OsmSession, OSMNode, get
from osmkit.overpass import OverpassClient, ResponseFormat


def setup_logging(verbose: bool = False):
    """Configure logging"""
    logger.remove()
    level = "DEBUG" if verbose else "INFO"
    logger.add(
        sys.stderr,
        format="<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | <cyan>{message}</cyan>",
        level=level
    )


def cmd_overpass(args):
    """Run an Overpass query and print or save the raw response"""
    client = OverpassClient(url=args.url, timeout=args.timeout)

    try:
        text = client.get(
            args.query,
            response_format=ResponseFormat(args.format),
            verbosity=args.verbosity,
            pure_query=not args.raw
        )
    except OSMKitError as e:
        logger.error(f"Overpass query failed: {e}")
        return 1

    if args.output:
        with open(args.output, "w", encoding="utf-8") as f:
            f.write(text)
        logger.info(f"✓ Saved response to {args.output}")
    else:
        print(text)
    return 0


def cmd_get(args):
    """Fetch an element from the OSM API and print it"""
    try:
        element = get(args.dev, args.sub_url)
    except OSMKitError as e:
        logger.error(f"GET {args.sub_url} failed: {e}")
        return 1

    if args.summary:
        for node in (OSMNode.from_element(n) for n in element.iter("node")):
            print(json.dumps({"id": node.id, "lat": node.lat, "lon": node.lon, "tags": node.tags}, ensure_ascii=False))
        return 0

    ET.indent(element)
    print(ET.tostring(element, encoding="unicode"))
    return 0


def cmd_changeset(args):
    """Create a changeset and write node edits from a JSON file into an osmChange document"""
    load_dotenv(override=False)  # Don't override existing env vars
    username = args.username or os.environ.get("OSM_USERNAME")
    password = args.password or os.environ.get("OSM_PASSWORD")
    if not username or not password:
        logger.error("Credentials required: use --username/--password or OSM_USERNAME/OSM_PASSWORD")
        return 1

    try:
        with open(args.input, "r", encoding="utf-8") as f:
            request = ChangesetRequest.model_validate(json.load(f))
    except (OSError, json.JSONDecodeError, ValidationError) as e:
        logger.error(f"Cannot read edits from {args.input}: {e}")
        return 1

    comment = args.comment or request.comment
    if not comment:
        logger.error("A changeset comment is required (--comment or 'comment' in the input file)")
        return 1

    session = OsmSession(username, password, devel=args.dev, author=args.author)

    try:
        changeset_id = session.create_changeset(comment)

        for change in request.nodes:
            element = change.to_node().to_element()
            if change.action == "create":
                session.add_create_node_changeset(element)
            else:
                session.add_modify_node_changeset(element, str(change.version))

        output_path = args.output or f"changeset_{changeset_id}.osc"
        session.write_changeset_to_file(output_path)

        if args.close:
            session.close_changeset()
    except OSMKitError as e:
        logger.error(f"Changeset failed: {e}")
        return 1

    logger.info(f"✓ Changeset {changeset_id}: {len(request.nodes)} node edits written to {output_path}")
    return 0


def main():
    parser = argparse.ArgumentParser(
        description="osmkit CLI",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  Query Overpass:
    python cli.py overpass 'node["sport"="free_flying"]' --format xml --verbosity body

  Fetch a node from the sandbox API:
    python cli.py get node/123 --dev

  Build a changeset from node edits:
    python cli.py changeset --input edits.json --comment "Fix names" --dev
        """
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Verbose output")

    subparsers = parser.add_subparsers(dest="command", help="Commands")

    # Overpass command
    ovp_parser = subparsers.add_parser("overpass", help="Run an Overpass query")
    ovp_parser.add_argument("query", help="Overpass QL statement")
    ovp_parser.add_argument("--format", "-f", default=ResponseFormat.XML.value,
                            choices=[f.value for f in ResponseFormat], help="Output format")
    ovp_parser.add_argument("--verbosity", default=None, help="Output verbosity (body, skel, ids, meta...)")
    ovp_parser.add_argument("--raw", action="store_true", help="Send the query verbatim without the [out:...] template")
    ovp_parser.add_argument("--url", help="Overpass interpreter URL")
    ovp_parser.add_argument("--timeout", type=int, help="Request timeout in seconds")
    ovp_parser.add_argument("--output", "-o", help="Output file (prints to stdout if not specified)")
    ovp_parser.set_defaults(func=cmd_overpass)

    # Get command
    get_parser = subparsers.add_parser("get", help="Fetch an OSM API resource")
    get_parser.add_argument("sub_url", help="Path below /api/0.6/, e.g. node/123")
    get_parser.add_argument("--dev", action="store_true", help="Use the development API")
    get_parser.add_argument("--summary", "-s", action="store_true", help="Print one JSON line per node instead of XML")
    get_parser.set_defaults(func=cmd_get)

    # Changeset command
    cs_parser = subparsers.add_parser("changeset", help="Create a changeset and build an osmChange file")
    cs_parser.add_argument("--input", "-i", required=True, help="JSON file with 'comment' and 'nodes'")
    cs_parser.add_argument("--comment", "-c", help="Changeset comment (overrides the input file)")
    cs_parser.add_argument("--output", "-o", help="Output .osc file")
    cs_parser.add_argument("--username", "-u", help="OSM username")
    cs_parser.add_argument("--password", "-p", help="OSM password")
    cs_parser.add_argument("--author", help="Author attribute of the osmChange document")
    cs_parser.add_argument("--dev", action="store_true", help="Use the development API")
    cs_parser.add_argument("--close", action="store_true", help="Close the changeset afterwards")
    cs_parser.set_defaults(func=cmd_changeset)

    args = parser.parse_args()

    if not args.command:
        parser.print_help()
        return 1

    setup_logging(args.verbose)
    validate_config(get_config())

    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
