#!/usr/bin/env python3
"""
OpenAPI specification generator for the viewr API.

This script renders the OpenAPI document of the routes registered on the
Powertools REST resolver, as JSON or YAML.
"""

import argparse
import json
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml

API_TITLE = 'Viewr Device Monitor API'
API_VERSION = '1.0.0'


def get_openapi_spec() -> Dict[str, Any]:
    """
    Generate OpenAPI specification from the application.

    Returns:
        OpenAPI specification dictionary
    """
    sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

    # Routes are registered when the handler module is imported
    from viewr.handlers.api_handler import app

    return json.loads(app.get_openapi_json_schema(title=API_TITLE, version=API_VERSION))


def validate_openapi_spec(spec: Dict[str, Any]) -> bool:
    """
    Validate the OpenAPI specification.

    Args:
        spec: OpenAPI specification to validate

    Returns:
        True if valid, False otherwise
    """
    for field in ["openapi", "info", "paths"]:
        if field not in spec:
            print(f"Error: Missing required field '{field}' in OpenAPI spec")
            return False

    if not spec["openapi"].startswith("3."):
        print(f"Warning: OpenAPI version '{spec['openapi']}' is not 3.x")

    return True


def main(argv: Optional[List[str]] = None) -> Path:
    """Main function for the OpenAPI generator script."""
    parser = argparse.ArgumentParser(
        description="Generate OpenAPI specification for the viewr API"
    )
    parser.add_argument(
        "--format",
        choices=["json", "yaml"],
        default="yaml",
        help="Output format (default: yaml)"
    )
    parser.add_argument(
        "--out-destination",
        default=".",
        help="Output directory (default: current directory)"
    )
    parser.add_argument(
        "--out-filename",
        help="Output filename (default: openapi.{format})"
    )
    parser.add_argument(
        "--validate",
        action="store_true",
        help="Validate the generated specification"
    )

    args = parser.parse_args(argv)

    spec = get_openapi_spec()

    if args.validate and not validate_openapi_spec(spec):
        sys.exit(1)

    output_dir = Path(args.out_destination)
    output_dir.mkdir(parents=True, exist_ok=True)
    output_path = output_dir / (args.out_filename or f"openapi.{args.format}")

    with open(output_path, "w", encoding="utf-8") as f:
        if args.format == "json":
            json.dump(spec, f, indent=2, ensure_ascii=False)
        else:
            yaml.dump(spec, f, default_flow_style=False, allow_unicode=True, sort_keys=False)

    print(f"OpenAPI specification written to: {output_path} ({len(spec.get('paths', {}))} paths)")
    return output_path


if __name__ == "__main__":
    main()
