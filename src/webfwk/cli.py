"""CLI entry point for webfwk."""

from __future__ import annotations

import argparse
import json
import re
import sys
from pathlib import Path
from typing import cast

from webfwk import __version__
from webfwk.server.runner import run_server
from webfwk.validation.models import describe_rule
from webfwk.validation.rules import Contains, Length, Regex, Rule
from webfwk.validation.ruleset import Ruleset


def _build_rules(args: argparse.Namespace) -> list[Rule]:
    rules: list[Rule] = []
    min_length = cast(int | None, args.min_length)
    max_length = cast(int | None, args.max_length)
    if min_length is not None or max_length is not None:
        rules.append(Length(min_length or 0, max_length))
    for pattern in cast(list[str], args.regex):
        rules.append(Regex(pattern))
    needles = cast(list[str], args.contains)
    if needles:
        rules.append(Contains(*needles))
    return rules


def _cmd_check(args: argparse.Namespace) -> None:
    raw = cast(str, args.value)
    value: object = raw
    if args.json:
        try:
            value = json.loads(raw)
        except json.JSONDecodeError as e:
            print(f"Error: value is not valid JSON: {e}", file=sys.stderr)
            sys.exit(2)

    try:
        ruleset = Ruleset().add_rule(*_build_rules(args))
    except re.error as e:
        print(f"Error: invalid pattern: {e}", file=sys.stderr)
        sys.exit(2)
    valid = ruleset.validate(value)
    errors = [describe_rule(r) for r in ruleset.get_errors()]
    print(json.dumps({"valid": valid, "errors": errors}, indent=2))
    if not valid:
        sys.exit(1)


def _load_validators(args: argparse.Namespace):
    from webfwk.config import get_config_path
    from webfwk.validation.config import load_validation_config
    from webfwk.validation.schema import build_validators

    path = cast(Path | None, args.config) or get_config_path()
    return build_validators(load_validation_config(path).schemas)


def _read_payload(data: str) -> dict[str, object]:
    if data.startswith("@"):
        data = Path(data[1:]).read_text()
    payload = json.loads(data)
    if not isinstance(payload, dict):
        raise ValueError("data must be a JSON object")
    return payload


def _cmd_validate(args: argparse.Namespace) -> None:
    from webfwk.validation.schema import UnknownSchemaError, get_validator

    validators = _load_validators(args)
    try:
        validator = get_validator(validators, cast(str, args.schema))
    except UnknownSchemaError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    try:
        payload = _read_payload(cast(str, args.data))
    except (ValueError, OSError) as e:
        print(f"Error: invalid data: {e}", file=sys.stderr)
        sys.exit(2)

    report = validator.validate(payload)
    print(report.model_dump_json(indent=2))
    if not report.valid:
        sys.exit(1)


def _cmd_schemas(args: argparse.Namespace) -> None:
    validators = _load_validators(args)
    if not validators:
        print("No schemas configured.")
        return
    for name, validator in validators.items():
        fields = ", ".join(validator.spec.rules) or "-"
        print(f"{name}: {fields}")


def _cmd_serve(_args: argparse.Namespace) -> None:
    run_server()


def main() -> None:
    parser = argparse.ArgumentParser(
        prog="webfwk",
        description="Rule-based value validation for web applications",
    )
    _ = parser.add_argument(
        "-V", "--version", action="version", version=f"webfwk {__version__}"
    )
    subparsers = parser.add_subparsers(dest="command")

    # check subcommand
    check_p = subparsers.add_parser("check", help="Validate one value against ad-hoc rules")
    _ = check_p.add_argument("value", help="Value to validate")
    _ = check_p.add_argument(
        "--json", action="store_true", help="Parse the value as JSON before validating"
    )
    _ = check_p.add_argument("--min-length", type=int, default=None, dest="min_length")
    _ = check_p.add_argument("--max-length", type=int, default=None, dest="max_length")
    _ = check_p.add_argument(
        "--regex", action="append", default=[], help="Pattern to search for (repeatable)"
    )
    _ = check_p.add_argument(
        "--contains", action="append", default=[], help="Accepted substring (repeatable)"
    )

    # validate subcommand
    validate_p = subparsers.add_parser("validate", help="Validate a JSON object with a schema")
    _ = validate_p.add_argument("schema", help="Schema name from .webfwk.json")
    _ = validate_p.add_argument("data", help="JSON object, or @path to a JSON file")
    _ = validate_p.add_argument("--config", type=Path, default=None, help="Config file path")

    # schemas subcommand
    schemas_p = subparsers.add_parser("schemas", help="List configured schemas")
    _ = schemas_p.add_argument("--config", type=Path, default=None, help="Config file path")

    # serve subcommand
    _ = subparsers.add_parser("serve", help="Start the HTTP API server")

    args = parser.parse_args()
    dispatch = {
        "check": _cmd_check,
        "validate": _cmd_validate,
        "schemas": _cmd_schemas,
        "serve": _cmd_serve,
    }
    command = cast(str | None, args.command)
    handler = dispatch.get(command) if command is not None else None
    if handler:
        handler(args)
    else:
        parser.print_help()
        sys.exit(1)
