#!/usr/bin/env python3
"""
envfile: load, validate and compare .env files
"""
import sys
import argparse
import logging

from .config_loader import load_config
from .dotenv import Dotenv
from .errors import EnvFileError, ValidationError
from .json_output import VERSION, describe_error, to_json, wrap_json_response
from . import migrate as migrate_mod


def build_parser():
    parser = argparse.ArgumentParser(prog="envfile",
        description="envfile: load, validate and compare .env files")

    parser.add_argument("--dir", "-d", default=".", help="directory holding the env files")
    parser.add_argument("--env", "-e", default=None, help="env file name (default: from .envfile.yml or .env)")
    parser.add_argument("--json", action="store_true", help="Output results in JSON format for CI/CD.")
    parser.add_argument("--verbose", action="store_true", help="verbose output for debugging")
    parser.add_argument("--version", action="store_true", help="print version")

    subparsers = parser.add_subparsers(dest="command")

    # show
    subparsers.add_parser("show", help="Print the parsed variables without loading them")

    # compare
    compare_cmd = subparsers.add_parser("compare", help="Compare the env file with a template")
    compare_cmd.add_argument("--dist", default=None, help="template file name (default: .env.dist)")
    compare_cmd.add_argument("--dist-dir", default=None, help="template directory (default: same as env file)")

    # check
    check_cmd = subparsers.add_parser("check", help="Load the env file and validate variables")
    check_cmd.add_argument("names", nargs="*", help="required variables (default: 'required' from .envfile.yml)")
    check_cmd.add_argument("--overload", action="store_true", default=None, help="let the file win over variables already set")
    check_cmd.add_argument("--not-empty", action="store_true", help="values must not be empty")
    check_cmd.add_argument("--integer", action="store_true", help="values must be integers")
    check_cmd.add_argument("--boolean", action="store_true", help="values must be booleans")
    check_cmd.add_argument("--allowed", nargs="+", metavar="VALUE", help="values must be one of these")

    # export
    export_cmd = subparsers.add_parser("export", help="Export the env file to json/yaml")
    export_cmd.add_argument("--format", choices=["json", "yaml"], default="json")
    export_cmd.add_argument("--out", required=True, help="destination path")

    return parser


def fail(args, action, exc, code, file=None):
    if args.json:
        print(to_json(wrap_json_response(action=action, success=False, file=file,
                                         errors=[describe_error(exc)]), pretty=True))
    else:
        print(f"ERROR: {exc}", file=sys.stderr)
    sys.exit(code)


def cmd_show(args, dotenv):
    bucket = dotenv.loader.get_bucket()
    if args.json:
        print(to_json(wrap_json_response(action="show", success=True, file=dotenv.file_path,
                                         details={"variables": bucket}), pretty=True))
        return 0
    sys.stdout.write(migrate_mod.dump_env(bucket))
    return 0


def cmd_compare(args, dotenv, cfg):
    report = dotenv.compare(args.dist_dir, args.dist or cfg["dist_file"])
    if args.json:
        print(to_json(wrap_json_response(action="compare", success=not report["has_changes"],
                                         file=dotenv.file_path, details=report), pretty=True))
    else:
        sys.stdout.write(report["changes"])
    return 1 if report["has_changes"] else 0


def cmd_check(args, dotenv, cfg):
    names = args.names or cfg["required"]
    overload = cfg["overload"] if args.overload is None else args.overload

    bucket = dotenv.overload() if overload else dotenv.load()
    if not names:
        names = list(bucket)

    validator = dotenv.required(names)
    if args.not_empty:
        validator.not_empty()
    if args.integer:
        validator.is_integer()
    if args.boolean:
        validator.is_boolean()
    if args.allowed:
        validator.allowed_values(args.allowed)

    if args.json:
        print(to_json(wrap_json_response(action="check", success=True, file=dotenv.file_path,
                                         details={"checked": names}), pretty=True))
    else:
        print(f"✔ {len(names)} variable(s) OK in {dotenv.file_path}")
    return 0


def cmd_export(args, dotenv):
    if args.format == "json":
        migrate_mod.env_to_json(dotenv.file_path, args.out)
    else:
        migrate_mod.env_to_yaml(dotenv.file_path, args.out)

    if args.json:
        print(to_json(wrap_json_response(action="export", success=True, file=dotenv.file_path,
                                         details={"out": args.out}), pretty=True))
    else:
        print(f"✔ Exported {dotenv.file_path} to {args.out}")
    return 0


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.version:
        print(f"envfile {VERSION}")
        sys.exit(0)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    if not args.command:
        parser.print_help()
        sys.exit(2)

    dotenv = None
    try:
        cfg = load_config(args.dir)
        dotenv = Dotenv(args.dir, args.env or cfg["env_file"])

        if args.command == "show":
            code = cmd_show(args, dotenv)
        elif args.command == "compare":
            code = cmd_compare(args, dotenv, cfg)
        elif args.command == "check":
            code = cmd_check(args, dotenv, cfg)
        else:
            code = cmd_export(args, dotenv)
    except ValidationError as e:
        fail(args, args.command, e, 1, file=dotenv.file_path)
    except (OSError, EnvFileError, ValueError) as e:
        fail(args, args.command, e, 2, file=dotenv.file_path if dotenv else None)

    sys.exit(code)


if __name__ == "__main__":
    main()
