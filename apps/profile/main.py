"""
Output a service profile for a Kubernetes service.

  --template        commented scaffold to edit by hand
  --open-api FILE   profile derived from an OpenAPI/Swagger document
                    ("-" reads stdin)

Example:
  profilegen -n emojivoto --open-api web-svc.swagger web-svc | kubectl apply -f -
"""

from __future__ import annotations

import argparse
import sys
from typing import List, Optional, TextIO

from packages.core.config import ProfileConfig
from packages.core.errors import ProfileError
from packages.openapi import load_document
from packages.profiles import OUTPUT_FORMATS, build_profile, render_profile, render_profile_template
from packages.profiles.naming import is_dns1035_label, is_dns1123_label

from apps.profile.logs import LOG_LEVELS, setup_logging


def build_parser(cfg: ProfileConfig) -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="profilegen",
        description="Output service profile config for Kubernetes.",
        epilog="Example: profilegen -n emojivoto --open-api web-svc.swagger web-svc | kubectl apply -f -",
    )
    ap.add_argument("service", metavar="SERVICE", help="name of the service")
    ap.add_argument("-n", "--namespace", default="default", help="namespace of the service")
    mode = ap.add_mutually_exclusive_group(required=True)
    mode.add_argument("--template", action="store_true", help="output a service profile template")
    mode.add_argument("--open-api", dest="open_api", metavar="FILE", help="output a service profile based on the given OpenAPI spec file")
    ap.add_argument("-o", "--output", choices=OUTPUT_FORMATS, default="yaml", help="output format")
    ap.add_argument("--control-plane-namespace", default=cfg.control_plane_namespace, help="namespace the profile is created in")
    ap.add_argument("--cluster-domain", default=cfg.cluster_domain, help="cluster DNS domain")
    ap.add_argument("--log-level", default=cfg.log_level, help="logging level (logs go to stderr)")
    return ap


def validate_args(ap: argparse.ArgumentParser, args: argparse.Namespace) -> None:
    errs = is_dns1035_label(args.service)
    if errs:
        ap.error(f"invalid service {args.service!r}: {'; '.join(errs)}")
    errs = is_dns1123_label(args.namespace)
    if errs:
        ap.error(f"invalid namespace {args.namespace!r}: {'; '.join(errs)}")
    if args.template and args.output != "yaml":
        ap.error("--template only supports yaml output")
    if args.log_level.upper() not in LOG_LEVELS:
        ap.error(f"invalid log level {args.log_level!r}: choose from {', '.join(LOG_LEVELS)}")


def main(
    argv: Optional[List[str]] = None,
    stdin: Optional[TextIO] = None,
    stdout: Optional[TextIO] = None,
    stderr: Optional[TextIO] = None,
) -> int:
    stdout = stdout if stdout is not None else sys.stdout
    stderr = stderr if stderr is not None else sys.stderr

    cfg = ProfileConfig.from_env()
    ap = build_parser(cfg)
    args = ap.parse_args(argv)
    validate_args(ap, args)
    log = setup_logging(args.log_level, stderr)

    try:
        if args.template:
            out = render_profile_template(
                args.service,
                args.namespace,
                control_plane_namespace=args.control_plane_namespace,
                cluster_domain=args.cluster_domain,
            )
        else:
            doc = load_document(args.open_api, stdin)
            profile = build_profile(
                doc,
                args.service,
                args.namespace,
                control_plane_namespace=args.control_plane_namespace,
                cluster_domain=args.cluster_domain,
            )
            out = render_profile(profile, args.output)
    except ProfileError as e:
        log.debug("profile generation failed", exc_info=True)
        print(f"Error {e}", file=stderr)
        return 1

    stdout.write(out)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
