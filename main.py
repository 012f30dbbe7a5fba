# main.py
"""
Entry Point — listgen (AI listing content generator)

Purpose
-------
Command-line access to the listing content service:
  1) generate : photos and/or a model number → full ListingContent JSON
  2) title    : brand/model/category (+ attributes) → composed title
  3) footer   : description + keywords → description with SEO footer

Design
------
- Settings are resolved once from the environment (see listgen/config.py);
  `--provider` overrides LISTGEN_AI_PROVIDER for this run.
- Output is JSON on stdout; diagnostics go to stderr via logging.
- Exit codes: 0 ok, 2 invalid request, 1 provider/generation failure.

Usage
-----
    python main.py generate --model WH-1000XM4 --provider mock
    python main.py generate --image https://cdn.example.com/a.jpg --context "Minor scuff on lid" --summary
    python main.py title --brand Sony --model WH-1000XM4 --category Electronics --attr color=Black
    python main.py footer --description "Great headphones." --keyword "sony headphones" --keyword "noise cancelling"
"""

from __future__ import annotations

import argparse
import json
import logging
import sys

from listgen.config import GenerationSettings
from listgen.core.errors import InvalidRequestError, ListingGenerationError
from listgen.schemas.models import GenerationRequest
from listgen.services.listing_content import (
    ListingContentService,
    append_keyword_footer,
    compose_title,
    to_listing_data,
)


def _parse_attr(val: str) -> tuple[str, str]:
    key, sep, value = val.partition("=")
    if not sep or not key.strip():
        raise argparse.ArgumentTypeError(f"invalid attribute (expected key=value): {val!r}")
    return key.strip(), value.strip()


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(description="AI marketplace listing content generator")
    p.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    sub = p.add_subparsers(dest="command", required=True)

    g = sub.add_parser("generate", help="Generate listing content from photos and/or a model number")
    g.add_argument("--image", dest="images", action="append", default=[], help="Image URL (repeatable, primary first)")
    g.add_argument("--model", dest="model_identifier", default=None, help="Model number / product identifier")
    g.add_argument("--context", dest="freeform_context", default=None, help="Additional seller notes")
    g.add_argument("--provider", default=None, help="Override LISTGEN_AI_PROVIDER (gemini|openai|mock)")
    g.add_argument("--summary", action="store_true", help="Print the simplified listing draft instead")

    t = sub.add_parser("title", help="Compose a listing title")
    t.add_argument("--brand", default="")
    t.add_argument("--model", default="")
    t.add_argument("--category", default="Product")
    t.add_argument("--attr", type=_parse_attr, action="append", default=[], help="Extra attribute key=value")

    f = sub.add_parser("footer", help="Append an SEO keyword paragraph to a description")
    f.add_argument("--description", required=True)
    f.add_argument("--keyword", dest="keywords", action="append", default=[])

    return p


def _run_generate(args: argparse.Namespace) -> int:
    overrides = {"preferred_provider": args.provider} if args.provider else {}
    settings = GenerationSettings.from_env(**overrides)
    service = ListingContentService.from_settings(settings)
    request = GenerationRequest(
        images=args.images,
        model_identifier=args.model_identifier,
        freeform_context=args.freeform_context,
    )
    try:
        content = service.generate(request)
    except InvalidRequestError as exc:
        print(f"invalid request: {exc}", file=sys.stderr)
        return 2
    except ListingGenerationError as exc:
        print(f"generation failed: {exc}", file=sys.stderr)
        return 1

    out = to_listing_data(content, request) if args.summary else content.to_payload()
    print(json.dumps(out, indent=2, ensure_ascii=False))
    return 0


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.command == "generate":
        return _run_generate(args)
    if args.command == "title":
        print(compose_title(args.brand, args.model, args.category, dict(args.attr)))
        return 0
    print(append_keyword_footer(args.description, args.keywords))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
