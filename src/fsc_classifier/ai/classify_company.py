"""
Classify a single company from the command line.

Runs the same pipeline as POST /api/v1/analyze and prints the result as JSON.

Usage:
    python -m fsc_classifier.ai.classify_company --name "Acme Fasteners" --website acmefasteners.com
    python -m fsc_classifier.ai.classify_company --name "Acme" --file-id file_011C... --file-id file_011D...
    python -m fsc_classifier.ai.classify_company --name "Acme" --website acme.com --lexical
"""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
import sys

from fsc_classifier.config import Settings
from fsc_classifier.errors import ClassificationError
from fsc_classifier.pipeline.orchestrator import build_orchestrator
from fsc_classifier.schemas.contracts import ClassificationRequest


def main() -> None:
    parser = argparse.ArgumentParser(description="Classify a company into FSC codes.")
    parser.add_argument("--name", type=str, required=True, help="Company name")
    parser.add_argument("--website", type=str, default=None, help="Company website URL")
    parser.add_argument("--email-domain", type=str, default=None, help="Company email domain")
    parser.add_argument(
        "--file-id",
        action="append",
        default=[],
        help="Uploaded attachment file id (repeatable)",
    )
    parser.add_argument("--lexical", action="store_true", help="Keyword matching only (no LLM)")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log pipeline progress")
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    settings = Settings()
    request = ClassificationRequest(
        company_name=args.name,
        website_url=args.website,
        email_domain=args.email_domain,
        attachment_refs=tuple(args.file_id),
    )

    try:
        orchestrator = build_orchestrator(settings, mode="lexical" if args.lexical else None)
        print(f"Classifying {args.name} ({orchestrator.mode} pipeline)...", file=sys.stderr)
        result = asyncio.run(orchestrator.classify(request))
    except ClassificationError as e:
        print(f"Error [{e.kind}]: {e}", file=sys.stderr)
        sys.exit(1)

    print(json.dumps(
        {
            "companyDescription": result.company_description,
            "fscCodes": [m.model_dump() for m in result.matches],
        },
        ensure_ascii=False,
        indent=2,
    ))


if __name__ == "__main__":
    main()
