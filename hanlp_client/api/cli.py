"""
Command-line adapter for the HanLP RESTful client.

Architectural role:
- Exposes each service endpoint as a subcommand.
- Builds `ClientOptions` from `.env`/environment plus global flags.
- Delegates all network work to `hanlp_client.client.hanlp.HanLPClient`.

Request lifecycle (per invocation):
1. Parse arguments.
2. Configure logging from `HANLP_LOG_LEVEL` (default `WARNING`).
3. Build options and client.
4. Run one endpoint call and print the result to stdout.

Response formatting:
- Endpoint subcommands print the raw JSON body.
- `parse --json` prints the decoded `Document` as indented JSON.
- `parse --con` prints bracketed constituency trees, one per line.
- `tokenize` prints one space-joined sentence per line.

Error handling strategy:
- `HanLPError` and `requests` failures print one line to stderr and exit 1.
"""

from dotenv import load_dotenv

load_dotenv()

import argparse
import json
import logging
import os
import sys

import requests

from hanlp_client.client.hanlp import HanLPClient
from hanlp_client.client.options import ClientOptions
from hanlp_client.errors import HanLPError


# =========================================================
# UTF-8 SAFE OUTPUT
# =========================================================

if hasattr(sys.stdout, "reconfigure"):
    try:
        sys.stdout.reconfigure(encoding="utf-8")
    except (OSError, ValueError):
        pass


# =========================================================
# ARGUMENTS
# =========================================================

def _split_list(value):
    return [v.strip() for v in value.split(",") if v.strip()]


def _pair(value):
    left, sep, right = value.partition("|||")
    if not sep:
        raise argparse.ArgumentTypeError(f"expected 'text_a|||text_b', got {value!r}")
    return (left, right)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="hanlp-client", description="HanLP RESTful API client")
    parser.add_argument("--url", help="service base URL")
    parser.add_argument("--auth", help="auth credential (overrides HANLP_AUTH)")
    parser.add_argument("--language", help="input language, e.g. zh or mul")
    parser.add_argument("--timeout", type=float, help="request timeout in seconds")

    sub = parser.add_subparsers(dest="command", required=True)

    p = sub.add_parser("parse", help="run /parse")
    p.add_argument("text", nargs="+", help="sentences")
    p.add_argument("--tasks", type=_split_list, help="comma separated tasks")
    p.add_argument("--skip-tasks", type=_split_list, help="comma separated tasks to skip")
    fmt = p.add_mutually_exclusive_group()
    fmt.add_argument("--json", action="store_true", help="print the decoded document")
    fmt.add_argument("--con", action="store_true", help="print constituency trees")

    p = sub.add_parser("tokenize", help="tokenize text")
    p.add_argument("text", nargs="+")
    p.add_argument("--coarse", action="store_true")

    p = sub.add_parser("gec", help="grammatical error correction")
    p.add_argument("text", nargs="+")

    p = sub.add_parser("keyphrase", help="keyphrase extraction")
    p.add_argument("text")
    p.add_argument("--topk", type=int)

    p = sub.add_parser("similarity", help="semantic textual similarity")
    p.add_argument("pairs", nargs="+", type=_pair, help="'text_a|||text_b'")

    p = sub.add_parser("summarize", help="extractive or abstractive summarization")
    p.add_argument("text")
    p.add_argument("--abstractive", action="store_true")
    p.add_argument("--topk", type=int)

    p = sub.add_parser("classify", help="text classification")
    p.add_argument("text", nargs="+")
    p.add_argument("--model", required=True)
    p.add_argument("--topk", type=int)

    p = sub.add_parser("sentiment", help="sentiment analysis")
    p.add_argument("text", nargs="+")

    p = sub.add_parser("style", help="text style transfer")
    p.add_argument("text", nargs="+")
    p.add_argument("--target-style", required=True)

    sub.add_parser("about", help="service metadata")
    return parser


# =========================================================
# DISPATCH
# =========================================================

def _text(values):
    return values[0] if len(values) == 1 else values


def run(args, client: HanLPClient) -> str:
    """Execute one subcommand and return the text to print."""
    cmd = args.command

    if cmd == "parse":
        overrides = {"tasks": args.tasks, "skip_tasks": args.skip_tasks}
        if args.json:
            doc = client.parse_obj(args.text, **overrides)
            return json.dumps(doc.to_dict(), ensure_ascii=False, indent=2)
        if args.con:
            doc = client.parse_obj(args.text, **overrides)
            return "\n".join(tree.pformat() if tree else "" for tree in doc.con or ())
        return client.parse(args.text, **overrides)

    if cmd == "tokenize":
        sentences = client.tokenize(args.text, coarse=args.coarse)
        return "\n".join(" ".join(sentence) for sentence in sentences)

    if cmd == "gec":
        return client.grammatical_error_correction(args.text)
    if cmd == "keyphrase":
        return client.keyphrase_extraction(args.text, topk=args.topk)
    if cmd == "similarity":
        return client.semantic_textual_similarity(args.pairs)
    if cmd == "summarize":
        if args.abstractive:
            return client.abstractive_summarization(args.text)
        return client.extractive_summarization(args.text, topk=args.topk)
    if cmd == "classify":
        return client.text_classification(_text(args.text), model=args.model, topk=args.topk)
    if cmd == "sentiment":
        return client.sentiment_analysis(_text(args.text))
    if cmd == "style":
        return client.text_style_transfer(_text(args.text), target_style=args.target_style)
    if cmd == "about":
        return client.about()

    raise ValueError(f"Unknown command: {cmd}")


# =========================================================
# MAIN
# =========================================================

def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=os.getenv("HANLP_LOG_LEVEL", "WARNING").upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        options = ClientOptions.from_env(
            url=args.url,
            auth=args.auth,
            language=args.language,
            timeout=args.timeout,
        )
        print(run(args, HanLPClient(options)))
    except (HanLPError, requests.exceptions.RequestException) as err:
        first_line = str(err).splitlines()[0] if str(err) else type(err).__name__
        print(f"hanlp-client: {first_line}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
