from __future__ import annotations
import argparse
import json
import logging
import sys
from os import environ

from .gematria import GematriaOverflowError, value

logger = logging.getLogger("gemcalc")

def cmd_value(args: argparse.Namespace) -> int:
    text = " ".join(args.text)
    try:
        v = value(text)
    except GematriaOverflowError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1
    logger.debug("value(%r) = %d", text, v)

    if args.json:
        print(json.dumps({"text": text, "gematria": v}, ensure_ascii=False))
        return 0

    print(v)
    return 0

def cmd_serve(args: argparse.Namespace) -> int:
    import uvicorn
    uvicorn.run(
        "gemcalc.api:app",
        host=args.host,
        port=args.port,
        reload=args.reload,
        log_level="debug" if args.verbose else "info",
    )
    return 0

def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="gemcalc", description="Hebrew gematria calculator")
    p.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    sub = p.add_subparsers(dest="cmd", required=True)

    p_val = sub.add_parser("value", help="Print the gematria value of a text")
    p_val.add_argument("text", nargs="+", help="Text to evaluate (words are joined with spaces)")
    p_val.add_argument("--json", action="store_true", help="Output JSON")
    p_val.set_defaults(func=cmd_value)

    p_srv = sub.add_parser("serve", help="Run FastAPI server")
    p_srv.add_argument("--host", default=environ.get("GEMCALC_HOST", "127.0.0.1"))
    p_srv.add_argument("--port", type=int, default=int(environ.get("GEMCALC_PORT", "8000")))
    p_srv.add_argument("--reload", action="store_true")
    p_srv.set_defaults(func=cmd_serve)

    return p

def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="[%(name)s] %(message)s",
    )
    return args.func(args)

if __name__ == "__main__":
    raise SystemExit(main())
