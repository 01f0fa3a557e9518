from __future__ import annotations

import argparse
import json
import logging
import sys
from dataclasses import asdict, dataclass
from pathlib import Path

import matplotlib

matplotlib.use("Agg")
import matplotlib.pyplot as plt  # noqa: E402

# Allow running as a standalone script from repo root.
ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
sys.path.insert(0, str(SRC))

from latin_squares import LatinSquare, cyclic, generate  # noqa: E402
from latin_squares.viz.plot import plot_square  # noqa: E402

logger = logging.getLogger("generate_demo")


@dataclass(frozen=True)
class Summary:
    order: int
    symbols: list[str]
    rows: list[list[str]]
    hash: str


def summarize(square: LatinSquare) -> Summary:
    return Summary(
        order=square.order,
        symbols=[str(s) for s in square.symbols],
        rows=[[str(s) for s in r] for r in square.rows],
        hash=square.hash(),
    )


def build(symbols: str | None, order: int | None) -> LatinSquare:
    if symbols is not None:
        # "" -> [] so an empty --symbols is rejected by generate, not silently replaced
        return generate([s.strip() for s in symbols.split(",")] if symbols else [])
    return cyclic(order if order is not None else 4)


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="Generate a cyclic Latin square.")
    group = ap.add_mutually_exclusive_group()
    group.add_argument("--symbols", type=str, default=None, help="comma separated symbols, e.g. A,B,C")
    group.add_argument("--order", type=int, default=None, help="order n, symbols 0..n-1 (default 4)")
    ap.add_argument("--outdir", type=Path, default=None, help="write summary.json (and square.png with --plot)")
    ap.add_argument("--plot", action="store_true")
    ap.add_argument(
        "--log-level",
        default="WARNING",
        type=str.upper,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
    )
    return ap


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(level=getattr(logging, args.log_level), format="%(levelname)s %(name)s: %(message)s")

    try:
        square = build(args.symbols, args.order)
    except ValueError as e:
        logger.error("invalid input: %s", e)
        print(f"error: {e}", file=sys.stderr)
        return 2

    square.audit()
    print(square)

    if args.outdir is not None:
        args.outdir.mkdir(parents=True, exist_ok=True)
        (args.outdir / "summary.json").write_text(json.dumps(asdict(summarize(square)), indent=2))
        print(f"\nWrote: {args.outdir}/summary.json")
        if args.plot:
            fig, ax = plt.subplots(figsize=(6, 5))
            plot_square(square, ax=ax)
            fig.tight_layout()
            fig.savefig(args.outdir / "square.png", dpi=150)
            plt.close(fig)
            print(f"Wrote: {args.outdir}/square.png")
    elif args.plot:
        logger.warning("--plot ignored without --outdir")

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
