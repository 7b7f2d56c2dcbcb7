# ==================================================
# examples/report_sizes.py
# ==================================================
import os, sys, argparse, logging
from smallint_codec.report import run_cases

# ───────────────────────── configuration ──────────────────────
SEED      = int(os.getenv("SMALLINT_SEED", "0"))
LOG_LEVEL = os.getenv("SMALLINT_LOG_LEVEL", "WARNING")

def main(argv=None) -> int:
    p = argparse.ArgumentParser(description="print encoded sizes for the stock cases")
    p.add_argument("--seed", type=int, default=SEED, help="seed for the random cases")
    p.add_argument("--show-encoded", action="store_true", help="print encoded strings")
    p.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    args = p.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else LOG_LEVEL,
                        format="%(levelname)s %(name)s: %(message)s")

    reports = run_cases(seed=args.seed)
    for r in reports:
        print(f"{r.name}:")
        print(f"  Original: {r.original_size} bytes")
        print(f"  Compressed: {r.encoded_size} bytes")
        print(f"  Ratio: {r.ratio}%")
        print(f"  Correct: {r.correct}")
        if args.show_encoded and r.original_size:
            print(f"  Compressed string: {r.encoded}")
    return 0 if all(r.correct for r in reports) else 1

if __name__ == "__main__":
    sys.exit(main())
