from __future__ import annotations
import argparse, json, sys
from speller.engine import Engine
from speller import config as CFG


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(description="Spell corrector CLI (Engine-backed)")
    g = p.add_mutually_exclusive_group()
    g.add_argument("--build", action="store_true", help="Train from --corpus (and save to --model)")
    g.add_argument("--load", action="store_true", help="Load an existing model from --model")

    p.add_argument("--corpus", nargs="+", default=[CFG.DEFAULT_CORPUS_DIR], help="Folders of training text")
    p.add_argument("--suffix", default=None, help="Only train on files with this suffix ('' = all files)")
    p.add_argument("--model", default=CFG.DEFAULT_MODEL_DSN,
                   help="Model store: file:///path.spm, text:///folder or memory://")
    p.add_argument("--export", default=None, help="Also write the model to this store DSN")
    p.add_argument("--tokens", choices=["whitespace", "tokens"], default=None,
                   help="How correction requests are split into tokens")
    p.add_argument("--q", default=None, help="Single text to correct once")
    p.add_argument("--repl", action="store_true", help="Interactive loop after init")
    p.add_argument("--json", action="store_true", help="Emit JSON records")
    p.add_argument("--verbose", action="store_true")

    args = p.parse_args(argv)

    eng = Engine(request_tokens=args.tokens)
    try:
        try:
            if args.build:
                eng.build(args.corpus, store=args.model, suffix=args.suffix, verbose=args.verbose)
            elif args.load:
                eng.load(args.model, verbose=args.verbose)
            else:
                eng.initialize(model=args.model, corpus=args.corpus, suffix=args.suffix, verbose=args.verbose)
        except OSError as exc:
            print(f"error: {exc}", file=sys.stderr)
            return 2

        if args.export:
            eng.save(args.export)

        s = eng.stats()
        if not args.json:
            print(f"{s['words']:,} words, {s['bigrams']:,} bigrams")

        def run_query(q: str):
            res = eng.correct(q)
            if args.json:
                print(json.dumps(res.to_dict(explain=True), ensure_ascii=False))
            else:
                print(res.corrected)
                for a, b in res.changes:
                    print(f"  {a} -> {b}")

        if args.q is not None:
            run_query(args.q)

        if args.repl:
            print("Type a sentence (empty line to exit).")
            while True:
                try:
                    q = input("> ").strip()
                except (EOFError, KeyboardInterrupt):
                    break
                if not q:
                    break
                run_query(q)

        return 0
    finally:
        eng.shutdown()

if __name__ == "__main__":
    raise SystemExit(main())
