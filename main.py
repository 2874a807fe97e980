# main.py
import argparse

from config import AppConfig
from core.snake_rules import check_config
from runners.run_game import main as play

def parse_args(argv=None):
    defaults = AppConfig()
    p = argparse.ArgumentParser(description="Snake in the terminal.")
    p.add_argument("--ui", choices=["terminal", "window"], default=defaults.ui)
    p.add_argument("--grid-w", type=int, default=defaults.grid_w)
    p.add_argument("--grid-h", type=int, default=defaults.grid_h)
    p.add_argument("--seed", type=int, default=None)
    p.add_argument("--high-score-file", default=defaults.high_score_path)
    p.add_argument("--no-high-score", action="store_true", help="don't read or write the high score file")
    p.add_argument("--log", default=None, metavar="PATH", help="append one CSV row per finished game")
    return p.parse_args(argv)

def config_from_args(args) -> AppConfig:
    return AppConfig().with_(
        ui=args.ui,
        grid_w=args.grid_w,
        grid_h=args.grid_h,
        seed=args.seed,
        high_score_path=None if args.no_high_score else args.high_score_file,
        log_path=args.log,
    )

def main(argv=None):
    cfg = config_from_args(parse_args(argv))
    try:
        check_config(cfg)
    except ValueError as e:
        print(f"[snake] {e}")
        raise SystemExit(2)
    summary = play(cfg)
    print(f"[snake] games={summary.games}  best={summary.best}")
    if summary.save_error:
        print(f"[snake] could not save high score: {summary.save_error}")

if __name__ == "__main__":
    main()
