import argparse
import logging
import sys

from .config import TrainingConfig
from .demos import DEMOS
from .errors import RenderError
from .train import DEMO_TARGETS, run
from .viz import to_dot, write_png


def build_parser():
    defaults = TrainingConfig()
    parser = argparse.ArgumentParser(
        prog="scalargrad",
        description="Train a tiny MLP with scalar autograd, or backprop one of the example graphs.",
    )
    parser.add_argument("--demo", choices=["train"] + sorted(DEMOS), default="train")
    parser.add_argument("--epochs", type=int, default=defaults.epochs)
    parser.add_argument("--lr", type=float, default=defaults.learning_rate)
    parser.add_argument("--final-lr", type=float, default=defaults.final_learning_rate)
    parser.add_argument("--seed", type=int, default=defaults.seed)
    parser.add_argument("--log-every", type=int, default=defaults.log_every)
    parser.add_argument("--graph", default=None, help="render the final graph to this PNG path")
    parser.add_argument("--log-level", default=defaults.log_level)
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    try:
        config = TrainingConfig.from_args(args)
    except ValueError as e:
        print(f"invalid configuration: {e}", file=sys.stderr)
        return 2

    logging.basicConfig(
        level=getattr(logging, config.log_level.upper(), logging.INFO),
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )

    if args.demo == "train":
        result = run(config)
        print("Final Predictions vs Targets:")
        for pred, target in zip(result.predictions, DEMO_TARGETS):
            print(f"Pred: {pred.data:.4f} | Target: {target}")
        root = result.loss
    else:
        root = DEMOS[args.demo]()
        root.backward()
        print(f"{args.demo}: {root!r}")

    if config.graph_path is not None and root is not None:
        try:
            write_png(root, config.graph_path)
            print(f"Graph rendered to '{config.graph_path}'")
        except RenderError as e:
            print(f"\nCould not render graph locally: {e}")
            print("Copy the source below and paste into https://dreampuf.github.io/GraphvizOnline/")
            print("-" * 20)
            print(to_dot(root))
    return 0


if __name__ == "__main__":
    sys.exit(main())
