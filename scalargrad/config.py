"""
Training configuration.

Network shape, schedule and logging knobs for the demo training run live
here so the loop itself has no hardcoded values.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Tuple


@dataclass
class TrainingConfig:
    """Configuration for a training run."""

    # Network: hidden and output layer sizes; the last layer must be a single neuron
    layer_sizes: Tuple[int, ...] = (4, 4, 1)

    # Schedule: learning rate decays linearly from learning_rate to final_learning_rate
    epochs: int = 200
    learning_rate: float = 0.1
    final_learning_rate: float = 0.01

    # Reproducibility
    seed: Optional[int] = None

    # Output
    log_every: int = 20  # 0 disables progress logging
    graph_path: Optional[Path] = None
    log_level: str = "INFO"

    def __post_init__(self):
        self.layer_sizes = tuple(self.layer_sizes)
        if not self.layer_sizes or any(n < 1 for n in self.layer_sizes):
            raise ValueError(f"layer_sizes must be positive, got {self.layer_sizes}")
        if self.layer_sizes[-1] != 1:
            raise ValueError("the output layer must have exactly one neuron")
        if self.epochs < 0:
            raise ValueError(f"epochs must be >= 0, got {self.epochs}")
        if self.learning_rate <= 0 or self.final_learning_rate <= 0:
            raise ValueError("learning rates must be positive")
        if self.log_every < 0:
            raise ValueError(f"log_every must be >= 0, got {self.log_every}")
        if self.graph_path is not None:
            self.graph_path = Path(self.graph_path)

    def learning_rate_at(self, epoch: int) -> float:
        if self.epochs == 0:
            return self.learning_rate
        return self.learning_rate + (self.final_learning_rate - self.learning_rate) * epoch / self.epochs

    @classmethod
    def from_args(cls, args) -> "TrainingConfig":
        """Build a config from parsed command line arguments."""
        return cls(
            epochs=args.epochs,
            learning_rate=args.lr,
            final_learning_rate=args.final_lr,
            seed=args.seed,
            log_every=args.log_every,
            graph_path=args.graph,
            log_level=args.log_level,
        )
