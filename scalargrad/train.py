import logging
import random
from dataclasses import dataclass, field
from typing import List

from .config import TrainingConfig
from .nn import MLP, squared_error_loss
from .optim import SGD
from .value import Value

logger = logging.getLogger(__name__)

# Dataset (normalized)
DEMO_INPUTS = [
    [2.0 / 3.0, 3.0 / 3.0, -1.0 / 3.0],
    [3.0 / 3.0, -1.0 / 3.0, 0.5 / 3.0],
    [0.5 / 3.0, 1.0 / 3.0, 1.0 / 3.0],
    [1.0 / 3.0, 1.0 / 3.0, -1.0 / 3.0],
]
DEMO_TARGETS = [1.0, -1.0, -1.0, 1.0]


@dataclass
class TrainingResult:
    model: MLP
    losses: List[float] = field(default_factory=list)
    predictions: List[Value] = field(default_factory=list)
    loss: Value = None


def train(model, inputs, targets, config: TrainingConfig) -> TrainingResult:
    optimizer = SGD(model.parameters(), config.learning_rate)
    result = TrainingResult(model=model)

    for k in range(config.epochs):
        # Forward Pass
        ypred = [model(x) for x in inputs]
        loss = squared_error_loss(ypred, targets)

        # Backward Pass
        optimizer.zero_grad()
        loss.backward()

        # Update (SGD)
        optimizer.learning_rate = config.learning_rate_at(k)
        optimizer.step()

        result.losses.append(float(loss.data))
        result.predictions = ypred
        result.loss = loss
        if config.log_every and k % config.log_every == 0:
            logger.info("step %d: loss = %.5f", k, loss.data)

    return result


def run(config: TrainingConfig) -> TrainingResult:
    """Train a fresh MLP on the demo dataset."""
    if config.seed is not None:
        random.seed(config.seed)
    model = MLP(len(DEMO_INPUTS[0]), config.layer_sizes)
    logger.info(
        "training MLP%s for %d epochs (%d parameters)",
        list(config.layer_sizes), config.epochs, len(model.parameters()),
    )
    return train(model, DEMO_INPUTS, DEMO_TARGETS, config)
