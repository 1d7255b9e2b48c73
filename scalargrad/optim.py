class SGD:
    """Plain gradient descent over a fixed list of leaf parameters."""

    def __init__(self, parameters, learning_rate=0.01):
        self.parameters = list(parameters)
        self.learning_rate = learning_rate

    def step(self):
        for p in self.parameters:
            p.data -= self.learning_rate * p.grad

    def zero_grad(self):
        # call before each backward pass, leaf gradients accumulate
        for p in self.parameters:
            p.set_grad(0.0)
