"""
Translation and Autograd Tutorial

Goals:
- Evaluate an expression on torch tensors and read gradients from autograd
- Translate the active graph into a batched nn.Module
"""

import torch

from cgpe.core.expression import Expression
from cgpe.translation.pytorch import to_pytorch_model


def main():
    e = Expression(2, 1, 1, 2, 3, 2, ['sum', 'mul'], seed=0)
    # node 2 = x + y, node 3 = node2 * x, output = node 3
    e.set([0, 0, 1, 1, 2, 0, 3])
    print('formula:', e(['x', 'y'])[0])

    # Scalar tensors: autograd plays the role of a differentiation jet
    x = torch.tensor(2.0, requires_grad=True)
    y = torch.tensor(3.0, requires_grad=True)
    out = e([x, y])[0]
    out.backward()
    print('value:', out.item(), 'd/dx:', x.grad.item(), 'd/dy:', y.grad.item())

    # Batched module over a [batch, n] tensor
    model = to_pytorch_model(e, {'device': 'cpu'})
    batch = torch.tensor([[1.0, 1.0], [2.0, 3.0], [0.5, -1.0]])
    print('batch_output:', model(batch).squeeze(1).tolist())


if __name__ == '__main__':
    main()
