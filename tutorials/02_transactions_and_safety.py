"""
Transactions and Safety Tutorial

Goals:
- Stage several gene writes with GeneTransaction
- Commit them atomically, or rollback on errors

Design tips:
- A failed commit leaves the genotype exactly as it was
- rollback() also restores the generator state captured by begin()
"""

from cgpe.core.expression import Expression
from cgpe.generation.transaction import GeneTransaction
from cgpe.utils.rng_manager import RNGManager
from cgpe.utils.validation import GeneIndexError, ValidationError


def main():
    e = Expression(2, 1, 1, 2, 3, 2, ['sum', 'mul'], seed=0)
    e.set([0, 0, 1, 0, 2, 2, 3])
    print('initial:', e.get(), 'active_nodes:', e.active_nodes)

    tx = GeneTransaction(e, RNGManager(seed=1))
    tx.begin()
    try:
        # Stage: switch node 2 to mul and take the output from node 2
        tx.stage(0, 1)
        tx.stage(6, 2)
        print('changed:', tx.commit())
        print('post:', e.get(), 'active_nodes:', e.active_nodes)
    except ValidationError as exc:
        print('error:', exc)
        tx.rollback()

    # An out-of-bounds write is rejected at commit and nothing is applied
    tx.begin()
    tx.stage(0, 0)
    tx.stage(1, 9)
    try:
        tx.commit()
    except ValidationError as exc:
        print('rejected:', exc)
        tx.rollback()
    print('unchanged:', e.get())

    # Mutating a list containing a bad index is checked up front
    try:
        e.mutate([0, 100])
    except GeneIndexError as exc:
        print('index error:', exc)


if __name__ == '__main__':
    main()
