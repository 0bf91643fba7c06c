"""
Observability & Determinism Tutorial

Goals:
- Render an expression for logs
- Compute a determinism signature and show stability across identical runs
"""

from cgpe.core.expression import Expression
from cgpe.utils.observability import determinism_signature, expression_report


def run(seed: int) -> Expression:
    e = Expression(3, 2, 2, 8, 4, 2, ['sum', 'diff', 'mul', 'sin'], seed=seed)
    for _ in range(10):
        e.mutate_active(2)
    return e


def main():
    e = run(5)
    print(repr(e))
    rep = expression_report(e)
    print('schema_version:', rep['schema_version'])
    print('signature:', determinism_signature(rep))
    print('same_seed_same_signature:', determinism_signature(expression_report(run(5))) == determinism_signature(rep))


if __name__ == '__main__':
    main()
