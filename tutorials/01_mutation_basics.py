"""
Mutation Basics Tutorial

Goals:
- Inspect the active set of a random expression
- Apply each mutation operator and watch which genes change
- Show that identical seeds give identical mutation sequences
"""

from cgpe.core.expression import Expression


def changed(before, after):
    return [i for i, (a, b) in enumerate(zip(before, after)) if a != b]


def main():
    e = Expression(2, 1, 2, 6, 3, 2, ['sum', 'diff', 'mul', 'pdiv'], seed=42)
    print('active_nodes:', e.active_nodes)
    print('active_genes:', e.active_genes)

    operators = {
        'mutate(0)': lambda: e.mutate(0),
        'mutate_random(3)': lambda: e.mutate_random(3),
        'mutate_active(2)': lambda: e.mutate_active(2),
        'mutate_active_fgene()': e.mutate_active_fgene,
        'mutate_active_cgene()': e.mutate_active_cgene,
        'mutate_ogene()': e.mutate_ogene,
    }
    for name, op in operators.items():
        before = e.get()
        op()
        print(f'{name:24s} changed genes: {changed(before, e.get())}')

    # Same seed, same calls: same genotypes
    a = Expression(2, 1, 2, 6, 3, 2, ['sum', 'diff', 'mul', 'pdiv'], seed=7)
    b = Expression(2, 1, 2, 6, 3, 2, ['sum', 'diff', 'mul', 'pdiv'], seed=7)
    a.mutate_active(5)
    b.mutate_active(5)
    print('seeded_equal:', a.get() == b.get())


if __name__ == '__main__':
    main()
