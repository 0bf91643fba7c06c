from cgpe.core.expression import Expression


def main():
    # Quickstart goal:
    # 1) Build the smallest possible expression: two inputs, one node, one output
    # 2) Install a genotype by hand
    # 3) Evaluate it numerically and symbolically

    # n=2 inputs, m=1 output, a 1x1 grid, levels-back 1, arity 2, two kernels.
    e = Expression(2, 1, 1, 1, 1, 2, ['sum', 'mul'], seed=0)

    # Genotype layout: [function, connection_1, connection_2, output].
    # The output gene can only name node 2, so its bounds are [2, 2].
    print('lower bounds:', e.lb)
    print('upper bounds:', e.ub)

    # function 0 (sum) reading inputs 0 and 1, output taken from node 2
    e.set([0, 0, 1, 2])
    print('sum(1, 2):', e([1.0, 2.0]))

    # Same wiring with function 1 (mul)
    e.set([1, 0, 1, 2])
    print('mul(1, 2):', e([1.0, 2.0]))

    # Strings select each kernel's printer instead of its arithmetic.
    print('formula:', e(['x', 'y']))


if __name__ == '__main__':
    main()
