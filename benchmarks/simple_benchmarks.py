from timeit import timeit

from tinylisp.interpreter import Interpreter
from tinylisp.types.atom import Atom
from tinylisp.types.environment import Environment


def time_expression(expr, rounds: int, setup=()) -> float:
    """Time repeated evaluation of one pre-built expression in a numeric interpreter."""
    itp = Interpreter("numeric")
    for definition in setup:
        itp.eval(definition)
    built = itp.expr(expr)
    # Warmup
    itp.eval(built)
    # Timed
    return timeit(lambda: itp.eval(built), number=rounds)


# Lambda application copies the caller's environment: measure that cost alone

def bench_frame_copy(n_bindings: int = 1000, n_copies: int = 10000) -> float:
    env = Environment()
    for i in range(n_bindings):
        env.define(f"v{i}", Atom(i))
    # Warmup
    for _ in range(100):
        env.copy()
    # Timed
    return timeit(env.copy, number=n_copies)


LAMBDA_APPLY = [["quote", ["lambda", ["x", "y"], ["+", "x", "y"]]], 1, 2]

FIB = ["label", "fib",
       ["quote", ["lambda", ["n"],
                  ["if", ["<", "n", 2],
                   "n",
                   ["+", ["fib", ["-", "n", 1]], ["fib", ["-", "n", 2]]]]]]]

SUM_N = ["label", "sum-n",
         ["quote", ["lambda", ["n", "acc"],
                    ["if", ["<", "n", 1],
                     "acc",
                     ["sum-n", ["-", "n", 1], ["+", "acc", "n"]]]]]]


def _print(name: str, seconds: float, rounds: int) -> None:
    print(f"Benchmark: {name}")
    print(f"  time: {seconds:.6f}s  [rounds={rounds}]")


if __name__ == "__main__":
    _print("environment copy (1000 bindings)", bench_frame_copy(), rounds=10000)
    _print("lambda application", time_expression(LAMBDA_APPLY, 20000), rounds=20000)
    _print("fib 20", time_expression(["fib", 20], 1, setup=[FIB]), rounds=1)
    _print("sum 1..100 (recursive)", time_expression(["sum-n", 100, 0], 200, setup=[SUM_N]), rounds=200)
