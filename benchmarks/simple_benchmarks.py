from timeit import timeit

from clove.types.environment import Environment
from clove.reader.lexer import lex
from clove.reader.parser import read_all
from clove.listutils import make_list, concat_list, map_list, list_to_sequence


def time_lexer(code: str, rounds: int) -> float:
    """Time tokenization alone."""
    return timeit(lambda: sum(1 for _ in lex(code)), number=rounds)


def time_reader(code: str, rounds: int) -> float:
    """Time lexing plus reading into Sexp values, with a warm symbol table."""
    env = Environment()
    read_all(code, env)
    return timeit(lambda: read_all(code, env), number=rounds)


# Micro-benchmark: list utilities on a long spine

def bench_list_utils(n: int = 100_000, rounds: int = 10) -> float:
    lst = make_list(range(n))

    def run():
        list_to_sequence(concat_list(map_list(lambda x: x + 1, lst), lst))

    run()
    return timeit(run, number=rounds)


FLAT_LIST_CODE = "(" + " ".join(str(i) for i in range(2000)) + ")"

NESTED_CODE = r"""
(defn fact [n acc]
  (if (<= n 1)
      acc
      (fact (- n 1) (* n acc))))
(def table {:a 0x1F :b 017 :c 0b101 :d 1.5e3})
(def quoted `(a ~b ~@c '(d . e)))
"""

DEEP_CODE = "[" * 200 + "]" * 200


def _print_pair(name: str, code: str, rounds: int) -> None:
    tlex = time_lexer(code, rounds)
    tread = time_reader(code, rounds)
    print(f"Benchmark: {name}")
    print(f"  lexer: {tlex:.6f}s  |  lexer + reader: {tread:.6f}s  [rounds={rounds}]")


if __name__ == "__main__":
    print("Benchmark: list utilities (map, concat, to-sequence over 100k cells)")
    print(f"  time: {bench_list_utils():.6f}s")

    _print_pair("flat list of 2000 integers", FLAT_LIST_CODE, rounds=200)
    _print_pair("mixed program", NESTED_CODE, rounds=2000)
    _print_pair("200 nested arrays", DEEP_CODE, rounds=500)
