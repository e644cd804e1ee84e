# main.py
import logging
import sys
from wtree.codex import build_codex
from wtree.wavelet_tree import WaveletTree

def main(argv=None):
    argv = sys.argv[1:] if argv is None else argv
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    text = "abcafcgbagcb$"
    codex = build_codex("$abcdefg")
    tree = WaveletTree.build(text, codex)
    logging.info("Codex: %r", codex)

    for i, symbol in enumerate(text):
        assert tree.access(i) == codex[symbol]

    code = tree.access(4)
    print(f"access(4) = {''.join(map(str, code))} ({codex.decode(code)})")
    print(f"rank('a', 8) = {tree.rank('a', 8)}")  # T[0..8] contains 3 'a's
    print(f"select('a', 3) = {tree.select('a', 3)}")  # the 3rd 'a' is at T[8]

    metrics = tree.get_size_metrics()
    print(f"Stored bits: {metrics['compressed_size']}")
    print(f"H_0: {metrics['zeroth_order_entropy']:.4f}")

    if "--benchmark" in argv:
        # needs the [benchmark] extra (psutil, memory_profiler)
        from tests.benchmark import print_benchmark_summary, run_full_benchmark
        results = run_full_benchmark("thequickbrownfoxjumpsoverthelazydog$" * 100, query_count=200)
        print_benchmark_summary(results)

if __name__ == "__main__":
    main()
