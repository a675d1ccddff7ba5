#!/usr/bin/env python3
"""
Benchmark comparison between pure Python and mypyc-compiled versions of ncrcodec.

This script measures:
- Encoding ASCII and CJK text
- Decoding well-formed references
- Decoding references with malformed tokens mixed in
"""

import sys
import time
from pathlib import Path

ASCII_TEXT = "The quick brown fox jumps over the lazy dog. " * 20

CJK_TEXT = "测试文本编码与解码性能" * 50

ASTRAL_TEXT = "\U0001F44D\U0001F600\U0001F680" * 100

MALFORMED_REFERENCES = "&#72;&#bogus;&#105;&#4294967295;&#55296;&#33;;" * 100


def check_compiled_modules():
    """Check which modules are compiled with mypyc."""
    try:
        from ncrcodec import codec

        compiled = []
        # Check if module file ends with .so (compiled) instead of .py
        if hasattr(codec, '__file__') and codec.__file__.endswith('.so'):
            compiled.append('codec')

        return compiled
    except ImportError:
        return []


def benchmark_encode(text, iterations=1000):
    """Benchmark encoding."""
    from ncrcodec import encode

    start = time.perf_counter()
    for _ in range(iterations):
        _ = encode(text)
    end = time.perf_counter()

    return end - start


def benchmark_decode(data, iterations=1000):
    """Benchmark decoding."""
    from ncrcodec import decode

    start = time.perf_counter()
    for _ in range(iterations):
        _ = decode(data)
    end = time.perf_counter()

    return end - start


def _report(title, elapsed, iterations, unit):
    print("\n" + "-" * 70)
    print(title)
    print("-" * 70)
    print(f"Time: {elapsed:.4f}s for {iterations:,} iterations")
    print(f"Rate: {iterations / elapsed:.2f} {unit}/second")


def run_benchmarks():
    """Run all benchmarks."""
    from ncrcodec import encode

    print("=" * 70)
    print("ncrcodec mypyc Benchmark Comparison")
    print("=" * 70)

    compiled_modules = check_compiled_modules()
    if compiled_modules:
        print(f"\nCompiled modules detected: {', '.join(compiled_modules)}")
    else:
        print("\nNo compiled modules detected (running pure Python)")

    time_ascii = benchmark_encode(ASCII_TEXT, iterations=5000)
    _report("Benchmark 1: Encode ASCII", time_ascii, 5000, "encodes")

    time_cjk = benchmark_encode(CJK_TEXT, iterations=5000)
    _report("Benchmark 2: Encode CJK", time_cjk, 5000, "encodes")

    encoded_astral = encode(ASTRAL_TEXT)
    time_decode = benchmark_decode(encoded_astral, iterations=5000)
    _report("Benchmark 3: Decode well-formed", time_decode, 5000, "decodes")

    time_malformed = benchmark_decode(MALFORMED_REFERENCES, iterations=5000)
    _report("Benchmark 4: Decode malformed", time_malformed, 5000, "decodes")

    print("\n" + "=" * 70)

    return {
        'encode_ascii': time_ascii,
        'encode_cjk': time_cjk,
        'decode': time_decode,
        'decode_malformed': time_malformed,
    }


def main():
    """Main entry point."""
    import argparse

    parser = argparse.ArgumentParser(
        description="Compare performance of pure Python vs mypyc-compiled ncrcodec"
    )
    parser.add_argument(
        '--mode',
        choices=['pure', 'compiled'],
        default='compiled',
        help="Which version to benchmark (default: compiled)",
    )

    args = parser.parse_args()

    if args.mode == 'pure':
        print("\n" + "=" * 70)
        print("RUNNING PURE PYTHON BENCHMARKS")
        print("=" * 70)

        import ncrcodec
        package_path = Path(ncrcodec.__file__).parent
        so_files = list(package_path.glob("*.so"))

        if so_files:
            print(f"\nWarning: Found {len(so_files)} compiled modules.")
            print("To run pure Python benchmarks, first build without mypyc:")
            print("  1. Remove .so files: find src -name '*.so' -delete")
            print("  2. Reinstall: pip install -e .")
            print("\nAborting pure benchmarks to avoid mixed results.\n")
            sys.exit(1)

        run_benchmarks()

    elif args.mode == 'compiled':
        print("\n" + "=" * 70)
        print("RUNNING MYPYC-COMPILED BENCHMARKS")
        print("=" * 70)
        print("\nTo build with mypyc:")
        print("  NCRCODEC_USE_MYPYC=1 pip install -e .[mypyc] --no-build-isolation")
        print()

        run_benchmarks()


if __name__ == "__main__":
    main()
