#!/usr/bin/env python3
"""
Random fuzzer for ncrcodec.
Generates malformed reference strings to check that decode never raises,
and random text to check that decode(encode(text)) round-trips.
"""

import argparse
import random
import string
import sys
import time
import traceback

from ncrcodec import decode, encode

# Fuzzing strategies
REFERENCES = [
    "&#65;", "&#0;", "&#27979;", "&#128077;", "&#1114111;",
    "&#", "&#;", "&", "#", ";", ";;", "&#&#65;", "&#6&#5;",
    "&#x41;", "&#X41;", "&amp;", "&lt;", "&#notanumber;",
    "&#+65;", "&#-65;", "&# 65;", "&#65 ;", "&#6_5;", "&#٦٥;",
    "&#00000065;", "&#1114112;", "&#4294967295;", "&#4294967296;",
    "&#99999999999999999999;",
    # Surrogate range
    "&#55295;", "&#55296;", "&#57343;", "&#57344;",
]

SPECIAL_CHARS = [
    "\x00", "\x01", "\x0b", "\x0c", "\x7f",  # Control chars
    "\ufffd",  # Replacement character
    "\u00a0",  # Non-breaking space
    "\u2028", "\u2029",  # Line/paragraph separators
    "\u200b", "\u200c", "\u200d",  # Zero-width chars
    "\ufeff",  # BOM
    "\U0001F44D", "\U0001F600",  # Astral
    "\u6d4b", "\u8bd5",  # CJK
]


def random_string(min_len=0, max_len=20):
    """Generate random ASCII string."""
    length = random.randint(min_len, max_len)
    return "".join(random.choices(string.ascii_letters + string.digits, k=length))


def random_digits(min_len=1, max_len=12):
    length = random.randint(min_len, max_len)
    return "".join(random.choices(string.digits, k=length))


def random_scalar():
    """A random Unicode scalar value (no surrogates)."""
    while True:
        cp = random.randint(0, 0x10FFFF)
        if not 0xD800 <= cp <= 0xDFFF:
            return chr(cp)


def fuzz_reference():
    """Generate a single, possibly malformed, reference."""
    strategies = [
        lambda: random.choice(REFERENCES),
        lambda: f"&#{random_digits()};",  # Any digit run, often out of range
        lambda: f"&#{random.randint(0, 0x10FFFF)};",  # Valid range
        lambda: f"&#{random.randint(0x110000, 0xFFFFFFFF)};",  # Beyond Unicode
        lambda: f"&#{random_string(1, 8)};",  # Letters
        lambda: f"&#{random_digits()}",  # Missing delimiter
        lambda: random_digits() + ";",  # Missing marker
        lambda: "&#" * random.randint(1, 4) + random_digits(1, 3) + ";",  # Repeated marker
        lambda: f"&#{'0' * random.randint(1, 50)}{random_digits(1, 3)};",  # Leading zeros
        lambda: random.choice(SPECIAL_CHARS),
        lambda: "",
    ]
    return random.choice(strategies)()


def fuzz_text():
    """Generate random text for round-tripping."""
    strategies = [
        lambda: random_string(0, 50),
        lambda: "".join(random_scalar() for _ in range(random.randint(0, 30))),
        lambda: "".join(random.choices(SPECIAL_CHARS, k=random.randint(0, 10))),
        lambda: "".join(random.choices(REFERENCES, k=random.randint(0, 5))),  # Encoded text as input
    ]
    return random.choice(strategies)()


def generate_fuzzed_references():
    """Generate a full malformed encoded string."""
    return "".join(fuzz_reference() for _ in range(random.randint(0, 20)))


def run_fuzzer(num_tests, seed=None, verbose=False, save_failures=False):
    """Run the fuzzer against decode and the encode/decode round trip."""
    if seed is not None:
        random.seed(seed)

    crashes = []
    mismatches = []
    hangs = []
    successes = 0

    print(f"Fuzzing ncrcodec with {num_tests} test cases...")
    start_time = time.time()

    for i in range(num_tests):
        data = generate_fuzzed_references()
        text = fuzz_text()

        if verbose and i % 100 == 0:
            print(f"  Test {i}/{num_tests}...")

        try:
            start = time.perf_counter()
            decoded = decode(data)
            round_tripped = decode(encode(text))
            elapsed = time.perf_counter() - start

            # Check for hangs (>1 second)
            if elapsed > 1.0:
                hangs.append({
                    "test_num": i,
                    "input": data,
                    "time": elapsed,
                })
                if verbose:
                    print(f"  HANG: Test {i} took {elapsed:.2f}s")
            elif round_tripped != text:
                mismatches.append({
                    "test_num": i,
                    "input": text,
                    "output": round_tripped,
                })
                if verbose:
                    print(f"  MISMATCH: Test {i}")
            elif not isinstance(decoded, str):
                mismatches.append({
                    "test_num": i,
                    "input": data,
                    "output": decoded,
                })
            else:
                successes += 1

        except Exception as e:
            crashes.append({
                "test_num": i,
                "input": data,
                "error": str(e),
                "traceback": traceback.format_exc(),
            })
            if verbose:
                print(f"  CRASH: Test {i}: {e}")

    elapsed_total = time.time() - start_time

    # Report results
    print(f"\n{'='*60}")
    print("FUZZING RESULTS: ncrcodec")
    print(f"{'='*60}")
    print(f"Total tests:    {num_tests}")
    print(f"Successes:      {successes}")
    print(f"Crashes:        {len(crashes)}")
    print(f"Mismatches:     {len(mismatches)}")
    print(f"Hangs (>1s):    {len(hangs)}")
    print(f"Total time:     {elapsed_total:.2f}s")
    print(f"Tests/second:   {num_tests/elapsed_total:.1f}")

    if crashes:
        print(f"\n{'='*60}")
        print("CRASH DETAILS:")
        print(f"{'='*60}")
        for crash in crashes[:10]:  # Show first 10
            print(f"\nTest #{crash['test_num']}:")
            print(f"  Input: {crash['input'][:200]!r}...")
            print(f"  Error: {crash['error']}")
        if len(crashes) > 10:
            print(f"\n... and {len(crashes) - 10} more crashes")

    if mismatches:
        print(f"\n{'='*60}")
        print("MISMATCH DETAILS:")
        print(f"{'='*60}")
        for mismatch in mismatches[:10]:
            print(f"\nTest #{mismatch['test_num']}:")
            print(f"  Input:  {mismatch['input'][:200]!r}")
            print(f"  Output: {mismatch['output']!r}")

    if hangs:
        print(f"\n{'='*60}")
        print("HANG DETAILS:")
        print(f"{'='*60}")
        for hang in hangs[:5]:
            print(f"\nTest #{hang['test_num']} ({hang['time']:.2f}s):")
            print(f"  Input: {hang['input'][:200]!r}...")

    if save_failures and (crashes or mismatches or hangs):
        filename = f"fuzz_failures_ncrcodec_{int(time.time())}.txt"
        with open(filename, "w", encoding="utf-8") as f:
            f.write("Fuzzing results for ncrcodec\n")
            f.write(f"Seed: {seed}\n\n")
            for crash in crashes:
                f.write(f"=== CRASH #{crash['test_num']} ===\n")
                f.write(f"Input:\n{crash['input']!r}\n")
                f.write(f"Error: {crash['error']}\n")
                f.write(f"Traceback:\n{crash['traceback']}\n\n")
            for mismatch in mismatches:
                f.write(f"=== MISMATCH #{mismatch['test_num']} ===\n")
                f.write(f"Input:\n{mismatch['input']!r}\n")
                f.write(f"Output:\n{mismatch['output']!r}\n\n")
            for hang in hangs:
                f.write(f"=== HANG #{hang['test_num']} ({hang['time']:.2f}s) ===\n")
                f.write(f"Input:\n{hang['input']!r}\n\n")
        print(f"\nFailures saved to {filename}")

    return not (crashes or mismatches or hangs)


def main():
    parser = argparse.ArgumentParser(description="Fuzz ncrcodec with malformed references")
    parser.add_argument(
        "--num-tests", "-n",
        type=int,
        default=1000,
        help="Number of test cases to generate (default: 1000)",
    )
    parser.add_argument(
        "--seed", "-s",
        type=int,
        default=None,
        help="Random seed for reproducibility",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Verbose output",
    )
    parser.add_argument(
        "--save-failures",
        action="store_true",
        help="Save failures to a file",
    )
    parser.add_argument(
        "--sample",
        type=int,
        metavar="N",
        help="Just print N sample fuzzed inputs (no decoding)",
    )

    args = parser.parse_args()

    if args.sample:
        if args.seed:
            random.seed(args.seed)
        for i in range(args.sample):
            print(f"=== Sample {i+1} ===")
            print(repr(generate_fuzzed_references()))
            print()
        return

    success = run_fuzzer(
        args.num_tests,
        seed=args.seed,
        verbose=args.verbose,
        save_failures=args.save_failures,
    )

    sys.exit(0 if success else 1)


if __name__ == "__main__":
    main()
