#!/usr/bin/env python3
"""
Quick start guide for the hex decoder.

Run this to see decoding, container selection and error reporting.
"""

import sys
from pathlib import Path

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from hexadecoder import DecodeError, decode, decode_into
from hexadecoder.config import configure_logging
from hexadecoder.models.schemas import DecodeErrorDetail


def main():
    """Run a simple example of the hex decoder."""

    configure_logging()

    print("=" * 70)
    print("HEX DECODER QUICK START EXAMPLE")
    print("=" * 70)
    print()

    # Step 1: Decode a known vector
    print("Step 1: Decode '48656c6c6f'")
    print("-" * 70)
    data = decode("48656c6c6f")
    print(f"✓ Bytes: {list(data)}")
    print(f"  Text:  {data.decode('utf-8')}")
    print()

    # Step 2: Choose a container
    print("Step 2: Decode into a mutable bytearray")
    print("-" * 70)
    buffer = decode_into("DEADbeef", bytearray)
    buffer[0] = 0x00
    print(f"✓ {buffer!r}")
    print()

    # Step 3: Malformed input
    print("Step 3: Malformed input is rejected")
    print("-" * 70)
    for bad in ("abc", "zz", "4g"):
        try:
            decode(bad)
        except DecodeError as err:
            detail = DecodeErrorDetail.from_error(err)
            print(f"✗ {bad!r}: {detail.message} (kind={detail.kind.value})")
    print()


if __name__ == "__main__":
    main()
