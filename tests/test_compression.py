#!/usr/bin/env python3
# -*- coding: utf-8 -*-

import unittest

from smallint_codec.compression import (
    delta_decode,
    delta_encode,
    iter_varints,
    varint_encode,
)
from smallint_codec.errors import InvalidInput, MalformedInput


class VarintTests(unittest.TestCase):
    def test_single_byte_values(self) -> None:
        self.assertEqual(varint_encode(0), b"\x00")
        self.assertEqual(varint_encode(127), b"\x7f")

    def test_multi_byte_values_are_lsb_first(self) -> None:
        self.assertEqual(varint_encode(128), b"\x80\x01")
        self.assertEqual(varint_encode(300), b"\xac\x02")

    def test_negative_rejected(self) -> None:
        with self.assertRaises(InvalidInput):
            varint_encode(-1)

    def test_iter_varints_reads_back_to_back_groups(self) -> None:
        self.assertEqual(list(iter_varints(b"\x05\xac\x02\x00")), [5, 300, 0])

    def test_truncated_group(self) -> None:
        with self.assertRaises(MalformedInput):
            list(iter_varints(b"\x01\x80"))


class DeltaCodecTests(unittest.TestCase):
    def test_encode_sorts_and_stores_gaps(self) -> None:
        self.assertEqual(delta_encode([3, 1, 2]), b"\x01\x01\x01")
        self.assertEqual(delta_encode([1, 300]), b"\x01\xab\x02")

    def test_duplicates_become_zero_gaps(self) -> None:
        blob = delta_encode([3, 3, 3])
        self.assertEqual(blob, b"\x03\x00\x00")
        self.assertEqual(delta_decode(blob), [3, 3, 3])

    def test_roundtrip_returns_sorted(self) -> None:
        values = [250, 7, 7, 1, 300, 42]
        self.assertEqual(delta_decode(delta_encode(values)), sorted(values))

    def test_values_beyond_32_bits(self) -> None:
        values = [1, 2 ** 40, 2 ** 63 + 5]
        self.assertEqual(delta_decode(delta_encode(values)), values)

    def test_zero_is_representable(self) -> None:
        self.assertEqual(delta_decode(delta_encode([0, 0, 4])), [0, 0, 4])

    def test_empty_input_rejected(self) -> None:
        with self.assertRaises(InvalidInput):
            delta_encode([])

    def test_negative_input_rejected(self) -> None:
        with self.assertRaises(InvalidInput):
            delta_encode([5, -1])

    def test_non_integer_rejected(self) -> None:
        with self.assertRaises(InvalidInput):
            delta_encode([1.5])

    def test_decode_empty(self) -> None:
        self.assertEqual(delta_decode(b""), [])

    def test_decode_truncated_stream(self) -> None:
        with self.assertRaises(MalformedInput):
            delta_decode(b"\x01\xab")


if __name__ == "__main__":
    unittest.main()
