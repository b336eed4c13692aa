"""
Unit tests for the small field parsers used by the block parsers.
"""

import unittest

from turmahorario.errors import FormatError
from turmahorario.parse import (
    chunk_time_slots,
    parse_seat_count,
    parse_workload_hours,
    split_code_and_name,
    weekday_code,
)


class TestWeekdayCode(unittest.TestCase):
    def test_known_codes_any_case(self) -> None:
        for i, code in enumerate(["SEG", "ter", "Qua", "qui", "SEX", "sab", "dom"]):
            self.assertEqual(weekday_code(code), i)

    def test_unknown_text_is_invalid(self) -> None:
        for text in ["", "DIA DA SEMANA", "SÁB", "segunda", "OBS"]:
            self.assertEqual(weekday_code(text), -1)


class TestWorkloadHours(unittest.TestCase):
    def test_number(self) -> None:
        self.assertEqual(parse_workload_hours("120"), 120)
        self.assertEqual(parse_workload_hours(" 60 "), 60)

    def test_invalid_becomes_sentinel(self) -> None:
        self.assertEqual(parse_workload_hours("abc"), -1)
        self.assertEqual(parse_workload_hours(""), -1)
        self.assertEqual(parse_workload_hours("-5"), -1)
        self.assertEqual(parse_workload_hours("1_000"), -1)


class TestSeatCount(unittest.TestCase):
    def test_number(self) -> None:
        self.assertEqual(parse_seat_count("40"), 40)

    def test_invalid_raises(self) -> None:
        for text in ["", "quarenta", "4.0"]:
            with self.assertRaises(FormatError):
                parse_seat_count(text)


class TestCodeAndName(unittest.TestCase):
    def test_split_on_first_dash(self) -> None:
        self.assertEqual(split_code_and_name("07700-Algoritmos"), ("07700", "Algoritmos"))
        self.assertEqual(
            split_code_and_name("07701 - Laboratório - Turma Extra"),
            ("07701", "Laboratório - Turma Extra"),
        )

    def test_missing_dash_raises(self) -> None:
        with self.assertRaises(FormatError):
            split_code_and_name("07700 Algoritmos")


class TestChunkTimeSlots(unittest.TestCase):
    def test_exact_multiple(self) -> None:
        raw = "07:30-08:2008:20-09:1009:10-10:00"
        chunks = chunk_time_slots(raw)
        self.assertEqual(chunks, ("07:30-08:20", "08:20-09:10", "09:10-10:00"))
        self.assertTrue(all(len(c) == 11 for c in chunks))

    def test_shorter_last_chunk(self) -> None:
        chunks = chunk_time_slots("07:30-08:2008:20")
        self.assertEqual(chunks, ("07:30-08:20", "08:20"))

    def test_duplicates_are_kept(self) -> None:
        self.assertEqual(chunk_time_slots("07:30-08:20" * 2), ("07:30-08:20", "07:30-08:20"))

    def test_empty(self) -> None:
        self.assertEqual(chunk_time_slots(""), ())


if __name__ == "__main__":
    unittest.main()
