"""
Unit tests for JSON persistence of offerings.

Storage contract:
- JSON array, field names as in the data model (seatCount, workloadHours, ...)
- integers stay integers, including the -1 sentinel
- saving and loading keeps every record and its order
"""

import json
import tempfile
import unittest
from pathlib import Path

from turmahorario.model import ClassSession, Instructor, Offering
from turmahorario.storage import default_output_path, load_offerings, save_offerings


def make_offering(code: str = "07700") -> Offering:
    return Offering(
        code=code,
        name="Algoritmos e Programação",
        section="A",
        seat_count=40,
        coordination_unit="COORDENAÇÃO DE COMPUTAÇÃO",
        period="2023.1",
        instructors=(Instructor("Maria Silva", 60), Instructor("João", -1)),
        sessions=(ClassSession("SEG", "Sala 1", ("07:30-08:20", "08:20-09:10")),),
    )


class TestStorage(unittest.TestCase):
    def test_json_field_names_and_types(self) -> None:
        with tempfile.TemporaryDirectory() as d:
            p = save_offerings([make_offering()], Path(d) / "out" / "turmas.json")
            data = json.loads(p.read_text(encoding="utf-8"))

        self.assertEqual(len(data), 1)
        rec = data[0]
        self.assertEqual(rec["seatCount"], 40)
        self.assertEqual(rec["coordinationUnit"], "COORDENAÇÃO DE COMPUTAÇÃO")
        self.assertEqual(rec["instructors"][1], {"name": "João", "workloadHours": -1})
        self.assertEqual(rec["sessions"][0]["timeSlots"], ["07:30-08:20", "08:20-09:10"])

    def test_text_is_not_escaped(self) -> None:
        with tempfile.TemporaryDirectory() as d:
            p = save_offerings([make_offering()], Path(d) / "turmas.json")
            text = p.read_text(encoding="utf-8")
        self.assertIn("Programação", text)

    def test_save_and_load_keeps_order(self) -> None:
        offerings = [make_offering("2"), make_offering("1")]
        with tempfile.TemporaryDirectory() as d:
            p = save_offerings(offerings, Path(d) / "turmas.json")
            loaded = load_offerings(p)
        self.assertEqual(loaded, offerings)

    def test_load_rejects_non_array(self) -> None:
        with tempfile.TemporaryDirectory() as d:
            p = Path(d) / "bad.json"
            p.write_text('{"code": "1"}', encoding="utf-8")
            with self.assertRaises(ValueError):
                load_offerings(p)

    def test_default_output_path(self) -> None:
        self.assertEqual(default_output_path("2023.1", "/tmp").name, "turmas_2023.1.json")
        self.assertEqual(default_output_path("2023/1", "/tmp").name, "turmas_2023-1.json")


if __name__ == "__main__":
    unittest.main()
