import datetime
import unittest

from ganttgrid.model.schedule_item import has_actual_dates, is_dated, schedule_item_from_row
from ganttgrid.model.status import normalize_status
from ganttgrid.service.progress import summarize

from helpers import make_item


class TestNormalizeStatus(unittest.TestCase):
    def test_known_codes_and_labels(self) -> None:
        cases = {
            None: "pending",
            "  ": "pending",
            "done": "done",
            "In Progress": "in-progress",
            "in_review": "in-review",
            "Pendiente": "pending",
            "en proceso": "in-progress",
            "Revisión": "in-review",
            "completada": "done",
            "cancelada": "cancelled",
        }
        for raw, expected in cases.items():
            with self.subTest(raw=raw):
                self.assertEqual(normalize_status(raw), expected)

    def test_unknown_label_is_kept(self) -> None:
        self.assertEqual(normalize_status("Blocked"), "blocked")

    def test_non_string_status_is_kept_as_text(self) -> None:
        self.assertEqual(normalize_status(3), "3")
        self.assertEqual(normalize_status(True), "true")


class TestScheduleItemFromRow(unittest.TestCase):
    def test_backend_row(self) -> None:
        row = {
            "id": 17,
            "titulo": "Diseño de base de datos",
            "estatus": "en proceso",
            "fecha_inicio": "2025-01-10T00:00:00+00:00",
            "fecha_fin": "2025-01-20",
            "fecha_inicio_real": "2025-01-12T23:30:00-06:00",
            "fecha_fin_real": None,
            "proyectos": {"nombre": "Portal"},
        }

        item = schedule_item_from_row(row)

        self.assertEqual(item["id"], 17)
        self.assertEqual(item["label"], "Diseño de base de datos")
        self.assertEqual(item["status"], "in-progress")
        self.assertEqual(item["project"], "Portal")
        self.assertEqual(item["planned_start"], datetime.date(2025, 1, 10))
        self.assertEqual(item["planned_end"], datetime.date(2025, 1, 20))
        self.assertEqual(item["actual_start"], datetime.date(2025, 1, 12))
        self.assertIsNone(item["actual_end"])
        self.assertTrue(is_dated(item))
        self.assertFalse(has_actual_dates(item))

    def test_native_field_names(self) -> None:
        item = schedule_item_from_row(
            {
                "id": "T-1",
                "label": "Write docs",
                "status": "done",
                "project": "Docs",
                "planned_start": datetime.date(2025, 2, 1),
                "planned_end": "2025-02-03",
            }
        )

        self.assertEqual(item["id"], "T-1")
        self.assertEqual(item["status"], "done")
        self.assertEqual(item["planned_start"], datetime.date(2025, 2, 1))
        self.assertIsNone(item["actual_start"])

    def test_unparseable_date_is_logged_and_dropped(self) -> None:
        with self.assertLogs("ganttgrid.model.schedule_item", level="WARNING") as logs:
            item = schedule_item_from_row(
                {"id": 3, "titulo": "Broken", "fecha_inicio": "soon", "fecha_fin": "2025-01-20"}
            )

        self.assertIsNone(item["planned_start"])
        self.assertFalse(is_dated(item))
        self.assertIn("planned_start", logs.output[0])
        self.assertIn("'soon'", logs.output[0])

    def test_missing_id_raises(self) -> None:
        with self.assertRaises(ValueError):
            schedule_item_from_row({"titulo": "No id"})
        with self.assertRaises(ValueError):
            schedule_item_from_row({"id": "  ", "titulo": "Blank id"})

    def test_numeric_status_degrades_to_unknown(self) -> None:
        item = schedule_item_from_row({"id": 9, "titulo": "x", "estatus": 3})

        self.assertEqual(item["status"], "3")

    def test_digit_string_ids_become_integers(self) -> None:
        self.assertEqual(schedule_item_from_row({"id": "12", "titulo": "a"})["id"], 12)
        self.assertEqual(schedule_item_from_row({"id": " 7 ", "titulo": "b"})["id"], 7)
        self.assertEqual(schedule_item_from_row({"id": "T-12", "titulo": "c"})["id"], "T-12")


class TestSummarize(unittest.TestCase):
    def test_progress_and_deviation(self) -> None:
        today = datetime.date(2025, 1, 15)
        items = [
            # finished three days late
            make_item(1, "2025-01-01", "2025-01-05", "2025-01-01", "2025-01-08", status="done"),
            # finished two days early
            make_item(2, "2025-01-01", "2025-01-10", "2025-01-01", "2025-01-08", status="done"),
            # five days overdue
            make_item(3, "2025-01-01", "2025-01-10", status="in-progress"),
            # not due yet
            make_item(4, "2025-01-01", "2025-01-30"),
            make_item(5),
        ]

        summary = summarize(items, today)

        self.assertEqual(summary["total"], 5)
        self.assertEqual(summary["completed"], 2)
        self.assertAlmostEqual(summary["progress_percentage"], 40.0)
        self.assertEqual(summary["deviation_days"], 3 - 2 + 5)
        self.assertEqual(summary["delayed"], 1)

    def test_empty(self) -> None:
        summary = summarize([], datetime.date(2025, 1, 15))

        self.assertEqual(summary["total"], 0)
        self.assertEqual(summary["progress_percentage"], 0.0)
        self.assertEqual(summary["deviation_days"], 0)


if __name__ == "__main__":
    unittest.main()
