import datetime
import tempfile
import unittest
from pathlib import Path
from unittest.mock import patch

from yaml import dump, safe_load

from ganttgrid import configuration
from ganttgrid.repository.configuration import ConfigurationRepository
from ganttgrid.repository.schedule_item import ScheduleItemRepository

from helpers import make_item


class TestScheduleItemRepository(unittest.TestCase):
    def setUp(self) -> None:
        self.temp_dir = tempfile.TemporaryDirectory()
        self.items_path = Path(self.temp_dir.name) / "items.yaml"
        patcher = patch.object(configuration, "DATA_ITEMS_PATH", self.items_path)
        patcher.start()
        self.addCleanup(patcher.stop)
        self.addCleanup(self.temp_dir.cleanup)
        self.repository = ScheduleItemRepository()

    def test_missing_file_is_empty(self) -> None:
        self.assertEqual(self.repository.get_all_items(), [])
        self.assertFalse(self.repository.flush())

    def test_save_and_reload(self) -> None:
        first_id = self.repository.save_new_item(
            "Kickoff",
            "done",
            project="Portal",
            planned_start=datetime.date(2025, 1, 6),
            planned_end=datetime.date(2025, 1, 7),
        )
        second_id = self.repository.save_new_item("Backlog grooming", "pending")

        self.assertEqual((first_id, second_id), (1, 2))
        self.assertTrue(self.repository.flush())

        stored = safe_load(self.items_path.read_text())
        self.assertEqual(stored["items"][0]["planned_start"], "2025-01-06")
        self.assertIsNone(stored["items"][1]["planned_start"])

        reloaded = ScheduleItemRepository().get_item(1)
        self.assertEqual(reloaded["label"], "Kickoff")
        self.assertEqual(reloaded["project"], "Portal")
        self.assertEqual(reloaded["planned_end"], datetime.date(2025, 1, 7))

    def test_loads_backend_rows(self) -> None:
        self.items_path.write_text(
            dump(
                {
                    "items": [
                        {
                            "id": 9,
                            "titulo": "Migración",
                            "estatus": "completada",
                            "fecha_inicio": "2025-01-02T00:00:00Z",
                            "fecha_fin": "2025-01-04",
                        }
                    ]
                },
                allow_unicode=True,
            )
        )

        item = self.repository.get_item(9)

        self.assertEqual(item["label"], "Migración")
        self.assertEqual(item["status"], "done")
        self.assertEqual(item["planned_start"], datetime.date(2025, 1, 2))

    def test_import_adds_and_replaces(self) -> None:
        self.repository.import_items([make_item(1, label="one"), make_item(2, label="two")])

        added, replaced = self.repository.import_items(
            [make_item(2, label="two again"), make_item("x", label="text id")]
        )

        self.assertEqual((added, replaced), (1, 1))
        labels = [item["label"] for item in self.repository.get_all_items()]
        self.assertEqual(labels, ["one", "two again", "text id"])
        self.assertEqual(self.repository.save_new_item("three", "pending"), 3)

    def test_modify_and_remove_fields(self) -> None:
        self.repository.import_items(
            [make_item(1, "2025-01-01", "2025-01-05", "2025-01-02", "2025-01-06", project="P")]
        )

        self.repository.modify_item(
            1,
            label="renamed",
            status="in-review",
            planned_end=datetime.date(2025, 1, 9),
            remove_project=True,
            remove_actual_start=True,
            remove_actual_end=True,
        )

        item = self.repository.get_item(1)
        self.assertEqual(item["label"], "renamed")
        self.assertEqual(item["status"], "in-review")
        self.assertEqual(item["planned_end"], datetime.date(2025, 1, 9))
        self.assertIsNone(item["project"])
        self.assertIsNone(item["actual_start"])
        self.assertIsNone(item["actual_end"])

    def test_getters_return_copies(self) -> None:
        self.repository.import_items([make_item(1, label="original")])

        item = self.repository.get_item(1)
        item["label"] = "changed"

        self.assertEqual(self.repository.get_item(1)["label"], "original")

    def test_unknown_id_raises(self) -> None:
        with self.assertRaises(ValueError):
            self.repository.modify_item(42, label="missing")
        with self.assertRaises(ValueError):
            self.repository.delete_item(42)
        self.assertFalse(self.repository.is_dirty)

    def test_delete(self) -> None:
        self.repository.import_items([make_item(1), make_item(2)])

        self.repository.delete_item(1)

        self.assertEqual([item["id"] for item in self.repository.get_all_items()], [2])


class TestConfigurationRepository(unittest.TestCase):
    def setUp(self) -> None:
        self.temp_dir = tempfile.TemporaryDirectory()
        self.config_path = Path(self.temp_dir.name) / "config.yaml"
        patcher = patch.object(configuration, "APP_CONFIG_PATH", self.config_path)
        patcher.start()
        self.addCleanup(patcher.stop)
        self.addCleanup(self.temp_dir.cleanup)

    def test_missing_keys_are_filled_from_defaults(self) -> None:
        self.config_path.write_text(dump({"show_header": False, "day_width": 30}))

        config = ConfigurationRepository().get_config()

        self.assertFalse(config["show_header"])
        self.assertEqual(config["day_width"], 30)
        self.assertEqual(config["padding_days"], 7)
        self.assertEqual(config["min_span_days"], 60)
        self.assertEqual(config["track_mode"], "dual")

    def test_update_and_flush(self) -> None:
        self.config_path.write_text(dump(dict(configuration.default_configuration())))
        repository = ConfigurationRepository()

        repository.update_config(day_width=20, track_mode="single", log_level="debug")
        self.assertTrue(repository.flush())

        stored = safe_load(self.config_path.read_text())
        self.assertEqual(stored["day_width"], 20)
        self.assertEqual(stored["track_mode"], "single")
        self.assertEqual(stored["log_level"], "DEBUG")

    def test_invalid_values_are_rejected(self) -> None:
        self.config_path.write_text(dump(dict(configuration.default_configuration())))
        repository = ConfigurationRepository()

        for kwargs in (
            {"day_width": 0},
            {"terminal_day_width": -1},
            {"padding_days": -1},
            {"left_column_width": 0},
            {"left_column_width": 11},
        ):
            with self.subTest(**kwargs):
                with self.assertRaises(ValueError):
                    repository.update_config(**kwargs)
        self.assertFalse(repository.is_dirty)


if __name__ == "__main__":
    unittest.main()
