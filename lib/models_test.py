import os
import sys
import unittest

from pydantic import ValidationError

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

from lib.models import ProviderResponse, RunResult, Step, TaskConfig


class TestTaskConfig(unittest.TestCase):

    def test_defaults(self) -> None:
        config = TaskConfig()

        self.assertEqual(config.location, "/etc/nginx/conf.d")
        self.assertEqual(config.filename, "allow.conf")
        self.assertEqual(config.hour, 3)
        self.assertEqual(config.filepath, "/etc/nginx/conf.d/allow.conf")

    def test_hour_out_of_range(self) -> None:
        with self.assertRaises(ValidationError):
            TaskConfig(hour=24)
        with self.assertRaises(ValidationError):
            TaskConfig(hour=-1)

    def test_is_immutable(self) -> None:
        config = TaskConfig()

        with self.assertRaises(ValidationError):
            config.hour = 5


class TestProviderResponse(unittest.TestCase):

    def test_all_addresses(self) -> None:
        response = ProviderResponse(addresses=["1.1.1.1"], addresses_v6=["::1"])

        self.assertEqual(response.all_addresses(), ["1.1.1.1", "::1"])

    def test_null_lists(self) -> None:
        response = ProviderResponse.model_validate({"addresses": None, "addresses_v6": None})

        self.assertEqual(response.all_addresses(), [])

    def test_non_list_is_rejected(self) -> None:
        with self.assertRaises(ValidationError):
            ProviderResponse.model_validate({"addresses": "1.1.1.1"})


class TestRunResult(unittest.TestCase):

    def test_ok(self) -> None:
        self.assertTrue(RunResult(lines=4, written=True, reloaded=True).ok)
        self.assertFalse(RunResult(failed_step=Step.write, error="denied").ok)


if __name__ == "__main__":
    unittest.main()
