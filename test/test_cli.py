import io
import os
import tempfile
from unittest import TestCase
from unittest.mock import patch

from prioq import cli
from prioq import config_provider


class TestCli(TestCase):

    def setUp(self) -> None:
        self.temp_dir = tempfile.TemporaryDirectory(prefix="prioq-cli-test")
        self.config_path = os.path.join(self.temp_dir.name, "prioq.yml")

    def tearDown(self) -> None:
        self.temp_dir.cleanup()
        config_provider._load_string("")

    def write_config(self, yml_str: str) -> str:
        with open(self.config_path, "w") as f:
            f.write(yml_str)
        return self.config_path

    def run_main(self, argv: list[str], stdin: str = "") -> tuple[int, str]:
        with patch("sys.stdin", io.StringIO(stdin)), patch("sys.stdout", new_callable=io.StringIO) as stdout:
            code = cli.main(argv)
        return code, stdout.getvalue()

    def test_main_orders_arguments_descending_by_default(self):
        config = self.write_config("logging_level: WARNING\n")
        code, out = self.run_main(["-c", config, "5", "1", "3", "2", "4"])
        self.assertEqual(0, code)
        self.assertEqual(["5", "4", "3", "2", "1"], out.split())

    def test_main_ascending_flag(self):
        config = self.write_config("logging_level: WARNING\n")
        code, out = self.run_main(["-c", config, "-a", "5", "1", "3", "2", "4"])
        self.assertEqual(0, code)
        self.assertEqual(["1", "2", "3", "4", "5"], out.split())

    def test_main_descending_flag_overrides_config(self):
        config = self.write_config("queue:\n  ascending: true\n")
        code, out = self.run_main(["-c", config, "-d", "1", "3", "2"])
        self.assertEqual(["3", "2", "1"], out.split())

    def test_main_ascending_from_config(self):
        config = self.write_config("queue:\n  ascending: true\n")
        code, out = self.run_main(["-c", config, "1", "3", "2"])
        self.assertEqual(["1", "2", "3"], out.split())

    def test_main_reads_stdin_when_no_values(self):
        config = self.write_config("logging_level: WARNING\n")
        code, out = self.run_main(["-c", config], stdin="10 20\n5\n")
        self.assertEqual(0, code)
        self.assertEqual(["20", "10", "5"], out.split())

    def test_main_orders_numerically_not_lexically(self):
        config = self.write_config("queue:\n  ascending: true\n")
        code, out = self.run_main(["-c", config, "10", "9", "100"])
        self.assertEqual(["9", "10", "100"], out.split())

    def test_main_value_type_str(self):
        config = self.write_config("queue:\n  ascending: true\n  value_type: str\n")
        code, out = self.run_main(["-c", config, "10", "9", "100"])
        self.assertEqual(["10", "100", "9"], out.split())

    def test_main_value_type_float(self):
        config = self.write_config("queue:\n  value_type: float\n")
        code, out = self.run_main(["-c", config, "1.5", "-2", "0.25"])
        self.assertEqual(["1.5", "0.25", "-2.0"], out.split())

    def test_main_returns_error_when_value_cannot_be_cast(self):
        config = self.write_config("logging_level: CRITICAL\n")
        code, out = self.run_main(["-c", config, "1", "two"])
        self.assertEqual(1, code)
        self.assertEqual("", out)

    def test_main_empty_input(self):
        config = self.write_config("logging_level: WARNING\n")
        code, out = self.run_main(["-c", config], stdin="")
        self.assertEqual(0, code)
        self.assertEqual("", out)

    def test_parse_args_rejects_both_directions(self):
        with patch("sys.stderr", new_callable=io.StringIO):
            self.assertRaises(SystemExit, lambda: cli.parse_args(["-a", "-d"]))

    def test_load_config_without_path_uses_defaults_when_default_missing(self):
        with patch.object(cli, "DEFAULT_CONFIG_PATH", os.path.join(self.temp_dir.name, "missing.yml")):
            config_provider._load_string("logging_level: DEBUG")
            cli.load_config(None)
        self.assertFalse(config_provider.key_exists(["logging_level"]))
