import unittest
from importlib.metadata import PackageNotFoundError
from unittest.mock import patch

from influxline.meta import get_meta_http_headers, get_user_agent, get_version


class TestMeta(unittest.TestCase):
    """Test cases for the meta module."""

    @patch("influxline.meta.version")
    def test_get_version(self, mock_version):
        mock_version.return_value = "0.1.0"

        self.assertEqual(get_version(), "0.1.0")
        mock_version.assert_called_once_with("influxline")

    @patch("influxline.meta.version")
    def test_get_version_not_installed(self, mock_version):
        mock_version.side_effect = PackageNotFoundError("influxline")

        self.assertIsNone(get_version())

    def test_get_user_agent_format(self):
        """Test that get_user_agent returns the expected format."""
        user_agent = get_user_agent()

        self.assertTrue(user_agent.startswith("influxline/"))
        self.assertIn("(", user_agent)
        self.assertIn(")", user_agent)
        self.assertIn("Python/", user_agent)

    @patch("influxline.meta.platform.system")
    @patch("influxline.meta.platform.machine")
    @patch("influxline.meta.platform.python_version")
    @patch("influxline.meta.get_version")
    def test_get_user_agent_values(
        self, mock_get_version, mock_python_version, mock_machine, mock_system
    ):
        mock_get_version.return_value = "0.1.0"
        mock_system.return_value = "Linux"
        mock_machine.return_value = "x86_64"
        mock_python_version.return_value = "3.12.1"

        self.assertEqual(
            get_user_agent(), "influxline/0.1.0 (Linux x86_64; Python/3.12.1)"
        )

        mock_system.return_value = "Darwin"
        mock_machine.return_value = "arm64"

        self.assertEqual(
            get_user_agent(), "influxline/0.1.0 (Darwin arm_64; Python/3.12.1)"
        )

        mock_get_version.return_value = None

        self.assertEqual(
            get_user_agent(), "influxline/unknown (Darwin arm_64; Python/3.12.1)"
        )

    @patch("influxline.meta.platform.machine")
    def test_get_user_agent_architecture_normalization(self, mock_machine):
        test_cases = [
            ("x86_64", "x86_64"),
            ("AMD64", "x86_64"),
            ("arm64", "arm_64"),
            ("aarch64", "arm_64"),
            ("i386", "x86"),
            ("custom_arch", "custom_arch"),
            ("", "unknown"),
            (None, "unknown"),
        ]

        for machine_value, expected_arch in test_cases:
            mock_machine.return_value = machine_value
            # Format: influxline/version (OS arch; Python/version)
            arch = get_user_agent().split(" ")[2].rstrip(";")
            self.assertEqual(
                arch,
                expected_arch,
                f"Expected {expected_arch} for machine={machine_value}",
            )

    @patch("influxline.meta.get_version")
    def test_get_meta_http_headers(self, mock_get_version):
        mock_get_version.return_value = "0.1.0"

        headers = get_meta_http_headers()

        self.assertEqual(headers["Influxline-Client-Version"], "0.1.0")
        self.assertTrue(headers["User-Agent"].startswith("influxline/0.1.0 "))

    @patch("influxline.meta.get_version")
    def test_get_meta_http_headers_without_version(self, mock_get_version):
        mock_get_version.return_value = None

        headers = get_meta_http_headers()

        self.assertEqual(headers["Influxline-Client-Version"], "")


if __name__ == "__main__":
    unittest.main()
