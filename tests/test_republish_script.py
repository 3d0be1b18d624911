import io
import os
import sys
import unittest
from contextlib import redirect_stdout
from unittest.mock import patch
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(PROJECT_ROOT))
sys.path.insert(0, str(PROJECT_ROOT / "src"))

from zeep.exceptions import Fault

import republish_not_sold_items as script
from allegro_webapi import config as allegro_config
from allegro_webapi.auth import AuthError
from allegro_webapi.models import NotSoldItem, NothingToRepublish, Republished


@patch('republish_not_sold_items.AllegroClient')
class TestRepublishScript(unittest.TestCase):
    def setUp(self):
        self._original_env = os.environ.copy()
        os.environ["ALLEGRO_LOGIN"] = "seller"
        os.environ["ALLEGRO_PASSWORD"] = "password"
        os.environ["ALLEGRO_API_KEY"] = "api-key"
        allegro_config._config = None

    def tearDown(self):
        os.environ.clear()
        os.environ.update(self._original_env)
        allegro_config._config = None

    def _run(self, argv):
        out = io.StringIO()
        with redirect_stdout(out):
            code = script.main(argv)
        return code, out.getvalue()

    def test_lists_items(self, mock_client_cls):
        client = mock_client_cls.return_value
        client.not_sold_items.return_value = [NotSoldItem(item_id=42, start_time=0, end_time=7 * 86400)]

        code, output = self._run([])

        self.assertEqual(code, 0)
        client.connect_from_config.assert_called_once()
        client.republish_not_sold_items.assert_not_called()
        self.assertIn("42", output)
        self.assertIn("7 days", output)

    def test_sandbox_and_country_flags(self, mock_client_cls):
        client = mock_client_cls.return_value
        client.not_sold_items.return_value = []

        code, _ = self._run(['--sandbox', '--country', '228'])

        self.assertEqual(code, 0)
        self.assertTrue(mock_client_cls.call_args[1]['sandbox'])
        client.set_country_id.assert_called_once_with(228)

    def test_republish(self, mock_client_cls):
        client = mock_client_cls.return_value
        client.not_sold_items.return_value = []
        client.republish_not_sold_items.return_value = Republished([{}, {}])

        code, output = self._run(['--republish'])

        self.assertEqual(code, 0)
        self.assertIn("Relisted 2 item(s)", output)

    def test_republish_nothing(self, mock_client_cls):
        client = mock_client_cls.return_value
        client.not_sold_items.return_value = []
        client.republish_not_sold_items.return_value = NothingToRepublish()

        code, output = self._run(['--republish'])

        self.assertEqual(code, 0)
        self.assertIn("Skipping", output)

    def test_login_failure(self, mock_client_cls):
        mock_client_cls.return_value.connect_from_config.side_effect = AuthError("bad password", code="ERR_USER_PASSWD")

        code, output = self._run([])

        self.assertEqual(code, 1)
        self.assertIn("Login failed", output)

    def test_configuration_error(self, mock_client_cls):
        mock_client_cls.return_value.connect_from_config.side_effect = allegro_config.ConfigurationError("ALLEGRO_LOGIN not set")

        code, output = self._run([])

        self.assertEqual(code, 1)
        self.assertIn("ALLEGRO_LOGIN", output)

    def test_fault(self, mock_client_cls):
        client = mock_client_cls.return_value
        client.not_sold_items.side_effect = Fault("Session expired", code="ERR_NO_SESSION")

        code, output = self._run([])

        self.assertEqual(code, 1)
        self.assertIn("ERR_NO_SESSION", output)


if __name__ == '__main__':
    unittest.main()
