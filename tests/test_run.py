"""
The development runner serves the configured PORT, single-threaded.
"""

from unittest import mock

import run


def test_main_serves_configured_port():
    fake_app = mock.MagicMock()
    fake_app.config = {'PORT': 8085}

    with mock.patch.object(run, 'create_app', return_value=fake_app):
        run.main()

    fake_app.run.assert_called_once_with(host='0.0.0.0', port=8085, threaded=False)
