import concurrent.futures
import os

import pytest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")
QtWidgets = pytest.importorskip("PyQt5.QtWidgets")

from app_types import SearchConfig  # noqa: E402
from runUI import MainWindow  # noqa: E402


@pytest.fixture(scope="module")
def qapp():
    return QtWidgets.QApplication.instance() or QtWidgets.QApplication([])


@pytest.fixture
def window(qapp):
    w = MainWindow("R U", SearchConfig(max_depth=3, show_all=True))
    yield w
    w.close()


def test_initial_values_feed_the_config(window):
    assert window.alg_edit.text() == "R U"
    config = window._current_config()
    assert config.max_depth == 3
    assert config.show_all
    assert not config.sticker_notation


def test_finished_search_shows_done(window):
    future = concurrent.futures.Future()
    future.set_result(None)
    window._future = future
    window._refresh_output()
    assert window.status_label.text() == "Status: Done"


def test_failed_search_shows_the_error(window):
    future = concurrent.futures.Future()
    future.set_exception(OverflowError("a solution holds at most 7 reorientations"))
    window._future = future
    window._refresh_output()
    assert window.status_label.text() == "Status: Failed: a solution holds at most 7 reorientations"


def test_output_panel_mirrors_solver_buffer(window):
    window.solver._replace_output("Searching solutions with 0 reorients")
    window._refresh_output()
    assert window.output_view.toPlainText() == "Searching solutions with 0 reorients"
