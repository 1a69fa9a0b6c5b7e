import pytest

from tests import helpers  # noqa: F401  # ensures project root on sys.path
from coinbook.controller import App
from coinbook.models import Ledger


@pytest.fixture
def ledger_path(tmp_path):
    return tmp_path / "ledger.json"


@pytest.fixture
def app(ledger_path):
    return App(ledger_path, Ledger())
