"""Banking infrastructure: python-fints engine and challenge codecs."""

from tanflow.infrastructure.banking.challenge_image_decoder import (
    ChallengeImageDecoder,
)
from tanflow.infrastructure.banking.engine_factory import (
    build_connection_options,
    create_engine,
)
from tanflow.infrastructure.banking.fints_actions import (
    FetchAccountsAction,
    FetchTransactionsAction,
    FinTsAction,
    LoginAction,
)
from tanflow.infrastructure.banking.hhd_flicker_decoder import HhdFlickerDecoder
from tanflow.infrastructure.banking.python_fints_adapter import PythonFintsAdapter
from tanflow.infrastructure.banking.svg_flicker_renderer import SvgFlickerRenderer

__all__ = [
    "ChallengeImageDecoder",
    "FetchAccountsAction",
    "FetchTransactionsAction",
    "FinTsAction",
    "HhdFlickerDecoder",
    "LoginAction",
    "PythonFintsAdapter",
    "SvgFlickerRenderer",
    "build_connection_options",
    "create_engine",
]
