"""Unit tests for DecoupledAuthenticator."""

from unittest.mock import MagicMock

import pytest

from tanflow.application.services.authentication import (
    ChallengePresenter,
    DecoupledAuthenticator,
)
from tanflow.domain.banking.exceptions import (
    PollExhaustedError,
    ProtocolError,
    UnsupportedAuthModeError,
)
from tanflow.domain.banking.value_objects import (
    AuthenticationMode,
    AuthenticationRequest,
)
from tests.shared.fakes import (
    FakeEngine,
    ScriptedUserIO,
    action_needing_authentication,
)


def polling_mode(max_attempts=3, first_delay=0, periodic_delay=0):
    return AuthenticationMode(
        code="940",
        name="App",
        is_decoupled=True,
        allows_automated_polling=True,
        allows_manual_confirmation=True,
        first_poll_delay_seconds=first_delay,
        periodic_poll_delay_seconds=periodic_delay,
        max_poll_attempts=max_attempts,
    )


def manual_mode():
    return AuthenticationMode(
        code="940",
        is_decoupled=True,
        allows_automated_polling=False,
        allows_manual_confirmation=True,
    )


def build(engine, user_io, sleep=None, presenter=None, **kwargs):
    presenter = presenter or ChallengePresenter(
        user_io, MagicMock(), MagicMock(), MagicMock(),
    )
    return DecoupledAuthenticator(
        engine,
        user_io,
        presenter,
        sleep=sleep or MagicMock(),
        **kwargs,
    )


class TestAutomatedPolling:
    """Tests for the automated polling path."""

    def test_exhausted_after_max_attempts(self):
        """Three unconfirmed checks with a limit of 3 fail with PollExhausted(3)."""
        engine = FakeEngine(confirmations=[False, False, False])
        user_io = ScriptedUserIO()

        with pytest.raises(PollExhaustedError) as exc_info:
            build(engine, user_io).authenticate(
                action_needing_authentication(), polling_mode(3),
            )

        assert exc_info.value.attempts == 3
        assert engine.checks == 3
        assert user_io.output.count("Still waiting...") == 3

    def test_confirmed_on_second_check(self):
        engine = FakeEngine(confirmations=[False, True])
        user_io = ScriptedUserIO()
        action = action_needing_authentication()

        build(engine, user_io).authenticate(action, polling_mode(3))

        assert engine.checks == 2
        assert action.is_done
        assert user_io.output[-1] == "Confirmed."

    def test_unbounded_polling_never_exhausts(self):
        """A limit of 0 keeps polling until the bank confirms."""
        engine = FakeEngine(confirmations=[False, False, False, False, True])
        user_io = ScriptedUserIO()

        build(engine, user_io).authenticate(
            action_needing_authentication(), polling_mode(0),
        )

        assert engine.checks == 5
        assert user_io.output[-1] == "Confirmed."

    def test_sleep_schedule(self):
        """First delay once, then the periodic delay after every miss."""
        engine = FakeEngine(confirmations=[False, False, True])
        sleep = MagicMock()

        build(engine, ScriptedUserIO(), sleep=sleep).authenticate(
            action_needing_authentication(),
            polling_mode(5, first_delay=7, periodic_delay=2),
        )

        assert [c.args[0] for c in sleep.call_args_list] == [7, 2, 2]

    def test_polling_never_reads_input(self):
        engine = FakeEngine(confirmations=[True])
        user_io = ScriptedUserIO()

        build(engine, user_io).authenticate(
            action_needing_authentication(), polling_mode(),
        )

        assert user_io.reads == 0

    def test_polling_preferred_over_manual_confirmation(self):
        """When both are allowed, the bank is polled."""
        engine = FakeEngine(confirmations=[True])
        user_io = ScriptedUserIO()

        build(engine, user_io).authenticate(
            action_needing_authentication(), polling_mode(),
        )

        assert (
            "Polling server to detect when the decoupled authentication is complete."
            in user_io.output
        )

    def test_check_error_propagates(self):
        engine = MagicMock()
        engine.check_confirmation.side_effect = ProtocolError("offline")

        with pytest.raises(ProtocolError):
            build(engine, ScriptedUserIO()).authenticate(
                action_needing_authentication(), polling_mode(),
            )

        engine.check_confirmation.assert_called_once()


class TestManualConfirmation:
    """Tests for the manual confirmation path."""

    def test_wrong_input_reprompts_without_checking(self):
        """'nope' is rejected, 'done' + False repeats, 'done' + True confirms."""
        engine = FakeEngine(confirmations=[False, True])
        user_io = ScriptedUserIO(["nope", "done", "done"])
        action = action_needing_authentication()

        build(engine, user_io).authenticate(action, manual_mode())

        assert engine.checks == 2
        assert user_io.reads == 3
        assert user_io.output.count("Try again.") == 1
        assert user_io.output.count("Confirming that the action is done.") == 2
        assert user_io.output[-1] == "Confirmed."
        assert action.is_done

    def test_no_check_before_first_token(self):
        engine = MagicMock()
        engine.check_confirmation.return_value = True
        user_io = ScriptedUserIO(["x", "y", " done "])

        build(engine, user_io).authenticate(
            action_needing_authentication(), manual_mode(),
        )

        engine.check_confirmation.assert_called_once()
        assert user_io.output.count("Try again.") == 2

    def test_custom_confirmation_token(self):
        engine = FakeEngine(confirmations=[True])
        user_io = ScriptedUserIO(["done", "ok"])

        build(engine, user_io, confirmation_token="ok").authenticate(
            action_needing_authentication(), manual_mode(),
        )

        assert engine.checks == 1
        assert "Please type 'ok' and hit Return" in user_io.output[1]


class TestUnsupportedMode:
    """Tests for decoupled modes without any confirmation path."""

    def test_neither_polling_nor_manual_raises(self):
        engine = FakeEngine()
        mode = AuthenticationMode(code="940", is_decoupled=True)

        with pytest.raises(UnsupportedAuthModeError) as exc_info:
            build(engine, ScriptedUserIO()).authenticate(
                action_needing_authentication(), mode,
            )

        assert exc_info.value.details == {"mode_code": "940"}
        assert engine.checks == 0

    @pytest.mark.parametrize(
        ("polling", "manual"),
        [(True, False), (False, True), (True, True)],
    )
    def test_any_supported_path_does_not_raise(self, polling, manual):
        engine = FakeEngine(confirmations=[True])
        mode = AuthenticationMode(
            is_decoupled=True,
            allows_automated_polling=polling,
            allows_manual_confirmation=manual,
        )

        build(engine, ScriptedUserIO(["done"])).authenticate(
            action_needing_authentication(), mode,
        )

        assert engine.checks == 1


class TestPresentation:
    """Tests for what the user sees before waiting."""

    def test_presents_text_but_no_visual(self):
        engine = FakeEngine(confirmations=[True])
        presenter = MagicMock(spec=ChallengePresenter)
        request = AuthenticationRequest(
            instructions="Open your app",
            challenge_payload=b"0123",
        )

        build(engine, ScriptedUserIO(), presenter=presenter).authenticate(
            action_needing_authentication(request), polling_mode(),
        )

        presenter.present.assert_called_once_with(
            request,
            intro="The bank requested authentication on another device.",
            medium_prompt="Please check this device",
        )
        presenter.render_challenge_visual.assert_not_called()
