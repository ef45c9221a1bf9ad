"""Tests for CommandDispatcher."""

from unittest.mock import patch

import pytest

from chatmod.commands.dispatcher import NO_MODERATORS_MESSAGE, CommandDispatcher
from chatmod.commands.errors import InternalInconsistencyError
from chatmod.commands.transport import ChatTransport
from chatmod.datatypes.channel_datatypes import ChannelName
from chatmod.moderators.mods_request_tracker import ModsRequestTracker


class TestDispatchRouting:

    def test_fake_transport_satisfies_protocol(self, transport):
        assert isinstance(transport, ChatTransport)

    def test_unknown_command_is_not_handled(self, dispatcher, transport):
        assert dispatcher.dispatch("#alpha", "dance", "now") is False
        assert not transport.sent_anything
        assert transport.system_messages == []
        assert transport.membership_checks == []

    def test_keyword_match_is_case_sensitive(self, dispatcher, transport):
        assert dispatcher.dispatch("#alpha", "Ban", "spammer") is False
        assert not transport.sent_anything

    def test_ban_sends_and_echoes(self, dispatcher, transport):
        assert dispatcher.dispatch("#alpha", "ban", " spammer ") is True

        assert transport.chat_messages == [("#alpha", ".ban spammer", "Trying to ban spammer..")]
        assert transport.system_messages == [("#alpha", "Trying to ban spammer..")]
        assert transport.membership_checks == [("#alpha", True)]

    def test_channel_name_is_normalized(self, dispatcher, transport):
        dispatcher.dispatch("#ALPHA", "clear", None)

        assert transport.chat_messages == [("#alpha", ".clear", "Trying to clear channel..")]

    def test_fixed_command_ignores_parameter(self, dispatcher, transport):
        dispatcher.dispatch("#alpha", "r9k", "whatever")

        assert transport.chat_messages[0][1] == ".r9kbeta"

    def test_commands_lists_sorted_keywords(self, dispatcher):
        keywords = dispatcher.commands()

        assert keywords == sorted(keywords)
        assert "timeout" in keywords and "to" in keywords


class TestUsageErrors:

    @pytest.mark.parametrize("parameter", [None, "", "   "])
    def test_ban_without_name_prints_usage(self, dispatcher, transport, parameter):
        assert dispatcher.dispatch("#alpha", "ban", parameter) is True

        assert not transport.sent_anything
        assert transport.system_messages == [("#alpha", "Usage: /ban <nick>")]

    def test_timeout_with_bad_time_prints_usage(self, dispatcher, transport):
        dispatcher.dispatch("#alpha", "to", "spammer later")

        assert not transport.sent_anything
        assert transport.system_messages == [("#alpha", "Usage: /to <nick> [time]")]

    def test_color_usage_is_printed_globally(self, dispatcher, transport):
        dispatcher.dispatch("#alpha", "color", None)

        assert transport.system_messages == [(None, "Usage: /color <newcolor>")]

    def test_usage_does_not_need_channel(self, dispatcher, transport):
        dispatcher.dispatch("#notjoined", "mod", "two words")

        assert transport.membership_checks == []
        assert transport.system_messages == [("#notjoined", "Usage: /mod <nick>")]

    def test_internal_inconsistency_is_downgraded_to_usage(self, dispatcher, transport):
        error = InternalInconsistencyError("Usage: /timeout <nick> [time] (no valid time specified)", "boom")

        with patch("chatmod.commands.dispatcher.format_command", side_effect=error):
            assert dispatcher.dispatch("#alpha", "timeout", "spammer 10") is True

        assert not transport.sent_anything
        assert transport.system_messages == [
            ("#alpha", "Usage: /timeout <nick> [time] (no valid time specified)")
        ]


class TestChannelChecks:

    def test_not_joined_is_silent_noop(self, dispatcher, transport):
        assert dispatcher.dispatch("#gamma", "ban", "spammer") is True

        assert not transport.sent_anything
        assert transport.system_messages == []

    def test_joined_but_not_message_capable_is_noop(self, make_transport):
        transport = make_transport(joined=["#alpha"], message_capable=[])
        dispatcher = CommandDispatcher(transport)

        dispatcher.dispatch("#alpha", "slowoff")

        assert not transport.sent_anything

    @pytest.mark.parametrize("channel,parameter", [(None, None), ("", "x y"), ("   ", None)])
    def test_missing_channel_prints_usage_globally(self, dispatcher, transport, channel, parameter):
        assert dispatcher.dispatch(channel, "ban", parameter) is True

        assert not transport.sent_anything
        assert transport.system_messages == [(None, "Usage: /ban <nick>")]

    @pytest.mark.parametrize("channel", [None, "", "  "])
    def test_missing_channel_is_silent_noop(self, dispatcher, transport, channel):
        assert dispatcher.dispatch(channel, "ban", "spammer") is True

        assert not transport.sent_anything
        assert transport.system_messages == []
        assert transport.membership_checks == []

    def test_silent_request_without_channel_is_dropped(self, dispatcher, transport):
        assert dispatcher.request_mods_silent(None) is False
        assert dispatcher.request_mods_silent("") is False

        assert transport.rate_limited == []
        assert dispatcher.tracker.has_pending_silent() is False


class TestTimeoutAndSlow:

    def test_timeout_uses_duration_formatter(self, transport):
        dispatcher = CommandDispatcher(transport, duration_formatter=lambda seconds: "1m")

        dispatcher.dispatch("#alpha", "timeout", "spammer 60")

        assert transport.chat_messages == [
            ("#alpha", ".timeout spammer 60", "Trying to timeout spammer (60s/1m)")
        ]

    def test_timeout_with_matching_duration(self, transport):
        dispatcher = CommandDispatcher(transport, duration_formatter=lambda seconds: "45s")

        dispatcher.dispatch("#alpha", "timeout", "spammer 45")

        assert transport.system_messages == [("#alpha", "Trying to timeout spammer (45s)")]

    def test_slow_without_time(self, dispatcher, transport):
        dispatcher.dispatch("#alpha", "slow", None)

        assert transport.chat_messages == [("#alpha", ".slow", "Trying to turn on slowmode..")]

    def test_slow_with_negative_time_sends_bare_command(self, dispatcher, transport):
        assert dispatcher.dispatch("#alpha", "slow", "-5") is True

        assert transport.chat_messages == [("#alpha", ".slow", "Trying to turn on slowmode..")]


class TestModeratorRequests:

    def test_mods_is_a_visible_request(self, dispatcher, transport):
        dispatcher.dispatch("#alpha", "mods")

        assert transport.chat_messages == [("#alpha", ".mods", "Requesting moderator list..")]
        assert transport.rate_limited == []
        assert dispatcher.tracker.has_pending_silent() is False

    def test_fixmods_prints_notice_and_sends_silent_request(self, dispatcher, transport):
        assert dispatcher.dispatch("#alpha", "fixmods") is True

        assert transport.system_messages == [("#alpha", "Trying to fix moderators..")]
        assert transport.rate_limited == [("#alpha", ".mods", True)]
        assert transport.chat_messages == []
        assert dispatcher.tracker.pending_silent_channels() == {ChannelName("#alpha")}

    def test_fixmods_requires_message_capable_channel(self, make_transport):
        transport = make_transport(joined=["#alpha"], message_capable=[])
        dispatcher = CommandDispatcher(transport)

        dispatcher.dispatch("#alpha", "fixmods")

        assert transport.system_messages == []
        assert transport.rate_limited == []

    def test_silent_request_only_needs_membership(self, make_transport):
        transport = make_transport(joined=["#alpha"], message_capable=[])
        dispatcher = CommandDispatcher(transport)

        assert dispatcher.request_mods_silent("#alpha") is True

        assert transport.membership_checks == [("#alpha", False)]
        assert transport.rate_limited == [("#alpha", ".mods", True)]

    def test_silent_request_for_unjoined_channel_is_dropped(self, dispatcher, transport):
        assert dispatcher.request_mods_silent("#gamma") is False

        assert transport.rate_limited == []
        assert dispatcher.tracker.has_pending_silent() is False

    def test_silent_response_is_not_printed(self, dispatcher, transport):
        dispatcher.request_mods_silent("#alpha")
        assert dispatcher.is_default_mods_handling_suppressed() is True

        response = dispatcher.handle_moderator_list("#alpha", "The moderators of this room are: a, b")

        assert response.silent is True
        assert response.names == ["a", "b"]
        assert transport.system_messages == []
        assert dispatcher.is_default_mods_handling_suppressed() is False

    def test_second_response_after_silent_one_is_printed(self, dispatcher, transport):
        dispatcher.request_mods_silent("#alpha")
        dispatcher.handle_moderator_list("#alpha", "Mods: a")

        response = dispatcher.handle_moderator_list("#alpha", "Mods: a, b")

        assert response.silent is False
        assert transport.system_messages == [("#alpha", "Moderators: a, b")]

    def test_empty_visible_response(self, dispatcher, transport):
        response = dispatcher.handle_moderator_list("#beta", "There are no moderators of this room.")

        assert response.names == []
        assert transport.system_messages == [("#beta", NO_MODERATORS_MESSAGE)]


class TestSessionHooks:

    def test_channel_left_clears_only_that_channel(self):
        tracker = ModsRequestTracker()
        tracker.mark_polled("#alpha")
        tracker.mark_polled("#beta")
        tracker.mark_silent_pending("#alpha")
        dispatcher = CommandDispatcher(transport=None, tracker=tracker)

        dispatcher.on_channel_left("#ALPHA")

        assert tracker.polled_channels() == {ChannelName("#beta")}
        assert tracker.has_pending_silent() is False

    def test_disconnect_clears_everything(self, dispatcher):
        dispatcher.tracker.mark_polled("#alpha")
        dispatcher.tracker.mark_silent_pending("#beta")

        dispatcher.on_disconnect()

        assert dispatcher.tracker.polled_channels() == set()
        assert dispatcher.tracker.has_pending_silent() is False
