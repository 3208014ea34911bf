"""Tests for the find command.

Tests:
- Keyword parsing and usage errors
- Message selection from the search outcome
- Contact listing format
"""

import pytest

from addressbook.commands import (
    MESSAGE_MEANT_TO_FIND,
    CommandResult,
    FindCommand,
    InvalidCommandFormatError,
    format_contact_listing,
)
from addressbook.contacts import AddressBook
from addressbook.domain import Contact
from addressbook.search import ExactMatches, FallbackMatches


class TestParse:
    """Tests for FindCommand.parse()."""

    def test_splits_on_whitespace(self):
        command = FindCommand.parse("  alice   bob\tcharlie ")

        assert command.keywords == {"alice", "bob", "charlie"}

    def test_duplicates_collapse(self):
        assert FindCommand.parse("Ann Ann Lee").keywords == {"Ann", "Lee"}

    def test_case_preserved(self):
        assert FindCommand.parse("Alice alice").keywords == {"Alice", "alice"}

    @pytest.mark.parametrize("arguments", ["", "   ", None])
    def test_no_keywords_is_invalid_format(self, arguments):
        with pytest.raises(InvalidCommandFormatError) as exc_info:
            FindCommand.parse(arguments)

        message = str(exc_info.value)
        assert message.startswith("Invalid command format!")
        assert FindCommand.MESSAGE_USAGE in message
        assert exc_info.value.usage == FindCommand.MESSAGE_USAGE

    def test_keywords_returns_copy(self):
        command = FindCommand({"Alice"})

        command.keywords.add("Bob")

        assert command.keywords == {"Alice"}

    def test_usage_mentions_command_word(self):
        assert FindCommand.MESSAGE_USAGE.startswith("find: ")
        assert "Example: find alice bob charlie" in FindCommand.MESSAGE_USAGE


class TestExecute:
    """Tests for FindCommand.execute()."""

    def test_exact_matches_listed(self, address_book, alice):
        result = FindCommand({"Alice"}).execute(address_book)

        assert result == CommandResult("1 persons listed!", (alice,))

    def test_fallback_gets_did_you_mean_prefix(self, address_book, bob):
        result = FindCommand({"ob"}).execute(address_book)

        assert result.feedback_to_user == MESSAGE_MEANT_TO_FIND + "1 persons listed!"
        assert result.relevant_contacts == (bob,)

    def test_nothing_found_still_did_you_mean(self, address_book):
        result = FindCommand({"xyz"}).execute(address_book)

        assert result.feedback_to_user == "Did you mean: 0 persons listed!"
        assert result.relevant_contacts == ()

    def test_empty_address_book(self):
        result = FindCommand({"Alice"}).execute(AddressBook())

        assert result.feedback_to_user == "0 persons listed!"
        assert result.relevant_contacts == ()

    def test_multiple_keywords(self):
        book = AddressBook([Contact(name="Ann Lee"), Contact(name="Lee Ann"), Contact(name="Bob Ng")])

        result = FindCommand({"Ann", "Lee"}).execute(book)

        assert result.feedback_to_user == "2 persons listed!"
        assert [c.name.full_name for c in result.relevant_contacts] == ["Ann Lee", "Lee Ann"]


class TestResultFor:
    """Message choice depends only on the outcome variant."""

    def test_empty_exact(self):
        assert FindCommand.result_for(ExactMatches()).feedback_to_user == "0 persons listed!"

    def test_empty_fallback(self):
        assert FindCommand.result_for(FallbackMatches()).feedback_to_user.startswith(
            MESSAGE_MEANT_TO_FIND
        )


class TestListing:
    """Tests for the indexed contact listing."""

    def test_one_based_index(self, alice, bob):
        listing = format_contact_listing([alice, bob])

        assert listing.splitlines() == [
            "1. Alice Tan Phone: 91234567 Email: alice@example.com",
            "2. Bob Lee Phone: 87654321",
        ]

    def test_empty_listing(self):
        assert format_contact_listing([]) == ""

    def test_command_result_listing(self, alice):
        assert CommandResult("x", (alice,)).listing().startswith("1. Alice Tan")
        assert CommandResult("x").listing() == ""
