import pytest

from linkhub.errors import InvalidShape
from linkhub.payloads import (
    FeedUpdate,
    GenerateRequest,
    ListDescriptor,
    Profile,
    ReorderRequest,
    SelectedFeeds,
    SingleList,
    SyncListsRequest,
    decode_bulk_add,
)


def test_decode_selected_feeds():
    decoded = decode_bulk_add({"selected": ["f1", "f2"], "profile": {"name": "Ana"}})
    assert isinstance(decoded, SelectedFeeds)
    assert decoded.selected == ["f1", "f2"]
    assert decoded.profile.name == "Ana"


def test_decode_single_list():
    decoded = decode_bulk_add({"listId": "f1", "profiles": [{"name": "Ana"}, {"name": "Bob"}]})
    assert isinstance(decoded, SingleList)
    assert [p.name for p in decoded.profiles] == ["Ana", "Bob"]


@pytest.mark.parametrize("body", [
    {},
    {"selected": ["f1"]},
    {"listId": "", "profiles": []},
    {"listId": "f1", "profiles": "nope"},
    {"foo": "bar"},
])
def test_decode_unrecognized_shape(body):
    with pytest.raises(InvalidShape) as exc:
        decode_bulk_add(body)
    assert exc.value.keys == sorted(body.keys())


def test_profile_blanks_nulls_and_stringifies():
    profile = Profile.model_validate({"name": None, "linkedin_id": 42})
    assert profile.name == ""
    assert profile.linkedin_id == "42"


def test_list_descriptor_defaults():
    desc = ListDescriptor.model_validate({"name": "A", "position": None, "is_private": 1})
    assert desc.id is None
    assert desc.position == 0
    assert desc.is_private is True


def test_feed_update_changes_skip_unset_and_null():
    update = FeedUpdate.model_validate({"name": None, "position": 2})
    assert update.changes() == {"position": 2}


def test_list_descriptor_stringifies_numeric_id():
    assert ListDescriptor.model_validate({"id": 123}).id == "123"
    assert ListDescriptor.model_validate({"id": None}).id is None


def test_bulk_lists_default_to_empty_when_not_a_list():
    assert SyncListsRequest.model_validate({"lists": None}).lists == []
    assert ReorderRequest.model_validate({"feeds": None}).feeds == []
    assert ReorderRequest.model_validate({"feeds": [{"id": 7, "position": 2}]}).feeds[0].id == "7"


def test_generate_request_reply_flag_is_truthy():
    assert GenerateRequest.model_validate({"is_reply_to_comment": None}).is_reply_to_comment is False
    assert GenerateRequest.model_validate({"is_reply_to_comment": 1}).is_reply_to_comment is True
