"""Tests for the operation catalogue and verb classification."""

import pytest

from eplite._exceptions import InvalidParametersError, UnknownOperationError
from eplite._operations import MUTATING, OPERATIONS, classify, get_operation, validate_params

# Operations the server expects as POST with a form body.
POST_OPERATIONS = {
    "appendChatMessage",
    "appendText",
    "copyPad",
    "copyPadWithoutHistory",
    "createAuthorIfNotExistsFor",
    "createGroup",
    "createGroupIfNotExistsFor",
    "createGroupPad",
    "createPad",
    "createSession",
    "deleteGroup",
    "deletePad",
    "deleteSession",
    "movePad",
    "saveRevision",
    "sendClientsMessage",
    "setHTML",
    "setPassword",
    "setPublicStatus",
    "setText",
}


class TestCatalogue:
    def test_mutating_set_matches_catalogue_flags(self):
        assert MUTATING == {name for name, op in OPERATIONS.items() if op.mutating}

    def test_mutating_set_is_exactly_the_post_operations(self):
        assert MUTATING == POST_OPERATIONS

    def test_catalogue_keys_match_names(self):
        for name, op in OPERATIONS.items():
            assert op.name == name

    def test_required_and_optional_are_disjoint(self):
        for op in OPERATIONS.values():
            assert not set(op.required) & set(op.optional), op.name

    def test_get_operation(self):
        op = get_operation("createGroupPad")
        assert op.required == ("groupID", "padName")
        assert op.optional == ("text",)
        assert op.parameters == ("groupID", "padName", "text")

    def test_get_unknown_operation(self):
        with pytest.raises(UnknownOperationError) as exc_info:
            get_operation("dropAllPads")
        assert exc_info.value.operation == "dropAllPads"
        assert exc_info.value.code is None


class TestClassify:
    @pytest.mark.parametrize("name", sorted(POST_OPERATIONS))
    def test_mutating_operations_are_post(self, name):
        assert classify(name) == "POST"

    @pytest.mark.parametrize(
        "name", sorted(set(OPERATIONS) - POST_OPERATIONS - {"createAuthor"})
    )
    def test_other_operations_are_get(self, name):
        assert classify(name) == "GET"

    def test_create_author_without_name_is_get(self):
        assert classify("createAuthor") == "GET"
        assert classify("createAuthor", {}) == "GET"

    def test_create_author_with_none_name_is_get(self):
        assert classify("createAuthor", {"name": None}) == "GET"

    def test_create_author_with_name_is_post(self):
        assert classify("createAuthor", {"name": "integration-author"}) == "POST"

    def test_name_param_does_not_affect_other_operations(self):
        assert classify("getAuthorName", {"name": "x"}) == "GET"

    def test_restore_revision_is_get(self):
        assert classify("restoreRevision", {"padID": "p1", "rev": 3}) == "GET"

    def test_unknown_operation_rejected(self):
        with pytest.raises(UnknownOperationError):
            classify("getTxt")


class TestValidateParams:
    def test_valid(self):
        op = validate_params("getText", {"padID": "p1", "rev": 2})
        assert op.name == "getText"

    def test_missing_required(self):
        with pytest.raises(InvalidParametersError, match="padID"):
            validate_params("getText", {})

    def test_none_counts_as_missing(self):
        with pytest.raises(InvalidParametersError, match="padID"):
            validate_params("getText", {"padID": None})

    def test_unexpected_parameter(self):
        with pytest.raises(InvalidParametersError, match="revision"):
            validate_params("getText", {"padID": "p1", "revision": 2})

    def test_unknown_operation(self):
        with pytest.raises(UnknownOperationError):
            validate_params("nope", {})
