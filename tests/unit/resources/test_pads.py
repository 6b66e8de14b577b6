"""Tests for the pads resource: verify wire format and result narrowing."""

from datetime import UTC, datetime

import pytest
import responses

from eplite._exceptions import InvalidParametersError, MalformedResponseError
from eplite._types import AttributePool, DiffHTML
from tests.utils.envelopes import API_KEY, API_ROOT, error, ok, sent_params, sent_payload

PAD = "integration-test-pad"


class TestLifecycle:
    @responses.activate
    def test_create(self, client):
        responses.add(responses.POST, f"{API_ROOT}/createPad", json=ok())
        client.pads.create(PAD)
        assert sent_payload(responses.calls[0]) == f"apikey={API_KEY}&padID={PAD}"

    @responses.activate
    def test_create_with_text(self, client):
        responses.add(responses.POST, f"{API_ROOT}/createPad", json=ok())
        client.pads.create(PAD, text="should be kept")
        assert sent_payload(responses.calls[0]) == (
            f"apikey={API_KEY}&padID={PAD}&text=should+be+kept"
        )

    @responses.activate
    def test_create_existing_pad(self, client):
        responses.add(
            responses.POST, f"{API_ROOT}/createPad", json=error(1, "padID does already exist")
        )
        with pytest.raises(InvalidParametersError, match="already exist"):
            client.pads.create(PAD)

    @responses.activate
    def test_delete(self, client):
        responses.add(responses.POST, f"{API_ROOT}/deletePad", json=ok())
        client.pads.delete("g.9v9F$pad-name")
        assert sent_payload(responses.calls[0]) == f"apikey={API_KEY}&padID=g.9v9F%24pad-name"

    @responses.activate
    def test_copy_defaults_to_no_force(self, client):
        responses.add(responses.POST, f"{API_ROOT}/copyPad", json=ok({"padID": "copy"}))
        client.pads.copy(PAD, "copy")
        assert sent_params(responses.calls[0]) == {
            "apikey": API_KEY,
            "sourceID": PAD,
            "destinationID": "copy",
            "force": "false",
        }

    @responses.activate
    def test_copy_force(self, client):
        responses.add(responses.POST, f"{API_ROOT}/copyPad", json=ok({"padID": "copy"}))
        client.pads.copy(PAD, "copy", force=True)
        assert sent_params(responses.calls[0])["force"] == "true"

    @responses.activate
    def test_copy_without_history(self, client):
        responses.add(responses.POST, f"{API_ROOT}/copyPadWithoutHistory", json=ok())
        client.pads.copy_without_history(PAD, "copy")
        assert responses.calls[0].request.method == "POST"

    def test_copy_without_history_documents_minimum_api_version(self, client):
        assert "1.2.15" in client.pads.copy_without_history.__doc__

    @responses.activate
    def test_move(self, client):
        responses.add(responses.POST, f"{API_ROOT}/movePad", json=ok())
        client.pads.move(PAD, "moved", force=True)
        assert sent_payload(responses.calls[0]) == (
            f"apikey={API_KEY}&sourceID={PAD}&destinationID=moved&force=true"
        )

    @responses.activate
    def test_list_all(self, client):
        responses.add(responses.GET, f"{API_ROOT}/listAllPads", json=ok({"padIDs": ["a", "b"]}))
        assert client.pads.list_all() == ["a", "b"]


class TestContent:
    @responses.activate
    def test_get_text(self, client):
        responses.add(responses.GET, f"{API_ROOT}/getText", json=ok({"text": "gå å gjør et ærend\n"}))
        assert client.pads.get_text(PAD) == "gå å gjør et ærend\n"
        assert sent_params(responses.calls[0]) == {"apikey": API_KEY, "padID": PAD}

    @responses.activate
    def test_get_text_at_revision(self, client):
        responses.add(responses.GET, f"{API_ROOT}/getText", json=ok({"text": "\n"}))
        assert client.pads.get_text(PAD, rev=2) == "\n"
        assert sent_params(responses.calls[0])["rev"] == "2"

    @responses.activate
    def test_get_text_at_revision_zero(self, client):
        responses.add(responses.GET, f"{API_ROOT}/getText", json=ok({"text": ""}))
        client.pads.get_text(PAD, rev=0)
        assert sent_params(responses.calls[0])["rev"] == "0"

    @responses.activate
    def test_set_text(self, client):
        responses.add(responses.POST, f"{API_ROOT}/setText", json=ok())
        client.pads.set_text(PAD, "gå å gjør et ærend")
        assert sent_payload(responses.calls[0]) == (
            f"apikey={API_KEY}&padID={PAD}&text=g%C3%A5+%C3%A5+gj%C3%B8r+et+%C3%A6rend"
        )

    @responses.activate
    def test_append_text(self, client):
        responses.add(responses.POST, f"{API_ROOT}/appendText", json=ok())
        client.pads.append_text(PAD, "lagt til nå")
        assert sent_payload(responses.calls[0]) == (
            f"apikey={API_KEY}&padID={PAD}&text=lagt+til+n%C3%A5"
        )

    @responses.activate
    def test_set_html(self, client):
        responses.add(responses.POST, f"{API_ROOT}/setHTML", json=ok())
        client.pads.set_html(PAD, "<!DOCTYPE HTML><html><body><p>gå</p></body></html>")
        assert sent_payload(responses.calls[0]) == (
            f"apikey={API_KEY}&padID={PAD}"
            "&html=%3C%21DOCTYPE+HTML%3E%3Chtml%3E%3Cbody%3E%3Cp%3Eg%C3%A5%3C%2Fp%3E"
            "%3C%2Fbody%3E%3C%2Fhtml%3E"
        )

    @responses.activate
    def test_get_html(self, client):
        html = "<!DOCTYPE HTML><html><body><br></body></html>"
        responses.add(responses.GET, f"{API_ROOT}/getHTML", json=ok({"html": html}))
        assert client.pads.get_html(PAD, rev=2) == html

    @responses.activate
    def test_get_attribute_pool(self, client):
        pool = {
            "numToAttrib": {"0": ["author", "a.1"]},
            "attribToNum": {"author,a.1": 0},
            "nextNum": 1,
        }
        responses.add(responses.GET, f"{API_ROOT}/getAttributePool", json=ok({"pool": pool}))
        result = client.pads.get_attribute_pool(PAD)
        assert isinstance(result, AttributePool)
        assert result.attrib_to_num == {"author,a.1": 0}


class TestRevisions:
    @responses.activate
    def test_get_revision_changeset(self, client):
        responses.add(
            responses.GET, f"{API_ROOT}/getRevisionChangeset", json=ok("Z:1>j|1+1$\n")
        )
        assert client.pads.get_revision_changeset(PAD, rev=2) == "Z:1>j|1+1$\n"

    @responses.activate
    def test_get_revision_changeset_wrong_type(self, client):
        responses.add(responses.GET, f"{API_ROOT}/getRevisionChangeset", json=ok({"cs": "x"}))
        with pytest.raises(MalformedResponseError):
            client.pads.get_revision_changeset(PAD)

    @responses.activate
    def test_create_diff_html(self, client):
        responses.add(
            responses.GET,
            f"{API_ROOT}/createDiffHTML",
            json=ok({"html": "<span>x</span>", "authors": [""]}),
        )
        diff = client.pads.create_diff_html(PAD, 1, 2)
        assert diff == DiffHTML(html="<span>x</span>", authors=[""])
        assert sent_payload(responses.calls[0]) == (
            f"apikey={API_KEY}&padID={PAD}&startRev=1&endRev=2"
        )

    @responses.activate
    def test_create_diff_html_without_html(self, client):
        responses.add(responses.GET, f"{API_ROOT}/createDiffHTML", json=ok({"authors": []}))
        with pytest.raises(MalformedResponseError) as exc_info:
            client.pads.create_diff_html(PAD, 1, 2)
        assert exc_info.value.operation == "createDiffHTML"

    @responses.activate
    def test_restore_revision(self, client):
        responses.add(responses.GET, f"{API_ROOT}/restoreRevision", json=ok())
        client.pads.restore_revision(PAD, 1)
        assert sent_params(responses.calls[0])["rev"] == "1"

    @responses.activate
    def test_counts(self, client):
        responses.add(responses.GET, f"{API_ROOT}/getRevisionsCount", json=ok({"revisions": 3}))
        responses.add(
            responses.GET, f"{API_ROOT}/getSavedRevisionsCount", json=ok({"savedRevisions": 2})
        )
        responses.add(
            responses.GET, f"{API_ROOT}/listSavedRevisions", json=ok({"savedRevisions": [2, 4]})
        )
        assert client.pads.get_revisions_count(PAD) == 3
        assert client.pads.get_saved_revisions_count(PAD) == 2
        assert client.pads.list_saved_revisions(PAD) == [2, 4]

    @responses.activate
    def test_count_rejects_bool(self, client):
        responses.add(responses.GET, f"{API_ROOT}/getRevisionsCount", json=ok({"revisions": True}))
        with pytest.raises(MalformedResponseError):
            client.pads.get_revisions_count(PAD)

    @responses.activate
    def test_save_revision(self, client):
        responses.add(responses.POST, f"{API_ROOT}/saveRevision", json=ok())
        responses.add(responses.POST, f"{API_ROOT}/saveRevision", json=ok())
        client.pads.save_revision(PAD)
        client.pads.save_revision(PAD, 2)
        assert sent_payload(responses.calls[0]) == f"apikey={API_KEY}&padID={PAD}"
        assert sent_payload(responses.calls[1]) == f"apikey={API_KEY}&padID={PAD}&rev=2"


class TestAccess:
    @responses.activate
    def test_read_only_round_trip(self, client):
        responses.add(responses.GET, f"{API_ROOT}/getReadOnlyID", json=ok({"readOnlyID": "r.c6f3"}))
        responses.add(responses.GET, f"{API_ROOT}/getPadID", json=ok({"padID": PAD}))
        ro_id = client.pads.get_read_only_id(PAD)
        assert client.pads.get_pad_id(ro_id) == PAD
        assert sent_params(responses.calls[1]) == {"apikey": API_KEY, "roID": "r.c6f3"}

    @responses.activate
    def test_public_status(self, client):
        pad = "g.9v9F$integration-test-1"
        responses.add(responses.POST, f"{API_ROOT}/setPublicStatus", json=ok())
        responses.add(responses.GET, f"{API_ROOT}/getPublicStatus", json=ok({"publicStatus": True}))
        client.pads.set_public_status(pad, True)
        assert client.pads.get_public_status(pad) is True
        assert sent_payload(responses.calls[0]) == (
            f"apikey={API_KEY}&padID=g.9v9F%24integration-test-1&publicStatus=true"
        )

    @responses.activate
    def test_password(self, client):
        responses.add(responses.POST, f"{API_ROOT}/setPassword", json=ok())
        responses.add(
            responses.GET,
            f"{API_ROOT}/isPasswordProtected",
            json=ok({"isPasswordProtected": False}),
        )
        client.pads.set_password(PAD, "integration")
        assert client.pads.is_password_protected(PAD) is False
        assert sent_params(responses.calls[0])["password"] == "integration"


class TestActivity:
    @responses.activate
    def test_users(self, client):
        responses.add(responses.GET, f"{API_ROOT}/padUsersCount", json=ok({"padUsersCount": 0}))
        responses.add(responses.GET, f"{API_ROOT}/padUsers", json=ok({"padUsers": []}))
        assert client.pads.users_count(PAD) == 0
        assert client.pads.users(PAD) == []

    @responses.activate
    def test_list_authors(self, client):
        responses.add(
            responses.GET, f"{API_ROOT}/listAuthorsOfPad", json=ok({"authorIDs": ["a.1"]})
        )
        assert client.pads.list_authors(PAD) == ["a.1"]

    @responses.activate
    def test_get_last_edited(self, client):
        responses.add(
            responses.GET, f"{API_ROOT}/getLastEdited", json=ok({"lastEdited": 1550319910000})
        )
        assert client.pads.get_last_edited(PAD) == datetime(2019, 2, 16, 12, 25, 10, tzinfo=UTC)

    @responses.activate
    def test_send_clients_message(self, client):
        responses.add(responses.POST, f"{API_ROOT}/sendClientsMessage", json=ok({}))
        client.pads.send_clients_message(PAD, "test message")
        assert sent_payload(responses.calls[0]) == (
            f"apikey={API_KEY}&padID={PAD}&msg=test+message"
        )
