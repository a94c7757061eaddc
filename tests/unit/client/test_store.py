"""Unit tests for persisted client state."""

from satya.client import InMemoryStore, JsonFileStore, LocalVoteState


class TestLocalVoteState:
    def test_voter_id_created_once(self):
        store = InMemoryStore()
        state = LocalVoteState(store)

        voter_id = state.voter_id()

        assert voter_id.startswith("v_")
        assert len(voter_id) == 22
        assert state.voter_id() == voter_id
        assert store.values["satya_voter_id"] == voter_id

    def test_choices_roundtrip(self):
        state = LocalVoteState(InMemoryStore())

        state.set_choice("r1", 1)
        state.set_choice("r2", -1)
        state.set_choice("r1", 0)

        assert state.choices() == {"r1": 0, "r2": -1}
        assert state.choice_for("missing") == 0

    def test_corrupt_choices_ignored(self):
        state = LocalVoteState(InMemoryStore({"satya_user_votes": "{not json"}))

        assert state.choices() == {}


class TestJsonFileStore:
    def test_persists_across_instances(self, tmp_path):
        path = tmp_path / "state" / "client.json"
        LocalVoteState(JsonFileStore(path)).set_choice("r1", 1)

        assert LocalVoteState(JsonFileStore(path)).choice_for("r1") == 1

    def test_corrupt_file_reads_empty(self, tmp_path):
        path = tmp_path / "client.json"
        path.write_text("[broken", encoding="utf-8")
        store = JsonFileStore(path)

        assert store.get("satya_voter_id") is None
        store.set("satya_voter_id", "v_1")
        assert store.get("satya_voter_id") == "v_1"
