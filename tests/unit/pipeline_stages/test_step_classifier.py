"""Unit tests for step classification."""

from discover_actions.domain_model import ActionReference
from discover_actions.pipeline_stages.step_classifier import (
    StepKind,
    classify_step,
    decompose_steps,
    split_uses,
)


class TestClassifyStep:
    """Unit tests for classify_step."""

    def test_uses_step(self):
        """Test that a step with uses references an action."""
        assert classify_step({"uses": "actions/checkout@v4"}) == [StepKind.USES]

    def test_run_step(self):
        """Test that a step with run is a shell step."""
        assert classify_step({"name": "Build", "run": "make"}) == [StepKind.RUN]

    def test_step_with_both_keys_belongs_to_both(self):
        """Test that uses and run are checked independently."""
        step = {"uses": "owner/repo@v1", "run": "echo hi"}
        assert classify_step(step) == [StepKind.USES, StepKind.RUN]

    def test_step_with_neither(self):
        """Test that a step without uses or run has no kind."""
        assert classify_step({"name": "Nothing"}) == []

    def test_empty_values_do_not_count(self):
        """Test that empty uses and null run are ignored."""
        assert classify_step({"uses": "", "run": None}) == []

    def test_non_mapping_step(self):
        """Test that steps which are not mappings have no kind."""
        assert classify_step("run: echo") == []
        assert classify_step(None) == []


class TestSplitUses:
    """Unit tests for split_uses."""

    def test_action_and_ref(self):
        """Test splitting a regular owner/repo@ref reference."""
        assert split_uses("owner/repo@v2") == ActionReference("owner/repo", "v2")

    def test_splits_on_first_at_only(self):
        """Test that everything after the first @ belongs to the ref."""
        reference = split_uses("owner/repo@v2@extra")
        assert reference.action_id == "owner/repo"
        assert reference.ref == "v2@extra"

    def test_without_ref(self):
        """Test that a local action without @ has no ref."""
        assert split_uses("./local-action") == ActionReference("./local-action", None)

    def test_empty_ref(self):
        """Test that a trailing @ gives an empty ref."""
        assert split_uses("owner/repo@") == ActionReference("owner/repo", "")

    def test_str_round_trip(self):
        """Test that str() gives back the original uses value."""
        assert str(split_uses("owner/repo@v2@extra")) == "owner/repo@v2@extra"
        assert str(split_uses("./local")) == "./local"


class TestDecomposeSteps:
    """Unit tests for decompose_steps."""

    def test_preserves_declared_order(self):
        """Test that both sequences follow the declared step order."""
        steps = [
            {"name": "Checkout", "uses": "actions/checkout@v4"},
            {"name": "Install", "run": "npm ci"},
            {"uses": "actions/setup-node@v4"},
            {"name": "Test", "run": "npm test"},
        ]
        decomposition = decompose_steps(steps)
        assert decomposition.referenced_actions == (
            ActionReference("actions/checkout", "v4"),
            ActionReference("actions/setup-node", "v4"),
        )
        assert decomposition.shell_steps == ("Install", "Test")

    def test_run_step_without_name_is_recorded_as_none(self):
        """Test that a missing step name is not replaced by a default."""
        decomposition = decompose_steps([{"run": "echo hi"}])
        assert decomposition.shell_steps == (None,)

    def test_step_declaring_both_appends_to_both(self):
        """Test that a step with uses and run lands in both sequences."""
        decomposition = decompose_steps([{"name": "Odd", "uses": "a/b@c", "run": "x"}])
        assert decomposition.referenced_actions == (ActionReference("a/b", "c"),)
        assert decomposition.shell_steps == ("Odd",)

    def test_steps_declaring_neither_are_skipped(self):
        """Test that steps without uses or run are silently skipped."""
        decomposition = decompose_steps([{"name": "Nothing"}, "junk", None])
        assert decomposition.referenced_actions == ()
        assert decomposition.shell_steps == ()

    def test_non_list_steps(self):
        """Test that a steps value which is not a list yields nothing."""
        assert decompose_steps(None).referenced_actions == ()
        assert decompose_steps({"uses": "a/b@c"}).referenced_actions == ()

    def test_decomposition_is_hashable(self):
        """Test that the decomposition cannot be changed after construction."""
        decomposition = decompose_steps([{"uses": "a/b@c"}, {"name": "Build", "run": "make"}])

        assert isinstance(decomposition.referenced_actions, tuple)
        assert isinstance(decomposition.shell_steps, tuple)
        assert hash(decomposition) == hash(decompose_steps([{"uses": "a/b@c"}, {"name": "Build", "run": "make"}]))
