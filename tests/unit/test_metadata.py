"""Unit tests for the metadata records."""

from discover_actions.domain_model import (
    ActionReference,
    MetadataRecord,
    ParsedManifest,
    StepDecomposition,
)


class TestMetadataRecord:
    """Unit tests for MetadataRecord."""

    def test_record_with_extra_labels_is_hashable(self):
        """Test that records can be used in sets and as dictionary keys."""
        first = MetadataRecord(name="Foo", description="Bar", extra_labels={"icon": "package"})
        second = MetadataRecord(name="Foo", description="Bar", extra_labels={"icon": "package"})

        assert hash(first) == hash(second)
        assert len({first, second}) == 1

    def test_extra_labels_are_copied(self):
        """Test that changing the passed mapping does not change the record."""
        labels = {"icon": "package"}
        record = MetadataRecord(name="Foo", extra_labels=labels)

        labels["color"] = "blue"

        assert record.extra_labels == {"icon": "package"}

    def test_extra_labels_still_count_for_equality(self):
        """Test that records differing only in extra labels are not equal."""
        assert MetadataRecord(extra_labels={"icon": "a"}) != MetadataRecord(extra_labels={"icon": "b"})

    def test_undefined(self):
        """Test that the default record carries the sentinel in every manifest field."""
        record = MetadataRecord.undefined("action.yml")

        assert record.name == record.author == record.description == record.runtime_kind == "Undefined"
        assert record.path == "action.yml"
        assert record.extra_labels == {}


class TestStepDecomposition:
    """Unit tests for StepDecomposition."""

    def test_lists_are_stored_as_tuples(self):
        """Test that the sequences cannot be changed after construction."""
        actions = [ActionReference("actions/checkout", "v4")]
        names = ["Install", None]
        steps = StepDecomposition(referenced_actions=actions, shell_steps=names)

        actions.append(ActionReference("a/b", "c"))
        names.clear()

        assert steps.referenced_actions == (ActionReference("actions/checkout", "v4"),)
        assert steps.shell_steps == ("Install", None)

    def test_parsed_manifest_is_hashable(self):
        """Test that a whole parsed manifest can be hashed."""
        manifest = ParsedManifest(
            record=MetadataRecord(name="My Action"),
            steps=StepDecomposition(
                referenced_actions=[ActionReference("actions/checkout", "v4")],
                shell_steps=["Install"],
            ),
        )
        assert manifest in {manifest}
