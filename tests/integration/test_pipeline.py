"""Integration tests for scanning a repository tree end to end."""

from discover_actions import DEFAULT_VALUE, scan
from discover_actions.globals.problems import ProblemLevel
from discover_actions.pipeline import Pipeline


class TestPipelineIntegration:
    """Integration tests for Pipeline and scan."""

    def test_mixed_tree(self, make_tree, composite_manifest, docker_label_content):
        """Test a tree mixing manifests, malformed files and Dockerfiles."""
        root = make_tree(
            {
                "action.yml": composite_manifest,
                "broken/action.yaml": "name: [unclosed\n",
                "empty/action.yml": "",
                "docker-action/Dockerfile": docker_label_content,
                "docker-action/action.yml": "name: Docker\nruns:\n  using: docker\n  image: Dockerfile\n",
                "half/Dockerfile": 'LABEL com.github.actions.name="Half"\n',
                "service/Dockerfile": "FROM python:3.12\n",
            }
        )
        result = scan(str(root), repo="octo/repo")

        # one result per manifest, malformed ones included
        assert [m.record.path for m in result.manifests] == [
            "action.yml",
            "broken/action.yaml",
            "docker-action/action.yml",
            "empty/action.yml",
        ]
        by_path = {m.record.path: m for m in result.manifests}
        assert by_path["action.yml"].record.name == "My Action"
        assert by_path["broken/action.yaml"].record.name == DEFAULT_VALUE
        assert by_path["docker-action/action.yml"].record.runtime_kind == "docker"
        assert by_path["empty/action.yml"].record.runtime_kind == DEFAULT_VALUE

        # only the Dockerfile declaring both labels counts
        assert len(result.docker_actions) == 1
        assert result.docker_actions[0].path == "docker-action/Dockerfile"
        assert result.docker_actions[0].source_repo == "octo/repo"

        assert result.action_count == 5
        assert result.problems.n_warning == 1
        assert result.problems.max_level == ProblemLevel.WAR

    def test_root_is_not_a_directory(self, tmp_path):
        """Test that a root which is not a directory is recorded as an error."""
        result = Pipeline().process(tmp_path / "missing")

        assert result.action_count == 0
        assert result.problems.n_error == 1
        assert result.problems.problems[0].rule == "scan-root"

    def test_empty_root(self, tmp_path):
        """Test that an empty root yields no actions and no problems."""
        result = scan(str(tmp_path))

        assert result.action_count == 0
        assert len(result.problems) == 0
